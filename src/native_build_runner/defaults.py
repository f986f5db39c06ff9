default_builder_image = 'quay.io/quarkus/ubi-quarkus-mandrel-builder-image:jdk-21'

# in-container directory the host output directory is mounted on
CONTAINER_BUILD_VOLUME_PATH = '/project'

# every container build starts from these runtime arguments
BASE_CONTAINER_RUNTIME_ARGS = ('--env', 'LANG=C', '--rm')

CONTAINER_NAME_PREFIX = 'build-native-'

DOCKER_HOST_ENV = 'DOCKER_HOST'
DOCKER_HOST_SOCKET_PREFIX = 'unix://'

CONTAINER_RUNTIME_ENV = 'NATIVE_BUILD_CONTAINER_RUNTIME'

DEBUG_BUILD_PROCESS_PORT = 5005
