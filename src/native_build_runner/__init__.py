from .builder import ContainerArgBuilder, IdentityPolicy, VolumeMount # noqa
from .command import NativeImageContainerCommand # noqa
from .config import NativeConfig # noqa
from .environment import HostEnvironment, OSFamily # noqa
from .exceptions import NativeBuildRunnerException, ConfigurationError, ContainerRuntimeNotFound # noqa
from .identity import IdentityResolver, UserIdentity # noqa
from .rootless import is_rootless # noqa
from .runtime import ContainerRuntimeKind, detect_container_runtime # noqa
