
class NativeBuildRunnerException(Exception):
    """Generic Runner Error"""


class ConfigurationError(NativeBuildRunnerException):
    """Misconfiguration of Runner"""


class ContainerRuntimeNotFound(NativeBuildRunnerException):
    """Neither docker nor podman is available"""


class UnresolvableIdentity(NativeBuildRunnerException):
    """The uid or gid of the invoking user could not be queried"""


class SocketOwnershipLookupFailure(NativeBuildRunnerException):
    """The owner of the docker daemon socket could not be read"""
