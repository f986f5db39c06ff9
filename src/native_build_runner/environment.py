import os
import platform

from enum import Enum
from typing import NamedTuple, Optional

from native_build_runner.defaults import DOCKER_HOST_ENV


class OSFamily(Enum):
    LINUX = 'linux'
    WINDOWS = 'windows'
    MACOS = 'macos'
    OTHER = 'other'

    @classmethod
    def from_system(cls, system):
        """Map a ``platform.system()`` value onto an OS family."""
        system = (system or '').lower()
        if system == 'linux':
            return cls.LINUX
        if system == 'windows' or system.startswith(('cygwin', 'msys')):
            return cls.WINDOWS
        if system == 'darwin':
            return cls.MACOS
        return cls.OTHER


class HostEnvironment(NamedTuple):
    """
    The parts of the process environment the container arguments depend on,
    read once so the same values are used for the whole build.
    """

    os_family: OSFamily
    docker_host: Optional[str] = None

    @classmethod
    def capture(cls, environ=None, system=None):
        if environ is None:
            environ = os.environ
        if system is None:
            system = platform.system()
        return cls(os_family=OSFamily.from_system(system), docker_host=environ.get(DOCKER_HOST_ENV))
