import logging
import subprocess

from enum import Enum

from native_build_runner.exceptions import ConfigurationError, ContainerRuntimeNotFound
from native_build_runner.output import debug

logger = logging.getLogger('native-build-runner.build')


class ContainerRuntimeKind(Enum):
    DOCKER = 'docker'
    PODMAN = 'podman'
    OTHER = 'other'

    @property
    def executable(self):
        if self is ContainerRuntimeKind.OTHER:
            return None
        return self.value

    @classmethod
    def from_name(cls, name):
        try:
            return cls(name.strip().lower())
        except (AttributeError, ValueError):
            valid = ', '.join(kind.value for kind in cls)
            raise ConfigurationError("Invalid container runtime {0!r}, valid values are {1}".format(name, valid)) from None


def _version_output(executable):
    """
    Return the output of ``<executable> --version``, or None when the
    executable is missing or exits non-zero.
    """
    cmd = [executable, '--version']
    try:
        proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, universal_newlines=True, check=False)
    except OSError as e:
        debug('{0} unavailable: {1}'.format(executable, e))
        return None
    if proc.returncode != 0:
        debug('{0} exited with {1}'.format(' '.join(cmd), proc.returncode))
        return None
    return proc.stdout


def detect_container_runtime(configured=None):
    '''
    Determine which container runtime performs the build.

    An explicitly configured runtime always wins. Otherwise ``docker`` is
    preferred, and recognised as podman when it is an alias for it, before
    falling back to ``podman``.

    :param configured: a :py:class:`ContainerRuntimeKind`, a runtime name or None
    :raises ContainerRuntimeNotFound: when no runtime is configured or installed
    '''
    if configured is not None:
        if isinstance(configured, ContainerRuntimeKind):
            return configured
        return ContainerRuntimeKind.from_name(configured)

    docker_version = _version_output('docker')
    if docker_version is not None:
        if 'podman' in docker_version.lower():
            logger.info("'docker' is an alias for podman, using podman")
            return ContainerRuntimeKind.PODMAN
        return ContainerRuntimeKind.DOCKER

    if _version_output('podman') is not None:
        return ContainerRuntimeKind.PODMAN

    raise ContainerRuntimeNotFound("No container runtime found, install docker or podman or configure one explicitly")
