import logging
import os

from native_build_runner.defaults import DOCKER_HOST_SOCKET_PREFIX
from native_build_runner.exceptions import SocketOwnershipLookupFailure
from native_build_runner.identity import IdentityResolver
from native_build_runner.runtime import ContainerRuntimeKind

logger = logging.getLogger('native-build-runner.build')


def socket_owner_uid(socket_path):
    """Owner uid of ``socket_path`` itself, symlinks are not followed."""
    try:
        return os.lstat(socket_path).st_uid
    except OSError as e:
        raise SocketOwnershipLookupFailure(e.strerror or str(e))


def is_rootless(runtime, env, identity_resolver=None):
    '''
    Decide whether the docker daemon the build talks to runs in rootless mode.

    A rootless daemon runs as the invoking user, so its socket is owned by
    that user's uid. Anything that cannot be established with certainty
    answers False.

    :param runtime: the :py:class:`ContainerRuntimeKind` in use
    :param env: the captured :py:class:`HostEnvironment`
    :param identity_resolver: resolves the current uid, defaults to :py:class:`IdentityResolver`
    :returns: True only for docker talking to a unix socket owned by the current non-root user
    '''
    if runtime is not ContainerRuntimeKind.DOCKER:
        return False

    docker_host = env.docker_host
    if not docker_host or not docker_host.startswith(DOCKER_HOST_SOCKET_PREFIX):
        return False
    docker_socket = docker_host[len(DOCKER_HOST_SOCKET_PREFIX):]

    if identity_resolver is None:
        identity_resolver = IdentityResolver()
    current_uid = identity_resolver.current_user_id()
    if not current_uid or current_uid == '0':
        return False

    try:
        owner_uid = socket_owner_uid(docker_socket)
    except SocketOwnershipLookupFailure as e:
        logger.info("Owner UID lookup on '%s' failed with '%s'", docker_socket, e)
        return False

    return current_uid == str(owner_uid)
