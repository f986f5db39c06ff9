############################
# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an
# "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
# KIND, either express or implied.  See the License for the
# specific language governing permissions and limitations
# under the License.
#
import logging

from enum import Enum
from typing import NamedTuple

from native_build_runner import defaults
from native_build_runner.environment import OSFamily
from native_build_runner.identity import IdentityResolver, UserIdentity
from native_build_runner.output import debug
from native_build_runner.rootless import is_rootless
from native_build_runner.runtime import ContainerRuntimeKind
from native_build_runner.utils.paths import translate_to_volume_path

logger = logging.getLogger('native-build-runner.build')


class IdentityPolicy(Enum):
    # container root is the invoking user inside a rootless daemon's namespace
    ROOTLESS_ROOT = 'rootless-root'
    EXPLICIT_UID_GID = 'explicit-uid-gid'
    RUNTIME_DEFAULT = 'runtime-default'


class VolumeMount(NamedTuple):
    host_path: str
    container_path: str
    mode: str = 'z'

    def as_args(self):
        return ['-v', '{0}:{1}:{2}'.format(self.host_path, self.container_path, self.mode)]


def select_identity_policy(runtime, env, identity_resolver):
    '''
    Pick how the container user is mapped onto the host user.

    :returns: a ``(policy, identity)`` tuple, identity is only meaningful for
              :py:attr:`IdentityPolicy.EXPLICIT_UID_GID`
    '''
    if env.os_family is not OSFamily.LINUX:
        return IdentityPolicy.RUNTIME_DEFAULT, UserIdentity()

    if is_rootless(runtime, env, identity_resolver=identity_resolver):
        return IdentityPolicy.ROOTLESS_ROOT, UserIdentity()

    identity = identity_resolver.resolve()
    if identity.complete:
        return IdentityPolicy.EXPLICIT_UID_GID, identity

    logger.info("Could not resolve uid/gid (uid=%s, gid=%s), using the %s default user",
                identity.uid, identity.gid, runtime.value)
    return IdentityPolicy.RUNTIME_DEFAULT, identity


def identity_args(policy, identity, runtime):
    if policy is IdentityPolicy.ROOTLESS_ROOT:
        return ['--user', '0']
    if policy is IdentityPolicy.EXPLICIT_UID_GID:
        args = ['--user', '{0}:{1}'.format(identity.uid, identity.gid)]
        if runtime is ContainerRuntimeKind.PODMAN:
            # map the uid/gid 1:1 so files written to the volume are owned by the host user
            args.append('--userns=keep-id')
        return args
    return []


class ContainerArgBuilder(object):
    """
    Builds the container runtime arguments of a native build run in a local
    container.

    The identity mapping is decided once, when the builder is created, and
    prepended to every argument list it hands out. Only the volume mount of
    the output directory is computed per call.

    :param runtime: the :py:class:`ContainerRuntimeKind` running the build
    :param env: the captured :py:class:`HostEnvironment`
    :param base_args: arguments every container run starts with
    :param build_args: extra arguments added after the prefix on every call,
                       for instance runtime options from the configuration
    :param identity_resolver: uid/gid lookup, defaults to :py:class:`IdentityResolver`
    """

    def __init__(self, runtime, env, base_args=(), build_args=(), identity_resolver=None):
        self.runtime = runtime
        self.env = env
        self.build_args = tuple(build_args)

        if identity_resolver is None:
            identity_resolver = IdentityResolver()
        self.identity_policy, self.identity = select_identity_policy(runtime, env, identity_resolver)
        debug('container identity policy: {0}'.format(self.identity_policy.value))

        self._prefix = tuple(base_args) + tuple(identity_args(self.identity_policy, self.identity, runtime))

    @property
    def prefix(self):
        return list(self._prefix)

    def volume_mount(self, output_path, container_build_volume_path=defaults.CONTAINER_BUILD_VOLUME_PATH):
        host_path = output_path
        if self.env.os_family is OSFamily.WINDOWS:
            host_path = translate_to_volume_path(output_path, is_podman=self.runtime is ContainerRuntimeKind.PODMAN)
        return VolumeMount(host_path, container_build_volume_path)

    def get_container_runtime_build_args(self, output_path, container_build_volume_path=defaults.CONTAINER_BUILD_VOLUME_PATH):
        '''
        Return a new list holding the prefix, the extra build arguments and,
        last, the ``-v`` mount of ``output_path`` on ``container_build_volume_path``.
        '''
        args = list(self._prefix)
        args.extend(self.build_args)
        args.extend(self.volume_mount(output_path, container_build_volume_path).as_args())
        return args
