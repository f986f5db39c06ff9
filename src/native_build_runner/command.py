import logging
import ntpath
import os
import random
import shlex
import string

from native_build_runner import defaults
from native_build_runner.builder import ContainerArgBuilder
from native_build_runner.environment import HostEnvironment, OSFamily
from native_build_runner.output import debug
from native_build_runner.runtime import ContainerRuntimeKind, detect_container_runtime

logger = logging.getLogger('native-build-runner.build')


def generate_container_name():
    suffix = ''.join(random.choice(string.ascii_letters) for _ in range(5))
    return defaults.CONTAINER_NAME_PREFIX + suffix


class NativeImageContainerCommand(object):
    """
    Composes the full ``<runtime> run ...`` invocation of a native build in a
    local container. The command is only assembled, running it is left to
    the caller.

    :Example:

    >>> cmd = NativeImageContainerCommand(NativeConfig(), 'target/native-sources')
    >>> cmd.build_command(['-jar', 'app-runner.jar'])

    """

    def __init__(self, config, output_dir, runtime=None, env=None, identity_resolver=None):
        self.config = config
        self.runtime = detect_container_runtime(runtime if runtime is not None else config.container_runtime)
        if self.runtime is ContainerRuntimeKind.OTHER:
            logger.warning("Container runtime %s has no known executable, defaulting to docker", self.runtime.value)
        self.env = env if env is not None else HostEnvironment.capture()
        if self.env.os_family is OSFamily.WINDOWS:
            self.output_path = ntpath.abspath(output_dir)
        else:
            self.output_path = os.path.abspath(output_dir)
        self.container_name = generate_container_name()
        self.arg_builder = ContainerArgBuilder(
            self.runtime,
            self.env,
            base_args=defaults.BASE_CONTAINER_RUNTIME_ARGS,
            build_args=config.container_runtime_build_args(),
            identity_resolver=identity_resolver,
        )

    @property
    def executable(self):
        return self.runtime.executable or ContainerRuntimeKind.DOCKER.executable

    def build_command(self, native_image_args=None):
        if native_image_args is None:
            native_image_args = self.config.native_image_args
        command = [self.executable, 'run']
        command.extend(self.arg_builder.get_container_runtime_build_args(
            self.output_path, self.config.container_build_volume_path))
        command.extend(['--name', self.container_name])
        command.append(self.config.builder_image)
        command.extend(native_image_args)
        debug('container engine invocation: {0}'.format(' '.join(command)))
        return command

    def cmdline(self, native_image_args=None):
        return ' '.join(shlex.quote(arg) for arg in self.build_command(native_image_args))
