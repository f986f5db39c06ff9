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
import os

from collections.abc import Mapping

import yaml

from native_build_runner import defaults
from native_build_runner.exceptions import ConfigurationError
from native_build_runner.output import debug
from native_build_runner.runtime import ContainerRuntimeKind

logger = logging.getLogger('native-build-runner.build')


class NativeConfig(object):
    """
    Settings for a containerized native build.

    Every option the container arguments depend on is an explicit attribute,
    so the argument builder never has to look at anything but this object and
    the captured :py:class:`native_build_runner.environment.HostEnvironment`.

    :Example:

    >>> config = NativeConfig.from_settings_file('env/settings')
    >>> cmd = NativeImageContainerCommand(config, 'target')
    >>> cmd.build_command()

    """

    _SETTINGS = (
        'container_runtime',
        'builder_image',
        'container_runtime_options',
        'container_build_volume_path',
        'debug_build_process',
        'publish_debug_build_process_port',
        'native_image_args',
    )

    def __init__(self, container_runtime=None, builder_image=None, container_runtime_options=None,
                 container_build_volume_path=None, debug_build_process=False,
                 publish_debug_build_process_port=True, native_image_args=None):
        if container_runtime is not None and not isinstance(container_runtime, ContainerRuntimeKind):
            container_runtime = ContainerRuntimeKind.from_name(container_runtime)
        self.container_runtime = container_runtime
        self.builder_image = self._string('builder_image', builder_image) or defaults.default_builder_image
        self.container_runtime_options = self._string_list('container_runtime_options', container_runtime_options)
        self.container_build_volume_path = (self._string('container_build_volume_path', container_build_volume_path)
                                            or defaults.CONTAINER_BUILD_VOLUME_PATH)
        self.debug_build_process = self._flag('debug_build_process', debug_build_process)
        self.publish_debug_build_process_port = self._flag('publish_debug_build_process_port', publish_debug_build_process_port)
        self.native_image_args = self._string_list('native_image_args', native_image_args)

    @staticmethod
    def _string_list(name, value):
        if value is None:
            return []
        if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
            raise ConfigurationError("{0} must be a list of strings, got {1!r}".format(name, value))
        return list(value)

    @staticmethod
    def _string(name, value):
        if value is not None and not isinstance(value, str):
            raise ConfigurationError("{0} must be a string, got {1!r}".format(name, value))
        return value

    @staticmethod
    def _flag(name, value):
        if not isinstance(value, bool):
            raise ConfigurationError("{0} must be true or false, got {1!r}".format(name, value))
        return value

    @classmethod
    def from_settings_file(cls, path, environ=None):
        '''
        Build a configuration from a YAML settings file.

        ``NATIVE_BUILD_CONTAINER_RUNTIME`` in the environment overrides the
        runtime named in the file.

        :raises ConfigurationError: if the file cannot be read or is not a mapping
        '''
        if environ is None:
            environ = os.environ

        try:
            with open(path, 'r') as f:
                settings = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError("Error loading settings file {0}: {1}".format(path, e))

        if settings is None:
            settings = {}
        if not isinstance(settings, Mapping):
            raise ConfigurationError("Settings file {0} must contain a mapping".format(path))

        kwargs = {}
        for key, value in settings.items():
            if key in cls._SETTINGS:
                kwargs[key] = value
            else:
                debug('Ignoring unknown setting {0}'.format(key))

        runtime_override = environ.get(defaults.CONTAINER_RUNTIME_ENV)
        if runtime_override:
            logger.info("Container runtime %s selected by %s", runtime_override, defaults.CONTAINER_RUNTIME_ENV)
            kwargs['container_runtime'] = runtime_override

        return cls(**kwargs)

    def container_runtime_build_args(self):
        """Tokens contributed ahead of the volume mount on every build."""
        args = list(self.container_runtime_options)
        if self.debug_build_process and self.publish_debug_build_process_port:
            args.append('--publish={0}:{0}'.format(defaults.DEBUG_BUILD_PROCESS_PORT))
        return args
