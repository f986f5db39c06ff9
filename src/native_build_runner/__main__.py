#
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
import argparse
import os
import sys

from native_build_runner import defaults
from native_build_runner import output
from native_build_runner.command import NativeImageContainerCommand
from native_build_runner.config import NativeConfig
from native_build_runner.exceptions import NativeBuildRunnerException
from native_build_runner.runtime import ContainerRuntimeKind


def build_parser():
    parser = argparse.ArgumentParser(
        prog='native-build-runner',
        description="Compose the container runtime command of a containerized native build. "
                    "Arguments after '--' are passed to native-image inside the container."
    )

    parser.add_argument(
        'output_dir',
        help="host directory mounted as the build volume"
    )

    parser.add_argument(
        '--settings',
        help="YAML settings file (see NativeConfig)"
    )

    parser.add_argument(
        '--runtime',
        choices=('docker', 'podman'),
        help="container runtime to use instead of detecting one (default=detect)"
    )

    parser.add_argument(
        '--image',
        help="builder image reference (default={0})".format(defaults.default_builder_image)
    )

    parser.add_argument(
        '--container-option',
        dest='container_options',
        action='append',
        default=[],
        help="extra container runtime option, may be repeated"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug output logging (default=False)"
    )

    parser.add_argument(
        '--logfile',
        help="log output messages to a file (default=None)"
    )

    return parser


def load_config(vargs, environ=None):
    if environ is None:
        environ = os.environ

    if vargs.get('settings'):
        config = NativeConfig.from_settings_file(vargs['settings'], environ=environ)
    else:
        config = NativeConfig(container_runtime=environ.get(defaults.CONTAINER_RUNTIME_ENV) or None)

    if vargs.get('runtime'):
        config.container_runtime = ContainerRuntimeKind.from_name(vargs['runtime'])
    if vargs.get('image'):
        config.builder_image = vargs['image']
    config.container_runtime_options.extend(vargs.get('container_options') or [])
    return config


def main(sys_args=None):
    if sys_args is None:
        sys_args = sys.argv[1:]

    native_image_args = []
    if '--' in sys_args:
        idx = sys_args.index('--')
        sys_args, native_image_args = sys_args[:idx], sys_args[idx + 1:]

    parser = build_parser()
    vargs = vars(parser.parse_args(sys_args))

    output.configure()
    output.set_debug('enable' if vargs.get('debug') else 'disable')
    if vargs.get('logfile'):
        output.set_logfile(vargs['logfile'])

    output.debug('starting debug logging')

    try:
        config = load_config(vargs)
        cmd = NativeImageContainerCommand(config, vargs['output_dir'])
        output.display(cmd.cmdline(native_image_args or None))
    except NativeBuildRunnerException as exc:
        output.debug(exc)
        print('{0}: {1}'.format(parser.prog, exc), file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
