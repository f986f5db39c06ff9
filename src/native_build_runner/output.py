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
import sys
import logging

DEBUG_ENABLED = False
TRACEBACK_ENABLED = True

_display_logger = logging.getLogger('native-build-runner.display')
_debug_logger = logging.getLogger('native-build-runner.debug')
# detection and identity-mapping decisions
_build_logger = logging.getLogger('native-build-runner.build')


def display(msg, log_only=False):
    if not log_only:
        _display_logger.log(70, msg)
    _debug_logger.log(10, msg)


def debug(msg):
    if DEBUG_ENABLED:
        if isinstance(msg, Exception):
            if TRACEBACK_ENABLED:
                _debug_logger.exception(msg)
        display(msg)


def set_logfile(filename):
    handlers = [h.get_name() for h in _debug_logger.handlers]
    if 'logfile' not in handlers:
        logfile_handler = logging.FileHandler(filename)
        logfile_handler.set_name('logfile')
        formatter = logging.Formatter('%(asctime)s: %(message)s')
        logfile_handler.setFormatter(formatter)
        _debug_logger.addHandler(logfile_handler)


def _enable_flag(value):
    if value.lower() not in ('enable', 'disable'):
        raise ValueError('value must be one of `enable` or `disable`, got %s' % value)
    return value.lower() == 'enable'


def set_debug(value):
    global DEBUG_ENABLED
    DEBUG_ENABLED = _enable_flag(value)
    _build_logger.setLevel(logging.INFO if DEBUG_ENABLED else logging.WARNING)


def set_traceback(value):
    global TRACEBACK_ENABLED
    TRACEBACK_ENABLED = _enable_flag(value)


def configure():
    '''
    Configures the logging facility

    Display messages go to stdout. Build decisions go to stderr, at
    INFO once debug mode is enabled and at WARNING otherwise.

    :returns: None
    '''
    root_logger = logging.getLogger()
    root_logger.addHandler(logging.NullHandler())
    root_logger.setLevel(99)

    _display_logger.setLevel(70)
    _debug_logger.setLevel(10)

    display_handlers = [h.get_name() for h in _display_logger.handlers]

    if 'stdout' not in display_handlers:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.set_name('stdout')
        formatter = logging.Formatter('%(message)s')
        stdout_handler.setFormatter(formatter)
        _display_logger.addHandler(stdout_handler)

    build_handlers = [h.get_name() for h in _build_logger.handlers]

    if 'stderr' not in build_handlers:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.set_name('stderr')
        stderr_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        _build_logger.addHandler(stderr_handler)
