import logging

import pytest

from native_build_runner import output


@pytest.mark.parametrize('value', ('yes', 'on', ''))
def test_set_debug_invalid(value):
    with pytest.raises(ValueError, match='value must be one of `enable` or `disable`'):
        output.set_debug(value)


def test_set_debug_controls_build_logger():
    output.set_debug('enable')
    assert output.DEBUG_ENABLED is True
    assert logging.getLogger('native-build-runner.build').level == logging.INFO

    output.set_debug('DISABLE')
    assert output.DEBUG_ENABLED is False
    assert logging.getLogger('native-build-runner.build').level == logging.WARNING


def test_configure_is_idempotent():
    output.configure()
    output.configure()

    display_handlers = [h.get_name() for h in logging.getLogger('native-build-runner.display').handlers]
    build_handlers = [h.get_name() for h in logging.getLogger('native-build-runner.build').handlers]
    assert display_handlers.count('stdout') == 1
    assert build_handlers.count('stderr') == 1


def test_set_logfile(tmp_path):
    output.configure()
    logfile = tmp_path / 'debug.log'
    output.set_logfile(str(logfile))
    output.set_logfile(str(logfile))

    debug_logger = logging.getLogger('native-build-runner.debug')
    handlers = [h for h in debug_logger.handlers if h.get_name() == 'logfile']
    try:
        assert len(handlers) == 1
        output.display('hello from the build', log_only=True)
        handlers[0].flush()
        assert 'hello from the build' in logfile.read_text()
    finally:
        for handler in handlers:
            debug_logger.removeHandler(handler)
            handler.close()
