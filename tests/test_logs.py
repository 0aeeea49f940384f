import io
import logging

import pytest

from wsmessage import JsonDecodeError, Message, Text, logs


@pytest.fixture
def restore_levels():
    names = (logs.PACKAGE, *logs.VERBOSE_LOGGERS)
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    pkg_log = logging.getLogger(logs.PACKAGE)
    if logs._handler is not None:
        pkg_log.removeHandler(logs._handler)
        logs._handler = None
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger='wsmessage.codec')

    msg = Message.text_from_json({'a': 1})
    msg.json()

    assert 'encode(json): 7 bytes' in caplog.text
    assert 'decode(json): 7 chars' in caplog.text


def test_failures_not_logged(caplog):
    caplog.set_level(logging.DEBUG)

    with pytest.raises(JsonDecodeError):
        Text('[').json()

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


@pytest.mark.parametrize(
    'debug_level, pkg_level, verbose_level',
    [
        (0, logging.INFO, logging.INFO),
        (1, logging.DEBUG, logging.INFO),
        (2, logging.DEBUG, logging.DEBUG),
    ],
)
def test_init_levels(restore_levels, debug_level, pkg_level, verbose_level):
    logs.init(debug_level, io.StringIO())

    assert logging.getLogger('wsmessage').level == pkg_level
    assert logging.getLogger('wsmessage.codec').level == verbose_level
    assert logging.getLogger('wsmessage.registry').level == verbose_level


def test_init_output(restore_levels):
    stream = io.StringIO()
    logs.init(2, stream)

    Message.binary_from_json([1, 2, 3])

    assert 'wsmessage.codec . encode(json): 7 bytes' in stream.getvalue()


def test_init_replaces_handler(restore_levels):
    pkg_log = logging.getLogger('wsmessage')
    first = logs.init(0, io.StringIO())
    second = logs.init(0, io.StringIO())

    assert first is not second
    assert first not in pkg_log.handlers
    assert second in pkg_log.handlers


def test_init_leaves_root_alone(restore_levels):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    logs.init(2, io.StringIO())

    assert root.handlers == handlers
    assert root.level == level
