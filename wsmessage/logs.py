"""Logger factory and opt-in output for the wsmessage loggers."""

from __future__ import annotations

from logging import DEBUG, INFO, Formatter, Handler, NullHandler, StreamHandler, getLogger
from typing import TextIO

PACKAGE = 'wsmessage'
VERBOSE_LOGGERS = ('wsmessage.codec', 'wsmessage.registry')
"""Loggers that only emit DEBUG records at `debug_level > 1`."""

get = getLogger

get(PACKAGE).addHandler(NullHandler())

_handler: Handler | None = None


def init(debug_level: int = 0, stream: TextIO | None = None) -> Handler:
    """Send wsmessage log records to `stream` (stderr by default).

    Only the package logger is touched. Calling this again replaces the
    handler installed by the previous call.
    """
    global _handler

    pkg_log = get(PACKAGE)
    if _handler is not None:
        pkg_log.removeHandler(_handler)

    _handler = StreamHandler(stream)
    _handler.setFormatter(Formatter('%(levelname).1s %(asctime)s %(name)s . %(message)s'))
    pkg_log.addHandler(_handler)
    pkg_log.setLevel(DEBUG if debug_level > 0 else INFO)

    for name in VERBOSE_LOGGERS:
        get(name).setLevel(DEBUG if debug_level > 1 else INFO)

    return _handler
