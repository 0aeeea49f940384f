"""WebSocket message envelopes with JSON and msgpack body conversions."""

from __future__ import annotations

from . import codec, errors, logs
from .errors import (
    JsonDecodeError,
    JsonEncodeError,
    JsonError,
    JsonSerdeError,
    NeitherTextNorBinaryMessage,
    WsMessageError,
)
from .message import Binary, Close, CloseFrame, Frame, Message, Ping, Pong, Text

__version__ = '0.1.0'

__all__ = [
    'Binary',
    'Close',
    'CloseFrame',
    'Frame',
    'JsonDecodeError',
    'JsonEncodeError',
    'JsonError',
    'JsonSerdeError',
    'Message',
    'NeitherTextNorBinaryMessage',
    'Ping',
    'Pong',
    'Text',
    'WsMessageError',
    'codec',
    'errors',
    'logs',
]
