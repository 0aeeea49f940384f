"""Message envelope types and conversions between values and message bodies."""

from __future__ import annotations

from typing import Any, TypeVar

import msgspec

from . import errors
from .codec import Codec
from .codec import create as create_codec

T = TypeVar('T')

OP_BINARY = 0x2


class Message(msgspec.Struct, frozen=True, tag=True):
    """Base class for all message variants."""

    def __post_init__(self) -> None:
        if type(self) is Message:
            raise TypeError('Message is abstract, use one of its variants')

    @staticmethod
    def text(data: str) -> Text:
        return Text(data)

    @staticmethod
    def binary(data: bytes | bytearray | memoryview) -> Binary:
        return Binary(bytes(data))

    @property
    def is_text(self) -> bool:
        return isinstance(self, Text)

    @property
    def is_binary(self) -> bool:
        return isinstance(self, Binary)

    @property
    def is_data(self) -> bool:
        """Whether this message carries a text or binary body."""
        return isinstance(self, (Text, Binary))

    @property
    def is_ping(self) -> bool:
        return isinstance(self, Ping)

    @property
    def is_pong(self) -> bool:
        return isinstance(self, Pong)

    @property
    def is_close(self) -> bool:
        return isinstance(self, Close)

    @property
    def is_frame(self) -> bool:
        return isinstance(self, Frame)

    def __len__(self) -> int:
        """Return the payload length in bytes."""
        return len(self.into_data())

    def is_empty(self) -> bool:
        return len(self) == 0

    def into_data(self) -> bytes:
        """Return the payload as bytes."""
        raise NotImplementedError('abstract')

    def to_text(self) -> str:
        """Return the payload as text, failing if it is not valid UTF-8."""
        try:
            return self.into_data().decode()
        except UnicodeDecodeError as exc:
            raise errors.Utf8Error(f'{self.__class__.__name__}: {exc}') from exc

    @staticmethod
    def text_from(value: Any, codec: str | Codec | None = None, **options: Any) -> Text:
        """Serialize `value` as a text message using `codec`.

        Raises `CodecError` for codecs whose output is not text.
        """
        cdc = create_codec(codec, **options)
        if not cdc.TEXT:
            raise errors.CodecError(f'codec does not produce text: {cdc.NAME}')
        return Text(cdc._encode(value).decode())

    @staticmethod
    def binary_from(value: Any, codec: str | Codec | None = None, **options: Any) -> Binary:
        """Serialize `value` as a binary message using `codec`."""
        cdc = create_codec(codec, **options)
        return Binary(cdc._encode(value))

    def decode(
        self, type: type[T] | Any = Any, codec: str | Codec | None = None, **options: Any
    ) -> T:
        """Deserialize the body of a text or binary message into `type`.

        Any other variant raises `NeitherTextNorBinaryMessage` without its
        payload being inspected.
        """
        if not isinstance(self, (Text, Binary)):
            raise errors.NeitherTextNorBinaryMessage(self.__class__.__name__)
        cdc = create_codec(codec, **options)
        return cdc._decode(self.data, type)

    @staticmethod
    def text_from_json(value: Any) -> Text:
        """Serialize `value` as a JSON text message.

        Raises `JsonEncodeError` if `value` (or something it contains) is not
        serializable, e.g. a dict with tuple keys, or if an `enc_hook` fails.
        """
        return Message.text_from(value, 'json')

    @staticmethod
    def binary_from_json(value: Any) -> Binary:
        """Serialize `value` as a JSON binary message.

        The bytes are the UTF-8 encoding of what `text_from_json` produces.
        """
        return Message.binary_from(value, 'json')

    def json(self, type: type[T] | Any = Any) -> T:
        """Deserialize the message body as JSON.

        Raises `JsonDecodeError` when the body is not valid JSON or does not
        match `type`, and `NeitherTextNorBinaryMessage` for other variants.
        """
        return self.decode(type, 'json')


class Text(Message):
    data: str

    def into_data(self) -> bytes:
        return self.data.encode()

    def to_text(self) -> str:
        return self.data


class Binary(Message):
    data: bytes

    def into_data(self) -> bytes:
        return self.data


class Ping(Message):
    data: bytes = b''

    def into_data(self) -> bytes:
        return self.data


class Pong(Message):
    data: bytes = b''

    def into_data(self) -> bytes:
        return self.data


class CloseFrame(msgspec.Struct, frozen=True):
    """Status code and reason sent with a close message."""

    code: int = 1000
    reason: str = ''


class Close(Message):
    frame: CloseFrame | None = None

    def into_data(self) -> bytes:
        return self.frame.reason.encode() if self.frame else b''

    def to_text(self) -> str:
        return self.frame.reason if self.frame else ''


class Frame(Message):
    """A raw frame passed through as-is."""

    payload: bytes
    opcode: int = OP_BINARY
    fin: bool = True

    def into_data(self) -> bytes:
        return self.payload
