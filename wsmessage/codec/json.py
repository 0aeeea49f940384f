"""JSON codec and the JSON conversions for messages."""

from __future__ import annotations

from typing import Any, Callable, Literal, TypeVar

from msgspec import json

from .. import errors
from ..message import Binary, Message, Text
from . import Codec

T = TypeVar('T')


class JsonCodec(Codec):
    """Codec that serializes message bodies as compact JSON."""

    NAME = 'json'
    TEXT = True

    encode_error = errors.JsonEncodeError
    decode_error = errors.JsonDecodeError

    def __init__(
        self,
        order: Literal['deterministic', 'sorted'] | None = None,
        enc_hook: Callable[[Any], Any] | None = None,
        dec_hook: Callable[[type, Any], Any] | None = None,
        strict: bool = True,
    ) -> None:
        """Configure the underlying msgspec encoder and decoder.

        `order='sorted'` sorts object keys, giving byte-identical output for
        equal mappings regardless of insertion order.
        """
        self.order = order
        self.dec_hook = dec_hook
        self.strict = strict
        self._encoder = json.Encoder(enc_hook=enc_hook, order=order)

    def encode(self, value: Any) -> bytes:
        """Encode Python objects to JSON bytes."""
        return self._encoder.encode(value)

    def decode(self, data: bytes | str, type: Any = Any) -> Any:
        """Decode JSON into an instance of `type`."""
        return json.decode(data, type=type, strict=self.strict, dec_hook=self.dec_hook)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(order={self.order!r}, strict={self.strict!r})'


_default = JsonCodec()


def text_from_json(value: Any) -> Text:
    """Serialize `value` as a text message."""
    return Text(_default._encode(value).decode())


def binary_from_json(value: Any) -> Binary:
    """Serialize `value` as a binary message."""
    return Binary(_default._encode(value))


def from_json(message: Message, type: type[T] | Any = Any) -> T:
    """Deserialize the body of a text or binary message."""
    return message.decode(type, _default)


__all__ = ['JsonCodec', 'binary_from_json', 'from_json', 'text_from_json']
