from __future__ import annotations


class WsMessageError(Exception):
    """Base class for all wsmessage exceptions."""


class Utf8Error(WsMessageError):
    """Raised when a payload is not valid UTF-8 text."""


class CodecError(WsMessageError):
    """Raised when a codec cannot be found or cannot produce a message body."""


class RegistryError(WsMessageError):
    """Raised when attempting to register a duplicate object."""


class SerdeError(WsMessageError):
    """Wraps an error raised by a serialization library."""

    def __init__(self, msg: str, error: BaseException | None = None) -> None:
        super().__init__(msg)
        self.error = error


class EncodeError(SerdeError):
    """Adds context for errors raised when encoding."""


class DecodeError(SerdeError):
    """Adds context for errors raised when decoding."""


class JsonError(WsMessageError):
    """Base class for errors raised by the JSON conversions."""


class JsonSerdeError(JsonError, SerdeError):
    """Raised for any error reported by the JSON library."""


class JsonEncodeError(JsonSerdeError, EncodeError):
    """Raised when a value cannot be serialized to JSON."""


class JsonDecodeError(JsonSerdeError, DecodeError):
    """Raised when a message body cannot be deserialized from JSON."""


class NeitherTextNorBinaryMessage(JsonError):
    """Raised when decoding a message that is neither text nor binary."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"can't deserialize message that is neither text nor binary: {kind}")
        self.kind = kind
