"""Codec base classes and helpers."""

from __future__ import annotations

import abc
from typing import Any, ClassVar

from .. import errors, logs, utils
from ..registry import Registry

DEFAULT_CODEC = 'json'

log = logs.get(__name__)


def create(name: str | Codec | None = None, **kwargs: Any) -> Codec:
    """Return a codec by name or pass through existing instances."""
    if isinstance(name, Codec):
        if kwargs:
            raise errors.CodecError(f'options given for codec instance: {name.NAME}')
        return name
    name = name or DEFAULT_CODEC
    try:
        cls = REGISTRY[name]
    except KeyError:
        raise errors.CodecError(f'unknown codec: {name}') from None
    return cls(**kwargs)


class Codec(abc.ABC):
    """Base class for codecs that convert between values and message bodies."""

    NAME: ClassVar[str]
    TEXT: ClassVar[bool] = False
    """Whether encoded output is always valid UTF-8 text."""

    encode_error: ClassVar[type[errors.EncodeError]] = errors.EncodeError
    decode_error: ClassVar[type[errors.DecodeError]] = errors.DecodeError

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if name := cls.__dict__.get('NAME'):
            REGISTRY[name] = cls

    @abc.abstractmethod
    def encode(self, value: Any) -> bytes:
        """Serialize `value` into bytes."""
        raise NotImplementedError('abstract')

    @abc.abstractmethod
    def decode(self, data: bytes | str, type: Any = Any) -> Any:
        """Deserialize `data` into an instance of `type`."""
        raise NotImplementedError('abstract')

    def _encode(self, value: Any) -> bytes:
        """Wrapper that provides encoding error context. Used internally."""
        try:
            data = self.encode(value)
        except Exception as exc:
            raise self.encode_error(f'{exc}: msg={utils.format.elide(repr(value))}', exc) from exc

        if log.isEnabledFor(logs.DEBUG):
            log.debug('encode(%s): %s', self.NAME, utils.format.format_size(data))

        return data

    def _decode(self, data: bytes | str, type: Any = Any) -> Any:
        """Wrapper that provides decoding error context. Used internally."""
        try:
            value = self.decode(data, type)
        except Exception as exc:
            raise self.decode_error(f'{exc}: data={utils.format.elide(repr(data))}', exc) from exc

        if log.isEnabledFor(logs.DEBUG):
            log.debug('decode(%s): %s', self.NAME, utils.format.format_size(data))

        return value

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'


REGISTRY: Registry[Codec] = Registry(__name__, Codec)
