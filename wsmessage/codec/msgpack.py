"""Msgpack codec for compact binary message bodies."""

from __future__ import annotations

from typing import Any, Callable

import msgpack
import msgspec

from . import Codec


class MsgpackCodec(Codec):
    """Codec backed by msgpack for compact binary payloads."""

    NAME = 'msgpack'

    def __init__(
        self,
        enc_hook: Callable[[Any], Any] | None = None,
        ext_hook: Callable[[int, bytes], Any] | None = None,
    ) -> None:
        self.enc_hook = enc_hook
        self.ext_hook = ext_hook

    def encode(self, value: Any) -> bytes:
        """Serialize values to msgpack bytes."""
        return msgpack.packb(value, use_bin_type=True, default=self.enc_hook)

    def decode(self, data: bytes | str, type: Any = Any) -> Any:
        """Decode msgpack bytes and convert the result to `type`."""
        if isinstance(data, str):
            data = data.encode()
        kwargs: dict[str, Any] = {'use_list': True, 'raw': False, 'strict_map_key': False}
        if self.ext_hook is not None:
            kwargs['ext_hook'] = self.ext_hook
        value = msgpack.unpackb(data, **kwargs)
        if type is Any:
            return value
        return msgspec.convert(value, type)
