"""Codec construction by composing an encode and a decode function."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from timecodec.types import TimeCodec, TimeDecoderFunc, TimeEncoderFunc


@dataclass(frozen=True)
class FuncTimeCodec(TimeCodec):
    """TimeCodec backed by two plain callables. Immutable."""

    encode: TimeEncoderFunc
    decode: TimeDecoderFunc

    def marshal(self, t: datetime) -> str:
        return self.encode(t)

    def unmarshal(self, value: str) -> datetime:
        return self.decode(value)


def new_time_codec(encode: TimeEncoderFunc, decode: TimeDecoderFunc) -> TimeCodec:
    """Compose ``encode`` and ``decode`` into a TimeCodec.

    A missing function is a programming error, not a decode failure:
    TypeError is raised immediately and no codec is returned.
    """
    if not callable(encode):
        raise TypeError(f"Invalid TimeEncoder: {encode!r}")
    if not callable(decode):
        raise TypeError(f"Invalid TimeDecoder: {decode!r}")
    return FuncTimeCodec(encode, decode)
