"""timecodec: Interchangeable codecs between instants and their text forms."""

import logging

from timecodec.codec import FuncTimeCodec, new_time_codec
from timecodec.epoch import MILLIS, UnixMillisTimeCodec, UnixTimeCodec
from timecodec.isoweek import ISO_WEEK, ISO_WEEK_CANONICAL
from timecodec.layout import DATE, RFC3339, LayoutCodec, translate_reference_layout
from timecodec.loaders import codec_from_definition, load_codecs_json
from timecodec.resolution import (
    EPOCH,
    MILLISECOND,
    SECOND,
    TimeResolution,
    round_to_unit,
    unix_millis,
    unix_nanos,
)
from timecodec.types import (
    InvalidISOWeekStringError,
    InvalidWeekNumberError,
    LayoutParseError,
    NumberFormatError,
    TimeCodec,
    TimeCodecError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DATE",
    "EPOCH",
    "FuncTimeCodec",
    "ISO_WEEK",
    "ISO_WEEK_CANONICAL",
    "InvalidISOWeekStringError",
    "InvalidWeekNumberError",
    "LayoutCodec",
    "LayoutParseError",
    "MILLIS",
    "MILLISECOND",
    "NumberFormatError",
    "RFC3339",
    "SECOND",
    "TimeCodec",
    "TimeCodecError",
    "TimeResolution",
    "UnixMillisTimeCodec",
    "UnixTimeCodec",
    "codec_from_definition",
    "load_codecs_json",
    "new_time_codec",
    "round_to_unit",
    "translate_reference_layout",
    "unix_millis",
    "unix_nanos",
]
