"""Build codecs from plain definitions and JSON files."""

from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path

from timecodec.epoch import MILLIS, UnixMillisTimeCodec, UnixTimeCodec
from timecodec.isoweek import ISO_WEEK, ISO_WEEK_CANONICAL
from timecodec.layout import LayoutCodec
from timecodec.schema import validate_codec_definition
from timecodec.types import TimeCodec


def codec_from_definition(defn: dict) -> TimeCodec:
    """Build a TimeCodec from a definition dict.

    Examples:
        {"kind": "layout", "layout": "%Y-%m-%d"}
        {"kind": "unix", "step_seconds": 3600}

    Raises ValueError if validation fails.
    """
    errors = validate_codec_definition(defn)
    if errors:
        raise ValueError(
            "Invalid codec definition:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    kind = defn["kind"]
    if kind == "layout":
        return LayoutCodec(defn["layout"])
    if kind == "reference_layout":
        return LayoutCodec.from_reference(defn["layout"])
    if kind == "isoweek":
        return ISO_WEEK_CANONICAL if defn.get("canonical", False) else ISO_WEEK
    if kind == "millis":
        return MILLIS
    if kind == "unix_millis":
        return UnixMillisTimeCodec(timedelta(milliseconds=defn.get("step_ms", 1)))
    return UnixTimeCodec(timedelta(seconds=defn.get("step_seconds", 1)))


def load_codecs_json(path: str | Path) -> dict[str, TimeCodec]:
    """Load named codecs from a JSON file.

    The JSON file must have the format:
    {
        "codecs": {
            "day": { "kind": "layout", "layout": "%Y-%m-%d" },
            "hourly": { "kind": "unix", "step_seconds": 3600 },
            ...
        }
    }

    Raises ValueError if any definition fails validation.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    definitions = data.get("codecs", {})
    errors: list[str] = []
    for name, defn in definitions.items():
        errors.extend(f"{name}: {e}" for e in validate_codec_definition(defn))
    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return {name: codec_from_definition(defn) for name, defn in definitions.items()}
