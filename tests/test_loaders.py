"""Tests for codec definition validation and loading.

Test data loaded from: data/fixtures/scenarios/schema.json, data/fixtures/codecs.json
"""

from __future__ import annotations

import json
from datetime import timedelta

import pytest

from conftest import INSTANT, load_scenarios

_data = load_scenarios("schema")
VALID = _data["valid"]
INVALID = _data["invalid"]


class TestValidateCodecDefinition:

    @pytest.mark.parametrize("defn", VALID, ids=lambda d: d["kind"])
    def test_valid(self, defn):
        from timecodec.schema import validate_codec_definition

        assert validate_codec_definition(defn) == []

    @pytest.mark.parametrize("spec", INVALID, ids=lambda s: s["id"])
    def test_invalid(self, spec):
        from timecodec.schema import validate_codec_definition

        errors = validate_codec_definition(spec["definition"])
        assert len(errors) == 1
        assert spec["match"] in errors[0]

    def test_not_a_mapping(self):
        from timecodec.schema import validate_codec_definition

        errors = validate_codec_definition(["layout"])  # type: ignore[arg-type]
        assert errors and "object" in errors[0]


class TestCodecFromDefinition:

    def test_layout(self):
        from timecodec.layout import LayoutCodec
        from timecodec.loaders import codec_from_definition

        codec = codec_from_definition({"kind": "layout", "layout": "%Y"})
        assert codec == LayoutCodec("%Y")

    def test_reference_layout(self):
        from timecodec.layout import LayoutCodec
        from timecodec.loaders import codec_from_definition

        codec = codec_from_definition({"kind": "reference_layout", "layout": "2006"})
        assert codec == LayoutCodec("%Y")

    def test_isoweek_singletons(self):
        from timecodec.isoweek import ISO_WEEK, ISO_WEEK_CANONICAL
        from timecodec.loaders import codec_from_definition

        assert codec_from_definition({"kind": "isoweek"}) is ISO_WEEK
        canonical = codec_from_definition({"kind": "isoweek", "canonical": True})
        assert canonical is ISO_WEEK_CANONICAL

    def test_millis_singleton(self):
        from timecodec.epoch import MILLIS
        from timecodec.loaders import codec_from_definition

        assert codec_from_definition({"kind": "millis"}) is MILLIS

    def test_steps(self):
        from timecodec.epoch import UnixMillisTimeCodec, UnixTimeCodec
        from timecodec.loaders import codec_from_definition

        unix = codec_from_definition({"kind": "unix", "step_seconds": 3600})
        assert unix == UnixTimeCodec(timedelta(hours=1))
        millis = codec_from_definition({"kind": "unix_millis"})
        assert millis == UnixMillisTimeCodec(timedelta(milliseconds=1))

    def test_invalid_raises(self):
        from timecodec.loaders import codec_from_definition

        with pytest.raises(ValueError, match="Invalid kind"):
            codec_from_definition({"kind": "rfc822"})


class TestLoadCodecsJson:

    def test_load(self, codecs_json):
        from timecodec.loaders import load_codecs_json

        codecs = load_codecs_json(codecs_json)
        assert set(codecs) == {
            "day",
            "minute",
            "week",
            "week_canonical",
            "millis",
            "millis_per_second",
            "hourly",
        }
        assert codecs["day"].marshal(INSTANT) == "2017-03-01"
        assert codecs["minute"].marshal(INSTANT) == "2017-03-01 12:34"
        assert codecs["week"].marshal(INSTANT) == "2017-09"
        assert codecs["millis_per_second"].marshal(INSTANT) == "1488371696000"
        assert codecs["hourly"].marshal(INSTANT) == "1488369600"

    def test_validation_errors_collected(self, tmp_path):
        from timecodec.loaders import load_codecs_json

        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps(
                {
                    "codecs": {
                        "a": {"kind": "layout"},
                        "b": {"kind": "unix", "step_seconds": "60"},
                    }
                }
            )
        )
        with pytest.raises(ValueError) as exc_info:
            load_codecs_json(path)
        message = str(exc_info.value)
        assert "bad.json" in message
        assert "a: layout" in message
        assert "b: unix" in message
