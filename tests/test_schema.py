# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""Tests for schema validation and serialization."""

import json

import pytest

from pixelhue.schema import RGB, SCHEMA_VERSION, AnalysisResult, is_color_hex


class TestRGB:

    def test_valid(self):
        c = RGB(0, 128, 255)
        assert (c.r, c.g, c.b) == (0, 128, 255)

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="Channel g"):
            RGB(0, 256, 0)

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="Channel r"):
            RGB(-1, 0, 0)

    def test_float_channel_raises(self):
        with pytest.raises(ValueError, match="Channel r must be an integer"):
            RGB(1.5, 0, 0)

    def test_numpy_integer_channels(self):
        np = pytest.importorskip("numpy")
        assert RGB(np.uint8(1), np.int64(2), 3).hex == "#010203"

    def test_hex(self):
        assert RGB(10, 11, 12).hex == "#0a0b0c"

    def test_unpacks(self):
        r, g, b = RGB(1, 2, 3)
        assert (r, g, b) == (1, 2, 3)

    def test_frozen(self):
        c = RGB(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 5

    def test_dict_roundtrip(self):
        c = RGB(4, 5, 6)
        assert RGB.from_dict(c.to_dict()) == c


class TestIsColorHex:

    @pytest.mark.parametrize("value", ["#000000", "#abcdef", "#0a7fff"])
    def test_canonical(self, value):
        assert is_color_hex(value)

    @pytest.mark.parametrize("value", ["#ABCDEF", "abcdef", "#fff", None, 0xFFFFFF])
    def test_not_canonical(self, value):
        assert not is_color_hex(value)


class TestAnalysisResult:

    def test_unpacks_as_pair(self):
        average, dominant = AnalysisResult("#010101", "#ff0000")
        assert average == "#010101"
        assert dominant == "#ff0000"

    def test_rgb_accessors(self):
        result = AnalysisResult("#010203", "#ff0000")
        assert result.average == RGB(1, 2, 3)
        assert result.dominant == RGB(255, 0, 0)

    def test_rejects_non_canonical_average(self):
        with pytest.raises(ValueError, match="average_hex"):
            AnalysisResult("#FF0000", "#ff0000")

    def test_rejects_non_canonical_dominant(self):
        with pytest.raises(ValueError, match="dominant_hex"):
            AnalysisResult("#ff0000", "red")

    def test_to_dict(self):
        d = AnalysisResult("#010101", "#ff0000").to_dict()
        assert d == {"version": SCHEMA_VERSION, "average": "#010101", "dominant": "#ff0000"}

    def test_json_roundtrip(self):
        result = AnalysisResult("#6b5a4c", "#ffffff")
        restored = AnalysisResult.from_json(result.to_json())
        assert restored == result

    def test_to_json_parses(self):
        data = json.loads(AnalysisResult("#6b5a4c", "#ffffff").to_json(indent=None))
        assert data["dominant"] == "#ffffff"
