# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""Tests for the RGB <-> hex color codec."""

import pytest

from pixelhue.measure.codec import from_hex, to_hex
from pixelhue.schema import RGB


class TestToHex:

    def test_primary_red(self):
        assert to_hex(255, 0, 0) == "#ff0000"

    def test_zero_padding(self):
        assert to_hex(1, 2, 3) == "#010203"

    def test_lowercase(self):
        assert to_hex(171, 205, 239) == "#abcdef"

    def test_always_seven_characters(self):
        for value in (0, 9, 15, 16, 128, 255):
            assert len(to_hex(value, value, value)) == 7

    def test_black_and_white(self):
        assert to_hex(0, 0, 0) == "#000000"
        assert to_hex(255, 255, 255) == "#ffffff"

    def test_accepts_numpy_integers(self):
        np = pytest.importorskip("numpy")
        assert to_hex(np.uint8(16), np.uint8(32), np.uint8(48)) == "#102030"

    @pytest.mark.parametrize("channels", [(1.9, 0, 0), (0, 2.0, 0), (0, 0, "7")])
    def test_non_integer_raises(self, channels):
        with pytest.raises(ValueError, match="integers"):
            to_hex(*channels)

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
    def test_out_of_range_raises(self, channels):
        with pytest.raises(ValueError, match="0-255"):
            to_hex(*channels)


class TestFromHex:

    def test_parses_lowercase(self):
        assert from_hex("#0a7fff") == RGB(10, 127, 255)

    def test_parses_uppercase(self):
        assert from_hex("#F6C767") == RGB(246, 199, 103)

    def test_leading_hash_optional(self):
        assert from_hex("ff0000") == RGB(255, 0, 0)

    def test_inverse_of_to_hex(self):
        assert to_hex(*from_hex("#123abc")) == "#123abc"

    @pytest.mark.parametrize("value", ["", "#fff", "#12345", "#gg0000", "#1234567"])
    def test_malformed_raises(self, value):
        with pytest.raises(ValueError, match="rrggbb"):
            from_hex(value)
