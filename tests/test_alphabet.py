#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Opaque ID Codec
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: tests/test_alphabet.py

"""
Tests for custom alphabets and alphabet validation.
"""
import pytest

from id_encoder import ConfigurationError, IdCodec

PUNCTUATION_ALPHABET = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    "!@#$%^&*()-_+|{}[];:'\"/?.>,<`~"
)


def test_hex_alphabet():
    codec = IdCodec(alphabet="0123456789abcdef")
    assert codec.encode([1, 2, 3]) == "4d9fd2"
    assert codec.decode("4d9fd2") == [1, 2, 3]


def test_shortest_alphabet():
    codec = IdCodec(alphabet="abcde")
    sqid = codec.encode([1, 2, 3])
    assert sqid == "dbecebbb"
    assert codec.decode(sqid) == [1, 2, 3]


def test_long_alphabet_with_punctuation():
    codec = IdCodec(alphabet=PUNCTUATION_ALPHABET)
    sqid = codec.encode([1, 2, 3])
    assert sqid == "+}wswO"
    assert codec.decode(sqid) == [1, 2, 3]


@pytest.mark.parametrize("numbers", [[0], [7, 7, 7], [4_294_967_295, 12]])
def test_binary_digit_round_trip(numbers):
    """With five characters only two remain as digits, so IDs get long but stay valid."""
    codec = IdCodec(alphabet="vwxyz")
    assert codec.decode(codec.encode(numbers)) == numbers


def test_ids_use_only_alphabet_characters():
    alphabet = "0123456789abcdef"
    codec = IdCodec(alphabet=alphabet)
    for value in range(500):
        assert set(codec.encode([value, value * 3])) <= set(alphabet)


def test_ids_from_other_alphabet_do_not_decode():
    hex_codec = IdCodec(alphabet="0123456789abcdef")
    assert hex_codec.decode("8QRLaD") == []


class TestAlphabetValidation:
    """Construction fails fast with a ConfigurationError."""

    def test_duplicate_characters(self):
        with pytest.raises(ConfigurationError, match="duplicate"):
            IdCodec(alphabet="aabcdefg")

    @pytest.mark.parametrize("too_short", ["", "a", "abcd"])
    def test_too_short(self, too_short):
        with pytest.raises(ConfigurationError, match="at least 5"):
            IdCodec(alphabet=too_short)

    def test_multibyte_characters(self):
        with pytest.raises(ConfigurationError, match="multibyte"):
            IdCodec(alphabet="abcdeé")

    @pytest.mark.parametrize("not_a_string", [None, 12345, list("abcdef")])
    def test_not_a_string(self, not_a_string):
        with pytest.raises(ConfigurationError):
            IdCodec(alphabet=not_a_string)

    @pytest.mark.parametrize("max_value", [0, -1, 2.5, True])
    def test_invalid_max_value(self, max_value):
        with pytest.raises(ConfigurationError, match="maximum value"):
            IdCodec(max_value=max_value)

    def test_configuration_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            IdCodec(alphabet="abc")

# === End of tests/test_alphabet.py ===
