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
# Filename: src/id_encoder.py

"""
Encodes lists of non-negative integers into short, reversible, non-sequential
string IDs, and decodes them back.

The scheme needs no lookup table and no stored state. Everything is derived
from the configured alphabet, which is permuted once at construction by a
deterministic "consistent shuffle". Each encoded ID is laid out as:

    <prefix> [<padding>] [<hidden chunk> <partition>] <chunk> (<sep> <chunk>)*

-   **Prefix**: selects the rotation of the alphabet used for this ID.
-   **Partition**: marks the end of a hidden leading number that is only
    present when the ID had to be lengthened or regenerated.
-   **Separators**: the last character of the working alphabet, which is
    re-shuffled after every number so adjacent chunks do not correlate.

IDs that contain a blocklisted word are regenerated by bumping the hidden
leading number until a clean ID comes out.

Usage:
    from id_encoder import IdCodec

    codec = IdCodec(min_length=8)
    sqid = codec.encode([1, 2, 3])
    assert codec.decode(sqid) == [1, 2, 3]

This module is not intended to be run directly but is imported by other scripts.
"""

import logging
from typing import Iterable, List, Optional

from default_blocklist import DEFAULT_BLOCKLIST

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
MIN_ALPHABET_LENGTH = 5
MIN_BLOCKED_WORD_LENGTH = 3


class IdCodecError(Exception):
    """Base class for all errors raised by the codec."""


class ConfigurationError(IdCodecError, ValueError):
    """Raised when a codec is constructed or configured with invalid settings."""


class NumberRangeError(IdCodecError, ValueError):
    """Raised when a number passed to encode() is outside the integer domain."""


class BlocklistExhaustedError(IdCodecError, RuntimeError):
    """Raised when no ID free of blocklisted words could be generated."""


MIN_VALUE = 0
SUPPORTED_INTEGER_BITS = (8, 16, 32, 64)


def max_value_for_bits(bits: int) -> int:
    """Returns the largest unsigned integer representable in `bits` bits."""
    if bits not in SUPPORTED_INTEGER_BITS:
        raise ConfigurationError(
            f"Integer width must be one of {SUPPORTED_INTEGER_BITS}, got {bits}."
        )
    return (1 << bits) - 1


UINT64_MAX = max_value_for_bits(64)


def consistent_shuffle(chars: List[str]) -> List[str]:
    """
    Permutes a list of characters in place, deterministically.

    The swap sequence depends only on the list's length and its character
    codes, so the same input yields the same output in every implementation
    of the scheme.

    Args:
        chars (list[str]): The characters to shuffle. Modified in place.

    Returns:
        list[str]: The same list object, for convenience.
    """
    length = len(chars)
    i, j = 0, length - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % length
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1
    return chars


def to_id(num: int, digits: List[str]) -> str:
    """Renders a non-negative integer in the positional base given by `digits`."""
    base = len(digits)
    encoded = []
    while True:
        num, remainder = divmod(num, base)
        encoded.append(digits[remainder])
        if num == 0:
            break
    return "".join(reversed(encoded))


def to_number(chunk: str, digits: List[str], max_value: Optional[int] = None) -> Optional[int]:
    """
    Evaluates `chunk` in the positional base given by `digits`.

    Returns None if the chunk contains a character that is not a digit, or as
    soon as the running value exceeds `max_value` (when given), so an
    arbitrarily long chunk costs no more than a few digits' work.
    """
    values = {char: index for index, char in enumerate(digits)}
    base = len(digits)
    num = 0
    for char in chunk:
        value = values.get(char)
        if value is None:
            return None
        num = num * base + value
        if max_value is not None and num > max_value:
            return None
    return num


class IdCodec:
    """
    Stateless encoder/decoder for opaque IDs.

    Construction validates the settings and derives the shuffled alphabet and
    the blocklist filter once. Both are immutable afterwards, so an instance
    can be shared freely; every encode() or decode() call works on its own
    private copy of the alphabet.

    Args:
        alphabet (str): Characters to build IDs from. At least 5, all unique,
            all single-byte.
        min_length (int): Minimum length of generated IDs, between 0 and
            len(alphabet).
        blocklist (Iterable[str], optional): Words that must not appear in
            generated IDs. None selects the default word list; an empty
            iterable disables filtering.
        max_value (int): Largest number accepted by encode().

    Raises:
        ConfigurationError: If any of the settings are invalid.
    """

    def __init__(self, alphabet: str = DEFAULT_ALPHABET, min_length: int = 0,
                 blocklist: Optional[Iterable[str]] = None, max_value: int = UINT64_MAX):
        if not isinstance(alphabet, str) or len(alphabet) < MIN_ALPHABET_LENGTH:
            raise ConfigurationError(
                f"The alphabet must contain at least {MIN_ALPHABET_LENGTH} characters."
            )
        if len(set(alphabet)) != len(alphabet):
            raise ConfigurationError("The alphabet must not contain duplicate characters.")
        if any(len(char.encode("utf-8")) > 1 for char in alphabet):
            raise ConfigurationError("The alphabet cannot contain multibyte characters.")
        if (not isinstance(min_length, int) or isinstance(min_length, bool)
                or not MIN_VALUE <= min_length <= len(alphabet)):
            raise ConfigurationError(
                f"The minimum length must be between {MIN_VALUE} and {len(alphabet)}."
            )
        if not isinstance(max_value, int) or isinstance(max_value, bool) or max_value <= MIN_VALUE:
            raise ConfigurationError("The maximum value must be a positive integer.")

        if blocklist is None:
            blocklist = DEFAULT_BLOCKLIST

        self._min_length = min_length
        self._max_value = max_value
        self._blocklist = self._build_blocklist(blocklist, alphabet)
        self._alphabet = "".join(consistent_shuffle(list(alphabet)))
        self._alphabet_chars = frozenset(self._alphabet)

        logger.debug(f"IdCodec ready: {len(self._alphabet)} characters, "
                     f"min_length={min_length}, {len(self._blocklist)} blocked words.")

    @staticmethod
    def _build_blocklist(words: Iterable[str], alphabet: str) -> frozenset:
        """Lower-cases the words and drops those too short or not spellable in the alphabet."""
        alphabet_lower = set(alphabet.lower())
        cleaned = set()
        for word in words:
            word = word.lower()
            if len(word) < MIN_BLOCKED_WORD_LENGTH:
                continue
            if not set(word) <= alphabet_lower:
                continue
            cleaned.add(word)
        return frozenset(cleaned)

    @property
    def alphabet(self) -> str:
        """The shuffled alphabet actually used for encoding."""
        return self._alphabet

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def blocklist(self) -> frozenset:
        """The normalized blocklist, after filtering against the alphabet."""
        return self._blocklist

    def encode(self, numbers) -> str:
        """
        Encodes a sequence of non-negative integers into an ID.

        A bare int is accepted as a one-element sequence. An empty sequence
        encodes to the empty string.

        Raises:
            NumberRangeError: If a value is not an integer in [0, max_value].
            BlocklistExhaustedError: If every regeneration attempt produced a
                blocked ID.
        """
        if isinstance(numbers, int) and not isinstance(numbers, bool):
            numbers = [numbers]
        try:
            numbers = list(numbers)
        except TypeError as e:
            raise NumberRangeError(
                f"Encoding expects an integer or a sequence of integers, got {numbers!r}."
            ) from e
        if not numbers:
            return ""

        for num in numbers:
            if not isinstance(num, int) or isinstance(num, bool) or not MIN_VALUE <= num <= self._max_value:
                raise NumberRangeError(
                    f"Encoding supports numbers between {MIN_VALUE} and {self._max_value}, got {num!r}."
                )

        return self._encode_numbers(numbers)

    def _rotated_alphabet(self, offset: int):
        """Returns (prefix, partition, working list) for a rotation of the alphabet."""
        rotated = self._alphabet[offset:] + self._alphabet[:offset]
        return rotated[0], rotated[1], list(rotated[2:])

    def _build_id(self, numbers: List[int], partitioned: bool):
        """
        Performs one encoding pass.

        Returns the prefix, the body that follows it, and the working alphabet
        as left by the pass (needed for padding).
        """
        length = len(self._alphabet)
        offset = sum(ord(self._alphabet[num % length]) + index for index, num in enumerate(numbers))
        offset = (len(numbers) + offset) % length

        prefix, partition, working = self._rotated_alphabet(offset)

        body = []
        last = len(numbers) - 1
        for index, num in enumerate(numbers):
            body.append(to_id(num, working[:-1]))
            if index < last:
                body.append(partition if partitioned and index == 0 else working[-1])
                consistent_shuffle(working)

        return prefix, "".join(body), working

    def _encode_numbers(self, numbers: List[int]) -> str:
        partitioned = False
        attempts = 0

        while True:
            prefix, body, working = self._build_id(numbers, partitioned)
            candidate = prefix + body

            if len(candidate) < self._min_length:
                if not partitioned:
                    numbers = [0] + numbers
                    partitioned = True
                    continue
                missing = self._min_length - len(candidate)
                candidate = prefix + "".join(working[:missing]) + body

            if not self.is_blocked(candidate):
                return candidate

            attempts += 1
            if attempts > len(self._alphabet):
                raise BlocklistExhaustedError("Reached max attempts to re-generate the ID.")

            logger.debug(f"ID '{candidate}' is blocked, regenerating (attempt {attempts}).")
            if partitioned:
                if numbers[0] + 1 > self._max_value:
                    raise BlocklistExhaustedError("Ran out of range checking against the blocklist.")
                numbers = [numbers[0] + 1] + numbers[1:]
            else:
                numbers = [0] + numbers
                partitioned = True

    def decode(self, sqid) -> List[int]:
        """
        Decodes an ID back into its numbers.

        Never raises: an empty, malformed or foreign ID decodes to an empty
        list.
        """
        if not isinstance(sqid, str) or not sqid:
            return []
        if any(char not in self._alphabet_chars for char in sqid):
            logger.debug(f"Rejected '{sqid}': contains characters outside the alphabet.")
            return []

        offset = self._alphabet.index(sqid[0])
        _, partition, working = self._rotated_alphabet(offset)

        # Walk the ID by index so each character is read once.
        position = 1
        partition_index = sqid.find(partition, position)
        if position < partition_index < len(sqid) - 1:
            position = partition_index + 1
            consistent_shuffle(working)

        numbers = []
        while True:
            end = sqid.find(working[-1], position)
            chunk = sqid[position:] if end == -1 else sqid[position:end]
            if not chunk:
                logger.debug(f"Rejected ID of length {len(sqid)}: empty chunk at {position}.")
                return []

            num = to_number(chunk, working[:-1], self._max_value)
            if num is None:
                logger.debug(f"Rejected ID of length {len(sqid)}: invalid chunk at {position}.")
                return []
            numbers.append(num)

            if end == -1:
                return numbers
            position = end + 1
            consistent_shuffle(working)

    def is_blocked(self, sqid: str) -> bool:
        """Checks a candidate ID against the blocklist, case-insensitively."""
        sqid = sqid.lower()
        for word in self._blocklist:
            if len(word) > len(sqid):
                continue
            if len(sqid) <= 3 or len(word) <= 3:
                if sqid == word:
                    return True
            elif any(char.isdigit() for char in word):
                if sqid.startswith(word) or sqid.endswith(word):
                    return True
            elif word in sqid:
                return True
        return False

# === End of src/id_encoder.py ===
