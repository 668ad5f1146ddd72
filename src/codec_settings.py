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
# Filename: src/codec_settings.py

"""
Builds an `IdCodec` from the project configuration.

Settings are resolved in this order, later sources winning:

1.  Built-in defaults from `id_encoder.py` and `default_blocklist.py`.
2.  The `[Codec]` section of config.ini.
3.  The `IDCODEC_ALPHABET` / `IDCODEC_MIN_LENGTH` environment variables
    (which may come from the project's `.env` file).
4.  Keyword overrides passed to `build_codec()`, typically from the command
    line.

Recognised `[Codec]` keys:

    alphabet              = abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789
    min_length            = 0
    integer_bits          = 64          ; one of 8, 16, 32, 64
    use_default_blocklist = true
    blocklist_file        = data/blocklist.txt   ; one word per line, optional
    extra_blocked_words   = word1, word2
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import List, Optional

from config_loader import APP_CONFIG, get_config_list, get_config_value, get_path
from default_blocklist import DEFAULT_BLOCKLIST
from id_encoder import DEFAULT_ALPHABET, ConfigurationError, IdCodec, max_value_for_bits

logger = logging.getLogger(__name__)

SECTION = "Codec"
ENV_ALPHABET = "IDCODEC_ALPHABET"
ENV_MIN_LENGTH = "IDCODEC_MIN_LENGTH"


@dataclass(frozen=True)
class CodecSettings:
    """Resolved settings for one codec instance."""
    alphabet: str = DEFAULT_ALPHABET
    min_length: int = 0
    integer_bits: int = 64
    use_default_blocklist: bool = True
    blocklist_file: Optional[str] = None
    extra_blocked_words: List[str] = field(default_factory=list)


def read_blocklist_file(path: str) -> List[str]:
    """
    Reads a word list with one word per line.

    Blank lines and lines starting with '#' are ignored.

    Raises:
        ConfigurationError: If the file cannot be read.
    """
    resolved = get_path(path)
    try:
        with open(resolved, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise ConfigurationError(f"Could not read blocklist file '{resolved}': {e}") from e

    words = [line.strip() for line in lines]
    words = [word for word in words if word and not word.startswith('#')]
    logger.debug(f"Read {len(words)} blocked words from {resolved}.")
    return words


def load_codec_settings(config=None) -> CodecSettings:
    """Reads the [Codec] section and environment overrides into a CodecSettings."""
    if config is None:
        config = APP_CONFIG

    defaults = CodecSettings()
    alphabet = get_config_value(config, SECTION, 'alphabet', fallback=defaults.alphabet,
                                strip_comments=False)
    min_length = get_config_value(config, SECTION, 'min_length', fallback=defaults.min_length,
                                  value_type=int)

    env_alphabet = os.getenv(ENV_ALPHABET)
    if env_alphabet:
        logger.debug(f"Alphabet overridden by {ENV_ALPHABET}.")
        alphabet = env_alphabet
    env_min_length = os.getenv(ENV_MIN_LENGTH)
    if env_min_length:
        try:
            min_length = int(env_min_length)
        except ValueError as e:
            raise ConfigurationError(f"{ENV_MIN_LENGTH} must be an integer, got '{env_min_length}'.") from e

    return CodecSettings(
        alphabet=alphabet,
        min_length=min_length,
        integer_bits=get_config_value(config, SECTION, 'integer_bits',
                                      fallback=defaults.integer_bits, value_type=int),
        use_default_blocklist=get_config_value(config, SECTION, 'use_default_blocklist',
                                               fallback=defaults.use_default_blocklist,
                                               value_type=bool),
        blocklist_file=get_config_value(config, SECTION, 'blocklist_file', fallback=None) or None,
        extra_blocked_words=get_config_list(config, SECTION, 'extra_blocked_words'),
    )


def resolve_blocklist(settings: CodecSettings) -> List[str]:
    """Combines the default list, the blocklist file and the extra words."""
    words = []
    if settings.use_default_blocklist:
        words.extend(DEFAULT_BLOCKLIST)
    if settings.blocklist_file:
        words.extend(read_blocklist_file(settings.blocklist_file))
    words.extend(settings.extra_blocked_words)
    return words


def build_codec(config=None, **overrides) -> IdCodec:
    """
    Creates an IdCodec from the project configuration.

    Args:
        config (configparser.ConfigParser, optional): Defaults to APP_CONFIG.
        **overrides: Any CodecSettings field. None values are ignored so that
            unset command-line options fall through to the configuration.

    Raises:
        ConfigurationError: If the resolved settings are invalid.
    """
    settings = load_codec_settings(config)
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        settings = replace(settings, **overrides)

    logger.debug(f"Building codec with settings: {settings}")
    return IdCodec(
        alphabet=settings.alphabet,
        min_length=settings.min_length,
        blocklist=resolve_blocklist(settings),
        max_value=max_value_for_bits(settings.integer_bits),
    )

# === End of src/codec_settings.py ===
