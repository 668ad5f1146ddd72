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
# Filename: src/config_loader.py

"""
Project Configuration Loader (config_loader.py)

Loads the project's settings once, at import time, and exposes typed access
helpers. The codec itself never reads configuration; the command-line tools
and `codec_settings.py` do.

Key Features:
-   **Loads `config.ini`**: Parsed into the global `APP_CONFIG` object. The
    file is located at the project root, or at the path given in the
    `PROJECT_CONFIG_OVERRIDE` environment variable.
-   **Loads `.env`**: Environment overrides such as `IDCODEC_ALPHABET` can be
    kept in a `.env` file at the project root.
-   **Typed Retrieval**: `get_config_value()` converts to str, int, float or
    bool, strips inline comments and falls back gracefully.
-   **Sandboxing**: `get_path()` resolves project-relative paths against
    `PROJECT_SANDBOX_PATH` when it is set, so tests never touch real files.

Usage by other scripts:
    from config_loader import APP_CONFIG, get_config_value

    min_length = get_config_value(APP_CONFIG, 'Codec', 'min_length',
                                  fallback=0, value_type=int)
"""

import configparser
import logging
import os
import pathlib
from dotenv import load_dotenv

CONFIG_FILENAME = "config.ini"
DOTENV_FILENAME = ".env"

# Give this module's messages a destination even before the caller configures logging.
logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def get_project_root() -> str:
    """
    Determines the project root by searching upwards for pyproject.toml.

    Falls back to the current working directory when the modules run from an
    installed copy that has no pyproject.toml above it.
    """
    current_path = pathlib.Path(__file__).resolve()
    while current_path != current_path.parent:
        if (current_path / "pyproject.toml").exists():
            return str(current_path)
        current_path = current_path.parent
    return os.getcwd()


PROJECT_ROOT = get_project_root()


def get_sandbox_path() -> str | None:
    """Returns the path to the current sandbox, or None if not in a sandbox."""
    return os.getenv('PROJECT_SANDBOX_PATH')


def get_path(relative_path: str) -> str:
    """
    Resolves a path relative to the sandbox or project root.

    Absolute paths are returned unchanged.
    """
    if os.path.isabs(relative_path):
        return relative_path
    sandbox_path = get_sandbox_path()
    if sandbox_path:
        return os.path.join(sandbox_path, relative_path)
    return os.path.join(PROJECT_ROOT, relative_path)


def load_app_config() -> configparser.ConfigParser:
    """Reads config.ini (or the override file) into a new ConfigParser."""
    # No interpolation: alphabets may legitimately contain "%".
    config = configparser.ConfigParser(interpolation=None)

    override_path = os.getenv('PROJECT_CONFIG_OVERRIDE')
    if override_path and os.path.exists(override_path):
        config_path = override_path
        logger.debug(f"Using override config from env var: {config_path}")
    else:
        config_path = get_path(CONFIG_FILENAME)

    if not os.path.exists(config_path):
        logger.debug(f"{CONFIG_FILENAME} not found at {config_path}. Using built-in defaults.")
        return config

    try:
        # 'utf-8-sig' tolerates a BOM written by Windows editors.
        config.read(config_path, encoding='utf-8-sig')
        logger.debug(f"Loaded configuration from: {config_path}")
    except configparser.Error as e:
        logger.error(f"Error parsing configuration file {config_path}: {e}")
    return config


def load_env_vars() -> bool:
    """Loads environment variables from the .env file at the project root, if any."""
    dotenv_path = get_path(DOTENV_FILENAME)
    if not os.path.exists(dotenv_path):
        logger.debug(f".env file not found at {dotenv_path}.")
        return False
    if load_dotenv(dotenv_path):
        logger.debug(f"Loaded .env file from: {dotenv_path}")
        return True
    logger.warning(f"Found .env file at {dotenv_path}, but it may be empty or failed to load.")
    return False


def _strip_inline_comment(raw_value: str) -> str:
    cleaned = raw_value
    for comment_char in (';', '#'):
        if comment_char in cleaned:
            cleaned = cleaned.split(comment_char, 1)[0]
    return cleaned.strip()


def get_config_value(config: configparser.ConfigParser, section: str, key: str,
                     fallback=None, value_type=str, strip_comments=True):
    """
    Gets a typed value from a ConfigParser, with a fallback.

    Inline comments (`; ...` or `# ...`) are stripped before conversion unless
    `strip_comments` is False, which is needed for values such as alphabets
    that may contain those characters. The literal string "none" reads as
    None for str values.

    Args:
        config (configparser.ConfigParser): The loaded config object.
        section (str): The section name in the INI file.
        key (str): The key name in the section.
        fallback: Returned when the key is missing or conversion fails.
        value_type (type): One of str, int, float or bool.
        strip_comments (bool): Whether to strip inline comments.

    Returns:
        The configured value converted to value_type, or the fallback.
    """
    if not config.has_option(section, key):
        return fallback

    raw_value = config.get(section, key)
    cleaned_value = _strip_inline_comment(raw_value) if strip_comments else raw_value.strip()

    if value_type is str:
        return None if cleaned_value.lower() == 'none' else cleaned_value

    if value_type is bool:
        # Same vocabulary as ConfigParser.getboolean (yes/no, on/off, 1/0, true/false).
        lowered = cleaned_value.lower()
        if lowered in config.BOOLEAN_STATES:
            return config.BOOLEAN_STATES[lowered]
        logger.warning(f"Config: [{section}]/{key} value '{raw_value}' is not a boolean. "
                       f"Using fallback: {fallback}")
        return fallback

    if value_type in (int, float):
        try:
            return value_type(cleaned_value)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"to {value_type.__name__}. Using fallback: {fallback}")
            return fallback

    logger.error(f"Config: Unsupported value_type '{value_type.__name__}' for key '{key}'. Using fallback.")
    return fallback


def get_config_list(config, section, key, fallback=None):
    """
    Retrieves a comma-separated value as a list of stripped, non-empty strings.
    """
    value_str = get_config_value(config, section, key, fallback=None)
    if value_str is None:
        return list(fallback) if fallback is not None else []
    return [item.strip() for item in value_str.split(',') if item.strip()]


# Global config object, loaded once
APP_CONFIG = load_app_config()
ENV_LOADED = load_env_vars()

# === End of src/config_loader.py ===
