#!/usr/bin/env python3
# -*- coding: utf-8 -*-
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
# Filename: tests/conftest.py

import sys
import os

import pytest

# Add the 'src' directory to the Python path so tests can import modules
# like 'id_encoder' and 'codec_settings' directly.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(project_root, 'src')

if src_path not in sys.path:
    sys.path.insert(0, src_path)


def pytest_addoption(parser):
    """Adds the --run-slow command-line option to pytest."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run the million-value uniqueness sweeps.",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --run-slow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keeps developer .env overrides and sandbox settings out of the tests."""
    for name in ("IDCODEC_ALPHABET", "IDCODEC_MIN_LENGTH",
                 "PROJECT_SANDBOX_PATH", "PROJECT_CONFIG_OVERRIDE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def default_codec():
    """A codec with the default alphabet, no minimum length and the default blocklist."""
    from id_encoder import IdCodec
    return IdCodec()

# === End of tests/conftest.py ===
