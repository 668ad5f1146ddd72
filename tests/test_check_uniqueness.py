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
# Filename: tests/test_check_uniqueness.py

"""
Tests for the uniqueness sweep, plus the million-value sweeps themselves.

The sweeps are marked slow; run them with `pdm run test-all`.
"""
import pytest

import check_uniqueness
from check_uniqueness import MAX_REPORTED_FAILURES, UniquenessReport, run_uniqueness_check
from id_encoder import DEFAULT_ALPHABET, IdCodec


class ConstantCodec:
    """A deliberately broken codec that maps everything to the same ID."""

    def encode(self, numbers):
        return "same"

    def decode(self, sqid):
        return []


@pytest.fixture
def sandbox(tmp_path, monkeypatch):
    monkeypatch.setenv("PROJECT_SANDBOX_PATH", str(tmp_path))
    return tmp_path


class TestRunUniquenessCheck:
    """Behaviour of the sweep itself on small ranges."""

    def test_small_range_passes(self, default_codec):
        report = run_uniqueness_check(default_codec, start=0, count=10_000, show_progress=False)
        assert report.passed
        assert report.unique_ids == 10_000
        assert report.collisions == []
        assert report.round_trip_failures == []
        assert report.elapsed_seconds > 0

    def test_repeated_numbers_per_id(self, default_codec):
        report = run_uniqueness_check(default_codec, start=500, count=2_000, numbers_per_id=3,
                                      show_progress=False)
        assert report.passed

    def test_broken_codec_is_reported(self):
        report = run_uniqueness_check(ConstantCodec(), start=0, count=50, show_progress=False)
        assert not report.passed
        assert report.unique_ids == 1
        assert len(report.collisions) == MAX_REPORTED_FAILURES
        assert len(report.round_trip_failures) == MAX_REPORTED_FAILURES
        assert report.collisions[0] == ("same", 1)

    def test_ids_per_second(self):
        report = UniquenessReport(start=0, count=100, numbers_per_id=1, elapsed_seconds=2.0)
        assert report.ids_per_second == 50.0
        assert UniquenessReport(start=0, count=100, numbers_per_id=1).ids_per_second == 0.0


def test_print_report(capsys):
    report = run_uniqueness_check(ConstantCodec(), start=0, count=3, show_progress=False)
    check_uniqueness.print_report(report)
    out = capsys.readouterr().out
    assert "Collision: 'same' produced again by 1" in out
    assert "FAIL" in out


class TestMain:
    """The check-uniqueness command line."""

    def test_passing_sweep(self, sandbox, capsys):
        code = check_uniqueness.main(["--count", "300", "--no-progress", "--sandbox-path", str(sandbox)])
        assert code == 0
        assert "PASS" in capsys.readouterr().out

    def test_max_padding(self, sandbox, capsys):
        code = check_uniqueness.main(["--count", "100", "--max-padding", "--no-progress",
                                      "--sandbox-path", str(sandbox)])
        assert code == 0
        assert "PASS" in capsys.readouterr().out

    @pytest.mark.parametrize("option", ["--count", "--numbers-per-id"])
    def test_non_positive_arguments(self, sandbox, capsys, option):
        code = check_uniqueness.main([option, "0", "--sandbox-path", str(sandbox)])
        assert code == 1
        assert "must be positive" in capsys.readouterr().err

    def test_invalid_alphabet(self, sandbox, capsys):
        code = check_uniqueness.main(["--count", "10", "--alphabet", "abc", "--no-progress",
                                      "--sandbox-path", str(sandbox)])
        assert code == 1
        assert "ERROR" in capsys.readouterr().err


@pytest.mark.slow
class TestMillionValueSweeps:
    """Every ID in a million-value range is distinct and decodes back."""

    COUNT = 1_000_000

    def test_low_range(self, default_codec):
        report = run_uniqueness_check(default_codec, start=0, count=self.COUNT, show_progress=False)
        assert report.passed, report.collisions or report.round_trip_failures

    def test_high_range(self, default_codec):
        report = run_uniqueness_check(default_codec, start=100_000_000, count=self.COUNT,
                                      show_progress=False)
        assert report.passed, report.collisions or report.round_trip_failures

    def test_five_numbers_per_id(self, default_codec):
        report = run_uniqueness_check(default_codec, start=0, count=self.COUNT, numbers_per_id=5,
                                      show_progress=False)
        assert report.passed, report.collisions or report.round_trip_failures

    def test_max_padding(self):
        codec = IdCodec(min_length=len(DEFAULT_ALPHABET))
        report = run_uniqueness_check(codec, start=0, count=self.COUNT, show_progress=False)
        assert report.passed, report.collisions or report.round_trip_failures

# === End of tests/test_check_uniqueness.py ===
