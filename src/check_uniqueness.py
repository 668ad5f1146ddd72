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
# Filename: src/check_uniqueness.py

"""
Sweeps a contiguous range of numbers through the codec and verifies that
every ID is distinct and decodes back to its input.

This is a one-off verification and throughput utility, useful after changing
the alphabet or blocklist in config.ini. The script operates by:
1.  Building the codec from the project configuration (plus any overrides).
2.  Encoding each value in [start, start + count), optionally repeated
    several times per ID and optionally padded to the full alphabet length.
3.  Decoding every ID and comparing it with the input.
4.  Reporting collisions, round-trip failures and the encode/decode rate.

Example:
    pdm run check-uniqueness --start 100000000 --count 1000000 --numbers-per-id 5
"""

import argparse
import logging
import os
import sys
import time
from dataclasses import dataclass, field
from typing import List, Tuple

from colorama import Fore, init
from tqdm import tqdm

from id_encoder import IdCodec, IdCodecError

# Initialize colorama
init(autoreset=True)

MAX_REPORTED_FAILURES = 10


@dataclass
class UniquenessReport:
    """Outcome of a uniqueness sweep."""
    start: int
    count: int
    numbers_per_id: int
    unique_ids: int = 0
    collisions: List[Tuple[str, int]] = field(default_factory=list)
    round_trip_failures: List[Tuple[int, str]] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def passed(self) -> bool:
        return self.unique_ids == self.count and not self.round_trip_failures

    @property
    def ids_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.count / self.elapsed_seconds


def run_uniqueness_check(codec: IdCodec, start: int = 0, count: int = 1_000_000,
                         numbers_per_id: int = 1, show_progress: bool = True) -> UniquenessReport:
    """
    Encodes and decodes every value in the range and records any problems.

    Only the first few collisions and round-trip failures are kept in the
    report; the counts stay exact.
    """
    report = UniquenessReport(start=start, count=count, numbers_per_id=numbers_per_id)
    first_seen = {}

    began = time.perf_counter()
    for value in tqdm(range(start, start + count), desc="Checking IDs", ncols=80,
                      disable=not show_progress):
        numbers = [value] * numbers_per_id
        sqid = codec.encode(numbers)

        if sqid in first_seen:
            if len(report.collisions) < MAX_REPORTED_FAILURES:
                report.collisions.append((sqid, value))
        else:
            first_seen[sqid] = value

        if codec.decode(sqid) != numbers and len(report.round_trip_failures) < MAX_REPORTED_FAILURES:
            report.round_trip_failures.append((value, sqid))
    report.elapsed_seconds = time.perf_counter() - began
    report.unique_ids = len(first_seen)

    logging.debug(f"Checked {count} values in {report.elapsed_seconds:.2f}s.")
    return report


def print_report(report: UniquenessReport):
    """Prints a coloured summary of a sweep."""
    end = report.start + report.count - 1
    print(f"\n{Fore.YELLOW}--- Uniqueness Check: [{report.start}, {end}] x{report.numbers_per_id} ---")
    print(f"IDs generated:   {report.count}")
    print(f"Distinct IDs:    {report.unique_ids}")
    print(f"Throughput:      {report.ids_per_second:,.0f} IDs/s")

    for sqid, value in report.collisions:
        print(f"{Fore.RED}  Collision: '{sqid}' produced again by {value}")
    for value, sqid in report.round_trip_failures:
        print(f"{Fore.RED}  Round-trip failure: {value} -> '{sqid}'")

    if report.passed:
        print(f"{Fore.GREEN}PASS: every ID is unique and decodes correctly.")
    else:
        print(f"{Fore.RED}FAIL: {report.count - report.unique_ids} collision(s), "
              f"{len(report.round_trip_failures)} round-trip failure(s) reported.")


def main(argv=None) -> int:
    """Parses arguments, runs the sweep and prints the report."""
    parser = argparse.ArgumentParser(
        description="Verifies that a range of numbers encodes to unique, reversible IDs.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--start", type=int, default=0, help="First value of the range.")
    parser.add_argument("--count", type=int, default=1_000_000, help="Number of values to check.")
    parser.add_argument("--numbers-per-id", type=int, default=1,
                        help="How many times each value is repeated inside one ID.")
    parser.add_argument("--max-padding", action="store_true",
                        help="Pad every ID to the full alphabet length.")
    parser.add_argument("--alphabet", help="Alphabet to use. Overrides config.ini.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    parser.add_argument("--sandbox-path", help="Specify a sandbox directory for all file operations.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=f"{Fore.YELLOW}%(levelname)s:{Fore.RESET} %(message)s")

    if args.count <= 0 or args.numbers_per_id <= 0:
        print(f"{Fore.RED}ERROR: --count and --numbers-per-id must be positive.", file=sys.stderr)
        return 1

    if args.sandbox_path:
        os.environ['PROJECT_SANDBOX_PATH'] = os.path.abspath(args.sandbox_path)

    # Imported late so that the sandbox path is in place first.
    from config_loader import load_app_config
    from codec_settings import build_codec, load_codec_settings

    config = load_app_config()
    try:
        min_length = None
        if args.max_padding:
            min_length = len(args.alphabet or load_codec_settings(config).alphabet)
        codec = build_codec(config, alphabet=args.alphabet, min_length=min_length)

        print(f"\n{Fore.YELLOW}--- Checking {args.count:,} values starting at {args.start} ---")
        report = run_uniqueness_check(codec, start=args.start, count=args.count,
                                      numbers_per_id=args.numbers_per_id,
                                      show_progress=not args.no_progress)
    except IdCodecError as e:
        print(f"{Fore.RED}ERROR: {e}", file=sys.stderr)
        return 1

    print_report(report)
    return 0 if report.passed else 1


if __name__ == "__main__":
    sys.exit(main())

# === End of src/check_uniqueness.py ===
