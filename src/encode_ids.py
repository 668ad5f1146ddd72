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
# Filename: src/encode_ids.py

"""
Command-line front end for the ID codec.

Encodes numbers into IDs or decodes IDs back into numbers, using the codec
settings from config.ini unless overridden on the command line. Results go to
stdout, one per line, so the script can be used from shell pipelines.

Examples:
    # One ID for the whole list
    pdm run encode encode 1 2 3

    # One ID per number, padded to at least 8 characters
    pdm run encode --min-length 8 encode --each 10 11 12

    # Decode, printing space-separated numbers per ID
    pdm run encode decode 8QRLaD bV

Exit status is 0 on success and 1 if any input could not be encoded or
decoded.
"""

import argparse
import logging
import os
import sys

from colorama import Fore, init

from id_encoder import IdCodecError

# Initialize colorama
init(autoreset=True)


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=f"{Fore.YELLOW}%(levelname)s:{Fore.RESET} %(message)s",
                        force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode numbers into opaque IDs, or decode IDs back into numbers.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--alphabet", help="Alphabet to use. Overrides config.ini.")
    parser.add_argument("--min-length", type=int, help="Minimum ID length. Overrides config.ini.")
    parser.add_argument("--integer-bits", type=int, choices=(8, 16, 32, 64),
                        help="Width of the unsigned integer domain. Overrides config.ini.")
    parser.add_argument("--blocklist-file", help="Additional word list, one word per line.")
    parser.add_argument("--no-blocklist", action="store_true",
                        help="Disable the default blocklist.")
    parser.add_argument("--sandbox-path", help="Specify a sandbox directory for all file operations.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode numbers into an ID.")
    encode_parser.add_argument("numbers", nargs="+", type=int, help="Non-negative integers to encode.")
    encode_parser.add_argument("--each", action="store_true",
                               help="Encode every number into its own ID.")

    decode_parser = subparsers.add_parser("decode", help="Decode one or more IDs.")
    decode_parser.add_argument("ids", nargs="+", help="IDs to decode.")

    return parser


def run_encode(codec, numbers, each=False) -> int:
    """Prints the encoded ID(s). Returns the process exit status."""
    groups = [[num] for num in numbers] if each else [numbers]
    for group in groups:
        try:
            print(codec.encode(group))
        except IdCodecError as e:
            print(f"{Fore.RED}ERROR: {e}", file=sys.stderr)
            return 1
    return 0


def run_decode(codec, ids) -> int:
    """Prints the decoded numbers for each ID. Returns the process exit status."""
    status = 0
    for sqid in ids:
        numbers = codec.decode(sqid)
        if not numbers:
            print(f"{Fore.YELLOW}WARNING: '{sqid}' is not a valid ID.", file=sys.stderr)
            status = 1
            continue
        print(" ".join(str(num) for num in numbers))
    return status


def main(argv=None) -> int:
    """Parses arguments, builds the codec and runs the requested command."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.sandbox_path:
        os.environ['PROJECT_SANDBOX_PATH'] = os.path.abspath(args.sandbox_path)

    # Imported late so that the sandbox path is in place first.
    from config_loader import load_app_config, load_env_vars
    from codec_settings import build_codec

    load_env_vars()
    try:
        codec = build_codec(
            load_app_config(),
            alphabet=args.alphabet,
            min_length=args.min_length,
            integer_bits=args.integer_bits,
            blocklist_file=args.blocklist_file,
            use_default_blocklist=False if args.no_blocklist else None,
        )
    except IdCodecError as e:
        print(f"{Fore.RED}ERROR: Invalid codec configuration: {e}", file=sys.stderr)
        return 1

    if args.command == "encode":
        return run_encode(codec, args.numbers, each=args.each)
    return run_decode(codec, args.ids)


if __name__ == "__main__":
    sys.exit(main())

# === End of src/encode_ids.py ===
