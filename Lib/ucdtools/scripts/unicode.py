#!/usr/bin/env python3
# Copyright 2026 The UCD Tools Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Study Unicode characters.

Convert between characters and code points, and describe characters from
the Unicode Character Database (UnicodeData.txt).

Usage:

# Characters for hex code points, or a table for a range
$ ucdtools unicode 263a
$ ucdtools unicode 2190-21ff

# Code points of some characters
$ ucdtools unicode héllo

# Find characters by name
$ ucdtools unicode -g 'greek small letter (alpha|omega)$'

# Describe characters
$ ucdtools unicode -d ☺
$ ucdtools unicode -U 01c5

Without -n or -c the arguments are sniffed: if they consist of hex digits
and at most one "-", they are code points, otherwise characters.
"""
import logging
import sys
from argparse import RawDescriptionHelpFormatter

from ucdtools.argparse import UCDArgumentParser
from ucdtools.database import DATABASE_ENV, DatabaseCache, find_database
from ucdtools.errors import Error, UsageError
from ucdtools.interpret import Configuration, interpret
from ucdtools.logging import setup_logging
from ucdtools.render import render

log = logging.getLogger(__name__)


def build_parser():
    parser = UCDArgumentParser(
        prog="ucdtools unicode",
        description=__doc__,
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-n",
        dest="numeric",
        action="store_true",
        help="args are characters; output hex (23 or 23-44)",
    )
    parser.add_argument(
        "-c",
        dest="char",
        action="store_true",
        help="args are hex; output characters (xyz)",
    )
    parser.add_argument(
        "-t",
        dest="text",
        action="store_true",
        help="output plain text, not one char per line",
    )
    parser.add_argument(
        "-d",
        dest="describe_simple",
        action="store_true",
        help="describe the characters from the Unicode database, in simple form",
    )
    parser.add_argument(
        "-u",
        dest="describe_unicode",
        action="store_true",
        help="describe the characters from the Unicode database, in Unicode form",
    )
    parser.add_argument(
        "-U",
        dest="describe_full",
        action="store_true",
        help="describe the characters from the Unicode database, in glorious detail",
    )
    parser.add_argument(
        "-g",
        dest="grep",
        action="store_true",
        help="args are regular expressions for matching names",
    )
    parser.add_argument(
        "--database",
        help="Path to UnicodeData.txt, or a directory containing it. "
        "Defaults to $%s, then the system Unicode data directories"
        % DATABASE_ENV,
    )
    parser.add_argument("args", nargs="*", metavar="ARG")
    return parser


def run(args, config, cache, database_path=None):
    """Interpret args for config and return the formatted output."""
    db = None

    def database():
        nonlocal db
        if db is None:
            db = cache.get(find_database(database_path))
        return db

    codepoints, config = interpret(args, config, database)
    return render(codepoints, config, database)


def main(args=None):
    parser = build_parser()
    args = parser.parse_args(args)
    setup_logging("ucdtools.unicode", args, __name__)

    cache = DatabaseCache()
    try:
        output = run(
            args.args, Configuration.from_args(args), cache, args.database
        )
    except UsageError as e:
        log.debug(e)
        parser.print_help(sys.stderr)
        sys.exit(2)
    except Error as e:
        if args.show_tracebacks:
            raise
        log.fatal(e)
        sys.exit(2)
    sys.stdout.write(output)


if __name__ == "__main__":
    main()
