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
"""Turn command line arguments into a list of code points.

Arguments are hex numbers and ranges ("41", "41-5a"), literal characters
("héllo"), or regular expressions matched against character names. Unless
-n or -c is given, the shape of the arguments decides which.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Sequence

from ucdtools.database import UnicodeDatabase, parse_codepoint
from ucdtools.errors import ParseError, UsageError

log = logging.getLogger(__name__)

HEX_ARG_CHARS = frozenset("0123456789abcdefABCDEF-")
REPLACEMENT_CODEPOINT = 0xFFFD


@dataclass(frozen=True)
class Configuration:
    numeric: bool = False
    char: bool = False
    text: bool = False
    describe_simple: bool = False
    describe_unicode: bool = False
    describe_full: bool = False
    grep: bool = False
    # Set when a hex argument was a range.
    range_output: bool = False

    @classmethod
    def from_args(cls, args):
        return cls(
            numeric=args.numeric,
            char=args.char,
            text=args.text,
            describe_simple=args.describe_simple,
            describe_unicode=args.describe_unicode,
            describe_full=args.describe_full,
            grep=args.grep,
        )

    @property
    def describe(self) -> bool:
        return self.describe_simple or self.describe_unicode or self.describe_full


def decide_mode(args: Sequence[str], config: Configuration) -> Configuration:
    """Pick between char output (args are hex) and numeric output (args are
    characters).

    An explicit -n or -c is kept. Otherwise the arguments are hex if every
    character is a hex digit or "-" and there is at most one "-" in total;
    so "1-2-3" is text, not a malformed range.

    Raises:
      UsageError: if there are no arguments.
    """
    if not args:
        raise UsageError("no arguments")
    # Grepping needs an output format; default is numeric.
    if config.grep and not (
        config.numeric or config.char or config.describe
    ):
        config = replace(config, numeric=True)
    if config.numeric or config.char:
        return config
    joined = "".join(args)
    all_digits = all(c in HEX_ARG_CHARS for c in joined)
    if all_digits and joined.count("-") <= 1:
        log.debug("Arguments look like hex, printing characters")
        return replace(config, char=True)
    log.debug("Arguments look like text, printing hex")
    return replace(config, numeric=True)


def parse_range_or_point(token: str) -> tuple[list[int], bool]:
    """Parse "41" or "41-5a".

    Returns the code points and whether the token was a range.

    Raises:
      ParseError: if either end is not hex.
      UsageError: if the range ends before it starts.
    """
    parts = token.split("-")
    if len(parts) == 2 and all(parts):
        start = parse_codepoint(parts[0])
        end = parse_codepoint(parts[1])
        if end < start:
            raise UsageError("invalid range %s" % token)
        return list(range(start, end + 1)), True
    return [parse_codepoint(token)], False


def codepoints_from_numbers(args: Iterable[str]) -> tuple[list[int], bool]:
    codepoints = []
    is_range = False
    for arg in args:
        cps, arg_is_range = parse_range_or_point(arg)
        codepoints.extend(cps)
        is_range = is_range or arg_is_range
    return codepoints, is_range


def chars_from_args(args: Sequence[str], text: bool = False) -> list[int]:
    codepoints = []
    for i, arg in enumerate(args):
        # Undecodable argv bytes arrive as lone surrogates.
        codepoints.extend(
            REPLACEMENT_CODEPOINT if 0xD800 <= ord(c) <= 0xDFFF else ord(c)
            for c in arg
        )
        # Plain text output keeps the arguments apart.
        if text and i < len(args) - 1:
            codepoints.append(ord(" "))
    return codepoints


def search_key(key: str, value: str) -> str:
    """Build the string a name pattern is matched against:
    "0041<tab>latin capital letter a" plus "; <unicode 1.0 name>" if any.
    """
    fields = value.lower().split(";")
    line = key.lower() + "\t" + fields[0]
    if len(fields) > 9 and fields[9]:
        line += "; " + fields[9]
    return line


def codepoints_from_regexp_search(
    patterns: Iterable[str], db: UnicodeDatabase
) -> list[int]:
    """Find every database entry whose name matches any of patterns.

    Matches are listed per pattern, in file order, so an entry matching two
    patterns appears twice.

    Raises:
      ParseError: if a pattern is not a valid regular expression.
    """
    codepoints = []
    for pattern in patterns:
        try:
            regexp = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise ParseError("invalid pattern %r: %s" % (pattern, e)) from e
        found = len(codepoints)
        for entry in db.entries:
            if regexp.search(search_key(entry.key, entry.value)):
                codepoints.append(entry.codepoint)
        log.debug("%r matched %d characters", pattern, len(codepoints) - found)
    return codepoints


def interpret(
    args: Sequence[str],
    config: Configuration,
    database: Callable[[], UnicodeDatabase],
) -> tuple[list[int], Configuration]:
    """Decide the mode and parse args into code points.

    database is only called when names have to be searched. Returns the code
    points and the final configuration, with range_output set if a range was
    parsed.
    """
    config = decide_mode(args, config)
    if config.grep:
        return codepoints_from_regexp_search(args, database()), config
    if config.char:
        codepoints, is_range = codepoints_from_numbers(args)
        if is_range:
            config = replace(config, range_output=True)
        return codepoints, config
    return chars_from_args(args, text=config.text), config
