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
"""Objects to work with the UnicodeData.txt file of the Unicode Character
Database.

Each line of the file is a code point in hex, a separator (";" or a tab)
and a semicolon delimited list of fourteen properties:

    0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;

https://www.unicode.org/reports/tr44/#UnicodeData.txt
"""
from __future__ import annotations
import collections
import logging
import os
import re
from functools import cached_property
from pathlib import Path
from typing import Optional

from ucdtools.errors import DatabaseError, ParseError, SchemaMismatch

log = logging.getLogger(__name__)

DATABASE_FILENAME = "UnicodeData.txt"
DATABASE_ENV = "UCDTOOLS_DATA"
DEFAULT_SEARCH_ROOTS = (
    "/usr/share/unicode",
    "/usr/share/unicode-data",
    "/usr/local/share/unicode",
    "~/.local/share/unicode",
)

# Code points are parsed as 22 bit signed integers.
MAX_CODEPOINT = (1 << 21) - 1
_HEX_RE = re.compile(r"\+?[0-9a-fA-F]+")


def parse_codepoint(token: str) -> int:
    """Parse a hex string such as "41", "+41" or "1F600" into a code point.

    A leading "-" is rejected: negative code points are meaningless.

    Raises:
      ParseError: if the token is not hex or does not fit in 22 bits.
    """
    if not _HEX_RE.fullmatch(token):
        raise ParseError("parsing %r: invalid syntax" % token)
    codepoint = int(token, 16)
    if codepoint > MAX_CODEPOINT:
        raise ParseError("parsing %r: value out of range" % token)
    return codepoint


RECORD_FIELDS = (
    "name",
    "category",
    "combining_class",
    "bidi_category",
    "decomposition",
    "decimal_digit",
    "digit",
    "numeric",
    "mirrored",
    "unicode_1_name",
    "iso_comment",
    "uppercase",
    "lowercase",
    "titlecase",
)

# Labels used when dumping a record, in field order. The name is unlabelled.
RECORD_LABELS = (
    "",
    "category: ",
    "canonical combining classes: ",
    "bidirectional category: ",
    "character decomposition mapping: ",
    "decimal digit value: ",
    "digit value: ",
    "numeric value: ",
    "mirrored: ",
    "Unicode 1.0 name: ",
    "10646 comment field: ",
    "uppercase mapping: ",
    "lowercase mapping: ",
    "titlecase mapping: ",
)


class Record(collections.namedtuple("Record", RECORD_FIELDS)):
    """The fourteen properties of one UnicodeData.txt line."""

    __slots__ = ()

    @classmethod
    def from_value(cls, value: str) -> "Record":
        """Split a record value on ";".

        Raises:
          SchemaMismatch: if the value does not hold exactly fourteen fields.
        """
        fields = value.split(";")
        if len(fields) != len(cls._fields):
            raise SchemaMismatch(value, len(cls._fields), len(fields))
        return cls(*fields)


Entry = collections.namedtuple("Entry", ["codepoint", "key", "value"])


def split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    # A final newline leaves an empty last line; drop it.
    if lines and not lines[-1]:
        lines.pop()
    return lines


def parse_line(lineno: int, line: str) -> Entry:
    sep = re.search(r"[\t;]", line)
    if sep is None:
        raise DatabaseError("malformed database: line %d" % lineno)
    key = line[: sep.start()]
    return Entry(parse_codepoint(key), key, line[sep.end() :])


class UnicodeDatabase:
    """An index from code point to UnicodeData.txt record value.

    The text is only split into lines on construction; lines are parsed and
    indexed on first lookup or search.
    """

    def __init__(self, text: str, source: Optional[str] = None):
        self.lines = split_lines(text)
        self.source = source or "<string>"

    @classmethod
    def from_path(cls, path: "str | Path") -> "UnicodeDatabase":
        with open(path, encoding="utf-8") as doc:
            return cls(doc.read(), source=str(path))

    @cached_property
    def entries(self) -> list[Entry]:
        """Every line parsed as an Entry, in file order.

        Raises:
          DatabaseError: if any line lacks a separator or has a non-hex key.
        """
        entries = []
        for lineno, line in enumerate(self.lines):
            try:
                entries.append(parse_line(lineno, line))
            except ParseError as e:
                raise DatabaseError(
                    "malformed database: line %d: %s" % (lineno, e)
                ) from e
        log.debug("Indexed %d records from %s", len(entries), self.source)
        return entries

    @cached_property
    def _index(self) -> dict[int, str]:
        return {entry.codepoint: entry.value for entry in self.entries}

    def lookup(self, codepoint: int) -> str:
        """Returns the record value for codepoint, or "" if it is unassigned."""
        return self._index.get(codepoint, "")

    def __len__(self) -> int:
        return len(self.lines)


def load(text: str) -> UnicodeDatabase:
    return UnicodeDatabase(text)


def search_roots() -> list[Path]:
    roots = []
    for data_dir in os.environ.get("XDG_DATA_DIRS", "").split(os.pathsep):
        if data_dir:
            roots.append(Path(data_dir) / "unicode")
    roots.extend(Path(p).expanduser() for p in DEFAULT_SEARCH_ROOTS)
    return roots


def find_database(path: "str | Path | None" = None) -> Path:
    """Locate UnicodeData.txt.

    An explicit path wins, then the UCDTOOLS_DATA environment variable
    (a file, or a directory holding UnicodeData.txt), then the search roots.

    Raises:
      DatabaseError: if no database file can be found.
    """
    if path is None and os.environ.get(DATABASE_ENV):
        path = os.environ[DATABASE_ENV]
    if path is not None:
        path = Path(path)
        if path.is_dir():
            path = path / DATABASE_FILENAME
        if not path.is_file():
            raise DatabaseError("Unicode database not found: %s" % path)
        return path
    for root in search_roots():
        candidate = root / DATABASE_FILENAME
        if candidate.is_file():
            log.debug("Found %s", candidate)
            return candidate
    raise DatabaseError(
        "Cannot find %s; use --database or set %s"
        % (DATABASE_FILENAME, DATABASE_ENV)
    )


class DatabaseCache:
    """Read-through cache of loaded databases, keyed by file identity."""

    def __init__(self):
        self._databases = {}

    @staticmethod
    def _key(path: Path):
        st = os.stat(path)
        return (st.st_dev, st.st_ino)

    def get(self, path: "str | Path") -> UnicodeDatabase:
        try:
            key = self._key(path)
        except OSError as e:
            raise DatabaseError("Cannot read %s: %s" % (path, e)) from e
        if key in self._databases:
            log.debug("Reusing database %s", path)
            return self._databases[key]
        log.info("Loading Unicode database %s", path)
        try:
            db = UnicodeDatabase.from_path(path)
        except (OSError, UnicodeDecodeError) as e:
            raise DatabaseError("Cannot read %s: %s" % (path, e)) from e
        self._databases[key] = db
        return db

    def __len__(self):
        return len(self._databases)
