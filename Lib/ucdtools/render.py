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
"""Format code points as hex, characters, text or database descriptions."""
from __future__ import annotations
from typing import Callable, Optional, Sequence

from ucdtools.database import RECORD_LABELS, Record, UnicodeDatabase
from ucdtools.errors import SchemaMismatch
from ucdtools.interpret import Configuration

SIMPLE = "simple"
UNICODE = "unicode"
FULL = "full"

REPLACEMENT_CHARACTER = "\ufffd"


def encodable(codepoint: int) -> bool:
    return 0 <= codepoint <= 0x10FFFF and not 0xD800 <= codepoint <= 0xDFFF


def glyph(codepoint: int) -> str:
    """The character for codepoint, or U+FFFD if it cannot be encoded."""
    if encodable(codepoint):
        return chr(codepoint)
    return REPLACEMENT_CHARACTER


def unicode_notation(codepoint: int) -> str:
    """U+0041 'A'. The quoted character is left out if it isn't printable."""
    notation = "U+%04X" % codepoint
    if encodable(codepoint) and chr(codepoint).isprintable():
        notation += " '%s'" % chr(codepoint)
    return notation


def render_plain(codepoints: Sequence[int], config: Configuration) -> str:
    out = []
    for i, codepoint in enumerate(codepoints):
        if config.range_output:
            out.append("%04x %s" % (codepoint, glyph(codepoint)))
            out.append("\n" if i % 4 == 3 else "\t")
        elif config.char:
            out.append(glyph(codepoint) + "\n")
        elif config.numeric:
            out.append("%04x\n" % codepoint)
    text = "".join(out)
    if text and not text.endswith("\n"):
        text += "\n"
    return text


def render_text(codepoints: Sequence[int]) -> str:
    return "".join(glyph(c) for c in codepoints) + "\n"


def describe_simple(value: str) -> str:
    fields = value.lower().split(";")
    desc = fields[0]
    if len(fields) > 9 and fields[9]:
        desc += "; " + fields[9]
    return desc


def dump_full(value: str) -> str:
    """One line per non-empty field, each after the first indented by a tab.

    A value with the wrong number of fields gives a single error line.
    """
    if not value:
        return "\n"
    try:
        record = Record.from_value(value)
    except SchemaMismatch as e:
        return "%s\n" % e
    out = []
    for i, (label, field) in enumerate(zip(RECORD_LABELS, record)):
        if not field:
            continue
        if i > 0:
            out.append("\t")
        out.append("%s%s\n" % (label, field))
    return "".join(out)


def render_description(
    codepoints: Sequence[int], db: UnicodeDatabase, detail: str = SIMPLE
) -> str:
    out = []
    for codepoint in codepoints:
        value = db.lookup(codepoint)
        notation = unicode_notation(codepoint)
        if detail == FULL:
            out.append("%s %s" % (notation, dump_full(value)))
        elif detail == UNICODE:
            out.append("%s %s\n" % (notation, value))
        else:
            out.append("%s %s\n" % (notation, describe_simple(value)))
    return "".join(out)


def detail_level(config: Configuration) -> Optional[str]:
    if config.describe_full:
        return FULL
    if config.describe_unicode:
        return UNICODE
    if config.describe_simple:
        return SIMPLE
    return None


def render(
    codepoints: Sequence[int],
    config: Configuration,
    database: Callable[[], UnicodeDatabase],
) -> str:
    """Format codepoints for config. Descriptions win over -t, which wins
    over one entry per line. database is only called for descriptions.
    """
    detail = detail_level(config)
    if detail is not None:
        return render_description(codepoints, database(), detail)
    if config.text:
        return render_text(codepoints)
    return render_plain(codepoints, config)
