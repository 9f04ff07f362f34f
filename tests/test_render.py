import pytest

from ucdtools.database import load
from ucdtools.interpret import Configuration
from ucdtools.render import (
    FULL,
    SIMPLE,
    UNICODE,
    dump_full,
    glyph,
    render,
    render_description,
    render_plain,
    render_text,
    unicode_notation,
)


@pytest.mark.parametrize(
    "codepoint,want",
    [
        (0x41, "U+0041 'A'"),
        (0x20, "U+0020 ' '"),
        (0x0A, "U+000A"),
        (0x00A0, "U+00A0"),
        (0x263A, "U+263A '☺'"),
        (0x1F600, "U+1F600 '😀'"),
        (0xFFFD, "U+FFFD '�'"),
        (0xD800, "U+D800"),
        (0x110000, "U+110000"),
    ],
)
def test_unicode_notation(codepoint, want):
    assert unicode_notation(codepoint) == want


def test_glyph_unencodable():
    assert glyph(0xDC00) == "�"
    assert glyph(0x1FFFFF) == "�"
    assert glyph(0x41) == "A"


def test_render_numeric():
    config = Configuration(numeric=True)
    assert render_plain([0x41, 0x7, 0x1F600], config) == "0041\n0007\n1f600\n"


def test_render_char():
    config = Configuration(char=True)
    assert render_plain([0x41, 0x263A], config) == "A\n☺\n"


def test_render_range_four_per_line():
    config = Configuration(char=True, range_output=True)
    got = render_plain([0x41, 0x42, 0x43, 0x44, 0x45], config)
    assert got == "0041 A\t0042 B\t0043 C\t0044 D\n0045 E\t\n"


def test_render_range_full_line():
    config = Configuration(char=True, range_output=True)
    got = render_plain([0x61, 0x62, 0x63, 0x64], config)
    assert got == "0061 a\t0062 b\t0063 c\t0064 d\n"


def test_render_plain_empty():
    assert render_plain([], Configuration(numeric=True)) == ""


def test_render_text():
    assert render_text([0x68, 0x69, 0x20, 0x263A]) == "hi ☺\n"
    assert render_text([]) == "\n"


def test_describe_simple(two_line_db):
    got = render_description([0x41], two_line_db, SIMPLE)
    assert got == "U+0041 'A' latin capital letter a\n"


def test_describe_simple_unicode_1_name(db):
    got = render_description([0x28, 0x0A], db, SIMPLE)
    assert got == (
        "U+0028 '(' left parenthesis; opening parenthesis\n"
        "U+000A <control>; line feed (lf)\n"
    )


def test_describe_absent(db):
    assert render_description([0x44], db, SIMPLE) == "U+0044 'D' \n"
    assert render_description([0x44], db, UNICODE) == "U+0044 'D' \n"
    assert render_description([0x44], db, FULL) == "U+0044 'D' \n"


def test_describe_unicode(db):
    got = render_description([0x263A], db, UNICODE)
    assert got == "U+263A '☺' WHITE SMILING FACE;So;0;ON;;;;;N;;;;;\n"


def test_describe_full(db):
    got = render_description([0x41], db, FULL)
    assert got == (
        "U+0041 'A' LATIN CAPITAL LETTER A\n"
        "\tcategory: Lu\n"
        "\tcanonical combining classes: 0\n"
        "\tbidirectional category: L\n"
        "\tmirrored: N\n"
        "\tlowercase mapping: 0061\n"
    )


def test_describe_full_every_label(db):
    got = render_description([0x01C5, 0x00BD], db, FULL)
    assert got == (
        "U+01C5 'ǅ' LATIN CAPITAL LETTER D WITH SMALL LETTER Z WITH CARON\n"
        "\tcategory: Lt\n"
        "\tcanonical combining classes: 0\n"
        "\tbidirectional category: L\n"
        "\tcharacter decomposition mapping: <compat> 0044 017E\n"
        "\tmirrored: N\n"
        "\tUnicode 1.0 name: LATIN LETTER CAPITAL D SMALL Z HACEK\n"
        "\tuppercase mapping: 01C4\n"
        "\tlowercase mapping: 01C6\n"
        "\ttitlecase mapping: 01C5\n"
        "U+00BD '½' VULGAR FRACTION ONE HALF\n"
        "\tcategory: No\n"
        "\tcanonical combining classes: 0\n"
        "\tbidirectional category: ON\n"
        "\tcharacter decomposition mapping: <fraction> 0031 2044 0032\n"
        "\tnumeric value: 1/2\n"
        "\tmirrored: N\n"
        "\tUnicode 1.0 name: FRACTION ONE HALF\n"
    )


def test_describe_full_schema_mismatch_continues():
    db = load(
        "0041;LATIN CAPITAL LETTER A;Lu\n"
        "0042;LATIN CAPITAL LETTER B;Lu;0;L;;;;;N;;;;0062;\n"
    )
    got = render_description([0x41, 0x42], db, FULL)
    assert got == (
        "U+0041 'A' LATIN CAPITAL LETTER A;Lu: can't print: "
        "expected 14 fields, got 2\n"
        "U+0042 'B' LATIN CAPITAL LETTER B\n"
        "\tcategory: Lu\n"
        "\tcanonical combining classes: 0\n"
        "\tbidirectional category: L\n"
        "\tmirrored: N\n"
        "\tlowercase mapping: 0062\n"
    )


def test_dump_full_unnamed_record():
    assert dump_full(";Cn;0;L;;;;;N;;;;;") == (
        "\tcategory: Cn\n\tcanonical combining classes: 0\n"
        "\tbidirectional category: L\n\tmirrored: N\n"
    )


@pytest.mark.parametrize(
    "config,want",
    [
        (Configuration(char=True), "A\nB\n"),
        (Configuration(char=True, text=True), "AB\n"),
        (Configuration(numeric=True), "0041\n0042\n"),
        (
            Configuration(char=True, text=True, describe_simple=True),
            "U+0041 'A' latin capital letter a\nU+0042 'B' latin capital letter b\n",
        ),
        (
            Configuration(char=True, describe_simple=True, describe_full=True),
            "U+0041 'A' LATIN CAPITAL LETTER A\n\tcategory: Lu\n"
            "\tcanonical combining classes: 0\n\tbidirectional category: L\n"
            "\tmirrored: N\n\tlowercase mapping: 0061\n"
            "U+0042 'B' LATIN CAPITAL LETTER B\n\tcategory: Lu\n"
            "\tcanonical combining classes: 0\n\tbidirectional category: L\n"
            "\tmirrored: N\n\tlowercase mapping: 0062\n",
        ),
    ],
)
def test_render_precedence(two_line_db, config, want):
    assert render([0x41, 0x42], config, lambda: two_line_db) == want


def test_render_plain_does_not_load_database():
    def no_database():
        raise AssertionError("database should not be needed")

    assert render([0x41], Configuration(char=True), no_database) == "A\n"


@pytest.mark.parametrize(
    "config",
    [
        Configuration(char=True, range_output=True),
        Configuration(numeric=True, describe_full=True),
        Configuration(numeric=True, describe_simple=True),
    ],
)
def test_render_is_repeatable(db, config):
    codepoints = [0x28, 0x41, 0x44, 0x1F600, 0x0A]
    first = render(codepoints, config, lambda: db)
    assert render(codepoints, config, lambda: db) == first
