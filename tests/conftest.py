import os

import pytest

CWD = os.path.dirname(__file__)
DATA_DIR = os.path.join(CWD, "data")

# Two records, as given to the database loader.
TWO_LINE_DATABASE = (
    "0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;\n"
    "0042;LATIN CAPITAL LETTER B;Lu;0;L;;;;;N;;;;0062;\n"
)


@pytest.fixture
def ucd_path():
    return os.path.join(DATA_DIR, "UnicodeData.txt")


@pytest.fixture
def db(ucd_path):
    from ucdtools.database import UnicodeDatabase

    return UnicodeDatabase.from_path(ucd_path)


@pytest.fixture
def two_line_db():
    from ucdtools.database import load

    return load(TWO_LINE_DATABASE)
