class Error(Exception):
    """Base for ucdtools errors."""


class UsageError(Error):
    """Exception used when the command line cannot be acted upon."""


class ParseError(Error):
    """Exception used when an argument failed to parse."""


class DatabaseError(Error):
    """Exception used when the Unicode database is missing or malformed."""


class SchemaMismatch(Error):
    """Exception used when a record does not have the expected field count."""

    def __init__(self, value, expected, got):
        super().__init__(
            "%s: can't print: expected %d fields, got %d" % (value, expected, got)
        )
        self.value = value
        self.expected = expected
        self.got = got
