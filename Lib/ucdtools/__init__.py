"""Tools for studying Unicode characters with the Unicode Character Database."""
from ucdtools._version import version as __version__
