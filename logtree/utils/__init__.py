"""Lookup tables for tree rendering."""

from .ansi import PALETTE, UnknownColorError, background, foreground
from .charsets import CHAR_SETS, DEFAULT_CHAR_SET, CharSet, UnknownCharSetError, get_char_set

__all__ = [
    "PALETTE",
    "UnknownColorError",
    "background",
    "foreground",
    "CHAR_SETS",
    "DEFAULT_CHAR_SET",
    "CharSet",
    "UnknownCharSetError",
    "get_char_set",
]
