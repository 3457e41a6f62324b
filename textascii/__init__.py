"""
textascii: transliterate Unicode text into printable ASCII.

    from textascii import transliterate

    transliterate("Æneid")  # "AEneid"
"""

from .codec.assemble import (
    AsciiChars,
    iter_chunks,
    transliterate,
    transliterate_lines,
    transliterate_with_placeholder,
)
from .codec.decode import decode_char

__all__ = [
    "AsciiChars",
    "decode_char",
    "iter_chunks",
    "transliterate",
    "transliterate_lines",
    "transliterate_with_placeholder",
]
