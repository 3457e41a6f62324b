# textascii/codec/decode.py
from __future__ import annotations

from typing import Optional, Union

from .format import INLINE_MAX_LEN, RECORD_SIZE, UNKNOWN_OFFSET, Tables
from .tables import load_tables

__all__ = ["decode_char", "decode_codepoint"]


def decode_codepoint(codepoint: int, tables: Tables) -> Optional[str]:
    """
    Look up the ASCII replacement of one codepoint.

    One record read, then either the inline characters or one bounds-checked
    slice of the mapping pool.

    :returns: The replacement (possibly empty), or None when the codepoint is
              outside the table or has no known transliteration.
    """
    pointers = tables.pointers
    pos = codepoint * RECORD_SIZE
    if codepoint < 0 or pos + RECORD_SIZE > len(pointers):
        return None

    length = pointers[pos + 2]
    if length <= INLINE_MAX_LEN:
        return pointers[pos : pos + length].decode("ascii")

    offset = pointers[pos] | (pointers[pos + 1] << 8)
    if offset == UNKNOWN_OFFSET:
        return None
    end = offset + length
    if end > len(tables.pool):
        return None
    return tables.pool[offset:end]


def decode_char(
    ch: Union[str, int],
    *,
    tables: Tables | None = None,
) -> Optional[str]:
    """
    Transliterate a single character.

    Examples::

        decode_char("Æ")  # "AE"
        decode_char("北")  # "Bei "

    :param ch: A one-character string or an integer codepoint.
    :param tables: Tables to decode with; defaults to the process-wide ones.
    :returns: The replacement, or None for an unknown character. An empty
              string means the character is intentionally dropped.
    """
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {len(ch)}")
        codepoint = ord(ch)
    elif isinstance(ch, int) and not isinstance(ch, bool):
        codepoint = ch
    else:
        raise TypeError(f"expected str or int, got {type(ch).__name__}")

    if tables is None:
        tables = load_tables()
    return decode_codepoint(codepoint, tables)
