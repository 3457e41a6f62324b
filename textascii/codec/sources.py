# textascii/codec/sources.py
from __future__ import annotations

import unicodedata
from typing import Iterator, List, Optional, Tuple

from unidecode import unidecode_expect_nonascii

from .mappings import EMOJI_BLOCKS, LEGACY_UNKNOWN_MARKERS, SURROGATES

__all__ = ["build_raw_table", "emoji_names", "merge_names"]

# unidecode has no data past the supplementary private use planes.
UNIDECODE_LAST = 0xEFFFF


def _unidecode_entry(codepoint: int) -> Optional[str]:
    """
    Transliteration of one codepoint according to ``unidecode``.

    :returns: The replacement, or None when ``unidecode`` has no entry or
              marks the character as unknown.
    """
    if codepoint < 0x80:
        return chr(codepoint)
    if codepoint in SURROGATES or codepoint > UNIDECODE_LAST:
        return None
    ch = chr(codepoint)
    # "preserve" hands the character back untouched when there is no entry
    s = unidecode_expect_nonascii(ch, errors="preserve")
    if s == ch or s in LEGACY_UNKNOWN_MARKERS:
        return None
    return s


def _emoji_name(ch: str) -> str:
    name = unicodedata.name(ch, "")
    if not name:
        return ""
    return name.lower().replace("_", " ") + " "


def emoji_names() -> Iterator[Tuple[int, str]]:
    """
    Yield ``(codepoint, name)`` for every named character of ``EMOJI_BLOCKS``.

    Names are lowercase and end with a separator space, so consecutive
    emoji read as separate words.
    """
    for first, last in EMOJI_BLOCKS:
        for codepoint in range(first, last + 1):
            name = _emoji_name(chr(codepoint))
            if name:
                yield codepoint, name


def merge_names(entry: Optional[str], name: str) -> Optional[str]:
    """
    Pick between the current entry and an alternative name: the name wins
    over an unknown or empty entry, and otherwise only when it is shorter.
    """
    if not name:
        return entry
    if not entry or len(name) < len(entry):
        return name
    return entry


def build_raw_table(*, include_emoji: bool = True) -> List[Optional[str]]:
    """
    Curate the per-codepoint transliteration table.

    :param include_emoji: Merge Unicode names for emoji and symbols.
    :returns: One entry per codepoint from U+0000 up to the last codepoint
              with a known transliteration; ``None`` marks unknown entries.
    """
    raw: List[Optional[str]] = [
        _unidecode_entry(codepoint) for codepoint in range(UNIDECODE_LAST + 1)
    ]

    if include_emoji:
        for codepoint, name in emoji_names():
            raw[codepoint] = merge_names(raw[codepoint], name)

    # Codepoints past the table decode as unknown anyway.
    while raw and raw[-1] is None:
        raw.pop()
    return raw
