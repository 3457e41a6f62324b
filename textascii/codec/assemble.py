# textascii/codec/assemble.py
from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, List, Optional

from .decode import decode_codepoint
from .format import Tables
from .mappings import DEFAULT_PLACEHOLDER
from .tables import load_tables

__all__ = [
    "AsciiChars",
    "iter_chunks",
    "transliterate",
    "transliterate_with_placeholder",
    "transliterate_lines",
]


# ---------------------------------------------------------------------------
# Per-character sequence
# ---------------------------------------------------------------------------


class _AsciiCharsIterator:
    """
    One pass over a string, one character of lookahead.

    ``_pending`` holds the decoded chunk of the next character and
    ``_has_more`` says whether there is one; the current chunk keeps its
    trailing separator space only if the next chunk does not start with one.
    """

    def __init__(self, text: str, tables: Tables) -> None:
        self._chars = iter(text)
        self._tables = tables
        self._pending: Optional[str] = None
        self._has_more = False
        self._advance()

    def _advance(self) -> None:
        ch = next(self._chars, None)
        if ch is None:
            self._pending = None
            self._has_more = False
        else:
            self._pending = decode_codepoint(ord(ch), self._tables)
            self._has_more = True

    def __iter__(self) -> "_AsciiCharsIterator":
        return self

    def __next__(self) -> Optional[str]:
        if not self._has_more:
            raise StopIteration
        chunk = self._pending
        self._advance()
        # Literal single-character spaces are left alone.
        if chunk is not None and len(chunk) > 1 and chunk[-1] == " ":
            nxt = self._pending
            if not self._has_more or (nxt is not None and nxt[:1] == " "):
                chunk = chunk[:-1]
        return chunk


class AsciiChars:
    """
    Lazy per-character transliteration of ``text``.

    Yields one ``Optional[str]`` per input character (None for unknown
    characters) with duplicate separator spaces already dropped. Iterating
    again starts over.

    :param text: Input text.
    :param tables: Tables to decode with; defaults to the process-wide ones.
    """

    def __init__(self, text: str, *, tables: Tables | None = None) -> None:
        self.text = text
        self.tables = tables

    def __iter__(self) -> Iterator[Optional[str]]:
        tables = self.tables if self.tables is not None else load_tables()
        return _AsciiCharsIterator(self.text, tables)


def iter_chunks(
    text: str,
    placeholder: str = DEFAULT_PLACEHOLDER,
    *,
    tables: Tables | None = None,
) -> Iterator[str]:
    """
    Stream the transliteration of ``text`` one ASCII chunk at a time.

    :param placeholder: Emitted for characters without a transliteration.
    """
    for chunk in AsciiChars(text, tables=tables):
        yield placeholder if chunk is None else chunk


# --- transliterate ---------------------------------------------


def transliterate_with_placeholder(
    text: str,
    placeholder: str,
    *,
    tables: Tables | None = None,
) -> str:
    """
    Transliterate ``text`` to ASCII, writing ``placeholder`` for every
    character with no known transliteration. Never fails.
    """
    if text.isascii():
        return text
    return "".join(iter_chunks(text, placeholder, tables=tables))


def transliterate(text: str, *, tables: Tables | None = None) -> str:
    """
    One-shot entrypoint: transliterate any text to printable ASCII.

    ASCII characters map to themselves; unknown characters become ``"[?]"``.

    Examples::

        transliterate("Æneid")  # "AEneid"
        transliterate("北亰")    # "Bei Jing"
    """
    return transliterate_with_placeholder(text, DEFAULT_PLACEHOLDER, tables=tables)


def transliterate_lines(lines: Iterable[str], **kwargs: Any) -> List[str]:
    """
    Transliterate an iterable of strings with
    :func:`~textascii.codec.assemble.transliterate_with_placeholder`.

    :param lines: Iterable of strings.
    :param kwargs: ``placeholder`` and ``tables``.
    :returns: List of transliterated strings.
    """
    placeholder = kwargs.pop("placeholder", DEFAULT_PLACEHOLDER)
    return [transliterate_with_placeholder(x, placeholder, **kwargs) for x in lines]


def main(argv: List[str] | None = None) -> None:
    """
    CLI entrypoint.

    Usage::

        textascii < infile.txt > outfile.txt

    :param argv: Optional argv (unused).
    :returns: None.
    """
    data = sys.stdin.read()
    sys.stdout.write(transliterate(data))
