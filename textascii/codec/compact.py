# textascii/codec/compact.py
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .format import (
    INLINE_MAX_LEN,
    MAX_POOL_LEN,
    MAX_REPLACEMENT_LEN,
    Tables,
    pack_inline,
    pack_offset,
    pack_unknown,
)
from .mappings import MAX_CODEPOINT

__all__ = [
    "compact",
    "verify_tables",
    "CompactionError",
    "CompactionReport",
]

logger = logging.getLogger(__name__)

RawTable = Sequence[Optional[str]]

# substring -> (carrier, start of the substring inside the carrier)
Resolution = Dict[str, Tuple[str, int]]


class CompactionError(ValueError):
    """Raised when a raw table cannot be encoded without corrupting lookups."""


@dataclass
class CompactionReport:
    """
    Summary of one compaction run.

    :param entries: Number of codepoints in the raw table.
    :param inline_entries: Entries stored directly in their record.
    :param unknown_entries: Entries without a known transliteration.
    :param candidates: Distinct replacements stored in the pool.
    :param carriers: Canonical strings the candidates resolved to.
    :param reused_placements: Carriers found inside the pool instead of appended.
    :param pool_len: Final mapping pool size in bytes.
    :param pointers_len: Final pointer table size in bytes.
    """

    entries: int = 0
    inline_entries: int = 0
    unknown_entries: int = 0
    candidates: int = 0
    carriers: int = 0
    reused_placements: int = 0
    pool_len: int = 0
    pointers_len: int = 0


# ---------------------------------------------------------------------------
# Candidate ranking
# ---------------------------------------------------------------------------


def _check_entry(codepoint: int, s: str) -> None:
    if len(s) > MAX_REPLACEMENT_LEN:
        raise CompactionError(
            f"U+{codepoint:04X}: replacement of {len(s)} characters exceeds "
            f"{MAX_REPLACEMENT_LEN}"
        )
    if not s.isascii():
        raise CompactionError(f"U+{codepoint:04X}: non-ASCII replacement {s!r}")


def _rank_candidates(raw: RawTable, rep: CompactionReport) -> List[str]:
    """
    Collect the pooled replacements, most valuable first.

    Order: frequency (coarse buckets of 4, higher first), then longer first so
    shorter strings can resolve onto them, then coarse first position and
    lexical order for determinism.
    """
    counts: Counter[str] = Counter()
    first_seen: Dict[str, int] = {}
    n = 0
    for codepoint, s in enumerate(raw):
        if s is None:
            rep.unknown_entries += 1
            continue
        _check_entry(codepoint, s)
        if len(s) <= INLINE_MAX_LEN:
            rep.inline_entries += 1
            continue
        counts[s] += 1
        first_seen.setdefault(s, n)
        n += 1

    ranked = sorted(
        counts,
        key=lambda s: (-(counts[s] // 4), -len(s), first_seen[s] // 4, s),
    )
    rep.candidates = len(ranked)
    return ranked


# ---------------------------------------------------------------------------
# Redundancy resolution & placement
# ---------------------------------------------------------------------------


def _resolve_redundant(ranked: Sequence[str]) -> Resolution:
    """
    Map every substring (longer than the inline limit) of every candidate to
    the first, highest-ranked candidate carrying it.

    A candidate already carried by an earlier one adds nothing: all of its
    substrings are substrings of that carrier too.
    """
    resolved: Resolution = {}
    for carrier in ranked:
        if carrier in resolved:
            continue
        size = len(carrier)
        for start in range(size - INLINE_MAX_LEN):
            for end in range(size, start + INLINE_MAX_LEN, -1):
                resolved.setdefault(carrier[start:end], (carrier, start))
    return resolved


def _place(
    ranked: Sequence[str], resolved: Resolution, rep: CompactionReport
) -> Tuple[str, Dict[str, int]]:
    """
    Lay the carriers out in the pool.

    A carrier may already occur in the pool, e.g. across the boundary of two
    neighbours placed earlier; it then reuses that offset.
    """
    pool = ""
    offsets: Dict[str, int] = {}
    for s in ranked:
        carrier = resolved[s][0]
        if carrier in offsets:
            continue
        pos = pool.find(carrier)
        if pos >= 0:
            offsets[carrier] = pos
            rep.reused_placements += 1
            continue
        if len(pool) + len(carrier) >= MAX_POOL_LEN:
            raise CompactionError(
                f"mapping pool would grow to {len(pool) + len(carrier)} bytes; "
                f"offsets must stay below {MAX_POOL_LEN:#x}"
            )
        offsets[carrier] = len(pool)
        pool += carrier
    rep.carriers = len(offsets)
    return pool, offsets


def _emit_records(
    raw: RawTable, resolved: Resolution, offsets: Dict[str, int]
) -> bytes:
    out = bytearray()
    for s in raw:
        if s is None:
            out += pack_unknown()
        elif len(s) <= INLINE_MAX_LEN:
            out += pack_inline(s)
        else:
            carrier, delta = resolved[s]
            out += pack_offset(offsets[carrier] + delta, len(s))
    return bytes(out)


# --- compact ---------------------------------------------------


def compact(
    raw: RawTable,
    *,
    report: bool = False,
) -> Union[Tables, Tuple[Tables, CompactionReport]]:
    """
    Encode a raw codepoint table into a mapping pool and a pointer table.

    :param raw: One entry per codepoint starting at U+0000; ``None`` marks a
                codepoint without a known transliteration.
    :param report: Also return a :class:`CompactionReport`.
    :returns: :class:`~textascii.codec.format.Tables`, or ``(tables, report)``.
    :raises CompactionError: If an entry is not ASCII or too long, or the pool
                             outgrows 16-bit offsets.
    """
    if len(raw) > MAX_CODEPOINT + 1:
        raise CompactionError(
            f"raw table has {len(raw)} entries; codepoints end at U+{MAX_CODEPOINT:X}"
        )
    rep = CompactionReport(entries=len(raw))

    ranked = _rank_candidates(raw, rep)
    resolved = _resolve_redundant(ranked)
    pool, offsets = _place(ranked, resolved, rep)
    pointers = _emit_records(raw, resolved, offsets)

    rep.pool_len = len(pool)
    rep.pointers_len = len(pointers)
    logger.debug(
        "compacted %d entries: %d pooled strings on %d carriers, pool %d bytes",
        rep.entries,
        rep.candidates,
        rep.carriers,
        rep.pool_len,
    )
    tables = Tables(pool=pool, pointers=pointers)
    return (tables, rep) if report else tables


def verify_tables(raw: RawTable, tables: Tables) -> None:
    """
    Decode every codepoint of ``raw`` and compare with the source entry.

    :raises CompactionError: On the first codepoint that decodes differently.
    """
    from .decode import decode_codepoint

    if len(tables) != len(raw):
        raise CompactionError(
            f"pointer table covers {len(tables)} codepoints, raw table {len(raw)}"
        )
    for codepoint, expected in enumerate(raw):
        got = decode_codepoint(codepoint, tables)
        if got != expected:
            raise CompactionError(
                f"U+{codepoint:04X} decodes to {got!r}, expected {expected!r}"
            )
