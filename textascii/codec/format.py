# textascii/codec/format.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

__all__ = [
    "RECORD_SIZE",
    "INLINE_MAX_LEN",
    "MAX_REPLACEMENT_LEN",
    "UNKNOWN_OFFSET",
    "UNKNOWN_LEN",
    "MAX_POOL_LEN",
    "Tables",
    "pack_inline",
    "pack_offset",
    "pack_unknown",
    "unpack_record",
]

# ---------------------------------------------------------------------------
# Record layout
# ---------------------------------------------------------------------------
#
# The pointer table holds one record per codepoint, indexed by codepoint:
#
#     byte 0..1  payload
#     byte 2     length of the replacement
#
# length 0     -> empty replacement, payload unused
# length 1, 2  -> payload bytes are the ASCII characters themselves
# length > 2   -> payload is a little-endian offset into the mapping pool
#
# Unknown codepoints carry UNKNOWN_OFFSET as payload. The pool is kept
# strictly shorter than that value, so the marker never collides with a
# real offset.

RECORD_SIZE = 3
INLINE_MAX_LEN = 2
MAX_REPLACEMENT_LEN = 0xFF
UNKNOWN_OFFSET = 0xFFFF
UNKNOWN_LEN = 3  # len("[?]")
MAX_POOL_LEN = 0xFFFF


def pack_inline(s: str) -> bytes:
    """
    Encode a replacement of at most two ASCII characters into one record.

    :param s: Replacement string (0..2 characters, each below 128).
    :returns: The 3-byte record.
    :raises ValueError: If ``s`` is too long or not ASCII.
    """
    if len(s) > INLINE_MAX_LEN:
        raise ValueError(f"inline replacement too long: {s!r}")
    payload = s.encode("ascii")  # raises UnicodeEncodeError (a ValueError)
    return payload.ljust(INLINE_MAX_LEN, b"\0") + bytes((len(s),))


def pack_offset(offset: int, length: int) -> bytes:
    """
    Encode a pool reference into one record.

    :param offset: Start of the replacement inside the mapping pool.
    :param length: Replacement length, greater than ``INLINE_MAX_LEN``.
    :returns: The 3-byte record.
    """
    if not 0 <= offset < UNKNOWN_OFFSET:
        raise ValueError(f"pool offset out of range: {offset}")
    if not INLINE_MAX_LEN < length <= MAX_REPLACEMENT_LEN:
        raise ValueError(f"pooled replacement length out of range: {length}")
    return bytes((offset & 0xFF, offset >> 8, length))


def pack_unknown() -> bytes:
    return bytes((UNKNOWN_OFFSET & 0xFF, UNKNOWN_OFFSET >> 8, UNKNOWN_LEN))


def unpack_record(pointers: bytes, codepoint: int) -> Optional[Tuple[int, int]]:
    """
    Read the record of ``codepoint``.

    :returns: ``(payload, length)`` with the payload read little-endian, or
              None when the codepoint lies outside the table.
    """
    pos = codepoint * RECORD_SIZE
    if codepoint < 0 or pos + RECORD_SIZE > len(pointers):
        return None
    return pointers[pos] | (pointers[pos + 1] << 8), pointers[pos + 2]


@dataclass(frozen=True)
class Tables:
    """
    The two runtime artifacts, immutable once built.

    :param pool: Mapping pool, every pooled replacement as an ASCII string.
    :param pointers: Pointer table, ``RECORD_SIZE`` bytes per codepoint.
    """

    pool: str
    pointers: bytes

    def __len__(self) -> int:
        return len(self.pointers) // RECORD_SIZE

    @classmethod
    def from_bytes(cls, pool: bytes, pointers: bytes) -> "Tables":
        """
        Validate raw artifact bytes and wrap them.

        :raises ValueError: On a misaligned pointer table, a non-ASCII pool
                            or a pool too large for 16-bit offsets.
        """
        if len(pointers) % RECORD_SIZE:
            raise ValueError(
                f"pointer table length {len(pointers)} is not a multiple of "
                f"{RECORD_SIZE}"
            )
        if len(pool) >= MAX_POOL_LEN:
            raise ValueError(f"mapping pool too large: {len(pool)} bytes")
        try:
            text = pool.decode("ascii")
        except UnicodeDecodeError as exc:
            raise ValueError(f"mapping pool is not ASCII: {exc}") from exc
        return cls(pool=text, pointers=bytes(pointers))
