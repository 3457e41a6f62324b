# textascii/codec/tables.py
from __future__ import annotations

import argparse
import logging
import threading
from pathlib import Path
from typing import List

from .compact import CompactionReport, compact, verify_tables
from .format import Tables
from .sources import build_raw_table

__all__ = [
    "DATA_DIR",
    "POOL_FILE",
    "POINTERS_FILE",
    "build",
    "load_tables",
    "read_tables",
    "write_tables",
]

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
POOL_FILE = "mapping.txt"
POINTERS_FILE = "pointers.bin"

_lock = threading.Lock()
_tables: Tables | None = None


# ---------------------------------------------------------------------------
# Artifact I/O
# ---------------------------------------------------------------------------


def write_tables(tables: Tables, directory: str | Path) -> None:
    """
    Write the mapping pool and the pointer table into ``directory``.
    """
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / POOL_FILE).write_bytes(tables.pool.encode("ascii"))
    (out_dir / POINTERS_FILE).write_bytes(tables.pointers)


def read_tables(directory: str | Path) -> Tables:
    """
    Read both artifacts from ``directory``.

    :raises FileNotFoundError: If an artifact is missing.
    :raises ValueError: If an artifact is malformed.
    """
    in_dir = Path(directory)
    pool = (in_dir / POOL_FILE).read_bytes()
    pointers = (in_dir / POINTERS_FILE).read_bytes()
    return Tables.from_bytes(pool, pointers)


def _has_artifacts(directory: Path) -> bool:
    return (directory / POOL_FILE).is_file() and (directory / POINTERS_FILE).is_file()


# ---------------------------------------------------------------------------
# Process-wide tables
# ---------------------------------------------------------------------------


def load_tables() -> Tables:
    """
    Return the process-wide tables, loading them on first use.

    Packaged artifacts are preferred; without them the curated raw table is
    compacted in memory. The result is never mutated afterwards.
    """
    global _tables
    if _tables is None:
        with _lock:
            if _tables is None:
                if _has_artifacts(DATA_DIR):
                    _tables = read_tables(DATA_DIR)
                else:
                    logger.info(
                        "no table artifacts in %s, compacting from sources", DATA_DIR
                    )
                    _tables = compact(build_raw_table())
    return _tables


def build(
    directory: str | Path = DATA_DIR,
    *,
    verify: bool = True,
    include_emoji: bool = True,
) -> CompactionReport:
    """
    Curate, compact and write the table artifacts.

    :param directory: Output directory.
    :param verify: Decode every codepoint back before writing.
    :param include_emoji: Forwarded to
                          :func:`~textascii.codec.sources.build_raw_table`.
    :returns: The compaction report.
    """
    raw = build_raw_table(include_emoji=include_emoji)
    tables, rep = compact(raw, report=True)
    if verify:
        verify_tables(raw, tables)
    write_tables(tables, directory)
    logger.info(
        "wrote %s (%d bytes) and %s (%d bytes) to %s",
        POOL_FILE,
        rep.pool_len,
        POINTERS_FILE,
        rep.pointers_len,
        directory,
    )
    return rep


def main(argv: List[str] | None = None) -> None:
    """
    Build entrypoint.

    Usage::

        textascii-build [--out DIR] [--no-verify] [--no-emoji]

    :param argv: Optional argv, defaults to ``sys.argv[1:]``.
    :returns: None.
    """
    parser = argparse.ArgumentParser(
        prog="textascii-build",
        description="Compact the transliteration table into its binary artifacts.",
    )
    parser.add_argument("--out", type=Path, default=DATA_DIR)
    parser.add_argument("--no-verify", action="store_true")
    parser.add_argument("--no-emoji", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    rep = build(
        args.out, verify=not args.no_verify, include_emoji=not args.no_emoji
    )
    logger.info(
        "%d codepoints, %d inline, %d unknown, %d pooled strings on %d carriers "
        "(%d found in pool)",
        rep.entries,
        rep.inline_entries,
        rep.unknown_entries,
        rep.candidates,
        rep.carriers,
        rep.reused_placements,
    )
