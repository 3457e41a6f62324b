from __future__ import annotations

from typing import List, Optional

import pytest

from textascii.codec.compact import compact
from textascii.codec.sources import build_raw_table

UNICORN = 0x1F984


def make_small_raw() -> List[Optional[str]]:
    """A hand-made raw table covering ASCII and a few well-known characters."""
    raw: List[Optional[str]] = [chr(i) for i in range(0x80)]
    raw += [None] * (UNICORN + 1 - len(raw))
    raw[0xC6] = "AE"  # Æ
    raw[0xE9] = "e"  # é
    raw[0x0301] = ""  # combining acute accent
    raw[0x2623] = "biohazard "  # ☣
    raw[0x4EAC] = "Jing "  # 京
    raw[0x4EB0] = "Jing "  # 亰
    raw[0x5317] = "Bei "  # 北
    raw[UNICORN] = "unicorn face "  # 🦄
    return raw


@pytest.fixture
def small_raw():
    return make_small_raw()


@pytest.fixture
def small_tables(small_raw):
    return compact(small_raw)


@pytest.fixture(scope="session")
def real_raw():
    return build_raw_table()
