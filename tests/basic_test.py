import logging

from textascii import decode_char, transliterate, transliterate_with_placeholder
from textascii.codec.compact import verify_tables
from textascii.codec.tables import load_tables

logging.basicConfig(level=logging.INFO)


def test_every_result_is_ascii():
    tables = load_tables()
    for codepoint in range(0x110000):
        s = decode_char(codepoint, tables=tables)
        if s is not None:
            assert s.isascii(), f"U+{codepoint:04X} -> {s!r}"


def test_ascii_maps_to_itself():
    for codepoint in range(0x80):
        assert decode_char(codepoint) == chr(codepoint)


def test_whole_table_round_trip(real_raw):
    verify_tables(real_raw, load_tables())


def test_tables_are_loaded_once():
    assert load_tables() is load_tables()


def test_conversion():
    logging.info("result: %s", transliterate("Æneid 北亰"))

    assert transliterate("Æneid") == "AEneid"
    assert transliterate("étude") == "etude"
    assert transliterate("北亰") == "Bei Jing"
    assert transliterate("北亰city") == "Bei Jing city"
    assert transliterate("北亰 city") == "Bei Jing city"
    assert transliterate("北 亰 city") == "Bei Jing city"
    assert transliterate("北亰 city ") == "Bei Jing city "
    assert transliterate(" spaces ") == " spaces "
    assert transliterate("  two  spaces  ") == "  two  spaces  "


def test_decode_char():
    assert decode_char("Æ") == "AE"
    assert decode_char("北") == "Bei "
    assert decode_char("亰") == "Jing "


def test_unknown_codepoint():
    private = "\U000F0000"
    assert decode_char(private) is None
    assert decode_char(0x10FFFF) is None
    assert transliterate(private) == "[?]"
    assert transliterate_with_placeholder(private, "tofu") == "tofu"


def test_emoji_names():
    assert decode_char("🦄") == "unicorn face "
    assert transliterate("🦄🦄") == "unicorn face unicorn face"
    assert transliterate("🦄 🦄") == "unicorn face unicorn face"

    biohazard = decode_char("☣")
    assert biohazard
    assert transliterate("🦄☣") == "unicorn face " + biohazard.rstrip(" ")


def test_pure_ascii_is_idempotent():
    text = "".join(chr(c) for c in range(0x20, 0x7F))
    assert transliterate(text) == text
    assert transliterate(transliterate("Æneid 北亰")) == transliterate("Æneid 北亰")
