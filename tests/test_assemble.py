import io

import pytest

from textascii import (
    AsciiChars,
    iter_chunks,
    transliterate,
    transliterate_lines,
    transliterate_with_placeholder,
)
from textascii.codec import assemble


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Æneid", "AEneid"),
        ("étude", "etude"),
        ("北亰", "Bei Jing"),
        ("北亰city", "Bei Jing city"),
        ("北亰 city", "Bei Jing city"),
        ("北 亰 city", "Bei Jing city"),
        ("北亰 city ", "Bei Jing city "),
        ("北京北京", "Bei Jing Bei Jing"),
        ("🦄☣", "unicorn face biohazard"),
        ("🦄 ☣", "unicorn face biohazard"),
        (" spaces ", " spaces "),
        ("  two  spaces  ", "  two  spaces  "),
    ],
)
def test_transliterate_collapses_separator_spaces(small_tables, text, expected):
    assert transliterate(text, tables=small_tables) == expected


def test_unknown_characters_use_placeholder(small_tables):
    assert transliterate("\u0351", tables=small_tables) == "[?]"
    assert transliterate_with_placeholder("\u0351", "tofu", tables=small_tables) == "tofu"
    assert transliterate_with_placeholder("a\u0351b", "", tables=small_tables) == "ab"


def test_separator_space_kept_before_unknown(small_tables):
    assert transliterate("北\u0351", tables=small_tables) == "Bei [?]"


def test_separator_space_kept_before_empty_replacement(small_tables):
    assert transliterate("北\u0301亰", tables=small_tables) == "Bei Jing"


def test_ascii_input_is_returned_unchanged(small_tables):
    text = "".join(chr(c) for c in range(0x20, 0x7F))
    assert transliterate(text, tables=small_tables) == text


def test_ascii_chars_yields_one_result_per_character(small_tables):
    chars = AsciiChars("北亰\u0351a", tables=small_tables)
    assert list(chars) == ["Bei ", "Jing ", None, "a"]


def test_ascii_chars_trims_at_end_of_input(small_tables):
    assert list(AsciiChars("北亰", tables=small_tables)) == ["Bei ", "Jing"]
    assert list(AsciiChars("", tables=small_tables)) == []


def test_ascii_chars_is_restartable(small_tables):
    chars = AsciiChars("北 亰", tables=small_tables)
    first = list(chars)
    assert first == ["Bei", " ", "Jing"]
    assert list(chars) == first


def test_iter_chunks_is_lazy(small_tables):
    chunks = iter_chunks("北亰\u0351", "?", tables=small_tables)
    assert next(chunks) == "Bei "
    assert next(chunks) == "Jing "
    assert next(chunks) == "?"
    with pytest.raises(StopIteration):
        next(chunks)


def test_transliterate_lines(small_tables):
    lines = ["北亰", "plain", "\u0351"]
    assert transliterate_lines(lines, tables=small_tables) == ["Bei Jing", "plain", "[?]"]
    assert transliterate_lines(lines, placeholder="", tables=small_tables) == [
        "Bei Jing",
        "plain",
        "",
    ]


def test_main_reads_stdin(monkeypatch, small_tables):
    monkeypatch.setattr(assemble, "load_tables", lambda: small_tables)
    monkeypatch.setattr("sys.stdin", io.StringIO("北亰 city\n"))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)

    assemble.main([])

    assert out.getvalue() == "Bei Jing city\n"
