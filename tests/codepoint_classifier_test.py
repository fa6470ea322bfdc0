import pytest

from textsafe.codepoints import (
    distinct_garbage_chars,
    distinct_garbage_codepoints,
    has_garbage_chars,
    is_garbage_char,
    remove_garbage_chars,
)

# (last clean codepoint before, first garbage, last garbage, first clean after)
EDGES = [
    (0x024F, 0x0250, 0x02AF, 0x02B0),
    (0x06D5, 0x06D6, 0x06FF, 0x0700),
    (0x1CFF, 0x1D00, 0x1D7F, 0x1D80),
    (0x1FFF, 0x2000, 0x200F, 0x2010),
    (0x2027, 0x2028, 0x202F, 0x2030),
    (0x20FF, 0x2100, 0x21FF, 0x2200),
    (0x22FF, 0x2300, 0x2C5F, 0x2C60),
    (0x534C, 0x534D, 0x534D, 0x534E),
    (0x534F, 0x5350, 0x5350, 0x5351),
    (0xA9C0, 0xA9C1, 0xA9C2, 0xA9C3),
]


@pytest.mark.parametrize("before,first,last,after", EDGES)
def test_range_boundaries(before, first, last, after):
    assert is_garbage_char(before) is False
    assert is_garbage_char(first) is True
    assert is_garbage_char(last) is True
    assert is_garbage_char(after) is False


@pytest.mark.parametrize("cp", [0x2200, 0x2211, 0x2264, 0x22FF])
def test_math_operators_are_kept(cp):
    assert not is_garbage_char(cp)


@pytest.mark.parametrize("cp", [0x00, 0x41, 0xE9, 0x4E2D, 0x1F389, 0x10FFFF])
def test_ordinary_codepoints(cp):
    assert not is_garbage_char(cp)


def test_accepts_single_characters():
    assert is_garbage_char("\u200b")
    assert not is_garbage_char("a")


def test_has_garbage_chars():
    assert has_garbage_chars("hello\u200bworld")
    assert not has_garbage_chars("hello world")
    assert not has_garbage_chars("")


def test_distinct_garbage_chars_is_a_set():
    text = "꧁Player꧂\u200b\u200b卍"
    assert distinct_garbage_chars(text) == {"꧁", "꧂", "\u200b", "卍"}
    assert distinct_garbage_codepoints(text) == {0xA9C1, 0xA9C2, 0x200B, 0x534D}


def test_remove_garbage_chars_preserves_order():
    assert remove_garbage_chars("꧁P\u200bl\u202ea\u2605y꧂") == "Play"
    assert remove_garbage_chars("۞۩") == ""
    assert remove_garbage_chars("") == ""
