import pytest

from textsafe.shouting import is_shouting, no_shouting


@pytest.mark.parametrize(
    "text,expected",
    [
        ("HELLO THERE", True),
        ("HELLO there!", False),
        ("hello THERE", False),
        ("Hi", False),
        ("ABCD", False),
        ("ABCDE", True),
        ("12345", False),
        ("ПРИВЕТ мир", True),
        ("日本語のテキスト", False),
        ("", False),
    ],
)
def test_is_shouting(text, expected):
    assert is_shouting(text) is expected


def test_only_first_80_characters_count():
    assert not is_shouting("a" * 80 + "B" * 200)
    assert is_shouting("A" * 80 + "b" * 200)


def test_no_shouting():
    assert no_shouting("STOP CHEATING") == "stop cheating"
    assert no_shouting("Stop cheating") == "Stop cheating"
    assert no_shouting("OK") == "OK"
