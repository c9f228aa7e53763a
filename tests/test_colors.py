import pytest

from smlkit.colors import Color, colorize


def test_colorize_wraps_with_color_and_reset():
    assert colorize("hi", Color.RED) == "\x1b[0;31mhi\x1b[0m"


def test_colorize_accepts_escape_sequence_string():
    assert colorize("hi", "\x1b[1;37m") == colorize("hi", Color.BWHT)


def test_colorize_empty_text_is_color_then_reset():
    assert colorize("", Color.GRN) == Color.GRN + Color.RESET


def test_colorize_rejects_unknown_color():
    with pytest.raises(ValueError):
        colorize("x", "not a color")


def test_known_sequences_fixed_by_source():
    assert colorize("", Color.BWHT) == "\x1b[1;37m\x1b[0m"
    assert colorize("", Color.WHTHB) == "\x1b[0;107m\x1b[0m"
    assert colorize("", Color.RESET) == "\x1b[0m\x1b[0m"


@pytest.mark.parametrize("color", list(Color))
def test_every_color_is_an_escape_sequence(color):
    result = colorize("", color)
    assert result.startswith("\x1b[")
    assert result.endswith("m\x1b[0m")


@pytest.mark.parametrize("color", list(Color))
def test_colorize_keeps_text_between_sequences(color):
    result = colorize("payload", color)
    assert result.startswith(color.value)
    assert result.endswith(Color.RESET.value)
    assert result[len(color.value) : -len(Color.RESET.value)] == "payload"


def test_sequences_are_distinct():
    results = [colorize("x", c) for c in Color]
    assert len(results) == len(set(results))