import pytest

from sogame.colors import text_to_rgb


def test_named_red():
    assert text_to_rgb("red") == 0xFF0000


def test_named_white():
    assert text_to_rgb("white") == 0xFFFFFF


def test_black_is_zero():
    assert text_to_rgb("black") == 0


def test_none_is_transparent():
    assert text_to_rgb("none") == -1


def test_lookup_is_case_insensitive():
    assert text_to_rgb("RED") == text_to_rgb("red")
    assert text_to_rgb("DarkSlateGray") == text_to_rgb("darkslategray")


def test_hex_specification():
    assert text_to_rgb("#FF8800") == 0xFF8800
    assert text_to_rgb("#00ff00") == text_to_rgb("green")


def test_hex_stops_at_invalid_digit():
    assert text_to_rgb("#12zz") == 0x12


def test_hex_without_digits_is_zero():
    assert text_to_rgb("#zz") == 0


def test_hex_ignores_extra_word():
    assert text_to_rgb("#0000ff", "ignored") == text_to_rgb("blue")


def test_unknown_name_is_zero():
    assert text_to_rgb("not-a-colour") == 0


def test_two_word_name_joined_with_extra():
    assert text_to_rgb("light", "green") == text_to_rgb("light green")
    assert text_to_rgb("light", "green") == text_to_rgb("lightgreen")


def test_first_entry_wins_for_duplicate_names():
    assert text_to_rgb("dark slate") == text_to_rgb("darkslategray")
    assert text_to_rgb("light goldenrod") == text_to_rgb("lightgoldenrodyellow")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("navy blue", "navyblue"),
        ("dark red", "darkred"),
        ("misty rose", "mistyrose"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert text_to_rgb(spaced) == text_to_rgb(joined)


@pytest.mark.parametrize("level", ["0", "50", "100"])
def test_gray_and_grey_spellings_agree(level):
    assert text_to_rgb("gray" + level) == text_to_rgb("grey" + level)


def test_overlong_combined_name_is_truncated():
    # Truncation keeps the first 63 characters, so a long tail is dropped.
    long_tail = "x" * 100
    assert text_to_rgb("red", long_tail) == 0


def test_results_fit_in_rgb_range():
    for name in ["snow", "thistle4", "gray100", "lightgreen", "blue4"]:
        value = text_to_rgb(name)
        assert 0 <= value <= 0xFFFFFF
        assert value != 0 or name == "black"