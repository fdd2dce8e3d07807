from __future__ import annotations

import pytest

from frontend.movie_item import format_release_date, truncate_overview, vote_color


@pytest.mark.parametrize(
    "vote, color",
    [
        (0, "#E90000"),
        (2.9, "#E90000"),
        (3.0, "#E97E00"),
        (5.5, "#E9D100"),
        (7.0, "#66E900"),
        (None, "#E90000"),
    ],
)
def test_vote_color_bands(vote, color):
    assert vote_color(vote) == color


def test_format_release_date():
    assert format_release_date("1999-03-30") == "March 30, 1999"
    assert format_release_date("2003-11-05") == "November 5, 2003"
    assert format_release_date("") == ""
    assert format_release_date(None) == ""
    assert format_release_date("soon") == ""


def test_truncate_overview_cuts_on_word_boundary():
    text = "A hacker learns about the true nature of reality and his role in the war"

    out = truncate_overview(text, max_chars=30)

    assert out == "A hacker learns about the true..."
    assert truncate_overview("short", max_chars=30) == "short"
    assert truncate_overview(None) == ""
