import pytest

from typeahead.application.highlight import has_match, render
from typeahead.domain.types import Segment


def joined(segments: list[Segment]) -> str:
    return "".join(segment.value for segment in segments)


def test_highlights_case_insensitive_prefix() -> None:
    assert render("Fake 1", "fake") == [Segment("Fake", True), Segment(" 1", False)]


def test_no_match_returns_single_plain_segment() -> None:
    assert render("Another Random", "fake") == [Segment("Another Random", False)]


@pytest.mark.parametrize("highlight", [None, ""])
def test_missing_highlight_passes_text_through(highlight) -> None:
    assert render("Fake 1", highlight) == [Segment("Fake 1", False)]


def test_every_occurrence_is_marked() -> None:
    segments = render("abcABCabc", "abc")

    assert segments == [Segment("abc", True), Segment("ABC", True), Segment("abc", True)]


def test_occurrences_do_not_overlap() -> None:
    segments = render("aaaa", "aa")

    assert segments == [Segment("aa", True), Segment("aa", True)]
    assert render("aaa", "aa") == [Segment("aa", True), Segment("a", False)]


def test_match_in_the_middle_keeps_surrounding_text() -> None:
    segments = render("Ada Lovelace", "love")

    assert segments == [Segment("Ada ", False), Segment("Love", True), Segment("lace", False)]


@pytest.mark.parametrize("highlight", ["(", "[a-", "*", "a+b", "\\", "?"])
def test_regex_metacharacters_are_matched_literally(highlight) -> None:
    text = f"x{highlight}y"

    segments = render(text, highlight)

    assert joined(segments) == text
    assert Segment(highlight, True) in segments


def test_empty_text_yields_one_empty_segment() -> None:
    assert render("", "fake") == [Segment("", False)]


@pytest.mark.parametrize(
    "text, highlight",
    [
        ("Fake 1", "fake"),
        ("Grace Hopper", "r"),
        ("İstanbul", "i"),
        ("straße", "SS"),
        ("no match here", "zzz"),
        ("   ", " "),
    ],
)
def test_segments_reconstruct_original_text(text, highlight) -> None:
    assert joined(render(text, highlight)) == text


def test_render_is_deterministic() -> None:
    assert render("Fake Fake", "fa") == render("Fake Fake", "fa")


def test_has_match() -> None:
    assert has_match("Fake 2", "FAKE")
    assert not has_match("Another Random", "fake")
    assert not has_match("Fake 2", None)
