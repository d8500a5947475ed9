from typeahead.application.view import LOADING_TEXT, NO_OPTIONS_TEXT, RowKind, build_view
from typeahead.domain.types import SearchState, Segment


def label(option: dict) -> str:
    return option["name"]


def test_closed_state_renders_no_list() -> None:
    view = build_view(SearchState(options=[{"name": "Fake 1"}]), label)

    assert view.list_visible is False
    assert view.rows == ()


def test_open_empty_shows_no_options_placeholder() -> None:
    view = build_view(SearchState(is_open=True), label)

    assert view.list_visible is True
    assert [row.kind for row in view.rows] == [RowKind.NO_OPTIONS]
    assert view.rows[0].text == NO_OPTIONS_TEXT


def test_no_results_uses_same_placeholder_as_empty() -> None:
    empty = build_view(SearchState(is_open=True), label)
    no_results = build_view(SearchState(is_open=True, query="zzz"), label)

    assert empty.rows == no_results.rows


def test_loading_placeholder_only_on_cold_list() -> None:
    cold = build_view(SearchState(is_open=True, query="Fa", is_loading=True), label)
    warm = build_view(
        SearchState(is_open=True, query="Fa", is_loading=True, options=[{"name": "Fake 1"}]),
        label,
    )

    assert [row.kind for row in cold.rows] == [RowKind.LOADING]
    assert cold.rows[0].text == LOADING_TEXT
    assert [row.kind for row in warm.rows] == [RowKind.OPTION]


def test_option_rows_are_highlighted_with_live_query() -> None:
    options = [{"name": "Fake 1"}, {"name": "Fake 2"}, {"name": "Another Random"}]

    view = build_view(SearchState(is_open=True, query="Fake", options=options), label)

    assert [row.key for row in view.rows] == ["Fake 1", "Fake 2", "Another Random"]
    assert view.rows[0].segments == (Segment("Fake", True), Segment(" 1", False))
    assert view.rows[2].segments == (Segment("Another Random", False),)
    assert view.options == options


def test_error_message_is_reported_while_list_is_hidden() -> None:
    view = build_view(SearchState(error_message="Something went wrong"), label)

    assert view.list_visible is False
    assert view.error_message == "Something went wrong"
