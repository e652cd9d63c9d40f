from dash import html

from consign_tracker.components import (
    build_dashboard,
    build_pagination,
    build_records_table,
    build_results,
    build_search_panel,
    build_slip_details,
    build_slip_modal,
    build_suggestions,
    build_summary_panel,
)
from consign_tracker.components.records_table import sort_icon
from consign_tracker.components.slip_modal import remaining_text, terms_accepted
from consign_tracker.errors import DataFetchError
from consign_tracker.models.common import DESCENDING, SortState, Suggestion, SuggestionPage
from consign_tracker.models.record import MergedRecord
from consign_tracker.pipeline import build_controls
from consign_tracker.state import DashboardController


def _walk(component):
    """Yield every component in a Dash tree."""
    if isinstance(component, (list, tuple)):
        for child in component:
            yield from _walk(child)
        return
    if component is None or isinstance(component, (str, int, float)):
        return
    yield component
    yield from _walk(getattr(component, "children", None))


def _ids(component) -> list:
    return [getattr(c, "id", None) for c in _walk(component) if getattr(c, "id", None) is not None]


def _texts(component) -> list[str]:
    texts = []
    for c in _walk(component):
        children = getattr(c, "children", None)
        if isinstance(children, str):
            texts.append(children)
        elif isinstance(children, (list, tuple)):
            texts.extend(child for child in children if isinstance(child, str))
    return texts


def _view(records, query="c1", acknowledge=()):
    controller = DashboardController(lambda: records)
    controller.search(query)
    for order, report in acknowledge:
        controller.acknowledge(order, report)
    return controller.view()


def test_search_panel_has_input_and_hidden_clear_button() -> None:
    panel = build_search_panel("")
    ids = _ids(panel)

    assert "search-query" in ids
    assert "clear-search" in ids
    clear = next(c for c in _walk(panel) if getattr(c, "id", None) == "clear-search")
    assert "hidden" in clear.className


def test_search_input_is_blocked_until_records_load() -> None:
    query = next(c for c in _walk(build_search_panel("")) if getattr(c, "id", None) == "search-query")

    assert query.disabled


def test_suggestion_list_offers_load_more() -> None:
    candidates = tuple(Suggestion(f"Co – C{i}", f"C{i}") for i in range(7))
    page = SuggestionPage(items=candidates[:5], offset=0, has_more=True, candidates=candidates)

    suggestions = build_suggestions(page)

    ids = _ids(suggestions)
    assert {"type": "suggestion", "value": "C0"} in ids
    assert {"type": "load-more-suggestions", "offset": 5} in ids
    assert "Load more results..." in _texts(suggestions)


def test_hidden_suggestions_when_nothing_matches() -> None:
    assert "hidden" in build_suggestions(SuggestionPage()).className


def test_awaiting_report_gets_acknowledge_button(make_raw) -> None:
    view = _view([make_raw("SR1", "C1")])

    dashboard = build_dashboard(view)

    assert {"type": "acknowledge-button", "co_no": "C1", "sr_id": "SR1"} in _ids(dashboard)
    assert "Awaiting for Invoice" in _texts(dashboard)


def test_acknowledged_report_shows_disabled_marker(make_raw) -> None:
    view = _view([make_raw("SR1", "C1")], acknowledge=[("C1", "SR1")])

    dashboard = build_dashboard(view)

    assert not [i for i in _ids(dashboard) if isinstance(i, dict)]
    buttons = [c for c in _walk(dashboard) if isinstance(c, html.Button)]
    assert len(buttons) == 1
    assert buttons[0].disabled
    assert "Acknowledged" in _texts(dashboard)
    assert "Waiting for Invoice" in _texts(dashboard)


def test_empty_view_hides_sections_and_prompts(make_raw) -> None:
    view = _view([make_raw("SR1", "C1")], query="")

    assert "hidden" in build_dashboard(view).className
    assert "hidden" in build_summary_panel(view).className
    assert "hidden" in build_pagination(view.controls).className
    table = build_records_table(view)
    assert "Enter a search term and press Enter or select a suggestion." in _texts(table)
    assert not [c for c in _walk(table) if getattr(c, "className", None) == "sort-icon"]


def test_table_rows_and_sortable_headers(make_raw) -> None:
    view = _view(
        [make_raw("SR1", "C1", qty_sold="1200", amount="₱ 5,000", inv_no="INV-1", voucher_no="V-1")]
    )

    table = build_records_table(view)
    texts = _texts(table)

    assert {"type": "sort-header", "column": "amount"} in _ids(table)
    assert {"type": "sort-header", "column": "status"} not in _ids(table)
    assert "1,200" in texts
    assert "5,000.00" in texts
    assert "complete" in texts
    voucher = next(c for c in _walk(table) if getattr(c, "children", None) == "V-1")
    assert voucher.className == "highlight-voucher"


def test_sort_icon_reflects_state() -> None:
    assert sort_icon(SortState(), "amount") == "lucide:arrow-up-down"
    assert sort_icon(SortState("amount"), "amount") == "lucide:arrow-up"
    assert sort_icon(SortState("amount", DESCENDING), "amount") == "lucide:arrow-down"


def test_pagination_buttons() -> None:
    bar = build_pagination(build_controls(30, 3))
    ids = _ids(bar)

    assert {"type": "page-button", "page": 2, "role": "prev"} in ids
    assert {"type": "page-button", "page": 4, "role": "next"} in ids
    assert [i["page"] for i in ids if isinstance(i, dict) and i["role"] == "page"] == [1, 2, 3, 4]
    assert "Page 3 of 6" in _texts(bar)


def test_summary_panel_lines(make_raw) -> None:
    view = _view([make_raw("SR1", "C1", qty_sold="1", amount="10")])

    texts = _texts(build_summary_panel(view))

    assert "Found 1 result:" in texts
    assert "CO Number C1 : 1 pc, Total Amount 10.00 reported sold." in texts


def test_slip_details_and_terms() -> None:
    record = MergedRecord(sr_id="SR1", co_no="C1", name_company="Acme", qty_sold=1.0, amount=12.5)

    texts = _texts(build_slip_details(record, "C1", "SR1"))

    assert "Acme" in texts
    assert "1 pc" in texts
    assert "-" in texts
    assert "12.50" in texts
    assert remaining_text(3.0) == "3 pcs"
    assert not terms_accepted([])
    assert terms_accepted(["accepted"])


def test_slip_modal_starts_closed_with_confirm_disabled() -> None:
    modal = build_slip_modal()
    confirm = next(c for c in _walk(modal) if getattr(c, "id", None) == "slip-confirm")

    assert "hidden" in modal.className
    assert confirm.disabled


def test_results_include_error_message() -> None:
    def failing():
        raise DataFetchError("HTTP error! status: 500", status_code=500)

    controller = DashboardController(failing)
    controller.load()

    results = build_results(controller.view())
    message = results[0]

    assert message.className == "message-box error"
    assert any("Failed to load data" in text for text in _texts(message))
