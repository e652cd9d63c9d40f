import pytest

from consign_tracker.errors import DataFetchError
from consign_tracker.models.common import ASCENDING, DESCENDING, DashboardState
from consign_tracker.models.record import FulfillmentState, RawRecord
from consign_tracker.state import (
    EMPTY_PROMPT,
    EMPTY_RESULTS,
    NO_MATCHES_MESSAGE,
    DashboardController,
)


def _loader(records):
    calls = []

    def load():
        calls.append(1)
        return records

    load.calls = calls
    return load


def _failing_loader():
    raise DataFetchError("HTTP error! status: 503", status_code=503)


def test_end_to_end_report_scenario() -> None:
    raw = [
        RawRecord.from_dict(
            {"sr_id": "SR1", "co_no": "C1", "qty_sold": "10", "amount": "$5.00", "inv_no": "", "voucher_no": ""}
        ),
        RawRecord.from_dict(
            {"sr_id": "SR1", "co_no": "C1", "qty_sold": "5", "amount": "$2.50", "inv_no": "", "voucher_no": ""}
        ),
    ]
    controller = DashboardController(_loader(raw))

    controller.search("C1")
    view = controller.view()

    assert view.total == 1
    (row,) = view.rows
    assert (row.record.sr_id, row.record.co_no) == ("SR1", "C1")
    assert row.record.qty_sold == 15.0
    assert row.record.amount == 7.5
    assert row.status.state is FulfillmentState.AWAITING_INVOICE
    (summary,) = view.summaries
    assert (summary.order_number, summary.total_quantity, summary.total_amount) == ("C1", 15.0, 7.5)


def test_records_are_loaded_once_per_controller(scenario_records) -> None:
    loader = _loader(scenario_records)
    controller = DashboardController(loader)

    controller.search("c1")
    controller.suggestions("sr1")

    assert len(loader.calls) == 1


def test_search_resets_page_and_sort(make_raw) -> None:
    records = [make_raw(f"SR{i:02d}", "C1") for i in range(12)]
    controller = DashboardController(_loader(records))
    controller.search("c1")
    controller.sort("sr_id")
    controller.go_to_page(3)

    state = controller.search("C1 ")

    assert state.query == "c1"
    assert state.page == 1
    assert state.sort.column is None
    assert state.message is None


def test_search_without_hits_shows_info_message(scenario_records) -> None:
    controller = DashboardController(_loader(scenario_records))

    state = controller.search("nothing-here")
    view = controller.view()

    assert state.items == ()
    assert state.message.text == NO_MATCHES_MESSAGE
    assert not state.message.is_error
    assert view.empty_message == EMPTY_RESULTS
    assert not view.show_summary
    assert not view.show_dashboard


def test_clear_search_returns_to_prompt_and_keeps_acknowledgments(scenario_records) -> None:
    controller = DashboardController(_loader(scenario_records))
    controller.search("c1")
    controller.acknowledge("C1", "SR1")

    state = controller.clear_search()
    view = controller.view()

    assert state.query == ""
    assert state.items == ()
    assert state.acknowledged == frozenset({"C1-SR1"})
    assert view.empty_message == EMPTY_PROMPT
    assert not view.controls.visible


def test_fetch_failure_becomes_blocking_error() -> None:
    controller = DashboardController(_failing_loader)

    controller.load()
    state = controller.search("c1")
    view = controller.view()

    assert state.load_failed
    assert state.message.is_error
    assert "status: 503" in state.message.text
    assert view.total == 0
    assert not view.show_summary
    assert not view.show_dashboard


def test_failed_load_is_not_retried_within_the_page_load() -> None:
    controller = DashboardController(_failing_loader)
    state = controller.load()

    calls = []
    retry = DashboardController(lambda: calls.append(1) or [], state)
    retry.search("c1")
    retry.suggestions("sr1")

    assert calls == []
    assert retry.state.message.is_error


def test_sort_toggles_and_returns_to_first_page(make_raw) -> None:
    records = [make_raw(f"SR{i:02d}", "C1", amount=str(i)) for i in range(12)]
    controller = DashboardController(_loader(records))
    controller.search("c1")
    controller.go_to_page(2)

    first = controller.sort("amount")
    second = controller.sort("amount")

    assert first.sort.direction == ASCENDING
    assert second.sort.direction == DESCENDING
    assert second.page == 1
    assert controller.view().rows[0].record.amount == 11.0


def test_sorting_same_column_twice_reverses_filtered_view(make_raw) -> None:
    records = [make_raw(f"SR{i:02d}", "C1", amount=str(i * 3 % 7)) for i in range(7)]
    controller = DashboardController(_loader(records))
    controller.search("c1")

    ascending = controller.sort("amount").items
    descending = controller.sort("amount").items

    assert descending == tuple(reversed(ascending))


def test_sort_on_empty_view_is_a_no_op(scenario_records) -> None:
    controller = DashboardController(_loader(scenario_records))
    before = controller.state

    assert controller.sort("amount") is before


def test_sort_ignores_unknown_columns(scenario_records) -> None:
    controller = DashboardController(_loader(scenario_records))
    controller.search("c1")
    before = controller.state

    assert controller.sort("status") is before


@pytest.mark.parametrize(("requested", "expected"), [(0, 1), (2, 2), (99, 3)])
def test_go_to_page_clamps(make_raw, requested, expected) -> None:
    controller = DashboardController(_loader([make_raw(f"SR{i}", "C1") for i in range(11)]))
    controller.search("c1")

    assert controller.go_to_page(requested).page == expected


def test_acknowledge_changes_presentation(scenario_records) -> None:
    controller = DashboardController(_loader(scenario_records))
    controller.search("c1")

    assert controller.acknowledge("C1", "SR1")
    assert not controller.acknowledge("C1", "SR1")
    (row,) = controller.view().rows
    assert row.status.acknowledged
    assert row.status.header_label == "Waiting for Invoice"


def test_view_pages_rows_but_keeps_all_progress(make_raw) -> None:
    records = [make_raw(f"SR{i:02d}", "C1") for i in range(7)]
    controller = DashboardController(_loader(records))
    controller.search("c1")
    controller.go_to_page(2)

    view = controller.view()

    assert [r.record.sr_id for r in view.rows] == ["SR05", "SR06"]
    assert len(view.progress) == 7
    assert view.controls.pages == (1, 2)
    assert view.summary_text == "Found 7 results:"
    assert view.dashboard_title == "Acme Trading"


def test_state_survives_serialization(scenario_records) -> None:
    controller = DashboardController(_loader(scenario_records))
    controller.search("c1")
    controller.acknowledge("C1", "SR1")

    restored = DashboardController(_loader([]), DashboardState.from_dict(controller.state.to_dict()))

    assert restored.state == controller.state
    assert restored.view() == controller.view()


def test_suggestions_page_through_candidates(make_raw, rng) -> None:
    records = [make_raw(f"SRX{i}", f"CO-{i:02d}") for i in range(8)]
    controller = DashboardController(_loader(records), rng=rng)

    first = controller.suggestions("srx")
    more = controller.suggestions("srx", 5, first.candidates)

    assert len(first.items) == 5
    assert first.has_more
    assert [s.value for s in more.items] == ["CO-05", "CO-06", "CO-07"]
    assert not more.has_more
