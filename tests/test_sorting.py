from consign_tracker.models.common import ASCENDING, DESCENDING, SortState
from consign_tracker.models.record import MergedRecord
from consign_tracker.pipeline import apply_sort, sort_records, toggle_sort


def _records() -> list[MergedRecord]:
    return [
        MergedRecord(sr_id="SR2", name_company="beta", amount=10.0),
        MergedRecord(sr_id="SR1", name_company="Alpha", amount=200.0),
        MergedRecord(sr_id="SR3", name_company="alpha", amount=30.0),
    ]


def test_toggle_same_column_flips_direction() -> None:
    state = toggle_sort(SortState(), "amount")
    assert state == SortState("amount", ASCENDING)

    state = toggle_sort(state, "amount")
    assert state == SortState("amount", DESCENDING)

    state = toggle_sort(state, "amount")
    assert state == SortState("amount", ASCENDING)


def test_new_column_resets_to_ascending() -> None:
    state = toggle_sort(SortState("amount", DESCENDING), "sr_id")

    assert state == SortState("sr_id", ASCENDING)


def test_numeric_columns_sort_by_value() -> None:
    ordered = sort_records(_records(), "amount")

    assert [r.amount for r in ordered] == [10.0, 30.0, 200.0]


def test_text_columns_sort_case_insensitively_and_stably() -> None:
    ordered = sort_records(_records(), "name_company")

    assert [r.sr_id for r in ordered] == ["SR1", "SR3", "SR2"]


def test_descending_is_stable_for_ties() -> None:
    records = [
        MergedRecord(sr_id="a", amount=5.0),
        MergedRecord(sr_id="b", amount=5.0),
        MergedRecord(sr_id="c", amount=9.0),
    ]

    ordered = sort_records(records, "amount", DESCENDING)

    assert [r.sr_id for r in ordered] == ["c", "a", "b"]


def test_sorting_twice_in_one_direction_is_idempotent() -> None:
    once = sort_records(_records(), "amount", DESCENDING)

    assert sort_records(once, "amount", DESCENDING) == once


def test_apply_sort_on_empty_view_changes_nothing() -> None:
    state = SortState("amount", DESCENDING)

    records, new_state = apply_sort([], state, "sr_id")

    assert records == []
    assert new_state is state


def test_apply_sort_reorders_and_toggles() -> None:
    records, state = apply_sort(_records(), SortState(), "sr_id")

    assert [r.sr_id for r in records] == ["SR1", "SR2", "SR3"]
    assert state == SortState("sr_id", ASCENDING)


def test_second_click_on_same_column_reverses_order() -> None:
    first, state = apply_sort(_records(), SortState(), "amount")
    second, state = apply_sort(first, state, "amount")

    assert second == list(reversed(first))
    assert state == SortState("amount", DESCENDING)
