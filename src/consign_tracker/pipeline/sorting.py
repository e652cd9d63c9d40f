"""Column sorting for the filtered record view."""

from typing import Any, Sequence

from consign_tracker.models.common import ASCENDING, DESCENDING, SortState
from consign_tracker.models.record import NUMERIC_FIELDS, MergedRecord
from consign_tracker.utils import collation_key, normalize_number

SORTABLE_COLUMNS = (
    "sr_id",
    "name_company",
    "co_no",
    "qty_sold",
    "remaining_bal",
    "amount",
    "inv_no",
    "voucher_no",
    "voucher_date",
)


def toggle_sort(state: SortState, column: str) -> SortState:
    """
    Return the sort state after a header click on column.

    Clicking the active column flips the direction; any other column starts
    ascending.
    """
    if state.column == column:
        direction = DESCENDING if state.direction == ASCENDING else ASCENDING
        return SortState(column=column, direction=direction)
    return SortState(column=column, direction=ASCENDING)


def sort_key(record: MergedRecord, column: str) -> Any:
    """Return the comparison key of a record for the given column."""
    value = record.value(column) or ""
    if column in NUMERIC_FIELDS:
        return normalize_number(value)
    return collation_key(value)


def sort_records(
    records: Sequence[MergedRecord], column: str, direction: str = ASCENDING
) -> list[MergedRecord]:
    """
    Sort records by a column.

    Numeric columns compare by normalized value, the rest by collation key.
    The sort is stable in both directions: records with equal keys keep
    their relative order.
    """
    return sorted(
        records,
        key=lambda record: sort_key(record, column),
        reverse=direction == DESCENDING,
    )


def apply_sort(
    records: Sequence[MergedRecord], state: SortState, column: str
) -> tuple[list[MergedRecord], SortState]:
    """
    Handle a header click: toggle the sort state and reorder the records.

    An empty view is left alone, including its sort state.

    Returns:
        The reordered records and the new sort state.
    """
    if not records:
        return list(records), state
    new_state = toggle_sort(state, column)
    return sort_records(records, column, new_state.direction), new_state
