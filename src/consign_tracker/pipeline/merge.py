"""
Consolidation of raw sales report lines into per-report aggregates.

The data service can return several lines for the same sales report on the
same consignment order (one per item or delivery). The dashboard always works
on one row per (sr_id, co_no) with quantities, amounts and balances summed.
"""

from typing import Iterable

from consign_tracker.models.record import MergedRecord, RawRecord
from consign_tracker.utils import normalize_number


def merge_records(
    records: Iterable[RawRecord],
) -> dict[tuple[str, str], MergedRecord]:
    """
    Merge raw records sharing a (sr_id, co_no) key.

    Iteration order of the result is the order in which each key first
    appears. Blank ids are valid key parts and form their own bucket.

    Args:
        records: Raw records in fetch order.

    Returns:
        Mapping from (sr_id, co_no) to the merged record.
    """
    merged: dict[tuple[str, str], MergedRecord] = {}
    for record in records:
        qty_sold = normalize_number(record.qty_sold)
        amount = normalize_number(record.amount)
        remaining_bal = normalize_number(record.remaining_bal)

        existing = merged.get(record.key)
        if existing is not None:
            existing.qty_sold += qty_sold
            existing.amount += amount
            existing.remaining_bal += remaining_bal
            continue

        merged[record.key] = MergedRecord(
            sr_id=record.sr_id,
            co_no=record.co_no,
            name_company=record.name_company,
            qty_sold=qty_sold,
            amount=amount,
            remaining_bal=remaining_bal,
            inv_no=record.inv_no,
            voucher_no=record.voucher_no,
            voucher_date=record.voucher_date,
            record_id=record.record_id,
            extras=dict(record.extras),
        )
    return merged


def merged_list(records: Iterable[RawRecord]) -> list[MergedRecord]:
    """Return the merged records as a list in first-appearance order."""
    return list(merge_records(records).values())
