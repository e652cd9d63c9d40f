"""
Cross-order totals and headline text for the current filtered view.

Totals are grouped by consignment order only, so two sales reports of the
same order add up into one line.
"""

from typing import Iterable, Sequence

from consign_tracker.models.record import MergedRecord
from consign_tracker.models.view import OrderSummary
from consign_tracker.utils import (
    collation_key,
    format_amount,
    format_quantity,
    normalize_number,
    piece_unit,
)

MISSING_ORDER = "N/A"
DEFAULT_TITLE = "Consignment Overview Dashboard"
MULTI_ORDER_TITLE = "Latest Consignment Updates"


def summarize_orders(records: Iterable[MergedRecord]) -> list[OrderSummary]:
    """
    Sum quantity and amount per order number.

    Args:
        records: Filtered records.

    Returns:
        One OrderSummary per order, sorted by order number.
    """
    totals: dict[str, list[float]] = {}
    for record in records:
        order_number = record.co_no or MISSING_ORDER
        bucket = totals.setdefault(order_number, [0.0, 0.0])
        bucket[0] += normalize_number(record.qty_sold)
        bucket[1] += normalize_number(record.amount)

    return [
        OrderSummary(order_number=order, total_quantity=qty, total_amount=amount)
        for order, (qty, amount) in sorted(
            totals.items(), key=lambda item: collation_key(item[0])
        )
    ]


def overall_summary_text(count: int) -> str:
    """Return the "Found N results:" headline."""
    noun = "result" if count == 1 else "results"
    return f"Found {count} {noun}:"


def order_summary_text(summary: OrderSummary) -> str:
    """Return the one-line description of an order's totals."""
    quantity = format_quantity(summary.total_quantity)
    unit = piece_unit(summary.total_quantity)
    amount = format_amount(summary.total_amount)
    return (
        f"CO Number {summary.order_number} : {quantity} {unit}, "
        f"Total Amount {amount} reported sold."
    )


def dashboard_title(records: Sequence[MergedRecord]) -> str:
    """
    Pick the progress dashboard heading.

    A single company is named outright; otherwise a single order is named;
    otherwise a generic heading is used.
    """
    if not records:
        return DEFAULT_TITLE
    companies = {record.name_company for record in records}
    orders = {record.co_no for record in records}
    if len(companies) == 1:
        return next(iter(companies))
    if len(orders) == 1:
        return f"Latest update on C.O. {next(iter(orders))}"
    return MULTI_ORDER_TITLE
