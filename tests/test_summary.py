from consign_tracker.models.record import MergedRecord
from consign_tracker.models.view import OrderSummary
from consign_tracker.pipeline import (
    dashboard_title,
    order_summary_text,
    overall_summary_text,
    summarize_orders,
)


def test_totals_grouped_by_order_and_sorted() -> None:
    records = [
        MergedRecord(sr_id="SR1", co_no="C2", qty_sold=2.0, amount=20.0),
        MergedRecord(sr_id="SR2", co_no="C1", qty_sold=1.0, amount=10.0),
        MergedRecord(sr_id="SR3", co_no="C2", qty_sold=3.0, amount=30.5),
        MergedRecord(sr_id="SR4", co_no="", qty_sold=4.0, amount=0.0),
    ]

    summaries = summarize_orders(records)

    assert summaries == [
        OrderSummary("C1", 1.0, 10.0),
        OrderSummary("C2", 5.0, 50.5),
        OrderSummary("N/A", 4.0, 0.0),
    ]
    assert sum(s.total_quantity for s in summaries) == sum(r.qty_sold for r in records)
    assert sum(s.total_amount for s in summaries) == sum(r.amount for r in records)


def test_summary_texts() -> None:
    assert overall_summary_text(1) == "Found 1 result:"
    assert overall_summary_text(3) == "Found 3 results:"
    assert (
        order_summary_text(OrderSummary("C1", 1.0, 1234.5))
        == "CO Number C1 : 1 pc, Total Amount 1,234.50 reported sold."
    )
    assert (
        order_summary_text(OrderSummary("C2", 5.0, 50.0))
        == "CO Number C2 : 5 pcs, Total Amount 50.00 reported sold."
    )


def test_dashboard_title_variants() -> None:
    one_company = [
        MergedRecord(co_no="C1", name_company="Acme"),
        MergedRecord(co_no="C2", name_company="Acme"),
    ]
    one_order = [
        MergedRecord(co_no="C1", name_company="Acme"),
        MergedRecord(co_no="C1", name_company="Acme Ltd"),
    ]
    mixed = [
        MergedRecord(co_no="C1", name_company="Acme"),
        MergedRecord(co_no="C2", name_company="Other"),
    ]

    assert dashboard_title([]) == "Consignment Overview Dashboard"
    assert dashboard_title(one_company) == "Acme"
    assert dashboard_title(one_order) == "Latest update on C.O. C1"
    assert dashboard_title(mixed) == "Latest Consignment Updates"
