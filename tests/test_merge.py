from consign_tracker.pipeline import merge_records, merged_list
from consign_tracker.utils import normalize_number


def test_lines_of_one_report_are_summed(make_raw) -> None:
    records = [
        make_raw("SR1", "C1", qty_sold="3", amount="₱ 100.00", remaining_bal="1"),
        make_raw("SR1", "C1", qty_sold="2", amount="50.5", remaining_bal="x"),
    ]

    merged = merge_records(records)

    assert list(merged) == [("SR1", "C1")]
    record = merged[("SR1", "C1")]
    assert record.qty_sold == 5.0
    assert record.amount == 150.5
    assert record.remaining_bal == 1.0


def test_first_line_supplies_reference_fields(make_raw) -> None:
    records = [
        make_raw("SR1", "C1", inv_no="", name_company="First"),
        make_raw("SR1", "C1", inv_no="INV-9", name_company="Second"),
    ]

    (record,) = merged_list(records)

    assert record.inv_no == ""
    assert record.name_company == "First"


def test_same_report_on_different_orders_stays_separate(make_raw) -> None:
    records = [make_raw("SR1", "C1"), make_raw("SR1", "C2"), make_raw("", ""), make_raw("", "")]

    merged = merge_records(records)

    assert list(merged) == [("SR1", "C1"), ("SR1", "C2"), ("", "")]


def test_merge_conserves_totals(make_raw) -> None:
    records = [
        make_raw("SR1", "C1", qty_sold="1", amount="10"),
        make_raw("SR2", "C1", qty_sold="2.5", amount="₱ 20"),
        make_raw("SR1", "C1", qty_sold="bad", amount="30"),
        make_raw("SR3", "C2", qty_sold="4", amount=""),
    ]

    merged = merged_list(records)

    assert sum(r.qty_sold for r in merged) == sum(normalize_number(r.qty_sold) for r in records)
    assert sum(r.amount for r in merged) == sum(normalize_number(r.amount) for r in records)


def test_merge_is_associative_over_batches(make_raw) -> None:
    first = [make_raw("SR1", "C1", qty_sold="1"), make_raw("SR2", "C1", qty_sold="2")]
    second = [make_raw("SR1", "C1", qty_sold="3"), make_raw("SR3", "C2", qty_sold="4")]

    whole = merge_records(first + second)
    left = merge_records(first)
    right = merge_records(second)

    for key, record in whole.items():
        parts = [part[key].qty_sold for part in (left, right) if key in part]
        assert record.qty_sold == sum(parts)


def test_merge_of_nothing_is_empty() -> None:
    assert merge_records([]) == {}
