import random

import pytest

from consign_tracker.models.record import RawRecord


@pytest.fixture
def make_raw():
    """Factory for raw records with sensible blank defaults."""

    def _make(
        sr_id: str = "SR1",
        co_no: str = "C1",
        name_company: str = "Acme Trading",
        qty_sold="0",
        amount="0",
        remaining_bal="0",
        inv_no: str = "",
        voucher_no: str = "",
        voucher_date: str = "",
    ) -> RawRecord:
        return RawRecord(
            sr_id=sr_id,
            co_no=co_no,
            name_company=name_company,
            qty_sold=qty_sold,
            amount=amount,
            remaining_bal=remaining_bal,
            inv_no=inv_no,
            voucher_no=voucher_no,
            voucher_date=voucher_date,
        )

    return _make


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def scenario_records(make_raw) -> list[RawRecord]:
    """Two lines of SR1 on C1, plus an unrelated order."""
    return [
        make_raw("SR1", "C1", qty_sold="3", amount="100", inv_no=""),
        make_raw("SR1", "C1", qty_sold="2", amount="50.5", inv_no=""),
        make_raw("SR9", "C2", name_company="Other Co", qty_sold="7", amount="70", inv_no="INV-1", voucher_no="V-1"),
    ]
