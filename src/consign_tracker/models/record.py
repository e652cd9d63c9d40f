"""
Consignment record models and serialization helpers.

Records arrive from the data service as flat dictionaries, one per sales
report line:

    RawRecord     as fetched; numeric fields may still be formatted strings
    MergedRecord  one per (sr_id, co_no) with numeric fields summed as floats

to_dict/from_dict convert between the dataclasses and JSON-compatible
dictionaries for dcc.Store and the record cache.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping

from consign_tracker.utils import text_value

NUMERIC_FIELDS = ("qty_sold", "amount", "remaining_bal")
TEXT_FIELDS = (
    "sr_id",
    "co_no",
    "name_company",
    "inv_no",
    "voucher_no",
    "voucher_date",
)
ID_FIELD = "_id"


class FulfillmentState(str, Enum):
    """Where a sales report sits in the invoice and voucher workflow."""

    AWAITING_INVOICE = "awaiting_invoice"
    PROCESSING_VOUCHER = "processing_voucher"
    COMPLETE = "complete"


@dataclass(slots=True)
class RawRecord:
    """A sales report line exactly as the data service returned it."""

    sr_id: str = ""
    co_no: str = ""
    name_company: str = ""
    qty_sold: Any = None
    amount: Any = None
    remaining_bal: Any = None
    inv_no: str = ""
    voucher_no: str = ""
    voucher_date: str = ""
    record_id: str = ""
    extras: Mapping[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str]:
        """Return the (sr_id, co_no) pair records are merged on."""
        return (self.sr_id, self.co_no)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawRecord":
        """Build a record from a flat service payload row."""
        known = set(TEXT_FIELDS) | set(NUMERIC_FIELDS) | {ID_FIELD}
        return cls(
            **{name: text_value(data.get(name)) for name in TEXT_FIELDS},
            **{name: data.get(name) for name in NUMERIC_FIELDS},
            record_id=text_value(data.get(ID_FIELD)),
            extras={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict:
        """Serialize back to the flat payload shape."""
        data = dict(self.extras)
        data.update({name: getattr(self, name) for name in TEXT_FIELDS})
        data.update({name: getattr(self, name) for name in NUMERIC_FIELDS})
        data[ID_FIELD] = self.record_id
        return data


@dataclass(slots=True)
class MergedRecord:
    """
    Aggregate of every raw record sharing one (sr_id, co_no) key.

    Numeric fields hold the normalized sums; all other fields come from the
    first raw record seen for the key.
    """

    sr_id: str = ""
    co_no: str = ""
    name_company: str = ""
    qty_sold: float = 0.0
    amount: float = 0.0
    remaining_bal: float = 0.0
    inv_no: str = ""
    voucher_no: str = ""
    voucher_date: str = ""
    record_id: str = ""
    extras: Mapping[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str]:
        return (self.sr_id, self.co_no)

    def value(self, column: str) -> Any:
        """Return a column value by name, falling back to the extra fields."""
        if column in _MERGED_FIELD_NAMES:
            return getattr(self, column)
        return self.extras.get(column)

    def to_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["extras"] = dict(self.extras)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MergedRecord":
        return cls(
            **{name: text_value(data.get(name)) for name in TEXT_FIELDS},
            **{name: float(data.get(name) or 0.0) for name in NUMERIC_FIELDS},
            record_id=text_value(data.get("record_id")),
            extras=dict(data.get("extras") or {}),
        )


_MERGED_FIELD_NAMES = frozenset(f.name for f in fields(MergedRecord)) - {"extras"}


def serialize_records(records: "list[MergedRecord]") -> list[dict]:
    """Convert merged records into JSON serializable dictionaries."""
    return [record.to_dict() for record in records]


def deserialize_records(payload: list[Mapping[str, Any]] | None) -> list[MergedRecord]:
    """Convert serialized dictionaries back into merged records."""
    return [MergedRecord.from_dict(item) for item in payload or []]
