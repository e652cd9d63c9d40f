"""
Abstract base class defining the record data access contract.

All record service implementations must extend RecordService and provide
fetch_records(). The dashboard calls it once per page load and keeps the
result for the rest of that load.

Implementations:
- DemoRecordService: Static in-memory data for development/testing
- RecordServiceImpl: HTTP GET against the consignment tracker API
"""

from abc import ABC, abstractmethod
from typing import Any

from benedict import benedict

from consign_tracker.models.record import ID_FIELD, RawRecord


def parse_record(row: dict[str, Any]) -> RawRecord:
    """
    Parse one API-shaped document into a RawRecord.

    The tracker serves MongoDB documents, so `_id` may be a plain value or
    extended JSON ({"$oid": "..."}). benedict keypaths unwrap it without
    KeyErrors. Only the id is wrapped, since other field names may contain
    the keypath separator.
    """
    b = benedict({ID_FIELD: row.get(ID_FIELD)})
    record_id = b.get(f"{ID_FIELD}.$oid") or b.get(ID_FIELD, "")
    data = dict(row)
    data[ID_FIELD] = record_id
    return RawRecord.from_dict(data)


class RecordService(ABC):
    """Abstract base class for raw record access."""

    @abstractmethod
    def fetch_records(self) -> list[RawRecord]:
        """
        Return the full raw record collection.

        Raises:
            DataFetchError: If the source is unreachable or its response
                cannot be used. Partial results are never returned.
        """

    @property
    def source_name(self) -> str:
        """Short description of the data source, logged when records are loaded."""
        return type(self).__name__
