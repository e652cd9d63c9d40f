"""
Demo implementation of RecordService using static in-memory data.

This service is useful for:
- Local development without access to the tracker API
- Testing UI components with realistic data
- Demonstrating the dashboard offline
"""

from typing import Any, Sequence

from consign_tracker.data.demo_records import DEMO_RECORDS
from consign_tracker.lib import logs
from consign_tracker.models.record import RawRecord
from consign_tracker.services.record_service import RecordService, parse_record

LOG = logs.logger(__file__)


class DemoRecordService(RecordService):
    """In-memory record service backed by the demo dataset."""

    def __init__(self, rows: Sequence[dict[str, Any]] | None = None) -> None:
        """
        Initialize with record rows.

        Args:
            rows: API-shaped record dictionaries, or None to use DEMO_RECORDS.
        """
        self._rows: Sequence[dict[str, Any]] = rows if rows is not None else DEMO_RECORDS

    @property
    def source_name(self) -> str:
        return "demo"

    def fetch_records(self) -> list[RawRecord]:
        """Return the demo rows as raw records."""
        records = [parse_record(row) for row in self._rows]
        LOG.info("Serving %d demo records", len(records))
        return records
