"""
HTTP implementation of RecordService.

Reads the full consignment record collection from the tracker API with a
single GET request. The API serves the documents of a MongoDB collection as a
JSON array, so `_id` may arrive either as a plain string or in extended JSON
form ({"$oid": "..."}).

Each call makes a single attempt. A failed fetch is reported to the
user, who reloads the page to try again.
"""

import os

import httpx

from consign_tracker.errors import DataFetchError
from consign_tracker.lib import logs
from consign_tracker.models.record import RawRecord
from consign_tracker.services.record_service import RecordService, parse_record

LOG = logs.logger(__file__)

_DEFAULT_API_URL = "https://consigntracker-db.jtdigital.cc/api/consign_tracker"
_DEFAULT_TIMEOUT = 20.0


class RecordServiceImpl(RecordService):
    """
    Record service backed by the consignment tracker REST API.

    Optional Environment Variables:
        CONSIGN_TRACKER_API_URL: Endpoint returning the record array.
        CONSIGN_TRACKER_TIMEOUT: Request timeout in seconds.

    Attributes:
        api_url: Endpoint the records are fetched from.
        timeout_seconds: Request timeout.
    """

    def __init__(
        self,
        api_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            api_url: Endpoint URL; defaults to CONSIGN_TRACKER_API_URL.
            timeout_seconds: Timeout; defaults to CONSIGN_TRACKER_TIMEOUT.
            transport: Optional httpx transport (used by tests).
        """
        self.api_url = api_url or os.getenv("CONSIGN_TRACKER_API_URL", _DEFAULT_API_URL)
        self.timeout_seconds = timeout_seconds or float(
            os.getenv("CONSIGN_TRACKER_TIMEOUT", str(_DEFAULT_TIMEOUT))
        )
        self._transport = transport

    @property
    def source_name(self) -> str:
        return self.api_url

    def fetch_records(self) -> list[RawRecord]:
        """
        Fetch and parse the full record collection.

        Raises:
            DataFetchError: On transport errors, non-success statuses,
                invalid JSON, or a payload that is not a JSON array.
        """
        LOG.info("Fetching records - url:%s", self.api_url)
        try:
            with httpx.Client(
                timeout=self.timeout_seconds, transport=self._transport
            ) as client:
                response = client.get(self.api_url)
        except httpx.HTTPError as exc:
            raise DataFetchError(f"Could not reach the record service: {exc}") from exc

        if not response.is_success:
            raise DataFetchError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise DataFetchError("Record service returned invalid JSON") from exc

        if not isinstance(payload, list):
            raise DataFetchError(
                f"Record service returned {type(payload).__name__}, expected a list"
            )

        records = [parse_record(row) for row in payload if isinstance(row, dict)]
        LOG.info("Fetched %d records (%d rows in payload)", len(records), len(payload))
        return records
