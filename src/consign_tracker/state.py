"""
Dashboard controller for the Consign Tracker UI.

The controller owns one pass of the record pipeline per Dash callback. It is
rebuilt from the serialized DashboardState on every callback, applies one
user action (search, sort, page change, acknowledge), and hands back both the
new state for dcc.Store and the DashboardView for rendering.

No exception leaves the controller: fetch failures become an error message
and an empty view.
"""

import os
import random
from dataclasses import replace
from typing import Callable, Sequence

from consign_tracker.errors import DataFetchError
from consign_tracker.lib import logs
from consign_tracker.models.common import (
    MESSAGE_ERROR,
    DashboardState,
    Message,
    PaginationState,
    SortState,
    Suggestion,
    SuggestionPage,
)
from consign_tracker.models.record import MergedRecord, RawRecord
from consign_tracker.models.view import DashboardView, RecordRow
from consign_tracker.pipeline import (
    AcknowledgmentTracker,
    apply_sort,
    build_controls,
    clamp_page,
    dashboard_title,
    merged_list,
    order_summary_text,
    overall_summary_text,
    page_slice,
    present_status,
    search_records,
    suggest,
    suggestion_page,
    summarize_orders,
    total_pages,
)
from consign_tracker.pipeline.search import normalize_query
from consign_tracker.pipeline.sorting import SORTABLE_COLUMNS

LOG = logs.logger(__file__)

# Branding configuration
USE_GENERIC_BRANDING = os.getenv("CONSIGN_TRACKER_GENERIC", "false").lower() in {
    "1",
    "true",
    "yes",
}
APP_TITLE = "Consignment Tracker" if USE_GENERIC_BRANDING else "Consign Tracker"
APP_SUBTITLE = (
    "Track sales reports, invoices and vouchers."
    if USE_GENERIC_BRANDING
    else "Follow your consignment sales reports from invoice to voucher."
)

LOAD_ERROR_TEMPLATE = (
    "Failed to load data from the consignment API. "
    "Please reload the page or try again later. Error: {error}"
)
NO_MATCHES_MESSAGE = "No matching results found."
EMPTY_PROMPT = "Enter a search term and press Enter or select a suggestion."
EMPTY_RESULTS = "No data found for your search."

RecordLoader = Callable[[], Sequence[RawRecord]]


class DashboardController:
    """
    Applies user actions to the dashboard state.

    Attributes:
        state: The current DashboardState; replaced (never mutated) by each
            action.
    """

    def __init__(
        self,
        loader: RecordLoader,
        state: DashboardState | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            loader: Returns the raw records of this page load. Called at most
                once per controller, and never after a failed load.
            state: Deserialized state from the previous callback.
            rng: Random source for suggestion sampling.
        """
        self._loader = loader
        self.state = state or DashboardState()
        self._rng = rng
        self._records: list[RawRecord] | None = None

    @property
    def records(self) -> list[RawRecord]:
        """Raw records of this page load, fetched on first access."""
        if self._records is None:
            if self.state.load_failed:
                self._records = []
            else:
                self.load()
        return self._records or []

    def load(self) -> DashboardState:
        """
        Fetch the raw records.

        A DataFetchError is logged and turned into a blocking error message;
        the view stays empty until the page is reloaded.
        """
        try:
            self._records = list(self._loader())
        except DataFetchError as exc:
            LOG.error("Record load failed: %s", exc, exc_info=True)
            self._records = []
            self.state = DashboardState(
                acknowledged=self.state.acknowledged,
                message=Message(LOAD_ERROR_TEMPLATE.format(error=exc), MESSAGE_ERROR),
                load_failed=True,
            )
            return self.state
        LOG.info("Loaded %d raw records", len(self._records))
        return self.state

    def search(self, query: str | None) -> DashboardState:
        """
        Run an order-scoped search and reset paging and sort.

        An empty query clears the view; a query without hits shows an
        informational message.
        """
        records = self.records
        if self.state.load_failed:
            return self.state

        normalized = normalize_query(query)
        items = search_records(normalized, merged_list(records)) if normalized else []
        LOG.info("Search - query:%s results:%d", normalized, len(items))
        self.state = replace(
            self.state,
            query=normalized,
            items=tuple(items),
            pagination=PaginationState(page_size=self.state.page_size),
            sort=SortState(),
            message=Message(NO_MATCHES_MESSAGE) if normalized and not items else None,
        )
        return self.state

    def clear_search(self) -> DashboardState:
        """Drop the query and the filtered view. Acknowledgments are kept."""
        message = self.state.message if self.state.load_failed else None
        self.state = replace(
            self.state,
            query="",
            items=(),
            pagination=PaginationState(page_size=self.state.page_size),
            sort=SortState(),
            message=message,
        )
        return self.state

    def sort(self, column: str) -> DashboardState:
        """Toggle the sort on column and go back to the first page."""
        if column not in SORTABLE_COLUMNS:
            LOG.warning("Ignoring sort on unknown column - column:%s", column)
            return self.state
        if not self.state.items:
            return self.state

        items, sort_state = apply_sort(self.state.items, self.state.sort, column)
        LOG.info("Sort - column:%s direction:%s", sort_state.column, sort_state.direction)
        self.state = replace(
            self.state,
            items=tuple(items),
            sort=sort_state,
            pagination=replace(self.state.pagination, page=1),
        )
        return self.state

    def go_to_page(self, page: int) -> DashboardState:
        """Move to page, clamped to the available pages."""
        pages = total_pages(self.state.total, self.state.page_size)
        self.state = replace(
            self.state,
            pagination=replace(self.state.pagination, page=clamp_page(page, pages)),
        )
        return self.state

    def acknowledge(self, order_number: str, report_id: str) -> bool:
        """
        Acknowledge an (order, report) pair for the rest of the session.

        Returns:
            True if the pair was newly acknowledged.
        """
        tracker = AcknowledgmentTracker(self.state.acknowledged)
        added = tracker.acknowledge(order_number, report_id)
        if added:
            LOG.info("Acknowledged - co_no:%s sr_id:%s", order_number, report_id)
            self.state = replace(self.state, acknowledged=tracker.keys)
        return added

    def suggestions(
        self,
        query: str | None,
        offset: int = 0,
        candidates: Sequence[Suggestion] | None = None,
    ) -> SuggestionPage:
        """
        Return a batch of search-box suggestions.

        The first batch (offset 0) is computed from the raw records; later
        batches page through the candidates of that first batch.
        """
        if offset > 0 and candidates is not None:
            return suggestion_page(candidates, offset, self._rng)
        return suggest(query, self.records, self._rng)

    def find(self, order_number: str, report_id: str) -> MergedRecord | None:
        """Return the filtered record for an (order, report) pair, if shown."""
        for record in self.state.items:
            if record.co_no == order_number and record.sr_id == report_id:
                return record
        return None

    def row(self, record: MergedRecord) -> RecordRow:
        """Pair a record with its status presentation."""
        tracker = AcknowledgmentTracker(self.state.acknowledged)
        acknowledged = tracker.is_acknowledged(record.co_no, record.sr_id)
        return RecordRow(record=record, status=present_status(record, acknowledged))

    def view(self) -> DashboardView:
        """Build the view model for the current state."""
        state = self.state
        controls = build_controls(state.total, state.page, state.page_size)
        page_items = page_slice(state.items, controls.current, state.page_size)
        progress = sorted(state.items, key=lambda record: record.sr_id.lower())
        summaries = tuple(summarize_orders(state.items))

        return DashboardView(
            query=state.query,
            total=state.total,
            rows=tuple(self.row(record) for record in page_items),
            progress=tuple(self.row(record) for record in progress),
            controls=controls,
            summaries=summaries,
            summary_text=overall_summary_text(state.total),
            order_lines=tuple(order_summary_text(summary) for summary in summaries),
            dashboard_title=dashboard_title(state.items),
            sort=state.sort,
            message=state.message,
            empty_message=EMPTY_RESULTS if state.query else EMPTY_PROMPT,
        )
