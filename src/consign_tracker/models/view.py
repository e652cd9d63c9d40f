"""
Read-only view model handed to the Dash components.

A DashboardView is rebuilt by the controller after every action (search,
sort, page change, acknowledge) and never mutated by the rendering layer.
"""

from dataclasses import dataclass

from consign_tracker.models.common import Message, SortState
from consign_tracker.models.record import FulfillmentState, MergedRecord
from consign_tracker.utils import is_unset
from consign_tracker.utils.record_helpers import VOUCHER_UNSET


@dataclass(frozen=True)
class StatusPresentation:
    """
    How a record's fulfillment state is shown.

    Attributes:
        state: Derived fulfillment state.
        table_label: Text of the status badge in the records table.
        table_class: CSS class of that badge.
        header_label: Status text in the dashboard section header.
        actionable: True when the header shows the "awaiting" error badge.
        can_acknowledge: True when the Acknowledge action is offered.
        acknowledged: True when the record was acknowledged this session.
        stage_classes: CSS classes for the Sales Report, Invoice and
            Voucher progress stages.
    """

    state: FulfillmentState
    table_label: str
    table_class: str
    header_label: str
    actionable: bool
    can_acknowledge: bool
    acknowledged: bool
    stage_classes: tuple[str, str, str]


@dataclass(frozen=True)
class RecordRow:
    """A merged record paired with its derived presentation."""

    record: MergedRecord
    status: StatusPresentation

    @property
    def has_voucher(self) -> bool:
        """True when a voucher number has been issued for the record."""
        return not is_unset(self.record.voucher_no, VOUCHER_UNSET)


@dataclass(frozen=True)
class OrderSummary:
    """Quantity and amount totals for one consignment order."""

    order_number: str
    total_quantity: float
    total_amount: float


@dataclass(frozen=True)
class PageControls:
    """
    Pagination controls for the current view.

    Attributes:
        visible: False when there is at most one page.
        current: Active page.
        total_pages: Number of pages.
        pages: Page numbers to render as buttons.
        has_previous: Whether the previous arrow is enabled.
        has_next: Whether the next arrow is enabled.
    """

    visible: bool
    current: int
    total_pages: int
    pages: tuple[int, ...] = ()
    has_previous: bool = False
    has_next: bool = False


@dataclass(frozen=True)
class DashboardView:
    """Everything the rendering layer needs for one render."""

    query: str
    total: int
    rows: tuple[RecordRow, ...]
    progress: tuple[RecordRow, ...]
    controls: PageControls
    summaries: tuple[OrderSummary, ...]
    summary_text: str
    order_lines: tuple[str, ...]
    dashboard_title: str
    sort: SortState
    message: Message | None
    empty_message: str

    @property
    def has_results(self) -> bool:
        return self.total > 0

    @property
    def show_summary(self) -> bool:
        """The totals panel is only shown for an active search with hits."""
        return bool(self.query) and self.has_results

    @property
    def show_dashboard(self) -> bool:
        return self.has_results
