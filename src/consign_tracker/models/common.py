"""
Dashboard state models kept in dcc.Store between callbacks.

These models handle:

- Pipeline state (query, filtered records, page, sort, acknowledgments)
- The session-scoped last search term
- Search suggestion paging

All models include to_dict/from_dict methods for the JSON serialization
required by Dash's dcc.Store component. The pipeline state is treated as
immutable: controller actions return a new instance via dataclasses.replace.
"""

from dataclasses import dataclass, field
from typing import Any

from consign_tracker.models.record import (
    MergedRecord,
    deserialize_records,
    serialize_records,
)

ASCENDING = "asc"
DESCENDING = "desc"

MESSAGE_INFO = "info"
MESSAGE_ERROR = "error"


@dataclass(frozen=True)
class Message:
    """
    A user-visible notice shown in the message box.

    Attributes:
        text: Message body.
        kind: "info" for neutral notices, "error" for blocking failures.
    """

    text: str
    kind: str = MESSAGE_INFO

    @property
    def is_error(self) -> bool:
        return self.kind == MESSAGE_ERROR

    def to_dict(self) -> dict:
        return {"text": self.text, "kind": self.kind}

    @classmethod
    def from_dict(cls, data: dict | None) -> "Message | None":
        if not data:
            return None
        return cls(text=data.get("text", ""), kind=data.get("kind", MESSAGE_INFO))


@dataclass(frozen=True)
class SortState:
    """
    Current sort column and direction.

    Attributes:
        column: Record field the view is sorted on, or None before any sort.
        direction: "asc" or "desc".
    """

    column: str | None = None
    direction: str = ASCENDING


@dataclass(frozen=True)
class PaginationState:
    """
    Tracks the active page of the filtered view.

    Attributes:
        page: Current page number (1-indexed).
        page_size: Number of records per page.
    """

    page: int = 1
    page_size: int = 5


@dataclass(frozen=True)
class DashboardState:
    """
    Unified pipeline state threaded through every controller action.

    Attributes:
        query: Normalized (stripped, lower-cased) active search term.
        items: Filtered merged records in their current display order.
        pagination: Active page.
        sort: Active sort column and direction.
        acknowledged: Acknowledgment keys ("{co_no}-{sr_id}") for the session.
        message: Notice to show above the table, if any.
        load_failed: True when the record fetch failed for this page load.
    """

    query: str = ""
    items: tuple[MergedRecord, ...] = ()
    pagination: PaginationState = field(default_factory=PaginationState)
    sort: SortState = field(default_factory=SortState)
    acknowledged: frozenset[str] = frozenset()
    message: Message | None = None
    load_failed: bool = False

    @property
    def page(self) -> int:
        """Current page number."""
        return self.pagination.page

    @property
    def page_size(self) -> int:
        """Records per page."""
        return self.pagination.page_size

    @property
    def total(self) -> int:
        """Number of records in the filtered view."""
        return len(self.items)

    def to_dict(self) -> dict:
        """Serialize state to a JSON-compatible dictionary."""
        return {
            "query": self.query,
            "items": serialize_records(list(self.items)),
            "page": self.pagination.page,
            "page_size": self.pagination.page_size,
            "sort_column": self.sort.column,
            "sort_direction": self.sort.direction,
            "acknowledged": sorted(self.acknowledged),
            "message": self.message.to_dict() if self.message else None,
            "load_failed": self.load_failed,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "DashboardState":
        """Deserialize a dictionary to DashboardState."""
        if not data:
            return cls()
        return cls(
            query=data.get("query", ""),
            items=tuple(deserialize_records(data.get("items"))),
            pagination=PaginationState(
                page=data.get("page", 1),
                page_size=data.get("page_size", 5),
            ),
            sort=SortState(
                column=data.get("sort_column"),
                direction=data.get("sort_direction", ASCENDING),
            ),
            acknowledged=frozenset(data.get("acknowledged", [])),
            message=Message.from_dict(data.get("message")),
            load_failed=data.get("load_failed", False),
        )


@dataclass
class SessionSearchState:
    """
    The last search term, kept in browser session storage.

    It survives a page reload within the same tab and is dropped when the
    user clears the search or closes the tab.
    """

    last_search_term: str = ""

    def to_dict(self) -> dict:
        return {"last_search_term": self.last_search_term}

    @classmethod
    def from_dict(cls, data: dict | None) -> "SessionSearchState":
        if not data:
            return cls()
        return cls(last_search_term=data.get("last_search_term", "") or "")


@dataclass(frozen=True)
class Suggestion:
    """An order the user can jump to from the search box."""

    label: str
    value: str

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True)
class SuggestionPage:
    """
    One batch of suggestions plus the bookkeeping to fetch the next batch.

    Attributes:
        items: Suggestions to display.
        offset: Offset of this batch within the candidate list.
        has_more: True when a "load more" entry should be offered.
        candidates: The full candidate list the batch was drawn from.
    """

    items: tuple[Suggestion, ...] = ()
    offset: int = 0
    has_more: bool = False
    candidates: tuple[Suggestion, ...] = ()

    @property
    def visible(self) -> bool:
        return bool(self.items)

    def to_dict(self) -> dict:
        return {
            "offset": self.offset,
            "candidates": [s.to_dict() for s in self.candidates],
        }

    @staticmethod
    def candidates_from_dict(data: dict[str, Any] | None) -> tuple[Suggestion, ...]:
        if not data:
            return ()
        return tuple(
            Suggestion(label=item.get("label", ""), value=item.get("value", ""))
            for item in data.get("candidates", [])
        )
