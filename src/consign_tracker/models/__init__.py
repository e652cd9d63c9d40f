"""
Data models and serialization helpers for the Consign Tracker dashboard.

This package provides:
- Record models (RawRecord, MergedRecord, FulfillmentState)
- Pipeline state models (DashboardState, SessionSearchState, SuggestionPage)
- The read-only view model rendered by the Dash components

All models use Python dataclasses; state models serialize to dictionaries
for dcc.Store.
"""

from consign_tracker.models.common import (
    ASCENDING,
    DESCENDING,
    DashboardState,
    Message,
    PaginationState,
    SessionSearchState,
    SortState,
    Suggestion,
    SuggestionPage,
)
from consign_tracker.models.record import (
    FulfillmentState,
    MergedRecord,
    RawRecord,
    deserialize_records,
    serialize_records,
)
from consign_tracker.models.view import (
    DashboardView,
    OrderSummary,
    PageControls,
    RecordRow,
    StatusPresentation,
)

__all__ = [
    "ASCENDING",
    "DESCENDING",
    "DashboardState",
    "DashboardView",
    "FulfillmentState",
    "MergedRecord",
    "Message",
    "OrderSummary",
    "PageControls",
    "PaginationState",
    "RawRecord",
    "RecordRow",
    "SessionSearchState",
    "SortState",
    "StatusPresentation",
    "Suggestion",
    "SuggestionPage",
    "deserialize_records",
    "serialize_records",
]
