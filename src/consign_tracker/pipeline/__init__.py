"""
The record processing pipeline behind the dashboard.

Stages, in the order the controller runs them:
- merge: consolidate raw lines per (sr_id, co_no)
- search: order-scoped filtering and search-box suggestions
- sorting: column sort with direction toggling
- pagination: page slices and the page-button window
- summary: per-order totals and headlines
- status / acknowledgments: derived fulfillment state and its presentation

Every stage is a plain function over in-memory sequences and returns a
well-defined, possibly empty, result.
"""

from consign_tracker.pipeline.acknowledgments import AcknowledgmentTracker, ack_key
from consign_tracker.pipeline.merge import merge_records, merged_list
from consign_tracker.pipeline.pagination import (
    PAGE_SIZE,
    build_controls,
    clamp_page,
    page_slice,
    page_window,
    total_pages,
)
from consign_tracker.pipeline.search import (
    collect_suggestions,
    matching_orders,
    search_records,
    suggest,
    suggestion_page,
)
from consign_tracker.pipeline.sorting import apply_sort, sort_records, toggle_sort
from consign_tracker.pipeline.status import derive_status, present_status, status_of
from consign_tracker.pipeline.summary import (
    dashboard_title,
    order_summary_text,
    overall_summary_text,
    summarize_orders,
)

__all__ = [
    "PAGE_SIZE",
    "AcknowledgmentTracker",
    "ack_key",
    "apply_sort",
    "build_controls",
    "clamp_page",
    "collect_suggestions",
    "dashboard_title",
    "derive_status",
    "matching_orders",
    "merge_records",
    "merged_list",
    "order_summary_text",
    "overall_summary_text",
    "page_slice",
    "page_window",
    "present_status",
    "search_records",
    "sort_records",
    "status_of",
    "suggest",
    "suggestion_page",
    "summarize_orders",
    "toggle_sort",
    "total_pages",
]
