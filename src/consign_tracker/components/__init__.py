"""
Reusable Dash UI components for the Consign Tracker dashboard.

This package provides modular, composable components:
- search_panel: Search input, clear button and suggestion list
- message_box: Informational and error notices
- summary_panel: Per-order quantity and amount totals
- dashboard: Collapsible progress sections with the Acknowledge action
- records_table: Sortable records table with status badges
- pagination: Previous/next arrows and the page-number window
- slip_modal: Acknowledgment slip with the terms gate
- results: Composition of the sections above

All components are pure functions that return Dash html/dcc elements,
making them easy to test and compose.
"""

from consign_tracker.components.dashboard import build_dashboard
from consign_tracker.components.message_box import build_message_box
from consign_tracker.components.pagination import build_pagination
from consign_tracker.components.records_table import build_records_table
from consign_tracker.components.results import build_loading_state, build_results
from consign_tracker.components.search_panel import build_search_panel, build_suggestions
from consign_tracker.components.slip_modal import build_slip_details, build_slip_modal
from consign_tracker.components.summary_panel import build_summary_panel

__all__ = [
    "build_dashboard",
    "build_loading_state",
    "build_message_box",
    "build_pagination",
    "build_records_table",
    "build_results",
    "build_search_panel",
    "build_slip_details",
    "build_slip_modal",
    "build_suggestions",
    "build_summary_panel",
]
