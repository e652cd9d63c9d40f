"""Composes the results area from the view model."""

from dash import html

from consign_tracker.components.dashboard import build_dashboard
from consign_tracker.components.message_box import build_message_box
from consign_tracker.components.pagination import build_pagination
from consign_tracker.components.records_table import build_records_table
from consign_tracker.components.summary_panel import build_summary_panel
from consign_tracker.models.view import DashboardView


def build_results(view: DashboardView) -> list:
    """
    Return the children of the results container.

    Order: message box, order totals, progress dashboard, records table and
    pagination. Sections with nothing to show render hidden.
    """
    return [
        build_message_box(view.message),
        build_summary_panel(view),
        build_dashboard(view),
        build_records_table(view),
        build_pagination(view.controls),
    ]


def build_loading_state() -> html.Div:
    """Return a loading indicator for the initial page load."""
    return html.Div(
        className="card loading-state",
        children=[
            html.Div(className="spinner"),
            html.P("Loading consignment records...", className="muted"),
        ],
    )
