"""Quantity and amount totals per consignment order."""

from dash import html
from dash_iconify import DashIconify

from consign_tracker.models.view import DashboardView


def build_summary_panel(view: DashboardView) -> html.Div:
    """
    Return the totals panel for the filtered view.

    The panel is only shown for an active search with results.
    """
    if not view.show_summary:
        return html.Div(id="summary-panel", className="card summary-panel hidden")

    return html.Div(
        id="summary-panel",
        className="card summary-panel",
        children=[
            html.Div(
                className="title-row",
                children=[
                    DashIconify(icon="lucide:calculator", className="title-icon"),
                    html.H3(view.summary_text, className="overall-summary"),
                ],
            ),
            html.Ul(
                className="order-summary-list",
                children=[html.Li(line, className="order-summary") for line in view.order_lines],
            ),
        ],
    )
