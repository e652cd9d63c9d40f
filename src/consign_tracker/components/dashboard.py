"""
Progress dashboard: one collapsible section per sales report.

Each section shows the Sales Report, Invoice and Voucher stages of the
report. Reports still awaiting an invoice carry the Acknowledge button that
opens the acknowledgment slip.
"""

from dash import html
from dash_iconify import DashIconify

from consign_tracker.models.record import FulfillmentState
from consign_tracker.models.view import DashboardView, RecordRow

_STAGE_NAMES = ("Sales Report", "Invoice", "Voucher")
MISSING_ID = "N/A"


def build_dashboard(view: DashboardView) -> html.Div:
    """Return the dashboard, hidden while the filtered view is empty."""
    if not view.show_dashboard:
        return html.Div(id="dashboard", className="card dashboard hidden")

    return html.Div(
        id="dashboard",
        className="card dashboard",
        children=[
            html.Div(
                className="title-row",
                children=[
                    DashIconify(icon="lucide:layout-dashboard", className="title-icon"),
                    html.H2(view.dashboard_title, className="dashboard-title"),
                ],
            ),
            html.Div(
                className="progress-sections",
                children=[build_progress_section(row) for row in view.progress],
            ),
        ],
    )


def build_progress_section(row: RecordRow) -> html.Details:
    """Return the collapsible progress section of one sales report."""
    record = row.record
    return html.Details(
        className="collapsible-section",
        open=False,
        children=[
            html.Summary(
                className="collapsible-header",
                children=[
                    html.Div(
                        className="collapsible-header-summary",
                        children=[
                            html.Span(
                                f"SR ID # {record.sr_id or MISSING_ID}",
                                className="sr-id-text",
                            ),
                            _header_status(row),
                        ],
                    ),
                    DashIconify(icon="lucide:chevron-down", className="collapsible-icon"),
                ],
            ),
            html.Div(
                className="progress-bar-container",
                children=[
                    html.Div(
                        className="progress-bar-header",
                        children=[html.H4("Status..."), _acknowledge_control(row)],
                    ),
                    html.Div(
                        className="progress-bar-stages",
                        children=[
                            html.Div(
                                className=f"progress-stage-item {stage_class}",
                                children=[html.Div(className="progress-stage-circle"), name],
                            )
                            for name, stage_class in zip(_STAGE_NAMES, row.status.stage_classes)
                        ],
                    ),
                ],
            ),
        ],
    )


def _header_status(row: RecordRow) -> html.Span:
    """Return the status shown in the section header."""
    status = row.status
    if status.actionable:
        return html.Span(
            className="status-text-summary badge badge-error",
            children=[
                DashIconify(icon="lucide:x", className="badge-icon"),
                status.header_label,
            ],
        )
    return html.Span(status.header_label, className="status-text-summary")


def _acknowledge_control(row: RecordRow) -> html.Button | None:
    """Return the Acknowledge button or the disabled Acknowledged marker."""
    status = row.status
    if status.can_acknowledge:
        return html.Button(
            id={
                "type": "acknowledge-button",
                "co_no": row.record.co_no,
                "sr_id": row.record.sr_id,
            },
            className="acknowledge-sr-button",
            n_clicks=0,
            children=[
                DashIconify(icon="lucide:handshake", className="button-icon"),
                "Acknowledge",
            ],
        )
    if status.acknowledged and status.state is FulfillmentState.AWAITING_INVOICE:
        return html.Button(
            className="acknowledge-sr-button",
            disabled=True,
            children=[
                DashIconify(icon="lucide:check", className="button-icon"),
                "Acknowledged",
            ],
        )
    return None
