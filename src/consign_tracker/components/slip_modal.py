"""
Acknowledgment slip modal.

The modal is part of the static layout and filled in by the slip callback
when an Acknowledge button is clicked. The confirm button stays disabled
until the terms checkbox is ticked; confirming acknowledges the report and
opens the browser print dialog.
"""

from dash import dcc, html
from dash_iconify import DashIconify

from consign_tracker.models.record import MergedRecord
from consign_tracker.utils import format_amount, format_quantity, piece_unit

TERMS_VALUE = "accepted"
TERMS_LABEL = (
    "I confirm the details above are correct and acknowledge this sales "
    "report for invoicing."
)
MISSING = "N/A"


def modal_class(is_open: bool) -> str:
    """Return the overlay class for the open or closed modal."""
    return "modal-overlay show" if is_open else "modal-overlay hidden"


def build_slip_modal() -> html.Div:
    """Return the (closed) slip modal for the root layout."""
    return html.Div(
        id="slip-modal",
        className=modal_class(False),
        children=html.Div(
            className="modal-content card",
            children=[
                html.Div(
                    className="modal-header",
                    children=[
                        html.Div(
                            className="title-row",
                            children=[
                                DashIconify(icon="lucide:file-check", className="title-icon"),
                                html.H3("Acknowledgement Slip"),
                            ],
                        ),
                        html.Button(
                            id="slip-close",
                            className="modal-close-button",
                            title="Close",
                            n_clicks=0,
                            children=DashIconify(icon="lucide:x"),
                        ),
                    ],
                ),
                html.Div(id="slip-details", className="modal-details"),
                dcc.Checklist(
                    id="slip-terms",
                    className="terms-checkbox",
                    options=[{"label": TERMS_LABEL, "value": TERMS_VALUE}],
                    value=[],
                ),
                html.Button(
                    id="slip-confirm",
                    className="button primary gap",
                    disabled=True,
                    n_clicks=0,
                    children=[
                        DashIconify(icon="lucide:printer", className="button-icon"),
                        "Confirm and Print",
                    ],
                ),
            ],
        ),
    )


def build_slip_details(record: MergedRecord | None, order_number: str, report_id: str) -> list:
    """
    Return the detail lines of the slip for a sales report.

    Args:
        record: The merged record, or None when it is no longer in view.
        order_number: C.O. number from the clicked button.
        report_id: SR ID from the clicked button.
    """
    company = (record.name_company if record else "") or MISSING
    quantity = record.qty_sold if record else 0.0
    remaining = record.remaining_bal if record else 0.0
    amount = record.amount if record else 0.0

    return [
        _detail("Company:", company),
        _detail("SR ID:", (record.sr_id if record else "") or report_id or MISSING),
        _detail("C.O.#:", order_number or MISSING),
        _detail("Total Qty. Sold:", f"{format_quantity(quantity)} {piece_unit(quantity)}"),
        _detail("Remaining Balance:", remaining_text(remaining)),
        _detail("Total Amount:", format_amount(amount)),
    ]


def remaining_text(remaining: float) -> str:
    """Return the remaining balance, or "-" when nothing remains."""
    if remaining == 0:
        return "-"
    return f"{format_quantity(remaining)} {piece_unit(remaining)}"


def terms_accepted(value: list | None) -> bool:
    return TERMS_VALUE in (value or [])


def _detail(label: str, value: str) -> html.P:
    return html.P([html.Strong(label), " ", html.Span(value)])
