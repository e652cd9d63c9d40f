"""
Fulfillment status derivation.

A sales report moves from awaiting invoice, to processing voucher, to
complete as back-office staff fill in its invoice and voucher numbers. Nothing
is stored: the state is recomputed from the current field values on every
render.
"""

from consign_tracker.models.record import FulfillmentState, MergedRecord
from consign_tracker.models.view import StatusPresentation
from consign_tracker.utils import is_unset
from consign_tracker.utils.record_helpers import INVOICE_UNSET, VOUCHER_UNSET

AWAITING_LABEL = "Awaiting for Invoice"
WAITING_LABEL = "Waiting for Invoice"
PROCESSING_LABEL = "Processing Voucher"
COMPLETED_LABEL = "Completed"

_TABLE_BADGES = {
    FulfillmentState.AWAITING_INVOICE: ("awaiting for invoice", "status-waiting"),
    FulfillmentState.PROCESSING_VOUCHER: ("Processing Voucher", "status-processing"),
    FulfillmentState.COMPLETE: ("complete", "status-done"),
}


def derive_status(inv_no: str | None, voucher_no: str | None) -> FulfillmentState:
    """
    Map invoice and voucher numbers to a fulfillment state.

    The voucher is not inspected while the invoice is unset.

    Args:
        inv_no: Invoice number; "" and "-" mean not invoiced.
        voucher_no: Voucher number; "", "-" and "0" mean not issued.

    Returns:
        The derived FulfillmentState.
    """
    if is_unset(inv_no, INVOICE_UNSET):
        return FulfillmentState.AWAITING_INVOICE
    if is_unset(voucher_no, VOUCHER_UNSET):
        return FulfillmentState.PROCESSING_VOUCHER
    return FulfillmentState.COMPLETE


def status_of(record: MergedRecord) -> FulfillmentState:
    return derive_status(record.inv_no, record.voucher_no)


def present_status(record: MergedRecord, acknowledged: bool) -> StatusPresentation:
    """
    Build the status presentation for a record.

    Acknowledgment only changes how an awaiting-invoice record is shown; it
    is ignored for the later states.

    Args:
        record: Merged record to describe.
        acknowledged: Whether the (co_no, sr_id) pair was acknowledged.

    Returns:
        StatusPresentation for the table badge and the progress section.
    """
    state = status_of(record)
    table_label, table_class = _TABLE_BADGES[state]

    if state is FulfillmentState.AWAITING_INVOICE:
        return StatusPresentation(
            state=state,
            table_label=table_label,
            table_class=table_class,
            header_label=WAITING_LABEL if acknowledged else AWAITING_LABEL,
            actionable=not acknowledged,
            can_acknowledge=not acknowledged,
            acknowledged=acknowledged,
            stage_classes=("active", "step-pending-invoice", "inactive"),
        )
    if state is FulfillmentState.PROCESSING_VOUCHER:
        return StatusPresentation(
            state=state,
            table_label=table_label,
            table_class=table_class,
            header_label=PROCESSING_LABEL,
            actionable=False,
            can_acknowledge=False,
            acknowledged=acknowledged,
            stage_classes=("active", "active", "step-pending-voucher"),
        )
    return StatusPresentation(
        state=state,
        table_label=table_label,
        table_class=table_class,
        header_label=COMPLETED_LABEL,
        actionable=False,
        can_acknowledge=False,
        acknowledged=acknowledged,
        stage_classes=("completed", "completed", "completed"),
    )
