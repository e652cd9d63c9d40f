"""
Records table with sortable column headers.

Header cells carry pattern-matching ids ({"type": "sort-header", "column":
...}) so a single callback handles clicks on any column. The active sort
column shows its direction; sort icons are hidden while the table is empty.
"""

from dash import html
from dash_iconify import DashIconify

from consign_tracker.models.common import ASCENDING, SortState
from consign_tracker.models.view import DashboardView, RecordRow
from consign_tracker.utils import format_amount, format_quantity

COLUMNS = (
    ("sr_id", "SR ID"),
    ("name_company", "Company"),
    ("co_no", "CO No."),
    ("qty_sold", "Quantity"),
    ("remaining_bal", "Remaining Bal"),
    ("amount", "Amount"),
    ("inv_no", "Invoice No."),
    ("voucher_no", "Voucher No."),
    ("voucher_date", "Voucher Date"),
    ("status", "Status"),
)
UNSORTABLE = frozenset({"status"})
PLACEHOLDER = "-"


def build_records_table(view: DashboardView) -> html.Div:
    """Return the records table for the current page of the view."""
    if view.has_results:
        body = [_build_row(row) for row in view.rows]
    else:
        body = [
            html.Tr(
                html.Td(
                    view.empty_message,
                    colSpan=len(COLUMNS),
                    className="empty-table-message",
                )
            )
        ]

    return html.Div(
        id="records-table",
        className="card table-container",
        children=html.Table(
            className="records-table",
            children=[
                html.Thead(html.Tr([_header_cell(column, label, view) for column, label in COLUMNS])),
                html.Tbody(body),
            ],
        ),
    )


def _header_cell(column: str, label: str, view: DashboardView) -> html.Th:
    """Return a header cell; sortable columns get an id and a sort icon."""
    if column in UNSORTABLE:
        return html.Th(label)
    children: list = [html.Span(label)]
    if view.has_results:
        children.append(DashIconify(icon=sort_icon(view.sort, column), className="sort-icon"))
    return html.Th(
        id={"type": "sort-header", "column": column},
        className="sortable",
        n_clicks=0,
        children=children,
    )


def sort_icon(sort: SortState, column: str) -> str:
    """Return the icon name reflecting the sort state of a column."""
    if sort.column != column:
        return "lucide:arrow-up-down"
    return "lucide:arrow-up" if sort.direction == ASCENDING else "lucide:arrow-down"


def _build_row(row: RecordRow) -> html.Tr:
    """Return one table row."""
    record = row.record
    return html.Tr(
        children=[
            _cell("SR ID:", record.sr_id),
            _cell("Company:", record.name_company),
            _cell("CO No.:", record.co_no),
            _cell("Quantity:", format_quantity(record.qty_sold)),
            _cell("Remaining Bal:", format_quantity(record.remaining_bal)),
            _cell("Amount:", format_amount(record.amount)),
            _cell("Invoice No.:", record.inv_no or PLACEHOLDER),
            _cell(
                "Voucher No.:",
                record.voucher_no or PLACEHOLDER,
                class_name="highlight-voucher" if row.has_voucher else None,
            ),
            _cell("Voucher Date:", record.voucher_date or PLACEHOLDER),
            html.Td(
                **{"data-label": "Status:"},
                children=html.Span(
                    row.status.table_label,
                    className=f"status-badge {row.status.table_class}",
                ),
            ),
        ]
    )


def _cell(label: str, value: str, class_name: str | None = None) -> html.Td:
    """Return a data cell labelled for the stacked mobile layout."""
    attributes = {"data-label": label}
    if class_name:
        attributes["className"] = class_name
    return html.Td(value, **attributes)
