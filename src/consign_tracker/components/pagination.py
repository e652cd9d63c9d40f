"""Pagination controls: previous arrow, page-number window, next arrow."""

from dash import html
from dash_iconify import DashIconify

from consign_tracker.models.view import PageControls


def build_pagination(controls: PageControls) -> html.Div:
    """Return the pagination bar, hidden when everything fits on one page."""
    if not controls.visible:
        return html.Div(id="pagination", className="pagination hidden")

    buttons = [
        _page_button(
            controls.current - 1,
            "prev",
            DashIconify(icon="lucide:chevron-left"),
            disabled=not controls.has_previous,
        )
    ]
    buttons.extend(
        _page_button(
            page,
            "page",
            str(page),
            active=page == controls.current,
        )
        for page in controls.pages
    )
    buttons.append(
        _page_button(
            controls.current + 1,
            "next",
            DashIconify(icon="lucide:chevron-right"),
            disabled=not controls.has_next,
        )
    )
    return html.Div(
        id="pagination",
        className="pagination",
        children=[
            html.Div(className="page-buttons", children=buttons),
            html.Span(
                f"Page {controls.current} of {controls.total_pages}",
                className="muted page-indicator",
            ),
        ],
    )


def _page_button(
    page: int,
    role: str,
    label,
    active: bool = False,
    disabled: bool = False,
) -> html.Button:
    """Return one pagination button targeting page."""
    classes = "page-button"
    if active:
        classes += " active"
    return html.Button(
        label,
        id={"type": "page-button", "page": page, "role": role},
        className=classes,
        disabled=disabled,
        n_clicks=0,
    )
