"""
Search panel component.

Provides the search input with:
- Icon-prefixed text input; Enter runs the search
- Clear button, shown while the input holds text
- Suggestion list fed by the suggestions callback, with a
  "Load more results..." entry when more orders match
"""

from dash import dcc, html
from dash_iconify import DashIconify

from consign_tracker.models.common import SuggestionPage

SEARCH_PLACEHOLDER = "Search by, Consignment Order Number, SR ID, or Invoice No."
LOAD_MORE_LABEL = "Load more results..."


def build_search_panel(initial_value: str = "") -> html.Div:
    """
    Build the search panel.

    Args:
        initial_value: Pre-populated query (restored from the session store).

    Returns:
        Card-styled div containing the search UI elements.
    """
    return html.Div(
        className="card search-card",
        children=[
            html.Div(
                className="input-with-icon",
                children=[
                    DashIconify(icon="lucide:search", className="input-icon"),
                    dcc.Input(
                        id="search-query",
                        type="text",
                        value=initial_value,
                        placeholder=SEARCH_PLACEHOLDER,
                        className="search-input",
                        autoComplete="off",
                        n_submit=0,
                        disabled=True,
                    ),
                    html.Button(
                        id="clear-search",
                        className=clear_button_class(initial_value),
                        title="Clear search",
                        n_clicks=0,
                        children=DashIconify(icon="lucide:x", className="button-icon"),
                    ),
                ],
            ),
            html.Div(
                id="suggestions-container",
                children=build_suggestions(SuggestionPage()),
            ),
        ],
    )


def clear_button_class(query: str | None) -> str:
    """Return the clear button class, hidden while the input is empty."""
    return "clear-search-button" + ("" if query else " hidden")


def build_suggestions(page: SuggestionPage) -> html.Ul:
    """
    Return the suggestion list for one batch.

    Each entry is a button with a pattern-matching id carrying the order
    number, so choosing it searches for that order.
    """
    if not page.visible:
        return html.Ul(className="suggestions-list hidden")

    items = [
        html.Li(
            html.Button(
                suggestion.label,
                id={"type": "suggestion", "value": suggestion.value},
                className="suggestion-item",
                n_clicks=0,
            )
        )
        for suggestion in page.items
    ]
    if page.has_more:
        items.append(
            html.Li(
                html.Button(
                    LOAD_MORE_LABEL,
                    id={"type": "load-more-suggestions", "offset": page.offset + len(page.items)},
                    className="suggestion-item load-more",
                    n_clicks=0,
                )
            )
        )
    return html.Ul(className="suggestions-list", children=items)
