"""
Layout helpers for the Consign Tracker Dash application.

This module defines the root layout structure including:
- dcc.Store components for state management
- Search panel, results container and the acknowledgment slip modal

build_layout is handed to Dash as a function, so every page load gets a
fresh load token. The raw records fetched for that load are cached
server-side under the token.
"""

import uuid

from dash import dcc, html

from consign_tracker.components.results import build_loading_state
from consign_tracker.components.search_panel import build_search_panel
from consign_tracker.components.slip_modal import build_slip_modal
from consign_tracker.state import APP_SUBTITLE, APP_TITLE


def build_layout() -> html.Div:
    """
    Build the root layout for the Consign Tracker application.

    Creates the complete Dash layout including:
    - Hidden state stores (dcc.Store) for application state management
    - Page header with branding
    - Search panel with suggestions
    - Results container (initially shows loading state)
    - Acknowledgment slip modal

    Records are fetched by the dispatch callback, triggered by
    initial-load-trigger, which also restores the last session search.

    Returns:
        Root html.Div containing the complete application layout.
    """
    return html.Div(
        className="app-shell",
        children=[
            # Identifies this page load in the server-side record cache
            dcc.Store(id="load-token", data=uuid.uuid4().hex),
            # Serialized DashboardState; memory only, gone on reload
            dcc.Store(id="dashboard-state", storage_type="memory", data=None),
            # Last search term; survives a reload within the tab
            dcc.Store(id="search-session", storage_type="session", data=None),
            # Candidates behind the visible suggestion batch
            dcc.Store(id="suggestion-state", data=None),
            # (co_no, sr_id) of the report shown in the slip modal
            dcc.Store(id="details-target", data=None),
            # Set to 1 to trigger initial data load on app mount
            dcc.Store(id="initial-load-trigger", data=1),
            # Output sink for the clientside print callback
            dcc.Store(id="print-trigger", data=0),
            html.Div(
                className="app-container",
                children=[
                    _build_page_header(),
                    build_search_panel(""),
                    html.Div(
                        id="results-container",
                        children=build_loading_state(),
                    ),
                ],
            ),
            build_slip_modal(),
        ],
    )


def _build_page_header() -> html.Div:
    """Return the hero text area at the top of the page."""
    return html.Div(
        className="page-header",
        children=[
            html.H1(APP_TITLE),
            html.P(APP_SUBTITLE),
        ],
    )
