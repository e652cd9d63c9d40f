"""
Dash application entry point for the Consign Tracker dashboard.

Callbacks:
- dispatch: owns the dashboard state; runs load, search, clear, sort, page
  and acknowledge actions through DashboardController
- update_suggestions: the suggestion list under the search box
- toggle_slip_modal / gate_confirm: the acknowledgment slip
- a clientside callback that opens the browser print dialog on confirm
"""

import os
from functools import partial
from pathlib import Path
from typing import Any

from dash import ALL, Dash, Input, Output, State, ctx, no_update
from dash.exceptions import PreventUpdate

from consign_tracker.components.results import build_results
from consign_tracker.components.search_panel import build_suggestions, clear_button_class
from consign_tracker.components.slip_modal import build_slip_details, modal_class, terms_accepted
from consign_tracker.layout import build_layout
from consign_tracker.lib import logs, paths
from consign_tracker.lib.caches import DiskCache
from consign_tracker.models.common import DashboardState, SessionSearchState, SuggestionPage
from consign_tracker.models.record import RawRecord
from consign_tracker.services import get_record_service
from consign_tracker.state import APP_TITLE, DashboardController

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("CONSIGN_TRACKER_PORT", "8050"))
CACHE_TTL_SECONDS = int(os.getenv("CONSIGN_TRACKER_CACHE_TTL", "28800"))

_assets_path = Path(__file__).resolve().parent / "assets"
_record_cache = DiskCache(paths.cache_dir("consign_tracker_records"))

app = Dash(__name__, title=APP_TITLE, assets_folder=str(_assets_path))
app.layout = build_layout
server = app.server


def load_records(load_token: str | None) -> list[RawRecord]:
    """
    Return the raw records of a page load.

    The first call for a load token fetches from the record service; later
    callbacks of the same page load read the disk cache. Fetch errors
    propagate and nothing is cached.
    """

    def fetch() -> list[dict]:
        service = get_record_service()
        LOG.info("Loading records - source:%s", service.source_name)
        return [record.to_dict() for record in service.fetch_records()]

    if not load_token:
        return [RawRecord.from_dict(row) for row in fetch()]

    entry = _record_cache.get_or_load(f"records:{load_token}", fetch, expire=CACHE_TTL_SECONDS)
    if entry.loaded:
        LOG.info("Cached %d records - token:%s", len(entry.value), load_token)
    return [RawRecord.from_dict(row) for row in entry.value]


def _controller(load_token: str | None, state_data: dict | None) -> DashboardController:
    return DashboardController(
        partial(load_records, load_token),
        DashboardState.from_dict(state_data),
    )


def _clicked() -> bool:
    """True when the triggering input holds a real click or submit."""
    return any(trigger.get("value") for trigger in ctx.triggered)


@app.callback(
    Output("dashboard-state", "data"),
    Output("search-session", "data"),
    Output("results-container", "children"),
    Output("search-query", "value"),
    Output("search-query", "disabled"),
    Input("initial-load-trigger", "data"),
    Input("search-query", "n_submit"),
    Input("clear-search", "n_clicks"),
    Input({"type": "suggestion", "value": ALL}, "n_clicks"),
    Input({"type": "sort-header", "column": ALL}, "n_clicks"),
    Input({"type": "page-button", "page": ALL, "role": ALL}, "n_clicks"),
    Input("slip-confirm", "n_clicks"),
    State("search-query", "value"),
    State("dashboard-state", "data"),
    State("search-session", "data"),
    State("load-token", "data"),
    State("details-target", "data"),
)
def dispatch(
    _load_trigger: Any,
    _n_submit: Any,
    _clear_clicks: Any,
    _suggestion_clicks: Any,
    _sort_clicks: Any,
    _page_clicks: Any,
    _confirm_clicks: Any,
    query: str | None,
    state_data: dict | None,
    session_data: dict | None,
    load_token: str | None,
    details_target: dict | None,
) -> tuple:
    """
    Apply the triggering user action to the dashboard state.

    On page load the records are fetched, the last session search, if any,
    is replayed and the search box is enabled.
    """
    trigger = ctx.triggered_id
    controller = _controller(load_token, state_data)
    session = SessionSearchState.from_dict(session_data)
    session_out: Any = no_update
    query_out: Any = no_update

    if trigger is None or trigger == "initial-load-trigger":
        controller = _controller(load_token, None)
        controller.load()
        if session.last_search_term:
            LOG.info("Restoring session search - query:%s", session.last_search_term)
            controller.search(session.last_search_term)
            query_out = session.last_search_term
    elif not _clicked():
        raise PreventUpdate
    elif trigger == "search-query":
        controller.search(query)
        session_out = SessionSearchState(controller.state.query).to_dict()
    elif trigger == "clear-search":
        controller.clear_search()
        session_out = SessionSearchState().to_dict()
        query_out = ""
    elif trigger == "slip-confirm":
        if not details_target:
            raise PreventUpdate
        controller.acknowledge(details_target["co_no"], details_target["sr_id"])
    elif trigger["type"] == "suggestion":
        controller.search(trigger["value"])
        session_out = SessionSearchState(controller.state.query).to_dict()
        query_out = controller.state.query
    elif trigger["type"] == "sort-header":
        controller.sort(trigger["column"])
    elif trigger["type"] == "page-button":
        controller.go_to_page(int(trigger["page"]))
    else:
        raise PreventUpdate

    return (
        controller.state.to_dict(),
        session_out,
        build_results(controller.view()),
        query_out,
        False,
    )


@app.callback(
    Output("suggestions-container", "children"),
    Output("suggestion-state", "data"),
    Input("search-query", "value"),
    Input({"type": "load-more-suggestions", "offset": ALL}, "n_clicks"),
    Input("dashboard-state", "data"),
    State("suggestion-state", "data"),
    State("load-token", "data"),
    prevent_initial_call=True,
)
def update_suggestions(
    query: str | None,
    _load_more_clicks: Any,
    state_data: dict | None,
    suggestion_data: dict | None,
    load_token: str | None,
) -> tuple:
    """Show the suggestion batch for the typed text; close it after a search."""
    if state_data is None:
        # The initial load has not finished for this page.
        raise PreventUpdate

    if "dashboard-state.data" in ctx.triggered_prop_ids:
        return build_suggestions(SuggestionPage()), None

    controller = _controller(load_token, state_data)
    trigger = ctx.triggered_id
    if isinstance(trigger, dict):
        if not _clicked():
            raise PreventUpdate
        candidates = SuggestionPage.candidates_from_dict(suggestion_data)
        page = controller.suggestions(query, int(trigger["offset"]), candidates)
    else:
        page = controller.suggestions(query)
    return build_suggestions(page), page.to_dict()


@app.callback(
    Output("clear-search", "className"),
    Input("search-query", "value"),
)
def toggle_clear_button(query: str | None) -> str:
    return clear_button_class(query)


@app.callback(
    Output("slip-modal", "className"),
    Output("slip-details", "children"),
    Output("details-target", "data"),
    Output("slip-terms", "value"),
    Input({"type": "acknowledge-button", "co_no": ALL, "sr_id": ALL}, "n_clicks"),
    Input("slip-close", "n_clicks"),
    Input("slip-confirm", "n_clicks"),
    State("dashboard-state", "data"),
    prevent_initial_call=True,
)
def toggle_slip_modal(
    _ack_clicks: Any,
    _close_clicks: Any,
    _confirm_clicks: Any,
    state_data: dict | None,
) -> tuple:
    """Open the slip for the clicked report, or close it."""
    if not _clicked():
        raise PreventUpdate

    trigger = ctx.triggered_id
    if isinstance(trigger, dict):
        order_number, report_id = trigger["co_no"], trigger["sr_id"]
        controller = DashboardController(list, DashboardState.from_dict(state_data))
        record = controller.find(order_number, report_id)
        return (
            modal_class(True),
            build_slip_details(record, order_number, report_id),
            {"co_no": order_number, "sr_id": report_id},
            [],
        )
    return modal_class(False), no_update, no_update, []


@app.callback(
    Output("slip-confirm", "disabled"),
    Input("slip-terms", "value"),
)
def gate_confirm(terms: list | None) -> bool:
    """Keep the confirm button disabled until the terms are accepted."""
    return not terms_accepted(terms)


app.clientside_callback(
    """
    function(n_clicks) {
        if (!n_clicks) {
            return window.dash_clientside.no_update;
        }
        document.body.classList.add('print-active');
        window.print();
        document.body.classList.remove('print-active');
        return n_clicks;
    }
    """,
    Output("print-trigger", "data"),
    Input("slip-confirm", "n_clicks"),
    prevent_initial_call=True,
)


def main() -> None:
    """Entrypoint used by `consign-tracker` and `python -m consign_tracker.app`."""
    app.run(debug=True, host="0.0.0.0", port=APP_PORT)


if __name__ == "__main__":
    main()
