"""Informational and error notices shown above the results."""

from dash import html
from dash_iconify import DashIconify

from consign_tracker.models.common import Message

_ICONS = {
    "info": "lucide:info",
    "error": "lucide:alert-triangle",
}


def build_message_box(message: Message | None) -> html.Div:
    """Return the message box, hidden when there is no message."""
    if message is None:
        return html.Div(id="message-box", className="message-box hidden")
    return html.Div(
        id="message-box",
        className=f"message-box {message.kind}",
        role="alert" if message.is_error else "status",
        children=[
            DashIconify(icon=_ICONS.get(message.kind, _ICONS["info"]), className="message-icon"),
            html.Span(message.text, className="message-text"),
        ],
    )
