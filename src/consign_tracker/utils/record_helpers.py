"""Helper functions for coercing and formatting consignment record fields."""

from __future__ import annotations

import math
import re
from typing import Any, Iterable

from consign_tracker.errors import MalformedFieldError
from consign_tracker.lib import logs

LOG = logs.logger(__file__)

# Currency symbols and thousands separators are stripped before parsing.
_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
_LEADING_FLOAT = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")

INVOICE_UNSET = ("", "-")
VOUCHER_UNSET = ("", "-", "0")


def text_value(value: Any) -> str:
    """
    Return value as a string, mapping None to the empty string.

    Integral floats drop their fraction, so a JSON id of 12.0 reads "12".
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_unset(value: Any, sentinels: Iterable[str] = INVOICE_UNSET) -> bool:
    """Check whether a reference field holds one of the "not yet set" markers."""
    return text_value(value).strip() in tuple(sentinels)


def parse_number(value: Any) -> float:
    """
    Strictly parse a numeric field.

    Numbers pass through. Strings are stripped of everything but digits, "."
    and "-" and the longest leading decimal is read, so "1.2.3" gives 1.2.
    Empty values and the "-" placeholder read as zero.

    Args:
        value: Raw field value (number, string or None).

    Returns:
        The parsed float.

    Raises:
        MalformedFieldError: If the value is non-empty but holds no number.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise MalformedFieldError(value)
    if isinstance(value, (int, float)):
        number = float(value)
        if not math.isfinite(number):
            raise MalformedFieldError(value)
        return number

    text = str(value).strip()
    if text in INVOICE_UNSET:
        return 0.0
    match = _LEADING_FLOAT.match(_NON_NUMERIC.sub("", text))
    if not match:
        raise MalformedFieldError(value)
    return float(match.group(0))


def normalize_number(value: Any) -> float:
    """
    Coerce a numeric field to a float, degrading silently to zero.

    Normalizing an already normalized value returns it unchanged.
    """
    try:
        return parse_number(value)
    except MalformedFieldError:
        LOG.debug("Malformed numeric field %r normalized to 0", value)
        return 0.0


def collation_key(value: Any) -> tuple[str, str]:
    """
    Sort key approximating a locale-aware string comparison.

    Case is ignored first and only breaks ties afterwards, so "abc" sorts
    before "ABD" and "Abc" next to "abc".
    """
    text = text_value(value)
    return (text.casefold(), text)


def format_quantity(value: float) -> str:
    """Format a quantity with thousands separators and up to three decimals."""
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_amount(value: float) -> str:
    """Format a monetary amount with thousands separators and two decimals."""
    return f"{value:,.2f}"


def piece_unit(quantity: float) -> str:
    """Return "pc" for exactly one piece and "pcs" otherwise."""
    return "pc" if quantity == 1 else "pcs"
