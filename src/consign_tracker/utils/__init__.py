"""Utility functions shared across the consign tracker package."""

from consign_tracker.utils.record_helpers import (
    collation_key,
    format_amount,
    format_quantity,
    is_unset,
    normalize_number,
    parse_number,
    piece_unit,
    text_value,
)

__all__ = [
    "collation_key",
    "format_amount",
    "format_quantity",
    "is_unset",
    "normalize_number",
    "parse_number",
    "piece_unit",
    "text_value",
]
