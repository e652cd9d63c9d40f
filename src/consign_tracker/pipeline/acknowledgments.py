"""
Session acknowledgments of sales reports that are still awaiting an invoice.

Acknowledging a report is the confirmation that gates printing or sharing its
acknowledgment slip. The set only grows: there is no way to withdraw an
acknowledgment within a session, and nothing is sent back to the server.
"""

from typing import Iterable


def ack_key(order_number: str, report_id: str) -> str:
    """Return the "{co_no}-{sr_id}" key for an order and sales report pair."""
    return f"{order_number}-{report_id}"


class AcknowledgmentTracker:
    """Tracks which (order, report) pairs were acknowledged this session."""

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._keys: set[str] = set(keys)

    def acknowledge(self, order_number: str, report_id: str) -> bool:
        """
        Record an acknowledgment.

        Returns:
            True if the pair was newly acknowledged, False if it already was.
        """
        key = ack_key(order_number, report_id)
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def is_acknowledged(self, order_number: str, report_id: str) -> bool:
        return ack_key(order_number, report_id) in self._keys

    @property
    def keys(self) -> frozenset[str]:
        """Snapshot of the acknowledged keys."""
        return frozenset(self._keys)

    def __len__(self) -> int:
        return len(self._keys)
