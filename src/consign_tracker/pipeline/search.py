"""
Order-scoped record search and search-box suggestions.

A query never filters individual sales reports out of an order: if any report
of an order matches, the whole order is shown. Staff search by whatever
reference they have at hand (SR ID, C.O. number or invoice number) and always
get the complete picture for that consignment order.
"""

import random
from typing import Iterable, Sequence

from consign_tracker.models.common import Suggestion, SuggestionPage
from consign_tracker.models.record import MergedRecord, RawRecord
from consign_tracker.utils import collation_key

SUGGESTION_PAGE_SIZE = 5
SUGGESTION_MIN_LENGTH = 3
UNKNOWN_COMPANY = "Unknown Company"

_DEFAULT_RNG = random.Random()


def normalize_query(query: str | None) -> str:
    """Return the query stripped and lower-cased."""
    return (query or "").strip().lower()


def _matches(record: RawRecord | MergedRecord, query: str) -> bool:
    """Check the searchable references of a record against a normalized query."""
    return (
        query in record.sr_id.lower()
        or query in record.co_no.lower()
        or query in record.inv_no.lower()
    )


def matching_orders(query: str, records: Iterable[MergedRecord]) -> set[str]:
    """
    Return the order numbers with at least one matching record.

    Records without an order number never contribute an order.
    """
    query = normalize_query(query)
    if not query:
        return set()
    return {record.co_no for record in records if record.co_no and _matches(record, query)}


def search_records(query: str | None, records: Sequence[MergedRecord]) -> list[MergedRecord]:
    """
    Find every record belonging to an order that matches the query.

    Args:
        query: Free-text query; matched case-insensitively as a substring of
            sr_id, co_no or inv_no.
        records: Merged records to search.

    Returns:
        All records of the matched orders, sorted by sr_id (case-insensitive)
        with ties kept in input order. An empty query returns no records.
    """
    orders = matching_orders(query, records)
    if not orders:
        return []
    hits = [record for record in records if record.co_no in orders]
    hits.sort(key=lambda record: record.sr_id.lower())
    return hits


def collect_suggestions(query: str | None, records: Iterable[RawRecord]) -> list[Suggestion]:
    """
    Build one suggestion per distinct order matching the query.

    The raw (unmerged) records are scanned. Candidates keep the position of
    their order's first match; the label reflects the last matching record.

    Args:
        query: Text typed so far; fewer than three characters yields nothing.
        records: Raw records as fetched.

    Returns:
        Suggestions in encountered order.
    """
    query = normalize_query(query)
    if len(query) < SUGGESTION_MIN_LENGTH:
        return []

    found: dict[str, Suggestion] = {}
    for record in records:
        if record.co_no and _matches(record, query):
            company = record.name_company or UNKNOWN_COMPANY
            found[record.co_no] = Suggestion(
                label=f"{company} – {record.co_no}",
                value=record.co_no,
            )
    return list(found.values())


def suggestion_page(
    candidates: Sequence[Suggestion],
    offset: int = 0,
    rng: random.Random | None = None,
) -> SuggestionPage:
    """
    Select the batch of suggestions to show.

    The first batch is a random sample when there are more candidates than
    fit, to surface a variety of orders; a smaller candidate set is shown in
    full, sorted by label. Later batches continue through the candidates in
    encountered order.

    Args:
        candidates: Full candidate list from collect_suggestions.
        offset: Index of the first candidate of the batch (0 for the first).
        rng: Random source for the first-batch sample.

    Returns:
        SuggestionPage with the batch and whether more can be loaded.
    """
    candidates = tuple(candidates)
    offset = max(offset, 0)
    size = SUGGESTION_PAGE_SIZE

    if offset == 0 and len(candidates) <= size:
        items = tuple(sorted(candidates, key=lambda s: collation_key(s.label)))
    elif offset == 0:
        items = tuple((rng or _DEFAULT_RNG).sample(candidates, size))
    else:
        items = candidates[offset : offset + size]

    return SuggestionPage(
        items=items,
        offset=offset,
        has_more=bool(items) and len(candidates) > offset + size,
        candidates=candidates,
    )


def suggest(
    query: str | None,
    records: Iterable[RawRecord],
    rng: random.Random | None = None,
) -> SuggestionPage:
    """Collect suggestions for the query and return the first batch."""
    return suggestion_page(collect_suggestions(query, records), 0, rng)
