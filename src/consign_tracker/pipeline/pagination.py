"""Page slicing and the page-number button window."""

import math
from typing import Sequence, TypeVar

from consign_tracker.models.view import PageControls

T = TypeVar("T")

PAGE_SIZE = 5
MAX_PAGE_BUTTONS = 4


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Return the number of pages needed for count items."""
    return math.ceil(count / max(page_size, 1))


def clamp_page(page: int, pages: int) -> int:
    """Keep a page number within [1, max(1, pages)]."""
    return min(max(page, 1), max(pages, 1))


def page_slice(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> list[T]:
    """Return the items shown on the given 1-indexed page."""
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def page_window(current: int, pages: int, max_buttons: int = MAX_PAGE_BUTTONS) -> list[int]:
    """
    Return the page numbers to render as buttons.

    At most max_buttons pages are shown, placed around the current page and
    shifted inwards at either end so the window stays full whenever there
    are enough pages.

    Args:
        current: Active page.
        pages: Total number of pages.
        max_buttons: Upper bound on the number of buttons.

    Returns:
        Consecutive page numbers within [1, pages].
    """
    if pages <= max_buttons:
        return list(range(1, pages + 1))

    half = max_buttons // 2
    start = current - half
    end = current + (max_buttons - half - 1)

    if start < 1:
        end += 1 - start
        start = 1
    if end > pages:
        start -= end - pages
        end = pages
        start = max(start, 1)
    return list(range(start, end + 1))


def build_controls(count: int, page: int, page_size: int = PAGE_SIZE) -> PageControls:
    """
    Build the pagination controls for a view of count items.

    Controls are hidden entirely when everything fits on one page.
    """
    pages = total_pages(count, page_size)
    current = clamp_page(page, pages)
    if pages <= 1:
        return PageControls(visible=False, current=current, total_pages=pages)
    return PageControls(
        visible=True,
        current=current,
        total_pages=pages,
        pages=tuple(page_window(current, pages)),
        has_previous=current > 1,
        has_next=current < pages,
    )
