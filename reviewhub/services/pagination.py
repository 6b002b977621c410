import math
from typing import TypeVar

from reviewhub.schemas.reviews import PageInfo

T = TypeVar("T")


def paginate(items: list[T], page: int = 1, page_size: int = 10) -> tuple[list[T], PageInfo]:
    """Slice one page out of `items`.

    Pages are 1-based. A page past the end is clamped to the last page, and
    a page below 1 to the first; an empty collection yields an empty page 1.
    The window is the run of page numbers a pager shows around the page.
    """
    page_size = max(page_size, 1)
    total_items = len(items)
    total_pages = math.ceil(total_items / page_size)
    page = min(max(page, 1), max(total_pages, 1))

    start_index = (page - 1) * page_size
    end_index = min(start_index + page_size, total_items)
    window_start, window_end = page_window(page, total_pages)

    info = PageInfo(
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        start_index=start_index,
        end_index=end_index,
        has_next=page < total_pages,
        has_previous=page > 1,
        window_start=window_start,
        window_end=window_end,
    )
    return items[start_index:end_index], info


def page_window(current_page: int, total_pages: int, show_pages: int = 5) -> tuple[int, int]:
    """Inclusive range of page numbers to show around the current page."""
    if total_pages < 1:
        return 1, 1
    delta = show_pages // 2
    start = max(1, current_page - delta)
    end = min(total_pages, start + show_pages - 1)
    if end - start + 1 < show_pages:
        start = max(1, end - show_pages + 1)
    return start, end
