"""
Paginated Listing Aggregator

Counts a whole collection and returns one page of it in a single store call.
"""
from typing import Optional, Tuple

from app.core.config import settings
from app.crud.store import EntityStore
from app.schemas.pagination import Page


def parse_page_value(raw: Optional[str]) -> Optional[int]:
    """Unparsable paging input counts as missing"""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def clamp_page(page_size: Optional[int], page_number: Optional[int]) -> Tuple[int, int]:
    """Out-of-range values fall back to the defaults instead of erroring."""
    if page_size is None or page_size < 1:
        page_size = settings.default_page_size
    if page_number is None or page_number < 1:
        page_number = settings.default_page
    return page_size, page_number


def page_query(page: Optional[str] = None, recordPerPage: Optional[str] = None) -> Tuple[int, int]:
    """Query-string dependency returning clamped (page_size, page_number)"""
    return clamp_page(parse_page_value(recordPerPage), parse_page_value(page))


async def list_page(store: EntityStore, collection: str, page_size: int, page_number: int) -> Page:
    page_size, page_number = clamp_page(page_size, page_number)
    start_index = (page_number - 1) * page_size

    total_count, items = await store.find_page(collection, offset=start_index, limit=page_size)
    return Page(total_count=total_count, items=items)
