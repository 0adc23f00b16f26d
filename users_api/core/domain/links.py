# users_api/core/domain/links.py
import json
from typing import Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

from users_api.core.domain.models import PageInfo, PageLinks


def page_url(listing_url: str, page_number: int, page_size: int) -> str:
    """``listing_url`` with its query replaced by the given page coordinates."""
    parts = urlsplit(listing_url)
    query = urlencode({"pageNumber": page_number, "pageSize": page_size})
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, ""))


def build_links(listing_url: str, page: PageInfo) -> PageLinks:
    """
    Navigation links for the neighbours of ``page``.

    Presence follows ``page.has_next`` / ``page.has_previous`` as computed by
    the paginator; they are not recomputed here.
    """
    next_link: Optional[str] = None
    previous_link: Optional[str] = None

    if page.has_next:
        next_link = page_url(listing_url, page.current_page + 1, page.page_size)
    if page.has_previous:
        previous_link = page_url(listing_url, page.current_page - 1, page.page_size)

    return PageLinks(next=next_link, previous=previous_link)


def pagination_header(page: PageInfo, links: PageLinks) -> str:
    """JSON payload of the ``X-Pagination`` response header."""
    return json.dumps({
        "previousPageLink": links.previous,
        "nextPageLink": links.next,
        "totalCount": page.total_count,
        "pageSize": page.page_size,
        "currentPage": page.current_page,
        "totalPages": page.total_pages,
    })
