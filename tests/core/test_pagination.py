# tests/core/test_pagination.py
import json

import pytest

from users_api.core.domain.links import build_links, page_url, pagination_header
from users_api.core.domain.models import PageLinks
from users_api.core.domain.pagination import (
    clamp_page_number,
    clamp_page_size,
    page_offset,
    paginate,
)

LISTING_URL = "http://testserver/users"


class TestClamping:
    @pytest.mark.parametrize("requested, expected", [(-5, 1), (0, 1), (1, 1), (7, 7)])
    def test_page_number(self, requested, expected):
        assert clamp_page_number(requested) == expected

    @pytest.mark.parametrize("requested, expected", [(-3, 1), (0, 1), (1, 1), (20, 20), (21, 20), (1000, 20)])
    def test_page_size(self, requested, expected):
        assert clamp_page_size(requested) == expected

    def test_offset_uses_clamped_values(self):
        assert page_offset(3, 10) == 20
        assert page_offset(-5, 1000) == 0
        assert page_offset(2, 1000) == 20


class TestPaginate:
    def test_total_pages_rounds_up(self):
        page = paginate(25, 1, 10)
        assert page.total_pages == 3
        assert page.has_next is True
        assert page.has_previous is False

    def test_last_page(self):
        page = paginate(25, 3, 10)
        assert page.skip == 20
        assert page.has_next is False
        assert page.has_previous is True

    def test_page_beyond_the_last(self):
        page = paginate(25, 4, 10)
        assert page.total_count == 25
        assert page.total_pages == 3
        assert page.has_next is False
        assert page.has_previous is True

    def test_empty_collection(self):
        page = paginate(0, 1, 10)
        assert page.total_pages == 0
        assert page.has_next is False
        assert page.has_previous is False

    def test_out_of_range_request_is_clamped_not_rejected(self):
        page = paginate(100, -5, 1000)
        assert page.current_page == 1
        assert page.page_size == 20
        assert page.total_pages == 5


class TestLinks:
    def test_middle_page_has_both_links(self):
        links = build_links(LISTING_URL, paginate(25, 2, 10))
        assert links.next == "http://testserver/users?pageNumber=3&pageSize=10"
        assert links.previous == "http://testserver/users?pageNumber=1&pageSize=10"

    def test_first_page_has_no_previous(self):
        links = build_links(LISTING_URL, paginate(25, 1, 10))
        assert links.previous is None
        assert links.next is not None

    def test_beyond_last_page_links_back_only(self):
        links = build_links(LISTING_URL, paginate(25, 4, 10))
        assert links.next is None
        assert links.previous == "http://testserver/users?pageNumber=3&pageSize=10"

    def test_links_follow_the_page_flags(self):
        """Presence is decided by the flags alone, not recomputed from the counts."""
        page = paginate(25, 2, 10).model_copy(update={"has_next": False, "has_previous": False})
        assert build_links(LISTING_URL, page) == PageLinks()

    def test_existing_query_is_replaced(self):
        assert page_url("http://h/users?pageNumber=9&x=1", 2, 5) == "http://h/users?pageNumber=2&pageSize=5"


def test_pagination_header_payload():
    page = paginate(25, 1, 10)
    header = json.loads(pagination_header(page, build_links(LISTING_URL, page)))
    assert header == {
        "previousPageLink": None,
        "nextPageLink": "http://testserver/users?pageNumber=2&pageSize=10",
        "totalCount": 25,
        "pageSize": 10,
        "currentPage": 1,
        "totalPages": 3,
    }
