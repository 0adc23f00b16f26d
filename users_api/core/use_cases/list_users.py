# users_api/core/use_cases/list_users.py
import structlog

from users_api.core.domain.links import build_links
from users_api.core.domain.mapping import to_view
from users_api.core.domain.models import UserListing
from users_api.core.domain.pagination import (
    clamp_page_number,
    clamp_page_size,
    page_offset,
    paginate,
)
from users_api.core.ports.user_store import IUserStore
from users_api.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class ListUsers:
    """
    Use Case: Returns one page of users plus its navigation metadata.

    Page coordinates are clamped rather than rejected. The listing URL is
    passed in explicitly so that link synthesis does not depend on the
    request object.
    """

    def __init__(self, store: IUserStore):
        self.store = store

    def execute(self, page_number: int, page_size: int, listing_url: str) -> UserListing:
        with tracer.start_as_current_span("use_case.list_users") as span:
            page_number = clamp_page_number(page_number)
            page_size = clamp_page_size(page_size)

            # Items and total come from one store call to keep them consistent.
            users, total_count = self.store.get_page(page_offset(page_number, page_size), page_size)
            page = paginate(total_count, page_number, page_size)

            span.set_attribute("app.page_number", page.current_page)
            span.set_attribute("app.total_count", page.total_count)
            logger.debug(
                "users_listed",
                page=page.current_page,
                size=page.page_size,
                returned=len(users),
                total=page.total_count,
            )

            return UserListing(
                items=[to_view(user) for user in users],
                page=page,
                links=build_links(listing_url, page),
            )
