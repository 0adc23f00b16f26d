# users_api/core/use_cases/get_user.py
from uuid import UUID

from users_api.core.domain.exceptions import UserNotFoundError
from users_api.core.domain.mapping import to_view
from users_api.core.domain.models import UserView
from users_api.core.ports.user_store import IUserStore
from users_api.shared.telemetry import get_tracer

tracer = get_tracer(__name__)


class GetUser:
    """
    Use Case: Fetches the read view of a single user.
    """

    def __init__(self, store: IUserStore):
        self.store = store

    def execute(self, user_id: UUID) -> UserView:
        with tracer.start_as_current_span("use_case.get_user") as span:
            span.set_attribute("app.user_id", str(user_id))

            user = self.store.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            return to_view(user)


class UserExists:
    """
    Use Case: Existence probe behind HEAD /users/{id}. Produces no representation.
    """

    def __init__(self, store: IUserStore):
        self.store = store

    def execute(self, user_id: UUID) -> None:
        with tracer.start_as_current_span("use_case.user_exists") as span:
            span.set_attribute("app.user_id", str(user_id))

            if self.store.find_by_id(user_id) is None:
                raise UserNotFoundError(user_id)
