# users_api/core/use_cases/delete_user.py
from uuid import UUID

import structlog

from users_api.core.domain.exceptions import UserNotFoundError
from users_api.core.ports.user_store import IUserStore
from users_api.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class DeleteUser:
    """
    Use Case: Removes a user.
    """

    def __init__(self, store: IUserStore):
        self.store = store

    def execute(self, user_id: UUID) -> None:
        with tracer.start_as_current_span("use_case.delete_user") as span:
            span.set_attribute("app.user_id", str(user_id))

            if not self.store.delete(user_id):
                raise UserNotFoundError(user_id)

            logger.info("user_deleted", user_id=str(user_id))
