# users_api/core/use_cases/upsert_user.py
from uuid import UUID

import structlog

from users_api.core.domain.exceptions import UserValidationError
from users_api.core.domain.mapping import entity_from_replace
from users_api.core.domain.models import UpsertOutcome, UserReplaceRequest
from users_api.core.domain.validation import validate_user
from users_api.core.ports.user_store import IUserStore
from users_api.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class UpsertUser:
    """
    Use Case: Replaces the user stored under a given identifier, or creates it
    under that identifier when it does not exist yet.

    Replace is total: fields the request does not carry (games played,
    current game) go back to their defaults. The existence check and the
    write are a single store operation, so concurrent callers racing on the
    same unknown identifier see exactly one "created".
    """

    def __init__(self, store: IUserStore):
        self.store = store

    def execute(self, user_id: UUID, request: UserReplaceRequest) -> UpsertOutcome:
        with tracer.start_as_current_span("use_case.upsert_user") as span:
            span.set_attribute("app.user_id", str(user_id))

            errors = validate_user(request)
            if errors:
                logger.info(
                    "user_upsert_rejected",
                    user_id=str(user_id),
                    fields=sorted({e.field for e in errors}),
                )
                raise UserValidationError(errors)

            _, inserted = self.store.update_or_insert(entity_from_replace(request, user_id))

            span.set_attribute("app.user_created", inserted)
            logger.info("user_upserted", user_id=str(user_id), created=inserted)
            return UpsertOutcome(user_id=user_id, created=inserted)
