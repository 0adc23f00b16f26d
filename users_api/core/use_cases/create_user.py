# users_api/core/use_cases/create_user.py
import structlog

from users_api.core.domain.exceptions import UserValidationError
from users_api.core.domain.mapping import entity_from_create
from users_api.core.domain.models import UserCreateRequest, UserEntity
from users_api.core.domain.validation import validate_user
from users_api.core.ports.user_store import IUserStore
from users_api.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class CreateUser:
    """
    Use Case: Registers a new user.

    Responsibilities:
    1. Validate the create representation (all field errors at once).
    2. Map it to a fresh entity with default game stats.
    3. Insert it; the store assigns the identifier.
    """

    def __init__(self, store: IUserStore):
        self.store = store

    def execute(self, request: UserCreateRequest) -> UserEntity:
        """
        Returns:
            UserEntity: The stored user, carrying its new identifier.

        Raises:
            UserValidationError: if any field rule is violated. Nothing is stored.
        """
        with tracer.start_as_current_span("use_case.create_user") as span:
            errors = validate_user(request)
            if errors:
                logger.info("user_create_rejected", fields=sorted({e.field for e in errors}))
                raise UserValidationError(errors)

            user = self.store.insert(entity_from_create(request))

            span.set_attribute("app.user_id", str(user.id))
            logger.info("user_created", user_id=str(user.id), login=user.login)
            return user
