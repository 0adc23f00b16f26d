# users_api/core/use_cases/patch_user.py
from typing import Sequence
from uuid import UUID

import structlog

from users_api.core.domain.exceptions import (
    PatchOperationError,
    PatchValidationError,
    UserNotFoundError,
)
from users_api.core.domain.mapping import apply_patch_target, to_patch_target
from users_api.core.domain.patch import PatchOperation, merge, operations_summary
from users_api.core.domain.validation import validate_user
from users_api.core.ports.user_store import IUserStore
from users_api.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class PatchUser:
    """
    Use Case: Applies a JSON Patch document to a stored user.

    All or nothing: the store is written only if every operation applies
    and the merged user passes the same field rules as create/replace.
    """

    def __init__(self, store: IUserStore):
        self.store = store

    def execute(self, user_id: UUID, operations: Sequence[PatchOperation]) -> None:
        """
        Raises:
            UserNotFoundError: if no user is stored under ``user_id``, including
                when it is deleted between the read and the write.
            PatchOperationError: if an operation cannot be applied.
            PatchValidationError: if the merged user violates a field rule.
        """
        with tracer.start_as_current_span("use_case.patch_user") as span:
            span.set_attribute("app.user_id", str(user_id))
            span.set_attribute("app.patch_operations", len(operations))

            user = self.store.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            try:
                merged = merge(to_patch_target(user), operations)
            except PatchOperationError as e:
                logger.info(
                    "user_patch_rejected",
                    user_id=str(user_id),
                    operation_index=e.operation_index,
                    reason=e.reason,
                )
                raise

            errors = validate_user(merged)
            if errors:
                logger.info(
                    "user_patch_invalid",
                    user_id=str(user_id),
                    fields=sorted({e.field for e in errors}),
                )
                raise PatchValidationError(errors)

            if not self.store.update(apply_patch_target(merged, user)):
                raise UserNotFoundError(user_id)

            logger.info("user_patched", user_id=str(user_id), operations=operations_summary(operations))
