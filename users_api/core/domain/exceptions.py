# users_api/core/domain/exceptions.py
from typing import Dict, List, Sequence

from users_api.core.domain.validation import FieldError, field_errors_to_dict


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Request Errors ---

class InvalidUserRequestError(DomainError):
    """Raised when the body or the path identifier is missing or cannot be parsed."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid request: {reason}")

# --- Entity Not Found Errors ---

class UserNotFoundError(DomainError):
    """Raised when no user is stored under the requested identifier."""
    def __init__(self, user_id: object):
        self.user_id = user_id
        super().__init__(f"User '{user_id}' not found.")

# --- Validation Errors ---

class UserValidationError(DomainError):
    """
    Raised when a create, replace or merged representation violates field rules.
    Carries every violation found, not only the first.
    """
    def __init__(self, errors: Sequence[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(sorted({e.field for e in self.errors}))
        super().__init__(f"User validation failed for: {fields}")

    def to_dict(self) -> Dict[str, List[str]]:
        return field_errors_to_dict(self.errors)


class PatchValidationError(UserValidationError):
    """Raised when a structurally valid patch produces an invalid user."""


class PatchOperationError(DomainError):
    """
    Raised when a patch operation targets an unknown field, carries an
    unusable value, or is a failing test. Aborts the whole patch.
    """
    def __init__(self, operation_index: int, reason: str):
        self.operation_index = operation_index
        self.reason = reason
        super().__init__(f"Patch operation {operation_index} failed: {reason}")

    def to_dict(self) -> Dict[str, List[str]]:
        return {f"patch[{self.operation_index}]": [self.reason]}
