# users_api/core/domain/__init__.py
from .exceptions import (
    DomainError,
    InvalidUserRequestError,
    PatchOperationError,
    PatchValidationError,
    UserNotFoundError,
    UserValidationError,
)
from .models import (
    PageInfo,
    PageLinks,
    UpsertOutcome,
    UserCreateRequest,
    UserEntity,
    UserListing,
    UserPatchTarget,
    UserReplaceRequest,
    UserView,
)
from .validation import FieldError, validate_user

__all__ = [
    "DomainError",
    "InvalidUserRequestError",
    "PatchOperationError",
    "PatchValidationError",
    "UserNotFoundError",
    "UserValidationError",
    "PageInfo",
    "PageLinks",
    "UpsertOutcome",
    "UserCreateRequest",
    "UserEntity",
    "UserListing",
    "UserPatchTarget",
    "UserReplaceRequest",
    "UserView",
    "FieldError",
    "validate_user",
]
