# users_api/adapters/api/dependencies.py
"""
Glue between FastAPI's ``Depends`` and the dependency-injector container.

Routers depend on these functions rather than on the container directly,
so the container is the only place that knows how a use case is built.
"""
from typing import Optional
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from users_api.core.domain.exceptions import InvalidUserRequestError, UserNotFoundError
from users_api.core.ports.user_store import IUserStore
from users_api.core.use_cases import (
    CreateUser,
    DeleteUser,
    GetUser,
    ListUsers,
    PatchUser,
    UpsertUser,
    UserExists,
)
from users_api.shared.container import Container


# -----------------------------------------------------------------------------
# Path identifiers
# -----------------------------------------------------------------------------

def _parse_uuid(raw: str) -> Optional[UUID]:
    try:
        return UUID(raw)
    except ValueError:
        return None


def existing_user_id(user_id: str) -> UUID:
    """
    Identifier of a resource that must already exist.
    Nothing can be stored under a malformed identifier, so it is a 404.
    """
    parsed = _parse_uuid(user_id)
    if parsed is None:
        raise UserNotFoundError(user_id)
    return parsed


def upsert_user_id(user_id: str) -> UUID:
    """
    Identifier a PUT will write to. A malformed one is a client error,
    reported before the body is validated.
    """
    parsed = _parse_uuid(user_id)
    if parsed is None:
        raise InvalidUserRequestError(f"'{user_id}' is not a valid user id")
    return parsed


# -----------------------------------------------------------------------------
# Store
# -----------------------------------------------------------------------------

@inject
def get_user_store(
    store: IUserStore = Depends(Provide[Container.user_store]),
) -> IUserStore:
    return store


# -----------------------------------------------------------------------------
# Use case injection
# -----------------------------------------------------------------------------

@inject
def get_get_user_use_case(
    use_case: GetUser = Depends(Provide[Container.get_user_use_case]),
) -> GetUser:
    return use_case


@inject
def get_user_exists_use_case(
    use_case: UserExists = Depends(Provide[Container.user_exists_use_case]),
) -> UserExists:
    return use_case


@inject
def get_create_user_use_case(
    use_case: CreateUser = Depends(Provide[Container.create_user_use_case]),
) -> CreateUser:
    return use_case


@inject
def get_upsert_user_use_case(
    use_case: UpsertUser = Depends(Provide[Container.upsert_user_use_case]),
) -> UpsertUser:
    return use_case


@inject
def get_patch_user_use_case(
    use_case: PatchUser = Depends(Provide[Container.patch_user_use_case]),
) -> PatchUser:
    return use_case


@inject
def get_delete_user_use_case(
    use_case: DeleteUser = Depends(Provide[Container.delete_user_use_case]),
) -> DeleteUser:
    return use_case


@inject
def get_list_users_use_case(
    use_case: ListUsers = Depends(Provide[Container.list_users_use_case]),
) -> ListUsers:
    return use_case
