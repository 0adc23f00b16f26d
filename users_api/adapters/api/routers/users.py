# users_api/adapters/api/routers/users.py
from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Body, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from users_api.adapters.api.dependencies import (
    existing_user_id,
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_patch_user_use_case,
    get_upsert_user_use_case,
    get_user_exists_use_case,
    upsert_user_id,
)
from users_api.core.domain.exceptions import InvalidUserRequestError
from users_api.core.domain.links import pagination_header
from users_api.core.domain.models import UserCreateRequest, UserReplaceRequest, UserView
from users_api.core.domain.pagination import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from users_api.core.domain.patch import PatchOperation
from users_api.core.use_cases import (
    CreateUser,
    DeleteUser,
    GetUser,
    ListUsers,
    PatchUser,
    UpsertUser,
    UserExists,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/users", tags=["Users"])

ALLOWED_COLLECTION_METHODS = "GET, POST, OPTIONS"

# --- Helpers ---

def _created(request: Request, user_id: UUID) -> JSONResponse:
    """201 carrying the new id as body and the resource URL as Location."""
    location = request.url_for("get_user", user_id=str(user_id))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=str(user_id),
        headers={"Location": str(location)},
    )


def _page_param(raw: Optional[str], default: int) -> int:
    # Listing parameters are corrected, never rejected.
    try:
        return int(raw) if raw is not None else default
    except ValueError:
        return default

# --- Endpoints ---

@router.get(
    "/{user_id}",
    name="get_user",
    response_model=UserView,
    summary="Get a user",
    responses={404: {"description": "User not found"}},
)
def get_user(
    user_id: UUID = Depends(existing_user_id),
    use_case: GetUser = Depends(get_get_user_use_case),
) -> UserView:
    return use_case.execute(user_id)


@router.head(
    "/{user_id}",
    summary="Check that a user exists",
    responses={404: {"description": "User not found"}},
)
def head_user(
    user_id: UUID = Depends(existing_user_id),
    use_case: UserExists = Depends(get_user_exists_use_case),
) -> Response:
    use_case.execute(user_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers={"Content-Type": "application/json; charset=utf-8"},
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created; returns its id"},
        400: {"description": "Missing or malformed body"},
        422: {"description": "Validation failed"},
    },
)
def create_user(
    request: Request,
    payload: Optional[UserCreateRequest] = Body(None),
    use_case: CreateUser = Depends(get_create_user_use_case),
) -> JSONResponse:
    if payload is None:
        raise InvalidUserRequestError("request body is required")

    user = use_case.execute(payload)
    return _created(request, user.id)


@router.put(
    "/{user_id}",
    summary="Replace a user, or create it under this id",
    responses={
        201: {"description": "User not found; created with the request data. Returns its id"},
        204: {"description": "User replaced"},
        400: {"description": "Invalid id or body"},
        422: {"description": "Validation failed"},
    },
)
def upsert_user(
    request: Request,
    user_id: UUID = Depends(upsert_user_id),
    payload: Optional[UserReplaceRequest] = Body(None),
    use_case: UpsertUser = Depends(get_upsert_user_use_case),
) -> Response:
    if payload is None:
        raise InvalidUserRequestError("request body is required")

    outcome = use_case.execute(user_id, payload)
    if outcome.created:
        return _created(request, outcome.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Partially update a user with a JSON Patch document",
    responses={
        400: {"description": "Missing or malformed patch document"},
        404: {"description": "User not found"},
        422: {"description": "Patch could not be applied or produced an invalid user"},
    },
)
def patch_user(
    user_id: UUID = Depends(existing_user_id),
    operations: Optional[List[PatchOperation]] = Body(None),
    use_case: PatchUser = Depends(get_patch_user_use_case),
) -> Response:
    if operations is None:
        raise InvalidUserRequestError("patch document is required")

    use_case.execute(user_id, operations)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={404: {"description": "User not found"}},
)
def delete_user(
    user_id: UUID = Depends(existing_user_id),
    use_case: DeleteUser = Depends(get_delete_user_use_case),
) -> Response:
    use_case.execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    name="list_users",
    response_model=List[UserView],
    summary="List users, one page at a time",
    description=(
        "Returns a page of users. Pagination metadata is carried in the X-Pagination header. "
        "pageNumber below 1 is treated as 1; pageSize is clamped into [1, 20]."
    ),
)
def list_users(
    request: Request,
    response: Response,
    page_number: Optional[str] = Query(None, alias="pageNumber", description="1-based page number"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Items per page, 1 to 20"),
    use_case: ListUsers = Depends(get_list_users_use_case),
) -> List[UserView]:
    listing = use_case.execute(
        _page_param(page_number, DEFAULT_PAGE_NUMBER),
        _page_param(page_size, DEFAULT_PAGE_SIZE),
        listing_url=str(request.url_for("list_users")),
    )
    response.headers["X-Pagination"] = pagination_header(listing.page, listing.links)
    return listing.items


@router.options(
    "",
    summary="List the methods supported on the collection",
)
def collection_options() -> Response:
    return Response(
        status_code=status.HTTP_200_OK,
        headers={"Allow": ALLOWED_COLLECTION_METHODS},
    )
