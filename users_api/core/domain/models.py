# users_api/core/domain/models.py
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base for every representation exchanged over HTTP.
    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Entities ---

class UserEntity(BaseModel):
    """
    The persisted record for a User. Owned by the store.

    Frozen: a copy handed out by the store can never be used to mutate
    stored state. Changes are expressed with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[UUID] = None
    login: str
    first_name: str
    last_name: str
    games_played: int = Field(0, ge=0)
    current_game_id: Optional[UUID] = None


# --- Inbound representations ---
# Fields are optional at the schema level; absence is reported by the
# validator as a field error rather than by the HTTP framework.

class UserCreateRequest(WireModel):
    """Payload of POST /users. Identifier and game stats are server-assigned."""

    login: Optional[str] = Field(None, description="Letters and digits only", examples=["johndoe"])
    first_name: Optional[str] = Field(None, examples=["John"])
    last_name: Optional[str] = Field(None, examples=["Doe"])


class UserReplaceRequest(WireModel):
    """Payload of PUT /users/{id}. The identifier always comes from the path."""

    login: Optional[str] = Field(None, description="Letters and digits only", examples=["johndoe"])
    first_name: Optional[str] = Field(None, examples=["John"])
    last_name: Optional[str] = Field(None, examples=["Doe"])


class UserPatchTarget(WireModel):
    """
    Mutable subset of the read view that patch operations are applied to.
    """

    login: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


# --- Outbound representations ---

class UserView(WireModel):
    id: UUID
    login: str
    full_name: str
    current_game_id: Optional[UUID] = None
    games_played: int = 0


class PageInfo(BaseModel):
    """Metadata describing one window of a paged listing."""

    model_config = ConfigDict(frozen=True)

    total_count: int
    current_page: int
    page_size: int
    total_pages: int
    skip: int
    has_previous: bool
    has_next: bool


class PageLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    next: Optional[str] = None
    previous: Optional[str] = None


class UserListing(BaseModel):
    """Result of the listing use case: the views plus everything the X-Pagination header needs."""

    items: List[UserView] = Field(default_factory=list)
    page: PageInfo
    links: PageLinks


class UpsertOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: UUID
    created: bool
