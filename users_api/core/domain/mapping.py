# users_api/core/domain/mapping.py
"""
Conversions between the stored ``UserEntity`` and its wire representations.

Every (source, destination) pair has a statically declared table. Each row
names the destination attribute and how it is filled:

- DIRECT:    copied from a source attribute
- DERIVED:   computed from the whole source object
- DEFAULTED: set to a fixed default, whatever the source holds
- IGNORED:   left as it already is on the destination

Nothing here inspects attribute names at runtime beyond what the tables say.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple
from uuid import UUID

from users_api.core.domain.models import (
    UserCreateRequest,
    UserEntity,
    UserPatchTarget,
    UserReplaceRequest,
    UserView,
)


class CopyRule(str, Enum):
    DIRECT = "direct"
    DERIVED = "derived"
    DEFAULTED = "defaulted"
    IGNORED = "ignored"


@dataclass(frozen=True)
class FieldMapping:
    target: str
    rule: CopyRule
    source: Optional[str] = None
    derive: Optional[Callable[[Any], Any]] = None
    default: Any = None


def full_name(entity: UserEntity) -> str:
    # Last name first.
    return f"{entity.last_name} {entity.first_name}"


ENTITY_TO_VIEW: Tuple[FieldMapping, ...] = (
    FieldMapping("id", CopyRule.DIRECT, source="id"),
    FieldMapping("login", CopyRule.DIRECT, source="login"),
    FieldMapping("full_name", CopyRule.DERIVED, derive=full_name),
    FieldMapping("current_game_id", CopyRule.DIRECT, source="current_game_id"),
    FieldMapping("games_played", CopyRule.DIRECT, source="games_played"),
)

CREATE_TO_ENTITY: Tuple[FieldMapping, ...] = (
    FieldMapping("id", CopyRule.DEFAULTED, default=None),
    FieldMapping("login", CopyRule.DIRECT, source="login"),
    FieldMapping("first_name", CopyRule.DIRECT, source="first_name"),
    FieldMapping("last_name", CopyRule.DIRECT, source="last_name"),
    FieldMapping("games_played", CopyRule.DEFAULTED, default=0),
    FieldMapping("current_game_id", CopyRule.DEFAULTED, default=None),
)

# Full replace: whatever the request does not carry goes back to its default.
REPLACE_TO_ENTITY: Tuple[FieldMapping, ...] = (
    FieldMapping("id", CopyRule.IGNORED),
    FieldMapping("login", CopyRule.DIRECT, source="login"),
    FieldMapping("first_name", CopyRule.DIRECT, source="first_name"),
    FieldMapping("last_name", CopyRule.DIRECT, source="last_name"),
    FieldMapping("games_played", CopyRule.DEFAULTED, default=0),
    FieldMapping("current_game_id", CopyRule.DEFAULTED, default=None),
)

ENTITY_TO_PATCH_TARGET: Tuple[FieldMapping, ...] = (
    FieldMapping("login", CopyRule.DIRECT, source="login"),
    FieldMapping("first_name", CopyRule.DIRECT, source="first_name"),
    FieldMapping("last_name", CopyRule.DIRECT, source="last_name"),
)

PATCH_TARGET_TO_ENTITY: Tuple[FieldMapping, ...] = (
    FieldMapping("id", CopyRule.IGNORED),
    FieldMapping("login", CopyRule.DIRECT, source="login"),
    FieldMapping("first_name", CopyRule.DIRECT, source="first_name"),
    FieldMapping("last_name", CopyRule.DIRECT, source="last_name"),
    FieldMapping("games_played", CopyRule.IGNORED),
    FieldMapping("current_game_id", CopyRule.IGNORED),
)


def map_fields(table: Tuple[FieldMapping, ...], source: Any) -> Dict[str, Any]:
    """
    Evaluate a mapping table against ``source``.

    IGNORED rows produce nothing; the caller keeps the destination's value.
    """
    values: Dict[str, Any] = {}
    for row in table:
        if row.rule is CopyRule.DIRECT:
            values[row.target] = getattr(source, row.source)
        elif row.rule is CopyRule.DERIVED:
            values[row.target] = row.derive(source)
        elif row.rule is CopyRule.DEFAULTED:
            values[row.target] = row.default
    return values


def to_view(entity: UserEntity) -> UserView:
    return UserView(**map_fields(ENTITY_TO_VIEW, entity))


def entity_from_create(request: UserCreateRequest) -> UserEntity:
    """New entity without an identifier; the store assigns one on insert."""
    return UserEntity(**map_fields(CREATE_TO_ENTITY, request))


def entity_from_replace(request: UserReplaceRequest, user_id: UUID) -> UserEntity:
    return UserEntity(id=user_id, **map_fields(REPLACE_TO_ENTITY, request))


def to_patch_target(entity: UserEntity) -> UserPatchTarget:
    return UserPatchTarget(**map_fields(ENTITY_TO_PATCH_TARGET, entity))


def apply_patch_target(target: UserPatchTarget, entity: UserEntity) -> UserEntity:
    """Copy the patch target back onto ``entity``; id and game stats are kept."""
    return entity.model_copy(update=map_fields(PATCH_TARGET_TO_ENTITY, target))
