# users_api/core/domain/patch.py
"""
Partial updates expressed as a JSON Patch (RFC 6902) document.

Each operation is one variant of a closed set, selected by its ``op`` tag:

    add / replace  -> SetOperation     write a literal value
    remove         -> RemoveOperation  reset the field to None
    move           -> MoveOperation    copy ``from`` into ``path``, then reset ``from``
    copy           -> CopyOperation    copy ``from`` into ``path``
    test           -> TestOperation    abort unless ``path`` equals ``value``

``merge`` interprets the operations in order against a working copy of the
patch target. The first failing operation aborts the whole merge; the
caller's target is never touched. Re-validating the merged result is the
caller's job (see ``PatchUser``).
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from users_api.core.domain.exceptions import PatchOperationError
from users_api.core.domain.models import UserPatchTarget

# Lower-cased JSON pointer segment -> UserPatchTarget attribute.
PATCHABLE_FIELDS: Dict[str, str] = {
    "login": "login",
    "firstname": "first_name",
    "lastname": "last_name",
}


class _Operation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    path: str = Field(..., examples=["/login"])


class SetOperation(_Operation):
    op: Literal["add", "replace"]
    value: Any = None


class RemoveOperation(_Operation):
    op: Literal["remove"]


class MoveOperation(_Operation):
    op: Literal["move"]
    from_: str = Field(..., alias="from")


class CopyOperation(_Operation):
    op: Literal["copy"]
    from_: str = Field(..., alias="from")


class TestOperation(_Operation):
    # Keep pytest from collecting this class.
    __test__ = False

    op: Literal["test"]
    value: Any = None


PatchOperation = Annotated[
    Union[SetOperation, RemoveOperation, MoveOperation, CopyOperation, TestOperation],
    Field(discriminator="op"),
]


def resolve_path(pointer: str) -> Optional[str]:
    """
    Map a JSON pointer such as ``/firstName`` to an attribute name.
    Returns None for anything that is not a single known top-level field.
    """
    segment = pointer[1:] if pointer.startswith("/") else pointer
    if not segment or "/" in segment:
        return None
    return PATCHABLE_FIELDS.get(segment.lower())


def merge(target: UserPatchTarget, operations: Sequence[PatchOperation]) -> UserPatchTarget:
    """
    Apply ``operations`` to a copy of ``target`` and return the merged copy.

    Raises:
        PatchOperationError: on the first operation that names an unknown
            field, writes a non-string value, or is a failing test.
    """
    working = target.model_dump()

    for index, operation in enumerate(operations):
        field = _resolve(index, operation.path)

        if isinstance(operation, SetOperation):
            working[field] = _string_value(index, field, operation.value)

        elif isinstance(operation, RemoveOperation):
            working[field] = None

        elif isinstance(operation, (MoveOperation, CopyOperation)):
            source = _resolve(index, operation.from_)
            value = working[source]
            if isinstance(operation, MoveOperation) and source != field:
                working[source] = None
            working[field] = value

        elif isinstance(operation, TestOperation):
            if working[field] != operation.value:
                raise PatchOperationError(
                    index,
                    f"test failed: '{operation.path}' is {working[field]!r}, expected {operation.value!r}",
                )

    return UserPatchTarget(**working)


def _resolve(index: int, pointer: str) -> str:
    field = resolve_path(pointer)
    if field is None:
        raise PatchOperationError(index, f"the target location '{pointer}' does not exist")
    return field


def _string_value(index: int, field: str, value: Any) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise PatchOperationError(index, f"the value for '{field}' must be a string")
    return value


def operations_summary(operations: Sequence[PatchOperation]) -> List[str]:
    """Short ``op path`` strings, used for log lines."""
    return [f"{operation.op} {operation.path}" for operation in operations]
