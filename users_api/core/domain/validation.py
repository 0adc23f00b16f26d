# users_api/core/domain/validation.py
"""
Field rules shared by every path that writes a user: create, replace and
the result of a patch merge.

The validator never raises. It returns every violation it finds so the
caller can answer with a single 422 listing all of them.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

LOGIN_CHARSET_MESSAGE = "Login should contain only letters or digits"

# (attribute name, wire name) of every required field, in report order.
REQUIRED_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("login", "login"),
    ("first_name", "firstName"),
    ("last_name", "lastName"),
)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


def is_letter_or_digit(ch: str) -> bool:
    """Unicode letter (any L* category) or decimal digit (Nd)."""
    return ch.isalpha() or ch.isdecimal()


def is_blank(value: Optional[str]) -> bool:
    """Missing, empty or whitespace only."""
    return value is None or not value.strip()


def validate_login(login: Optional[str]) -> List[FieldError]:
    if is_blank(login):
        return [FieldError("login", "The login field is required.")]
    if not all(is_letter_or_digit(ch) for ch in login):
        return [FieldError("login", LOGIN_CHARSET_MESSAGE)]
    return []


def validate_user(representation) -> List[FieldError]:
    """
    Check a create, replace or patch-target representation.

    Any object exposing ``login``, ``first_name`` and ``last_name``
    attributes is accepted.
    """
    errors = validate_login(getattr(representation, "login", None))
    for attr, wire_name in REQUIRED_FIELDS[1:]:
        if is_blank(getattr(representation, attr, None)):
            errors.append(FieldError(wire_name, f"The {wire_name} field is required."))
    return errors


def field_errors_to_dict(errors: List[FieldError]) -> Dict[str, List[str]]:
    """Group messages by field, preserving the order they were reported in."""
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        grouped.setdefault(error.field, []).append(error.message)
    return grouped
