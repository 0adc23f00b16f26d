# users_api/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

One interactor per operation of the Users resource. Each one validates its
input, talks to the store through the ``IUserStore`` port, and returns
domain models or raises domain errors. None of them knows about HTTP.
"""

from .create_user import CreateUser
from .delete_user import DeleteUser
from .get_user import GetUser, UserExists
from .list_users import ListUsers
from .patch_user import PatchUser
from .upsert_user import UpsertUser

__all__ = [
    "CreateUser",
    "DeleteUser",
    "GetUser",
    "UserExists",
    "ListUsers",
    "PatchUser",
    "UpsertUser",
]
