# users_api/core/ports/user_store.py
from typing import List, Optional, Protocol, Tuple
from uuid import UUID

from users_api.core.domain.models import UserEntity


class IUserStore(Protocol):
    """
    Port for User persistence.

    Every method is atomic with respect to the others. Entities are frozen,
    so what the store returns is a snapshot the caller cannot use to change
    stored state.
    """

    def find_by_id(self, user_id: UUID) -> Optional[UserEntity]:
        """Returns the stored user, or None."""
        ...

    def insert(self, user: UserEntity) -> UserEntity:
        """
        Stores a new user under a freshly generated identifier.

        Returns:
            The stored entity, carrying its identifier.
        """
        ...

    def update(self, user: UserEntity) -> bool:
        """Replaces the user stored under ``user.id``. Returns False if there is none."""
        ...

    def update_or_insert(self, user: UserEntity) -> Tuple[UserEntity, bool]:
        """
        Replaces the user stored under ``user.id``, or inserts it under that id.

        Both the existence check and the write happen as one operation.

        Returns:
            The stored entity and True if it was inserted.
        """
        ...

    def delete(self, user_id: UUID) -> bool:
        """Removes the user. Returns False if there was none."""
        ...

    def get_page(self, skip: int, limit: int) -> Tuple[List[UserEntity], int]:
        """
        Returns at most ``limit`` users starting at offset ``skip`` in a stable
        order, together with the total number of stored users.
        """
        ...

    def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
