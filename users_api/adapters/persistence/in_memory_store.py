# users_api/adapters/persistence/in_memory_store.py
import threading
import uuid
from typing import Dict, Iterable, List, Optional, Tuple
from uuid import UUID

import structlog

from users_api.core.domain.models import UserEntity
from users_api.core.ports.user_store import IUserStore

logger = structlog.get_logger()


class InMemoryUserStore(IUserStore):
    """
    Concrete implementation of the User store held in process memory.

    Users are kept in insertion order, which is the enumeration order of
    ``get_page``. A single lock serializes every operation, so compound
    operations such as ``update_or_insert`` cannot interleave.
    """

    def __init__(self, users: Iterable[UserEntity] = ()):
        self._lock = threading.Lock()
        self._users: Dict[UUID, UserEntity] = {}
        for user in users:
            if user.id is None:
                raise ValueError("Seed users must carry an id")
            self._users[user.id] = user

    # --- Interface Implementation ---

    def find_by_id(self, user_id: UUID) -> Optional[UserEntity]:
        with self._lock:
            return self._users.get(user_id)

    def insert(self, user: UserEntity) -> UserEntity:
        with self._lock:
            user_id = uuid.uuid4()
            while user_id in self._users:
                user_id = uuid.uuid4()
            stored = user.model_copy(update={"id": user_id})
            self._users[user_id] = stored
        logger.debug("store_user_inserted", user_id=str(user_id))
        return stored

    def update(self, user: UserEntity) -> bool:
        with self._lock:
            if user.id not in self._users:
                return False
            self._users[user.id] = user
            return True

    def update_or_insert(self, user: UserEntity) -> Tuple[UserEntity, bool]:
        if user.id is None:
            raise ValueError("update_or_insert requires a user with an id")
        with self._lock:
            inserted = user.id not in self._users
            # Replacing an existing key keeps its position in the enumeration order.
            self._users[user.id] = user
        return user, inserted

    def delete(self, user_id: UUID) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def get_page(self, skip: int, limit: int) -> Tuple[List[UserEntity], int]:
        with self._lock:
            users = list(self._users.values())
        return users[skip:skip + limit], len(users)

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
