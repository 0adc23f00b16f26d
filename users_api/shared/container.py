# users_api/shared/container.py
from dependency_injector import containers, providers

from users_api.adapters.persistence.in_memory_store import InMemoryUserStore
from users_api.core.use_cases import (
    CreateUser,
    DeleteUser,
    GetUser,
    ListUsers,
    PatchUser,
    UpsertUser,
    UserExists,
)


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    The store is the only long-lived object; its lifetime is owned here and
    it is handed to every use case through its constructor.
    """

    # 1. Gateways (Infrastructure Adapters)

    # One store per process (Singleton); tests override it per case.
    user_store = providers.Singleton(InMemoryUserStore)

    # 2. Use Cases (Application Logic)
    # Factory: a new interactor per request, sharing the singleton store.

    get_user_use_case = providers.Factory(GetUser, store=user_store)
    user_exists_use_case = providers.Factory(UserExists, store=user_store)
    create_user_use_case = providers.Factory(CreateUser, store=user_store)
    upsert_user_use_case = providers.Factory(UpsertUser, store=user_store)
    patch_user_use_case = providers.Factory(PatchUser, store=user_store)
    delete_user_use_case = providers.Factory(DeleteUser, store=user_store)
    list_users_use_case = providers.Factory(ListUsers, store=user_store)


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
