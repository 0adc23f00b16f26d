# users_api/adapters/persistence/__init__.py
"""
Persistence Adapters.

Implementations of the ``IUserStore`` port.

Components:
- InMemoryUserStore: thread-safe, insertion-ordered store held in process memory.
"""

from .in_memory_store import InMemoryUserStore

__all__ = [
    "InMemoryUserStore",
]
