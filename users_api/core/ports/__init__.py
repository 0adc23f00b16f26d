# users_api/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols that infrastructure adapters implement so the core can reach
storage without knowing how it works.
"""

from .user_store import IUserStore

__all__ = [
    "IUserStore",
]
