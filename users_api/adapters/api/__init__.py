# users_api/adapters/api/__init__.py
"""
REST API Adapter.

The HTTP entry point for the Users resource, built on FastAPI:
- It depends on `users_api.core` (Use Cases & Models).
- It resolves use cases from `users_api.shared.container`.
- It does NOT contain business logic.
"""
