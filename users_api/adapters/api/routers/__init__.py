# users_api/adapters/api/routers/__init__.py
"""
API Route Definitions.

- `users`: The Users resource (CRUD, patch, paged listing).
- `health`: System health checks.
"""
