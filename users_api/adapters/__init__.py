# users_api/adapters/__init__.py
"""
Infrastructure Adapters.

Concrete implementations around the core:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `persistence`: Secondary Adapter (Driven) - User store implementations.

Dependencies point INWARD: these modules depend on `users_api.core`,
but `users_api.core` never imports from here.
"""
