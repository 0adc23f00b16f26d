# users_api/core/__init__.py
"""
Core Domain Layer.

Pure request-to-resource logic: validation, representation mapping, patch
merging, pagination and link synthesis, plus the use cases that compose
them around the store port.
- No dependencies on FastAPI.
- No dependencies on a concrete store.
"""
