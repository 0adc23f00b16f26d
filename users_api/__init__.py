# users_api/__init__.py
"""
Users API - resource-oriented HTTP service for User records.

Follows Hexagonal Architecture (Ports & Adapters):
- ``core``: domain rules and use cases, free of HTTP and storage details.
- ``adapters``: FastAPI surface and store implementations.
- ``shared``: configuration, logging, tracing, dependency wiring.
"""

__version__ = "1.0.0"
