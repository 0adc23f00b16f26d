# tests/__init__.py
"""
Test Suite for the Users API.

Organization:
- `core`: Domain rules and Use Cases against an in-memory (or mocked) store.
- `adapters`: The in-memory store and the HTTP surface through a TestClient.
- `shared`: Logging and telemetry setup.
"""
