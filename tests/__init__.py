# tests\__init__.py
"""
Test Suite for the Dating App.

Organization:
- `core`: Password hashing, tokens, configuration and the account services.
- `http_api`: The HTTP endpoints through FastAPI's TestClient.
- `client`: Client-side session state, storage and routing.
"""
