"""
Wonders API test suite.

- unit/: store, seed loader, catalog service, client, logging
- integration/: HTTP routes through FastAPI's TestClient
"""
