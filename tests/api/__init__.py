"""API tests package.

HTTP-level tests using FastAPI's TestClient:
- Request body validation (422 Problem Details)
- Outcome to HTTP status mapping (200 successful/pending, 400 failed)
- Trace header propagation
- Route registry drift

Most tests run the real pipeline; handlers are replaced through
``app.dependency_overrides`` where a test only checks the presentation layer.
"""
