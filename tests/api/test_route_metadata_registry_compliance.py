"""Registry compliance tests - prevent drift between registry and router.

These tests ensure the Route Metadata Registry remains the single source of truth
by validating that:
1. All FastAPI routes are registered in the registry (no orphans)
2. All registry entries generate actual routes (no dead entries)
3. Metadata is complete enough to produce a usable OpenAPI document

If these tests fail, it means the registry has drifted from actual implementation.
"""

from fastapi.routing import APIRoute

from src.main import app
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY


# =============================================================================
# Route Completeness
# =============================================================================


class TestRegistryCompleteness:
    """Verify registry and FastAPI routes are in sync."""

    def test_routes_match_registry(self):
        """Every v1 route has exactly one registry entry and vice versa."""
        actual_routes = {
            f"{method} {route.path}"
            for route in v1_router.routes
            if isinstance(route, APIRoute)
            for method in route.methods
            if method not in {"HEAD", "OPTIONS"}
        }
        expected_routes = {
            f"{entry.method.value} /api/v1{entry.path}" for entry in ROUTE_REGISTRY
        }

        assert actual_routes == expected_routes

    def test_operation_ids_are_unique(self):
        """Every operation_id must be unique across all routes."""
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]

        assert len(operation_ids) == len(set(operation_ids))


# =============================================================================
# Metadata Consistency
# =============================================================================


class TestMetadataConsistency:
    """Verify registry metadata reaches the OpenAPI document."""

    def test_every_entry_has_summary_and_tags(self):
        for entry in ROUTE_REGISTRY:
            assert entry.summary, f"{entry.path} has no summary"
            assert entry.tags, f"{entry.path} has no tags"

    def test_declared_errors_appear_in_openapi(self):
        paths = app.openapi()["paths"]

        for entry in ROUTE_REGISTRY:
            operation = paths[f"/api/v1{entry.path}"][entry.method.value.lower()]
            for error in entry.errors:
                assert str(error.status) in operation["responses"]
