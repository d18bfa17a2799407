"""
Unit tests for Health API endpoints.

Tests health check, readiness, and liveness probes.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from feature_board.api.dependencies.board_deps import get_mongodb
from feature_board.api.health import router
from feature_board.core.config import get_settings


# ===== Fixtures =====


@pytest.fixture
def mock_mongodb():
    """Mock MongoDB instance."""
    mongodb = Mock()
    mongodb.health_check = AsyncMock(return_value={"connected": True})
    return mongodb


@pytest.fixture
def mock_settings():
    """Mock Settings instance."""
    settings = Mock()
    settings.environment = "test"
    settings.database_name = "test_db"
    settings.board_id = "board"
    settings.identity_mode = "jwks"
    return settings


@pytest.fixture
def client(mock_mongodb, mock_settings):
    """Create test client with mocked dependencies."""
    app = FastAPI()
    app.include_router(router)

    # Override dependencies
    app.dependency_overrides[get_mongodb] = lambda: mock_mongodb
    app.dependency_overrides[get_settings] = lambda: mock_settings

    return TestClient(app)


# ===== health_check Tests =====


class TestHealthCheck:
    """Test main health check endpoint."""

    def test_health_all_healthy(self, client, mock_mongodb):
        """Test health check when the document store is reachable."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["environment"] == "test"
        assert data["configuration"] == {
            "database_name": "test_db",
            "board_id": "board",
            "identity_mode": "jwks",
        }
        assert data["dependencies"]["mongodb"] == {"connected": True}

    def test_health_mongodb_unhealthy(self, client, mock_mongodb):
        """Test health check when MongoDB is unhealthy."""
        mock_mongodb.health_check.return_value = {
            "connected": False,
            "error": "Connection failed",
        }

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"


# ===== mongodb_health Tests =====


class TestMongodbHealth:
    """Test MongoDB-specific health endpoint."""

    def test_mongodb_health_passthrough(self, client, mock_mongodb):
        mock_mongodb.health_check.return_value = {
            "connected": True,
            "version": "7.0.0",
            "database": "test_db",
        }

        response = client.get("/health/mongodb")

        assert response.status_code == 200
        assert response.json()["version"] == "7.0.0"


# ===== Probe Tests =====


class TestProbes:
    """Test readiness and liveness probes."""

    def test_ready_when_connected(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"ready": True, "dependencies": {"mongodb": True}}

    def test_not_ready_when_disconnected(self, client, mock_mongodb):
        mock_mongodb.health_check.return_value = {"connected": False}

        response = client.get("/health/ready")

        assert response.json()["ready"] is False

    def test_liveness(self, client, mock_mongodb):
        """Liveness never touches the document store."""
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json() == {"alive": True, "status": "ok"}
        mock_mongodb.health_check.assert_not_called()
