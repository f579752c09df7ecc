"""Tests for the health endpoints."""
from fastapi.testclient import TestClient

from employee_api import __version__
from employee_api.api.main import create_app
from employee_api.database import DatabaseConnection


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == __version__


def test_readiness_check_with_reachable_database(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["status"] == "ready"


def test_readiness_check_with_unreachable_database(tmp_path, service):
    db = DatabaseConnection(f"sqlite:///{tmp_path / 'missing-dir' / 'employees.db'}")
    test_client = TestClient(create_app(employee_service=service, database=db))

    response = test_client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"
    db.close()
