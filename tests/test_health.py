from unittest.mock import patch

from sqlalchemy.exc import OperationalError


def test_basic_health(client):
    response = client.get("/health/")

    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "healthy"
    assert data["version"] == "1.0.0"


def test_detailed_health_checks_database_and_system(client):
    data = client.get("/health/detailed").get_json()

    assert data["status"] == "healthy"
    assert data["components"]["database"]["status"] == "healthy"
    assert set(data["components"]["system"]) >= {"cpu_usage", "memory_usage", "disk_usage"}


def test_detailed_health_reports_database_failure(client):
    with patch(
        "app.health.routes.db.session.execute",
        side_effect=OperationalError("SELECT 1", {}, Exception("down")),
    ):
        data = client.get("/health/detailed").get_json()

    assert data["status"] == "unhealthy"
    assert data["components"]["database"]["status"] == "unhealthy"


def test_liveness(client):
    assert client.get("/health/live").get_json()["alive"] is True
