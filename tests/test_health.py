"""
Health endpoint tests.
"""


def test_health_endpoint(client):
    """Test that the /health endpoint returns 200 OK."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert "data" in data
    assert data["data"]["status"] == "healthy"
    assert "timestamp" in data["data"]
    assert "version" in data["data"]
    assert data["data"]["service"] == "MediLink"
    assert data["data"]["storage_backend"] == "sql"


def test_health_ready_endpoint(client):
    """Test that the /health/ready endpoint pings the selected store."""
    response = client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["ready"] is True
    assert data["backend"] == "sql"
    assert data["checks"] == {"database": "ok"}


def test_root_endpoint(client):
    """Test that the root endpoint returns API information."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "MediLink"
    assert "version" in data
    assert data["status"] == "running"
    assert data["endpoints"]["admins"] == "/admin"


def test_process_time_header(client):
    response = client.get("/health")
    assert "X-Process-Time" in response.headers
