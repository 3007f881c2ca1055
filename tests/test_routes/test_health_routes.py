# tests/test_routes/test_health_routes.py
def test_status(client):
    body = client.get("/status").json()
    assert body["status"] == "healthy"
    assert body["uptime"] >= 0


def test_api_health_checks_database(client):
    body = client.get("/api/health").json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"


def test_admin_health_reports_headers(client, admin_credentials):
    assert client.get("/api/admin/health").json()["authentication"] == "missing"
    # Header values are not checked here
    response = client.get("/api/admin/health", headers={k: "anything" for k in admin_credentials})
    assert response.json()["authentication"] == "present"
