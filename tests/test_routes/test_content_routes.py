# tests/test_routes/test_content_routes.py
import uuid

import pytest

LEADER = {"name": "Lassine Diakité", "position": "Président", "location": "Spain", "order": 1}


class TestLeadership:
    def test_public_list_is_ordered(self, client, auth_headers):
        client.post("/api/leadership", json={**LEADER, "name": "Second", "order": 2}, headers=auth_headers)
        client.post("/api/leadership", json=LEADER, headers=auth_headers)

        names = [leader["name"] for leader in client.get("/api/leadership").json()]
        assert names == ["Lassine Diakité", "Second"]

    def test_write_requires_session(self, client):
        assert client.post("/api/leadership", json=LEADER).status_code == 401

    def test_partial_update_keeps_other_fields(self, client, auth_headers):
        leader = client.post("/api/leadership", json=LEADER, headers=auth_headers).json()

        response = client.put(f"/api/leadership/{leader['id']}", json={"phone": "0022300000000"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["phone"] == "0022300000000"
        assert response.json()["position"] == "Président"

    @pytest.mark.parametrize("field", ["name", "position", "order"])
    def test_update_rejects_null_for_required_field(self, client, auth_headers, field):
        leader = client.post("/api/leadership", json=LEADER, headers=auth_headers).json()

        response = client.put(f"/api/leadership/{leader['id']}", json={field: None}, headers=auth_headers)
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid request"
        assert f"{field} must not be null" in body["details"][0]["msg"]

        assert client.get("/api/leadership").json()[0]["name"] == "Lassine Diakité"

    def test_update_with_nullable_field_cleared(self, client, auth_headers):
        leader = client.post("/api/leadership", json={**LEADER, "phone": "0022300000000"}, headers=auth_headers).json()

        response = client.put(f"/api/leadership/{leader['id']}", json={"phone": None}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["phone"] is None

    def test_delete_returns_row(self, client, auth_headers):
        leader = client.post("/api/leadership", json=LEADER, headers=auth_headers).json()
        response = client.delete(f"/api/leadership/{leader['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] == leader["id"]
        assert client.get("/api/leadership").json() == []

    @pytest.mark.parametrize("method", ["put", "delete"])
    def test_missing_row(self, client, auth_headers, method):
        kwargs = {"json": {"name": "X"}} if method == "put" else {}
        response = getattr(client, method)(f"/api/leadership/{uuid.uuid4()}", headers=auth_headers, **kwargs)
        assert response.status_code == 404
        assert response.json() == {"error": "Leader not found"}


class TestAdminContent:
    def test_admin_create_records_creator(self, client, admin_headers):
        response = client.post("/api/admin/leadership", json=LEADER, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["createdBy"] == "admin@arm-mali.org"

    def test_admin_delete_returns_success(self, client, admin_headers):
        news = client.post(
            "/api/admin/news", json={"title": "Congrès", "content": "Le congrès aura lieu."}, headers=admin_headers
        ).json()
        response = client.delete(f"/api/admin/news/{news['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_admin_write_needs_admin_headers(self, client, auth_headers):
        response = client.post("/api/admin/program", json={
            "category": "Santé", "title": "T", "description": "D",
        }, headers=auth_headers)
        assert response.status_code == 403

    def test_admin_update(self, client, admin_headers):
        item = client.post("/api/admin/program", json={
            "category": "Santé", "title": "Hôpitaux", "description": "Construire", "order": 1,
        }, headers=admin_headers).json()
        response = client.put(f"/api/admin/program/{item['id']}", json={"order": 3}, headers=admin_headers)
        assert response.json()["order"] == 3
        assert response.json()["title"] == "Hôpitaux"


def test_program_ordered_by_category_then_order(client, auth_headers):
    for category, title, order in [("Santé", "B", 2), ("Économie", "A", 1), ("Santé", "C", 1)]:
        client.post("/api/program", json={
            "category": category, "title": title, "description": "...", "order": order,
        }, headers=auth_headers)

    rows = [(p["category"], p["order"]) for p in client.get("/api/program").json()]
    assert rows == sorted(rows)


def test_news_ordered_by_publication(client, auth_headers):
    for title in ("Premier", "Deuxième"):
        client.post("/api/news", json={"title": title, "content": "..."}, headers=auth_headers)
    titles = [n["title"] for n in client.get("/api/news").json()]
    assert titles == ["Premier", "Deuxième"]


def test_events_lists_only_upcoming(client, auth_headers):
    client.post("/api/events", json={
        "title": "Meeting passé", "description": "...", "date": "2020-01-01T10:00:00Z", "location": "Bamako",
    }, headers=auth_headers)
    client.post("/api/events", json={
        "title": "Rassemblement", "description": "...", "date": "2099-06-01T10:00:00Z", "location": "Kayes",
    }, headers=auth_headers)
    client.post("/api/events", json={
        "title": "Congrès", "description": "...", "date": "2098-06-01T10:00:00+02:00", "location": "Ségou",
    }, headers=auth_headers)

    events = client.get("/api/events").json()
    assert [e["title"] for e in events] == ["Congrès", "Rassemblement"]
    assert events[0]["date"].startswith("2098-06-01T08:00:00")
