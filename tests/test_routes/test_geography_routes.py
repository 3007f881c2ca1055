# tests/test_routes/test_geography_routes.py
import pytest


@pytest.fixture
def initialized(client, admin_headers):
    response = client.post("/api/admin/init-geography", headers=admin_headers)
    assert response.status_code == 200, response.text
    return response.json()


def test_init_geography_counts(initialized):
    assert initialized == {
        "success": True,
        "message": "Geographic data initialized",
        "regions": 8,
        "cercles": 22,
        "communes": 56,
    }


def test_init_geography_only_once(client, admin_headers, initialized):
    response = client.post("/api/admin/init-geography", headers=admin_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Geographic data already initialized"}


def test_init_geography_requires_admin(client, auth_headers):
    response = client.post("/api/admin/init-geography", headers=auth_headers)
    assert response.status_code == 403
    assert response.json() == {"error": "Missing admin credentials"}


def test_drill_down(client, initialized):
    regions = client.get("/api/regions").json()
    assert [r["name"] for r in regions] == sorted(r["name"] for r in regions)
    bamako = next(r for r in regions if r["code"] == "BAM")

    cercles = client.get(f"/api/regions/{bamako['id']}/cercles").json()
    assert [c["code"] for c in cercles] == ["BAM-BAM"]

    communes = client.get(f"/api/cercles/{cercles[0]['id']}/communes").json()
    assert [c["name"] for c in communes] == [f"District {n}" for n in range(1, 7)]
    assert communes[0]["code"] == "BAM-BAM-DISTRICT-1"


def test_unknown_region_has_no_cercles(client, initialized):
    assert client.get("/api/regions/00000000-0000-0000-0000-000000000000/cercles").json() == []


def test_cartography(client, initialized, registered_member):
    body = client.get("/api/cartography").json()
    assert body["totalMembers"] == 1
    assert len(body["regions"]) == 8

    kayes = next(r for r in body["regions"] if r["name"] == "Kayes")
    assert {c["code"] for c in kayes["cercles"]} == {"KAY-KAY", "KAY-KEN", "KAY-KOU"}
    assert sum(len(c["communes"]) for c in kayes["cercles"]) == 7


def test_cartography_empty(client):
    assert client.get("/api/cartography").json() == {"regions": [], "totalMembers": 0}


class TestLegacyRegions:
    REGION = {"name": "Kayes", "cercles": [{"name": "Kita", "communes": ["Kita", "Sirakoro"]}]}

    def test_create(self, client, auth_headers):
        response = client.post("/api/regions", json=self.REGION, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["cercles"] == self.REGION["cercles"]

    def test_duplicate_name(self, client, auth_headers):
        client.post("/api/regions", json=self.REGION, headers=auth_headers)
        response = client.post("/api/regions", json=self.REGION, headers=auth_headers)
        assert response.status_code == 409

    def test_requires_session(self, client):
        assert client.post("/api/regions", json=self.REGION).status_code == 401
