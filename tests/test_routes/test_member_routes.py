# tests/test_routes/test_member_routes.py
import re
import uuid
from datetime import datetime, timezone

import pytest


class TestRegistration:
    def test_register_assigns_number_and_qr(self, client, registered_member):
        number = registered_member["membershipNumber"]
        year = datetime.now(timezone.utc).year

        assert number == f"ARM-{year}-00001"
        assert registered_member["qrCode"].startswith("data:image/png;base64,")
        assert registered_member["member"]["status"] == "pending"
        assert registered_member["member"]["role"] == "militant"

    def test_second_member_gets_next_number(self, client, registered_member, sign_up, member_payload):
        token = sign_up(email="second@arm-mali.org")["token"]
        response = client.post(
            "/api/members/register",
            json={**member_payload, "fullName": "Second"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 200
        assert response.json()["membershipNumber"].endswith("-00002")

    def test_register_twice_conflicts(self, client, auth_headers, registered_member, member_payload):
        response = client.post("/api/members/register", json=member_payload, headers=auth_headers)
        assert response.status_code == 409
        assert response.json() == {
            "error": "Member already registered",
            "membershipNumber": registered_member["membershipNumber"],
        }

    def test_register_requires_session(self, client, member_payload):
        response = client.post("/api/members/register", json=member_payload)
        assert response.status_code == 401

    def test_register_missing_field(self, client, auth_headers, member_payload):
        del member_payload["profession"]
        response = client.post("/api/members/register", json=member_payload, headers=auth_headers)
        assert response.status_code == 400


class TestCards:
    def test_public_card(self, client, registered_member):
        number = registered_member["membershipNumber"]
        response = client.get(f"/api/members/card/{number}")
        assert response.status_code == 200
        assert response.json() == {
            "membershipNumber": number,
            "fullName": "Awa Traoré",
            "status": "pending",
            "qrCode": registered_member["qrCode"],
            "commune": "Sebenikoro",
        }

    def test_unknown_card(self, client):
        response = client.get("/api/members/card/ARM-2000-99999")
        assert response.status_code == 404
        assert response.json() == {"error": "Member not found"}

    def test_download_card_png(self, client, registered_member):
        number = registered_member["membershipNumber"]
        response = client.get(f"/api/members/card/download/{number}")
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.headers["content-disposition"] == f'attachment; filename="card-{number}.png"'
        assert response.content.startswith(b"\x89PNG")

    def test_all_members_newest_first(self, client, registered_member, sign_up, member_payload):
        token = sign_up(email="second@arm-mali.org")["token"]
        client.post(
            "/api/members/register",
            json={**member_payload, "fullName": "Second"},
            headers={"Authorization": f"Bearer {token}"},
        )
        names = [m["fullName"] for m in client.get("/api/members/all-members").json()]
        assert names == ["Second", "Awa Traoré"]


class TestOwnProfile:
    def test_me_without_profile(self, client, auth_headers):
        response = client.get("/api/members/me", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Member profile not found"}

    def test_me_and_update(self, client, auth_headers, registered_member):
        me = client.get("/api/members/me", headers=auth_headers).json()
        assert me["membershipNumber"] == registered_member["membershipNumber"]

        response = client.put("/api/members/me", json={"profession": "Directrice"}, headers=auth_headers)
        assert response.status_code == 200
        updated = response.json()
        assert updated["profession"] == "Directrice"
        assert updated["fullName"] == "Awa Traoré"

    def test_update_rejects_null_name(self, client, auth_headers, registered_member):
        response = client.put("/api/members/me", json={"fullName": None}, headers=auth_headers)
        assert response.status_code == 400
        assert "full_name must not be null" in response.json()["details"][0]["msg"]

        me = client.get("/api/members/me", headers=auth_headers).json()
        assert me["fullName"] == "Awa Traoré"


class TestCotisations:
    def test_initiate_orange_money(self, client, auth_headers, registered_member):
        response = client.post(
            "/api/cotisations/initiate",
            json={"amount": 5000, "type": "annual", "paymentMethod": "orange_money"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        body = response.json()
        instructions = body["paymentInstructions"]
        assert body["cotisationId"]
        assert instructions["instructions"] == "Send 5000.00 XOF to A.R.M Party via Orange Money"
        assert instructions["details"]["merchantCode"] == "ARM001"
        assert re.fullmatch(r"TXN-\d+", instructions["details"]["reference"])

    def test_initiate_bank_transfer(self, client, auth_headers, registered_member):
        response = client.post(
            "/api/cotisations/initiate",
            json={"amount": "1000", "type": "monthly", "paymentMethod": "bank_transfer"},
            headers=auth_headers,
        )
        details = response.json()["paymentInstructions"]["details"]
        assert details["bankName"] == "Bank of Mali"
        assert details["swiftCode"] == "BMMLMLPA"
        assert details["amount"] == "1000.00 XOF"

    def test_initiate_unknown_method_is_rejected(self, client, auth_headers, registered_member):
        response = client.post(
            "/api/cotisations/initiate",
            json={"amount": 1000, "type": "monthly", "paymentMethod": "cash"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_initiate_without_profile(self, client, auth_headers):
        response = client.post(
            "/api/cotisations/initiate",
            json={"amount": 1000, "type": "monthly", "paymentMethod": "moov_money"},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_confirm_and_history(self, client, auth_headers, registered_member):
        first = client.post(
            "/api/cotisations/initiate",
            json={"amount": 1000, "type": "monthly", "paymentMethod": "sama_money"},
            headers=auth_headers,
        ).json()
        client.post(
            "/api/cotisations/initiate",
            json={"amount": 2000, "type": "monthly", "paymentMethod": "moov_money"},
            headers=auth_headers,
        )

        response = client.post(
            "/api/cotisations/confirm",
            json={"cotisationId": first["cotisationId"], "transactionId": "SAMA-123"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        confirmed = response.json()
        assert confirmed["status"] == "completed"
        assert confirmed["transactionId"] == "SAMA-123"
        assert confirmed["paidAt"]
        assert confirmed["amount"] == "1000.00"

        history = client.get("/api/cotisations/my-history", headers=auth_headers).json()
        assert [c["amount"] for c in history] == ["2000.00", "1000.00"]

    def test_confirm_unknown(self, client, auth_headers):
        response = client.post(
            "/api/cotisations/confirm",
            json={"cotisationId": str(uuid.uuid4()), "transactionId": "X"},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Cotisation not found"}


class TestAdminMembers:
    def test_requires_admin(self, client, auth_headers):
        assert client.get("/api/admin/members", headers=auth_headers).status_code == 403

    def test_list_with_filters(self, client, admin_headers, registered_member):
        assert len(client.get("/api/admin/members", headers=admin_headers).json()) == 1
        assert client.get("/api/admin/members?status=active", headers=admin_headers).json() == []
        assert len(client.get("/api/admin/members?region=Sebenikoro", headers=admin_headers).json()) == 1
        assert client.get("/api/admin/members?role=superviseur", headers=admin_headers).json() == []

    def test_change_role_and_status(self, client, admin_headers, registered_member):
        member_id = registered_member["member"]["id"]

        response = client.put(
            f"/api/admin/members/{member_id}/role", json={"role": "collecteur"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["role"] == "collecteur"

        response = client.put(
            f"/api/admin/members/{member_id}/status", json={"status": "active"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == "active"

    @pytest.mark.parametrize("path,body", [
        ("role", {"role": "militant"}),
        ("status", {"status": "suspended"}),
    ])
    def test_unknown_member(self, client, admin_headers, path, body):
        response = client.put(f"/api/admin/members/{uuid.uuid4()}/{path}", json=body, headers=admin_headers)
        assert response.status_code == 404

    def test_status_must_be_active_or_suspended(self, client, admin_headers, registered_member):
        member_id = registered_member["member"]["id"]
        response = client.put(
            f"/api/admin/members/{member_id}/status", json={"status": "pending"}, headers=admin_headers
        )
        assert response.status_code == 400

    def test_statistics(self, client, auth_headers, admin_headers, registered_member):
        cotisation = client.post(
            "/api/cotisations/initiate",
            json={"amount": 1500, "type": "monthly", "paymentMethod": "orange_money"},
            headers=auth_headers,
        ).json()
        client.post(
            "/api/cotisations/confirm",
            json={"cotisationId": cotisation["cotisationId"], "transactionId": "OM-1"},
            headers=auth_headers,
        )
        client.post(
            "/api/cotisations/initiate",
            json={"amount": 999, "type": "monthly", "paymentMethod": "orange_money"},
            headers=auth_headers,
        )

        stats = client.get("/api/admin/statistics", headers=admin_headers).json()
        assert stats["totalMembers"] == 1
        assert stats["pendingMembers"] == 1
        assert stats["activeMembers"] == 0
        assert stats["totalCotisations"] == "1500.00"
        assert stats["monthlyRevenue"] == "1500.00"
        assert stats["membersByRegion"] == {"Sebenikoro": 1}
        assert stats["membersByRole"] == {"militant": 1}
        assert stats["recentActivity"][0]["type"] == "member_signup"
        assert stats["recentActivity"][0]["name"] == "Awa Traoré"
