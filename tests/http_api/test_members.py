# tests/http_api/test_members.py
from fastapi import status

REGISTER = "/api/account/register"


def _register(client, email, display_name):
    response = client.post(
        REGISTER,
        json={"email": email, "displayName": display_name, "password": "Secret1"},
    )
    assert response.status_code == status.HTTP_200_OK
    return response.json()


class TestMembersEndpoints:

    def test_empty_store_lists_nobody(self, client):
        response = client.get("/api/members")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_members(self, client):
        """
        Scenario: Two members registered.
        Expected: Both listed by display name, without credential fields.
        """
        _register(client, "bob@x.com", "Bob")
        _register(client, "al@x.com", "Al")

        response = client.get("/api/members")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [m["displayName"] for m in data] == ["Al", "Bob"]
        for member in data:
            assert set(member) == {"id", "displayName", "email", "createdAt"}

    def test_get_member_by_id(self, client, alice):
        registered = client.post(REGISTER, json=alice).json()

        response = client.get(f"/api/members/{registered['id']}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == registered["id"]
        assert data["email"] == "a@b.com"
        assert "passwordHash" not in data
        assert "passwordSalt" not in data
        assert "token" not in data

    def test_get_unknown_member(self, client):
        response = client.get("/api/members/does-not-exist")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"]["code"] == "member_not_found"
