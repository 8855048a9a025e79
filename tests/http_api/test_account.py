# tests/http_api/test_account.py
import pytest
from fastapi import status

REGISTER = "/api/account/register"
LOGIN = "/api/account/login"


class TestRegisterEndpoint:

    def test_register_success(self, client, alice):
        """
        Scenario: Valid registration body.
        Expected: 200 with the member projection and a token, camelCase keys.
        """
        response = client.post(REGISTER, json=alice)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert set(data) == {"id", "displayName", "email", "token"}
        assert data["id"]
        assert data["displayName"] == "Alice"
        assert data["email"] == "a@b.com"
        assert data["token"]

    def test_duplicate_email_any_case(self, client, alice):
        client.post(REGISTER, json=alice)

        response = client.post(REGISTER, json={**alice, "email": "A@B.COM"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "duplicate_email"

    @pytest.mark.parametrize("field", ["email", "displayName", "password"])
    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_field_is_rejected(self, client, alice, field, blank):
        """
        Scenario: A required field is present but empty.
        Expected: 400 validation_error naming the field; nothing persisted.
        """
        response = client.post(REGISTER, json={**alice, field: blank})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        error = response.json()["error"]
        assert error["code"] == "validation_error"
        assert [d["field"] for d in error["details"]] == [field]
        assert client.get("/api/members").json() == []

    def test_missing_fields_are_reported_individually(self, client):
        response = client.post(REGISTER, json={"email": "a@b.com"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {d["field"] for d in response.json()["error"]["details"]}
        assert fields == {"displayName", "password"}

    def test_wrong_types_are_rejected(self, client, alice):
        response = client.post(REGISTER, json={**alice, "password": 12345})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "validation_error"

    def test_unknown_fields_are_rejected(self, client, alice):
        response = client.post(REGISTER, json={**alice, "isAdmin": True})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_display_name_is_trimmed(self, client, alice):
        response = client.post(REGISTER, json={**alice, "displayName": "  Alice  "})

        assert response.json()["displayName"] == "Alice"


class TestLoginEndpoint:

    def test_login_success_is_case_insensitive(self, client, alice):
        registered = client.post(REGISTER, json=alice).json()

        response = client.post(LOGIN, json={"email": "A@B.COM", "password": "Secret1"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == registered["id"]
        assert response.json()["token"]

    def test_wrong_password(self, client, alice):
        client.post(REGISTER, json=alice)

        response = client.post(LOGIN, json={"email": "a@b.com", "password": "wrong"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"]["code"] == "invalid_credentials"

    def test_unknown_email_is_indistinguishable_from_wrong_password(self, client, alice):
        client.post(REGISTER, json=alice)

        wrong_password = client.post(LOGIN, json={"email": "a@b.com", "password": "nope"})
        unknown_email = client.post(
            LOGIN, json={"email": "nonexistent@x.com", "password": "nope"}
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()

    def test_blank_password_is_a_validation_error(self, client):
        response = client.post(LOGIN, json={"email": "a@b.com", "password": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "validation_error"


def test_end_to_end_scenario(client, alice):
    """
    register -> duplicate register -> login (other case) -> wrong password.
    """
    first = client.post(REGISTER, json=alice)
    assert first.status_code == 200
    member_id = first.json()["id"]
    assert member_id and first.json()["token"]

    again = client.post(REGISTER, json=alice)
    assert again.status_code == 400
    assert again.json()["error"]["code"] == "duplicate_email"

    login = client.post(LOGIN, json={"email": "A@B.COM", "password": "Secret1"})
    assert login.status_code == 200
    assert login.json()["id"] == member_id

    wrong = client.post(LOGIN, json={"email": "a@b.com", "password": "wrong"})
    assert wrong.status_code == 401
