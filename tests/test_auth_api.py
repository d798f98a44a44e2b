from datetime import timedelta

from hostelmate.core.security import get_jwt_manager
from hostelmate.models.base.enums import UserRole

SIGNUP = {
    "name": "Mike Johnson",
    "email": "Mike@Hostel.com",
    "password": "password123",
    "roomNumber": "c310",
    "phoneNumber": "9876543213",
}


class TestSignup:
    def test_creates_resident_and_returns_token(self, client):
        response = client.post("/api/auth/signup", json=SIGNUP)

        assert response.status_code == 201
        body = response.json()
        assert body["token"]
        assert body["tokenType"] == "bearer"
        user = body["user"]
        assert user["email"] == "mike@hostel.com"
        assert user["role"] == "user"
        assert user["roomNumber"] == "C310"
        assert "passwordHash" not in user

    def test_token_works_for_protected_routes(self, client):
        token = client.post("/api/auth/signup", json=SIGNUP).json()["token"]

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["name"] == "Mike Johnson"

    def test_role_cannot_be_chosen(self, client):
        response = client.post("/api/auth/signup", json={**SIGNUP, "role": "admin"})

        assert response.status_code == 201
        assert response.json()["user"]["role"] == "user"

    def test_duplicate_email_is_409(self, client):
        client.post("/api/auth/signup", json=SIGNUP)

        response = client.post(
            "/api/auth/signup",
            json={**SIGNUP, "email": "mike@hostel.com", "name": "Other Mike"},
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "DUPLICATE_ENTRY"

    def test_invalid_fields_are_400(self, client):
        response = client.post(
            "/api/auth/signup",
            json={"name": "M", "email": "not-an-email", "password": "123", "roomNumber": "A1"},
        )

        assert response.status_code == 400
        fields = response.json()["error"]["details"]["field_errors"]
        assert {"name", "email", "password"} <= set(fields)


class TestLogin:
    def test_valid_credentials(self, client, resident):
        response = client.post(
            "/api/auth/login",
            json={"email": "JOHN@hostel.com", "password": "password123"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["id"] == resident.id

    def test_wrong_password_is_401(self, client, resident):
        response = client.post(
            "/api/auth/login",
            json={"email": "john@hostel.com", "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid email or password"

    def test_unknown_email_is_401_with_same_message(self, client):
        response = client.post(
            "/api/auth/login",
            json={"email": "nobody@hostel.com", "password": "password123"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid email or password"


class TestTokens:
    def test_expired_token_is_401(self, client, resident):
        token = get_jwt_manager().create_access_token(
            resident.id,
            expires_delta=timedelta(seconds=-1),
        )

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "TOKEN_EXPIRED"

    def test_token_for_deleted_account_is_401(self, client):
        token = get_jwt_manager().create_access_token("no-such-user")

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_role_is_read_from_the_account(self, client, resident, resident_headers, user_repository):
        user_repository.update(resident, {"role": UserRole.ADMIN})

        response = client.get("/api/complaints/stats", headers=resident_headers)

        assert response.status_code == 200


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
