"""Tests for the auth endpoints and the bearer dependency."""
from datetime import datetime, timedelta, timezone

from jose import jwt

from energy_harmony.core.config import JWT_SECRET

USER = {"name": "Ada", "email": "ada@example.com", "password": "hunter22"}


class TestAuthEndpoints:
    def test_health_check(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "status" in response.json()

    def test_register_returns_token_and_user(self, client):
        response = client.post("/api/auth/register", json=USER)
        assert response.status_code == 201
        data = response.json()
        assert data["token"]
        assert data["user"]["name"] == "Ada"
        assert data["user"]["email"] == "ada@example.com"
        assert "password" not in data["user"]

    def test_register_duplicate_email(self, client):
        client.post("/api/auth/register", json=USER)
        response = client.post("/api/auth/register", json=USER)
        assert response.status_code == 400
        assert response.json() == {"message": "User already exists"}

    def test_register_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "x@example.com"})
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation error"
        assert set(body["errors"]) == {"name", "password"}

    def test_login_success(self, client):
        client.post("/api/auth/register", json=USER)
        response = client.post(
            "/api/auth/login",
            json={"email": USER["email"], "password": USER["password"]},
        )
        assert response.status_code == 200
        assert response.json()["user"]["email"] == USER["email"]

    def test_login_wrong_password(self, client):
        client.post("/api/auth/register", json=USER)
        response = client.post(
            "/api/auth/login",
            json={"email": USER["email"], "password": "wrong"},
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid credentials"}

    def test_login_unknown_email(self, client):
        response = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "whatever"},
        )
        assert response.status_code == 400


class TestBearerToken:
    def test_token_grants_access(self, client):
        token = client.post("/api/auth/register", json=USER).json()["token"]
        response = client.get("/api/devices", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_missing_header(self, client):
        response = client.get("/api/summary")
        assert response.status_code == 401
        assert response.json() == {"message": "Authorization header missing"}

    def test_garbage_token(self, client):
        response = client.get("/api/summary", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid token"}

    def test_expired_token(self, client):
        token = jwt.encode(
            {"sub": "1", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            JWT_SECRET,
            algorithm="HS256",
        )
        response = client.get("/api/summary", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_signed_with_other_secret(self, client):
        token = jwt.encode({"sub": "1"}, "someone-else", algorithm="HS256")
        response = client.get("/api/budget", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
