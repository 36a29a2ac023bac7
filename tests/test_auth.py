"""
Tests de la autenticación Basic.
"""

import pytest

from app.auth import (
    MISSING_CREDENTIALS,
    USER_NOT_FOUND,
    WRONG_PASSWORD,
    decode_basic_credentials,
)
from app.exceptions import AuthenticationError
from tests.conftest import basic_auth


class TestAuth:
    """Rutas protegidas con Basic Auth."""

    def test_health_no_auth_required(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_missing_header_returns_401(self, client, user):
        response = client.get("/api/users")
        assert response.status_code == 401
        assert response.json() == {"message": MISSING_CREDENTIALS}
        assert response.headers["WWW-Authenticate"] == "Basic"

    def test_non_basic_scheme_returns_401(self, client, user):
        response = client.get("/api/users", headers={"Authorization": "Bearer abc"})
        assert response.status_code == 401
        assert response.json()["message"] == MISSING_CREDENTIALS

    def test_undecodable_credentials_return_401(self, client, user):
        response = client.get("/api/users", headers={"Authorization": "Basic %%%not-base64%%%"})
        assert response.status_code == 401
        assert response.json()["message"] == MISSING_CREDENTIALS

    def test_unknown_email_returns_401(self, client, user):
        response = client.get("/api/users", headers=basic_auth("nobody@x.com", "secret"))
        assert response.status_code == 401
        assert response.json()["message"] == USER_NOT_FOUND

    def test_wrong_password_returns_401(self, client, user):
        response = client.get("/api/users", headers=basic_auth(user.email, "wrong"))
        assert response.status_code == 401
        assert response.json()["message"] == WRONG_PASSWORD

    def test_valid_credentials_pass(self, client, auth_headers):
        response = client.get("/api/users", headers=auth_headers)
        assert response.status_code == 200

    def test_inactive_user_can_still_authenticate(self, client, user, auth_headers, db_session):
        user.active_user = False
        db_session.commit()
        response = client.get("/api/client", headers=auth_headers)
        assert response.status_code == 200

    def test_sign_up_does_not_require_auth(self, client):
        response = client.post(
            "/api/users",
            json={"name": "A", "email": "a@x.com", "password": "p"},
        )
        assert response.status_code == 201

    def test_sign_up_email_is_kept_as_sent_and_authenticates(self, client):
        email = "Ana@Example.COM"
        response = client.post("/api/users", json={"name": "Ana", "email": email, "password": "p"})
        assert response.status_code == 201
        assert response.json()["email"] == email

        response = client.get("/api/users", headers=basic_auth(email, "p"))
        assert response.status_code == 200
        assert [u["email"] for u in response.json()] == [email]

    @pytest.mark.parametrize("path", ["/api/users/1", "/api/client", "/api/client/1", "/api/sales", "/api/sales/1"])
    def test_every_other_route_is_protected(self, client, path):
        response = client.get(path)
        assert response.status_code == 401


class TestDecodeBasicCredentials:

    def test_splits_on_first_colon(self):
        header = basic_auth("a@x.com", "pa:ss:word")["Authorization"]
        assert decode_basic_credentials(header) == ("a@x.com", "pa:ss:word")

    def test_without_colon_password_is_empty(self):
        # "YUB4LmNvbQ==" es base64 de "a@x.com"
        assert decode_basic_credentials("Basic YUB4LmNvbQ==") == ("a@x.com", "")

    @pytest.mark.parametrize("header", [None, "", "basic YUB4LmNvbQ==", "Token x"])
    def test_rejects_missing_or_other_scheme(self, header):
        with pytest.raises(AuthenticationError) as exc_info:
            decode_basic_credentials(header)
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == MISSING_CREDENTIALS
