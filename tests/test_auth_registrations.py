# =============================================================================
# tests/test_auth_registrations.py - Signup / Account Endpoint Tests
# =============================================================================
# Run with: poetry run pytest tests/test_auth_registrations.py -v
# =============================================================================

from types import SimpleNamespace
from uuid import UUID

SIGNUP_BODY = {
    "user": {
        "email": "jane@example.com",
        "password": "correct-horse",
        "password_confirmation": "correct-horse",
        "metadata": {"display_name": "Jane"},
    }
}


class TestSignup:
    """Tests for POST /api/v1/signup."""

    def test_signup_with_session(self, client, mock_supabase, auth_response, supabase_user):
        mock_supabase.sign_up.return_value = auth_response

        response = client.post("/api/v1/signup", json=SIGNUP_BODY)

        assert response.status_code == 201
        assert response.headers["authorization"] == "Bearer access-token-123"
        assert UUID(response.json()["id"]) == UUID(supabase_user.id)
        mock_supabase.sign_up.assert_called_once_with(
            "jane@example.com", "correct-horse", {"display_name": "Jane"}
        )

    def test_signup_awaiting_confirmation(self, client, mock_supabase, supabase_user):
        mock_supabase.sign_up.return_value = SimpleNamespace(user=supabase_user, session=None)

        response = client.post("/api/v1/signup", json=SIGNUP_BODY)

        assert response.status_code == 201
        assert "authorization" not in response.headers
        assert response.json()["email"] == "jane@example.com"

    def test_missing_user_param(self, client, mock_supabase):
        response = client.post("/api/v1/signup", json={"email": "jane@example.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "Bad request"}
        mock_supabase.sign_up.assert_not_called()

    def test_password_confirmation_mismatch(self, client, mock_supabase):
        body = {"user": {**SIGNUP_BODY["user"], "password_confirmation": "different"}}

        response = client.post("/api/v1/signup", json=body)

        assert response.status_code == 422
        mock_supabase.sign_up.assert_not_called()

    def test_short_password(self, client, mock_supabase):
        body = {"user": {"email": "jane@example.com", "password": "123"}}

        response = client.post("/api/v1/signup", json=body)

        assert response.status_code == 422

    def test_duplicate_email(self, client, mock_supabase, auth_api_error):
        mock_supabase.sign_up.side_effect = auth_api_error("User already registered", 422)

        response = client.post("/api/v1/signup", json=SIGNUP_BODY)

        assert response.status_code == 422
        assert response.json() == {"detail": "User already registered"}


class TestUpdateAccount:
    """Tests for PATCH/PUT /api/v1/signup."""

    def test_update_email(self, client, mock_supabase, auth_headers, auth_response, supabase_user):
        mock_supabase.sign_in.return_value = auth_response
        mock_supabase.update_user.return_value = SimpleNamespace(
            id=supabase_user.id,
            email="new@example.com",
            created_at=supabase_user.created_at,
            user_metadata={},
        )

        response = client.patch(
            "/api/v1/signup",
            json={"user": {"current_password": "correct-horse", "email": "new@example.com"}},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["email"] == "new@example.com"
        mock_supabase.sign_in.assert_called_once_with("jane@example.com", "correct-horse")
        mock_supabase.update_user.assert_called_once_with(
            supabase_user.id, {"email": "new@example.com"}
        )

    def test_password_check_session_is_revoked(
            self, client, mock_supabase, auth_headers, auth_response, supabase_user):
        mock_supabase.sign_in.return_value = auth_response
        mock_supabase.update_user.return_value = supabase_user

        response = client.patch(
            "/api/v1/signup",
            json={"user": {"current_password": "correct-horse", "email": "new@example.com"}},
            headers=auth_headers,
        )

        assert response.status_code == 200
        mock_supabase.sign_out.assert_called_once_with("access-token-123")

    def test_revocation_failure_stops_update(
            self, client, mock_supabase, auth_headers, auth_response, auth_api_error):
        mock_supabase.sign_in.return_value = auth_response
        mock_supabase.sign_out.side_effect = auth_api_error("Session not found", 404)

        response = client.patch(
            "/api/v1/signup",
            json={"user": {"current_password": "correct-horse", "email": "new@example.com"}},
            headers=auth_headers,
        )

        assert response.status_code == 404
        mock_supabase.update_user.assert_not_called()

    def test_put_changes_password(self, client, mock_supabase, auth_headers, auth_response, supabase_user):
        mock_supabase.sign_in.return_value = auth_response
        mock_supabase.update_user.return_value = supabase_user

        response = client.put(
            "/api/v1/signup",
            json={"user": {
                "current_password": "correct-horse",
                "password": "battery-staple",
                "password_confirmation": "battery-staple",
            }},
            headers=auth_headers,
        )

        assert response.status_code == 200
        mock_supabase.update_user.assert_called_once_with(
            supabase_user.id, {"password": "battery-staple"}
        )

    def test_nothing_to_change(self, client, mock_supabase, auth_headers, auth_response):
        mock_supabase.sign_in.return_value = auth_response

        response = client.patch(
            "/api/v1/signup",
            json={"user": {"current_password": "correct-horse"}},
            headers=auth_headers,
        )

        assert response.status_code == 200
        mock_supabase.update_user.assert_not_called()

    def test_wrong_current_password(self, client, mock_supabase, auth_headers, auth_api_error):
        mock_supabase.sign_in.side_effect = auth_api_error("Invalid login credentials", 400)

        response = client.patch(
            "/api/v1/signup",
            json={"user": {"current_password": "nope", "email": "new@example.com"}},
            headers=auth_headers,
        )

        assert response.status_code == 422
        assert response.json() == {"detail": "Current password is invalid"}
        mock_supabase.update_user.assert_not_called()

    def test_missing_current_password(self, client, mock_supabase, auth_headers):
        response = client.patch(
            "/api/v1/signup",
            json={"user": {"email": "new@example.com"}},
            headers=auth_headers,
        )

        assert response.status_code == 422

    def test_requires_token(self, client, mock_supabase):
        response = client.patch(
            "/api/v1/signup",
            json={"user": {"current_password": "correct-horse"}},
        )

        assert response.status_code in (401, 403)
        mock_supabase.sign_in.assert_not_called()


class TestDeleteAccount:
    """Tests for DELETE /api/v1/signup."""

    def test_delete_account(self, client, mock_supabase, auth_headers, supabase_user):
        response = client.delete("/api/v1/signup", headers=auth_headers)

        assert response.status_code == 204
        mock_supabase.delete_user.assert_called_once_with(supabase_user.id)

    def test_expired_token(self, client, mock_supabase, make_token):
        token = make_token(expires_in=-60)

        response = client.delete("/api/v1/signup", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json() == {"detail": "Token has expired"}
        assert response.headers["www-authenticate"] == "Bearer"
        mock_supabase.delete_user.assert_not_called()
