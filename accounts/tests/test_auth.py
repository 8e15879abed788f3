from unittest import mock

import jwt
import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

User = get_user_model()

GOOGLE_CLAIMS = {
    "sub": "google-sub-123",
    "email": "Learner@Example.com",
    "email_verified": True,
}


@pytest.fixture
def api():
    return APIClient()


def google_sign_in(api, claims=None, error=None):
    with mock.patch("accounts.views.verify_google_token") as verify:
        if error:
            verify.side_effect = error
        else:
            verify.return_value = claims or GOOGLE_CLAIMS
        return api.post(reverse("auth-google"), {"googleToken": "id-token"}, format="json")


@pytest.mark.django_db
class TestRegister:
    def test_register_creates_user_with_hashed_password(self, api):
        response = api.post(
            reverse("auth-register"),
            {"email": "Test@Example.com", "password": "password123"},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["message"] == "User registered successfully!"
        assert response.data["user"]["email"] == "test@example.com"
        user = User.objects.get(email="test@example.com")
        assert str(user.pk) == response.data["user"]["userId"]
        assert user.password.startswith("bcrypt_sha256$")
        assert user.check_password("password123")

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "test@example.com", "password": "pass"},
            {"email": "not-an-email", "password": "password123"},
            {"password": "password123"},
            {"email": "test@example.com"},
        ],
    )
    def test_register_rejects_invalid_input(self, api, payload):
        response = api.post(reverse("auth-register"), payload, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error"] == "Invalid input."
        assert User.objects.count() == 0

    def test_register_duplicate_email_conflicts(self, api):
        User.objects.create_user(email="test@example.com", password="password123")

        response = api.post(
            reverse("auth-register"),
            {"email": "TEST@example.com", "password": "password456"},
            format="json",
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data == {"error": "Email already exists."}


@pytest.mark.django_db
class TestLogin:
    def setup_method(self):
        self.user = User.objects.create_user(email="test@example.com", password="password123")

    def test_login_returns_verifiable_token(self, api, settings):
        response = api.post(
            reverse("auth-login"),
            {"email": "Test@Example.com", "password": "password123"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["message"] == "Login successful!"
        assert response.data["user"] == {"userId": str(self.user.pk), "email": "test@example.com"}
        decoded = jwt.decode(response.data["token"], settings.JWT_SECRET, algorithms=["HS256"])
        assert decoded["userId"] == str(self.user.pk)
        assert decoded["email"] == "test@example.com"
        assert decoded["exp"] - decoded["iat"] == 3600

    def test_login_wrong_password(self, api):
        response = api.post(
            reverse("auth-login"),
            {"email": "test@example.com", "password": "wrong-password"},
            format="json",
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {"error": "Invalid email or password."}

    def test_login_unknown_email(self, api):
        response = api.post(
            reverse("auth-login"),
            {"email": "nobody@example.com", "password": "password123"},
            format="json",
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_missing_password(self, api):
        response = api.post(reverse("auth-login"), {"email": "test@example.com"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {"error": "Email and password are required."}

    def test_login_without_jwt_secret_is_config_error(self, api, settings):
        settings.JWT_SECRET = ""

        response = api.post(
            reverse("auth-login"),
            {"email": "test@example.com", "password": "password123"},
            format="json",
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {"error": "Server configuration error."}


@pytest.mark.django_db
class TestGoogleSignIn:
    def test_creates_new_user(self, api):
        response = google_sign_in(api)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["message"] == "Google Sign-In successful!"
        assert "token" in response.data
        user = User.objects.get(email="learner@example.com")
        assert user.google_id == "google-sub-123"
        assert not user.has_usable_password()

    def test_links_google_id_to_existing_email(self, api):
        user = User.objects.create_user(email="learner@example.com", password="password123")

        response = google_sign_in(api)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["user"]["userId"] == str(user.pk)
        user.refresh_from_db()
        assert user.google_id == "google-sub-123"
        assert User.objects.count() == 1

    def test_finds_user_by_google_id(self, api):
        user = User.objects.create_user(
            email="renamed@example.com", password=None, google_id="google-sub-123"
        )

        response = google_sign_in(api)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["user"]["userId"] == str(user.pk)

    def test_rejects_email_linked_to_other_google_account(self, api):
        User.objects.create_user(
            email="learner@example.com", password=None, google_id="someone-else"
        )

        response = google_sign_in(api)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data == {"error": "Account association mismatch."}

    def test_rejects_unverified_email(self, api):
        response = google_sign_in(api, claims={**GOOGLE_CLAIMS, "email_verified": False})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.count() == 0

    def test_rejects_invalid_token(self, api):
        response = google_sign_in(api, error=ValueError("Token used too late"))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {"error": "Invalid or expired Google token."}

    def test_requires_token(self, api):
        response = api.post(reverse("auth-google"), {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {"error": "Google ID token is required."}

    def test_missing_client_id_is_config_error(self, api, settings):
        settings.GOOGLE_CLIENT_ID = ""

        response = google_sign_in(api)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {"error": "Server configuration error."}
