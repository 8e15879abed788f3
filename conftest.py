import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from accounts.models import User
from accounts.tokens import issue_token


@pytest.fixture(autouse=True)
def auth_settings(settings):
    settings.JWT_SECRET = "test-jwt-secret"
    settings.GOOGLE_CLIENT_ID = "test-client-id.apps.googleusercontent.com"


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(db):
    return User.objects.create_user(email="reader@example.com", password="password123")


@pytest.fixture
def token(user):
    return issue_token(user)


@pytest.fixture
def auth_client(token):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client
