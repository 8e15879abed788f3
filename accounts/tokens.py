import datetime

import jwt
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .config import DEFAULT_JWT_EXPIRES_SECONDS, JWT_ALGORITHM


def _secret():
    secret = getattr(settings, "JWT_SECRET", None)
    if not secret:
        raise ImproperlyConfigured("JWT_SECRET environment variable is not set.")
    return secret


def issue_token(user, now=None):
    """Sign a session token carrying the user's id and email."""
    now = now or datetime.datetime.now(datetime.timezone.utc)
    lifetime = getattr(settings, "JWT_EXPIRES_SECONDS", DEFAULT_JWT_EXPIRES_SECONDS)
    payload = {
        "userId": str(user.pk),
        "email": user.email,
        "iat": now,
        "exp": now + datetime.timedelta(seconds=lifetime),
    }
    return jwt.encode(payload, _secret(), algorithm=JWT_ALGORITHM)


def decode_token(token):
    # Raises jwt.InvalidTokenError (ExpiredSignatureError included)
    return jwt.decode(token, _secret(), algorithms=[JWT_ALGORITHM])
