import logging

import jwt
from django.core.exceptions import ValidationError
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed

from accounts.models import User
from accounts.tokens import decode_token

logger = logging.getLogger(__name__)


class JWTAuthentication(BaseAuthentication):
    """Authenticate API requests from an `Authorization: Bearer <jwt>` header."""

    keyword = "Bearer"

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth) != 2:
            raise AuthenticationFailed("Invalid authorization header.")

        try:
            payload = decode_token(auth[1].decode())
        except UnicodeError:
            raise AuthenticationFailed("Invalid authorization header.")
        except jwt.ExpiredSignatureError:
            raise AuthenticationFailed("Token has expired.")
        except jwt.InvalidTokenError:
            raise AuthenticationFailed("Invalid token.")

        try:
            user = User.objects.filter(pk=payload.get("userId"), is_active=True).first()
        except (ValidationError, ValueError):
            user = None
        if user is None:
            raise AuthenticationFailed("User not found or invalid credentials.")

        logger.debug("Token login for user: %s", user.email)
        return user, payload

    def authenticate_header(self, request):
        return self.keyword
