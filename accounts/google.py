from google.auth.transport import requests as google_requests
from google.oauth2 import id_token


def verify_google_token(token, client_id):
    """
    Verify a Google ID token and return its claims.

    Raises ValueError for a malformed, expired, or wrongly signed token, or
    one issued for a different audience.
    """
    return id_token.verify_oauth2_token(token, google_requests.Request(), client_id)
