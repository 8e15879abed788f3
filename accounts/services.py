from django.db import IntegrityError, transaction
import structlog

from .models import User

logger = structlog.get_logger()


class AccountError(Exception):
    pass


class EmailAlreadyExists(AccountError):
    pass


class GoogleEmailNotVerified(AccountError):
    pass


class GoogleAccountMismatch(AccountError):
    pass


def register_user(email, password):
    email = email.lower()
    try:
        with transaction.atomic():
            user = User.objects.create_user(email=email, password=password)
    except IntegrityError as exc:
        raise EmailAlreadyExists(email) from exc
    logger.info("user_registered", user_id=str(user.pk), email=user.email)
    return user


def sign_in_with_google(claims):
    """
    Resolve the account for verified Google ID token claims.

    Lookup order is google_id, then email (linking the Google id when the
    account has none), then a fresh account.
    """
    google_id = claims.get("sub")
    email = claims.get("email")
    if not email or not claims.get("email_verified"):
        raise GoogleEmailNotVerified(email)

    user = User.objects.filter(google_id=google_id).first()
    if user:
        logger.info("google_sign_in_existing", user_id=str(user.pk))
        return user

    user = User.objects.get_by_email(email)
    if user:
        if not user.google_id:
            user.google_id = google_id
            user.save(update_fields=["google_id"])
            logger.info("google_id_linked", user_id=str(user.pk))
        elif user.google_id != google_id:
            logger.warning("google_account_mismatch", user_id=str(user.pk), email=email)
            raise GoogleAccountMismatch(email)
        return user

    user = User.objects.create_user(email=email, password=None, google_id=google_id)
    logger.info("google_user_created", user_id=str(user.pk), email=user.email)
    return user
