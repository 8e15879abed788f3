from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler
import structlog

from srs.domain.errors import ReviewValidationError, StorageError

logger = structlog.get_logger()


def api_exception_handler(exc, context):
    """
    Uniform `{"error": ...}` bodies. Rejected input is 400, a review store
    that could not complete is 503.
    """
    if isinstance(exc, ReviewValidationError):
        return Response(
            {"error": exc.message, "field": exc.field}, status=status.HTTP_400_BAD_REQUEST
        )
    if isinstance(exc, StorageError):
        logger.error("storage_error_response", error=str(exc), view=type(context.get("view")).__name__)
        return Response(
            {"error": "Storage unavailable, please retry."},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None
    if isinstance(exc, ValidationError):
        response.data = {"error": "Invalid input.", "details": response.data}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"error": response.data["detail"]}
    return response
