from django.conf import settings
from django.contrib.auth import authenticate
from django.core.exceptions import ImproperlyConfigured
from rest_framework import status, viewsets
from rest_framework.decorators import api_view, action
from rest_framework.response import Response
import structlog

from .google import verify_google_token
from .serializers import GoogleSignInSerializer, LoginSerializer, RegisterSerializer, user_payload
from .services import (
    EmailAlreadyExists,
    GoogleAccountMismatch,
    GoogleEmailNotVerified,
    register_user,
    sign_in_with_google,
)
from .tokens import issue_token

logger = structlog.get_logger()

CONFIG_ERROR = {"error": "Server configuration error."}


@api_view(["POST"])
def register(request):
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        user = register_user(s.validated_data["email"], s.validated_data["password"])
    except EmailAlreadyExists:
        return Response({"error": "Email already exists."}, status=status.HTTP_409_CONFLICT)
    return Response(
        {"message": "User registered successfully!", "user": user_payload(user)},
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
def login(request):
    s = LoginSerializer(data=request.data)
    if not s.is_valid():
        return Response(
            {"error": "Email and password are required."}, status=status.HTTP_400_BAD_REQUEST
        )
    user = authenticate(
        request,
        email=s.validated_data["email"].lower(),
        password=s.validated_data["password"],
    )
    if user is None:
        return Response(
            {"error": "Invalid email or password."}, status=status.HTTP_401_UNAUTHORIZED
        )
    try:
        token = issue_token(user)
    except ImproperlyConfigured:
        logger.error("jwt_secret_missing")
        return Response(CONFIG_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.info("user_logged_in", user_id=str(user.pk))
    return Response(
        {"message": "Login successful!", "token": token, "user": user_payload(user)},
        status=status.HTTP_200_OK,
    )


@api_view(["POST"])
def google_sign_in(request):
    s = GoogleSignInSerializer(data=request.data)
    if not s.is_valid():
        return Response(
            {"error": "Google ID token is required."}, status=status.HTTP_400_BAD_REQUEST
        )
    if not settings.GOOGLE_CLIENT_ID or not settings.JWT_SECRET:
        logger.error("google_sign_in_not_configured")
        return Response(CONFIG_ERROR, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        claims = verify_google_token(s.validated_data["googleToken"], settings.GOOGLE_CLIENT_ID)
    except ValueError as e:
        logger.info("google_token_rejected", reason=str(e))
        return Response(
            {"error": "Invalid or expired Google token."}, status=status.HTTP_401_UNAUTHORIZED
        )

    try:
        user = sign_in_with_google(claims)
    except GoogleEmailNotVerified:
        return Response(
            {"error": "Google account email not verified."}, status=status.HTTP_400_BAD_REQUEST
        )
    except GoogleAccountMismatch:
        return Response(
            {"error": "Account association mismatch."}, status=status.HTTP_403_FORBIDDEN
        )

    return Response(
        {
            "message": "Google Sign-In successful!",
            "token": issue_token(user),
            "user": user_payload(user),
        },
        status=status.HTTP_200_OK,
    )


class UserViewSet(viewsets.ViewSet):
    """
    ViewSet for user-related operations.
    """

    @action(detail=False, methods=["get"])
    def me(self, request):
        """
        Returns the id and email of the logged-in user.
        """
        if request.user.is_authenticated:
            return Response(user_payload(request.user), status=status.HTTP_200_OK)
        else:
            return Response(
                {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
            )
