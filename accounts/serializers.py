from rest_framework import serializers

from .config import MIN_PASSWORD_LENGTH

class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=MIN_PASSWORD_LENGTH, trim_whitespace=False)

class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)

class GoogleSignInSerializer(serializers.Serializer):
    googleToken = serializers.CharField()

def user_payload(user):
    return {"userId": str(user.pk), "email": user.email}
