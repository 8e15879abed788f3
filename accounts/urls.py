from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import UserViewSet, google_sign_in, login, register

auth_urlpatterns = [
    path("register", register, name="auth-register"),
    path("login", login, name="auth-login"),
    path("google", google_sign_in, name="auth-google"),
]

router = SimpleRouter(trailing_slash=False)
router.register("users", UserViewSet, basename="user")

api_urlpatterns = router.urls
