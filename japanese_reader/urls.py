from django.urls import include, path

from accounts.urls import api_urlpatterns as account_api_urlpatterns
from accounts.urls import auth_urlpatterns
from reader.api.views import index

urlpatterns = [
    path("", index, name="index"),
    path("auth/", include(auth_urlpatterns)),
    path("api/", include(account_api_urlpatterns)),
    path("api/srs/", include("srs.api.urls")),
    path("api/", include("reader.api.urls")),
]
