from django.urls import path
from .views import ReviewView, DueKanjiView

urlpatterns = [
    path("review/<str:kanji>", ReviewView.as_view(), name="srs-review"),
    path("due", DueKanjiView.as_view(), name="srs-due"),
]
