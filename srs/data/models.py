from django.conf import settings
from django.db import models
from django.db.models import Q

from ..config import DEFAULT_EASE_FACTOR, DEFAULT_INTERVAL, DEFAULT_REPETITION, MIN_EASE_FACTOR
from ..domain.logic import SchedulingState

class KanjiReview(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="kanji_reviews"
    )
    kanji_character = models.CharField(max_length=1)
    interval = models.FloatField(default=DEFAULT_INTERVAL)  # days
    repetition = models.PositiveIntegerField(default=DEFAULT_REPETITION)
    ease_factor = models.FloatField(default=DEFAULT_EASE_FACTOR)
    due_date = models.DateField()
    last_reviewed_at = models.DateTimeField()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["user", "kanji_character"], name="srs_unique_user_kanji"
            ),
            models.CheckConstraint(
                condition=Q(ease_factor__gte=MIN_EASE_FACTOR), name="srs_ease_factor_floor"
            ),
        ]
        indexes = [
            models.Index(fields=["user", "due_date"], name="srs_user_due_idx"),
        ]

    def __str__(self):
        return f"{self.kanji_character} ({self.user_id}) due {self.due_date}"

    @property
    def state(self):
        return SchedulingState(
            interval=self.interval,
            repetition=self.repetition,
            ease_factor=self.ease_factor,
        )
