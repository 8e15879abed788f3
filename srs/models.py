from .data.models import KanjiReview  # noqa: F401
