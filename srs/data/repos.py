from django.db import transaction, DatabaseError, IntegrityError
from .models import KanjiReview
from ..domain.errors import StorageError
from ..domain.logic import DEFAULT_STATE
from ..utils.time import due_date_for

def get_state(user_id, kanji_character):
    """
    Stored scheduling state for (user, kanji), or None if never reviewed.
    """
    try:
        review = KanjiReview.objects.filter(
            user_id=user_id, kanji_character=kanji_character
        ).first()
    except DatabaseError as exc:
        raise StorageError("Could not read review state.") from exc
    return review.state if review else None

def list_due(user_id, on_date, limit):
    try:
        return list(
            KanjiReview.objects.filter(user_id=user_id, due_date__lte=on_date)
            .order_by("due_date", "kanji_character")[:limit]
        )
    except DatabaseError as exc:
        raise StorageError("Could not read due reviews.") from exc

def _lock(user_id, kanji_character):
    return (KanjiReview.objects
            .select_for_update()
            .filter(user_id=user_id, kanji_character=kanji_character)
            .first())

def _apply(review, state, reviewed_at):
    review.interval = state.interval
    review.repetition = state.repetition
    review.ease_factor = state.ease_factor
    review.due_date = due_date_for(reviewed_at, state.interval)
    review.last_reviewed_at = reviewed_at

def _insert_first(user_id, kanji_character, advance, reviewed_at):
    """
    Insert the row for a first-ever review. Returns None when a concurrent
    first review for the same pair committed before us.
    """
    review = KanjiReview(user_id=user_id, kanji_character=kanji_character)
    _apply(review, advance(DEFAULT_STATE), reviewed_at)
    try:
        with transaction.atomic():
            review.save(force_insert=True)
    except IntegrityError:
        if KanjiReview.objects.filter(
            user_id=user_id, kanji_character=kanji_character
        ).exists():
            return None
        raise
    return review

def upsert_review(user_id, kanji_character, advance, reviewed_at):
    """
    Atomic read-modify-write of the single row for (user, kanji).

    `advance` maps the current SchedulingState to the next one. The row is
    locked for the whole transaction, so writers of the same pair are
    serialised while other pairs proceed in parallel. Returns
    (review, created).
    """
    try:
        with transaction.atomic():
            review = _lock(user_id, kanji_character)
            if review is None:
                inserted = _insert_first(user_id, kanji_character, advance, reviewed_at)
                if inserted is not None:
                    return inserted, True
                # Lost the insert race; build on the winner's state
                review = _lock(user_id, kanji_character)
            _apply(review, advance(review.state), reviewed_at)
            review.save(update_fields=[
                "interval", "repetition", "ease_factor", "due_date", "last_reviewed_at",
            ])
            return review, False
    except DatabaseError as exc:
        raise StorageError("Could not record review.") from exc
