from django.utils import timezone
import structlog
from ..config import DUE_LIST_LIMIT
from ..data.repos import get_state, list_due, upsert_review
from ..domain.errors import StorageError
from ..domain.logic import DEFAULT_STATE, schedule_next
from ..domain.validation import validate_grade, validate_kanji
from ..utils.time import review_date, to_local_iso

logger = structlog.get_logger()

def get_or_default(user_id, kanji_character):
    validate_kanji(kanji_character)
    state = get_state(user_id, kanji_character)
    return state if state is not None else DEFAULT_STATE

def record_review(user_id, kanji_character, grade, now=None):
    # Reject bad input before touching the store
    validate_kanji(kanji_character)
    validate_grade(grade)
    now = now or timezone.now()

    logger.info("review_received",
        user_id=str(user_id),
        kanji=kanji_character,
        grade=grade,
    )

    try:
        review, created = upsert_review(
            user_id,
            kanji_character,
            lambda state: schedule_next(state, grade),
            reviewed_at=now,
        )
    except StorageError:
        logger.exception("review_storage_failed",
            user_id=str(user_id),
            kanji=kanji_character,
            grade=grade,
        )
        raise

    logger.info("review_scheduled",
        user_id=str(user_id),
        kanji=kanji_character,
        created=created,
        interval_days=review.interval,
        repetition=review.repetition,
        ease_factor=round(review.ease_factor, 4),
        due_date=review.due_date.isoformat(),
        reviewed_at=to_local_iso(now),
    )

    return review

def due_kanji(user_id, on_date=None, limit=DUE_LIST_LIMIT):
    on_date = on_date or review_date(timezone.now())
    return list_due(user_id, on_date, limit)
