from ..config import MAX_GRADE, MIN_GRADE
from .errors import ReviewValidationError

# CJK Unified Ideographs and Extension A
KANJI_RANGES = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
)


def is_kanji(char) -> bool:
    if not isinstance(char, str) or len(char) != 1:
        return False
    code = ord(char)
    return any(lo <= code <= hi for lo, hi in KANJI_RANGES)


def validate_kanji(value) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ReviewValidationError("Expected a single kanji character.", field="kanji")
    if not is_kanji(value):
        raise ReviewValidationError(f"{value!r} is not a kanji character.", field="kanji")
    return value


def validate_grade(value) -> int:
    # bool is an int subclass; True/False are not grades
    if isinstance(value, bool) or not isinstance(value, int):
        raise ReviewValidationError("Grade must be an integer.", field="grade")
    if not MIN_GRADE <= value <= MAX_GRADE:
        raise ReviewValidationError(
            f"Grade must be between {MIN_GRADE} and {MAX_GRADE}.", field="grade"
        )
    return value
