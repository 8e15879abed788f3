from rest_framework import serializers
from ..config import DUE_LIST_LIMIT, MAX_GRADE, MIN_GRADE
from ..domain.errors import ReviewValidationError
from ..domain.validation import validate_kanji

def kanji_validator(value):
    try:
        validate_kanji(value)
    except ReviewValidationError as exc:
        raise serializers.ValidationError(exc.message)

class ReviewInSerializer(serializers.Serializer):
    kanji = serializers.CharField(max_length=1, validators=[kanji_validator])
    grade = serializers.IntegerField(min_value=MIN_GRADE, max_value=MAX_GRADE)

class KanjiPathSerializer(serializers.Serializer):
    kanji = serializers.CharField(max_length=1, validators=[kanji_validator])

class DueQuerySerializer(serializers.Serializer):
    on = serializers.DateField(required=False)  # ISO-8601 date
    limit = serializers.IntegerField(min_value=1, max_value=200, default=DUE_LIST_LIMIT)
