from collections.abc import Mapping

from rest_framework import views, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.utils import timezone
import structlog
import uuid
from ..domain.enums import GRADE_LABELS
from ..services.reviews import due_kanji, get_or_default, record_review
from ..utils.time import review_date
from .serializers import DueQuerySerializer, KanjiPathSerializer, ReviewInSerializer

base_logger = structlog.get_logger()


class ReviewView(views.APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, kanji):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        if not isinstance(request.data, Mapping):
            raise ValidationError({"non_field_errors": ["Expected a JSON object."]})

        s = ReviewInSerializer(data={"kanji": kanji, "grade": request.data.get("grade")})
        s.is_valid(raise_exception=True)

        kanji = s.validated_data["kanji"]
        grade = s.validated_data["grade"]

        review = record_review(request.user.pk, kanji, grade)

        logger.info(
            "review_api_response",
            user_id=str(request.user.pk),
            kanji=kanji,
            grade=grade,
            due_date=review.due_date.isoformat(),
            status=status.HTTP_200_OK,
        )

        return Response(
            {
                "message": "Review recorded.",
                "kanji": kanji,
                "grade": grade,
                "grade_label": GRADE_LABELS[grade],
                "due_date": review.due_date.isoformat(),
            },
            status=status.HTTP_200_OK,
        )

    def get(self, request, kanji):
        s = KanjiPathSerializer(data={"kanji": kanji})
        s.is_valid(raise_exception=True)

        state = get_or_default(request.user.pk, s.validated_data["kanji"])
        return Response(
            {
                "kanji": kanji,
                "interval": state.interval,
                "repetition": state.repetition,
                "ease_factor": state.ease_factor,
            }
        )


class DueKanjiView(views.APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)

        on_date = qs.validated_data.get("on") or review_date(timezone.now())
        reviews = due_kanji(request.user.pk, on_date=on_date, limit=qs.validated_data["limit"])
        results = [
            {
                "kanji": r.kanji_character,
                "due_date": r.due_date.isoformat(),
                "interval": r.interval,
                "repetition": r.repetition,
            }
            for r in reviews
        ]

        logger.info(
            "due_kanji_api_response",
            user_id=str(request.user.pk),
            on=on_date.isoformat(),
            kanji_count=len(results),
        )

        return Response(
            {
                "on": on_date.isoformat(),
                "kanji": results,
            }
        )
