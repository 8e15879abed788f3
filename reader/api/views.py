from django.http import HttpResponse
from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..services import processing
from .serializers import ProcessTextSerializer

base_logger = structlog.get_logger()


def index(request):
    return HttpResponse("Hello from the Japanese Processor Backend! 👋")


class ProcessTextView(views.APIView):
    def post(self, request):
        # Create a unique request_id
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = ProcessTextSerializer(data=request.data)
        if not s.is_valid() or not s.validated_data["text"]:
            return Response({"error": "No text provided."}, status=status.HTTP_400_BAD_REQUEST)
        text = s.validated_data["text"]

        try:
            processor = processing.get_text_processor()
        except processing.ReaderUnavailable as e:
            logger.error("text_processor_unavailable", reason=str(e))
            return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        sentences = processor.process(text)

        logger.info(
            "process_text_api_response",
            text_length=len(text),
            sentence_count=len(sentences),
            failed_sentences=sum(1 for x in sentences if "error" in x),
        )

        return Response({"processedSentences": sentences}, status=status.HTTP_200_OK)
