"""Turn Japanese text into per-sentence reading aids.

Each sentence is tokenised, annotated with furigana and per-kanji dictionary
details, and translated to English. Failures of a collaborator are confined
to the sentence (or kanji) they happened on and reported inline.
"""

from dataclasses import dataclass
from functools import lru_cache

import jaconv
import structlog
from django.conf import settings

from srs.domain.validation import is_kanji

from ..config import DEFAULT_GEMINI_MODEL, LOOKUP_ERROR, SENTENCE_PATTERN, TRANSLATION_ERROR

logger = structlog.get_logger()


@dataclass(frozen=True)
class Token:
    surface: str
    reading: str | None  # hiragana, None when the dictionary has none


class ReaderUnavailable(Exception):
    """A collaborator needed for text processing is not configured."""


def split_sentences(text):
    pieces = SENTENCE_PATTERN.findall(text) or [text]
    return [p.strip() for p in pieces if p.strip()]


class TextProcessor:
    def __init__(self, segmenter, dictionary, translator):
        self.segmenter = segmenter
        self.dictionary = dictionary
        self.translator = translator

    def process(self, text):
        details_cache = {}
        return [self._process_sentence(s, details_cache) for s in split_sentences(text)]

    def _process_sentence(self, sentence, details_cache):
        result = {"original_sentence": sentence}
        try:
            result["segments"] = [self._segment(t, details_cache) for t in self.segmenter.tokenize(sentence)]
        except Exception as e:
            logger.exception("sentence_segmentation_failed", sentence=sentence)
            result["segments"] = [
                {"text": sentence, "is_kanji_token": False, "furigana": None, "kanji_details": None}
            ]
            result["error"] = str(e) or "Segment processing failed"
        result["translation"] = self._translate(sentence)
        return result

    def _segment(self, token, details_cache):
        kanji_chars = list(dict.fromkeys(c for c in token.surface if is_kanji(c)))
        furigana = None
        if kanji_chars and token.reading and token.reading != jaconv.kata2hira(token.surface):
            furigana = token.reading

        details = None
        if kanji_chars:
            details = {}
            for char in kanji_chars:
                if char not in details_cache:
                    details_cache[char] = self._lookup(char)
                details[char] = details_cache[char]

        return {
            "text": token.surface,
            "is_kanji_token": bool(kanji_chars),
            "furigana": furigana,
            "kanji_details": details,
        }

    def _lookup(self, char):
        try:
            found = self.dictionary.lookup(char)
        except Exception:
            logger.exception("kanji_lookup_failed", kanji=char)
            return dict(LOOKUP_ERROR)
        if found is None:
            logger.warning("kanji_not_found", kanji=char)
        return found

    def _translate(self, sentence):
        try:
            return self.translator.translate(sentence)
        except Exception:
            logger.exception("translation_failed", sentence=sentence)
            return TRANSLATION_ERROR


@lru_cache(maxsize=1)
def get_text_processor():
    """Build the process-wide TextProcessor on first use."""
    api_key = getattr(settings, "GEMINI_API_KEY", None)
    if not api_key:
        raise ReaderUnavailable("Internal Server Error: AI model not configured.")

    # imported here: loading them opens the MeCab and KANJIDIC2 dictionaries
    from .dictionary import JamdictKanjiDictionary
    from .segmenter import FugashiSegmenter
    from .translation import GeminiTranslator

    try:
        segmenter = FugashiSegmenter()
    except RuntimeError as e:
        logger.error("segmenter_init_failed", error=str(e))
        raise ReaderUnavailable("Internal Server Error: Language processor not ready.") from e

    model_name = getattr(settings, "GEMINI_MODEL", None) or DEFAULT_GEMINI_MODEL
    processor = TextProcessor(
        segmenter=segmenter,
        dictionary=JamdictKanjiDictionary(),
        translator=GeminiTranslator(api_key, model_name),
    )
    logger.info("text_processor_ready", model=model_name)
    return processor
