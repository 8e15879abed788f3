import re

import google.generativeai as genai

from ..config import TRANSLATION_PROMPT

_LABEL = re.compile(r"^\s*English Translation\s*:\s*", re.IGNORECASE)
_QUOTES = "\"'“”「」『』"


def clean_translation(text):
    """Strip the label and wrapping quotes a model sometimes adds."""
    cleaned = _LABEL.sub("", (text or "").strip())
    while len(cleaned) >= 2 and cleaned[0] in _QUOTES and cleaned[-1] in _QUOTES:
        cleaned = cleaned[1:-1].strip()
    return cleaned


class GeminiTranslator:
    """Sentence translation through a Gemini generative model."""

    def __init__(self, api_key, model_name):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self._model = genai.GenerativeModel(model_name)

    def translate(self, sentence):
        response = self._model.generate_content(TRANSLATION_PROMPT.format(sentence=sentence))
        return clean_translation(getattr(response, "text", "") or "")
