import re

SENTENCE_PATTERN = re.compile(r"[^。！？]+[。！？]?")

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash-latest"

TRANSLATION_PROMPT = """Translate the following Japanese sentence accurately into natural English.
Return ONLY the English translation as a plain string, without any labels, quotes, or explanations.
Input Sentence: "{sentence}"
English Translation:"""

TRANSLATION_ERROR = "[Translation API Error]"
LOOKUP_ERROR = {"error": "Lookup failed"}
