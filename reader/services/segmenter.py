"""Tokenise Japanese sentences into surface forms with hiragana readings."""

import threading

import jaconv
from fugashi import Tagger

from .processing import Token


class FugashiSegmenter:
    """MeCab (via fugashi + unidic-lite) tokenizer.

    A Tagger is not safe to share between threads, so calls are serialised.
    """

    def __init__(self, tagger=None):
        self._tagger = tagger or Tagger()
        self._lock = threading.Lock()

    def tokenize(self, sentence):
        with self._lock:
            words = list(self._tagger(sentence))
        return [Token(word.surface, self._reading(word)) for word in words]

    @staticmethod
    def _reading(word):
        kana = getattr(word.feature, "kana", None) or getattr(word.feature, "reading", None)
        if not kana or kana == "*":
            return None
        return jaconv.kata2hira(kana)
