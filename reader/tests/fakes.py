from reader.services.processing import Token

READINGS = {
    "今日": "きょう",
    "日本語": "にほんご",
    "勉強": "べんきょう",
    "し": "し",
    "ます": "ます",
    "は": "は",
    "を": "を",
    "。": None,
    "コーヒー": "こーひー",
}

KANJI = {
    "今": {"meanings": ["now"], "readings_on": ["コン", "キン"], "readings_kun": ["いま"],
           "stroke_count": 4, "grade": 2, "jlpt": 4},
    "日": {"meanings": ["day", "sun", "Japan"], "readings_on": ["ニチ", "ジツ"], "readings_kun": ["ひ", "-び", "-か"],
           "stroke_count": 4, "grade": 1, "jlpt": 4},
    "本": {"meanings": ["book", "present", "main"], "readings_on": ["ホン"], "readings_kun": ["もと"],
           "stroke_count": 5, "grade": 1, "jlpt": 4},
    "勉": {"meanings": ["exertion"], "readings_on": ["ベン"], "readings_kun": ["つと.める"],
           "stroke_count": 10, "grade": 3, "jlpt": 3},
    "強": {"meanings": ["strong"], "readings_on": ["キョウ", "ゴウ"], "readings_kun": ["つよ.い"],
           "stroke_count": 11, "grade": 2, "jlpt": 3},
}


class FakeSegmenter:
    """Greedy longest-match over the READINGS table; unknown chars become single tokens."""

    def __init__(self, fail_on=None):
        self.fail_on = fail_on

    def tokenize(self, sentence):
        if self.fail_on and self.fail_on in sentence:
            raise RuntimeError("tagger exploded")
        tokens, i = [], 0
        words = sorted(READINGS, key=len, reverse=True)
        while i < len(sentence):
            word = next((w for w in words if sentence.startswith(w, i)), sentence[i])
            tokens.append(Token(word, READINGS.get(word)))
            i += len(word)
        return tokens


class FakeDictionary:
    def __init__(self, broken=()):
        self.broken = set(broken)
        self.calls = []

    def lookup(self, char):
        self.calls.append(char)
        if char in self.broken:
            raise OSError("kanjidic unavailable")
        return KANJI.get(char)


class FakeTranslator:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def translate(self, sentence):
        self.calls.append(sentence)
        if self.fail:
            raise RuntimeError("quota exceeded")
        return f"EN({sentence})"
