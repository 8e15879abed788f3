import threading

from jamdict import Jamdict


class JamdictKanjiDictionary:
    """KANJIDIC2 lookups through jamdict.

    jamdict keeps a SQLite connection, which cannot cross threads; each
    thread gets its own Jamdict.
    """

    def __init__(self, **jamdict_options):
        self._options = jamdict_options
        self._local = threading.local()

    def _jamdict(self):
        jam = getattr(self._local, "jam", None)
        if jam is None:
            jam = self._local.jam = Jamdict(**self._options)
        return jam

    def lookup(self, char):
        result = self._jamdict().lookup(char, strict_lookup=True, lookup_ne=False)
        entry = next((c for c in result.chars if c.literal == char), None)
        if entry is None:
            return None

        readings_on = []
        readings_kun = []
        for group in entry.rm_groups:
            readings_on.extend(r.value for r in group.on_readings)
            readings_kun.extend(r.value for r in group.kun_readings)

        return {
            "meanings": entry.meanings(english_only=True),
            "readings_on": readings_on,
            "readings_kun": readings_kun,
            "stroke_count": entry.stroke_count or None,
            "grade": _as_int(entry.grade),
            "jlpt": _as_int(entry.jlpt),
        }


def _as_int(value):
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
