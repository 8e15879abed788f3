DEFAULT_INTERVAL = 0.0
DEFAULT_REPETITION = 0
DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3

MIN_GRADE = 0
MAX_GRADE = 5
PASSING_GRADE = 3

FIRST_INTERVAL_DAYS = 1    # first passing review
SECOND_INTERVAL_DAYS = 6   # second passing review
LAPSE_INTERVAL_DAYS = 1    # any grade below PASSING_GRADE

DUE_LIST_LIMIT = 50
