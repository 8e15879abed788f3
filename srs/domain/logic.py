import math
from dataclasses import dataclass

from ..config import (
    DEFAULT_EASE_FACTOR,
    DEFAULT_INTERVAL,
    DEFAULT_REPETITION,
    FIRST_INTERVAL_DAYS,
    LAPSE_INTERVAL_DAYS,
    MIN_EASE_FACTOR,
    PASSING_GRADE,
    SECOND_INTERVAL_DAYS,
)


@dataclass(frozen=True)
class SchedulingState:
    interval: float
    repetition: int
    ease_factor: float


DEFAULT_STATE = SchedulingState(
    interval=DEFAULT_INTERVAL,
    repetition=DEFAULT_REPETITION,
    ease_factor=DEFAULT_EASE_FACTOR,
)


def ease_delta(grade: int) -> float:
    miss = 5 - grade
    return 0.1 - miss * (0.08 + miss * 0.02)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def schedule_next(state: SchedulingState, grade: int) -> SchedulingState:
    """SM-2 update for one review.

    The ease factor is updated first and floored at MIN_EASE_FACTOR; the
    nth-review interval (n >= 3) grows by that updated factor. A grade below
    PASSING_GRADE is a lapse: repetition restarts and the item comes back
    the next day.
    """
    # grade is validated earlier
    ease_factor = max(MIN_EASE_FACTOR, state.ease_factor + ease_delta(grade))

    if grade < PASSING_GRADE:
        return SchedulingState(
            interval=LAPSE_INTERVAL_DAYS, repetition=0, ease_factor=ease_factor
        )

    repetition = state.repetition + 1
    if repetition == 1:
        interval = FIRST_INTERVAL_DAYS
    elif repetition == 2:
        interval = SECOND_INTERVAL_DAYS
    else:
        interval = round_half_up(state.interval * ease_factor)

    return SchedulingState(
        interval=interval, repetition=repetition, ease_factor=ease_factor
    )
