from enum import IntEnum

class Grade(IntEnum):
    FORGOT = 0
    INCORRECT = 1
    HARD = 2
    OKAY = 3
    EASY = 4
    PERFECT = 5

GRADE_LABELS = {
    Grade.FORGOT: "Forgot",
    Grade.INCORRECT: "Incorrect",
    Grade.HARD: "Hard",
    Grade.OKAY: "Okay",
    Grade.EASY: "Easy",
    Grade.PERFECT: "Perfect",
}
