"""
Principal ids and draft builders shared by the test modules.
"""
from app.schemas.aptitude_test import AptitudeQuestion, AptitudeTestCreate


INTERVIEWER = "user_interviewer_1"
OTHER_INTERVIEWER = "user_interviewer_2"
CANDIDATE = "user_candidate_a"
OTHER_CANDIDATE = "user_candidate_b"


def make_draft(**overrides) -> AptitudeTestCreate:
    """Two questions worth [1, 2] points with correct indices [0, 1]."""
    fields = {
        "title": "Logical Reasoning",
        "description": "Warm-up set",
        "duration_minutes": 10,
        "questions": [
            AptitudeQuestion(
                question_text="Which number comes next: 2, 4, 8, ?",
                options=["16", "12", "10"],
                correct_option_index=0,
                points=1,
            ),
            AptitudeQuestion(
                question_text="Odd one out?",
                options=["Apple", "Carrot", "Banana"],
                correct_option_index=1,
                points=2,
            ),
        ],
    }
    fields.update(overrides)
    return AptitudeTestCreate(**fields)
