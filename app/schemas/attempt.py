"""
Pydantic schemas for test attempt endpoints.
"""
from typing import Optional
from pydantic import Field

from app.core import config
from app.schemas.base import CamelModel


class SubmittedAnswer(CamelModel):
    question_index: int = Field(..., description="Index of the question in the test")
    selected_option_index: int = Field(-1, description="Chosen option; -1 when unanswered")


class AttemptSubmit(CamelModel):
    answers: list[SubmittedAnswer] = Field(default_factory=list, description="Answers, possibly partial")
    started_at: int = Field(..., description="Milliseconds since epoch")
    completed_at: int = Field(..., description="Milliseconds since epoch")


class GradedAnswer(CamelModel):
    question_index: int
    selected_option_index: int
    is_correct: bool


class AttemptResponse(CamelModel):
    id: int
    test_id: int
    candidate_id: str
    answers: list[GradedAnswer]
    score: float
    total_points: float
    percentage: float
    started_at: int
    completed_at: int
    time_spent_seconds: int
    is_pass: bool = Field(..., description="percentage at or above the pass threshold")

    @classmethod
    def from_attempt(cls, attempt) -> "AttemptResponse":
        return cls(
            id=attempt.id,
            test_id=attempt.test_id,
            candidate_id=attempt.candidate_id,
            answers=attempt.answers,
            score=attempt.score,
            total_points=attempt.total_points,
            percentage=attempt.percentage,
            started_at=attempt.started_at,
            completed_at=attempt.completed_at,
            time_spent_seconds=attempt.time_spent_seconds,
            is_pass=attempt.percentage >= config.PASS_THRESHOLD_PERCENT,
        )


class AttemptSummaryResponse(CamelModel):
    """Aggregate view of every attempt on one test, for its creator."""
    test_id: int
    attempt_count: int
    pass_count: int
    pass_threshold: float
    average_percentage: Optional[float] = None
    best_score: Optional[float] = None
