"""
Pydantic schemas for aptitude test endpoints.
"""
from typing import Optional
from pydantic import Field

from app.schemas.base import CamelModel


class AptitudeQuestion(CamelModel):
    """A single multiple-choice question."""
    question_text: str = Field(..., description="Question prompt")
    options: list[str] = Field(..., description="Answer options, at least two")
    correct_option_index: int = Field(..., description="Index into options of the correct answer")
    points: float = Field(..., description="Points awarded for a correct answer, positive")


class AptitudeTestCreate(CamelModel):
    """Schema for creating a test. total_points is always computed server-side."""
    title: str = Field(..., description="Test title")
    description: Optional[str] = Field(None, description="Test description")
    duration_minutes: int = Field(..., description="Time limit in minutes")
    questions: list[AptitudeQuestion] = Field(..., description="Ordered questions")
    is_question_set: bool = Field(False, description="Whether the test may be attached to a live interview")
    assigned_candidates: list[str] = Field(default_factory=list, description="Candidate principal ids; empty means open to all")
    total_points: Optional[float] = Field(None, description="Ignored; recomputed from questions")

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Quantitative Reasoning",
                "description": "Basic arithmetic and logic",
                "durationMinutes": 20,
                "questions": [
                    {
                        "questionText": "What is 2 + 2?",
                        "options": ["3", "4", "5"],
                        "correctOptionIndex": 1,
                        "points": 1
                    }
                ],
                "isQuestionSet": False,
                "assignedCandidates": []
            }
        }


class AptitudeTestUpdate(CamelModel):
    """
    Partial update. Only fields present in the request body are applied;
    supplying questions recomputes total_points.
    """
    title: Optional[str] = Field(None, description="Test title")
    description: Optional[str] = Field(None, description="Test description")
    duration_minutes: Optional[int] = Field(None, description="Time limit in minutes")
    questions: Optional[list[AptitudeQuestion]] = Field(None, description="Replacement question list")
    is_active: Optional[bool] = Field(None, description="Whether candidates can see the test")
    is_question_set: Optional[bool] = Field(None, description="Whether the test may be attached to a live interview")
    assigned_candidates: Optional[list[str]] = Field(None, description="Candidate principal ids")


class AptitudeTestResponse(CamelModel):
    """Schema for a stored test."""
    id: int
    title: str
    description: Optional[str] = None
    duration_minutes: int
    questions: list[AptitudeQuestion]
    total_points: float
    created_by: str
    created_at: int = Field(..., description="Milliseconds since epoch")
    is_active: bool
    is_question_set: bool
    assigned_candidates: list[str]
