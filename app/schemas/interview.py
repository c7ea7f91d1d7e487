"""
Pydantic schemas for interview endpoints.
"""
from typing import Optional
from pydantic import Field

from app.schemas.base import CamelModel


class InterviewCreate(CamelModel):
    title: str
    description: Optional[str] = None
    start_time: int = Field(..., description="Milliseconds since epoch")
    status: str = "upcoming"
    stream_call_id: str
    candidate_id: str
    interviewer_ids: list[str]


class InterviewStatusUpdate(CamelModel):
    status: str


class InterviewResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    start_time: int
    end_time: Optional[int] = None
    status: str
    stream_call_id: str
    candidate_id: str
    interviewer_ids: list[str]
    question_ids: Optional[list[int]] = None
    aptitude_test_id: Optional[int] = None


class AssignQuestionRequest(CamelModel):
    question_id: int


class AssignAptitudeTestRequest(CamelModel):
    test_id: int
