"""
Pydantic schemas for coding question endpoints.
"""
from typing import Literal, Optional
from pydantic import Field

from app.schemas.base import CamelModel


class QuestionExample(CamelModel):
    input: str
    output: str
    explanation: Optional[str] = None


class StarterCode(CamelModel):
    javascript: str
    python: str
    java: str
    cpp: Optional[str] = None


class QuestionTestCase(CamelModel):
    input: str
    expected_output: str
    is_hidden: Optional[bool] = False


class QuestionCreate(CamelModel):
    title: str = Field(..., description="Problem title")
    description: str = Field(..., description="Problem statement")
    difficulty: Literal["easy", "medium", "hard"]
    leetcode_url: Optional[str] = None
    source: Literal["leetcode", "custom"] = "custom"
    examples: list[QuestionExample] = Field(default_factory=list)
    starter_code: StarterCode
    constraints: list[str] = Field(default_factory=list)
    test_cases: list[QuestionTestCase] = Field(..., description="At least one test case")


class QuestionResponse(QuestionCreate):
    id: int
    created_by: str
    created_at: int
