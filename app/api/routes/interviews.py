"""
Interview endpoints, including assignment of questions and aptitude tests.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db, get_optional_principal
from app.schemas.aptitude_test import AptitudeTestResponse
from app.schemas.interview import (
    AssignAptitudeTestRequest,
    AssignQuestionRequest,
    InterviewCreate,
    InterviewResponse,
    InterviewStatusUpdate,
)
from app.schemas.question import QuestionResponse
from app.services import assignment_service, interview_service

router = APIRouter(prefix="/interviews", tags=["Interviews"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=InterviewResponse)
def create_interview(
    draft: InterviewCreate,
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return interview_service.create_interview(db, principal, draft)


@router.get("", response_model=list[InterviewResponse])
def list_interviews(
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return interview_service.list_all_interviews(db, principal)


@router.get("/mine", response_model=list[InterviewResponse])
def list_my_interviews(
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    """Interviews where the caller is the candidate."""
    return interview_service.list_my_interviews(db, principal)


@router.get("/by-call/{stream_call_id}", response_model=Optional[InterviewResponse])
def get_interview_by_call(stream_call_id: str, db: Session = Depends(get_db)):
    """Resolve the interview behind a video call id; null when absent."""
    return interview_service.get_interview_by_stream_call_id(db, stream_call_id)


@router.get("/{interview_id}", response_model=Optional[InterviewResponse])
def get_interview(interview_id: int, db: Session = Depends(get_db)):
    return interview_service.get_interview(db, interview_id)


@router.patch("/{interview_id}/status", response_model=InterviewResponse)
def update_interview_status(
    interview_id: int,
    body: InterviewStatusUpdate,
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return interview_service.update_interview_status(db, principal, interview_id, body.status)


@router.post("/{interview_id}/questions", response_model=InterviewResponse)
def assign_question(
    interview_id: int,
    body: AssignQuestionRequest,
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return assignment_service.assign_question(db, principal, interview_id, body.question_id)


@router.get("/{interview_id}/questions", response_model=list[QuestionResponse])
def get_interview_questions(
    interview_id: int,
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return assignment_service.get_interview_questions(db, principal, interview_id)


@router.put("/{interview_id}/aptitude-test", response_model=InterviewResponse)
def assign_aptitude_test(
    interview_id: int,
    body: AssignAptitudeTestRequest,
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return assignment_service.assign_aptitude_test(db, principal, interview_id, body.test_id)


@router.get("/{interview_id}/aptitude-test", response_model=Optional[AptitudeTestResponse])
def get_interview_aptitude_test(
    interview_id: int,
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return assignment_service.get_interview_aptitude_test(db, principal, interview_id)
