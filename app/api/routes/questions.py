"""
Coding question endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db, get_optional_principal
from app.schemas.base import SuccessResponse
from app.schemas.question import QuestionCreate, QuestionResponse
from app.services import question_service

router = APIRouter(prefix="/questions", tags=["Questions"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=QuestionResponse)
def create_question(
    draft: QuestionCreate,
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return question_service.create_question(db, principal, draft)


@router.get("", response_model=list[QuestionResponse])
def list_questions(
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return question_service.list_all_questions(db, principal)


@router.get("/mine", response_model=list[QuestionResponse])
def list_my_questions(
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return question_service.list_questions_by_creator(db, principal)


@router.get("/{question_id}", response_model=Optional[QuestionResponse])
def get_question(question_id: int, db: Session = Depends(get_db)):
    return question_service.get_question(db, question_id)


@router.delete("/{question_id}", response_model=SuccessResponse)
def delete_question(
    question_id: int,
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    question_service.delete_question(db, principal, question_id)
    return SuccessResponse()
