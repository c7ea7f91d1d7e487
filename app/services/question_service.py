"""
Coding question catalog.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.errors import AuthorizationError, NotFoundError, ValidationError
from app.core.time_utils import now_ms
from app.db.models.question import Question
from app.db.transaction import commit_or_fail
from app.schemas.question import QuestionCreate
from app.services import access_policy

logger = logging.getLogger(__name__)


def create_question(db: Session, principal: Optional[str], draft: QuestionCreate) -> Question:
    principal = access_policy.require_principal(principal)

    if not draft.title.strip():
        raise ValidationError("Title is required")
    if not draft.description.strip():
        raise ValidationError("Description is required")
    if not draft.test_cases:
        raise ValidationError("At least one test case is required")

    leetcode_url = (draft.leetcode_url or "").strip() or None
    question = Question(
        title=draft.title.strip(),
        description=draft.description.strip(),
        difficulty=draft.difficulty,
        leetcode_url=leetcode_url,
        source=draft.source,
        examples=[example.model_dump() for example in draft.examples],
        starter_code=draft.starter_code.model_dump(),
        constraints=list(draft.constraints),
        test_cases=[case.model_dump() for case in draft.test_cases],
        created_by=principal,
        created_at=now_ms(),
    )

    db.add(question)
    commit_or_fail(db, "create question")
    db.refresh(question)

    logger.info(f"Question created: question_id={question.id}, created_by={principal}")
    return question


def get_question(db: Session, question_id: int) -> Optional[Question]:
    return db.query(Question).filter(Question.id == question_id).first()


def list_all_questions(db: Session, principal: Optional[str]) -> List[Question]:
    access_policy.require_principal(principal)
    return db.query(Question).order_by(Question.id).all()


def list_questions_by_creator(db: Session, principal: Optional[str]) -> List[Question]:
    if not principal:
        return []
    return (
        db.query(Question)
        .filter(Question.created_by == principal)
        .order_by(Question.id)
        .all()
    )


def delete_question(db: Session, principal: Optional[str], question_id: int) -> None:
    """Creator-only hard delete; interviews keep the id and drop it on read."""
    principal = access_policy.require_principal(principal)

    question = get_question(db, question_id)
    if not question:
        raise NotFoundError("Question not found")
    if question.created_by != principal:
        raise AuthorizationError("You can only delete your own questions")

    db.delete(question)
    commit_or_fail(db, "delete question")
    logger.info(f"Question deleted: question_id={question_id}")
