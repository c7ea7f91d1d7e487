"""
Aptitude test catalog.

CRUD over test definitions with creator-scoped mutation rights. total_points
is derived from the question list on every create and on every update that
supplies questions; it is never taken from the client.
"""
import logging
import math
from typing import List, Optional, Sequence
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.core.time_utils import now_ms
from app.db.models.aptitude_test import AptitudeTest
from app.db.models.interview import Interview
from app.db.models.test_attempt import TestAttempt
from app.db.transaction import commit_or_fail
from app.schemas.aptitude_test import AptitudeQuestion, AptitudeTestCreate, AptitudeTestUpdate
from app.services import access_policy
from app.services.scoring_engine import total_points

logger = logging.getLogger(__name__)


def _clean_title(title: Optional[str]) -> str:
    if not title or not title.strip():
        raise ValidationError("Title is required")
    return title.strip()


def _clean_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    return description.strip() or None


def _check_duration(duration_minutes: int) -> int:
    if duration_minutes <= 0:
        raise ValidationError("Duration must be a positive number of minutes")
    return duration_minutes


def _clean_questions(questions: Sequence[AptitudeQuestion]) -> List[dict]:
    """Validate question structure and return the stored representation."""
    if not questions:
        raise ValidationError("At least one question is required")

    cleaned = []
    for number, question in enumerate(questions, start=1):
        if not question.question_text or not question.question_text.strip():
            raise ValidationError(f"Question {number}: text is required")
        if len(question.options) < 2:
            raise ValidationError(f"Question {number}: at least two options are required")
        if not 0 <= question.correct_option_index < len(question.options):
            raise ValidationError(f"Question {number}: correct option index is out of range")
        if not math.isfinite(question.points) or question.points <= 0:
            raise ValidationError(f"Question {number}: points must be a positive finite number")
        cleaned.append({
            "question_text": question.question_text.strip(),
            "options": list(question.options),
            "correct_option_index": question.correct_option_index,
            "points": question.points,
        })
    return cleaned


def _clean_candidates(candidates: Optional[Sequence[str]]) -> List[str]:
    # Set semantics, first occurrence keeps its position
    return list(dict.fromkeys(candidates or []))


def create_test(db: Session, principal: Optional[str], draft: AptitudeTestCreate) -> AptitudeTest:
    """
    Create a test owned by principal.

    Raises:
        AuthenticationRequired: No principal
        ValidationError: Blank title, no questions, malformed question, bad duration
        OperationFailedError: Insert failed
    """
    principal = access_policy.require_principal(principal)

    questions = _clean_questions(draft.questions)
    test = AptitudeTest(
        title=_clean_title(draft.title),
        description=_clean_description(draft.description),
        duration_minutes=_check_duration(draft.duration_minutes),
        questions=questions,
        total_points=total_points(questions),
        created_by=principal,
        created_at=now_ms(),
        is_active=True,
        is_question_set=draft.is_question_set,
        assigned_candidates=_clean_candidates(draft.assigned_candidates),
    )

    if draft.total_points is not None and draft.total_points != test.total_points:
        logger.info(
            f"Ignoring client total_points: supplied={draft.total_points}, computed={test.total_points}"
        )

    db.add(test)
    commit_or_fail(db, "create test")
    db.refresh(test)

    logger.info(
        f"Test created: test_id={test.id}, created_by={principal}, "
        f"questions={len(questions)}, total_points={test.total_points}"
    )
    return test


def _get_owned_test(db: Session, principal: Optional[str], test_id: int, action: str) -> AptitudeTest:
    principal = access_policy.require_principal(principal)
    test = get_test(db, test_id)
    if not test:
        raise NotFoundError("Test not found")
    access_policy.ensure_owner(test, principal, action)
    return test


def update_test(
    db: Session,
    principal: Optional[str],
    test_id: int,
    patch: AptitudeTestUpdate,
) -> AptitudeTest:
    """
    Apply a partial update. Only fields set on the patch change.

    Raises:
        NotFoundError: No such test
        AuthorizationError: principal is not the creator
        ValidationError: A supplied field is invalid
    """
    test = _get_owned_test(db, principal, test_id, "update this test")
    fields = patch.model_dump(exclude_unset=True)

    if "title" in fields:
        test.title = _clean_title(patch.title)
    if "description" in fields:
        test.description = _clean_description(patch.description)
    if "duration_minutes" in fields:
        if patch.duration_minutes is None:
            raise ValidationError("Duration cannot be cleared")
        test.duration_minutes = _check_duration(patch.duration_minutes)
    if "questions" in fields:
        questions = _clean_questions(patch.questions or [])
        test.questions = questions
        test.total_points = total_points(questions)
    if "is_active" in fields and patch.is_active is not None:
        test.is_active = patch.is_active
    if "is_question_set" in fields and patch.is_question_set is not None:
        test.is_question_set = patch.is_question_set
    if "assigned_candidates" in fields:
        test.assigned_candidates = _clean_candidates(patch.assigned_candidates)

    commit_or_fail(db, "update test")
    db.refresh(test)

    logger.info(f"Test updated: test_id={test.id}, fields={sorted(fields)}")
    return test


def delete_test(db: Session, principal: Optional[str], test_id: int) -> None:
    """
    Hard-delete a test. Attempts and interview assignments that reference it
    are left in place; readers treat them as dangling references.
    """
    test = _get_owned_test(db, principal, test_id, "delete this test")

    orphaned_attempts = db.query(TestAttempt).filter(TestAttempt.test_id == test_id).count()
    orphaned_interviews = db.query(Interview).filter(Interview.aptitude_test_id == test_id).count()

    db.delete(test)
    commit_or_fail(db, "delete test")

    if orphaned_attempts or orphaned_interviews:
        logger.warning(
            f"Test deleted with dangling references: test_id={test_id}, "
            f"attempts={orphaned_attempts}, interviews={orphaned_interviews}"
        )
    else:
        logger.info(f"Test deleted: test_id={test_id}")


def get_test(db: Session, test_id: int) -> Optional[AptitudeTest]:
    """Single test by id, no authorization check."""
    return db.query(AptitudeTest).filter(AptitudeTest.id == test_id).first()


def list_all_tests(db: Session, principal: Optional[str]) -> List[AptitudeTest]:
    access_policy.require_principal(principal)
    return db.query(AptitudeTest).order_by(AptitudeTest.id).all()


def list_tests_by_creator(db: Session, principal: Optional[str]) -> List[AptitudeTest]:
    principal = access_policy.require_principal(principal)
    return (
        db.query(AptitudeTest)
        .filter(AptitudeTest.created_by == principal)
        .order_by(AptitudeTest.id)
        .all()
    )


def list_active_tests_visible_to(db: Session, principal: Optional[str]) -> List[AptitudeTest]:
    """
    Active tests that principal may see: open tests plus tests assigned to it.
    An anonymous caller gets an empty list.
    """
    if not principal:
        return []

    active = (
        db.query(AptitudeTest)
        .filter(AptitudeTest.is_active.is_(True))
        .order_by(AptitudeTest.id)
        .all()
    )
    return [test for test in active if access_policy.is_listed_for(test, principal)]
