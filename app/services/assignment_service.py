"""
Assignment of catalog entities to interviews.

Interviews hold references only: question ids and a single aptitude test id.
Reads resolve the references and skip anything that has since been deleted.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.db.models.aptitude_test import AptitudeTest
from app.db.models.interview import Interview
from app.db.models.question import Question
from app.services import access_policy
from app.services.aptitude_test_service import get_test
from app.services.interview_service import patch_interview, require_interview
from app.services.question_service import get_question

logger = logging.getLogger(__name__)


def assign_question(
    db: Session,
    principal: Optional[str],
    interview_id: int,
    question_id: int,
) -> Interview:
    """
    Add a coding question to an interview. Assigning the same question twice
    leaves a single entry.

    Raises:
        NotFoundError: Interview or question does not exist
        AuthorizationError: principal is not one of the interviewers
    """
    principal = access_policy.require_principal(principal)
    interview = require_interview(db, interview_id)
    access_policy.ensure_interviewer(interview, principal)

    if not get_question(db, question_id):
        raise NotFoundError("Question not found")

    current = list(interview.question_ids or [])
    if question_id in current:
        logger.debug(f"Question already assigned: interview_id={interview_id}, question_id={question_id}")
        return interview

    interview = patch_interview(db, interview, question_ids=current + [question_id])
    logger.info(f"Question assigned: interview_id={interview_id}, question_id={question_id}")
    return interview


def assign_aptitude_test(
    db: Session,
    principal: Optional[str],
    interview_id: int,
    test_id: int,
) -> Interview:
    """
    Attach a question-set test to an interview, replacing any earlier one.

    The question-set check runs before the membership check, so a test that
    is not a question set is rejected for every caller.

    Raises:
        NotFoundError: Interview or test does not exist
        ValidationError: Test is not flagged as a question set
        AuthorizationError: principal is not one of the interviewers
    """
    principal = access_policy.require_principal(principal)
    interview = require_interview(db, interview_id)

    test = get_test(db, test_id)
    if not test:
        raise NotFoundError("Test not found")
    if not test.is_question_set:
        raise ValidationError("Only tests marked as question sets can be assigned to an interview")

    access_policy.ensure_interviewer(interview, principal)

    previous = interview.aptitude_test_id
    interview = patch_interview(db, interview, aptitude_test_id=test.id)
    logger.info(
        f"Aptitude test assigned: interview_id={interview_id}, test_id={test.id}, previous={previous}"
    )
    return interview


def get_interview_questions(db: Session, principal: Optional[str], interview_id: int) -> List[Question]:
    """Assigned questions in assignment order, skipping deleted ones."""
    principal = access_policy.require_principal(principal)
    interview = require_interview(db, interview_id)
    access_policy.ensure_participant(interview, principal)

    question_ids = interview.question_ids or []
    if not question_ids:
        return []

    found = {q.id: q for q in db.query(Question).filter(Question.id.in_(question_ids)).all()}
    missing = [qid for qid in question_ids if qid not in found]
    if missing:
        logger.warning(f"Dangling question references: interview_id={interview_id}, missing={missing}")

    return [found[qid] for qid in question_ids if qid in found]


def get_interview_aptitude_test(
    db: Session,
    principal: Optional[str],
    interview_id: int,
) -> Optional[AptitudeTest]:
    """The assigned test, or None when nothing is assigned or it was deleted."""
    principal = access_policy.require_principal(principal)
    interview = require_interview(db, interview_id)
    access_policy.ensure_participant(interview, principal)

    if interview.aptitude_test_id is None:
        return None

    test = get_test(db, interview.aptitude_test_id)
    if not test:
        logger.warning(
            f"Dangling aptitude test reference: interview_id={interview_id}, "
            f"test_id={interview.aptitude_test_id}"
        )
    return test
