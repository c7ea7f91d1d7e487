"""
Attempt ledger.

Turns a submission into an immutable scored record. Grading always runs
against the test definition as it is at submission time; total_points is
snapshotted onto the attempt so later edits to the test do not change
recorded results.
"""
import logging
from typing import List, Optional, Sequence
from sqlalchemy import and_
from sqlalchemy.orm import Session

from app.core import config
from app.core.errors import NotFoundError, ValidationError
from app.db.models.test_attempt import TestAttempt
from app.db.transaction import commit_or_fail
from app.schemas.attempt import SubmittedAnswer
from app.services import access_policy
from app.services.aptitude_test_service import get_test
from app.services.scoring_engine import grade_submission

logger = logging.getLogger(__name__)


def _check_timing(started_at: int, completed_at: int, duration_minutes: int) -> None:
    """Reject submissions that finished before they started or ran past the time limit."""
    elapsed_ms = completed_at - started_at
    if elapsed_ms < 0:
        raise ValidationError("completedAt is earlier than startedAt")

    limit_ms = (duration_minutes * 60 + config.ATTEMPT_GRACE_SECONDS) * 1000
    if elapsed_ms > limit_ms:
        raise ValidationError(
            f"Submission exceeded the {duration_minutes} minute time limit"
        )


def submit_attempt(
    db: Session,
    principal: Optional[str],
    test_id: int,
    answers: Sequence[SubmittedAnswer],
    started_at: int,
    completed_at: int,
) -> TestAttempt:
    """
    Grade and record a submission for principal.

    Args:
        db: Database session
        principal: Candidate submitting the attempt
        test_id: Test being answered
        answers: Possibly partial answers; missing questions count as wrong
        started_at: Milliseconds since epoch
        completed_at: Milliseconds since epoch

    Returns:
        The stored attempt

    Raises:
        AuthenticationRequired: No principal
        NotFoundError: Test does not exist
        ValidationError: Timing is impossible or over the limit, or a repeat
            attempt while re-attempts are disabled
    """
    principal = access_policy.require_principal(principal)

    test = get_test(db, test_id)
    if not test:
        raise NotFoundError("Test not found")

    if config.ENFORCE_ATTEMPT_DURATION:
        _check_timing(started_at, completed_at, test.duration_minutes)

    if not config.ALLOW_REATTEMPTS and get_attempt_for_test_and_candidate(db, principal, test_id):
        raise ValidationError("Test has already been attempted")

    result = grade_submission(test.questions, answers)

    attempt = TestAttempt(
        test_id=test.id,
        candidate_id=principal,
        answers=[r.to_dict() for r in result.per_question_results],
        score=result.score,
        total_points=result.total_points,
        percentage=result.percentage,
        started_at=started_at,
        completed_at=completed_at,
        time_spent_seconds=(completed_at - started_at) // 1000,
    )

    db.add(attempt)
    commit_or_fail(db, "submit attempt")
    db.refresh(attempt)

    logger.info(
        f"Attempt recorded: attempt_id={attempt.id}, test_id={test.id}, candidate_id={principal}, "
        f"score={result.score}/{result.total_points}, correct={result.correct_count}"
    )
    return attempt


def get_attempts_by_candidate(db: Session, principal: Optional[str]) -> List[TestAttempt]:
    """Every attempt made by principal; empty for an anonymous caller."""
    if not principal:
        return []
    return (
        db.query(TestAttempt)
        .filter(TestAttempt.candidate_id == principal)
        .order_by(TestAttempt.id)
        .all()
    )


def get_attempt_for_test_and_candidate(
    db: Session,
    principal: Optional[str],
    test_id: int,
) -> Optional[TestAttempt]:
    """
    First attempt principal made on test_id, in storage order. When
    re-attempts are allowed this is not necessarily the most recent one.
    """
    if not principal:
        return None
    return (
        db.query(TestAttempt)
        .filter(
            and_(
                TestAttempt.test_id == test_id,
                TestAttempt.candidate_id == principal,
            )
        )
        .order_by(TestAttempt.id)
        .first()
    )


def get_attempts_by_test(db: Session, principal: Optional[str], test_id: int) -> List[TestAttempt]:
    """
    All attempts on a test, for grading review by its creator.

    Raises:
        AuthenticationRequired: No principal
        NotFoundError: Test does not exist
        AuthorizationError: principal did not create the test
    """
    principal = access_policy.require_principal(principal)

    test = get_test(db, test_id)
    if not test:
        raise NotFoundError("Test not found")
    access_policy.ensure_owner(test, principal, "view attempts")

    return (
        db.query(TestAttempt)
        .filter(TestAttempt.test_id == test_id)
        .order_by(TestAttempt.id)
        .all()
    )


def get_attempt(db: Session, attempt_id: int) -> Optional[TestAttempt]:
    """Single attempt by id, no authorization check."""
    return db.query(TestAttempt).filter(TestAttempt.id == attempt_id).first()


def get_results_summary(db: Session, principal: Optional[str], test_id: int) -> dict:
    """
    Aggregate figures over every attempt on a test, for its creator.

    Returns:
        Dict with test_id, attempt_count, pass_count, pass_threshold,
        average_percentage and best_score (None when there are no attempts)
    """
    attempts = get_attempts_by_test(db, principal, test_id)
    threshold = config.PASS_THRESHOLD_PERCENT

    summary = {
        "test_id": test_id,
        "attempt_count": len(attempts),
        "pass_count": sum(1 for a in attempts if a.percentage >= threshold),
        "pass_threshold": threshold,
        "average_percentage": None,
        "best_score": None,
    }
    if attempts:
        summary["average_percentage"] = sum(a.percentage for a in attempts) / len(attempts)
        summary["best_score"] = max(a.score for a in attempts)

    logger.debug(f"Results summary: test_id={test_id}, attempts={len(attempts)}")
    return summary
