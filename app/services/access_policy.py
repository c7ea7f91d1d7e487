"""
Visibility and authorization rules for tests and interviews.

The predicates are plain functions over ORM rows so they can be applied as
query-time filters; the ensure_* helpers raise the matching domain error.
"""
from typing import Optional

from app.core.errors import AuthenticationRequired, AuthorizationError
from app.db.models.aptitude_test import AptitudeTest
from app.db.models.interview import Interview


def require_principal(principal: Optional[str]) -> str:
    if not principal:
        raise AuthenticationRequired()
    return principal


def is_listed_for(test: AptitudeTest, principal: str) -> bool:
    """Active, and either open to everyone or explicitly assigned to principal."""
    if not test.is_active:
        return False
    assigned = test.assigned_candidates or []
    return not assigned or principal in assigned


def is_owner(test: AptitudeTest, principal: str) -> bool:
    return test.created_by == principal


def ensure_owner(test: AptitudeTest, principal: str, action: str) -> None:
    if not is_owner(test, principal):
        raise AuthorizationError(f"Only the test creator can {action}")


def is_interviewer(interview: Interview, principal: str) -> bool:
    return principal in (interview.interviewer_ids or [])


def is_participant(interview: Interview, principal: str) -> bool:
    return interview.candidate_id == principal or is_interviewer(interview, principal)


def ensure_interviewer(interview: Interview, principal: str) -> None:
    if not is_interviewer(interview, principal):
        raise AuthorizationError("Only interviewers of this interview can assign to it")


def ensure_participant(interview: Interview, principal: str) -> None:
    if not is_participant(interview, principal):
        raise AuthorizationError("Only participants of this interview can view its assignments")
