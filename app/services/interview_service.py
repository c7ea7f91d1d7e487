"""
Interview session store.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.core.time_utils import now_ms
from app.db.models.interview import Interview
from app.db.transaction import commit_or_fail
from app.schemas.interview import InterviewCreate
from app.services import access_policy

logger = logging.getLogger(__name__)

COMPLETED = "completed"


def create_interview(db: Session, principal: Optional[str], draft: InterviewCreate) -> Interview:
    access_policy.require_principal(principal)

    if not draft.title.strip():
        raise ValidationError("Title is required")
    if not draft.candidate_id:
        raise ValidationError("Candidate ID is required")
    if not draft.stream_call_id:
        raise ValidationError("Stream Call ID is required")
    if not draft.interviewer_ids:
        raise ValidationError("At least one interviewer is required")

    interview = Interview(
        title=draft.title.strip(),
        description=(draft.description or "").strip() or None,
        start_time=draft.start_time,
        status=draft.status,
        stream_call_id=draft.stream_call_id,
        candidate_id=draft.candidate_id,
        interviewer_ids=list(dict.fromkeys(draft.interviewer_ids)),
    )

    db.add(interview)
    commit_or_fail(db, "create interview")
    db.refresh(interview)

    logger.info(f"Interview created: interview_id={interview.id}, candidate_id={interview.candidate_id}")
    return interview


def get_interview(db: Session, interview_id: int) -> Optional[Interview]:
    return db.query(Interview).filter(Interview.id == interview_id).first()


def require_interview(db: Session, interview_id: int) -> Interview:
    interview = get_interview(db, interview_id)
    if not interview:
        raise NotFoundError("Interview not found")
    return interview


def list_all_interviews(db: Session, principal: Optional[str]) -> List[Interview]:
    access_policy.require_principal(principal)
    return db.query(Interview).order_by(Interview.start_time).all()


def list_my_interviews(db: Session, principal: Optional[str]) -> List[Interview]:
    """Interviews where principal is the candidate; empty for an anonymous caller."""
    if not principal:
        return []
    return (
        db.query(Interview)
        .filter(Interview.candidate_id == principal)
        .order_by(Interview.start_time)
        .all()
    )


def get_interview_by_stream_call_id(db: Session, stream_call_id: str) -> Optional[Interview]:
    return db.query(Interview).filter(Interview.stream_call_id == stream_call_id).first()


def patch_interview(db: Session, interview: Interview, **fields) -> Interview:
    """Apply fields to one interview in a single commit."""
    for name, value in fields.items():
        setattr(interview, name, value)
    commit_or_fail(db, "update interview")
    db.refresh(interview)
    return interview


def update_interview_status(
    db: Session,
    principal: Optional[str],
    interview_id: int,
    status: str,
) -> Interview:
    """Change status; moving to "completed" stamps end_time."""
    principal = access_policy.require_principal(principal)
    interview = require_interview(db, interview_id)
    access_policy.ensure_participant(interview, principal)

    fields = {"status": status}
    if status == COMPLETED:
        fields["end_time"] = now_ms()

    interview = patch_interview(db, interview, **fields)
    logger.info(f"Interview status changed: interview_id={interview_id}, status={status}")
    return interview
