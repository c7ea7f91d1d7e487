"""
Attempt ledger endpoints not scoped to a single test.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db, get_optional_principal
from app.schemas.attempt import AttemptResponse
from app.services import attempt_service

router = APIRouter(prefix="/attempts", tags=["Attempts"])


@router.get("/me", response_model=list[AttemptResponse])
def list_my_attempts(
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    """Every attempt the caller made; empty for anonymous callers."""
    attempts = attempt_service.get_attempts_by_candidate(db, principal)
    return [AttemptResponse.from_attempt(a) for a in attempts]


@router.get("/{attempt_id}", response_model=Optional[AttemptResponse])
def get_attempt(attempt_id: int, db: Session = Depends(get_db)):
    """Single attempt by id; null when absent. No authentication needed."""
    attempt = attempt_service.get_attempt(db, attempt_id)
    if attempt is None:
        return None
    return AttemptResponse.from_attempt(attempt)
