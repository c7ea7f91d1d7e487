"""
User directory endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.auth_dependency import get_db, get_optional_principal
from app.schemas.user import UserResponse, UserSync
from app.services import user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.put("/me", response_model=UserResponse)
def sync_me(
    profile: UserSync,
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    """Create or refresh the caller's profile from identity provider data."""
    return user_service.sync_user(db, principal, profile)


@router.get("/me", response_model=UserResponse)
def get_me(
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    return user_service.get_current_user_profile(db, principal)


@router.get("/candidates", response_model=list[UserResponse])
def list_candidates(
    principal: Optional[str] = Depends(get_optional_principal),
    db: Session = Depends(get_db)
):
    """Candidates an interviewer can assign a test to."""
    return user_service.list_candidates(db, principal)
