"""
User directory synced from the identity provider.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.db.models.user import User
from app.db.transaction import commit_or_fail
from app.schemas.user import UserSync
from app.services import access_policy

logger = logging.getLogger(__name__)


def get_user_by_principal(db: Session, principal_id: str) -> Optional[User]:
    return db.query(User).filter(User.principal_id == principal_id).first()


def sync_user(db: Session, principal: Optional[str], profile: UserSync) -> User:
    """Create or refresh the caller's own profile."""
    principal = access_policy.require_principal(principal)

    user = get_user_by_principal(db, principal)
    created = user is None
    if created:
        user = User(principal_id=principal)
        db.add(user)

    user.name = profile.name
    user.email = profile.email.lower()
    user.image = profile.image
    user.role = profile.role

    commit_or_fail(db, "sync user")
    db.refresh(user)

    logger.info(f"User {'created' if created else 'updated'}: user_id={user.id}, role={user.role}")
    return user


def get_current_user_profile(db: Session, principal: Optional[str]) -> User:
    principal = access_policy.require_principal(principal)
    user = get_user_by_principal(db, principal)
    if not user:
        raise NotFoundError("User not found")
    return user


def list_candidates(db: Session, principal: Optional[str]) -> List[User]:
    access_policy.require_principal(principal)
    return db.query(User).filter(User.role == "candidate").order_by(User.name).all()
