from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.errors import AuthenticationRequired
from app.core.security import decode_principal

bearer_scheme = HTTPBearer(auto_error=False)


def get_db(request: Request):
    """Database session dependency bound to the app's Database client."""
    db: Session = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


def get_optional_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """
    Resolve the caller to a principal id.

    No Authorization header means an anonymous caller (None). A header that
    is present but does not verify is rejected.
    """
    if credentials is None:
        return None

    principal = decode_principal(credentials.credentials)
    if principal is None:
        raise AuthenticationRequired("Invalid token")
    return principal
