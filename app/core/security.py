import logging
from datetime import datetime, timedelta
from typing import Optional

from jose import jwt, JWTError
from app.core.config import SECRET_KEY, ALGORITHM

logger = logging.getLogger(__name__)


def create_access_token(data: dict, expires_delta: timedelta = None):
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=60))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_principal(token: str) -> Optional[str]:
    """
    Resolve a bearer token to the principal id carried in its "sub" claim.

    Tokens are issued by the external identity provider and signed with the
    shared secret. A missing, expired or tampered token resolves to None.

    Args:
        token: Encoded JWT

    Returns:
        Principal id, or None when the token cannot be trusted
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.debug(f"Rejected bearer token: {e}")
        return None

    principal = payload.get("sub")
    if not principal:
        return None
    return str(principal)
