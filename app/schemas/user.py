"""
Pydantic schemas for user directory endpoints.
"""
from typing import Literal, Optional

from app.schemas.base import CamelModel


class UserSync(CamelModel):
    name: str
    email: str
    image: Optional[str] = None
    role: Literal["candidate", "interviewer"] = "candidate"


class UserResponse(UserSync):
    id: int
    principal_id: str
    created_at: int
