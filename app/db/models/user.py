from sqlalchemy import Column, Integer, String, BigInteger
from app.db.base import Base
from app.core.time_utils import now_ms


class User(Base):
    """Profile of a principal, synced from the external identity provider."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    principal_id = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, index=True, nullable=False)
    image = Column(String, nullable=True)
    role = Column(String, nullable=False, default="candidate", index=True)  # candidate / interviewer
    created_at = Column(BigInteger, nullable=False, default=now_ms)

    def __repr__(self):
        return f"<User(id={self.id}, principal_id='{self.principal_id}', role='{self.role}')>"
