from sqlalchemy import Column, Integer, String, Text, BigInteger, JSON
from app.db.base import Base


class Interview(Base):
    """
    Scheduled video interview.

    question_ids and aptitude_test_id are references into the catalogs; the
    rows they point at may have been deleted since assignment.
    """
    __tablename__ = "interviews"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(BigInteger, nullable=False)
    end_time = Column(BigInteger, nullable=True)
    status = Column(String, nullable=False, default="upcoming")
    stream_call_id = Column(String, nullable=False, index=True)

    candidate_id = Column(String, nullable=False, index=True)
    interviewer_ids = Column(JSON, nullable=False, default=list)

    question_ids = Column(JSON, nullable=True)
    aptitude_test_id = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<Interview(id={self.id}, title='{self.title}', status='{self.status}')>"
