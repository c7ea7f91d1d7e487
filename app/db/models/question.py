"""
Question model: coding problems interviewers attach to live interviews.
"""
from sqlalchemy import Column, Integer, String, Text, BigInteger, JSON
from app.db.base import Base
from app.core.time_utils import now_ms


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    difficulty = Column(String, nullable=False, index=True)  # easy / medium / hard
    leetcode_url = Column(String, nullable=True)
    source = Column(String, nullable=False, default="custom")  # leetcode / custom

    examples = Column(JSON, nullable=False, default=list)  # [{"input", "output", "explanation"}]
    starter_code = Column(JSON, nullable=False, default=dict)  # {"javascript", "python", "java", "cpp"}
    constraints = Column(JSON, nullable=False, default=list)
    test_cases = Column(JSON, nullable=False, default=list)  # [{"input", "expected_output", "is_hidden"}]

    created_by = Column(String, nullable=False, index=True)
    created_at = Column(BigInteger, nullable=False, default=now_ms)

    def __repr__(self):
        return f"<Question(id={self.id}, title='{self.title}', difficulty='{self.difficulty}')>"
