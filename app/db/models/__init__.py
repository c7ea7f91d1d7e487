"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in database migrations and table creation.
"""
from app.db.models.user import User
from app.db.models.aptitude_test import AptitudeTest
from app.db.models.test_attempt import TestAttempt
from app.db.models.question import Question
from app.db.models.interview import Interview

# Explicitly export all models for clarity
__all__ = [
    "User",
    "AptitudeTest",
    "TestAttempt",
    "Question",
    "Interview",
]
