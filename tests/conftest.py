"""
Shared fixtures: a fresh in-memory SQLite database per test.
"""
import pytest

from app.core import config
from app.db.session import Database
from app.services import aptitude_test_service
from tests.factories import INTERVIEWER, make_draft


@pytest.fixture(scope="function")
def database():
    """Connected in-memory database with all tables created."""
    database = Database("sqlite://")
    database.connect()
    database.create_all()
    try:
        yield database
    finally:
        database.drop_all()
        database.dispose()


@pytest.fixture(scope="function")
def db(database):
    """Database session for service-level tests."""
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def attempt_settings(monkeypatch):
    """Pin attempt configuration so environment variables cannot leak into tests."""
    monkeypatch.setattr(config, "ALLOW_REATTEMPTS", True)
    monkeypatch.setattr(config, "ENFORCE_ATTEMPT_DURATION", True)
    monkeypatch.setattr(config, "ATTEMPT_GRACE_SECONDS", 30)
    monkeypatch.setattr(config, "PASS_THRESHOLD_PERCENT", 60.0)


@pytest.fixture
def sample_test(db):
    """Open two-question test created by INTERVIEWER."""
    return aptitude_test_service.create_test(db, INTERVIEWER, make_draft())


@pytest.fixture
def question_set_test(db):
    """Two-question test flagged as a question set."""
    return aptitude_test_service.create_test(
        db, INTERVIEWER, make_draft(title="Live Round Set", is_question_set=True)
    )
