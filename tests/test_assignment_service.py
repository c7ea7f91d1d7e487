"""
Unit tests for interview assignment of questions and aptitude tests.
"""
import pytest

from app.core.errors import (
    AuthenticationRequired,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from app.schemas.interview import InterviewCreate
from app.schemas.question import QuestionCreate
from app.services import (
    aptitude_test_service,
    assignment_service,
    interview_service,
    question_service,
)
from tests.factories import (
    CANDIDATE,
    INTERVIEWER,
    OTHER_CANDIDATE,
    OTHER_INTERVIEWER,
    make_draft,
)


def make_question_draft(title="Two Sum"):
    return QuestionCreate(
        title=title,
        description="Return indices of the two numbers adding up to target.",
        difficulty="easy",
        starter_code={"javascript": "", "python": "", "java": ""},
        test_cases=[{"input": "[2,7,11,15], 9", "expected_output": "[0,1]"}],
    )


@pytest.fixture
def interview(db):
    return interview_service.create_interview(db, INTERVIEWER, InterviewCreate(
        title="Backend Round",
        start_time=1_700_000_000_000,
        stream_call_id="call-123",
        candidate_id=CANDIDATE,
        interviewer_ids=[INTERVIEWER],
    ))


@pytest.fixture
def coding_question(db):
    return question_service.create_question(db, INTERVIEWER, make_question_draft())


def test_assign_question_appends(db, interview, coding_question):
    updated = assignment_service.assign_question(db, INTERVIEWER, interview.id, coding_question.id)
    assert updated.question_ids == [coding_question.id]


def test_assign_question_is_idempotent(db, interview, coding_question):
    assignment_service.assign_question(db, INTERVIEWER, interview.id, coding_question.id)
    updated = assignment_service.assign_question(db, INTERVIEWER, interview.id, coding_question.id)

    assert updated.question_ids == [coding_question.id]


def test_assign_question_keeps_order(db, interview, coding_question):
    second = question_service.create_question(db, INTERVIEWER, make_question_draft("Valid Parentheses"))

    assignment_service.assign_question(db, INTERVIEWER, interview.id, second.id)
    updated = assignment_service.assign_question(db, INTERVIEWER, interview.id, coding_question.id)

    assert updated.question_ids == [second.id, coding_question.id]


def test_assign_question_requires_interviewer(db, interview, coding_question):
    with pytest.raises(AuthorizationError):
        assignment_service.assign_question(db, OTHER_INTERVIEWER, interview.id, coding_question.id)
    with pytest.raises(AuthorizationError):
        assignment_service.assign_question(db, CANDIDATE, interview.id, coding_question.id)


def test_assign_question_missing_interview(db, coding_question):
    with pytest.raises(NotFoundError):
        assignment_service.assign_question(db, INTERVIEWER, 404, coding_question.id)


def test_assign_question_missing_question(db, interview):
    with pytest.raises(NotFoundError):
        assignment_service.assign_question(db, INTERVIEWER, interview.id, 404)


def test_assign_question_requires_principal(db, interview, coding_question):
    with pytest.raises(AuthenticationRequired):
        assignment_service.assign_question(db, None, interview.id, coding_question.id)


def test_assign_aptitude_test(db, interview, question_set_test):
    updated = assignment_service.assign_aptitude_test(db, INTERVIEWER, interview.id, question_set_test.id)
    assert updated.aptitude_test_id == question_set_test.id


def test_assign_aptitude_test_replaces_previous(db, interview, question_set_test):
    other = aptitude_test_service.create_test(
        db, INTERVIEWER, make_draft(title="Second Set", is_question_set=True)
    )

    assignment_service.assign_aptitude_test(db, INTERVIEWER, interview.id, question_set_test.id)
    updated = assignment_service.assign_aptitude_test(db, INTERVIEWER, interview.id, other.id)

    assert updated.aptitude_test_id == other.id


def test_assign_non_question_set_is_rejected(db, interview, sample_test):
    with pytest.raises(ValidationError):
        assignment_service.assign_aptitude_test(db, INTERVIEWER, interview.id, sample_test.id)

    db.refresh(interview)
    assert interview.aptitude_test_id is None


def test_assign_non_question_set_rejected_regardless_of_membership(db, interview, sample_test):
    with pytest.raises(ValidationError):
        assignment_service.assign_aptitude_test(db, OTHER_INTERVIEWER, interview.id, sample_test.id)


def test_assign_aptitude_test_requires_interviewer(db, interview, question_set_test):
    with pytest.raises(AuthorizationError):
        assignment_service.assign_aptitude_test(db, CANDIDATE, interview.id, question_set_test.id)


def test_assign_aptitude_test_missing_test(db, interview):
    with pytest.raises(NotFoundError):
        assignment_service.assign_aptitude_test(db, INTERVIEWER, interview.id, 404)


def test_interview_questions_visible_to_participants(db, interview, coding_question):
    assignment_service.assign_question(db, INTERVIEWER, interview.id, coding_question.id)

    for principal in (CANDIDATE, INTERVIEWER):
        questions = assignment_service.get_interview_questions(db, principal, interview.id)
        assert [q.id for q in questions] == [coding_question.id]

    with pytest.raises(AuthorizationError):
        assignment_service.get_interview_questions(db, OTHER_CANDIDATE, interview.id)


def test_interview_questions_drop_deleted_entries(db, interview, coding_question):
    doomed = question_service.create_question(db, INTERVIEWER, make_question_draft("Doomed"))
    assignment_service.assign_question(db, INTERVIEWER, interview.id, doomed.id)
    assignment_service.assign_question(db, INTERVIEWER, interview.id, coding_question.id)

    question_service.delete_question(db, INTERVIEWER, doomed.id)

    questions = assignment_service.get_interview_questions(db, CANDIDATE, interview.id)
    assert [q.id for q in questions] == [coding_question.id]


def test_interview_questions_empty_when_none_assigned(db, interview):
    assert assignment_service.get_interview_questions(db, CANDIDATE, interview.id) == []


def test_interview_aptitude_test_lookup(db, interview, question_set_test):
    assert assignment_service.get_interview_aptitude_test(db, CANDIDATE, interview.id) is None

    assignment_service.assign_aptitude_test(db, INTERVIEWER, interview.id, question_set_test.id)

    test = assignment_service.get_interview_aptitude_test(db, CANDIDATE, interview.id)
    assert test.id == question_set_test.id

    with pytest.raises(AuthorizationError):
        assignment_service.get_interview_aptitude_test(db, OTHER_CANDIDATE, interview.id)


def test_interview_aptitude_test_none_after_test_deleted(db, interview, question_set_test):
    assignment_service.assign_aptitude_test(db, INTERVIEWER, interview.id, question_set_test.id)
    aptitude_test_service.delete_test(db, INTERVIEWER, question_set_test.id)

    assert assignment_service.get_interview_aptitude_test(db, INTERVIEWER, interview.id) is None
