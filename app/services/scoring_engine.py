"""
Aptitude test grading.

Pure functions: no database access, no clock, no randomness. Every question
is binary correct/incorrect against a single correct option index; there is
no partial credit and no negative marking.
"""
from dataclasses import dataclass, asdict
from typing import Iterable, List, Mapping, Sequence

UNANSWERED = -1


@dataclass(frozen=True)
class QuestionResult:
    question_index: int
    selected_option_index: int
    is_correct: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class GradedResult:
    per_question_results: List[QuestionResult]
    score: float
    total_points: float
    percentage: float

    @property
    def correct_count(self) -> int:
        return sum(1 for result in self.per_question_results if result.is_correct)


def total_points(questions: Iterable[Mapping]) -> float:
    """Sum of per-question points."""
    return sum(question["points"] for question in questions)


def grade_submission(questions: Sequence[Mapping], answers: Iterable) -> GradedResult:
    """
    Grade a submission against a test's questions.

    Iterates over every question of the test, not over the submitted answers,
    so a question with no answer is graded as UNANSWERED and counts as wrong.
    When the same question index is answered more than once, the last answer
    wins. Answers for indices outside the test are ignored.

    Args:
        questions: Ordered question dicts with "correct_option_index" and "points"
        answers: Objects with question_index and selected_option_index

    Returns:
        GradedResult with one QuestionResult per test question
    """
    selected = {}
    for answer in answers:
        selected[answer.question_index] = answer.selected_option_index

    results = []
    score = 0
    for index, question in enumerate(questions):
        choice = selected.get(index, UNANSWERED)
        is_correct = choice == question["correct_option_index"]
        if is_correct:
            score += question["points"]
        results.append(QuestionResult(
            question_index=index,
            selected_option_index=choice,
            is_correct=is_correct,
        ))

    total = total_points(questions)
    # Catalog validation guarantees at least one question with positive points
    percentage = 100 * score / total

    return GradedResult(
        per_question_results=results,
        score=score,
        total_points=total,
        percentage=percentage,
    )
