"""Tests for quiz session stepping."""

import pytest

from app.core.quiz_session import (
    QuizSessionError,
    go_back,
    is_complete,
    mark_submitted,
    next_question_id,
    record_answer,
    start_session,
    to_answers,
)
from app.core.schemas_quiz import LearningFormat, QuizSession
from app.core.scoring import calculate_score


def _completed_session() -> QuizSession:
    session = start_session()
    for qid in ("q1", "q2", "q3", "q4", "q5", "q6", "q7", "q8", "q9"):
        session = record_answer(session, qid, 3)
    return record_answer(session, "q10", "stories")


class TestRecordAnswer:
    def test_stores_answer_and_advances(self):
        session = record_answer(start_session(), "q1", 2)
        assert session.answers == {"q1": 2}
        assert session.current_step == 1

    def test_original_session_untouched(self):
        original = start_session()
        record_answer(original, "q1", 2)
        assert original.answers == {}
        assert original.current_step == 0

    def test_replacing_answer(self):
        session = record_answer(start_session(), "q1", 2)
        session = record_answer(session, "q1", 3)
        assert session.answers["q1"] == 3

    def test_preference_stored_as_enum(self):
        session = record_answer(start_session(), "q10", "debates")
        assert session.answers["q10"] == LearningFormat.DEBATES

    def test_rejects_out_of_domain(self):
        with pytest.raises(QuizSessionError, match="q2"):
            record_answer(start_session(), "q2", 2)

    def test_rejects_unknown_question(self):
        with pytest.raises(QuizSessionError, match="Unknown question"):
            record_answer(start_session(), "q42", 1)

    def test_rejects_after_submission(self):
        session = mark_submitted(_completed_session())
        with pytest.raises(QuizSessionError, match="after submission"):
            record_answer(session, "q1", 1)


class TestNavigation:
    def test_back_keeps_answers(self):
        session = record_answer(start_session(), "q1", 2)
        session = go_back(session)
        assert session.current_step == 0
        assert session.answers == {"q1": 2}

    def test_back_stops_at_first_question(self):
        assert go_back(start_session()).current_step == 0

    def test_back_rejected_after_submission(self):
        with pytest.raises(QuizSessionError):
            go_back(mark_submitted(_completed_session()))

    def test_next_question(self):
        session = record_answer(start_session(), "q1", 2)
        assert next_question_id(session) == "q2"
        assert next_question_id(_completed_session()) is None


class TestCompletion:
    def test_incomplete(self):
        session = record_answer(start_session(), "q1", 2)
        assert not is_complete(session)
        with pytest.raises(QuizSessionError, match="Unanswered"):
            to_answers(session)

    def test_complete_session_scores(self):
        session = _completed_session()
        assert is_complete(session)
        answers = to_answers(session)
        assert answers.q10 == LearningFormat.STORIES
        assert calculate_score(answers).base_score == 100

    def test_session_round_trips_through_json(self):
        session = _completed_session()
        restored = QuizSession.model_validate_json(session.model_dump_json())
        assert to_answers(restored) == to_answers(session)
