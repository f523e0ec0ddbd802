"""Quiz session stepping.

The in-progress answer set lives in an immutable ``QuizSession`` that the
caller carries between steps; every operation returns a new session.
"""

from pydantic import ValidationError

from app.core.questions import QUESTION_IDS, find_option, get_question
from app.core.schemas_quiz import LearningFormat, QuizAnswers, QuizSession


class QuizSessionError(ValueError):
    """Raised when a step is not allowed for the current session."""


def start_session() -> QuizSession:
    return QuizSession()


def record_answer(session: QuizSession, question_id: str, value: int | str) -> QuizSession:
    """
    Record (or replace) the answer to one question and advance the step.

    Args:
        session: Current session
        question_id: Question being answered (q1..q10)
        value: Selected option value

    Returns:
        New session with the answer stored

    Raises:
        QuizSessionError: Session already submitted, unknown question,
            or value not among the question's options
    """
    if session.submitted:
        raise QuizSessionError("Answers cannot change after submission")
    if question_id not in QUESTION_IDS:
        raise QuizSessionError(f"Unknown question: {question_id}")

    option = find_option(question_id, value)
    if option is None:
        question = get_question(question_id)
        allowed = ", ".join(str(getattr(o.value, "value", o.value)) for o in question.options)
        raise QuizSessionError(f"Invalid answer for {question_id}; expected one of: {allowed}")

    answers = dict(session.answers)
    answers[question_id] = option.value

    step = QUESTION_IDS.index(question_id)
    next_step = min(step + 1, len(QUESTION_IDS))
    return session.model_copy(
        update={"answers": answers, "current_step": max(session.current_step, next_step)}
    )


def go_back(session: QuizSession) -> QuizSession:
    """Step back one question; answers are kept."""
    if session.submitted:
        raise QuizSessionError("Answers cannot change after submission")
    return session.model_copy(update={"current_step": max(session.current_step - 1, 0)})


def is_complete(session: QuizSession) -> bool:
    return all(qid in session.answers for qid in QUESTION_IDS)


def next_question_id(session: QuizSession) -> str | None:
    """First unanswered question, or None once every question is answered."""
    for qid in QUESTION_IDS:
        if qid not in session.answers:
            return qid
    return None


def to_answers(session: QuizSession) -> QuizAnswers:
    """
    Build the validated answer set from a complete session.

    Raises:
        QuizSessionError: If any question is unanswered or a value is out of domain
    """
    missing = [qid for qid in QUESTION_IDS if qid not in session.answers]
    if missing:
        raise QuizSessionError(f"Unanswered questions: {', '.join(missing)}")

    payload = {
        qid: (v.value if isinstance(v, LearningFormat) else v)
        for qid, v in session.answers.items()
    }
    try:
        return QuizAnswers(**payload)
    except ValidationError as e:
        raise QuizSessionError(f"Invalid answers: {e.error_count()} error(s)") from e


def mark_submitted(session: QuizSession) -> QuizSession:
    return session.model_copy(update={"submitted": True})
