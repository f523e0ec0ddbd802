"""Static questionnaire definition for the founder readiness quiz.

Nine scored questions followed by one unscored preference question. Scored
options declare their point ``weight`` next to the stored ``value``; the
two are kept equal, so summing the raw answer values yields the score.
"""

from dataclasses import dataclass

from app.core.schemas_quiz import PREFERENCE_QUESTION_ID, LearningFormat

# =============================================================================
# Option variants
# =============================================================================


@dataclass(frozen=True)
class ScoredOption:
    label: str
    value: int
    weight: int


@dataclass(frozen=True)
class PreferenceOption:
    label: str
    value: LearningFormat


@dataclass(frozen=True)
class ScoredQuestion:
    id: str
    question: str
    options: tuple[ScoredOption, ...]
    is_scored: bool = True

    @property
    def max_weight(self) -> int:
        return max(o.weight for o in self.options)


@dataclass(frozen=True)
class PreferenceQuestion:
    id: str
    question: str
    options: tuple[PreferenceOption, ...]
    is_scored: bool = False


Question = ScoredQuestion | PreferenceQuestion


def _scored(value: int, label: str) -> ScoredOption:
    return ScoredOption(label=label, value=value, weight=value)


# =============================================================================
# Definition
# =============================================================================

QUESTIONS: tuple[Question, ...] = (
    ScoredQuestion(
        id="q1",
        question="Do you have a clear problem you are solving?",
        options=(_scored(3, "Yes"), _scored(2, "Somewhat"), _scored(1, "No")),
    ),
    ScoredQuestion(
        id="q2",
        question="Can you explain the problem in one sentence?",
        options=(_scored(3, "Yes"), _scored(1, "No")),
    ),
    ScoredQuestion(
        id="q3",
        question="Do you have a defined customer segment?",
        options=(_scored(3, "Yes"), _scored(2, "Not really"), _scored(1, "No")),
    ),
    ScoredQuestion(
        id="q4",
        question="Have you validated your problem with real people?",
        options=(_scored(3, "Yes, many"), _scored(2, "Yes, a few"), _scored(1, "No")),
    ),
    ScoredQuestion(
        id="q5",
        question="Do you have a prototype or demo?",
        options=(_scored(3, "Yes, working"), _scored(2, "In progress"), _scored(1, "No")),
    ),
    ScoredQuestion(
        id="q6",
        question="Do you have traction?",
        options=(_scored(3, "Yes, measurable"), _scored(2, "Some interest"), _scored(1, "No")),
    ),
    ScoredQuestion(
        id="q7",
        question="Are you working on this consistently?",
        options=(_scored(3, "Yes"), _scored(2, "On and off"), _scored(1, "No")),
    ),
    ScoredQuestion(
        id="q8",
        question="Do you have a co-founder or team?",
        options=(_scored(3, "Yes"), _scored(2, "Not yet"), _scored(1, "Solo")),
    ),
    ScoredQuestion(
        id="q9",
        question="How clear is your founder story?",
        options=(_scored(3, "Very clear"), _scored(2, "Somewhat"), _scored(1, "Not clear")),
    ),
    PreferenceQuestion(
        id=PREFERENCE_QUESTION_ID,
        question="Preferred learning format",
        options=(
            PreferenceOption(label="Short Lessons", value=LearningFormat.LESSONS),
            PreferenceOption(label="Articles", value=LearningFormat.ARTICLES),
            PreferenceOption(label="Stories", value=LearningFormat.STORIES),
            PreferenceOption(label="Debates", value=LearningFormat.DEBATES),
            PreferenceOption(label="Conversations", value=LearningFormat.CONVERSATIONS),
        ),
    ),
)

QUESTION_IDS: tuple[str, ...] = tuple(q.id for q in QUESTIONS)

_BY_ID = {q.id: q for q in QUESTIONS}


# =============================================================================
# Lookups
# =============================================================================


def get_question(question_id: str) -> Question:
    """Return the question with this id. Raises KeyError for unknown ids."""
    return _BY_ID[question_id]


def find_option(question_id: str, value: int | str) -> ScoredOption | PreferenceOption | None:
    """Return the option of ``question_id`` whose value matches, or None."""
    question = get_question(question_id)
    for option in question.options:
        if isinstance(value, bool):
            continue
        if option.value == value:
            return option
    return None


def get_option_label(question_id: str, value: int | str) -> str:
    """Label shown for an answer; falls back to the raw value as text."""
    option = find_option(question_id, value)
    if option is None:
        return str(value.value if isinstance(value, LearningFormat) else value)
    return option.label


def max_points() -> int:
    """Sum of the highest weight of every scored question."""
    return sum(q.max_weight for q in QUESTIONS if isinstance(q, ScoredQuestion))


def serialize_questions() -> list[dict]:
    """Questionnaire as plain dicts for the API."""
    out = []
    for q in QUESTIONS:
        options = []
        for o in q.options:
            if isinstance(o, ScoredOption):
                options.append({"label": o.label, "value": o.value, "weight": o.weight})
            else:
                options.append({"label": o.label, "value": o.value.value})
        out.append(
            {
                "id": q.id,
                "question": q.question,
                "is_scored": q.is_scored,
                "options": options,
            }
        )
    return out
