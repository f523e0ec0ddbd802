"""Pydantic schemas for the readiness quiz, scoring, and submissions."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

ScoredValue = Literal[1, 2, 3]
BinaryValue = Literal[1, 3]

SCORED_QUESTION_IDS = ("q1", "q2", "q3", "q4", "q5", "q6", "q7", "q8", "q9")
PREFERENCE_QUESTION_ID = "q10"


class ScoreBand(str, Enum):
    """Ordered readiness bands, lowest first."""

    EARLY_STAGE = "early-stage"
    DEVELOPING = "developing"
    STRONG = "strong"
    READY = "ready"


class LearningFormat(str, Enum):
    LESSONS = "lessons"
    ARTICLES = "articles"
    STORIES = "stories"
    DEBATES = "debates"
    CONVERSATIONS = "conversations"


class QuizAnswers(BaseModel):
    """A complete answer set. Each scored answer's value is also its point weight."""

    q1: ScoredValue
    q2: BinaryValue
    q3: ScoredValue
    q4: ScoredValue
    q5: ScoredValue
    q6: ScoredValue
    q7: ScoredValue
    q8: ScoredValue
    q9: ScoredValue
    q10: LearningFormat

    def scored_values(self) -> list[int]:
        return [getattr(self, qid) for qid in SCORED_QUESTION_IDS]


class ScoreResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_score: int = Field(..., ge=0, le=100, description="Normalized 0-100 readiness score")
    score_band: ScoreBand
    total_points: int = Field(..., description="Sum of the nine scored answers")
    max_points: int = Field(..., description="Highest reachable total")


class ScoreBandInfo(BaseModel):
    band: ScoreBand
    label: str
    description: str


class ScoreResponse(BaseModel):
    result: ScoreResult
    band: ScoreBandInfo


class UserInfo(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    location: str | None = None


# ============================================================================
# Quiz session (explicit in-progress state)
# ============================================================================


class QuizSession(BaseModel):
    """In-progress answer set, passed back and forth with every step."""

    model_config = ConfigDict(frozen=True)

    answers: dict[str, int | LearningFormat] = Field(default_factory=dict)
    current_step: int = Field(default=0, ge=0)
    submitted: bool = False


class RecordAnswerRequest(BaseModel):
    session: QuizSession = Field(default_factory=QuizSession)
    question_id: str
    value: int | str


class SessionResponse(BaseModel):
    session: QuizSession
    complete: bool
    next_question_id: str | None = None


# ============================================================================
# Submissions
# ============================================================================


class SubmitTestRequest(UserInfo):
    answers: QuizAnswers


class SubmitTestResponse(BaseModel):
    success: bool = True
    message: str = "Test response saved successfully"
    id: str
    result: ScoreResult


class CompleteQuizRequest(UserInfo):
    session: QuizSession


class CompleteQuizResponse(BaseModel):
    """Score is always present; ``saved`` reports whether persistence worked."""

    result: ScoreResult
    band: ScoreBandInfo
    session: QuizSession
    saved: bool
    id: str | None = None
    message: str | None = None


class WebTestResponse(BaseModel):
    id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str
    location: str | None = None
    base_score: int
    score_band: str
    created_at: str | None = None


# ============================================================================
# Mailing list
# ============================================================================


class SubscribeRequest(BaseModel):
    email: str = Field(default="")
    first_name: str = Field(default="")
    last_name: str = Field(default="")
    location: str | None = None


class SubscribeResponse(BaseModel):
    success: bool = True
    message: str = "Successfully subscribed to the mailing list"
    subscriber_id: str
