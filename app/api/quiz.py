"""API endpoints for the questionnaire, session stepping and scoring."""

import logging

from fastapi import APIRouter, HTTPException

from app.core.questions import serialize_questions
from app.core.quiz_session import (
    QuizSessionError,
    go_back,
    is_complete,
    next_question_id,
    record_answer,
    start_session,
)
from app.core.schemas_quiz import (
    QuizAnswers,
    QuizSession,
    RecordAnswerRequest,
    ScoreBand,
    ScoreBandInfo,
    ScoreResponse,
    ScoreResult,
    SessionResponse,
)
from app.core.scoring import calculate_score, get_score_band_description, get_score_band_label

logger = logging.getLogger(__name__)

router = APIRouter()


def band_info(band: ScoreBand) -> ScoreBandInfo:
    return ScoreBandInfo(
        band=band,
        label=get_score_band_label(band),
        description=get_score_band_description(band),
    )


def score_response(result: ScoreResult) -> ScoreResponse:
    return ScoreResponse(result=result, band=band_info(result.score_band))


def _session_response(session: QuizSession) -> SessionResponse:
    return SessionResponse(
        session=session,
        complete=is_complete(session),
        next_question_id=next_question_id(session),
    )


@router.get("/questions")
async def list_questions() -> list[dict]:
    """Return the ordered questionnaire."""
    return serialize_questions()


@router.get("/quiz/bands", response_model=list[ScoreBandInfo])
async def list_bands() -> list[ScoreBandInfo]:
    """Return every score band with its label and description, lowest first."""
    return [band_info(band) for band in ScoreBand]


@router.post("/quiz/score", response_model=ScoreResponse)
async def score_answers(answers: QuizAnswers) -> ScoreResponse:
    """Score a complete answer set without saving it."""
    return score_response(calculate_score(answers))


@router.post("/quiz/session", response_model=SessionResponse)
async def new_session() -> SessionResponse:
    return _session_response(start_session())


@router.post("/quiz/session/answer", response_model=SessionResponse)
async def answer_question(request: RecordAnswerRequest) -> SessionResponse:
    """Record one answer and return the updated session."""
    try:
        session = record_answer(request.session, request.question_id, request.value)
    except QuizSessionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _session_response(session)


@router.post("/quiz/session/back", response_model=SessionResponse)
async def step_back(session: QuizSession) -> SessionResponse:
    try:
        return _session_response(go_back(session))
    except QuizSessionError as e:
        raise HTTPException(status_code=400, detail=str(e))
