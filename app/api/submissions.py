"""API endpoints for saving scored quiz submissions."""

import logging

from fastapi import APIRouter, HTTPException

from app.api.quiz import band_info
from app.core.quiz_session import QuizSessionError, mark_submitted, to_answers
from app.core.schemas_quiz import (
    CompleteQuizRequest,
    CompleteQuizResponse,
    QuizAnswers,
    ScoreResult,
    SubmitTestRequest,
    SubmitTestResponse,
    UserInfo,
)
from app.core.scoring import calculate_score
from app.db.quiz_responses import insert_quiz_response
from app.db.supabase_client import RecordStoreError, StoreErrorKind, StoreNotConfiguredError

logger = logging.getLogger(__name__)

router = APIRouter()

MSG_DUPLICATE = "Test response already exists"
MSG_INVALID_DATA = "Invalid test data provided"
MSG_UNAVAILABLE = "Something went wrong. Please try again in a moment."
MSG_NOT_CONFIGURED = "Oops! Something went wrong on our end. Please try again later."


def _save(user: UserInfo, answers: QuizAnswers, result: ScoreResult) -> str:
    """
    Persist a submission and return its id.

    Raises:
        HTTPException: 400 for duplicate/invalid rows, 500 otherwise
    """
    try:
        row = insert_quiz_response(user, answers, result)
    except StoreNotConfiguredError:
        logger.error("Missing Supabase environment variables")
        raise HTTPException(status_code=500, detail=MSG_NOT_CONFIGURED)
    except RecordStoreError as e:
        if e.kind == StoreErrorKind.UNIQUE_VIOLATION:
            raise HTTPException(status_code=400, detail=MSG_DUPLICATE)
        if e.kind == StoreErrorKind.CHECK_VIOLATION:
            raise HTTPException(status_code=400, detail=MSG_INVALID_DATA)
        raise HTTPException(status_code=500, detail=MSG_UNAVAILABLE)
    except Exception:
        logger.exception("Submit test error")
        raise HTTPException(status_code=500, detail=MSG_UNAVAILABLE)

    return str(row.get("id", ""))


@router.post("/submit-test", response_model=SubmitTestResponse)
async def submit_test(request: SubmitTestRequest) -> SubmitTestResponse:
    """Score and save a completed quiz."""
    result = calculate_score(request.answers)
    response_id = _save(request, request.answers, result)
    return SubmitTestResponse(id=response_id, result=result)


@router.post("/quiz/complete", response_model=CompleteQuizResponse)
async def complete_quiz(request: CompleteQuizRequest) -> CompleteQuizResponse:
    """
    Finish a session: score it, then try to save it.

    The score is returned even when saving fails; ``saved`` and ``message``
    report the outcome of the write. The returned session is locked against
    further answers.
    """
    if request.session.submitted:
        raise HTTPException(status_code=400, detail="Quiz already submitted")

    try:
        answers = to_answers(request.session)
    except QuizSessionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = calculate_score(answers)
    submitted = mark_submitted(request.session)

    try:
        response_id = _save(request, answers, result)
    except HTTPException as e:
        logger.warning(f"Quiz result not saved for {request.email}: {e.detail}")
        return CompleteQuizResponse(
            result=result,
            band=band_info(result.score_band),
            session=submitted,
            saved=False,
            message=e.detail,
        )

    return CompleteQuizResponse(
        result=result,
        band=band_info(result.score_band),
        session=submitted,
        saved=True,
        id=response_id,
    )

