"""Database access layer for web quiz submissions."""

import logging
from typing import Any

from postgrest.exceptions import APIError

from app.core.logging import get_logger, log_with_context
from app.core.questions import get_option_label, get_question
from app.core.schemas_quiz import QuizAnswers, ScoreResult, UserInfo
from app.db.supabase_client import classify_api_error, get_supabase

logger = get_logger(__name__)

TABLE = "web_test_responses"


def build_response_row(user: UserInfo, answers: QuizAnswers, result: ScoreResult) -> dict[str, Any]:
    """
    Flatten a submission into a ``web_test_responses`` row.

    Each ``qN`` column holds the question text and ``qN_label`` the label of
    the chosen option, so the stored row reads without the questionnaire.
    """
    row: dict[str, Any] = {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": str(user.email),
        "location": user.location,
    }
    for qid, value in answers.model_dump(mode="json").items():
        row[qid] = get_question(qid).question
        row[f"{qid}_label"] = get_option_label(qid, value)

    row["base_score"] = result.base_score
    row["score_band"] = result.score_band.value
    return row


def insert_quiz_response(user: UserInfo, answers: QuizAnswers, result: ScoreResult) -> dict:
    """
    Persist a scored submission.

    Returns:
        The inserted row

    Raises:
        RecordStoreError: Insert rejected by the database
        StoreNotConfiguredError: Supabase credentials missing
    """
    client = get_supabase()
    row = build_response_row(user, answers, result)

    try:
        result_set = client.table(TABLE).insert(row).execute()
    except APIError as e:
        logger.error(
            f"Supabase insert error: code={e.code} message={e.message} "
            f"details={e.details} hint={e.hint}"
        )
        raise classify_api_error(e) from e

    inserted = result_set.data[0] if result_set.data else {}
    log_with_context(
        logger,
        logging.INFO,
        "Saved web test response",
        submission_id=inserted.get("id"),
        score_band=row["score_band"],
        base_score=row["base_score"],
    )
    return inserted


def list_quiz_responses(
    score_band: str | None = None,
    limit: int = 100,
    offset: int = 0,
) -> list[dict]:
    """List web submissions, newest first, optionally filtered by band."""
    client = get_supabase()
    query = client.table(TABLE).select("*")
    if score_band:
        query = query.eq("score_band", score_band)
    query = query.order("created_at", desc=True).range(offset, offset + limit - 1)

    result = query.execute()
    return result.data or []


def get_quiz_response(response_id: str) -> dict | None:
    client = get_supabase()
    result = client.table(TABLE).select("*").eq("id", response_id).execute()
    return result.data[0] if result.data else None
