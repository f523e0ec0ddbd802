"""API endpoints for the admin dashboard and submission review."""

import logging

from fastapi import APIRouter, HTTPException, Query

from app.core.dashboard import compute_stats, group_users, user_progress
from app.core.schemas_admin import DashboardResponse, UserProgress
from app.db.dashboard import (
    list_app_test_responses,
    list_dashboard_content,
    list_lesson_completions,
    list_users,
    list_web_test_responses,
)
from app.db.quiz_responses import get_quiz_response, list_quiz_responses
from app.db.supabase_client import StoreNotConfiguredError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

MSG_INTERNAL_ERROR = "Internal server error"


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard() -> DashboardResponse:
    """Users with their attempts and lessons, web submissions, content and stats."""
    try:
        users = group_users(list_users(), list_app_test_responses(), list_lesson_completions())
        web_responses = list_web_test_responses()
        content_items = list_dashboard_content()
    except StoreNotConfiguredError as e:
        logger.error(str(e))
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)

    return DashboardResponse(
        stats=compute_stats(users, web_responses, content_items),
        users=users,
        progress=[UserProgress(**user_progress(u)) for u in users],
        web_responses=web_responses,
        content_items=content_items,
    )


@router.get("/responses")
async def list_responses(
    score_band: str | None = Query(None, description="Filter by band: early-stage, developing, strong, ready"),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
) -> list[dict]:
    """List web quiz submissions, newest first."""
    try:
        return list_quiz_responses(score_band=score_band, limit=limit, offset=offset)
    except Exception:
        logger.exception("Failed to list web test responses")
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)


@router.get("/responses/{response_id}")
async def get_response(response_id: str) -> dict:
    try:
        row = get_quiz_response(response_id)
    except Exception:
        logger.exception(f"Failed to get web test response {response_id}")
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)
    if not row:
        raise HTTPException(status_code=404, detail="Response not found")
    return row
