"""Read-only queries feeding the admin dashboard."""

from app.core.logging import get_logger
from app.db.supabase_client import get_supabase

logger = get_logger(__name__)

USER_COLUMNS = (
    "id, email, first_name, last_name, base_score, latest_score, latest_score_band, "
    "assessment_count, created_at, current_streak_days, longest_streak_days, "
    "total_content_completed, total_learning_minutes"
)


def _fetch(table: str, columns: str, order_by: str, desc: bool) -> list[dict]:
    """Select ordered rows; a failed read is logged and yields an empty list."""
    client = get_supabase()
    try:
        result = client.table(table).select(columns).order(order_by, desc=desc).execute()
    except Exception as e:
        logger.error(f"Error fetching {table}: {e}")
        return []
    return result.data or []


def list_users() -> list[dict]:
    return _fetch("users", USER_COLUMNS, "created_at", desc=True)


def list_app_test_responses() -> list[dict]:
    """Signed-in assessment attempts, oldest first."""
    return _fetch("test_responses", "*", "created_at", desc=False)


def list_web_test_responses() -> list[dict]:
    return _fetch("web_test_responses", "*", "created_at", desc=True)


def list_lesson_completions() -> list[dict]:
    return _fetch("user_lesson_completions", "*", "completed_at", desc=False)


def list_dashboard_content() -> list[dict]:
    return _fetch("content_items", "*", "display_order", desc=False)
