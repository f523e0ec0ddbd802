"""Admin dashboard aggregation.

Pure functions over rows already read from the store: attempts and lesson
completions are grouped under their user and summary stats are derived.
"""

import math
from collections import Counter
from typing import Any

from app.core.schemas_admin import DashboardStats, UserWithAttempts
from app.core.schemas_quiz import ScoreBand


def group_users(
    users: list[dict[str, Any]],
    attempts: list[dict[str, Any]],
    lesson_completions: list[dict[str, Any]],
) -> list[UserWithAttempts]:
    """
    Attach attempts and lesson completions to their users.

    Rows whose ``user_id`` matches no user are dropped. Only users with at
    least one attempt are returned, newest account first.
    """
    by_id: dict[str, UserWithAttempts] = {
        u["id"]: UserWithAttempts(user=u) for u in users
    }

    for attempt in attempts:
        owner = by_id.get(attempt.get("user_id") or "")
        if owner is not None:
            owner.attempts.append(attempt)

    for completion in lesson_completions:
        owner = by_id.get(completion.get("user_id") or "")
        if owner is not None:
            owner.lesson_completions.append(completion)

    grouped = [u for u in by_id.values() if u.attempts]
    grouped.sort(key=lambda u: u.user.get("created_at") or "", reverse=True)
    return grouped


def _current_score(user: dict[str, Any]) -> int:
    latest = user.get("latest_score")
    if latest is not None:
        return latest
    base = user.get("base_score")
    return base if base is not None else 0


def compute_stats(
    users: list[UserWithAttempts],
    web_responses: list[dict[str, Any]],
    content_items: list[dict[str, Any]],
) -> DashboardStats:
    total_attempts = sum(len(u.attempts) for u in users)
    retake_count = sum(1 for u in users for a in u.attempts if a.get("is_retake"))

    average_score = 0
    if users:
        mean = sum(_current_score(u.user) for u in users) / len(users)
        average_score = math.floor(mean + 0.5)

    band_counts = Counter(r.get("score_band") for r in web_responses)

    return DashboardStats(
        total_users=len(users),
        total_attempts=total_attempts,
        average_score=average_score,
        retake_count=retake_count,
        web_response_count=len(web_responses),
        content_count=len(content_items),
        web_band_counts={band.value: band_counts.get(band.value, 0) for band in ScoreBand},
    )


def user_progress(entry: UserWithAttempts) -> dict[str, Any]:
    """Per-user summary: score movement, completed lessons, time spent."""
    user = entry.user
    base = user.get("base_score") or 0
    latest = _current_score(user)
    completed = [c for c in entry.lesson_completions if c.get("status") == "completed"]

    return {
        "user_id": user["id"],
        "full_name": f"{user.get('first_name') or ''} {user.get('last_name') or ''}".strip()
        or "Unknown User",
        "base_score": base,
        "latest_score": latest,
        "improvement": latest - base,
        "attempt_count": len(entry.attempts),
        "lessons_completed": len(completed),
        "time_spent_seconds": sum(c.get("time_spent_seconds") or 0 for c in entry.lesson_completions),
    }
