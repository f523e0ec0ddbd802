"""Pydantic schemas for the admin dashboard."""

from typing import Any

from pydantic import BaseModel, Field


class UserWithAttempts(BaseModel):
    user: dict[str, Any]
    attempts: list[dict[str, Any]] = Field(default_factory=list)
    lesson_completions: list[dict[str, Any]] = Field(default_factory=list)


class DashboardStats(BaseModel):
    total_users: int = 0
    total_attempts: int = 0
    average_score: int = 0
    retake_count: int = 0
    web_response_count: int = 0
    content_count: int = 0
    web_band_counts: dict[str, int] = Field(default_factory=dict)


class UserProgress(BaseModel):
    user_id: str
    full_name: str
    base_score: int
    latest_score: int
    improvement: int
    attempt_count: int
    lessons_completed: int
    time_spent_seconds: int


class DashboardResponse(BaseModel):
    stats: DashboardStats
    users: list[UserWithAttempts]
    progress: list[UserProgress]
    web_responses: list[dict[str, Any]]
    content_items: list[dict[str, Any]]
