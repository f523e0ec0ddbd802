"""API router for v1 endpoints."""

from fastapi import APIRouter

from app.api import admin, content, quiz, submissions, subscribe

router = APIRouter()

# Questionnaire, session stepping and scoring
router.include_router(quiz.router, tags=["quiz"])

# Submission persistence
router.include_router(submissions.router, tags=["submissions"])

# Mailing list
router.include_router(subscribe.router, tags=["subscribe"])

# Lesson content management
router.include_router(content.router)

# Admin dashboard
router.include_router(admin.router)
