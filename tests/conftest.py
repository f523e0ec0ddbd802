"""Pytest configuration and fixtures."""

import os

import pytest

from app.core.schemas_quiz import QuizAnswers, UserInfo


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["SUPABASE_URL"] = "https://test.supabase.co"
    os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-key"
    os.environ["MAILCHIMP_API_KEY"] = "test-mailchimp-key-us21"
    os.environ["MAILCHIMP_SERVER_PREFIX"] = "us21"
    os.environ["MAILCHIMP_LIST_ID"] = "list123"
    os.environ["QUIZ_ENV"] = "test"

    from app.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_answers(scored: list[int], fmt: str = "lessons") -> QuizAnswers:
    """Answer set from nine scored values plus a learning format."""
    payload = {f"q{i}": v for i, v in enumerate(scored, start=1)}
    payload["q10"] = fmt
    return QuizAnswers(**payload)


@pytest.fixture
def answers_factory():
    """Build answer sets: ``answers_factory([3] * 9, "stories")``."""
    return make_answers


@pytest.fixture
def all_yes_answers() -> QuizAnswers:
    return make_answers([3] * 9)


@pytest.fixture
def user_info() -> UserInfo:
    return UserInfo(first_name="Ada", last_name="Lovelace", email="ada@example.com", location="London")
