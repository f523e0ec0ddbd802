"""Configuration management for the Founder Readiness quiz service."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Supabase configuration (checked per request, so /health works without it)
    SUPABASE_URL: str = Field(default="", description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: str = Field(default="", description="Supabase service role key")

    # Mailchimp configuration
    MAILCHIMP_API_KEY: str = Field(default="", description="Mailchimp Marketing API key")
    MAILCHIMP_SERVER_PREFIX: str = Field(
        default="", description="Mailchimp data center prefix, e.g. us21"
    )
    MAILCHIMP_LIST_ID: str = Field(default="", description="Audience (list) ID for new subscribers")
    MAILCHIMP_TAG: str | None = Field(
        default=None, description="Tag applied to every new subscriber"
    )
    MAILCHIMP_TIMEOUT_SECONDS: float = Field(default=15.0, description="Mailchimp request timeout")

    # Environment
    QUIZ_ENV: str = Field(default="dev", description="Environment: dev, staging, prod, test")

    # Content defaults
    DEFAULT_CONTENT_AUTHOR: str = Field(
        default="Founder Groundworks Team", description="Author used when none is supplied"
    )

    @property
    def supabase_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)

    @property
    def mailchimp_configured(self) -> bool:
        return bool(
            self.MAILCHIMP_API_KEY and self.MAILCHIMP_SERVER_PREFIX and self.MAILCHIMP_LIST_ID
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()
