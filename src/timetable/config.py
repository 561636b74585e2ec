"""Timetable configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class TimetableConfig(BaseSettings):
    """Timetable configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Visits orchestration API
    orchestration_api_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the visits orchestration API",
    )
    orchestration_api_token: str = Field(
        default="",
        description="Bearer token sent to the orchestration API",
    )
    api_timeout_seconds: float = Field(
        default=10,
        description="Connect/read timeout for each API request, in seconds",
    )
    api_retry_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts per request before a transient failure is raised",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: TimetableConfig | None = None


def get_config() -> TimetableConfig:
    """Get the timetable configuration singleton.

    Returns:
        TimetableConfig: Timetable configuration instance
    """
    global _config
    if _config is None:
        _config = TimetableConfig()
    return _config
