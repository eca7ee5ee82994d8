"""Runtime settings read from ONENIGHT_* environment variables and .env."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    discussion_rounds: int = 3
    # Deadline for a single oracle call; an expired call leaves the step retryable
    oracle_timeout_seconds: float = 60.0
    oracle_model: str = "gpt-5"
    oracle_temperature: float = 1.0
    openai_api_key: str = ""
    session_ttl_seconds: float = 3600.0
    completed_session_ttl_seconds: float = 300.0
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="ONENIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )


settings = Settings()
