"""Application settings loaded from environment variables."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """Tradewatch configuration. All values come from environment variables."""

    # Agent
    agent_name: str = Field(default="Agent")

    # Anthropic
    anthropic_api_key: str = Field(default="")
    small_model: str = Field(default="haiku")
    large_model: str = Field(default="sonnet")
    llm_timeout_seconds: float = Field(default=60.0)
    llm_max_tokens: int = Field(default=2048)
    classify_attempts: int = Field(default=3)

    # Database
    database_path: Path = Field(default=Path("data/tradewatch.db"))

    # Turso (hosted libSQL): when set, overrides local database_path
    turso_database_url: str = Field(default="")
    turso_auth_token: str = Field(default="")

    # Postgres: recommendation queries are SQLite-specific, so a Postgres
    # backend disables the trade evaluator entirely.
    postgres_url: str = Field(default="")

    # Conversation
    conversation_window_size: int = Field(default=32)

    # Recommendations
    recommendation_history_limit: int = Field(default=20)
    min_message_length: int = Field(default=5)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=_env_file(), env_file_encoding="utf-8")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    def recommendations_supported(self) -> bool:
        """False when the configured storage backend can't run recommendation queries."""
        return not self.postgres_url.strip()


settings = Settings()
