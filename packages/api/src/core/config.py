# This project was developed with assistance from AI tools.
"""
API settings, read from the environment and the project-root ``.env``.

Provider credentials are not here: config/models.yaml references them and the
inference layer resolves them per request.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# packages/api/src/core/config.py -> repo root
_ENV_FILE = Path(__file__).resolve().parents[4] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Loan Advisor API"
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # Session tokens are minted by the web front end with a shared secret
    AUTH_DISABLED: bool = Field(
        default=False,
        description="Skip token checks and act as a dev admin. Local use only.",
    )
    AUTH_SECRET: str = "change-me-in-production"
    AUTH_ALGORITHM: str = "HS256"

    LLM_DEMO_MODE: bool = Field(
        default=False,
        description="Answer with the keyword simulator when no provider key is configured.",
    )
    CHAT_HISTORY_LIMIT: int = Field(
        default=10,
        ge=0,
        description="Most recent turns embedded in the prompt as prior context.",
    )


settings = Settings()
