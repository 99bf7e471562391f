from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import PROJECT_ROOT


class Settings(BaseSettings):
    """
    Application configuration.

    All variables are prefixed with BQ_ (e.g. BQ_PORT, BQ_DATABASE_URL).
    """

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3000, gt=0, le=65535)

    # Record store
    DATA_PATH: Path = Field(default_factory=lambda: PROJECT_ROOT / "data")
    DATABASE_URL: str | None = None
    STORE_TIMEOUT_SECONDS: float = Field(default=5.0, gt=0)

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def db_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DATA_PATH}/books.db"


@lru_cache
def get_settings() -> Settings:
    """Load settings from environment, failing fast on invalid values."""
    from pydantic import ValidationError

    try:
        return Settings.model_validate({})
    except ValidationError as e:
        invalid = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise SystemExit(
            f"Invalid environment variable(s): {', '.join(f'BQ_{v}' for v in invalid)}"
        ) from None
