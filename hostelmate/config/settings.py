"""
Runtime settings, read from the environment and an optional ``.env`` file.
"""

import json
import secrets
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional, Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

load_dotenv(dotenv_path=Path(".") / ".env")


def _ephemeral_secret() -> str:
    # Tokens signed with this stop verifying after a restart
    return secrets.token_urlsafe(32)


class Settings(BaseSettings):
    """Every field can be overridden by an environment variable of the same name."""

    # Application
    APP_NAME: str = "HostelMate"
    API_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    RELOAD: bool = False
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(default=["*"])

    # Database
    DATABASE_URL: str = "sqlite:///./hostelmate.db"
    DATABASE_ECHO: bool = False
    DB_POOL_SIZE: int = 20
    DB_POOL_OVERFLOW: int = 10
    DB_CONNECT_ARGS: Dict[str, Any] = {}

    # Auth
    JWT_SECRET_KEY: str = Field(default_factory=_ephemeral_secret)
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    PASSWORD_BCRYPT_ROUNDS: int = 12

    # Listing
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Logging and error reporting
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True
    SENTRY_DSN: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Accept a JSON list or a comma separated string."""
        if not isinstance(v, str):
            return v
        text = v.strip()
        if text.startswith("[") and text.endswith("]"):
            try:
                return json.loads(text)
            except json.JSONDecodeError:
                pass
        return [origin.strip() for origin in text.split(",") if origin.strip()]

    def get_database_url(self) -> str:
        return self.DATABASE_URL

    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
