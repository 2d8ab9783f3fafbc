"""
LegalConnect settings, read from the environment and .env.

ENVIRONMENT is a deployment label; AUTH_PROVIDER selects how bearer tokens are checked.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    ENVIRONMENT: str = "local"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # ===========================================
    # Database
    # ===========================================
    DATABASE_URL: str = "sqlite+aiosqlite:///./legalconnect.db"

    # ===========================================
    # Auth
    # ===========================================
    # mock: bearer token is the user id ("lawyer:<id>" marks a lawyer)
    # jwt: HS256 token with "sub" and "role" claims
    AUTH_PROVIDER: Literal["mock", "jwt"] = "mock"
    JWT_SECRET: str = ""
    JWT_ISSUER: str = "legalconnect"
    JWT_EXPIRE_MINUTES: int = 60 * 24 * 7

    # Comma-separated identities allowed to verify/reject lawyer profiles
    ADMIN_USER_IDS: str = ""

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"]
    )

    # URL for accessing the backend (for storage URLs)
    BASE_URL: str = "http://localhost:8000"

    # ===========================================
    # Storage (chat attachments)
    # ===========================================
    STORAGE_BASE_PATH: str = "./storage"
    MAX_ATTACHMENT_BYTES: int = 5 * 1024 * 1024
    UPSTREAM_TIMEOUT_SECONDS: float = 15.0

    # ===========================================
    # NLP backend (summaries, legal Q&A)
    # ===========================================
    NLP_BASE_URL: str = "http://localhost:5000"
    NLP_TIMEOUT_SECONDS: float = 60.0

    @property
    def admin_user_ids(self) -> set[str]:
        """Parsed admin identities."""
        return {
            item.strip()
            for item in self.ADMIN_USER_IDS.split(",")
            if item.strip()
        }


@lru_cache()
def get_settings() -> Settings:
    """
    Process-wide settings, loaded on first use.

    Tests that need different values construct Settings directly.
    """
    return Settings()
