"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "sqlite://",
)

# Signing keys are shared secrets, so only the HMAC family makes sense here.
SUPPORTED_JWT_ALGORITHMS = ("HS256", "HS384", "HS512")


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file.

    Built once at startup and handed to create_app(); components receive it
    explicitly instead of reading the environment themselves.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    DATABASE_URL: str = "postgresql://localhost/acme_db"
    # Create missing tables on startup (local development without alembic).
    DB_CREATE_ALL: bool = False

    # GitHub OAuth app credentials (required)
    GITHUB_CLIENT_ID: str
    GITHUB_CLIENT_SECRET: SecretStr
    GITHUB_OAUTH_URL: str = "https://github.com"
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_REQUEST_TIMEOUT_SEC: float = 10.0

    # Session token signing
    JWT_SECRET: SecretStr
    JWT_ALGORITHM: str = "HS256"
    # Unset means session tokens never expire.
    JWT_EXPIRE_MINUTES: int | None = None

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        v = v.strip()
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL or SQLite URL (e.g. postgresql://localhost/acme_db)"
            )
        # SQLAlchemy no longer accepts the postgres:// alias that hosting providers hand out.
        if v.startswith("postgres://"):
            v = "postgresql://" + v[len("postgres://"):]
        return v

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("GITHUB_CLIENT_ID")
    @classmethod
    def validate_github_client_id(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("GITHUB_CLIENT_ID must be set and non-empty")
        return v.strip()

    @field_validator("GITHUB_CLIENT_SECRET", "JWT_SECRET")
    @classmethod
    def validate_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("secret must be set and non-empty")
        return v

    @field_validator("GITHUB_OAUTH_URL", "GITHUB_API_URL")
    @classmethod
    def validate_github_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("GitHub URLs must be set and non-empty")
        s = v.strip().lower()
        if not (s.startswith("http://") or s.startswith("https://")):
            raise ValueError("GitHub URLs must use http or https (e.g. https://github.com)")
        return v.strip().rstrip("/")

    @field_validator("GITHUB_REQUEST_TIMEOUT_SEC")
    @classmethod
    def validate_github_timeout(cls, v: float) -> float:
        if v <= 0 or v > 120:
            raise ValueError(
                "GITHUB_REQUEST_TIMEOUT_SEC must be greater than 0 and at most 120"
            )
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        v = (v or "").strip().upper()
        if v not in SUPPORTED_JWT_ALGORITHMS:
            raise ValueError(
                f"JWT_ALGORITHM must be one of {', '.join(SUPPORTED_JWT_ALGORITHMS)}"
            )
        return v

    @field_validator("JWT_EXPIRE_MINUTES")
    @classmethod
    def validate_jwt_expire_minutes(cls, v: int | None) -> int | None:
        if v is None:
            return None
        if v < 1 or v > 525600:
            raise ValueError(
                "JWT_EXPIRE_MINUTES must be between 1 and 525600 (1 min to 1 year)"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance, loading it on first call."""
    return Settings()
