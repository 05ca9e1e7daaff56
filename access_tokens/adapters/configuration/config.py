# access_tokens/adapters/configuration/config.py

from typing import Optional
from logging import getLevelName
from pydantic import Field, PostgresDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Debug flag
    DEBUG: bool = False

    # Database
    DB_DRIVER: str = "psycopg2"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "access_tokens"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)
    DB_ECHO: bool = False
    DB_CREATE_ALL: bool = True

    # API key gate (unset or empty leaves the API open)
    API_KEY: Optional[str] = None

    # Expired token sweep, 0 disables it
    TOKEN_CLEANUP_INTERVAL_MINUTES: int = Field(default=0, ge=0)

    # API Documentation
    SCHEMA_VISIBILITY: bool = True

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            value = str(value)
            # Plain URLs as exported by most hosting providers
            for prefix in ("postgres://", "postgresql://"):
                if value.startswith(prefix):
                    return "postgresql+psycopg2://" + value[len(prefix):]
            return value

        data = info.data
        return str(PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER', 'psycopg2')}",
            username=data["POSTGRES_USER"],
            password=data["POSTGRES_PASSWORD"],
            host=data["POSTGRES_HOST"],
            port=data["POSTGRES_PORT"],
            path=data["POSTGRES_DB"],
        ))

    @field_validator("API_KEY", mode="before")
    def empty_api_key_is_unset(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensures the value is a valid logging level."""
        lvl = str(v).upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
