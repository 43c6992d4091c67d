"""
Environment configuration using pydantic-settings.
Values come from environment variables or a local .env file.
"""

from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class EnvSettings(BaseSettings):
    # Django
    DJANGO_SECRET_KEY: str = "dev-only-secret-key-change-me"
    DJANGO_DEBUG: bool = False
    DJANGO_ALLOWED_HOSTS: Annotated[list[str], NoDecode] = [
        "localhost",
        "127.0.0.1",
        "testserver",
    ]

    # Application
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_ENGINE: str = "django.db.backends.sqlite3"
    DATABASE_NAME: str | None = None
    DATABASE_USER: str = ""
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = ""
    DATABASE_PORT: str = ""

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("DJANGO_ALLOWED_HOSTS", mode="before")
    @classmethod
    def split_hosts(cls, value):
        if isinstance(value, str):
            return [host.strip() for host in value.split(",") if host.strip()]
        return value


@lru_cache()
def get_env_settings() -> EnvSettings:
    return EnvSettings()
