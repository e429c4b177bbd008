"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with the sample catalogue and a local administrator
account.  In a production deployment you should override at least
``SECRET_KEY`` and ``ADMIN_PASSWORD``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Chukgo Lessons API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Administrator account created when the store is initialised.  The
    # password is hashed before it is stored.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@chukgo.kr")

    # Load the sample coaches, lessons and catalogue at startup.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    # Default ``limit`` for the home page listings.
    default_top_coaches: int = int(os.getenv("DEFAULT_TOP_COACHES", "3"))
    default_recommended_lessons: int = int(os.getenv("DEFAULT_RECOMMENDED_LESSONS", "3"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
