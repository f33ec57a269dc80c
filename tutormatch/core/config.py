"""
Core Configuration Module

Centralizes environment configuration for the tutor matching service.
Provides a singleton Settings object with defaults for the tutor store client
and the search endpoints.

Usage:
    from tutormatch.core.config import settings

    print(settings.APP_ENV)
    print(settings.TUTOR_STORE_URL)
"""

import os
from typing import List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    Values are read on access so tests can override them with monkeypatch.setenv.
    """

    # ==================== Application Settings ====================

    @property
    def APP_ENV(self) -> str:
        """Application environment: dev, staging, production"""
        return os.getenv("APP_ENV", "dev")

    @property
    def LOG_LEVEL(self) -> str:
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""
        return os.getenv("LOG_LEVEL", "INFO")

    # ==================== Tutor Store ====================

    @property
    def TUTOR_STORE_URL(self) -> str:
        """Base URL of the tutor store service (tutors, subjects, weekly availability)"""
        return os.getenv("TUTOR_STORE_URL", "http://localhost:3001")

    @property
    def TUTOR_STORE_TIMEOUT(self) -> float:
        """Tutor store HTTP timeout in seconds"""
        return float(os.getenv("TUTOR_STORE_TIMEOUT", "10.0"))

    @property
    def TUTOR_STORE_MAX_CONNECTIONS(self) -> int:
        """Maximum HTTP connections in the tutor store pool"""
        return int(os.getenv("TUTOR_STORE_MAX_CONNECTIONS", "50"))

    @property
    def TUTOR_STORE_MAX_KEEPALIVE(self) -> int:
        """Maximum keepalive connections in the tutor store pool"""
        return int(os.getenv("TUTOR_STORE_MAX_KEEPALIVE", "10"))

    # ==================== Search ====================

    @property
    def SEARCH_RESULT_LIMIT(self) -> int:
        """Maximum number of ranked tutors returned by /tutors/search"""
        return int(os.getenv("SEARCH_RESULT_LIMIT", "50"))

    # ==================== CORS Settings ====================

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Allowed CORS origins"""
        origins_str = os.getenv("CORS_ORIGINS", "*")
        if origins_str == "*":
            return ["*"]
        return [origin.strip() for origin in origins_str.split(",")]

    @property
    def CORS_ALLOW_CREDENTIALS(self) -> bool:
        """Allow credentials in CORS requests"""
        return os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"


# ==================== Singleton Instance ====================

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the singleton Settings instance.

    Example:
        >>> from tutormatch.core.config import get_settings
        >>> get_settings().TUTOR_STORE_URL
        'http://localhost:3001'
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


settings = get_settings()


# ==================== Helper Functions ====================

def is_production() -> bool:
    """True if APP_ENV is 'production' or 'prod'."""
    env = settings.APP_ENV.lower()
    return env in ("production", "prod")

