import logging
from typing import Optional

from pydantic import Field, field_validator

from fluentsql.constants import Dialect
from .base import FluentSQLBaseSettings


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class _Settings(FluentSQLBaseSettings):

    dialect: str = Field(
        default=Dialect.MYSQL.value,
        description="Dialect used by QueryBuilderFactory.create() when no dialect is passed (e.g., mysql, postgres)"
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level applied by setup_logging()"
    )
    app_env: str = Field(
        default="dev",
        description="Deployment environment attached to every log record (e.g., dev, qa, prod)"
    )

    @field_validator("dialect")
    @classmethod
    def validate_dialect(cls, v: str) -> str:
        """Normalize the dialect name.

        Whether the dialect is actually registered is checked by the
        factory, since dialects can be registered after settings load.
        """
        v = v.strip().lower()
        if not v:
            raise ValueError("Dialect name must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        return v

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelName(self.log_level)


_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    Settings are loaded from the environment on first access and reused
    afterwards so every builder created by the factory agrees on the
    default dialect.

    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        Settings: The singleton Settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        # Pick up a changed FLUENTSQL_DIALECT
        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```

    Note:
        Reading is thread-safe; the initial creation is not. Settings are
        expected to be loaded once at startup.
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh _Settings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
