"""Settings module for fluentsql, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority)
    2. ``.env`` file in the working directory
    3. Default Values in code (lowest priority)

Environment Variable Naming:
    - Format: FLUENTSQL_SETTING_NAME
    - Case: insensitive

Quick Start:
    >>> from fluentsql.settings import get_settings
    >>> settings = get_settings()
    >>> settings.dialect
    'mysql'

Available settings:
    - FLUENTSQL_DIALECT: Default dialect for the query builder factory
    - FLUENTSQL_LOG_LEVEL: Log level for setup_logging()
    - FLUENTSQL_APP_ENV: Environment name attached to log records
"""

from .main import _Settings, get_settings, _reload_settings
from .base import FluentSQLBaseSettings

__all__ = [
    "get_settings",
]
