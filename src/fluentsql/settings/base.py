from pydantic_settings import BaseSettings, SettingsConfigDict


class FluentSQLBaseSettings(BaseSettings):
    """Base class for fluentsql settings.

    Values are read from ``FLUENTSQL_``-prefixed environment variables and
    an optional ``.env`` file. Unknown keys are ignored so the package can
    share an environment with its host application.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLUENTSQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
