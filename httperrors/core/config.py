"""
Library configuration.

Loads settings from environment variables (prefixed ``HTTPERRORS_``)
and an optional .env file. Values are read at call time, so tests and
applications may patch ``settings`` after import.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from httperrors.domain.entities import ErrorType, Level


class Settings(BaseSettings):
    """Settings loaded from environment.

    Attributes:
        default_level: Level assigned when a normalization call gives none.
        default_type: Type assigned when a normalization call gives none.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        expose_headers: Copy ``output.headers`` onto FastAPI responses.
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTPERRORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_level: Level = Level.CRITICAL
    default_type: ErrorType = ErrorType.PROGRAMMING
    log_level: str = "INFO"
    expose_headers: bool = True


settings = Settings()
