from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import normalize_level_name, to_lowercase

class Settings(BaseSettings):
    """
    Process-wide logger settings.

    Every field has a default, so nothing has to be configured: the defaults
    give a DEBUG-level logger with call-site capture writing to standard output.
    Any field can be overridden from the environment with the SLOGGER_ prefix,
    e.g. SLOGGER_LOG_LEVEL=info.
    """

    # Minimum severity; records below it never reach the renderer
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARN", "ERROR"] = "DEBUG"

    # Resolve file/line/function for each record
    LOG_ADD_SOURCE: bool = True

    # "auto" honours NO_COLOR and only colors TTY sinks
    LOG_COLOR: Literal["auto", "always", "never"] = "auto"

    # Sink for the default logger
    LOG_STREAM: Literal["stdout", "stderr"] = "stdout"

    # Name of the logger configured by setup_logging()
    LOGGER_NAME: str = "slogger"

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize LOG_LEVEL to one of the four upper-case level names.

        This validator runs before the Literal check (mode="before"), so "info",
        " Info " and "WARNING" are all accepted.
        """
        return normalize_level_name(v)

    @field_validator("LOG_COLOR", "LOG_STREAM", mode="before")
    def normalize_lowercase(cls, v: str | None) -> str | None:
        return to_lowercase(v)

    model_config = SettingsConfigDict(
        env_prefix="SLOGGER_",
        extra="ignore",
    )

# get_settings() takes no arguments and always returns the same settings from the environment,
# so caching it with @lru_cache() is fine.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
