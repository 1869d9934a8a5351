"""Runtime settings for underfold, read from the environment."""

import logging
import os

from pydantic import BaseModel, ValidationError, field_validator

__all__ = ["Settings", "settings"]

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level '{value}', expected one of {_LEVELS}")
        return level

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def load(cls) -> "Settings":
        """
        Build settings from ``UNDERFOLD_LOG_LEVEL`` and ``UNDERFOLD_LOG_FORMAT``.

        Unset variables fall back to the field defaults. An invalid value is
        reported as a warning and the defaults are used instead.
        """
        values = {}
        level = os.getenv("UNDERFOLD_LOG_LEVEL")
        if level:
            values["log_level"] = level
        fmt = os.getenv("UNDERFOLD_LOG_FORMAT")
        if fmt:
            values["log_format"] = fmt
        try:
            return cls(**values)
        except ValidationError as e:
            logging.getLogger("underfold").warning(
                "ignoring invalid underfold environment settings: %s", e.errors()[0]["msg"]
            )
            return cls()


settings = Settings.load()
