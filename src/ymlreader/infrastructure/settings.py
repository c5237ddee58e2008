# src/ymlreader/infrastructure/settings.py
"""
Reader settings.

Settings are plain pydantic models. Defaults suit every normal use; the host
can override them in code or through environment variables (optionally
loaded from a .env file with python-dotenv).

Example:
    >>> from ymlreader.infrastructure.settings import ReaderSettings
    >>> settings = ReaderSettings.from_env()
    >>> settings.lock_timeout
    -1.0
"""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ymlreader.infrastructure.logging import get_logger
from ymlreader.infrastructure.utility.pydantic_validation import format_validation_error

logger = get_logger(__name__)

ENV_PREFIX = "YMLREADER_"


class ReaderSettings(BaseModel):
    """Tunables for a YmlReader instance."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    lock_timeout: float = Field(
        default=-1.0,
        ge=-1,
        description="Seconds to wait for the reader lock; -1 waits forever",
    )
    max_file_bytes: int | None = Field(
        default=None,
        gt=0,
        description="Refuse files larger than this many bytes (None = no limit)",
    )

    @field_validator("lock_timeout")
    @classmethod
    def _blocking_or_non_negative(cls, value: float) -> float:
        # threading.Lock.acquire accepts -1 or a non-negative timeout only
        if value < 0 and value != -1:
            raise ValueError("lock_timeout must be -1 or a non-negative number")
        return value

    @classmethod
    def env_names(cls) -> dict[str, str]:
        """Map each field to the environment variable that feeds it."""
        return {name: f"{ENV_PREFIX}{name.upper()}" for name in cls.model_fields}

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> "ReaderSettings":
        """
        Build settings from the environment.

        Args:
            dotenv_path: Optional .env file; when None, the nearest .env from the
                         current working directory upwards. Variables already present in the
                         process environment take precedence over the file.

        Returns:
            Validated ReaderSettings

        Raises:
            ValueError: If a variable holds an invalid value
        """
        if dotenv_path is not None:
            load_dotenv(dotenv_path, override=False)
        else:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        env_names = cls.env_names()
        raw = {
            field: os.environ[env_name]
            for field, env_name in env_names.items()
            if os.environ.get(env_name, "").strip()
        }
        try:
            settings = cls.model_validate(raw)
        except ValidationError as e:
            message = format_validation_error(e, "reader settings", env_names)
            logger.error(message)
            raise ValueError(message) from e

        logger.debug(f"Reader settings loaded from environment: {settings.model_dump()}")
        return settings
