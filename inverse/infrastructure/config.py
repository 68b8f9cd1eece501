"""
Configuration for Inverse.

The container itself needs nothing beyond its id; this module gathers the
settings used by the global root container and logging setup.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from inverse.shared.exceptions import ConfigurationError

ENV_PREFIX = "INVERSE_"

LOG_FORMATS = ("console", "json")


class ContainerConfig(BaseModel):
    """Configuration for the root container and its logging."""
    container_id: str = "root"
    log_level: str = "INFO"
    log_format: str = "console"
    redact_context_keys: bool = True

    @field_validator("container_id")
    @classmethod
    def validate_container_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("container_id cannot be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}, got: {value}")
        return fmt

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for the stdlib logging module."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ContainerConfig":
        """
        Load configuration from environment variables.

        Reads ``INVERSE_CONTAINER_ID``, ``INVERSE_LOG_LEVEL``,
        ``INVERSE_LOG_FORMAT`` and ``INVERSE_REDACT_CONTEXT_KEYS``; unset
        variables keep their defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ConfigurationError: If a value fails validation
        """
        environ = os.environ if environ is None else environ

        values = {}
        for field_name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None:
                values[field_name] = raw

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.errors()[0]['msg']}",
                details={"errors": [error["loc"] for error in e.errors()]}
            ) from e
