"""
Structured logging setup.
"""

import sys
from typing import Optional

import structlog

from inverse.infrastructure.config import ContainerConfig
from inverse.infrastructure.logging.sanitization import StructlogSanitizer


def build_processors(config: ContainerConfig) -> list:
    """Build the structlog processor chain for a configuration."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if config.redact_context_keys:
        processors.append(StructlogSanitizer())

    if config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer(default=repr))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def configure_logging(config: Optional[ContainerConfig] = None) -> None:
    """
    Configure structlog for Inverse.

    Args:
        config: Logging settings, loaded from the environment when omitted
    """
    config = config or ContainerConfig.from_env()

    structlog.configure(
        processors=build_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(config.log_level_number),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
