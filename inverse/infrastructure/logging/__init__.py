"""
Structured logging configuration and sanitization.
"""

from .config import build_processors, configure_logging
from .sanitization import LogSanitizer, StructlogSanitizer

__all__ = [
    "build_processors",
    "configure_logging",
    "LogSanitizer",
    "StructlogSanitizer"
]
