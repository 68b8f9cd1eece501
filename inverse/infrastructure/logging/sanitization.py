"""
Logging sanitization for context keys.

Context keys are arbitrary caller data and are logged when contexts are
created or selected. This module masks values stored under sensitive field
names before they reach a renderer.
"""

from typing import Any, Dict, FrozenSet, List, Optional

REPLACEMENT_TEXT = "***REDACTED***"

# Sensitive field name fragments (case-insensitive)
SENSITIVE_FIELD_PATTERNS = frozenset({
    'password', 'passwd', 'secret', 'token', 'api_key', 'apikey',
    'private_key', 'access_key', 'authorization', 'credential', 'session'
})

# Event fields that carry caller data
SANITIZED_EVENT_FIELDS = ('context',)


class LogSanitizer:
    """Masks sensitive values inside nested dicts and lists."""

    def __init__(self, patterns: Optional[FrozenSet[str]] = None, max_depth: int = 10):
        self.patterns = patterns if patterns is not None else SENSITIVE_FIELD_PATTERNS
        self.max_depth = max_depth

    def is_sensitive(self, key: Any) -> bool:
        """Check if a field name indicates sensitive data."""
        lowered = str(key).lower()
        return any(pattern in lowered for pattern in self.patterns)

    def sanitize(self, value: Any, depth: int = 0) -> Any:
        """
        Return a copy of ``value`` with sensitive dict entries redacted.

        Values that are neither dicts nor lists are returned unchanged.
        """
        if depth >= self.max_depth:
            return "max_depth_reached"

        if isinstance(value, dict):
            return self._sanitize_dict(value, depth + 1)
        if isinstance(value, (list, tuple)):
            return self._sanitize_list(value, depth + 1)
        return value

    def _sanitize_dict(self, data: Dict[Any, Any], depth: int) -> Dict[Any, Any]:
        sanitized = {}
        for key, value in data.items():
            if self.is_sensitive(key):
                sanitized[key] = REPLACEMENT_TEXT
            else:
                sanitized[key] = self.sanitize(value, depth)
        return sanitized

    def _sanitize_list(self, data: List[Any], depth: int) -> List[Any]:
        return [self.sanitize(item, depth) for item in data]


class StructlogSanitizer:
    """Structlog processor for sanitizing caller data in log events."""

    def __init__(self, sanitizer: Optional[LogSanitizer] = None):
        """Initialize with optional custom sanitizer."""
        self.sanitizer = sanitizer or LogSanitizer()

    def __call__(self, logger, method_name, event_dict):
        """
        Structlog processor that sanitizes event data.

        Args:
            logger: Logger instance
            method_name: Logging method name
            event_dict: Event dictionary to sanitize

        Returns:
            Event dictionary with caller data fields redacted
        """
        for field in SANITIZED_EVENT_FIELDS:
            if field in event_dict:
                event_dict[field] = self.sanitizer.sanitize(event_dict[field])
        return event_dict
