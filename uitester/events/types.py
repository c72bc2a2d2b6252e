"""
Event types and enumerations for the event channel.
"""

from enum import Enum


class EventObserverType(str, Enum):
    """Supported event observer types."""

    NULL = "null"  # No-op observer for testing/development
    RICH_TERMINAL = "rich_terminal"  # Rich terminal output observer
    BUFFERED = "buffered"  # In-memory observer for UI back-ends and tests


class LogType(str, Enum):
    """Severity of a log event."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class ProgressStatus(str, Enum):
    """Status reported by a progress event."""

    UPLOADING = "uploading"
    COMPLETED = "completed"
