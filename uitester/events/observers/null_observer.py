"""
No-op event observer.
"""

from uitester.events.base import EventObserver
from uitester.events.exceptions import ObserverUnavailableError
from uitester.events.models import LogEvent, ProgressEvent


class NullEventObserver(EventObserver):
    """No-op event observer for when no output is needed."""

    def __init__(self) -> None:
        self._available = True

    def is_available(self) -> bool:
        """Check if null observer is available (always True)."""
        return self._available

    async def on_progress(self, event: ProgressEvent) -> None:
        if not self.is_available():
            raise ObserverUnavailableError("Null observer is not available")

    async def on_log(self, event: LogEvent) -> None:
        if not self.is_available():
            raise ObserverUnavailableError("Null observer is not available")
