"""
In-memory event observer.
"""

from typing import List, Optional, Union

from uitester.events.base import EventObserver
from uitester.events.models import LogEvent, ProgressEvent
from uitester.events.types import LogType


class BufferedObserver(EventObserver):
    """Observer that keeps every event it receives, in order.

    Useful for UI back-ends that poll the state of a run, and for tests.

    Attributes:
        events (List[Union[ProgressEvent, LogEvent]]): All events in arrival order
    """

    def __init__(self) -> None:
        self.events: List[Union[ProgressEvent, LogEvent]] = []

    def is_available(self) -> bool:
        return True

    async def on_progress(self, event: ProgressEvent) -> None:
        self.events.append(event)

    async def on_log(self, event: LogEvent) -> None:
        self.events.append(event)

    @property
    def progress(self) -> List[ProgressEvent]:
        return [e for e in self.events if isinstance(e, ProgressEvent)]

    @property
    def logs(self) -> List[LogEvent]:
        return [e for e in self.events if isinstance(e, LogEvent)]

    @property
    def last_progress(self) -> Optional[ProgressEvent]:
        progress = self.progress
        return progress[-1] if progress else None

    def messages(self, log_type: Optional[LogType] = None) -> List[str]:
        """Log messages, optionally restricted to one log type."""
        return [e.message for e in self.logs if log_type is None or e.type == log_type]

    def clear(self) -> None:
        self.events.clear()
