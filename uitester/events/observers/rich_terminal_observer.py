"""
Rich terminal event observer for UI Tester.

This module provides a rich terminal-based observer that displays the log
lines and document progress of an automation run with colored output using
the Rich library.
"""

from typing import Dict, Optional

from rich.console import Console
from rich.text import Text

from uitester.events.base import EventObserver
from uitester.events.exceptions import ObserverUnavailableError
from uitester.events.models import LogEvent, ProgressEvent
from uitester.events.types import LogType, ProgressStatus

LOG_STYLES: Dict[LogType, str] = {
    LogType.INFO: "bright_blue",
    LogType.SUCCESS: "green",
    LogType.WARNING: "yellow",
    LogType.ERROR: "bold red",
}


class RichTerminalObserver(EventObserver):
    """Rich terminal-based event observer with colored output.

    Log lines are printed with a timestamp and a color per log type; progress
    events are printed as a `[current/total]` line with the percentage and
    the current file.

    Attributes:
        console (Console): Rich console instance for output
        _available (bool): Whether the observer is available
        style (str): Color style for progress lines

    Example:
        ```python
        from uitester.events import EventChannel
        from uitester.events.observers import RichTerminalObserver

        channel = EventChannel([RichTerminalObserver()])
        ```
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self._available = True
        self.style = "bright_blue"

    def is_available(self) -> bool:
        """Check if rich terminal observer is available (always True)."""
        return self._available

    async def on_log(self, event: LogEvent) -> None:
        if not self.is_available():
            raise ObserverUnavailableError("Rich terminal observer is not available")

        line = Text(f"[{event.timestamp.strftime('%H:%M:%S')}] ", style="dim")
        line.append(event.message, style=LOG_STYLES.get(event.type, self.style))
        self.console.print(line)

    async def on_progress(self, event: ProgressEvent) -> None:
        if not self.is_available():
            raise ObserverUnavailableError("Rich terminal observer is not available")

        if event.status == ProgressStatus.COMPLETED:
            message = Text(
                f"🎉 Completed: {event.current}/{event.total} ({event.percentage}%)",
                style="green",
            )
        else:
            message = Text(
                f"📤 [{event.current}/{event.total}] {event.percentage}% - {event.current_file}",
                style=self.style,
            )
        self.console.print(message)
