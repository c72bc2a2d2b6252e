"""
Abstract base class for event observers.
"""

from abc import ABC, abstractmethod

from uitester.events.models import LogEvent, ProgressEvent


class EventObserver(ABC):
    """Abstract base class for event observers.

    This class defines the interface for receiving the progress and log
    events of an automation run (terminal output, UI back-ends, queues).
    Any number of observers can be registered on one channel.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the observer is available and ready to receive events.

        Returns:
            True if observer is available, False otherwise
        """
        raise NotImplementedError("is_available() must be implemented by subclasses")

    @abstractmethod
    async def on_progress(self, event: ProgressEvent) -> None:
        """Handle a progress event.

        Args:
            event: Progress of the run

        Raises:
            ObserverUnavailableError: If observer is not available
        """
        raise NotImplementedError("on_progress() must be implemented by subclasses")

    @abstractmethod
    async def on_log(self, event: LogEvent) -> None:
        """Handle a log event.

        Args:
            event: Log line of the run

        Raises:
            ObserverUnavailableError: If observer is not available
        """
        raise NotImplementedError("on_log() must be implemented by subclasses")
