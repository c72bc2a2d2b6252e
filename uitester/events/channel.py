"""
Event channel delivering run events to multiple observers.
"""

import asyncio
from threading import Lock
from typing import Any, Awaitable, Callable, Dict, List, Optional

from uitester.utils import logger

from .base import EventObserver
from .models import LogEvent, ProgressEvent
from .observers.queue_observer import QueueObserver


class EventChannel:
    """Fan-out channel for the progress and log events of a run.

    Every event is delivered to all available observers before the next one
    is emitted, so each observer sees events in emission order. Failures of
    individual observers are logged and never reach the run.
    """

    def __init__(self, observers: Optional[List[EventObserver]] = None):
        """Initialize the event channel.

        Args:
            observers: Observers to deliver events to
        """
        self.observers: List[EventObserver] = list(observers or [])
        self._lock = Lock()
        self._subscriptions: Dict[int, QueueObserver] = {}

    def add_observer(self, observer: EventObserver) -> None:
        with self._lock:
            self.observers.append(observer)

    def remove_observer(self, observer: EventObserver) -> None:
        with self._lock:
            if observer in self.observers:
                self.observers.remove(observer)

    def get_available_observers(self) -> List[EventObserver]:
        """Get list of available observers.

        Returns:
            List of observers that are available and ready
        """
        with self._lock:
            return [o for o in self.observers if o.is_available()]

    def has_observers(self) -> bool:
        return len(self.get_available_observers()) > 0

    def subscribe(self, maxsize: int = 0) -> "asyncio.Queue[Any]":
        """Register a queue that receives every subsequent event.

        Progress and log events are put on the queue as they are emitted,
        so a consumer can drain it at its own pace.

        Args:
            maxsize: Maximum queue size; 0 means unbounded

        Returns:
            asyncio.Queue: Queue of `ProgressEvent` and `LogEvent` objects
        """
        observer = QueueObserver(maxsize=maxsize)
        with self._lock:
            self._subscriptions[id(observer.queue)] = observer
        self.add_observer(observer)
        return observer.queue

    def unsubscribe(self, queue: "asyncio.Queue[Any]") -> None:
        with self._lock:
            observer = self._subscriptions.pop(id(queue), None)
        if observer is not None:
            self.remove_observer(observer)

    async def publish_progress(self, event: ProgressEvent) -> None:
        await self._deliver(lambda observer: observer.on_progress(event))

    async def publish_log(self, event: LogEvent) -> None:
        await self._deliver(lambda observer: observer.on_log(event))

    async def _deliver(self, send: Callable[[EventObserver], Awaitable[None]]) -> None:
        observers = self.get_available_observers()
        if not observers:
            return

        results = await asyncio.gather(*[send(o) for o in observers], return_exceptions=True)

        for observer, result in zip(observers, results):
            if isinstance(result, Exception):
                logger.warning(
                    f"Event observer {type(observer).__name__} failed to handle event: {result}"
                )
