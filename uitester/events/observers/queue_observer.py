"""
Queue-backed event observer.
"""

import asyncio
from typing import Any

from uitester.events.base import EventObserver
from uitester.events.models import LogEvent, ProgressEvent


class QueueObserver(EventObserver):
    """Observer that puts every event on an `asyncio.Queue`.

    Created by `EventChannel.subscribe()`. Events are put without waiting,
    so a full bounded queue raises `asyncio.QueueFull`, which the channel
    logs without interrupting the run.
    """

    def __init__(self, maxsize: int = 0) -> None:
        self.queue: "asyncio.Queue[Any]" = asyncio.Queue(maxsize=maxsize)

    def is_available(self) -> bool:
        return True

    async def on_progress(self, event: ProgressEvent) -> None:
        self.queue.put_nowait(event)

    async def on_log(self, event: LogEvent) -> None:
        self.queue.put_nowait(event)
