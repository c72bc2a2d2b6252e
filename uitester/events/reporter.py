"""
Run reporter: the single place a run emits its progress and log events.

Each log line is mirrored to the UI Tester logger (info and success lines at
the custom UITESTER level, warnings and errors at their own level) and then
published on the event channel.
"""

from typing import Optional

from uitester.utils import logger

from .channel import EventChannel
from .models import LogEvent, ProgressEvent
from .types import LogType, ProgressStatus


class RunReporter:
    def __init__(self, channel: Optional[EventChannel] = None):
        self.channel = channel if channel is not None else EventChannel()

    async def log(self, message: str, log_type: LogType = LogType.INFO) -> LogEvent:
        event = LogEvent(message=message, type=log_type)

        if log_type == LogType.ERROR:
            logger.error(message)
        elif log_type == LogType.WARNING:
            logger.warning(message)
        else:
            logger.uitester_log(message)

        await self.channel.publish_log(event)
        return event

    async def info(self, message: str) -> LogEvent:
        return await self.log(message, LogType.INFO)

    async def success(self, message: str) -> LogEvent:
        return await self.log(message, LogType.SUCCESS)

    async def warning(self, message: str) -> LogEvent:
        return await self.log(message, LogType.WARNING)

    async def error(self, message: str) -> LogEvent:
        return await self.log(message, LogType.ERROR)

    async def progress(
        self, current: int, total: int, status: ProgressStatus, current_file: str = ""
    ) -> ProgressEvent:
        event = ProgressEvent.create(
            current=current, total=total, status=status, current_file=current_file
        )
        await self.channel.publish_progress(event)
        return event
