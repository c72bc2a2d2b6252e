"""
Event models for the event channel.
"""

import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from pydantic.alias_generators import to_camel

from .types import LogType, ProgressStatus


def compute_percentage(current: int, total: int) -> int:
    """Percentage of `current` in `total`, rounded half up; 0 for an empty total."""
    if total <= 0:
        return 0
    return int(math.floor(current / total * 100 + 0.5))


class ProgressEvent(BaseModel):
    """Progress of a run through its document list.

    Attributes:
        current (int): Index (1-based) of the document being processed, or the
            number of successful documents in the final event
        total (int): Number of documents in the run
        percentage (int): `current / total` as a rounded percentage
        status (ProgressStatus): `uploading` while running, `completed` at the end
        current_file (str): Name of the document being processed
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    current: NonNegativeInt
    total: NonNegativeInt
    percentage: NonNegativeInt
    status: ProgressStatus
    current_file: str = ""

    @classmethod
    def create(
        cls, current: int, total: int, status: ProgressStatus, current_file: str = ""
    ) -> "ProgressEvent":
        return cls(
            current=current,
            total=total,
            percentage=compute_percentage(current, total),
            status=status,
            current_file=current_file,
        )


class LogEvent(BaseModel):
    """A timestamped log line of a run."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=datetime.now)
    message: str
    type: LogType = LogType.INFO
