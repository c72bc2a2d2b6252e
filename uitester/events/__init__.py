"""
Event system for UI Tester.

This module provides the **observability channel** of an automation run:
- Structured progress and log events
- Fan-out to any number of observers, in emission order
- Queue subscriptions for consumers that poll
- Observer failures isolated from the run

## Key Components

1. **EventChannel** - Delivers events to observers and queue subscribers
2. **EventObserver** - Base class for event observers
3. **RunReporter** - Emits a run's events and mirrors log lines to the logger
4. **ProgressEvent / LogEvent** - Event models

## Usage Examples

```python
from uitester.events import EventChannel, EventObserverFactory, EventObserverType

channel = EventChannel(
    EventObserverFactory.create_observers([EventObserverType.RICH_TERMINAL])
)
queue = channel.subscribe()
```
"""

from .base import EventObserver
from .channel import EventChannel
from .exceptions import ObserverUnavailableError
from .factory import EventObserverFactory
from .models import LogEvent, ProgressEvent, compute_percentage
from .reporter import RunReporter
from .types import EventObserverType, LogType, ProgressStatus

__all__ = [
    "EventObserver",
    "EventChannel",
    "EventObserverFactory",
    "EventObserverType",
    "RunReporter",
    "LogEvent",
    "ProgressEvent",
    "LogType",
    "ProgressStatus",
    "compute_percentage",
    "ObserverUnavailableError",
]
