"""
Event observers for UI Tester.

This module provides the observers that receive the progress and log events
of an automation run.

## Key Components

1. **RichTerminalObserver** - Rich terminal output with colored log lines
2. **BufferedObserver** - In-memory event history for UI back-ends and tests
3. **NullEventObserver** - No-op observer
4. **QueueObserver** - Puts events on an `asyncio.Queue` (see `EventChannel.subscribe`)

## Usage Examples

```python
from uitester.events import EventChannel
from uitester.events.observers import BufferedObserver

buffer = BufferedObserver()
channel = EventChannel([buffer])

# ... run automation with the channel ...

for log in buffer.logs:
    print(log.type, log.message)
```
"""

from .buffered_observer import BufferedObserver
from .null_observer import NullEventObserver
from .queue_observer import QueueObserver
from .rich_terminal_observer import RichTerminalObserver

__all__ = [
    "BufferedObserver",
    "NullEventObserver",
    "QueueObserver",
    "RichTerminalObserver",
]
