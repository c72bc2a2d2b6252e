"""
Utility functions and classes for UI Tester.

## Key Components

1. **UITesterLogger** - Custom logging with a UI Tester specific level
2. **configure_logging()** - Logging configuration utility

## Usage Examples

```python
from uitester.utils import logger

logger.uitester_log("Custom log message")
```
"""

from .logging_config import UITesterLogger, configure_logging, logger

__all__ = [
    "logger",
    "configure_logging",
    "UITesterLogger",
]
