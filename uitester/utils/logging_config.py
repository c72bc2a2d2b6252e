"""
Logging configuration utilities for UI Tester.

This module provides logging configuration for the UI Tester engine, including
a custom logging level and module-specific logger setup. It keeps the output
of browser automation runs clean while silencing noisy third-party loggers.

## Key Components

1. **UITesterLogger** - Custom logger class with a `uitester_log()` method
2. **configure_logging()** - Function to configure logging for all UI Tester modules
3. **Custom Logging Level** - UITESTER_LOGGING_LEVEL (35) for engine messages

## Usage Examples

```python
from uitester.utils import logger, configure_logging

# Engine messages at the UITESTER level
logger.uitester_log("Navigating to https://example.com")

# Switch output on at runtime, as `uitester run --enable-logging` does
configure_logging(enabled=True)
```
"""

import logging
import os
from typing import Any

os.environ["PLAYWRIGHT_LOGGING_LEVEL"] = "critical"

# Custom UI Tester logging level
UITESTER_LOGGING_LEVEL: int = 35

# UITESTER_LOGGING_ENABLED=false silences all output
LOGGING_ENABLED = os.getenv("UITESTER_LOGGING_ENABLED", "true").lower() == "true"

FORMAT: str = "%(asctime)s - %(message)s"


logging.addLevelName(UITESTER_LOGGING_LEVEL, "UITESTER")


class UITesterLogger(logging.Logger):
    """Custom logger class for UI Tester with an additional logging method.

    This logger extends the standard Python logger with a `uitester_log`
    method that uses the UITESTER_LOGGING_LEVEL (35), so that engine progress
    messages are shown while library chatter at INFO level stays hidden.

    Example:
        ```python
        from uitester.utils import logger

        logger.uitester_log("Automation completed")
        ```
    """

    def uitester_log(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a message with the custom UI Tester logging level.

        Args:
            msg (str): The message to log
            *args (Any): Additional arguments for string formatting
            **kwargs (Any): Additional keyword arguments for logging
        """
        if self.isEnabledFor(UITESTER_LOGGING_LEVEL):
            self._log(UITESTER_LOGGING_LEVEL, msg, args, **kwargs)


logging.setLoggerClass(UITesterLogger)


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else UITESTER_LOGGING_LEVEL


def configure_logging(enabled: bool = LOGGING_ENABLED, level_name: str = "UITESTER") -> None:
    """Configure logging for every UI Tester module.

    This function:
    1. Sets the root logger to the requested level (999 when disabled)
    2. Configures all `uitester` module loggers to the same level
    3. Disables propagation to prevent duplicate output
    4. Replaces existing handlers with a single formatted stream handler

    It runs automatically on import, and can be called again (for example
    by the CLI `--enable-logging` switch) to reconfigure logging.

    Args:
        enabled (bool): Whether UI Tester log output should be emitted
        level_name (str): Level name such as "UITESTER", "WARNING" or "INFO";
            unknown names fall back to UITESTER
    """
    level = _resolve_level(level_name) if enabled else 999

    logging.basicConfig(
        level=level,
        format=FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    uitester_modules = [
        "uitester",
        "uitester.automation",
        "uitester.browser",
        "uitester.config",
        "uitester.documents",
        "uitester.events",
        "uitester.schemas",
        "uitester.utils",
        "uitester_cli",
        "playwright",
        "patchright",
    ]

    for module in uitester_modules:
        logger = logging.getLogger(module)
        logger.setLevel(level)
        logger.propagate = False

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        if enabled:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            handler.setFormatter(formatter)
            logger.addHandler(handler)


configure_logging()

logger: UITesterLogger = logging.getLogger(__name__)  # type: ignore
