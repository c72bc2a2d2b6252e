"""
Automation error classes for UI Tester.

This module contains the exception classes raised by the automation engine,
the browser drivers and the configuration/document helpers. Exceptions carry
structured attributes (selector, url, timeout) next to the message so that
callers and observers can report failures precisely.

## Exception Hierarchy

```
UITesterError (base)
├── BrowserError
│   ├── ElementNotFoundError
│   ├── NavigationError
│   └── NetworkIdleTimeoutError
├── UnknownActionError
├── ConfigurationError
├── DocumentSourceError
├── RunAlreadyActiveError
└── RunStateError
```

## Usage Examples

```python
from uitester.automation.errors import ElementNotFoundError, UITesterError

try:
    await session.wait_for_element("input[type='file']", timeout_ms=10_000)
except ElementNotFoundError as e:
    print(f"Upload input missing: {e.selector}")
except UITesterError as e:
    print(f"General automation error: {e}")
```
"""

from typing import Optional


class UITesterError(Exception):
    """Base exception for all UI Tester errors.

    Attributes:
        message (str): Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BrowserError(UITesterError):
    """Exception raised when a browser operation fails.

    Drivers raise this (or one of its subclasses) instead of leaking the
    browser automation library's own exception types.
    """

    pass


class ElementNotFoundError(BrowserError):
    """Exception raised when a required selector never attached within its timeout.

    Attributes:
        selector (str): Selector that was waited for
        timeout_ms (Optional[int]): Timeout that elapsed, in milliseconds

    Example:
        ```python
        try:
            await session.wait_for_element("#import", timeout_ms=5000)
        except ElementNotFoundError as e:
            print(f"{e.selector} not found after {e.timeout_ms}ms")
        ```
    """

    def __init__(self, selector: str, timeout_ms: Optional[int] = None) -> None:
        message = f"Element not found: {selector}"
        if timeout_ms is not None:
            message += f" (waited {timeout_ms}ms)"
        super().__init__(message)
        self.selector = selector
        self.timeout_ms = timeout_ms


class NavigationError(BrowserError):
    """Exception raised when a page never finished loading.

    Attributes:
        url (str): URL that could not be loaded
    """

    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        message = f"Failed to navigate to {url}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.url = url


class NetworkIdleTimeoutError(BrowserError):
    """Exception raised when the page did not reach network idle in time.

    After a submit click this wait is advisory only, and the upload
    operation swallows this error.
    """

    def __init__(self, timeout_ms: int) -> None:
        super().__init__(f"Network did not become idle within {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class UnknownActionError(UITesterError):
    """Exception raised for an unrecognised step action when strict mode is enabled.

    With `fail_on_unknown_action` disabled (the default) unknown actions are
    logged as warnings and skipped instead.
    """

    def __init__(self, action: str) -> None:
        super().__init__(f"Unknown action: {action}")
        self.action = action


class ConfigurationError(UITesterError):
    """Exception raised when a run configuration cannot be loaded or is invalid."""

    pass


class DocumentSourceError(UITesterError):
    """Exception raised when documents cannot be scanned or previewed."""

    pass


class RunAlreadyActiveError(UITesterError):
    """Exception raised when a run is started while another one is still active."""

    def __init__(self) -> None:
        super().__init__("An automation run is already in progress")


class RunStateError(UITesterError):
    """Exception raised when a run orchestrator is used outside its lifecycle."""

    pass
