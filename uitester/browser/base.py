"""
Browser driver capability interface for UI Tester.

The automation engine only talks to these abstract classes, so runs can be
driven by the patchright implementation in production and by fakes in tests.
Implementations translate their library's failures into the UI Tester error
types (`ElementNotFoundError`, `NavigationError`, `NetworkIdleTimeoutError`).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Literal, Union

ElementState = Literal["attached", "detached", "visible", "hidden"]


class ElementHandle(ABC):
    """An element found on the page."""

    @abstractmethod
    async def set_file(self, path: Union[str, Path]) -> None:
        """Set the file of a file input element.

        Args:
            path: Path of the file to select
        """
        raise NotImplementedError("set_file() must be implemented by subclasses")


class BrowserSession(ABC):
    """A single page of a launched browser.

    A session is owned by exactly one run and closed exactly once; `close()`
    must be safe to call again and must make in-flight operations fail.
    """

    @abstractmethod
    async def navigate(self, url: str, timeout_ms: int) -> None:
        """Open `url` and wait until the network is idle.

        Raises:
            NavigationError: If the page does not load
        """
        raise NotImplementedError("navigate() must be implemented by subclasses")

    @abstractmethod
    async def wait_for_element(
        self, selector: str, timeout_ms: int, state: ElementState = "attached"
    ) -> ElementHandle:
        """Wait until `selector` reaches `state`.

        Raises:
            ElementNotFoundError: If the element does not reach the state in time
        """
        raise NotImplementedError("wait_for_element() must be implemented by subclasses")

    @abstractmethod
    async def click(self, selector: str) -> None:
        raise NotImplementedError("click() must be implemented by subclasses")

    @abstractmethod
    async def fill(self, selector: str, value: str) -> None:
        """Replace the content of an input field."""
        raise NotImplementedError("fill() must be implemented by subclasses")

    @abstractmethod
    async def type(self, selector: str, value: str, delay_ms: int) -> None:
        """Type `value` one character at a time, `delay_ms` apart."""
        raise NotImplementedError("type() must be implemented by subclasses")

    @abstractmethod
    async def press_key(self, key: str) -> None:
        raise NotImplementedError("press_key() must be implemented by subclasses")

    @abstractmethod
    async def wait(self, ms: int) -> None:
        raise NotImplementedError("wait() must be implemented by subclasses")

    @abstractmethod
    async def wait_for_network_idle(self, timeout_ms: int) -> None:
        """Wait until there are no network connections for a short period.

        Raises:
            NetworkIdleTimeoutError: If the network does not become idle in time
        """
        raise NotImplementedError("wait_for_network_idle() must be implemented by subclasses")

    @abstractmethod
    async def screenshot(self, path: Union[str, Path]) -> None:
        raise NotImplementedError("screenshot() must be implemented by subclasses")

    @abstractmethod
    async def close(self) -> None:
        raise NotImplementedError("close() must be implemented by subclasses")


class BrowserDriver(ABC):
    """Launches browser sessions."""

    @abstractmethod
    async def launch(self, headless: bool) -> BrowserSession:
        """Launch a browser and open a page.

        Args:
            headless: Whether to run the browser without a window

        Returns:
            BrowserSession: A ready page

        Raises:
            BrowserError: If the browser cannot be started
        """
        raise NotImplementedError("launch() must be implemented by subclasses")
