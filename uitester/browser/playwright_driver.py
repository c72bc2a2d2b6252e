"""
Patchright browser driver for UI Tester.

This module implements the browser capability interface on top of
`patchright`, the Playwright-compatible library used for all browser work in
UI Tester. Library timeouts and errors are translated into UI Tester errors.

## Usage Examples

```python
from uitester.browser import PlaywrightDriver
from uitester.config import ConfigurationFactory

driver = PlaywrightDriver(ConfigurationFactory.get_settings())
session = await driver.launch(headless=True)
try:
    await session.navigate("https://example.com", timeout_ms=30_000)
    await session.click("#start")
finally:
    await session.close()
```
"""

import asyncio
from pathlib import Path
from typing import Optional, Union

from patchright.async_api import Browser, ElementHandle as PatchrightElementHandle
from patchright.async_api import Error as PatchrightError
from patchright.async_api import Page, Playwright
from patchright.async_api import TimeoutError as PatchrightTimeoutError
from patchright.async_api import async_playwright

from uitester.automation.errors import (
    BrowserError,
    ElementNotFoundError,
    NavigationError,
    NetworkIdleTimeoutError,
)
from uitester.browser.base import BrowserDriver, BrowserSession, ElementHandle, ElementState
from uitester.config.settings import UITesterSettings
from uitester.utils import logger


class PlaywrightElementHandle(ElementHandle):
    def __init__(self, handle: PatchrightElementHandle, selector: str):
        self._handle = handle
        self.selector = selector

    async def set_file(self, path: Union[str, Path]) -> None:
        try:
            await self._handle.set_input_files(str(path))
        except PatchrightError as e:
            raise BrowserError(f"Failed to set file on {self.selector}: {e}") from e


class PlaywrightSession(BrowserSession):
    """A patchright page together with the browser and playwright instance that own it."""

    def __init__(self, playwright: Playwright, browser: Browser, page: Page):
        self._playwright = playwright
        self._browser = browser
        self.page = page
        self._closed = False
        self._close_lock = asyncio.Lock()

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def navigate(self, url: str, timeout_ms: int) -> None:
        try:
            await self.page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        except PatchrightError as e:
            raise NavigationError(url, str(e)) from e

    async def wait_for_element(
        self, selector: str, timeout_ms: int, state: ElementState = "attached"
    ) -> ElementHandle:
        try:
            handle = await self.page.wait_for_selector(selector, state=state, timeout=timeout_ms)
        except PatchrightTimeoutError as e:
            raise ElementNotFoundError(selector, timeout_ms) from e
        except PatchrightError as e:
            raise BrowserError(f"Failed to wait for {selector}: {e}") from e

        if handle is None:
            # wait_for_selector only returns None for the detached/hidden states
            raise ElementNotFoundError(selector, timeout_ms)
        return PlaywrightElementHandle(handle, selector)

    async def click(self, selector: str) -> None:
        try:
            await self.page.click(selector)
        except PatchrightTimeoutError as e:
            raise ElementNotFoundError(selector) from e
        except PatchrightError as e:
            raise BrowserError(f"Failed to click {selector}: {e}") from e

    async def fill(self, selector: str, value: str) -> None:
        try:
            await self.page.fill(selector, value)
        except PatchrightTimeoutError as e:
            raise ElementNotFoundError(selector) from e
        except PatchrightError as e:
            raise BrowserError(f"Failed to fill {selector}: {e}") from e

    async def type(self, selector: str, value: str, delay_ms: int) -> None:
        try:
            await self.page.type(selector, value, delay=delay_ms)
        except PatchrightTimeoutError as e:
            raise ElementNotFoundError(selector) from e
        except PatchrightError as e:
            raise BrowserError(f"Failed to type into {selector}: {e}") from e

    async def press_key(self, key: str) -> None:
        try:
            await self.page.keyboard.press(key)
        except PatchrightError as e:
            raise BrowserError(f"Failed to press {key}: {e}") from e

    async def wait(self, ms: int) -> None:
        try:
            await self.page.wait_for_timeout(ms)
        except PatchrightError as e:
            raise BrowserError(f"Wait interrupted: {e}") from e

    async def wait_for_network_idle(self, timeout_ms: int) -> None:
        try:
            await self.page.wait_for_load_state("networkidle", timeout=timeout_ms)
        except PatchrightTimeoutError as e:
            raise NetworkIdleTimeoutError(timeout_ms) from e
        except PatchrightError as e:
            raise BrowserError(f"Failed to wait for network idle: {e}") from e

    async def screenshot(self, path: Union[str, Path]) -> None:
        try:
            await self.page.screenshot(path=str(path))
        except PatchrightError as e:
            raise BrowserError(f"Failed to take screenshot: {e}") from e

    async def close(self) -> None:
        async with self._close_lock:
            if self._closed:
                return
            self._closed = True

            try:
                await self._browser.close()
                logger.debug("✅ Browser closed")
            finally:
                await self._playwright.stop()
                logger.debug("✅ Playwright stopped")


class PlaywrightDriver(BrowserDriver):
    """Launches Chromium through patchright.

    Attributes:
        settings (UITesterSettings): Source of slow-mo, viewport and download options
    """

    def __init__(self, settings: Optional[UITesterSettings] = None):
        self.settings = settings or UITesterSettings()

    async def launch(self, headless: bool) -> BrowserSession:
        playwright = await async_playwright().start()

        try:
            browser = await playwright.chromium.launch(
                headless=headless,
                slow_mo=self.settings.slow_mo_ms,
            )
            context = await browser.new_context(
                accept_downloads=self.settings.accept_downloads,
                viewport={
                    "width": self.settings.viewport_width,
                    "height": self.settings.viewport_height,
                },
            )
            page = await context.new_page()
        except PatchrightError as e:
            await playwright.stop()
            raise BrowserError(f"Failed to launch browser: {e}") from e

        logger.debug(f"🚀 Browser launched (headless={headless})")
        return PlaywrightSession(playwright, browser, page)
