"""
Automation engine: the run control surface of UI Tester.

## Usage Examples

```python
import asyncio

from uitester import AutomationEngine, load_run_config

async def main() -> None:
    engine = AutomationEngine()
    config = load_run_config("ui-tester-config.json")

    result = await engine.start(config)
    print(f"Uploaded {len(result.successful)} of {len(config.documents)} documents")

asyncio.run(main())
```
"""

import asyncio
from typing import Any, List, Optional

from uitester.automation.errors import RunAlreadyActiveError
from uitester.automation.run_orchestrator import RunOrchestrator
from uitester.browser.base import BrowserDriver
from uitester.browser.playwright_driver import PlaywrightDriver
from uitester.config.factory import ConfigurationFactory
from uitester.config.settings import UITesterSettings
from uitester.events.base import EventObserver
from uitester.events.channel import EventChannel
from uitester.events.factory import EventObserverFactory
from uitester.schemas.run import RunConfig, RunResult
from uitester.utils import logger


class AutomationEngine:
    """Starts and stops automation runs, one at a time.

    Observers registered on the engine receive the events of every run it
    starts. Without explicit observers, the observers named in the
    `event_observers` setting are created.

    Attributes:
        settings (UITesterSettings): Settings passed to every run
        driver (BrowserDriver): Browser driver used to launch sessions
        channel (EventChannel): Channel the runs publish their events on
    """

    def __init__(
        self,
        driver: Optional[BrowserDriver] = None,
        settings: Optional[UITesterSettings] = None,
        observers: Optional[List[EventObserver]] = None,
    ):
        self.settings = settings or ConfigurationFactory.get_settings()
        self.driver = driver or PlaywrightDriver(self.settings)

        if observers is None:
            observers = EventObserverFactory.create_observers(self.settings.event_observers)
        self.channel = EventChannel(observers)

        self._active_run: Optional[RunOrchestrator] = None

    @property
    def is_running(self) -> bool:
        return self._active_run is not None

    def subscribe(self) -> "asyncio.Queue[Any]":
        """Queue receiving the progress and log events of subsequent runs."""
        return self.channel.subscribe()

    async def start(self, config: RunConfig) -> RunResult:
        """Run `config` to completion.

        Args:
            config (RunConfig): Configuration of the run

        Returns:
            RunResult: Outcome of the run, partial if it was stopped

        Raises:
            RunAlreadyActiveError: If another run is in progress
            UITesterError: A run-level failure, after the browser was closed
        """
        if self._active_run is not None:
            raise RunAlreadyActiveError()

        orchestrator = RunOrchestrator(config, self.driver, self.settings, self.channel)
        self._active_run = orchestrator

        try:
            return await orchestrator.start()
        finally:
            self._active_run = None

    async def stop(self) -> bool:
        """Stop the active run.

        Returns:
            bool: False if no run was active
        """
        orchestrator = self._active_run
        if orchestrator is None:
            logger.warning("No automation running")
            return False

        await orchestrator.stop()
        return True
