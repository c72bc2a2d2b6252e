"""
Run orchestrator for UI Tester.

This module drives one complete automation run: it launches the browser,
opens the target page, runs the initial steps once and then uploads every
document in order, running the per-upload steps before each one. Per-document
failures are recorded and the loop moves on; the browser session is closed
exactly once on every exit path.

## Key Components

1. **RunOrchestrator** - Owns the browser session and the `RunResult` of one run
2. **RunPhase** - Phases the orchestrator moves through

## Usage Examples

```python
from uitester.automation.run_orchestrator import RunOrchestrator
from uitester.browser import PlaywrightDriver

orchestrator = RunOrchestrator(config, PlaywrightDriver())
result = await orchestrator.start()

print(f"{len(result.successful)} uploaded, {len(result.failed)} failed")
```
"""

import asyncio
from datetime import datetime
from enum import Enum
from typing import Optional

from uitester.automation.cancellation import CancellationToken
from uitester.automation.errors import RunStateError, UITesterError
from uitester.automation.step_interpreter import StepInterpreter
from uitester.automation.upload_operation import UploadOperation
from uitester.browser.base import BrowserDriver, BrowserSession
from uitester.config.settings import UITesterSettings
from uitester.events.channel import EventChannel
from uitester.events.reporter import RunReporter
from uitester.events.types import ProgressStatus
from uitester.schemas.documents import Document
from uitester.schemas.run import FailedDocument, RunConfig, RunResult
from uitester.utils import logger


class RunPhase(str, Enum):
    """Phases of a run."""

    IDLE = "idle"
    LAUNCHING = "launching"
    NAVIGATING_INITIAL = "navigating_initial"
    RUNNING_INITIAL_STEPS = "running_initial_steps"
    UI_ONLY_DONE = "ui_only_done"
    RUNNING_PER_UPLOAD_STEPS = "running_per_upload_steps"
    UPLOADING = "uploading"
    INTER_DOCUMENT_WAIT = "inter_document_wait"
    TEARDOWN = "teardown"


def error_message(error: BaseException) -> str:
    """Message of an exception as shown in logs and in `FailedDocument.error`."""
    if isinstance(error, UITesterError):
        return error.message
    return str(error) or type(error).__name__


class RunOrchestrator:
    """Runs one `RunConfig` end to end.

    An orchestrator is single-use: `start()` may be called once. `stop()` may
    be called from another task at any time; it cancels the run, and closes
    the browser session right away so that a step blocked on the page fails
    fast. A run stopped this way still returns its partial `RunResult`.

    Attributes:
        config (RunConfig): Configuration of the run
        driver (BrowserDriver): Launches the browser session
        settings (UITesterSettings): Timeouts and step defaults
        reporter (RunReporter): Emits the run's progress and log events
        token (CancellationToken): Cancellation flag of the run
        result (RunResult): Outcome, growing while the run progresses
        phase (RunPhase): Current phase of the run
    """

    def __init__(
        self,
        config: RunConfig,
        driver: BrowserDriver,
        settings: Optional[UITesterSettings] = None,
        channel: Optional[EventChannel] = None,
    ):
        self.config = config
        self.driver = driver
        self.settings = settings or UITesterSettings()
        self.reporter = RunReporter(channel)
        self.token = CancellationToken()
        self.result = RunResult()
        self.phase = RunPhase.IDLE

        self.session: Optional[BrowserSession] = None
        self._started = False
        self._session_closed = False
        self._close_lock = asyncio.Lock()

    @property
    def is_cancelled(self) -> bool:
        return self.token.is_cancelled

    async def start(self) -> RunResult:
        """Execute the run.

        Returns:
            RunResult: Successful and failed documents with start and end time

        Raises:
            RunStateError: If the orchestrator was already started
            UITesterError: A run-level failure (browser launch, navigation,
                initial steps), re-raised after teardown
        """
        if self._started:
            raise RunStateError("A run orchestrator can only be started once")
        self._started = True
        self.result = RunResult()

        try:
            await self.reporter.info("Starting automation engine...")
            await self._run()
        except Exception as e:
            if not self.is_cancelled:
                await self.reporter.error(f"Automation error: {error_message(e)}")
                raise
            # the forced session close makes in-flight browser calls fail
            await self.reporter.warning(f"Automation interrupted: {error_message(e)}")
        finally:
            await self._teardown()

        return self.result

    async def stop(self) -> None:
        """Cancel the run and close the browser session immediately."""
        self.token.cancel()
        await self.reporter.warning("Stopping automation...")
        await self._close_session()

    async def _run(self) -> None:
        self.phase = RunPhase.LAUNCHING
        session = await self.driver.launch(headless=self.config.headless)
        self.session = session

        # stop() during launch had no session to close
        if self.is_cancelled:
            return

        interpreter = StepInterpreter(session, self.reporter, self.token, self.settings)

        self.phase = RunPhase.NAVIGATING_INITIAL
        await self.reporter.info(f"Navigating to {self.config.target_url}")
        await session.navigate(self.config.target_url, timeout_ms=self.settings.navigation_timeout_ms)
        await self.reporter.info("Page loaded successfully")

        self.phase = RunPhase.RUNNING_INITIAL_STEPS
        if self.config.initial_steps:
            await self.reporter.info("Running initial steps (login, setup, etc.)...")
            await interpreter.run(self.config.initial_steps)

        if self.config.ui_automation_only:
            self.phase = RunPhase.UI_ONLY_DONE
            await self.reporter.info("UI Automation Only mode - skipping file uploads")
            await self.reporter.progress(1, 1, ProgressStatus.COMPLETED)
            return

        upload_operation = UploadOperation(
            self.config, session, interpreter, self.reporter, self.token, self.settings
        )
        await self._upload_documents(session, interpreter, upload_operation)

    async def _upload_documents(
        self,
        session: BrowserSession,
        interpreter: StepInterpreter,
        upload_operation: UploadOperation,
    ) -> None:
        documents = self.config.documents
        total = len(documents)

        for index, document in enumerate(documents):
            if self.is_cancelled:
                await self.reporter.warning("Automation stopped by user")
                break

            await self.reporter.progress(index + 1, total, ProgressStatus.UPLOADING, document.name)
            await self._process_document(document, interpreter, upload_operation)

            if index < total - 1 and not self.is_cancelled:
                self.phase = RunPhase.INTER_DOCUMENT_WAIT
                await session.wait(self.config.wait_after_upload)

    async def _process_document(
        self,
        document: Document,
        interpreter: StepInterpreter,
        upload_operation: UploadOperation,
    ) -> None:
        """Run the per-upload steps and the upload for one document, recording the outcome."""
        try:
            if self.config.per_upload_steps:
                self.phase = RunPhase.RUNNING_PER_UPLOAD_STEPS
                await self.reporter.info(f"Running per-upload steps for: {document.name}")
                await interpreter.run(self.config.per_upload_steps)

            self.phase = RunPhase.UPLOADING
            uploaded = await upload_operation.perform(document)
        except Exception as e:
            message = error_message(e)
            self.result.failed.append(FailedDocument(document=document, error=message))
            await self.reporter.error(f"✗ Failed to upload {document.name}: {message}")
            return

        if uploaded:
            self.result.successful.append(document)
            await self.reporter.success(f"✓ Successfully uploaded: {document.name}")

    async def _close_session(self) -> None:
        async with self._close_lock:
            if self.session is None or self._session_closed:
                return
            self._session_closed = True

            try:
                await self.session.close()
            except Exception as e:
                logger.warning(f"⚠️ Failed to close browser session: {e}")

    async def _teardown(self) -> None:
        self.phase = RunPhase.TEARDOWN

        await self._close_session()
        self.result.end_time = datetime.now()

        if self.config.ui_automation_only:
            await self.reporter.progress(1, 1, ProgressStatus.COMPLETED)
        else:
            await self.reporter.progress(
                len(self.result.successful), len(self.config.documents), ProgressStatus.COMPLETED
            )
        await self.reporter.info("Automation completed")

        self.phase = RunPhase.IDLE
