"""
Step interpreter for UI Tester.

Executes an ordered list of declarative steps against a browser session. The
same interpreter runs the initial, per-upload and post-upload step lists of a
run.

## Usage Examples

```python
from uitester.automation.step_interpreter import StepInterpreter
from uitester.schemas.steps import parse_steps

interpreter = StepInterpreter(session, reporter, token, settings)
await interpreter.run(parse_steps([
    {"action": "click", "selector": "#accept-cookies"},
    {"action": "press", "key": "Enter", "waitAfter": 500},
]))
```
"""

from typing import Any, Awaitable, Callable, Dict, Optional, Sequence

from uitester.automation.cancellation import CancellationToken
from uitester.automation.errors import UnknownActionError
from uitester.browser.base import BrowserSession
from uitester.config.settings import UITesterSettings
from uitester.events.reporter import RunReporter
from uitester.schemas.steps import (
    ActionKind,
    ClickStep,
    FillStep,
    NavigateStep,
    PressStep,
    ScreenshotStep,
    Step,
    StepBase,
    TypeStep,
    WaitForSelectorStep,
    WaitStep,
)


class StepInterpreter:
    """Runs steps one at a time, strictly in order.

    Before every step the cancellation token is checked; a cancelled run
    stops silently at the next step boundary. Steps with an unknown action are
    logged as a warning and skipped, or raise `UnknownActionError` when
    `fail_on_unknown_action` is enabled.

    Attributes:
        session (BrowserSession): Page the steps act on
        reporter (RunReporter): Receives the `Executing step: ...` log lines
        token (CancellationToken): Cancellation flag of the run
        settings (UITesterSettings): Timeouts and defaults for steps
        fail_on_unknown_action (bool): Raise instead of skipping unknown actions
    """

    def __init__(
        self,
        session: BrowserSession,
        reporter: RunReporter,
        token: CancellationToken,
        settings: UITesterSettings,
        fail_on_unknown_action: Optional[bool] = None,
    ):
        self.session = session
        self.reporter = reporter
        self.token = token
        self.settings = settings
        self.fail_on_unknown_action = (
            settings.fail_on_unknown_action
            if fail_on_unknown_action is None
            else fail_on_unknown_action
        )

        # Map actions to their handlers
        self.action_handlers: Dict[str, Callable[[Any], Awaitable[None]]] = {
            ActionKind.CLICK.value: self._handle_click,
            ActionKind.FILL.value: self._handle_fill,
            ActionKind.TYPE.value: self._handle_type,
            ActionKind.WAIT.value: self._handle_wait,
            ActionKind.WAIT_FOR_SELECTOR.value: self._handle_wait_for_selector,
            ActionKind.PRESS.value: self._handle_press,
            ActionKind.NAVIGATE.value: self._handle_navigate,
            ActionKind.SCREENSHOT.value: self._handle_screenshot,
        }

    async def run(self, steps: Sequence[Step]) -> int:
        """Execute `steps` in order.

        Args:
            steps (Sequence[Step]): Steps to execute

        Returns:
            int: Number of steps executed before the list ended or the run was cancelled

        Raises:
            UITesterError: The first failing step's error; later steps are not run
        """
        executed = 0
        for step in steps:
            if self.token.is_cancelled:
                break
            await self.execute_step(step)
            executed += 1
        return executed

    async def execute_step(self, step: StepBase) -> None:
        await self.reporter.info(f"Executing step: {step.resolved_description()}")

        handler = self.action_handlers.get(step.action)
        if handler:
            await handler(step)
        else:
            await self._handle_unknown(step)

        if step.wait_after:
            await self.session.wait(step.wait_after)

    async def _handle_click(self, step: ClickStep) -> None:
        await self.session.click(step.selector)

    async def _handle_fill(self, step: FillStep) -> None:
        await self.session.fill(step.selector, step.value)

    async def _handle_type(self, step: TypeStep) -> None:
        await self.session.type(step.selector, step.value, delay_ms=self.settings.type_delay_ms)

    async def _handle_wait(self, step: WaitStep) -> None:
        duration = step.duration if step.duration else self.settings.default_wait_ms
        await self.session.wait(duration)

    async def _handle_wait_for_selector(self, step: WaitForSelectorStep) -> None:
        timeout = step.timeout if step.timeout else self.settings.element_timeout_ms
        await self.session.wait_for_element(step.selector, timeout_ms=timeout, state="attached")

    async def _handle_press(self, step: PressStep) -> None:
        await self.session.press_key(step.key)

    async def _handle_navigate(self, step: NavigateStep) -> None:
        await self.session.navigate(step.url, timeout_ms=self.settings.navigation_timeout_ms)

    async def _handle_screenshot(self, step: ScreenshotStep) -> None:
        await self.session.screenshot(step.path or self.settings.default_screenshot_path)

    async def _handle_unknown(self, step: StepBase) -> None:
        if self.fail_on_unknown_action:
            raise UnknownActionError(step.action)
        await self.reporter.warning(f"Unknown action: {step.action}")
