"""
Upload operation for UI Tester: puts one document into the target form.
"""

from uitester.automation.cancellation import CancellationToken
from uitester.automation.errors import NetworkIdleTimeoutError
from uitester.automation.step_interpreter import StepInterpreter
from uitester.browser.base import BrowserSession
from uitester.config.settings import UITesterSettings
from uitester.events.reporter import RunReporter
from uitester.schemas.documents import Document
from uitester.schemas.run import RunConfig
from uitester.utils import logger


class UploadOperation:
    """Uploads a single document.

    The operation waits for the upload input, sets the document on it, lets
    the page settle, optionally clicks submit and waits for the network to go
    idle, then runs the post-upload steps. Every failure except the
    post-submit network idle timeout propagates to the caller.
    """

    def __init__(
        self,
        config: RunConfig,
        session: BrowserSession,
        interpreter: StepInterpreter,
        reporter: RunReporter,
        token: CancellationToken,
        settings: UITesterSettings,
    ):
        self.config = config
        self.session = session
        self.interpreter = interpreter
        self.reporter = reporter
        self.token = token
        self.settings = settings

    async def perform(self, document: Document) -> bool:
        """Upload `document`.

        Args:
            document (Document): Document to upload

        Returns:
            bool: False if the run was already cancelled and nothing was done

        Raises:
            ElementNotFoundError: If the upload input never attached
            UITesterError: If any browser action or post-upload step fails
        """
        if self.token.is_cancelled:
            return False

        upload_input = await self.session.wait_for_element(
            self.config.upload_selector,
            timeout_ms=self.settings.element_timeout_ms,
            state="attached",
        )

        await upload_input.set_file(document.path)
        await self.reporter.info(f"File set: {document.name}")

        await self.session.wait(self.settings.settle_delay_ms)

        if self.config.submit_selector:
            await self.reporter.info("Clicking submit button...")
            await self.session.click(self.config.submit_selector)
            await self.session.wait(self.config.wait_after_submit)

            try:
                await self.session.wait_for_network_idle(self.settings.network_idle_timeout_ms)
            except NetworkIdleTimeoutError as e:
                logger.debug(f"⏳ {e.message}, continuing")

        if self.config.post_upload_steps:
            await self.interpreter.run(self.config.post_upload_steps)

        return True
