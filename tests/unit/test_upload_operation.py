import pytest

from uitester.automation.cancellation import CancellationToken
from uitester.automation.errors import ElementNotFoundError
from uitester.automation.step_interpreter import StepInterpreter
from uitester.automation.upload_operation import UploadOperation
from uitester.config.settings import UITesterSettings
from uitester.events.channel import EventChannel
from uitester.events.observers import BufferedObserver
from uitester.events.reporter import RunReporter
from uitester.schemas.run import RunConfig
from tests.fixtures.models.schema_factories import DocumentFactory, make_run_config
from tests.mocks.browser_mocks import FakeBrowserSession


def build_operation(
    config: RunConfig,
    session: FakeBrowserSession,
    buffer: BufferedObserver,
    token: CancellationToken,
) -> UploadOperation:
    settings = UITesterSettings(element_timeout_ms=10000, settle_delay_ms=500)
    reporter = RunReporter(EventChannel([buffer]))
    interpreter = StepInterpreter(session, reporter, token, settings)
    return UploadOperation(config, session, interpreter, reporter, token, settings)


class TestUploadOperation:
    """Test suite for `UploadOperation`.

    Covers the exact browser call sequence for one document with and without
    a submit button, the swallowed post-submit network idle timeout, and the
    errors that must reach the document loop.
    """

    @pytest.fixture
    def buffer(self) -> BufferedObserver:
        return BufferedObserver()

    @pytest.fixture
    def token(self) -> CancellationToken:
        return CancellationToken()

    # ? VALID CASE
    @pytest.mark.asyncio
    async def test_upload_without_submit(
        self, buffer: BufferedObserver, token: CancellationToken
    ) -> None:
        document = DocumentFactory.custom_build(name="a.json")
        session = FakeBrowserSession()
        operation = build_operation(make_run_config([document]), session, buffer, token)

        uploaded = await operation.perform(document)

        assert uploaded is True
        assert session.calls == [
            ("wait_for_element", 'input[type="file"]', 10000),
            ("set_file", 'input[type="file"]', str(document.path)),
            ("wait", 500),
        ]
        assert buffer.messages() == ["File set: a.json"]

    # ? VALID CASE
    @pytest.mark.asyncio
    async def test_upload_with_submit_and_post_steps(
        self, buffer: BufferedObserver, token: CancellationToken
    ) -> None:
        document = DocumentFactory.custom_build(name="a.csv")
        config = make_run_config(
            [document],
            upload_selector="#file",
            submit_selector="#submit",
            wait_after_submit=3000,
            post_upload_steps=[{"action": "click", "selector": "#close-dialog"}],
        )
        session = FakeBrowserSession()
        operation = build_operation(config, session, buffer, token)

        await operation.perform(document)

        assert session.call_names() == [
            "wait_for_element",
            "set_file",
            "wait",
            "click",
            "wait",
            "wait_for_network_idle",
            "click",
        ]
        assert session.calls[3] == ("click", "#submit")
        assert session.calls[4] == ("wait", 3000)
        assert session.calls[6] == ("click", "#close-dialog")
        assert buffer.messages() == [
            "File set: a.csv",
            "Clicking submit button...",
            "Executing step: Click element",
        ]

    # ? VALID CASE
    @pytest.mark.asyncio
    async def test_network_idle_timeout_after_submit_is_swallowed(
        self, buffer: BufferedObserver, token: CancellationToken
    ) -> None:
        document = DocumentFactory.custom_build()
        config = make_run_config(
            [document],
            submit_selector="#submit",
            post_upload_steps=[{"action": "press", "key": "Escape"}],
        )
        session = FakeBrowserSession(network_idle_timeout=True)
        operation = build_operation(config, session, buffer, token)

        uploaded = await operation.perform(document)

        assert uploaded is True
        assert session.calls[-1] == ("press", "Escape")

    # ! INVALID CASE
    @pytest.mark.asyncio
    async def test_missing_upload_input_raises(
        self, buffer: BufferedObserver, token: CancellationToken
    ) -> None:
        document = DocumentFactory.custom_build()
        session = FakeBrowserSession(missing_selectors={'input[type="file"]'})
        operation = build_operation(make_run_config([document]), session, buffer, token)

        with pytest.raises(ElementNotFoundError) as exc_info:
            await operation.perform(document)

        assert exc_info.value.selector == 'input[type="file"]'
        assert session.call_names() == ["wait_for_element"]

    # ! INVALID CASE
    @pytest.mark.asyncio
    async def test_missing_submit_button_raises(
        self, buffer: BufferedObserver, token: CancellationToken
    ) -> None:
        document = DocumentFactory.custom_build()
        config = make_run_config([document], submit_selector="#submit")
        session = FakeBrowserSession(missing_selectors={"#submit"})
        operation = build_operation(config, session, buffer, token)

        with pytest.raises(ElementNotFoundError):
            await operation.perform(document)

    # ? VALID CASE
    @pytest.mark.asyncio
    async def test_cancelled_run_does_nothing(
        self, buffer: BufferedObserver, token: CancellationToken
    ) -> None:
        document = DocumentFactory.custom_build()
        session = FakeBrowserSession()
        operation = build_operation(make_run_config([document]), session, buffer, token)
        token.cancel()

        uploaded = await operation.perform(document)

        assert uploaded is False
        assert session.calls == []
        assert buffer.events == []
