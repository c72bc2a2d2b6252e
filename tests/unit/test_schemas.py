from typing import Any, Dict

import pytest
from pydantic import ValidationError

from uitester.schemas.documents import Document
from uitester.schemas.run import DEFAULT_UPLOAD_SELECTOR, RunConfig, RunResult
from uitester.schemas.steps import (
    ClickStep,
    FillStep,
    NavigateStep,
    PressStep,
    ScreenshotStep,
    TypeStep,
    UnknownStep,
    WaitForSelectorStep,
    WaitStep,
    parse_steps,
)
from tests.fixtures.models.schema_factories import DocumentFactory, make_run_config


class TestStepParsing:
    """Test suite for the step union.

    Steps arrive as raw dictionaries from exported configuration files. These
    tests make sure every action lands on its own model, that required fields
    are enforced when the list is built, and that unknown actions survive
    parsing so the interpreter can report them.
    """

    # ? VALID CASE
    @pytest.mark.parametrize(
        "raw,expected_type",
        [
            ({"action": "click", "selector": "#go"}, ClickStep),
            ({"action": "fill", "selector": "#email", "value": "a@b.c"}, FillStep),
            ({"action": "type", "selector": "#search", "value": "abc"}, TypeStep),
            ({"action": "wait", "duration": 250}, WaitStep),
            ({"action": "waitForSelector", "selector": ".ready"}, WaitForSelectorStep),
            ({"action": "press", "key": "Enter"}, PressStep),
            ({"action": "navigate", "url": "https://example.com"}, NavigateStep),
            ({"action": "screenshot"}, ScreenshotStep),
        ],
    )
    def test_each_action_parses_to_its_model(self, raw: Dict[str, Any], expected_type: type) -> None:
        steps = parse_steps([raw])

        assert len(steps) == 1
        assert isinstance(steps[0], expected_type)
        assert steps[0].action == raw["action"]

    # ? VALID CASE
    def test_steps_keep_their_order(self) -> None:
        steps = parse_steps(
            [
                {"action": "click", "selector": "#a"},
                {"action": "wait"},
                {"action": "press", "key": "Tab"},
            ]
        )

        assert [step.action for step in steps] == ["click", "wait", "press"]

    # ? VALID CASE
    def test_camel_case_and_snake_case_wait_after_are_accepted(self) -> None:
        camel, snake = parse_steps(
            [
                {"action": "click", "selector": "#a", "waitAfter": 300},
                {"action": "click", "selector": "#b", "wait_after": 400},
            ]
        )

        assert camel.wait_after == 300
        assert snake.wait_after == 400

    # ? VALID CASE
    def test_fill_and_type_value_defaults_to_empty_string(self) -> None:
        fill, type_step = parse_steps(
            [
                {"action": "fill", "selector": "#a"},
                {"action": "type", "selector": "#b"},
            ]
        )

        assert fill.value == ""
        assert type_step.value == ""

    # ? VALID CASE
    def test_unknown_action_becomes_unknown_step(self) -> None:
        (step,) = parse_steps([{"action": "frobnicate", "target": "#x"}])

        assert isinstance(step, UnknownStep)
        assert step.action == "frobnicate"
        assert step.model_extra == {"target": "#x"}

    # ! INVALID CASE
    @pytest.mark.parametrize(
        "raw",
        [
            {"action": "click"},
            {"action": "click", "selector": ""},
            {"action": "fill", "value": "x"},
            {"action": "type"},
            {"action": "waitForSelector"},
            {"action": "navigate"},
            {"action": "press"},
            {"action": "press", "key": ""},
        ],
    )
    def test_missing_required_field_is_rejected(self, raw: Dict[str, Any]) -> None:
        with pytest.raises(ValidationError):
            parse_steps([raw])

    # ! INVALID CASE
    def test_negative_wait_after_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_steps([{"action": "wait", "waitAfter": -1}])

    # ! INVALID CASE
    def test_steps_are_immutable(self) -> None:
        (step,) = parse_steps([{"action": "click", "selector": "#go"}])

        with pytest.raises(ValidationError):
            step.selector = "#other"  # type: ignore[misc]


class TestStepDescriptions:
    # ? VALID CASE
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ({"action": "click", "selector": "#a"}, "Click element"),
            ({"action": "fill", "selector": "#a"}, "Fill input field"),
            ({"action": "type", "selector": "#a"}, "Type text"),
            ({"action": "wait"}, "Wait"),
            ({"action": "waitForSelector", "selector": "#a"}, "Wait for element"),
            ({"action": "navigate", "url": "https://example.com"}, "Navigate to URL"),
            ({"action": "press", "key": "Enter"}, "Press key"),
            ({"action": "screenshot"}, "screenshot"),
            ({"action": "frobnicate"}, "frobnicate"),
        ],
    )
    def test_default_description_per_action(self, raw: Dict[str, Any], expected: str) -> None:
        (step,) = parse_steps([raw])

        assert step.resolved_description() == expected

    # ? VALID CASE
    def test_explicit_description_wins(self) -> None:
        (step,) = parse_steps([{"action": "click", "selector": "#a", "description": "Open menu"}])

        assert step.resolved_description() == "Open menu"

    # ? VALID CASE
    @pytest.mark.parametrize(
        "step_class",
        [
            ClickStep,
            FillStep,
            TypeStep,
            WaitStep,
            WaitForSelectorStep,
            PressStep,
            NavigateStep,
            ScreenshotStep,
            UnknownStep,
        ],
    )
    def test_every_step_variant_is_documented(self, step_class: type) -> None:
        assert step_class.__doc__ is not None
        assert step_class.__doc__.strip() != ""


class TestRunConfig:
    """Test suite for `RunConfig`.

    The run configuration is built from exported JSON files, so these tests
    cover the camelCase format, the defaults of the desktop tool and the
    preconditions that must hold before a run may start.
    """

    # ? VALID CASE
    def test_defaults(self) -> None:
        config = make_run_config()

        assert config.upload_selector == DEFAULT_UPLOAD_SELECTOR
        assert config.submit_selector is None
        assert config.wait_after_upload == 2000
        assert config.wait_after_submit == 3000
        assert config.headless is False
        assert config.ui_automation_only is False
        assert config.initial_steps == []
        assert config.per_upload_steps == []
        assert config.post_upload_steps == []

    # ? VALID CASE
    def test_exported_camel_case_format(self) -> None:
        config = RunConfig.model_validate(
            {
                "targetUrl": "https://example.com/import",
                "uploadSelector": "#file",
                "submitSelector": "button[type='submit']",
                "waitAfterUpload": 100,
                "waitAfterSubmit": 200,
                "headless": True,
                "documents": [{"name": "a.csv", "path": "/tmp/a.csv"}],
                "initialSteps": [{"action": "click", "selector": "#login"}],
                "perUploadSteps": [{"action": "click", "selector": "#import"}],
                "postUploadSteps": [{"action": "press", "key": "Escape"}],
                "customSteps": [],
            }
        )

        assert config.target_url == "https://example.com/import"
        assert config.upload_selector == "#file"
        assert config.submit_selector == "button[type='submit']"
        assert config.wait_after_upload == 100
        assert config.headless is True
        assert config.documents[0].name == "a.csv"
        assert isinstance(config.initial_steps[0], ClickStep)
        assert isinstance(config.post_upload_steps[0], PressStep)

    # ! INVALID CASE
    def test_empty_target_url_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_run_config(target_url="")

    # ! INVALID CASE
    def test_blank_target_url_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_run_config(target_url="   ")

    # ! INVALID CASE
    def test_documents_required_unless_ui_only(self) -> None:
        with pytest.raises(ValidationError):
            make_run_config(documents=[])

    # ? VALID CASE
    def test_ui_only_run_needs_no_documents(self) -> None:
        config = make_run_config(documents=[], ui_automation_only=True)

        assert config.documents == []

    # ! INVALID CASE
    def test_invalid_step_in_config_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_run_config(initial_steps=[{"action": "navigate"}])

    # ! INVALID CASE
    def test_config_is_immutable(self) -> None:
        config = make_run_config()

        with pytest.raises(ValidationError):
            config.headless = True  # type: ignore[misc]


class TestDocumentAndResult:
    # ? VALID CASE
    def test_document_from_path(self, tmp_path: Any) -> None:
        file_path = tmp_path / "Orders.JSON"
        file_path.write_text('{"a": 1}', encoding="utf-8")

        document = Document.from_path(file_path)

        assert document.name == "Orders.JSON"
        assert document.extension == ".json"
        assert document.size == len('{"a": 1}')
        assert document.path.is_absolute()
        assert document.modified is not None

    # ! INVALID CASE
    def test_document_from_missing_path_raises(self, tmp_path: Any) -> None:
        with pytest.raises(FileNotFoundError):
            Document.from_path(tmp_path / "missing.json")

    # ? VALID CASE
    def test_run_result_duration_and_attempted(self) -> None:
        result = RunResult()
        result.successful.append(DocumentFactory.custom_build(name="a.json"))

        assert result.attempted == 1
        assert result.duration_seconds is None

        result.end_time = result.start_time
        assert result.duration_seconds == 0.0
