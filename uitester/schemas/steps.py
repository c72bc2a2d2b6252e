"""
Declarative step models for UI Tester.

A step is one user-interface action (click, fill, type, wait, ...) executed
against the browser session. Every action kind is its own Pydantic model, and
the `Step` type is a tagged union of those models, so the fields required by
an action are enforced when the step list is built rather than when the step
runs.

Step data uses the same camelCase keys as exported UI Tester configurations
(`waitAfter`, `waitForSelector`); snake_case field names are accepted too.

## Usage Examples

```python
from uitester.schemas.steps import StepList, parse_steps

steps = parse_steps([
    {"action": "click", "selector": "#accept-cookies"},
    {"action": "fill", "selector": "#email", "value": "me@example.com"},
    {"action": "wait", "duration": 500, "waitAfter": 200},
])
```
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    NonNegativeInt,
    Tag,
    TypeAdapter,
)
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, Field(min_length=1)]


class ActionKind(str, Enum):
    """Supported step actions."""

    CLICK = "click"
    FILL = "fill"
    TYPE = "type"
    WAIT = "wait"
    WAIT_FOR_SELECTOR = "waitForSelector"
    PRESS = "press"
    NAVIGATE = "navigate"
    SCREENSHOT = "screenshot"


DEFAULT_DESCRIPTIONS: Dict[str, str] = {
    ActionKind.CLICK.value: "Click element",
    ActionKind.FILL.value: "Fill input field",
    ActionKind.TYPE.value: "Type text",
    ActionKind.WAIT.value: "Wait",
    ActionKind.WAIT_FOR_SELECTOR.value: "Wait for element",
    ActionKind.NAVIGATE.value: "Navigate to URL",
    ActionKind.PRESS.value: "Press key",
}

UNKNOWN_ACTION_TAG = "__unknown__"

_KNOWN_ACTIONS = frozenset(kind.value for kind in ActionKind)


class StepBase(BaseModel):
    """Fields shared by every step.

    Attributes:
        description (Optional[str]): Human readable label used in logs
        wait_after (Optional[int]): Pause after the action, in milliseconds
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    action: str
    description: Optional[str] = None
    wait_after: Optional[NonNegativeInt] = None

    def resolved_description(self) -> str:
        """Return the step description, falling back to the default for its action."""
        if self.description:
            return self.description
        return DEFAULT_DESCRIPTIONS.get(self.action, self.action)


class ClickStep(StepBase):
    """Click the element matching `selector`."""

    action: Literal["click"] = "click"
    selector: NonEmptyStr


class FillStep(StepBase):
    """Replace the content of an input field with `value`."""

    action: Literal["fill"] = "fill"
    selector: NonEmptyStr
    value: str = ""


class TypeStep(StepBase):
    """Type `value` into an element one character at a time."""

    action: Literal["type"] = "type"
    selector: NonEmptyStr
    value: str = ""


class WaitStep(StepBase):
    """Pause for `duration` milliseconds, or the default wait when unset or 0."""

    action: Literal["wait"] = "wait"
    duration: Optional[NonNegativeInt] = None


class WaitForSelectorStep(StepBase):
    """Wait until `selector` is attached to the DOM."""

    action: Literal["waitForSelector"] = "waitForSelector"
    selector: NonEmptyStr
    timeout: Optional[NonNegativeInt] = None


class PressStep(StepBase):
    """Press a keyboard key such as `Enter` or `Escape`."""

    action: Literal["press"] = "press"
    key: NonEmptyStr


class NavigateStep(StepBase):
    """Open `url` and wait for the network to become idle."""

    action: Literal["navigate"] = "navigate"
    url: NonEmptyStr


class ScreenshotStep(StepBase):
    """Save a screenshot of the page to `path`, or the default screenshot path."""

    action: Literal["screenshot"] = "screenshot"
    path: Optional[str] = None


class UnknownStep(StepBase):
    """A step whose action is not recognised.

    Unknown steps are kept in the step list so the interpreter can report
    and skip them; any extra fields are preserved as given.
    """

    model_config = ConfigDict(extra="allow")

    action: str


def _step_discriminator(value: Any) -> str:
    action = value.get("action") if isinstance(value, dict) else getattr(value, "action", None)
    if isinstance(action, ActionKind):
        action = action.value
    if action in _KNOWN_ACTIONS:
        return str(action)
    return UNKNOWN_ACTION_TAG


Step = Annotated[
    Union[
        Annotated[ClickStep, Tag("click")],
        Annotated[FillStep, Tag("fill")],
        Annotated[TypeStep, Tag("type")],
        Annotated[WaitStep, Tag("wait")],
        Annotated[WaitForSelectorStep, Tag("waitForSelector")],
        Annotated[PressStep, Tag("press")],
        Annotated[NavigateStep, Tag("navigate")],
        Annotated[ScreenshotStep, Tag("screenshot")],
        Annotated[UnknownStep, Tag(UNKNOWN_ACTION_TAG)],
    ],
    Discriminator(_step_discriminator),
]

StepList = List[Step]

_step_list_adapter: TypeAdapter[List[Step]] = TypeAdapter(StepList)


def parse_steps(data: List[Dict[str, Any]]) -> List[Step]:
    """Validate raw step dictionaries into step models.

    Args:
        data (List[Dict[str, Any]]): Raw step data, e.g. from a JSON config file

    Returns:
        List[Step]: Validated, immutable steps in their original order

    Raises:
        pydantic.ValidationError: If a known action is missing a required field
    """
    return _step_list_adapter.validate_python(data)
