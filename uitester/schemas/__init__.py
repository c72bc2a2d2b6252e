"""
Data models for UI Tester.

## Key Components

1. **Step** - Tagged union of declarative UI actions (`uitester.schemas.steps`)
2. **Document** - A local file to upload
3. **RunConfig / RunResult** - Input and outcome of an automation run
"""

from .documents import Document, DocumentPreview
from .run import DEFAULT_UPLOAD_SELECTOR, FailedDocument, RunConfig, RunResult
from .steps import (
    ActionKind,
    ClickStep,
    FillStep,
    NavigateStep,
    PressStep,
    ScreenshotStep,
    Step,
    StepList,
    TypeStep,
    UnknownStep,
    WaitForSelectorStep,
    WaitStep,
    parse_steps,
)

__all__ = [
    "Document",
    "DocumentPreview",
    "RunConfig",
    "RunResult",
    "FailedDocument",
    "DEFAULT_UPLOAD_SELECTOR",
    "ActionKind",
    "Step",
    "StepList",
    "ClickStep",
    "FillStep",
    "TypeStep",
    "WaitStep",
    "WaitForSelectorStep",
    "PressStep",
    "NavigateStep",
    "ScreenshotStep",
    "UnknownStep",
    "parse_steps",
]
