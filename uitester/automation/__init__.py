"""
Automation core of UI Tester.

This module provides the engine that submits documents into a web form:
- Declarative step execution against a live browser session
- A per-document upload loop with failure isolation
- Run-scoped cancellation observed at step and document boundaries
- Guaranteed browser teardown on every exit path

## Key Components

1. **RunOrchestrator** - Session lifecycle, initial steps and the document loop
2. **StepInterpreter** - Executes step lists
3. **UploadOperation** - Uploads one document
4. **CancellationToken** - Cancellation flag of a run

The `AutomationEngine` control surface lives in `uitester.automation.engine`
and is exported from the top-level `uitester` package.
"""

from .errors import (
    BrowserError,
    ConfigurationError,
    DocumentSourceError,
    ElementNotFoundError,
    NavigationError,
    NetworkIdleTimeoutError,
    RunAlreadyActiveError,
    RunStateError,
    UITesterError,
    UnknownActionError,
)
from .cancellation import CancellationToken
from .step_interpreter import StepInterpreter
from .upload_operation import UploadOperation
from .run_orchestrator import RunOrchestrator, RunPhase

__all__ = [
    "UITesterError",
    "BrowserError",
    "ElementNotFoundError",
    "NavigationError",
    "NetworkIdleTimeoutError",
    "UnknownActionError",
    "ConfigurationError",
    "DocumentSourceError",
    "RunAlreadyActiveError",
    "RunStateError",
    "CancellationToken",
    "StepInterpreter",
    "UploadOperation",
    "RunOrchestrator",
    "RunPhase",
]
