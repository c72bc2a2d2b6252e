"""
UI Tester - browser automation for bulk document uploads.

UI Tester drives a web browser through a configurable sequence of interface
actions to submit local JSON/CSV documents into a target web form, reporting
progress and logs as it goes.

## Key Components

1. **AutomationEngine** - Starts and stops automation runs
2. **RunConfig / RunResult** - Input and outcome of a run
3. **Step models** - Declarative UI actions (click, fill, type, wait, ...)
4. **EventChannel / observers** - Progress and log events
5. **Document source** - Folder scanning and previews

## Usage Examples

```python
import asyncio

from uitester import AutomationEngine, load_run_config, scan_folder

async def main() -> None:
    config = load_run_config("ui-tester-config.json", documents=scan_folder("./exports"))
    result = await AutomationEngine().start(config)
    print(f"{len(result.successful)} uploaded, {len(result.failed)} failed")

asyncio.run(main())
```
"""

from uitester.automation.engine import AutomationEngine
from uitester.automation.errors import (
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
from uitester.automation.run_orchestrator import RunOrchestrator
from uitester.config import ConfigurationFactory, UITesterSettings, load_run_config
from uitester.documents import filter_documents, format_file_size, preview_document, scan_folder
from uitester.events import (
    EventChannel,
    EventObserver,
    EventObserverType,
    LogEvent,
    LogType,
    ProgressEvent,
    ProgressStatus,
)
from uitester.schemas import Document, FailedDocument, RunConfig, RunResult, parse_steps

__version__ = "0.1.0"

__all__ = [
    "AutomationEngine",
    "RunOrchestrator",
    "RunConfig",
    "RunResult",
    "FailedDocument",
    "Document",
    "parse_steps",
    "load_run_config",
    "ConfigurationFactory",
    "UITesterSettings",
    "scan_folder",
    "filter_documents",
    "preview_document",
    "format_file_size",
    "EventChannel",
    "EventObserver",
    "EventObserverType",
    "ProgressEvent",
    "LogEvent",
    "LogType",
    "ProgressStatus",
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
]
