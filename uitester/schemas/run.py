"""
Run configuration and result models for UI Tester.

## Models

1. **RunConfig** - Everything one automation run needs (immutable)
2. **FailedDocument** - A document that failed, with its error message
3. **RunResult** - Outcome of a run, finalized in teardown

## Usage Examples

```python
from uitester.schemas import RunConfig

config = RunConfig.model_validate({
    "targetUrl": "https://example.com/import",
    "submitSelector": "button[type='submit']",
    "documents": [{"name": "a.json", "path": "/data/a.json"}],
    "perUploadSteps": [{"action": "click", "selector": "#open-import"}],
})
```
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator
from pydantic.alias_generators import to_camel

from uitester.schemas.documents import Document
from uitester.schemas.steps import StepList

DEFAULT_UPLOAD_SELECTOR = 'input[type="file"]'


class RunConfig(BaseModel):
    """Configuration of a single automation run.

    Field names follow the exported UI Tester configuration format
    (`targetUrl`, `waitAfterUpload`, ...); snake_case names are accepted
    as well. The model is frozen: a run never changes its configuration.

    Attributes:
        target_url (str): Page to open before anything else
        upload_selector (str): Selector of the file input to upload into
        submit_selector (Optional[str]): Button clicked after a file is set
        wait_after_upload (int): Pause between two documents, in milliseconds
        wait_after_submit (int): Pause after clicking submit, in milliseconds
        headless (bool): Whether to run the browser without a window
        ui_automation_only (bool): Run only the initial steps, no uploads
        documents (List[Document]): Documents to upload, in order
        initial_steps (StepList): Steps run once after the page loads
        per_upload_steps (StepList): Steps run before every document
        post_upload_steps (StepList): Steps run after every document
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    target_url: str = Field(min_length=1)
    upload_selector: str = Field(default=DEFAULT_UPLOAD_SELECTOR, min_length=1)
    submit_selector: Optional[str] = None
    wait_after_upload: NonNegativeInt = 2000
    wait_after_submit: NonNegativeInt = 3000
    headless: bool = False
    ui_automation_only: bool = False
    documents: List[Document] = Field(default_factory=list)
    initial_steps: StepList = Field(default_factory=list)
    per_upload_steps: StepList = Field(default_factory=list)
    post_upload_steps: StepList = Field(default_factory=list)

    @model_validator(mode="after")
    def check_documents_present(self) -> "RunConfig":
        if not self.target_url.strip():
            raise ValueError("targetUrl must not be empty")
        if not self.ui_automation_only and not self.documents:
            raise ValueError("At least one document is required unless uiAutomationOnly is set")
        return self


class FailedDocument(BaseModel):
    """A document whose upload failed.

    Attributes:
        document (Document): The document that failed
        error (str): Error message of the failure
    """

    document: Document
    error: str


class RunResult(BaseModel):
    """Outcome of an automation run.

    The lists grow while the run progresses; `end_time` is stamped once,
    in teardown, whichever way the run ends.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    successful: List[Document] = Field(default_factory=list)
    failed: List[FailedDocument] = Field(default_factory=list)
    start_time: datetime = Field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def attempted(self) -> int:
        return len(self.successful) + len(self.failed)

    @property
    def duration_seconds(self) -> Optional[float]:
        """Duration of the run, or None while it is still in progress."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()
