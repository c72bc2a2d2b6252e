"""
Run configuration loading for UI Tester.

Run configurations are the JSON files exported by the UI Tester desktop tool
(camelCase keys such as `targetUrl`, `perUploadSteps`), or TOML files with the
same keys. Documents may be listed in the file, either as objects or as plain
paths relative to the configuration file, or be supplied by the caller.

## Usage Examples

```python
from uitester.config import load_run_config
from uitester.documents import scan_folder

config = load_run_config(
    "ui-tester-config.json",
    documents=scan_folder("./exports"),
    headless=True,
)
```
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import tomli
from pydantic import ValidationError

from uitester.automation.errors import ConfigurationError
from uitester.schemas.documents import Document
from uitester.schemas.run import RunConfig


def _read_config_file(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()

    try:
        if suffix == ".toml":
            with open(path, "rb") as f:
                return tomli.load(f)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, tomli.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Invalid run configuration file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Run configuration '{path}' must contain an object at top level")
    return data


def _resolve_documents(raw_documents: List[Any], base_dir: Path) -> List[Any]:
    """Turn plain path entries into documents read from disk."""
    resolved: List[Any] = []
    for entry in raw_documents:
        if isinstance(entry, str):
            entry_path = Path(entry)
            if not entry_path.is_absolute():
                entry_path = base_dir / entry_path
            try:
                resolved.append(Document.from_path(entry_path))
            except OSError as e:
                raise ConfigurationError(f"Document not readable: {entry_path} ({e})") from e
        else:
            resolved.append(entry)
    return resolved


def load_run_config(
    path: Union[str, Path],
    documents: Optional[Sequence[Document]] = None,
    **overrides: Any,
) -> RunConfig:
    """Load a run configuration from a JSON or TOML file.

    Args:
        path (Union[str, Path]): Path of the `.json` or `.toml` configuration file
        documents (Optional[Sequence[Document]]): Documents replacing the ones in the file
        **overrides (Any): Field values replacing the ones in the file; both
            snake_case (`headless`, `ui_automation_only`) and camelCase keys work.
            `None` values are ignored.

    Returns:
        RunConfig: Validated, immutable run configuration

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigurationError(f"Run configuration file not found: {config_path}")

    data = _read_config_file(config_path)

    if documents is not None:
        data["documents"] = list(documents)
    elif isinstance(data.get("documents"), list):
        data["documents"] = _resolve_documents(data["documents"], config_path.parent)

    for key, value in overrides.items():
        if value is None:
            continue
        # drop a camelCase duplicate so the override is the only value for the field
        camel_key = RunConfig.model_fields[key].alias if key in RunConfig.model_fields else None
        if camel_key and camel_key in data:
            del data[camel_key]
        data[key] = value

    try:
        return RunConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid run configuration '{config_path}': {e}") from e
