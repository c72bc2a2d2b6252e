"""
Document source for UI Tester: folder scanning and file previews.

## Usage Examples

```python
from uitester.documents import format_file_size, preview_document, scan_folder

for document in scan_folder("./exports"):
    print(document.name, format_file_size(document.size))

print(preview_document("./exports/orders.json").content)
```
"""

import json
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from uitester.automation.errors import DocumentSourceError
from uitester.schemas.documents import Document, DocumentPreview

DEFAULT_EXTENSIONS = (".json", ".csv")
DEFAULT_PREVIEW_CHARS = 5000
TRUNCATION_MARKER = "\n...(truncated)"


def _normalize_extensions(extensions: Iterable[str]) -> List[str]:
    return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions]


def scan_folder(
    folder: Union[str, Path], extensions: Sequence[str] = DEFAULT_EXTENSIONS
) -> List[Document]:
    """List the documents directly inside `folder`.

    Args:
        folder (Union[str, Path]): Folder to scan (not recursive)
        extensions (Sequence[str]): Extensions to keep, compared case-insensitively

    Returns:
        List[Document]: Matching regular files, sorted by name

    Raises:
        DocumentSourceError: If the folder does not exist or cannot be read
    """
    folder_path = Path(folder)
    if not folder_path.is_dir():
        raise DocumentSourceError(f"Folder not found: {folder_path}")

    allowed = set(_normalize_extensions(extensions))

    try:
        documents = [
            Document.from_path(entry)
            for entry in folder_path.iterdir()
            if entry.is_file() and entry.suffix.lower() in allowed
        ]
    except OSError as e:
        raise DocumentSourceError(f"Failed to scan folder {folder_path}: {e}") from e

    return sorted(documents, key=lambda document: document.name)


def filter_documents(documents: Iterable[Document], extensions: Sequence[str]) -> List[Document]:
    """Keep the documents whose extension is in `extensions`, preserving order."""
    allowed = set(_normalize_extensions(extensions))
    return [document for document in documents if document.extension in allowed]


def preview_document(
    path: Union[str, Path], max_chars: int = DEFAULT_PREVIEW_CHARS
) -> DocumentPreview:
    """Read the beginning of a document for display.

    Content longer than `max_chars` is cut and marked as truncated. Complete
    JSON documents are pretty-printed; JSON that does not parse is shown as is.

    Args:
        path (Union[str, Path]): File to preview
        max_chars (int): Maximum number of characters kept

    Returns:
        DocumentPreview: Preview text with extension and truncation flag

    Raises:
        DocumentSourceError: If the file cannot be read as UTF-8 text
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentSourceError(f"Failed to read {file_path}: {e}") from e

    extension = file_path.suffix.lower()

    if len(content) > max_chars:
        return DocumentPreview(
            content=content[:max_chars] + TRUNCATION_MARKER,
            extension=extension,
            truncated=True,
        )

    if extension == ".json":
        try:
            content = json.dumps(json.loads(content), indent=2, ensure_ascii=False)
        except json.JSONDecodeError:
            pass

    return DocumentPreview(content=content, extension=extension, truncated=False)


def format_file_size(size: int) -> str:
    """Human readable size: `512 B`, `1.5 KB`, `2.0 MB`."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
