"""
Document models for UI Tester.

A `Document` is a reference to a local file that will be uploaded into the
target web form. Documents are produced by the folder scanner and consumed
read-only by the automation engine.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from pydantic.alias_generators import to_camel


class Document(BaseModel):
    """A file to upload.

    Attributes:
        name (str): File name with extension (e.g. "orders.json")
        path (Path): Filesystem path handed to the upload input
        size (int): File size in bytes
        extension (str): Lower-cased extension including the dot (e.g. ".csv")
        modified (datetime): Last modification time of the file
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str = Field(min_length=1)
    path: Path
    size: NonNegativeInt = 0
    extension: str = ""
    modified: Optional[datetime] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Document":
        """Build a document from a file on disk.

        Args:
            path (Union[str, Path]): Path of an existing file

        Returns:
            Document: Document with size, extension and modification time filled in

        Raises:
            FileNotFoundError: If the file does not exist
        """
        file_path = Path(path).absolute()
        stats = file_path.stat()
        return cls(
            name=file_path.name,
            path=file_path,
            size=stats.st_size,
            extension=file_path.suffix.lower(),
            modified=datetime.fromtimestamp(stats.st_mtime),
        )


class DocumentPreview(BaseModel):
    """Text preview of a document.

    Attributes:
        content (str): Preview text, pretty-printed for JSON documents
        extension (str): Lower-cased extension of the previewed file
        truncated (bool): Whether the content was cut at the preview limit
    """

    content: str
    extension: str
    truncated: bool = False
