"""
Result display utilities for UI Tester CLI.

This module provides utilities for displaying run results, document lists
and error messages in a consistent, formatted manner.
"""

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from uitester.documents import format_file_size
from uitester.schemas import Document, DocumentPreview, RunResult

console = Console()


def display_run_summary(result: RunResult, total: int) -> None:
    """Display the outcome of a run.

    Args:
        result: Result returned by the engine
        total: Number of documents in the run configuration
    """
    duration = result.duration_seconds or 0.0
    style = "green" if not result.failed else "yellow"

    summary = Text(
        f"✅ Uploaded: {len(result.successful)}/{total}\n"
        f"❌ Failed: {len(result.failed)}\n"
        f"⏱️ Duration: {duration:.2f} seconds",
        style=style,
    )
    console.print(Panel(summary, title="Automation Completed", border_style=style))

    if result.failed:
        table = Table(title="Failed documents", border_style="red")
        table.add_column("Document", style="bold")
        table.add_column("Error", style="red")
        for failure in result.failed:
            table.add_row(failure.document.name, failure.error)
        console.print(table)


def display_error(title: str, message: str) -> None:
    console.print(Panel(Text(f"❌ {message}", style="red"), title=title, border_style="red"))


def display_documents(documents: Sequence[Document], folder: str) -> None:
    """Display a table of documents found in a folder."""
    if not documents:
        console.print(
            Panel(
                Text(f"No documents found in {folder}", style="yellow"),
                title="Scan",
                border_style="yellow",
            )
        )
        return

    table = Table(title=f"Documents in {folder}", border_style="blue")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Modified", style="dim")

    for index, document in enumerate(documents, start=1):
        modified = document.modified.strftime("%Y-%m-%d %H:%M") if document.modified else "-"
        table.add_row(
            str(index),
            document.name,
            document.extension.lstrip(".").upper(),
            format_file_size(document.size),
            modified,
        )

    console.print(table)


def display_preview(name: str, preview: DocumentPreview) -> None:
    title = f"{name} (truncated)" if preview.truncated else name
    console.print(Panel(Text(preview.content), title=title, border_style="blue"))
