"""
Utilities for the UI Tester CLI.
"""

from .result_display import (
    display_documents,
    display_error,
    display_preview,
    display_run_summary,
)
from .style import MARKDOWN_CONFIG, display_logo

__all__ = [
    "MARKDOWN_CONFIG",
    "display_logo",
    "display_documents",
    "display_error",
    "display_preview",
    "display_run_summary",
]
