"""
Document source for UI Tester.
"""

from .scanner import filter_documents, format_file_size, preview_document, scan_folder

__all__ = [
    "scan_folder",
    "filter_documents",
    "preview_document",
    "format_file_size",
]
