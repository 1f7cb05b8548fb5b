"""Filesystem scanning that expands preset glob patterns into file records."""

from .file_record import FileRecord
from .scanner import Scanner, scan

__all__ = ["FileRecord", "Scanner", "scan"]
