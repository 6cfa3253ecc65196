"""
Exception classes for monochrome-indexer.

Only hard failures are raised. Soft failures during a scan (unreadable
entries, missing or corrupt tags) are logged and absorbed where they occur.

Exception Hierarchy:
    IndexerError (base)
        AppDirError - application base directory cannot be determined
        BackgroundsDirError - backgrounds folder cannot be created
        ScanRootError - a requested scan root is missing or unreadable
"""

from typing import Optional


class IndexerError(Exception):
    """
    Base exception for all monochrome-indexer errors.

    Attributes:
        message: Human-readable error description, shown to the caller as-is.
        details: Optional dictionary with additional context (e.g. the path).
    """

    def __init__(self, message: str, details: Optional[dict] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class AppDirError(IndexerError):
    """Raised when the running application's own directory cannot be determined."""
    pass


class BackgroundsDirError(IndexerError):
    """
    Raised when the backgrounds folder next to the application is missing
    and cannot be created.
    """
    pass


class ScanRootError(IndexerError):
    """
    Raised when an explicitly requested scan root is inaccessible at the top level.

    Common causes:
        - the path does not exist
        - the path is a file, not a directory
        - listing the directory is denied
    """
    pass
