"""Shared exception classes for termtools."""

from __future__ import annotations


class ToolkitError(Exception):
    """Base exception for all termtools errors."""

    pass


class FileOperationError(ToolkitError):
    """Error during file operations."""

    pass


class ValidationError(ToolkitError):
    """Input validation error."""

    pass
