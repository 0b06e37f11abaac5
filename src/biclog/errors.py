"""Typed error hierarchy shared by the gateway and the service layer.

Every class carries a stable ``code`` that the service layer copies into
:class:`~biclog.services.result.ServiceError`, so callers can branch on
the failure kind without inspecting the message.
"""

from __future__ import annotations

from typing import Any


class BiclogError(Exception):
    """Base exception for all biclog errors."""

    code = "ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        return self.message


class ValidationError(BiclogError):
    """A required field is missing or empty."""

    code = "VALIDATION_FAILED"


class NotFoundError(BiclogError):
    """No record with the requested id."""

    code = "NOT_FOUND"


class DataFileNotFoundError(NotFoundError):
    """The data file does not exist."""

    code = "FILE_NOT_FOUND"

    def __init__(self, path: str) -> None:
        super().__init__(f"data file {path} does not exist", {"path": path})
        self.path = path


class AlreadyExistsError(BiclogError):
    """The target of ``init`` is already present."""

    code = "ALREADY_EXISTS"

    def __init__(self, path: str) -> None:
        super().__init__(f"file {path} already exists", {"path": path})
        self.path = path


class InvalidFormatError(BiclogError):
    """The file exists but is not a biclog data file."""

    code = "INVALID_FORMAT"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"{path} is not a biclog data file ({reason})",
            {"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason


class StorageError(BiclogError):
    """A query or write against the data file failed."""

    code = "STORAGE_ERROR"


class FileAccessError(StorageError):
    """The filesystem refused to create or open the data file."""

    code = "IO_ERROR"
