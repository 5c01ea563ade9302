"""Error types raised by the project-creation pipeline."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories the pipeline can surface."""
    INVALID_TEMPLATE = "invalid_template"
    FILE_SYSTEM = "file_system"
    SUBPROCESS = "subprocess"


ERROR_LABELS: dict[ErrorKind, str] = {
    ErrorKind.INVALID_TEMPLATE: "Invalid template",
    ErrorKind.FILE_SYSTEM: "File system error",
    ErrorKind.SUBPROCESS: "Subprocess error",
}


class ScaffoldError(Exception):
    """Raised when a pipeline step fails irrecoverably."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(f"{ERROR_LABELS[kind]}: {message}")
