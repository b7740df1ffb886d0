"""
Error taxonomy for the generate-and-write pipeline.

Input errors (menu choice, data type, count) are recovered by re-prompting.
FileWriteError sends the user back to the main menu.  None of them end
the process.
"""

from __future__ import annotations

from pathlib import Path


class DatagenError(Exception):
    """Base class for all datagen errors."""


class InvalidMenuChoice(DatagenError, ValueError):
    """Raised when the menu selection is neither "1" nor "2"."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid choice: {raw!r}. Enter 1 or 2.")


class InvalidDataType(DatagenError, ValueError):
    """Raised when the data type is not i/f."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            f"Invalid data type: {raw!r}. Use 'i' for integer or 'f' for float."
        )


class InvalidCount(DatagenError, ValueError):
    """Raised when the element count is non-numeric or not positive."""

    def __init__(self, raw: str, reason: str = "must be a positive whole number") -> None:
        self.raw = raw
        super().__init__(f"Invalid number of elements: {raw!r} ({reason}).")


class FileWriteError(DatagenError):
    """Raised when the output file cannot be opened or written."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Cannot write {path}: {reason}")
