from __future__ import annotations

from enum import Enum
from pathlib import Path

class LoadErrorKind(str, Enum):
    INVALID_EXTENSION = "invalid_extension"
    FILE_NOT_FOUND = "file_not_found"
    DATA_FORMAT = "data_format"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    PARSING_FAILED = "parsing_failed"

class WidgetLoadError(Exception):
    """Base class for every failure the widget loader can report."""

    kind: LoadErrorKind

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WidgetLoadError):
            return NotImplemented
        return (type(self), self.message, self.path) == (type(other), other.message, other.path)

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.path))

class InvalidExtensionError(WidgetLoadError):
    kind = LoadErrorKind.INVALID_EXTENSION

    def __init__(self, path: str | Path | None = None) -> None:
        super().__init__("File extension is not '.wg'", path)

class MissingFileError(WidgetLoadError):
    kind = LoadErrorKind.FILE_NOT_FOUND

    def __init__(self, path: str | Path | None = None) -> None:
        super().__init__("File not found.", path)

class DataFormatError(WidgetLoadError):
    kind = LoadErrorKind.DATA_FORMAT

    def __init__(
        self,
        message: str = "Failed to parse data format. Expecting JSON dictionary.",
        path: str | Path | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, path)
        self.cause = cause

class MissingRequiredFieldError(WidgetLoadError):
    kind = LoadErrorKind.MISSING_REQUIRED_FIELD

    def __init__(self, field: str, path: str | Path | None = None) -> None:
        super().__init__(f"Missing required field: {field}", path)
        self.field = field

class ParsingFailedError(WidgetLoadError):
    kind = LoadErrorKind.PARSING_FAILED

    def __init__(self, cause: BaseException, path: str | Path | None = None) -> None:
        super().__init__(f"Parsing error: {cause}", path)
        self.cause = cause
