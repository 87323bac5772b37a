from __future__ import annotations

from .errors import (
    DataFormatError,
    InvalidExtensionError,
    LoadErrorKind,
    MissingFileError,
    MissingRequiredFieldError,
    ParsingFailedError,
    WidgetLoadError,
)
from .loader import (
    NamePolicy,
    WidgetLoader,
    load_all_in_folder,
    load_many,
    load_widget,
    load_widget_async,
)
from .record import WidgetRecord
from .report import LoadResult

__all__ = [
    "DataFormatError",
    "InvalidExtensionError",
    "LoadErrorKind",
    "LoadResult",
    "MissingFileError",
    "MissingRequiredFieldError",
    "NamePolicy",
    "ParsingFailedError",
    "WidgetLoadError",
    "WidgetLoader",
    "WidgetRecord",
    "load_all_in_folder",
    "load_many",
    "load_widget",
    "load_widget_async",
]
