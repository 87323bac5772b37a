from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import WidgetLoadError
from .record import WidgetRecord

@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one file: exactly one of ``record``/``error`` is set."""

    record: WidgetRecord | None = None
    error: WidgetLoadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, record: WidgetRecord) -> LoadResult:
        return cls(record=record)

    @classmethod
    def failure(cls, error: WidgetLoadError) -> LoadResult:
        return cls(error=error)

    def unwrap(self) -> WidgetRecord:
        if self.error is not None:
            raise self.error
        return self.record

@dataclass(frozen=True)
class FileReport:
    path: Path
    result: LoadResult

    @property
    def ok(self) -> bool:
        return self.result.ok

    @property
    def record(self) -> WidgetRecord | None:
        return self.result.record

    @property
    def error(self) -> WidgetLoadError | None:
        return self.result.error

@dataclass(frozen=True)
class FolderReport:
    """Per-file diagnostics for a bulk load.

    ``records`` holds the same sorted successes the plain bulk load returns.
    ``error`` is set when the folder itself could not be listed.
    """

    folder: Path | None
    files: list[FileReport] = field(default_factory=list)
    records: list[WidgetRecord] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and all(f.ok for f in self.files)

    @property
    def failures(self) -> list[FileReport]:
        return [f for f in self.files if not f.ok]
