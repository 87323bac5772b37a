"""
WidgetLoader - turn ``.wg`` files into validated WidgetRecords.

A ``.wg`` file is a JSON object in UTF-8, or UTF-16/32 with a BOM. ``name``
is required, ``description`` is optional, and every other top-level string
value becomes a configuration entry. A nested ``configuration`` object is
also accepted; its string values are merged in and win over top-level keys
of the same name. Values that are not strings are dropped. Any ``id`` in
the file is ignored and a fresh one is assigned.
"""

from __future__ import annotations

import asyncio
import json
import locale
import logging
import unicodedata
from enum import Enum
from pathlib import Path
from typing import Any, Iterable

from .errors import (
    DataFormatError,
    InvalidExtensionError,
    MissingFileError,
    MissingRequiredFieldError,
    ParsingFailedError,
    WidgetLoadError,
)
from .fs import FileAccess, LocalFileAccess
from .record import DEFAULT_NAME, WidgetRecord
from .report import FileReport, FolderReport, LoadResult

logger = logging.getLogger(__name__)

WIDGET_EXTENSION = ".wg"

# Checked in this order; extra fields from the caller are appended.
REQUIRED_FIELDS: tuple[str, ...] = ("name",)

# Top-level keys that never become configuration entries.
RESERVED_KEYS = frozenset({"id", "name", "description", "configuration"})

class NamePolicy(str, Enum):
    REQUIRED = "required"
    FALLBACK = "fallback"

def has_widget_extension(path: str | Path) -> bool:
    return Path(path).suffix.lower() == WIDGET_EXTENSION

def _strip_accents(text: str) -> str:
    return "".join(c for c in unicodedata.normalize("NFKD", text) if not unicodedata.combining(c))

def _name_sort_key(record: WidgetRecord) -> tuple[str, str]:
    # Base letters first, accents only break ties.
    folded = record.name.casefold().replace("\0", "")
    return locale.strxfrm(_strip_accents(folded)), locale.strxfrm(folded)

def sort_by_name(records: Iterable[WidgetRecord]) -> list[WidgetRecord]:
    """Case-insensitive, locale-aware ascending sort. Stable for equal names."""
    return sorted(records, key=_name_sort_key)

class WidgetLoader:
    """
    Loads widget definition files through an injected FileAccess.

    The loader keeps no state between calls, so one instance can be shared
    freely across threads and tasks.
    """

    def __init__(
        self,
        fs: FileAccess | None = None,
        name_policy: NamePolicy | str = NamePolicy.REQUIRED,
        extra_required_fields: Iterable[str] = (),
    ):
        """
        Args:
            fs: File access to read through; defaults to the local disk.
            name_policy: ``required`` fails files without a name,
                ``fallback`` gives them the default name instead.
            extra_required_fields: Keys checked after the built-in ones.
        """
        self.fs: FileAccess = fs if fs is not None else LocalFileAccess()
        self.name_policy = NamePolicy(name_policy)

        required = list(REQUIRED_FIELDS)
        if self.name_policy is NamePolicy.FALLBACK:
            required.remove("name")
        for key in extra_required_fields:
            if key not in required:
                required.append(key)
        self.required_fields: tuple[str, ...] = tuple(required)

    # Single file

    def load_widget(self, path: str | Path) -> LoadResult:
        """
        Load one ``.wg`` file.

        Never raises: every failure comes back as a LoadResult carrying a
        WidgetLoadError.
        """
        path = Path(path)
        try:
            record = self._load(path)
        except WidgetLoadError as e:
            if e.path is None:
                e.path = path
            return LoadResult.failure(e)
        except Exception as e:
            return LoadResult.failure(ParsingFailedError(e, path))

        logger.debug(f"Loaded widget {record.name!r} from {path}")
        return LoadResult.success(record)

    async def load_widget_async(self, path: str | Path) -> LoadResult:
        """Run :meth:`load_widget` on a worker thread."""
        return await asyncio.to_thread(self.load_widget, path)

    def _load(self, path: Path) -> WidgetRecord:
        if not has_widget_extension(path):
            raise InvalidExtensionError(path)

        try:
            data = self.fs.read_bytes(path)
        except (OSError, ValueError) as e:
            raise MissingFileError(path) from e

        raw = self._decode(data, path)
        self.validate(raw, path)
        return self._build(raw)

    def _decode(self, data: bytes, path: Path) -> dict[str, Any]:
        try:
            raw = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DataFormatError(path=path, cause=e) from e
        except RecursionError as e:
            raise ParsingFailedError(e, path) from e

        if not isinstance(raw, dict) or not raw:
            raise DataFormatError(path=path)
        return raw

    def validate(self, raw: dict[str, Any], path: str | Path | None = None) -> None:
        """Raise MissingRequiredFieldError for the first absent or null field."""
        for key in self.required_fields:
            if raw.get(key) is None:
                raise MissingRequiredFieldError(key, path)

    def _build(self, raw: dict[str, Any]) -> WidgetRecord:
        config = {k: v for k, v in raw.items() if k not in RESERVED_KEYS and isinstance(v, str)}

        nested = raw.get("configuration")
        if isinstance(nested, dict):
            config.update({k: v for k, v in nested.items() if isinstance(v, str)})

        name = raw.get("name")
        if not isinstance(name, str) or not name:
            name = DEFAULT_NAME

        description = raw.get("description")
        if not isinstance(description, str):
            description = None

        return WidgetRecord(name=name, configuration=config, description=description)

    # Bulk

    def load_many(self, paths: Iterable[str | Path]) -> list[WidgetRecord]:
        """Load every path, drop the failures, return the rest sorted by name."""
        return self.inspect_many(paths).records

    def load_all_in_folder(self, folder: str | Path) -> list[WidgetRecord]:
        """Load the ``.wg`` files directly inside ``folder``.

        A folder that cannot be listed yields an empty list.
        """
        return self.inspect_folder(folder).records

    def inspect_many(self, paths: Iterable[str | Path], folder: Path | None = None) -> FolderReport:
        files: list[FileReport] = []
        for p in paths:
            result = self.load_widget(p)
            if not result.ok:
                logger.warning(f"Skipping widget file: {result.error}")
            files.append(FileReport(path=Path(p), result=result))

        records = sort_by_name(f.record for f in files if f.record is not None)
        logger.info(f"Loaded {len(records)} of {len(files)} widget files")
        return FolderReport(folder=folder, files=files, records=records)

    def inspect_folder(self, folder: str | Path) -> FolderReport:
        """Like :meth:`load_all_in_folder` but keeps per-file outcomes."""
        folder = Path(folder)
        try:
            entries = self.fs.list_dir(folder)
        except (OSError, ValueError) as e:
            logger.warning(f"Cannot list widget folder {folder}: {e}")
            return FolderReport(folder=folder, error=e)

        candidates = sorted(p for p in entries if has_widget_extension(p))
        logger.debug(f"Found {len(candidates)} widget files in {folder}")
        return self.inspect_many(candidates, folder=folder)

# Default instance over the local disk
_default_loader: WidgetLoader | None = None

def get_widget_loader() -> WidgetLoader:
    """Get the shared WidgetLoader over the local filesystem."""
    global _default_loader
    if _default_loader is None:
        _default_loader = WidgetLoader()
    return _default_loader

def load_widget(path: str | Path) -> LoadResult:
    return get_widget_loader().load_widget(path)

async def load_widget_async(path: str | Path) -> LoadResult:
    return await get_widget_loader().load_widget_async(path)

def load_many(paths: Iterable[str | Path]) -> list[WidgetRecord]:
    return get_widget_loader().load_many(paths)

def load_all_in_folder(folder: str | Path) -> list[WidgetRecord]:
    return get_widget_loader().load_all_in_folder(folder)
