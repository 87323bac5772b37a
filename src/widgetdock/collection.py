from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Iterator

from .loader import WidgetLoader, get_widget_loader
from .record import WidgetRecord
from .report import LoadResult

logger = logging.getLogger(__name__)

class WidgetCollection:
    """The widgets a window is showing, plus the current selection."""

    def __init__(self, loader: WidgetLoader | None = None):
        self.loader = loader if loader is not None else get_widget_loader()
        self.widgets: list[WidgetRecord] = []
        self.selected: WidgetRecord | None = None

    def __len__(self) -> int:
        return len(self.widgets)

    def __iter__(self) -> Iterator[WidgetRecord]:
        return iter(self.widgets)

    def add_from_path(self, path: str | Path) -> LoadResult:
        result = self.loader.load_widget(path)
        if result.record is not None:
            self.widgets.append(result.record)
        else:
            logger.info(f"Widget not added: {result.error}")
        return result

    def add_from_folder(self, folder: str | Path) -> int:
        records = self.loader.load_all_in_folder(folder)
        self.widgets.extend(records)
        return len(records)

    def find(self, record_id: uuid.UUID) -> WidgetRecord | None:
        return next((w for w in self.widgets if w.id == record_id), None)

    def select(self, record_id: uuid.UUID | None) -> WidgetRecord | None:
        self.selected = self.find(record_id) if record_id is not None else None
        return self.selected

    def remove(self, record: WidgetRecord) -> None:
        self.widgets = [w for w in self.widgets if w.id != record.id]
        if self.selected is not None and self.selected.id == record.id:
            self.selected = None
