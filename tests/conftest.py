import json
from pathlib import Path

import pytest

from widgetdock.fs import MemoryFileAccess
from widgetdock.loader import WidgetLoader


@pytest.fixture
def write_widget(tmp_path):
    """Write a widget file under tmp_path; dicts are JSON-encoded."""

    def _write(name: str, content, folder: Path | None = None) -> Path:
        base = folder or tmp_path
        base.mkdir(parents=True, exist_ok=True)
        path = base / name
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def memory_fs() -> MemoryFileAccess:
    return MemoryFileAccess()


@pytest.fixture
def memory_loader(memory_fs) -> WidgetLoader:
    return WidgetLoader(fs=memory_fs)
