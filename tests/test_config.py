import logging
from pathlib import Path

import pytest

from widgetdock.config import DEFAULT_WIDGETS_FOLDER, Config, load_config
from widgetdock.loader import NamePolicy


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    cfg = load_config()

    assert cfg.raw == {}
    assert cfg.widgets_folder == Path(tmp_path) / ".local/share/widgetdock/widgets"
    assert cfg.name_policy is NamePolicy.REQUIRED
    assert cfg.required_fields == []
    assert cfg.log_level == "WARNING"
    assert DEFAULT_WIDGETS_FOLDER.startswith("~")


def test_load_from_yaml(tmp_path, monkeypatch):
    monkeypatch.setenv("WIDGET_HOME", str(tmp_path))
    path = tmp_path / "widgetdock.yaml"
    path.write_text(
        "widgets_folder: $WIDGET_HOME/widgets\n"
        "log_level: debug\n"
        "loader:\n"
        "  name_policy: Fallback\n"
        "  required_fields: [kind]\n",
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.widgets_folder == tmp_path / "widgets"
    assert cfg.log_level == "DEBUG"
    assert cfg.name_policy is NamePolicy.FALLBACK
    assert cfg.required_fields == ["kind"]

    loader = cfg.make_loader()
    assert loader.name_policy is NamePolicy.FALLBACK
    assert loader.required_fields == ("kind",)


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_empty_file_is_defaults(tmp_path):
    path = tmp_path / "widgetdock.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).raw == {}


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "widgetdock.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "raw, prop",
    [
        ({"loader": {"name_policy": "sometimes"}}, "name_policy"),
        ({"loader": {"required_fields": "name"}}, "required_fields"),
        ({"loader": {"required_fields": [1]}}, "required_fields"),
        ({"log_level": "loud"}, "log_level"),
    ],
)
def test_invalid_values_raise(raw, prop):
    with pytest.raises(ValueError):
        getattr(Config(raw=raw), prop)


def test_apply_logging_sets_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    Config(raw={"log_level": "info"}).apply_logging()
    assert calls["level"] == logging.INFO
