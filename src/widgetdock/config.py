from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import logging
import os
import yaml

from .loader import NamePolicy, WidgetLoader

DEFAULT_CONFIG_PATH = "~/.config/widgetdock/widgetdock.yaml"
DEFAULT_WIDGETS_FOLDER = "~/.local/share/widgetdock/widgets"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def _expand(path: str) -> str:
    return os.path.expanduser(os.path.expandvars(path))

@dataclass(frozen=True)
class Config:
    raw: dict = field(default_factory=dict)

    @property
    def widgets_folder(self) -> Path:
        folder = self.raw.get("widgets_folder", DEFAULT_WIDGETS_FOLDER)
        return Path(_expand(str(folder)))

    @property
    def name_policy(self) -> NamePolicy:
        policy = str(self.raw.get("loader", {}).get("name_policy", NamePolicy.REQUIRED.value)).lower()
        try:
            return NamePolicy(policy)
        except ValueError:
            raise ValueError(
                f"Unsupported loader.name_policy {policy!r}. Supported: {[p.value for p in NamePolicy]}"
            ) from None

    @property
    def required_fields(self) -> list[str]:
        fields = self.raw.get("loader", {}).get("required_fields", [])
        if not isinstance(fields, list) or not all(isinstance(f, str) for f in fields):
            raise ValueError("loader.required_fields must be a list of strings.")
        return list(fields)

    @property
    def log_level(self) -> str:
        level = str(self.raw.get("log_level", "WARNING")).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unsupported log_level {level!r}. Supported: {list(LOG_LEVELS)}")
        return level

    def apply_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    def make_loader(self, fs=None) -> WidgetLoader:
        return WidgetLoader(
            fs=fs,
            name_policy=self.name_policy,
            extra_required_fields=self.required_fields,
        )

def load_config(path: str | Path | None = None) -> Config:
    """Read a YAML config file. With no path, a missing default file means defaults."""
    p = Path(_expand(str(path if path is not None else DEFAULT_CONFIG_PATH)))
    if path is None and not p.exists():
        return Config()
    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ValueError("widgetdock.yaml must contain a YAML mapping at top level.")
    return Config(raw=raw)
