from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import DataFormatError

DEFAULT_NAME = "Unnamed Widget"

def sort_configuration(config: Mapping[str, str]) -> dict[str, str]:
    """Return ``config`` as a new dict in ascending key order."""
    return {key: config[key] for key in sorted(config)}

@dataclass
class WidgetRecord:
    """One validated widget definition.

    ``configuration`` is kept in ascending key order: it is re-sorted on
    construction, whenever it is assigned, and again when encoded. ``id`` is
    fixed for the lifetime of the object.
    """

    name: str
    configuration: dict[str, str] = field(default_factory=dict)
    description: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "id" and "id" in self.__dict__:
            raise AttributeError("WidgetRecord.id cannot be reassigned")
        if key == "configuration":
            value = sort_configuration(value)
        super().__setattr__(key, value)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": str(self.id),
            "name": self.name,
            "configuration": sort_configuration(self.configuration),
        }
        if self.description is not None:
            out["description"] = self.description
        return out

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, raw: Any) -> WidgetRecord:
        if not isinstance(raw, dict):
            raise DataFormatError("Widget record must be a JSON object.")

        raw_id = raw.get("id")
        if not isinstance(raw_id, str):
            raise DataFormatError("Widget record is missing a string 'id'.")
        try:
            record_id = uuid.UUID(raw_id)
        except ValueError as e:
            raise DataFormatError(f"Invalid widget id {raw_id!r}.", cause=e) from e

        name = raw.get("name")
        if not isinstance(name, str):
            raise DataFormatError("Widget record is missing a string 'name'.")

        config = raw.get("configuration")
        if not isinstance(config, dict) or not all(isinstance(v, str) for v in config.values()):
            raise DataFormatError("Widget 'configuration' must map strings to strings.")

        description = raw.get("description")
        if description is not None and not isinstance(description, str):
            raise DataFormatError("Widget 'description' must be a string.")

        return cls(name=name, configuration=config, description=description, id=record_id)

    @classmethod
    def from_json(cls, text: str | bytes) -> WidgetRecord:
        try:
            raw = json.loads(text)
        except ValueError as e:
            raise DataFormatError(cause=e) from e
        return cls.from_dict(raw)
