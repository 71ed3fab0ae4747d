from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .base import load_object, read_str_map

_WHAT = "cloudevent overrides"


@dataclass
class CloudEventOverrides:
    """Extension attributes applied to every outbound CloudEvent."""

    extensions: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_json(raw: str) -> "CloudEventOverrides":
        doc = load_object(raw, _WHAT) or {}
        return CloudEventOverrides(extensions=read_str_map(doc, "extensions", _WHAT))

    def to_payload(self) -> Dict[str, object]:
        if not self.extensions:
            return {}
        return {"extensions": dict(self.extensions)}
