from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..adapter.models.base import json_sanitize


@dataclass(frozen=True)
class GroupVersion:
    group: str
    version: str

    def with_kind(self, kind: str) -> "GroupVersionKind":
        return GroupVersionKind(group=self.group, version=self.version, kind=kind)

    def __str__(self) -> str:
        return f"{self.group}/{self.version}" if self.group else self.version


@dataclass(frozen=True)
class GroupVersionKind:
    group: str
    version: str
    kind: str


@dataclass
class ObjectMeta:
    name: str = ""
    namespace: str = ""
    uid: str = ""
    generation: int = 0
    labels: Dict[str, str] = field(default_factory=dict)
    annotations: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return json_sanitize(
            {
                "name": self.name,
                "namespace": self.namespace,
                "uid": self.uid,
                "generation": self.generation or None,
                "labels": self.labels,
                "annotations": self.annotations,
            }
        )

    @staticmethod
    def from_dict(doc: Optional[Dict[str, Any]]) -> "ObjectMeta":
        doc = doc or {}
        return ObjectMeta(
            name=str(doc.get("name") or ""),
            namespace=str(doc.get("namespace") or ""),
            uid=str(doc.get("uid") or ""),
            generation=int(doc.get("generation") or 0),
            labels=dict(doc.get("labels") or {}),
            annotations=dict(doc.get("annotations") or {}),
        )
