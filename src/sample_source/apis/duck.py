"""Shared shapes used by event source resources: sink destinations and status conditions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..adapter.models.base import json_sanitize

CONDITION_TRUE = "True"
CONDITION_UNKNOWN = "Unknown"


@dataclass
class KReference:
    kind: str
    name: str
    api_version: str = ""
    namespace: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return json_sanitize(
            {"kind": self.kind, "namespace": self.namespace, "name": self.name, "apiVersion": self.api_version}
        )

    @staticmethod
    def from_dict(doc: Dict[str, Any]) -> "KReference":
        return KReference(
            kind=str(doc.get("kind") or ""),
            name=str(doc.get("name") or ""),
            api_version=str(doc.get("apiVersion") or ""),
            namespace=str(doc.get("namespace") or ""),
        )


@dataclass
class Destination:
    """Either a reference to an addressable object, a URI, or both (URI relative to the ref)."""

    ref: Optional[KReference] = None
    uri: str = ""
    ca_certs: Optional[str] = None
    audience: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return json_sanitize(
            {
                "ref": self.ref.to_dict() if self.ref else None,
                "uri": self.uri,
                "CACerts": self.ca_certs,
                "audience": self.audience,
            }
        )

    @staticmethod
    def from_dict(doc: Dict[str, Any]) -> "Destination":
        ref = doc.get("ref")
        return Destination(
            ref=KReference.from_dict(ref) if ref else None,
            uri=str(doc.get("uri") or ""),
            ca_certs=doc.get("CACerts"),
            audience=doc.get("audience"),
        )


@dataclass
class Condition:
    type: str
    status: str = CONDITION_UNKNOWN
    severity: str = ""
    last_transition_time: str = ""
    reason: str = ""
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return json_sanitize(
            {
                "type": self.type,
                "status": self.status,
                "severity": self.severity,
                "lastTransitionTime": self.last_transition_time,
                "reason": self.reason,
                "message": self.message,
            }
        )

    @staticmethod
    def from_dict(doc: Dict[str, Any]) -> "Condition":
        return Condition(
            type=str(doc.get("type") or ""),
            status=str(doc.get("status") or CONDITION_UNKNOWN),
            severity=str(doc.get("severity") or ""),
            last_transition_time=str(doc.get("lastTransitionTime") or ""),
            reason=str(doc.get("reason") or ""),
            message=str(doc.get("message") or ""),
        )


@dataclass
class Status:
    observed_generation: int = 0
    conditions: List[Condition] = field(default_factory=list)
    annotations: Dict[str, str] = field(default_factory=dict)

    def get_condition(self, condition_type: str) -> Optional[Condition]:
        for condition in self.conditions:
            if condition.type == condition_type:
                return condition
        return None

    def to_dict(self) -> Dict[str, Any]:
        return json_sanitize(
            {
                "observedGeneration": self.observed_generation or None,
                "conditions": [c.to_dict() for c in self.conditions],
                "annotations": self.annotations,
            }
        )
