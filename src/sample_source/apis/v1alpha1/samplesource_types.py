from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..duck import CONDITION_TRUE, Condition, Destination, Status
from ..meta import GroupVersionKind, ObjectMeta
from .register import SCHEME_GROUP_VERSION

KIND = "SampleSource"
LIST_KIND = "SampleSourceList"

# CloudEvent type emitted by the SampleSource adapter.
SAMPLE_SOURCE_EVENT_TYPE = "dev.knative.sample.source"

SAMPLE_SOURCE_CONDITION_READY = "Ready"


@dataclass
class SampleSourceSpec:
    """Desired state of a SampleSource, as written by the client.

    ``interval`` is a Go-style duration string such as ``"300ms"`` or
    ``"2h45m"``; it is stored verbatim. An empty ``service_account_name``
    means the namespace's ``default`` service account.
    """

    interval: str = ""
    service_account_name: str = ""
    sink: Optional[Destination] = None

    def to_dict(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {"interval": self.interval}
        if self.service_account_name:
            doc["serviceAccountName"] = self.service_account_name
        doc["sink"] = self.sink.to_dict() if self.sink else None
        return doc

    @staticmethod
    def from_dict(doc: Optional[Dict[str, Any]]) -> "SampleSourceSpec":
        doc = doc or {}
        sink = doc.get("sink")
        return SampleSourceSpec(
            interval=str(doc.get("interval") or ""),
            service_account_name=str(doc.get("serviceAccountName") or ""),
            sink=Destination.from_dict(sink) if sink else None,
        )


@dataclass
class SampleSourceStatus(Status):
    # Sink URI currently in use by the adapter.
    sink_uri: str = ""

    def to_dict(self) -> Dict[str, Any]:
        doc = super().to_dict()
        if self.sink_uri:
            doc["sinkUri"] = self.sink_uri
        return doc

    @staticmethod
    def from_dict(doc: Optional[Dict[str, Any]]) -> "SampleSourceStatus":
        doc = doc or {}
        return SampleSourceStatus(
            observed_generation=int(doc.get("observedGeneration") or 0),
            conditions=[Condition.from_dict(c) for c in doc.get("conditions") or []],
            annotations=dict(doc.get("annotations") or {}),
            sink_uri=str(doc.get("sinkUri") or ""),
        )

    def is_ready(self) -> bool:
        condition = self.get_condition(SAMPLE_SOURCE_CONDITION_READY)
        return condition is not None and condition.status == CONDITION_TRUE


@dataclass
class SampleSource:
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: SampleSourceSpec = field(default_factory=SampleSourceSpec)
    status: SampleSourceStatus = field(default_factory=SampleSourceStatus)
    api_version: str = str(SCHEME_GROUP_VERSION)
    kind: str = KIND

    def get_group_version_kind(self) -> GroupVersionKind:
        return SCHEME_GROUP_VERSION.with_kind(KIND)

    def to_dict(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {"apiVersion": self.api_version, "kind": self.kind}
        metadata = self.metadata.to_dict()
        if metadata:
            doc["metadata"] = metadata
        doc["spec"] = self.spec.to_dict()
        status = self.status.to_dict()
        if status:
            doc["status"] = status
        return doc

    @staticmethod
    def from_dict(doc: Dict[str, Any]) -> "SampleSource":
        return SampleSource(
            metadata=ObjectMeta.from_dict(doc.get("metadata")),
            spec=SampleSourceSpec.from_dict(doc.get("spec")),
            status=SampleSourceStatus.from_dict(doc.get("status")),
            api_version=str(doc.get("apiVersion") or SCHEME_GROUP_VERSION),
            kind=str(doc.get("kind") or KIND),
        )


@dataclass
class SampleSourceList:
    items: List[SampleSource] = field(default_factory=list)
    api_version: str = str(SCHEME_GROUP_VERSION)
    kind: str = LIST_KIND

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {},
            "items": [item.to_dict() for item in self.items],
        }

    @staticmethod
    def from_dict(doc: Dict[str, Any]) -> "SampleSourceList":
        return SampleSourceList(
            items=[SampleSource.from_dict(item) for item in doc.get("items") or []],
            api_version=str(doc.get("apiVersion") or SCHEME_GROUP_VERSION),
            kind=str(doc.get("kind") or LIST_KIND),
        )
