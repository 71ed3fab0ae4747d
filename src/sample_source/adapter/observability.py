from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict

from .models.base import (
    duration_to_nanos,
    load_object,
    read_duration,
    read_float,
    read_section,
    read_str,
)

_WHAT = "observability config"


@dataclass
class MetricsConfig:
    protocol: str = ""
    endpoint: str = ""
    export_interval: timedelta = timedelta(0)

    @staticmethod
    def from_doc(doc: Dict[str, Any]) -> "MetricsConfig":
        return MetricsConfig(
            protocol=read_str(doc, "protocol", _WHAT),
            endpoint=read_str(doc, "endpoint", _WHAT),
            export_interval=read_duration(doc, "exportInterval", _WHAT),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "protocol": self.protocol,
            "endpoint": self.endpoint,
            "exportInterval": duration_to_nanos(self.export_interval),
        }


@dataclass
class TracingConfig:
    protocol: str = ""
    endpoint: str = ""
    sampling_rate: float = 0.0

    @staticmethod
    def from_doc(doc: Dict[str, Any]) -> "TracingConfig":
        return TracingConfig(
            protocol=read_str(doc, "protocol", _WHAT),
            endpoint=read_str(doc, "endpoint", _WHAT),
            sampling_rate=read_float(doc, "samplingRate", _WHAT),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {"protocol": self.protocol, "endpoint": self.endpoint, "samplingRate": self.sampling_rate}


@dataclass
class RuntimeConfig:
    profiling: str = ""
    export_interval: timedelta = timedelta(0)

    @staticmethod
    def from_doc(doc: Dict[str, Any]) -> "RuntimeConfig":
        return RuntimeConfig(
            profiling=read_str(doc, "profiling", _WHAT),
            export_interval=read_duration(doc, "exportInterval", _WHAT),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {"profiling": self.profiling, "exportInterval": duration_to_nanos(self.export_interval)}


@dataclass
class ObservabilityConfig:
    """Metrics, tracing and runtime settings copied from the controller's config map.

    Missing keys decode to zero values and unknown keys are ignored.
    """

    metrics: MetricsConfig = field(default_factory=MetricsConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)

    @staticmethod
    def from_json(raw: str) -> "ObservabilityConfig":
        doc = load_object(raw, _WHAT) or {}
        return ObservabilityConfig(
            metrics=MetricsConfig.from_doc(read_section(doc, "metrics", _WHAT)),
            tracing=TracingConfig.from_doc(read_section(doc, "tracing", _WHAT)),
            runtime=RuntimeConfig.from_doc(read_section(doc, "runtime", _WHAT)),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "metrics": self.metrics.to_payload(),
            "tracing": self.tracing.to_payload(),
            "runtime": self.runtime.to_payload(),
        }
