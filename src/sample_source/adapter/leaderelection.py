from __future__ import annotations

import json
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Dict, Optional

from .errors import EncodeError
from .models.base import duration_to_nanos, load_object, read_duration, read_int, read_str

_WHAT = "leader election config"

DEFAULT_BUCKETS = 1
DEFAULT_LEASE_DURATION = timedelta(seconds=15)
DEFAULT_RENEW_DEADLINE = timedelta(seconds=10)
DEFAULT_RETRY_PERIOD = timedelta(seconds=2)


@dataclass(frozen=True)
class ComponentConfig:
    """Leader election parameters for a single component.

    Durations are encoded as integer nanoseconds on the wire so that the JSON
    form stays interchangeable with the controllers that produce it.
    """

    component: str = ""
    buckets: int = 0
    lease_duration: timedelta = timedelta(0)
    renew_deadline: timedelta = timedelta(0)
    retry_period: timedelta = timedelta(0)

    @staticmethod
    def default(component: str) -> "ComponentConfig":
        return ComponentConfig(
            component=component,
            buckets=DEFAULT_BUCKETS,
            lease_duration=DEFAULT_LEASE_DURATION,
            renew_deadline=DEFAULT_RENEW_DEADLINE,
            retry_period=DEFAULT_RETRY_PERIOD,
        )

    @staticmethod
    def from_json(raw: str) -> "ComponentConfig":
        doc = load_object(raw, _WHAT) or {}
        return ComponentConfig(
            component=read_str(doc, "component", _WHAT),
            buckets=read_int(doc, "buckets", _WHAT, unsigned=True),
            lease_duration=read_duration(doc, "leaseDuration", _WHAT),
            renew_deadline=read_duration(doc, "renewDeadline", _WHAT),
            retry_period=read_duration(doc, "retryPeriod", _WHAT),
        )

    def with_component(self, component: str) -> "ComponentConfig":
        return replace(self, component=component)

    def to_payload(self) -> Dict[str, object]:
        return {
            "component": self.component,
            "buckets": self.buckets,
            "leaseDuration": duration_to_nanos(self.lease_duration),
            "renewDeadline": duration_to_nanos(self.renew_deadline),
            "retryPeriod": duration_to_nanos(self.retry_period),
        }


def component_config_to_json(cfg: Optional[ComponentConfig]) -> str:
    """Encode ``cfg`` as JSON; ``None`` encodes to the empty string."""

    if cfg is None:
        return ""
    try:
        return json.dumps(cfg.to_payload(), separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"{_WHAT}: {exc}") from exc
