from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NamespacedName:
    """Qualified reference to a namespaced Kubernetes object."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"
