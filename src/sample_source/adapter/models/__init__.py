"""Typed values produced by the adapter configuration resolver."""

from .overrides import CloudEventOverrides
from .types import NamespacedName

__all__ = [
    "CloudEventOverrides",
    "NamespacedName",
]
