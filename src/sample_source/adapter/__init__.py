"""Adapter runtime configuration: environment resolver and typed config values."""

from .config import (
    EnvConfig,
    EnvConfigAccessor,
    leader_election_component_config_to_json,
    sink_timeout_from_env,
)
from .errors import DecodeError, EncodeError
from .leaderelection import ComponentConfig
from .models import CloudEventOverrides, NamespacedName
from .observability import ObservabilityConfig

__all__ = [
    "CloudEventOverrides",
    "ComponentConfig",
    "DecodeError",
    "EncodeError",
    "EnvConfig",
    "EnvConfigAccessor",
    "NamespacedName",
    "ObservabilityConfig",
    "leader_election_component_config_to_json",
    "sink_timeout_from_env",
]
