from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol, Tuple, runtime_checkable

from .errors import DecodeError
from .leaderelection import ComponentConfig
from .leaderelection import component_config_to_json as leader_election_component_config_to_json
from .logconfig import json_to_config, new_config_from_map, new_logger_from_config
from .models import CloudEventOverrides, NamespacedName
from .observability import ObservabilityConfig
from .utils import atoi, coalesce, env_str

ENV_CONFIG_COMPONENT = "K_COMPONENT"
ENV_CONFIG_NAMESPACE = "NAMESPACE"
ENV_CONFIG_NAME = "NAME"
ENV_CONFIG_RESOURCE_GROUP = "K_RESOURCE_GROUP"
ENV_CONFIG_SINK = "K_SINK"
ENV_CONFIG_AUDIENCE = "K_AUDIENCE"
ENV_CONFIG_OIDC_SERVICE_ACCOUNT = "K_OIDC_SERVICE_ACCOUNT"
ENV_CONFIG_CA_CERT = "K_CA_CERTS"
ENV_CONFIG_CE_OVERRIDES = "K_CE_OVERRIDES"
ENV_CONFIG_LOGGING_CONFIG = "K_LOGGING_CONFIG"
ENV_CONFIG_OBSERVABILITY_CONFIG = "K_OBSERVABILITY_CONFIG"
ENV_CONFIG_LEADER_ELECTION_CONFIG = "K_LEADER_ELECTION_CONFIG"
ENV_SINK_TIMEOUT = "K_SINK_TIMEOUT"

DEFAULT_NAME = "adapter"
DEFAULT_RESOURCE_GROUP = "adapter.sources.knative.dev"
DEFAULT_JSON_CONFIG = "{}"

NO_TIMEOUT = -1


@runtime_checkable
class EnvConfigAccessor(Protocol):
    """Accessors for the minimal set of source adapter configuration parameters."""

    def set_component(self, component: str) -> None: ...

    def get_sink(self) -> str: ...

    def get_ca_certs(self) -> Optional[str]: ...

    def get_audience(self) -> Optional[str]: ...

    def get_oidc_service_account_name(self) -> Optional[NamespacedName]: ...

    def get_namespace(self) -> str: ...

    def get_name(self) -> str: ...

    def get_logger(self) -> Any: ...

    def get_cloud_event_overrides(self) -> CloudEventOverrides: ...

    def get_observability_config(self) -> ObservabilityConfig: ...

    def get_leader_election_config(self) -> Tuple[ComponentConfig, Optional[DecodeError]]: ...

    def get_sink_timeout(self) -> int: ...


@dataclass
class EnvConfig:
    """Runtime configuration of a source adapter process.

    JSON-valued fields are kept as raw strings and decoded on access.
    """

    component: str = ""
    namespace: str = ""
    name: str = DEFAULT_NAME
    resource_group: str = DEFAULT_RESOURCE_GROUP
    sink: str = ""
    audience: Optional[str] = None
    oidc_service_account_name: Optional[str] = None
    ca_certs: Optional[str] = None
    ce_overrides: str = ""
    logging_config_json: str = DEFAULT_JSON_CONFIG
    observability_config_json: str = DEFAULT_JSON_CONFIG
    leader_election_config_json: str = ""
    sink_timeout: str = ""
    _logger: Any = field(default=None, init=False, repr=False, compare=False)
    _logger_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.name = coalesce(self.name, DEFAULT_NAME)
        self.resource_group = coalesce(self.resource_group, DEFAULT_RESOURCE_GROUP)
        self.logging_config_json = coalesce(self.logging_config_json, DEFAULT_JSON_CONFIG)
        self.observability_config_json = coalesce(self.observability_config_json, DEFAULT_JSON_CONFIG)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvConfig":
        def get(name: str, default: str = "") -> str:
            return env_str(name, default, environ) or default

        return cls(
            component=get(ENV_CONFIG_COMPONENT),
            namespace=get(ENV_CONFIG_NAMESPACE),
            name=get(ENV_CONFIG_NAME, DEFAULT_NAME),
            resource_group=get(ENV_CONFIG_RESOURCE_GROUP, DEFAULT_RESOURCE_GROUP),
            sink=get(ENV_CONFIG_SINK),
            audience=env_str(ENV_CONFIG_AUDIENCE, environ=environ),
            oidc_service_account_name=env_str(ENV_CONFIG_OIDC_SERVICE_ACCOUNT, environ=environ),
            ca_certs=env_str(ENV_CONFIG_CA_CERT, environ=environ),
            ce_overrides=get(ENV_CONFIG_CE_OVERRIDES),
            logging_config_json=get(ENV_CONFIG_LOGGING_CONFIG, DEFAULT_JSON_CONFIG),
            observability_config_json=get(ENV_CONFIG_OBSERVABILITY_CONFIG, DEFAULT_JSON_CONFIG),
            leader_election_config_json=get(ENV_CONFIG_LEADER_ELECTION_CONFIG),
            sink_timeout=get(ENV_SINK_TIMEOUT),
        )

    def set_component(self, component: str) -> None:
        self.component = component

    def get_logger(self) -> Any:
        with self._logger_lock:
            if self._logger is None:
                try:
                    logging_config = json_to_config(self.logging_config_json)
                except DecodeError:
                    try:
                        logging_config = new_config_from_map({})
                    except DecodeError as exc:
                        # Without a logger nothing else can report errors.
                        raise RuntimeError(f"cannot build default logging config: {exc}") from exc
                self._logger = new_logger_from_config(logging_config, self.component)
            return self._logger

    def get_sink(self) -> str:
        return self.sink

    def get_oidc_service_account_name(self) -> Optional[NamespacedName]:
        if self.oidc_service_account_name is None:
            return None
        return NamespacedName(namespace=self.namespace, name=self.oidc_service_account_name)

    def get_ca_certs(self) -> Optional[str]:
        return self.ca_certs

    def get_audience(self) -> Optional[str]:
        return self.audience

    def get_namespace(self) -> str:
        return self.namespace

    def get_name(self) -> str:
        return self.name

    def get_sink_timeout(self) -> int:
        try:
            return atoi(self.sink_timeout)
        except ValueError:
            self.get_logger().warning("Sink timeout configuration is invalid, default to -1 (no timeout)")
            return NO_TIMEOUT

    def get_observability_config(self) -> ObservabilityConfig:
        return ObservabilityConfig.from_json(self.observability_config_json)

    def get_cloud_event_overrides(self) -> CloudEventOverrides:
        if not self.ce_overrides:
            return CloudEventOverrides()
        return CloudEventOverrides.from_json(self.ce_overrides)

    def get_leader_election_config(self) -> Tuple[ComponentConfig, Optional[DecodeError]]:
        """Return the leader election config and the decode error, if any.

        A malformed payload still yields the default config alongside the
        error, so callers that only need a usable value may ignore the error.
        """

        if not self.leader_election_config_json:
            return ComponentConfig.default(self.component), None
        try:
            decoded = ComponentConfig.from_json(self.leader_election_config_json)
        except DecodeError as exc:
            return ComponentConfig.default(self.component), exc
        return decoded.with_component(self.component), None


def sink_timeout_from_env(logger: Any = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Read ``K_SINK_TIMEOUT`` straight from the environment.

    Unset or empty yields -1 silently; anything that is not a non-negative
    integer yields -1 and is reported at error level.
    """

    raw = env_str(ENV_SINK_TIMEOUT, environ=environ)
    if not raw:
        return NO_TIMEOUT
    try:
        duration = atoi(raw)
    except ValueError:
        duration = NO_TIMEOUT
    if duration < 0:
        if logger is not None:
            logger.error(
                f"{ENV_SINK_TIMEOUT} environment value is invalid. "
                f"It must be a integer greater than zero. (got {raw})"
            )
        return NO_TIMEOUT
    return duration


__all__ = [
    "DEFAULT_NAME",
    "DEFAULT_RESOURCE_GROUP",
    "ENV_SINK_TIMEOUT",
    "EnvConfig",
    "EnvConfigAccessor",
    "NO_TIMEOUT",
    "leader_election_component_config_to_json",
    "sink_timeout_from_env",
]
