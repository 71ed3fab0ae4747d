from __future__ import annotations

from typing import List, Tuple

import pytest

ADAPTER_ENV_NAMES = (
    "K_COMPONENT",
    "NAMESPACE",
    "NAME",
    "K_RESOURCE_GROUP",
    "K_SINK",
    "K_AUDIENCE",
    "K_OIDC_SERVICE_ACCOUNT",
    "K_CA_CERTS",
    "K_CE_OVERRIDES",
    "K_LOGGING_CONFIG",
    "K_OBSERVABILITY_CONFIG",
    "K_LEADER_ELECTION_CONFIG",
    "K_SINK_TIMEOUT",
)


class RecordingLogger:
    def __init__(self) -> None:
        self.records: List[Tuple[str, str]] = []

    def debug(self, event: str, **kw) -> None:
        self.records.append(("debug", event))

    def info(self, event: str, **kw) -> None:
        self.records.append(("info", event))

    def warning(self, event: str, **kw) -> None:
        self.records.append(("warning", event))

    def error(self, event: str, **kw) -> None:
        self.records.append(("error", event))

    def levels(self) -> List[str]:
        return [level for level, _ in self.records]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ADAPTER_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()
