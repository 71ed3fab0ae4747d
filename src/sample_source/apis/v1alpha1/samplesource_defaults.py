from __future__ import annotations

from typing import Optional

from .samplesource_types import SampleSource

DEFAULT_SERVICE_ACCOUNT_NAME = "default"


def set_defaults(source: Optional[SampleSource]) -> None:
    """Fill in defaults applied by the mutating admission webhook."""

    if source is not None and not source.spec.service_account_name:
        source.spec.service_account_name = DEFAULT_SERVICE_ACCOUNT_NAME
