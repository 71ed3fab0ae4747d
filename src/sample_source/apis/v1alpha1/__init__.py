"""samples.knative.dev/v1alpha1 resource types."""

from .register import GROUP_NAME, SCHEME_GROUP_VERSION
from .samplesource_defaults import DEFAULT_SERVICE_ACCOUNT_NAME, set_defaults
from .samplesource_types import (
    SAMPLE_SOURCE_CONDITION_READY,
    SAMPLE_SOURCE_EVENT_TYPE,
    SampleSource,
    SampleSourceList,
    SampleSourceSpec,
    SampleSourceStatus,
)

__all__ = [
    "DEFAULT_SERVICE_ACCOUNT_NAME",
    "GROUP_NAME",
    "SAMPLE_SOURCE_CONDITION_READY",
    "SAMPLE_SOURCE_EVENT_TYPE",
    "SCHEME_GROUP_VERSION",
    "SampleSource",
    "SampleSourceList",
    "SampleSourceSpec",
    "SampleSourceStatus",
    "set_defaults",
]
