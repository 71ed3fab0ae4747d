from __future__ import annotations

from ..meta import GroupVersion

GROUP_NAME = "samples.knative.dev"

SCHEME_GROUP_VERSION = GroupVersion(group=GROUP_NAME, version="v1alpha1")
