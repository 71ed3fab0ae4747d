from __future__ import annotations

import os
import re
from typing import Mapping, Optional

_ATOI_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def env_str(name: str, default: str | None = None, environ: Optional[Mapping[str, str]] = None) -> str | None:
    """Fetch an environment variable, falling back to ``default`` if unset."""

    source = os.environ if environ is None else environ
    value = source.get(name)
    return value if value is not None else default


def coalesce(value: Optional[str], fallback: str) -> str:
    return value if value else fallback


def atoi(text: str) -> int:
    """Parse a base-10 integer: optional sign followed by digits only.

    Whitespace, underscores, empty input and values outside the int64 range
    are rejected with ``ValueError``.
    """

    if not _ATOI_RE.fullmatch(text or ""):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value
