from __future__ import annotations

import json
import math
from dataclasses import asdict, is_dataclass
from datetime import timedelta
from typing import Any, Dict, Optional

from ..errors import DecodeError
from ..utils import INT64_MAX, INT64_MIN

_NANOS_PER_MICRO = 1000
UINT32_MAX = (1 << 32) - 1


def json_sanitize(v: Any) -> Any:
    # Drop Nones/empties recursively, matching Kubernetes omitempty output
    if is_dataclass(v) and not isinstance(v, type):
        return json_sanitize(asdict(v))
    if isinstance(v, dict):
        out = {}
        for k, val in v.items():
            sval = json_sanitize(val)
            if sval in (None, "", [], {}):
                continue
            out[k] = sval
        return out
    if isinstance(v, (list, tuple)):
        cleaned = []
        for x in v:
            sx = json_sanitize(x)
            if sx not in (None, "", [], {}):
                cleaned.append(sx)
        return cleaned
    return v


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON number literal {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"JSON number {text} is out of range")
    return value


def load_object(raw: str, what: str) -> Optional[Dict[str, Any]]:
    """Decode ``raw`` as a JSON object; ``null`` decodes to ``None``."""

    try:
        doc = json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_float)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"{what}: {exc}") from exc
    if doc is None:
        return None
    if not isinstance(doc, dict):
        raise DecodeError(f"{what}: expected a JSON object, got {type(doc).__name__}")
    return doc


def _type_error(what: str, key: str, expected: str, value: Any) -> DecodeError:
    return DecodeError(f"{what}: field {key!r} must be {expected}, got {type(value).__name__}")


def read_str(doc: Dict[str, Any], key: str, what: str) -> str:
    value = doc.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _type_error(what, key, "a string", value)
    return value


def read_int(doc: Dict[str, Any], key: str, what: str, *, unsigned: bool = False) -> int:
    value = doc.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_error(what, key, "an integer", value)
    if unsigned and not 0 <= value <= UINT32_MAX:
        raise DecodeError(f"{what}: field {key!r} must be in 0..{UINT32_MAX}, got {value}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise DecodeError(f"{what}: field {key!r} overflows int64, got {value}")
    return value


def read_float(doc: Dict[str, Any], key: str, what: str) -> float:
    value = doc.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_error(what, key, "a number", value)
    return float(value)


def read_duration(doc: Dict[str, Any], key: str, what: str) -> timedelta:
    """Durations travel as integer nanoseconds."""

    nanos = read_int(doc, key, what)
    try:
        return timedelta(microseconds=nanos // _NANOS_PER_MICRO)
    except OverflowError as exc:
        raise DecodeError(f"{what}: field {key!r} is out of range: {exc}") from exc


def read_section(doc: Dict[str, Any], key: str, what: str) -> Dict[str, Any]:
    value = doc.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _type_error(what, key, "an object", value)
    return value


def read_str_map(doc: Dict[str, Any], key: str, what: str) -> Dict[str, str]:
    section = read_section(doc, key, what)
    for k, v in section.items():
        if not isinstance(v, str):
            raise _type_error(what, f"{key}.{k}", "a string", v)
    return dict(section)


def duration_to_nanos(value: timedelta) -> int:
    return (value // timedelta(microseconds=1)) * _NANOS_PER_MICRO


__all__ = [
    "duration_to_nanos",
    "json_sanitize",
    "load_object",
    "read_duration",
    "read_float",
    "read_int",
    "read_section",
    "read_str",
    "read_str_map",
]
