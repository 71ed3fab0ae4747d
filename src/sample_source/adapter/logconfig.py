"""Logging configuration model and the structlog logger factory for adapters.

The logging config travels as a flat JSON object of strings: the
``zap-logger-config`` key holds a nested JSON document (``level`` and
``encoding``), and ``loglevel.<component>`` keys override the level for a
single component.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import structlog

from .errors import DecodeError
from .models.base import load_object

ZAP_LOGGER_CONFIG_KEY = "zap-logger-config"
LOG_LEVEL_KEY_PREFIX = "loglevel."
DEFAULT_ZAP_LOGGER_CONFIG = '{"level": "info", "encoding": "json"}'

_WHAT = "logging config"

LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "dpanic": logging.CRITICAL,
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


@dataclass
class LoggingConfig:
    zap_logger_config: str = DEFAULT_ZAP_LOGGER_CONFIG
    logging_level: Dict[str, str] = field(default_factory=dict)


def parse_level(name: str) -> int:
    level = LEVELS.get((name or "").strip().lower())
    if level is None:
        raise DecodeError(f"{_WHAT}: invalid logging level {name!r}")
    return level


def new_config_from_map(data: Optional[Mapping[str, str]]) -> LoggingConfig:
    data = data or {}
    levels: Dict[str, str] = {}
    for key, value in data.items():
        if not key.startswith(LOG_LEVEL_KEY_PREFIX):
            continue
        component = key[len(LOG_LEVEL_KEY_PREFIX):]
        parse_level(value)
        levels[component] = value.strip().lower()
    return LoggingConfig(
        zap_logger_config=data.get(ZAP_LOGGER_CONFIG_KEY) or DEFAULT_ZAP_LOGGER_CONFIG,
        logging_level=levels,
    )


def json_to_config(raw: str) -> LoggingConfig:
    doc = load_object(raw, _WHAT) or {}
    for key, value in doc.items():
        if not isinstance(value, str):
            raise DecodeError(f"{_WHAT}: field {key!r} must be a string, got {type(value).__name__}")
    return new_config_from_map(doc)


def _zap_settings(raw: str) -> Dict[str, Any]:
    try:
        settings = json.loads(raw)
    except ValueError:
        settings = None
    if not isinstance(settings, dict):
        settings = json.loads(DEFAULT_ZAP_LOGGER_CONFIG)
    return settings


def new_logger_from_config(config: LoggingConfig, component: str = "") -> Any:
    """Build a structlog logger for ``component`` from ``config``.

    A component-specific level wins over the level in the zap document; an
    unreadable zap document falls back to the default one.
    """

    settings = _zap_settings(config.zap_logger_config)
    level_name = config.logging_level.get(component) or settings.get("level") or "info"
    try:
        level = parse_level(str(level_name))
    except DecodeError:
        level = logging.INFO

    if settings.get("encoding") == "console":
        renderer: Any = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)

    logger = structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    if component:
        logger = logger.bind(logger=component)
    return logger
