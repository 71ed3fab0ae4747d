from __future__ import annotations

import json
import logging

import pytest

from sample_source.adapter import DecodeError, EnvConfig
from sample_source.adapter.logconfig import (
    DEFAULT_ZAP_LOGGER_CONFIG,
    json_to_config,
    new_config_from_map,
    new_logger_from_config,
    parse_level,
)


def _logging_json(zap: dict, **levels: str) -> str:
    doc = {"zap-logger-config": json.dumps(zap)}
    doc.update({f"loglevel.{component}": level for component, level in levels.items()})
    return json.dumps(doc)


def test_empty_map_uses_default_zap_config():
    cfg = new_config_from_map({})

    assert cfg.zap_logger_config == DEFAULT_ZAP_LOGGER_CONFIG
    assert cfg.logging_level == {}


def test_component_levels_are_collected():
    cfg = json_to_config(_logging_json({"level": "info"}, controller="debug", webhook="WARN"))

    assert cfg.logging_level == {"controller": "debug", "webhook": "warn"}


@pytest.mark.parametrize("raw", ["{not json", "[]", '{"loglevel.x": "loud"}', '{"zap-logger-config": {}}'])
def test_malformed_logging_json_raises(raw):
    with pytest.raises(DecodeError):
        json_to_config(raw)


def test_parse_level_maps_zap_names():
    assert parse_level("warn") == logging.WARNING
    assert parse_level("fatal") == logging.CRITICAL
    with pytest.raises(DecodeError):
        parse_level("verbose")


def test_zap_level_filters_output(capsys):
    logger = new_logger_from_config(json_to_config(_logging_json({"level": "error"})), "sample-source")

    logger.warning("filtered")
    logger.error("kept")

    err = capsys.readouterr().err
    assert "filtered" not in err
    assert "kept" in err


def test_component_level_overrides_zap_level(capsys):
    cfg = EnvConfig(
        component="sample-source",
        logging_config_json=_logging_json({"level": "error"}, **{"sample-source": "debug"}),
    )

    cfg.get_logger().debug("visible")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "visible"
    assert record["level"] == "debug"
    assert record["logger"] == "sample-source"


def test_console_encoding(capsys):
    logger = new_logger_from_config(json_to_config(_logging_json({"level": "info", "encoding": "console"})))

    logger.info("plain text")

    err = capsys.readouterr().err
    assert "plain text" in err
    assert not err.lstrip().startswith("{")


def test_unreadable_zap_document_falls_back(capsys):
    logger = new_logger_from_config(new_config_from_map({"zap-logger-config": "not json"}))

    logger.info("still logging")

    assert "still logging" in capsys.readouterr().err
