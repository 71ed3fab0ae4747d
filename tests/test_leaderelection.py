from __future__ import annotations

import json
from datetime import timedelta

import pytest

from sample_source.adapter import ComponentConfig, EncodeError, leader_election_component_config_to_json


def test_none_encodes_to_empty_string():
    assert leader_election_component_config_to_json(None) == ""


def test_encoding_uses_nanosecond_durations():
    raw = leader_election_component_config_to_json(ComponentConfig.default("sample-source"))

    assert json.loads(raw) == {
        "component": "sample-source",
        "buckets": 1,
        "leaseDuration": 15_000_000_000,
        "renewDeadline": 10_000_000_000,
        "retryPeriod": 2_000_000_000,
    }


def test_decoding_encoded_config_reproduces_fields():
    cfg = ComponentConfig(
        component="sample-source",
        buckets=4,
        lease_duration=timedelta(seconds=30),
        renew_deadline=timedelta(seconds=20, milliseconds=500),
        retry_period=timedelta(milliseconds=250),
    )

    assert ComponentConfig.from_json(leader_election_component_config_to_json(cfg)) == cfg


def test_unencodable_value_raises():
    cfg = ComponentConfig(component="sample-source", buckets={1, 2})

    with pytest.raises(EncodeError):
        leader_election_component_config_to_json(cfg)


def test_missing_fields_decode_to_zero_values():
    cfg = ComponentConfig.from_json('{"buckets": 2}')

    assert cfg == ComponentConfig(buckets=2)
