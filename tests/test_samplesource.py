from __future__ import annotations

from sample_source.apis.duck import Condition, Destination, KReference
from sample_source.apis.meta import GroupVersionKind, ObjectMeta
from sample_source.apis.v1alpha1 import (
    SAMPLE_SOURCE_EVENT_TYPE,
    SampleSource,
    SampleSourceList,
    SampleSourceSpec,
    SampleSourceStatus,
    set_defaults,
)


def _source(**spec) -> SampleSource:
    return SampleSource(metadata=ObjectMeta(name="ping", namespace="ns1"), spec=SampleSourceSpec(**spec))


def test_set_defaults_fills_service_account():
    source = _source(interval="10s")

    set_defaults(source)

    assert source.spec.service_account_name == "default"


def test_set_defaults_keeps_existing_service_account():
    source = _source(interval="10s", service_account_name="events-sa")

    set_defaults(source)

    assert source.spec.service_account_name == "events-sa"


def test_set_defaults_accepts_none():
    set_defaults(None)


def test_group_version_kind():
    assert SampleSource().get_group_version_kind() == GroupVersionKind("samples.knative.dev", "v1alpha1", "SampleSource")
    assert SampleSource().api_version == "samples.knative.dev/v1alpha1"
    assert SAMPLE_SOURCE_EVENT_TYPE == "dev.knative.sample.source"


def test_to_dict_omits_empty_optional_fields():
    doc = _source(interval="10s").to_dict()

    assert doc == {
        "apiVersion": "samples.knative.dev/v1alpha1",
        "kind": "SampleSource",
        "metadata": {"name": "ping", "namespace": "ns1"},
        "spec": {"interval": "10s", "sink": None},
    }


def test_to_dict_keeps_required_spec_fields_when_empty():
    assert SampleSource().to_dict()["spec"] == {"interval": "", "sink": None}


def test_dict_round_trip_with_sink_and_status():
    doc = {
        "apiVersion": "samples.knative.dev/v1alpha1",
        "kind": "SampleSource",
        "metadata": {"name": "ping", "namespace": "ns1", "generation": 2},
        "spec": {
            "interval": "1m",
            "serviceAccountName": "events-sa",
            "sink": {"ref": {"apiVersion": "eventing.knative.dev/v1", "kind": "Broker", "name": "default"}},
        },
        "status": {
            "observedGeneration": 2,
            "conditions": [{"type": "Ready", "status": "True"}],
            "sinkUri": "http://broker-ingress.knative-eventing.svc.cluster.local/ns1/default",
        },
    }

    source = SampleSource.from_dict(doc)

    assert source.spec.sink == Destination(ref=KReference(kind="Broker", name="default", api_version="eventing.knative.dev/v1"))
    assert source.status.is_ready()
    assert source.to_dict() == doc


def test_status_not_ready_without_condition():
    status = SampleSourceStatus(conditions=[Condition(type="SinkProvided", status="True")])

    assert not status.is_ready()
    assert status.get_condition("SinkProvided") is not None


def test_list_round_trip():
    items = SampleSourceList(items=[_source(interval="5s"), _source(interval="15s")])

    restored = SampleSourceList.from_dict(items.to_dict())

    assert [s.spec.interval for s in restored.items] == ["5s", "15s"]
    assert restored.kind == "SampleSourceList"
