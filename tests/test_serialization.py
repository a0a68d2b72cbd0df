"""Tests de serialización de documentos Runner / RunnerList."""

import json
from datetime import datetime, timezone

import pytest

from runner_api import (
    Runner,
    RunnerList,
    RunnerSpec,
    TriState,
    dump_resource,
    dumps_resource,
    load_resource,
    print_columns,
)
from runner_api.shared.infrastructure_exceptions import SerializationError


class TestLoadResource:
    """Lectura de documentos persistidos."""

    def test_loads_runner(self, runner_document: dict) -> None:
        runner = load_resource(runner_document)

        assert isinstance(runner, Runner)
        assert runner.metadata.resource_version == "42"
        assert runner.spec.repository == "org/repo"
        assert runner.spec.labels == ["linux", "x64", "linux"]
        assert runner.spec.ephemeral is TriState.FALSE
        assert runner.spec.docker_enabled is TriState.UNSET
        assert runner.spec.docker_mtu == 1400
        assert runner.status.phase == "Running"
        assert runner.status.registration.expires_at == datetime(2024, 5, 1, 13, tzinfo=timezone.utc)

    def test_loaded_runner_is_registerable(self, runner_document: dict, now) -> None:
        assert load_resource(runner_document).is_registerable(now) is True

    def test_loads_json_text(self, runner_document: dict) -> None:
        runner = load_resource(json.dumps(runner_document))
        assert runner.metadata.name == "example-runner"

    def test_loads_bytes(self, runner_document: dict) -> None:
        runner = load_resource(json.dumps(runner_document).encode())
        assert runner.metadata.name == "example-runner"

    def test_loads_list_in_order(self, runner_document: dict) -> None:
        second = json.loads(json.dumps(runner_document))
        second["metadata"]["name"] = "second"
        document = {
            "apiVersion": "actions.summerwind.dev/v1alpha1",
            "kind": "RunnerList",
            "metadata": {"resourceVersion": "7", "continue": "token-2"},
            "items": [runner_document, second],
        }

        runner_list = load_resource(document)

        assert isinstance(runner_list, RunnerList)
        assert runner_list.metadata.continue_ == "token-2"
        assert [r.metadata.name for r in runner_list.iter_runners()] == ["example-runner", "second"]

    def test_missing_namespace_uses_argument(self, runner_document: dict) -> None:
        del runner_document["metadata"]["namespace"]
        runner = load_resource(runner_document, default_namespace="team-a")
        assert runner.metadata.namespace == "team-a"

    def test_missing_namespace_uses_configuration(self, runner_document: dict, monkeypatch) -> None:
        monkeypatch.setenv("RUNNER_API_DEFAULT_NAMESPACE", "from-env")
        del runner_document["metadata"]["namespace"]
        assert load_resource(runner_document).metadata.namespace == "from-env"

    def test_missing_status_yields_empty_registration(self, runner_document: dict, now) -> None:
        del runner_document["status"]
        runner = load_resource(runner_document)
        assert runner.status.registration.token == ""
        assert runner.is_registerable(now) is False

    def test_null_status_yields_empty_registration(self, now) -> None:
        runner = load_resource({"kind": "Runner", "spec": {"repository": "a/b"}, "status": None})
        assert runner.status.registration.token == ""
        assert runner.is_registerable(now) is False

    def test_null_registration_yields_empty_registration(self, now) -> None:
        runner = load_resource(
            {"kind": "Runner", "spec": {"repository": "a/b"}, "status": {"registration": None}}
        )
        assert runner.status.registration.expires_at is None
        assert runner.is_registerable(now) is False
        assert runner.registration_mismatch(now) is not None

    def test_null_fields_decode_as_empty(self, now) -> None:
        document = {
            "kind": "Runner",
            "metadata": {"name": "r", "labels": None, "annotations": None, "finalizers": None},
            "spec": {"repository": "a/b", "organization": None, "containers": None, "nodeSelector": None},
            "status": {"phase": None, "registration": {"repository": "a/b", "token": None}},
        }

        runner = load_resource(document)

        assert runner.metadata.labels == {}
        assert runner.metadata.finalizers == []
        assert runner.spec.organization == ""
        assert runner.spec.containers == []
        assert runner.spec.node_selector == {}
        assert runner.status.phase == ""
        assert runner.status.registration.token == ""
        assert runner.is_registerable(now) is False

    def test_null_metadata_and_spec(self) -> None:
        runner = load_resource({"kind": "Runner", "metadata": None, "spec": None}, default_namespace="ci")
        assert runner.metadata.namespace == "ci"
        assert runner.spec.repository == ""

    def test_null_list_items(self) -> None:
        runner_list = load_resource({"kind": "RunnerList", "metadata": None, "items": None})
        assert len(runner_list) == 0

    @pytest.mark.parametrize(
        "document",
        [
            "{not json",
            "[1, 2]",
            {"apiVersion": "actions.summerwind.dev/v1alpha1", "kind": "Pod"},
            {"apiVersion": "actions.summerwind.dev/v2", "kind": "Runner"},
            {"kind": "Runner", "spec": {"repository": "no-slash"}},
            {"kind": "Runner", "spec": {"ephemeral": "perhaps"}},
        ],
    )
    def test_invalid_documents(self, document) -> None:
        with pytest.raises(SerializationError):
            load_resource(document)

    def test_error_carries_kind(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            load_resource({"kind": "Pod"})
        assert exc_info.value.kind == "Pod"


class TestDumpResource:
    """Escritura de documentos con omisión de campos vacíos."""

    def test_round_trip_preserves_document(self, runner_document: dict) -> None:
        document = dump_resource(load_resource(runner_document))

        assert document["spec"]["dockerMTU"] == 1400
        assert document["spec"]["ephemeral"] is False
        assert document["spec"]["nodeSelector"] == {"kubernetes.io/os": "linux"}
        assert document["status"]["registration"]["token"] == "AABBCCDDEEFF"
        assert load_resource(document) == load_resource(runner_document)

    def test_empty_optional_fields_are_omitted(self) -> None:
        document = dump_resource(Runner(spec=RunnerSpec(organization="acme")))
        spec = document["spec"]

        assert spec == {"organization": "acme", "image": ""}
        assert "ephemeral" not in spec

    def test_required_fields_are_always_emitted(self) -> None:
        document = dump_resource(Runner())

        assert document["apiVersion"] == "actions.summerwind.dev/v1alpha1"
        assert document["kind"] == "Runner"
        assert document["status"]["registration"] == {"token": "", "expiresAt": None}

    def test_false_and_zero_are_kept(self) -> None:
        spec = RunnerSpec(repository="org/repo", docker_enabled=False, termination_grace_period_seconds=0)
        document = dump_resource(spec)
        assert document["dockerEnabled"] is False
        assert document["terminationGracePeriodSeconds"] == 0

    def test_empty_list_emits_items(self) -> None:
        document = dump_resource(RunnerList())
        assert document["items"] == []
        assert document["kind"] == "RunnerList"

    def test_dumps_json(self, runner_document: dict) -> None:
        text = dumps_resource(load_resource(runner_document), indent=2)
        parsed = json.loads(text)
        assert parsed["spec"]["repository"] == "org/repo"
        assert parsed["status"]["lastRegistrationCheckTime"].startswith("2024-05-01T11:00:00")


class TestPrintColumns:
    """Columnas resumen para listados."""

    def test_columns(self, runner_document: dict) -> None:
        columns = print_columns(load_resource(runner_document))
        assert columns == {
            "Enterprise": "",
            "Organization": "",
            "Repository": "org/repo",
            "Labels": "linux,x64,linux",
            "Status": "Running",
        }

    def test_columns_for_empty_runner(self) -> None:
        columns = print_columns(Runner())
        assert set(columns.values()) == {""}
