"""Fixtures compartidos para los tests de runner_api."""

from datetime import datetime, timedelta, timezone

import pytest

from runner_api.domain.entities import (
    ObjectMeta,
    Runner,
    RunnerSpec,
    RunnerStatus,
    RunnerStatusRegistration,
)
from runner_api.infrastructure import config


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_runner(now):
    """Fábrica de runners con una registración configurable."""

    def _make(
        spec: dict = None,
        repository: str = "",
        token: str = "abc",
        expires_in: timedelta = timedelta(hours=1),
        name: str = "runner-1",
    ) -> Runner:
        expires_at = now + expires_in if expires_in is not None else None
        return Runner(
            metadata=ObjectMeta(name=name, namespace="ci"),
            spec=RunnerSpec(**(spec if spec is not None else {"repository": "org/repo"})),
            status=RunnerStatus(
                registration=RunnerStatusRegistration(
                    repository=repository,
                    token=token,
                    expires_at=expires_at,
                )
            ),
        )

    return _make


@pytest.fixture
def runner_document() -> dict:
    return {
        "apiVersion": "actions.summerwind.dev/v1alpha1",
        "kind": "Runner",
        "metadata": {"name": "example-runner", "namespace": "ci", "resourceVersion": "42"},
        "spec": {
            "repository": "org/repo",
            "labels": ["linux", "x64", "linux"],
            "group": "builders",
            "ephemeral": False,
            "image": "summerwind/actions-runner:latest",
            "dockerMTU": 1400,
            "dockerdContainerResources": {"limits": {"cpu": "2"}},
            "containers": [{"name": "runner", "image": "custom:1"}],
            "nodeSelector": {"kubernetes.io/os": "linux"},
        },
        "status": {
            "registration": {
                "repository": "org/repo",
                "labels": ["linux", "x64"],
                "token": "AABBCCDDEEFF",
                "expiresAt": "2024-05-01T13:00:00Z",
            },
            "phase": "Running",
            "lastRegistrationCheckTime": "2024-05-01T11:00:00Z",
        },
    }


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Aísla la configuración global entre tests."""
    for var in ("RUNNER_API_LOG_LEVEL", "RUNNER_API_DEFAULT_NAMESPACE", "RUNNER_API_ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config, "_config", None)
