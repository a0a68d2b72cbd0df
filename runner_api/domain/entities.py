"""
Entidades de dominio del recurso Runner.

Rol: Definir el estado deseado (RunnerSpec) y el estado observado
(RunnerStatus) de un runner self-hosted declarado en el clúster.
Contiene Runner, RunnerList y sus piezas embebidas.

La descripción de ejecución (contenedores, volúmenes, afinidad, etc.)
se transporta tal cual hacia la creación de pods; aquí no se interpreta.
"""

import logging
from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, Iterator, List, Optional

from pydantic import ConfigDict, Field, ValidationInfo, field_validator

from ..shared.constants import (
    GROUP_VERSION,
    RUNNER_KIND,
    RUNNER_LIST_KIND,
    SCOPE_FIELDS,
    ScopeType,
    TriState,
)
from ..shared.logging_utils import mask_sensitive_data
from ..shared.validation_utils import (
    validate_enterprise,
    validate_labels,
    validate_organization,
    validate_repository,
)
from .base import OptionalBool, ResourceModel, Timestamp, default_if_none, ensure_utc, utc_now
from .registration import is_registerable, registration_mismatch, validate_scope

logger = logging.getLogger(__name__)


class ObjectMeta(ResourceModel):
    """Identidad del recurso, gestionada por el sistema de orquestación."""

    model_config = ConfigDict(extra="allow")

    name: str = ""
    namespace: str = ""
    uid: str = ""
    resource_version: str = ""
    generation: Optional[int] = None
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)
    owner_references: List[Dict[str, Any]] = Field(default_factory=list)
    finalizers: List[str] = Field(default_factory=list)
    creation_timestamp: Timestamp = None
    deletion_timestamp: Timestamp = None

    @field_validator(
        "name", "namespace", "uid", "resource_version",
        "labels", "annotations", "owner_references", "finalizers",
        mode="before",
    )
    @classmethod
    def null_as_default(cls, v, info: ValidationInfo):
        return default_if_none(cls, v, info)


class ListMeta(ResourceModel):
    """Metadatos de una respuesta de listado."""

    resource_version: str = ""
    continue_: str = Field(default="", alias="continue")


class ScopeFields(ResourceModel):
    """Scope de registro: enterprise, organización o repositorio."""

    enterprise: str = ""
    organization: str = ""
    repository: str = ""

    @field_validator("enterprise", "organization", "repository", mode="before")
    @classmethod
    def null_scope_as_empty(cls, v, info: ValidationInfo):
        return default_if_none(cls, v, info)

    @field_validator("enterprise")
    @classmethod
    def validate_enterprise_name(cls, v):
        return validate_enterprise(v)

    @field_validator("organization")
    @classmethod
    def validate_organization_name(cls, v):
        return validate_organization(v)

    @field_validator("repository")
    @classmethod
    def validate_repository_name(cls, v):
        return validate_repository(v)

    def validate_scope(self) -> None:
        """Verifica que exactamente un campo de scope esté definido."""
        validate_scope(self)

    def scope_type(self) -> ScopeType:
        """Retorna el tipo del único scope definido."""
        self.validate_scope()
        return next(ScopeType(name) for name in SCOPE_FIELDS if getattr(self, name))

    def scope_name(self) -> str:
        """Retorna el valor del único scope definido."""
        return getattr(self, self.scope_type().value)


class RunnerSpec(ScopeFields):
    """Estado deseado de un runner."""

    model_config = ConfigDict(extra="allow")

    always_emit: ClassVar[FrozenSet[str]] = frozenset({"image"})

    labels: List[str] = Field(default_factory=list)
    group: str = ""
    ephemeral: OptionalBool = TriState.UNSET

    # Descripción de ejecución: se pasa sin interpretar a la creación del pod
    containers: List[Dict[str, Any]] = Field(default_factory=list)
    dockerd_container_resources: Dict[str, Any] = Field(default_factory=dict)
    docker_volume_mounts: List[Dict[str, Any]] = Field(default_factory=list)
    resources: Dict[str, Any] = Field(default_factory=dict)
    volume_mounts: List[Dict[str, Any]] = Field(default_factory=list)
    env_from: List[Dict[str, Any]] = Field(default_factory=list)

    image: str = ""
    image_pull_policy: str = ""
    env: List[Dict[str, Any]] = Field(default_factory=list)

    volumes: List[Dict[str, Any]] = Field(default_factory=list)
    work_dir: str = ""

    init_containers: List[Dict[str, Any]] = Field(default_factory=list)
    sidecar_containers: List[Dict[str, Any]] = Field(default_factory=list)
    node_selector: Dict[str, str] = Field(default_factory=dict)
    service_account_name: str = ""
    automount_service_account_token: OptionalBool = TriState.UNSET
    security_context: Optional[Dict[str, Any]] = None
    image_pull_secrets: List[Dict[str, Any]] = Field(default_factory=list)
    affinity: Optional[Dict[str, Any]] = None
    tolerations: List[Dict[str, Any]] = Field(default_factory=list)
    ephemeral_containers: List[Dict[str, Any]] = Field(default_factory=list)
    termination_grace_period_seconds: Optional[int] = None
    dockerd_within_runner_container: OptionalBool = TriState.UNSET
    docker_enabled: OptionalBool = TriState.UNSET
    docker_mtu: Optional[int] = Field(default=None, alias="dockerMTU")

    @field_validator("labels", mode="before")
    @classmethod
    def normalize_labels(cls, v):
        return validate_labels(v)

    @field_validator(
        "containers", "dockerd_container_resources", "docker_volume_mounts", "resources",
        "volume_mounts", "env_from", "env", "volumes", "init_containers", "sidecar_containers",
        "node_selector", "image_pull_secrets", "tolerations", "ephemeral_containers",
        mode="before",
    )
    @classmethod
    def null_as_default(cls, v, info: ValidationInfo):
        return default_if_none(cls, v, info)


class RunnerStatusRegistration(ResourceModel):
    """
    Registración observada del runner.

    Inmutable: un token nuevo implica reemplazar la registración completa.
    """

    model_config = ConfigDict(frozen=True)

    always_emit: ClassVar[FrozenSet[str]] = frozenset({"token", "expires_at"})

    enterprise: str = ""
    organization: str = ""
    repository: str = ""
    labels: List[str] = Field(default_factory=list)
    token: str = Field(default="", repr=False)
    expires_at: Timestamp = None

    @field_validator("labels", mode="before")
    @classmethod
    def normalize_labels(cls, v):
        return validate_labels(v)

    @field_validator("enterprise", "organization", "repository", "token", mode="before")
    @classmethod
    def null_as_default(cls, v, info: ValidationInfo):
        return default_if_none(cls, v, info)

    @property
    def masked_token(self) -> str:
        return mask_sensitive_data(self.token)


class RunnerStatus(ResourceModel):
    """Estado observado de un runner. Solo lo escribe el reconciliador."""

    always_emit: ClassVar[FrozenSet[str]] = frozenset({"registration"})

    registration: RunnerStatusRegistration = Field(default_factory=RunnerStatusRegistration)
    phase: str = ""
    reason: str = ""
    message: str = ""
    last_registration_check_time: Timestamp = None

    @field_validator("registration", "phase", "reason", "message", mode="before")
    @classmethod
    def null_as_default(cls, v, info: ValidationInfo):
        return default_if_none(cls, v, info)


class Runner(ResourceModel):
    """Entidad agregada: identidad + estado deseado + estado observado."""

    always_emit: ClassVar[FrozenSet[str]] = frozenset({"api_version", "kind"})

    api_version: str = GROUP_VERSION
    kind: str = RUNNER_KIND
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: RunnerSpec = Field(default_factory=RunnerSpec)
    status: RunnerStatus = Field(default_factory=RunnerStatus)

    @field_validator("metadata", "spec", "status", mode="before")
    @classmethod
    def null_as_default(cls, v, info: ValidationInfo):
        return default_if_none(cls, v, info)

    @property
    def key(self) -> str:
        """Identificador namespace/name para logs."""
        if self.metadata.namespace:
            return f"{self.metadata.namespace}/{self.metadata.name}"
        return self.metadata.name

    def validate_scope(self) -> None:
        """Verifica el scope del estado deseado."""
        validate_scope(self.spec)

    def is_registerable(self, now: Optional[datetime] = None) -> bool:
        """Indica si la registración actual puede reutilizarse."""
        return is_registerable(self, now)

    def registration_mismatch(self, now: Optional[datetime] = None) -> Optional[str]:
        """Motivo por el que la registración no es reutilizable, o None."""
        return registration_mismatch(self, now)

    def with_registration(
        self,
        registration: RunnerStatusRegistration,
        checked_at: Optional[datetime] = None,
    ) -> "Runner":
        """
        Retorna una copia del runner con una registración nueva.

        Args:
            registration: Registración obtenida del proveedor
            checked_at: Momento de la verificación (por defecto, ahora)

        Returns:
            Runner nuevo; el original no se modifica
        """
        status = self.status.model_copy(
            update={
                "registration": registration,
                "last_registration_check_time": ensure_utc(checked_at) or utc_now(),
            }
        )
        logger.info(
            f"Registración reemplazada | {self.key} | token={registration.masked_token} "
            f"| expires_at={registration.expires_at}"
        )
        return self.model_copy(update={"status": status}, deep=True)


class RunnerList(ResourceModel):
    """Colección ordenada de runners retornada por un listado."""

    always_emit: ClassVar[FrozenSet[str]] = frozenset({"api_version", "kind", "items"})

    api_version: str = GROUP_VERSION
    kind: str = RUNNER_LIST_KIND
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: List[Runner] = Field(default_factory=list)

    @field_validator("metadata", "items", mode="before")
    @classmethod
    def null_as_default(cls, v, info: ValidationInfo):
        return default_if_none(cls, v, info)

    def __len__(self) -> int:
        return len(self.items)

    def iter_runners(self) -> Iterator[Runner]:
        """Itera los runners en el orden del listado."""
        return iter(self.items)
