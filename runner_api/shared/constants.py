"""
Constantes globales del recurso Runner.

Rol: Definir constantes usadas en toda la aplicación.
API_GROUP, KINDS, patrones de nombres de scope y mensajes de error.
Centraliza valores mágicos y configuraciones fijas.

Depende de: enums para scopes y valores tri-estado.
"""

from enum import Enum
from typing import Optional

# Identidad del recurso en el clúster
API_GROUP = "actions.summerwind.dev"
API_VERSION = "v1alpha1"
GROUP_VERSION = f"{API_GROUP}/{API_VERSION}"
RUNNER_KIND = "Runner"
RUNNER_LIST_KIND = "RunnerList"

DEFAULT_NAMESPACE = "default"


# Tipos de scope
class ScopeType(Enum):
    """Nivel en el que se registra un runner."""
    ENTERPRISE = "enterprise"
    ORGANIZATION = "organization"
    REPOSITORY = "repository"


# Orden en el que se inspeccionan los campos de scope
SCOPE_FIELDS = (
    ScopeType.ENTERPRISE.value,
    ScopeType.ORGANIZATION.value,
    ScopeType.REPOSITORY.value,
)


class TriState(Enum):
    """Booleano opcional: no configurado, verdadero o falso."""
    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def parse(cls, value) -> "TriState":
        """Convierte None, bool, str o TriState a TriState."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNSET
        if isinstance(value, bool):
            return cls.TRUE if value else cls.FALSE
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in ("", cls.UNSET.value):
                return cls.UNSET
            if normalized == cls.TRUE.value:
                return cls.TRUE
            if normalized == cls.FALSE.value:
                return cls.FALSE
        raise ValueError(f"valor tri-estado inválido: {value!r}")

    def to_bool(self) -> Optional[bool]:
        """Retorna None para UNSET, o el booleano configurado."""
        if self is TriState.UNSET:
            return None
        return self is TriState.TRUE

    @property
    def is_set(self) -> bool:
        return self is not TriState.UNSET


# Expresiones regulares para validación de nombres de scope
ENTERPRISE_NAME_PATTERN = r"^[^/]+$"
ORGANIZATION_NAME_PATTERN = r"^[^/]+$"
REPOSITORY_NAME_PATTERN = r"^[^/]+/[^/]+$"

# Mensajes de error estándar
MISSING_SCOPE_MESSAGE = "missing scope"
AMBIGUOUS_SCOPE_MESSAGE = "ambiguous scope"

# Motivos por los que una registración no es reutilizable
REASON_REPOSITORY_MISMATCH = "RegistrationRepositoryMismatch"
REASON_TOKEN_MISSING = "RegistrationTokenMissing"
REASON_TOKEN_EXPIRED = "RegistrationTokenExpired"

# Columnas resumen para listados de runners
PRINT_COLUMNS = (
    ("Enterprise", "spec.enterprise"),
    ("Organization", "spec.organization"),
    ("Repository", "spec.repository"),
    ("Labels", "spec.labels"),
    ("Status", "status.phase"),
)
