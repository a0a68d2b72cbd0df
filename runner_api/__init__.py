"""
runner_api - Recurso Runner para runners self-hosted de GitHub Actions

Versión: 0.1.0
Arquitectura: dominio puro + infraestructura de serialización
Propósito: Modelar estado deseado/observado de un runner y decidir
si su registración sigue siendo reutilizable
"""

__version__ = "0.1.0"
__author__ = "runner_api maintainers"
__description__ = "Runner resource model for self-hosted GitHub Actions runners"

# Exportaciones principales del dominio
from .domain.entities import (
    ListMeta,
    ObjectMeta,
    Runner,
    RunnerList,
    RunnerSpec,
    RunnerStatus,
    RunnerStatusRegistration,
    ScopeFields,
)
from .domain.registration import is_registerable, registration_mismatch, validate_scope
from .shared.constants import ScopeType, TriState
from .shared.domain_exceptions import AmbiguousScope, DomainError, MissingScope, ValidationError

# Exportaciones de infraestructura
from .infrastructure.config import Settings, get_config
from .infrastructure.serialization import dump_resource, dumps_resource, load_resource, print_columns

__all__ = [
    # Versión y metadata
    "__version__",
    "__author__",
    "__description__",

    # Entidades de dominio
    "ObjectMeta",
    "ListMeta",
    "ScopeFields",
    "RunnerSpec",
    "RunnerStatusRegistration",
    "RunnerStatus",
    "Runner",
    "RunnerList",
    "ScopeType",
    "TriState",

    # Reglas de negocio
    "validate_scope",
    "is_registerable",
    "registration_mismatch",

    # Errores
    "DomainError",
    "ValidationError",
    "MissingScope",
    "AmbiguousScope",

    # Infraestructura
    "Settings",
    "get_config",
    "load_resource",
    "dump_resource",
    "dumps_resource",
    "print_columns",
]
