"""
Utilitarios de validación reutilizables.

Rol: Proveer funciones de validación comunes para toda la aplicación.
Contar campos de scope y validar nombres de enterprise, organización y repositorio.
Funciones puras sin dependencias externas.

Depende de: expresiones regulares, tipos de datos.
"""

import re
from typing import List, Optional

from .constants import (
    ENTERPRISE_NAME_PATTERN,
    ORGANIZATION_NAME_PATTERN,
    REPOSITORY_NAME_PATTERN,
)
from .domain_exceptions import AmbiguousScope, MissingScope


def count_scope_fields(enterprise: str, organization: str, repository: str) -> int:
    """Cuenta cuántos campos de scope están definidos (no vacíos)."""
    return sum(1 for value in (enterprise, organization, repository) if value)


def validate_scope_fields(enterprise: str, organization: str, repository: str) -> None:
    """
    Valida que exactamente un campo de scope esté definido.

    Args:
        enterprise: Nombre de enterprise
        organization: Nombre de organización
        repository: Repositorio en formato owner/repo

    Raises:
        MissingScope: Si ningún campo está definido
        AmbiguousScope: Si más de un campo está definido
    """
    found = count_scope_fields(enterprise, organization, repository)

    if found == 0:
        raise MissingScope()

    if found > 1:
        raise AmbiguousScope()


def _validate_pattern(value: str, pattern: str, field_name: str, expected: str) -> str:
    # Vacío significa "no configurado"; el conteo se valida aparte
    if value and not re.match(pattern, value):
        raise ValueError(f"{field_name} debe tener formato {expected}")
    return value


def validate_enterprise(enterprise: str) -> str:
    """
    Valida nombre de enterprise.

    Raises:
        ValueError: Si contiene '/'
    """
    return _validate_pattern(enterprise, ENTERPRISE_NAME_PATTERN, "enterprise", "<enterprise>")


def validate_organization(organization: str) -> str:
    """
    Valida nombre de organización.

    Raises:
        ValueError: Si contiene '/'
    """
    return _validate_pattern(organization, ORGANIZATION_NAME_PATTERN, "organization", "<organization>")


def validate_repository(repo_name: str) -> str:
    """
    Valida formato de nombre de repositorio.

    Args:
        repo_name: Nombre del repositorio en formato owner/repo

    Returns:
        Nombre validado

    Raises:
        ValueError: Si el formato es inválido
    """
    return _validate_pattern(repo_name, REPOSITORY_NAME_PATTERN, "repository", "owner/repo")


def validate_labels(labels: Optional[list]) -> List[str]:
    """
    Valida lista de labels.

    Conserva el orden y los duplicados tal como fueron declarados.

    Args:
        labels: Lista de labels a validar

    Returns:
        Labels validados (lista vacía si no hay)
    """
    if not labels:
        return []

    if not isinstance(labels, list):
        raise ValueError("labels debe ser una lista")

    for label in labels:
        if not isinstance(label, str):
            raise ValueError("todos los labels deben ser strings")

    return list(labels)
