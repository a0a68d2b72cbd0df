"""
Reglas de negocio sobre scope y registración de runners.

Rol: Validar la declaración de scope y decidir si la registración
observada de un runner sigue siendo reutilizable.
Funciones puras: no modifican sus entradas ni hacen I/O.

Depende de: validation_utils, constantes de motivos.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Optional, Union

from ..shared.constants import (
    REASON_REPOSITORY_MISMATCH,
    REASON_TOKEN_EXPIRED,
    REASON_TOKEN_MISSING,
)
from ..shared.validation_utils import validate_scope_fields
from .base import ensure_utc, utc_now

if TYPE_CHECKING:
    from .entities import Runner, ScopeFields

logger = logging.getLogger(__name__)


def validate_scope(descriptor: Union["ScopeFields", "Runner"]) -> None:
    """
    Valida que la declaración tenga exactamente un scope.

    Args:
        descriptor: RunnerSpec/ScopeFields, o un Runner (se usa su spec)

    Raises:
        MissingScope: Si no hay enterprise, organization ni repository
        AmbiguousScope: Si hay más de uno definido
    """
    from .entities import Runner

    spec = descriptor.spec if isinstance(descriptor, Runner) else descriptor
    validate_scope_fields(spec.enterprise, spec.organization, spec.repository)


def registration_mismatch(runner: "Runner", now: Optional[datetime] = None) -> Optional[str]:
    """
    Evalúa en orden las condiciones de reutilización de la registración.

    Solo se compara el repositorio: enterprise y organization no se
    contrastan con la registración.

    Args:
        runner: Runner con spec y status observados
        now: Instante de evaluación (por defecto, el actual)

    Returns:
        Motivo de la primera condición que falla, o None si es reutilizable
    """
    registration = runner.status.registration

    if registration.repository != runner.spec.repository:
        return REASON_REPOSITORY_MISMATCH

    if not registration.token:
        return REASON_TOKEN_MISSING

    now = ensure_utc(now) or utc_now()
    if registration.expires_at is None or registration.expires_at <= now:
        return REASON_TOKEN_EXPIRED

    return None


def is_registerable(runner: "Runner", now: Optional[datetime] = None) -> bool:
    """Indica si el reconciliador puede omitir pedir una registración nueva."""
    reason = registration_mismatch(runner, now)

    if reason:
        logger.debug(f"Registración no reutilizable | {runner.key} | {reason}")
        return False

    return True
