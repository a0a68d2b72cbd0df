"""
Excepciones específicas del dominio de negocio.

Rol: Definir excepciones para declaraciones de runner inválidas.
MissingScope y AmbiguousScope se reportan al usuario como rechazo
de la declaración; no se reintentan.

Depende de: excepciones base de Python.
"""

from .constants import AMBIGUOUS_SCOPE_MESSAGE, MISSING_SCOPE_MESSAGE


# Excepciones base del dominio
class DomainError(Exception):
    """Error base del dominio de negocio."""
    pass


class ValidationError(DomainError):
    """Error en validación de la declaración de un runner."""
    pass


class MissingScope(ValidationError):
    """Ningún campo de scope está definido."""

    def __init__(self, message: str = MISSING_SCOPE_MESSAGE):
        super().__init__(message)


class AmbiguousScope(ValidationError):
    """Más de un campo de scope está definido."""

    def __init__(self, message: str = AMBIGUOUS_SCOPE_MESSAGE):
        super().__init__(message)
