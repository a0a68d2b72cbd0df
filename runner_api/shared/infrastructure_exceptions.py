"""
Excepciones específicas de infraestructura técnica.

Rol: Definir excepciones para errores fuera del dominio.
ConfigurationError, SerializationError.
Excepciones que representan fallas de entorno o de formato de documentos.

Depende de: excepciones base de Python.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


# Excepciones base de infraestructura
class InfrastructureError(Exception):
    """Error base de infraestructura técnica."""
    pass


class ConfigurationError(InfrastructureError):
    """Error de configuración del sistema."""
    pass


class SerializationError(InfrastructureError):
    """Documento de recurso ilegible o con forma inválida."""

    def __init__(self, message: str, kind: Optional[str] = None):
        super().__init__(message)
        self.kind = kind


class ErrorHandler:
    """Manejador centralizado de errores técnicos."""

    @staticmethod
    def log_error(
        error: Exception,
        operation: str,
        context: Optional[Dict[str, Any]] = None,
        level: str = "error",
    ) -> None:
        """
        Registra error con contexto detallado.

        Args:
            error: Excepción capturada
            operation: Descripción de la operación
            context: Contexto adicional (opcional)
            level: Nivel de logging (error, warning, info)
        """
        log_func = getattr(logger, level)

        log_msg = f"Error en {operation}: {type(error).__name__} - {error}"

        if context:
            log_msg += f" | Contexto: {context}"

        log_func(log_msg)
