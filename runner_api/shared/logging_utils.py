"""
Utilitarios de configuración y manejo de logging.

Rol: Configurar logging centralizado para toda la aplicación.
Define formateadores, handlers y niveles de logging.
Provee funciones helper para logging específico del dominio.

Depende de: logging library, configuración de entorno.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configura y retorna un logger estandarizado.

    Args:
        name: Nombre del logger
        level: Nivel de logging (opcional, INFO por defecto)

    Returns:
        Logger configurado
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        # Configurar handler solo si no existe
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, (level or "INFO").upper()))

    return logger


def setup_logging_config(level: str = "INFO") -> None:
    """
    Configura el logging básico para toda la aplicación.
    Debe llamarse una sola vez al inicio.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Reducir verbosidad de librerías externas
    logging.getLogger("pydantic").setLevel(logging.WARNING)


def mask_sensitive_data(data: str, mask_char: str = "*", visible_chars: int = 4) -> str:
    """
    Enmascara datos sensibles en logs.

    Args:
        data: Dato sensible (token, password, etc.)
        mask_char: Carácter para enmascarar
        visible_chars: Caracteres visibles al inicio

    Returns:
        Dato enmascarado
    """
    if not data or len(data) <= visible_chars:
        return mask_char * 8

    return data[:visible_chars] + mask_char * (len(data) - visible_chars)


def _format_context(**kwargs) -> str:
    return " | ".join([f"{k}={v}" for k, v in kwargs.items()])


def log_operation_start(logger: logging.Logger, operation: str, **kwargs) -> None:
    """Registra inicio de operación con contexto."""
    logger.info(f"INICIO | {operation} | {_format_context(**kwargs)}")


def log_operation_success(logger: logging.Logger, operation: str, **kwargs) -> None:
    """Registra éxito de operación con contexto."""
    logger.info(f"ÉXITO | {operation} | {_format_context(**kwargs)}")


def log_operation_error(logger: logging.Logger, operation: str, error: Exception, **kwargs) -> None:
    """
    Registra error de operación con contexto.

    Args:
        logger: Logger a usar
        operation: Descripción de operación
        error: Excepción capturada
        **kwargs: Contexto adicional
    """
    logger.error(f"ERROR | {operation} | {type(error).__name__}: {error} | {_format_context(**kwargs)}")
