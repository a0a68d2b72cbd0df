"""
Configuración y validación centralizada de la aplicación.

Rol: Cargar variables de entorno, validar y proveer defaults.
Centraliza toda la configuración del sistema en un solo lugar.

Variables: RUNNER_API_LOG_LEVEL, RUNNER_API_DEFAULT_NAMESPACE, RUNNER_API_ENVIRONMENT.

Depende de: variables de entorno, pydantic-settings para validación.
"""

import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..shared.constants import DEFAULT_NAMESPACE
from ..shared.infrastructure_exceptions import ConfigurationError, ErrorHandler
from ..shared.logging_utils import setup_logger, setup_logging_config

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_ENVIRONMENTS = ["development", "staging", "production"]
PACKAGE_LOGGER = "runner_api"


class Settings(BaseSettings):
    """Configuración centralizada de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="RUNNER_API_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Nivel de logging")
    default_namespace: str = Field(default=DEFAULT_NAMESPACE, description="Namespace para recursos sin namespace")
    environment: str = Field(default="development", description="Entorno de ejecución")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Valida nivel de logging."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level debe ser uno de: {VALID_LOG_LEVELS}")
        return v.upper()

    @field_validator("default_namespace")
    @classmethod
    def validate_default_namespace(cls, v):
        if not v.strip():
            raise ValueError("default_namespace no puede estar vacío")
        return v.strip()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        if v not in VALID_ENVIRONMENTS:
            raise ValueError(f"Environment debe ser: {', '.join(VALID_ENVIRONMENTS)}")
        return v


# Instancia global de configuración
_config: Optional[Settings] = None


def get_config() -> Settings:
    """Obtiene instancia de configuración (singleton)."""
    global _config

    if _config is None:
        try:
            _config = Settings()
        except ValidationError as e:
            ErrorHandler.log_error(e, "get_config")
            raise ConfigurationError(f"Error en configuración: {e}") from e

    return _config


def reload_config() -> Settings:
    """Recarga la configuración desde variables de entorno."""
    global _config
    _config = None
    return get_config()


def configure_logging(settings: Optional[Settings] = None, root: bool = False) -> None:
    """
    Aplica el nivel de logging configurado.

    Args:
        settings: Configuración a usar (por defecto, la global)
        root: Configurar el logging raíz del proceso en lugar del logger del paquete
    """
    settings = settings or get_config()

    if root:
        setup_logging_config(settings.log_level)
    else:
        setup_logger(PACKAGE_LOGGER, settings.log_level)

    logger.debug(f"Logging configurado | level={settings.log_level} | environment={settings.environment}")
