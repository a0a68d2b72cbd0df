"""
Serialización de recursos Runner hacia y desde documentos.

Rol: Traducir entre los documentos persistidos por la capa de
almacenamiento (JSON con nombres camelCase) y las entidades de dominio.
Mantiene el registro de kinds conocidos y despacha por 'kind'.

Depende de: pydantic para validación, config para namespace por defecto.
"""

import json
import logging
from typing import Any, Dict, Optional, Type, Union

from pydantic import ValidationError

from ..domain.base import ResourceModel
from ..domain.entities import Runner, RunnerList
from ..shared.constants import GROUP_VERSION, PRINT_COLUMNS, RUNNER_KIND, RUNNER_LIST_KIND
from ..shared.infrastructure_exceptions import SerializationError
from ..shared.logging_utils import log_operation_error, log_operation_start, log_operation_success
from .config import get_config

logger = logging.getLogger(__name__)

# Registro de kinds conocidos
KIND_REGISTRY: Dict[str, Type[ResourceModel]] = {}


def register_kind(kind: str, model: Type[ResourceModel]) -> None:
    """Registra el modelo asociado a un kind."""
    KIND_REGISTRY[kind] = model


register_kind(RUNNER_KIND, Runner)
register_kind(RUNNER_LIST_KIND, RunnerList)


def _as_document(data: Union[str, bytes, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError as e:
            raise SerializationError(f"Documento JSON inválido: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError("El documento debe ser un objeto")

    return data


def load_resource(
    data: Union[str, bytes, Dict[str, Any]],
    default_namespace: Optional[str] = None,
) -> Union[Runner, RunnerList]:
    """
    Construye una entidad a partir de un documento.

    Args:
        data: Documento como dict, o JSON en str/bytes
        default_namespace: Namespace para runners sin namespace
            (por defecto, el configurado)

    Returns:
        Runner o RunnerList según el 'kind' del documento

    Raises:
        SerializationError: Si el documento es ilegible, el kind es
            desconocido, el apiVersion no coincide o los campos son inválidos
    """
    operation = "load_resource"
    kind = None
    log_operation_start(logger, operation, source=type(data).__name__)

    try:
        document = _as_document(data)
        kind = document.get("kind")

        model = KIND_REGISTRY.get(kind)
        if model is None:
            raise SerializationError(f"Kind desconocido: {kind}", kind=kind)

        api_version = document.get("apiVersion", GROUP_VERSION)
        if api_version != GROUP_VERSION:
            raise SerializationError(
                f"apiVersion {api_version} no soportado, se esperaba {GROUP_VERSION}", kind=kind
            )

        try:
            resource = model.model_validate(document)
        except ValidationError as e:
            raise SerializationError(f"Documento {kind} inválido: {e}", kind=kind) from e

    except SerializationError as e:
        log_operation_error(logger, operation, e, kind=kind)
        raise

    runners = resource.items if isinstance(resource, RunnerList) else [resource]
    for runner in runners:
        if not runner.metadata.namespace:
            runner.metadata.namespace = default_namespace or get_config().default_namespace

    log_operation_success(logger, operation, kind=kind, runners=len(runners))
    return resource


def dump_resource(resource: ResourceModel) -> Dict[str, Any]:
    """Convierte una entidad a documento (dict con nombres camelCase)."""
    return resource.model_dump(mode="json", by_alias=True)


def dumps_resource(resource: ResourceModel, indent: Optional[int] = None) -> str:
    """Convierte una entidad a documento JSON."""
    return resource.model_dump_json(by_alias=True, indent=indent)


def print_columns(runner: Runner) -> Dict[str, str]:
    """
    Columnas resumen de un runner para listados.

    Returns:
        Dict encabezado -> valor (Enterprise, Organization, Repository, Labels, Status)
    """
    document = dump_resource(runner)
    columns = {}

    for header, path in PRINT_COLUMNS:
        value: Any = document
        for part in path.split("."):
            value = value.get(part, "") if isinstance(value, dict) else ""

        if isinstance(value, list):
            value = ",".join(str(item) for item in value)

        columns[header] = str(value) if value is not None else ""

    return columns
