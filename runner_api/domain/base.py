"""
Modelo base para documentos de recursos del clúster.

Rol: Proveer el mapeo snake_case <-> camelCase de los documentos,
la omisión de campos vacíos al serializar y tipos comunes
(OptionalBool tri-estado, Timestamp en UTC).

Depende de: pydantic.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from ..shared.constants import TriState


def utc_now() -> datetime:
    """Instante actual en UTC."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Interpreta fechas sin zona horaria como UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


OptionalBool = Annotated[
    TriState,
    BeforeValidator(TriState.parse),
    PlainSerializer(TriState.to_bool, return_type=Optional[bool]),
]

Timestamp = Annotated[Optional[datetime], AfterValidator(ensure_utc)]


def default_if_none(model: type, value: Any, info: ValidationInfo) -> Any:
    """Reemplaza null por el valor por defecto del campo (objeto o colección vacía)."""
    if value is None:
        return model.model_fields[info.field_name].get_default(call_default_factory=True)
    return value


def _is_empty(value: Any) -> bool:
    # False y 0 son valores configurados, no vacíos
    return value is None or (isinstance(value, (str, list, dict)) and not value)


class ResourceModel(BaseModel):
    """Base de todas las entidades serializables del recurso."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Campos que se emiten aunque estén vacíos
    always_emit: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def omit_empty_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)

        keep = set()
        for name in self.always_emit:
            keep.add(name)
            alias = type(self).model_fields[name].alias
            if alias:
                keep.add(alias)

        return {key: value for key, value in data.items() if key in keep or not _is_empty(value)}
