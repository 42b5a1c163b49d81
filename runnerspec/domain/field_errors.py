"""
Errores de validación asociados a rutas de campo.

Rol: Representar cada violación como (ruta, valor inválido, detalle).
FieldPath construye rutas como 'spec.repository'.
ErrorList agrega errores y los convierte en una única excepción de dominio.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel

from ..shared.constants import API_GROUP
from ..shared.domain_exceptions import ValidationError


class FieldErrorType(str, Enum):
    """Tipos de error de campo."""
    INVALID = "FieldValueInvalid"


class FieldPath:
    """Ruta inmutable a un campo de un documento."""

    def __init__(self, *segments: str):
        self._segments: Tuple[str, ...] = tuple(segments)

    @classmethod
    def of(cls, root: Optional["FieldPath"], name: str) -> "FieldPath":
        """Hijo de root, o ruta de un solo segmento si no hay raíz."""
        if root is None:
            return cls(name)
        return root.child(name)

    def child(self, name: str) -> "FieldPath":
        return FieldPath(*self._segments, name)

    def __str__(self) -> str:
        return ".".join(self._segments)

    def __repr__(self) -> str:
        return f"FieldPath({str(self)!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, FieldPath):
            return self._segments == other._segments
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._segments)


def _render_value(value: Any) -> str:
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(value, default=str, sort_keys=True)


@dataclass(frozen=True)
class FieldError:
    """Violación de una regla sobre un campo concreto."""

    field: FieldPath
    bad_value: Any
    detail: str
    type: FieldErrorType = FieldErrorType.INVALID

    def error_body(self) -> str:
        return f"Invalid value: {_render_value(self.bad_value)}: {self.detail}"

    def __str__(self) -> str:
        return f"{self.field}: {self.error_body()}"


def invalid(field: FieldPath, value: Any, detail: str) -> FieldError:
    """Crea un error de valor inválido."""
    return FieldError(field=field, bad_value=value, detail=detail)


class ErrorList(list):
    """Lista ordenada de FieldError."""

    def messages(self):
        return [str(error) for error in self]

    def to_aggregate(self, kind: str, name: str) -> Optional[ValidationError]:
        """
        Convierte la lista en una excepción de dominio.

        Args:
            kind: Kind del recurso (ej. Runner)
            name: Nombre del objeto

        Returns:
            ValidationError, o None si la lista está vacía
        """
        if not self:
            return None

        joined = ", ".join(self.messages())
        if len(self) > 1:
            joined = f"[{joined}]"

        message = f'{kind}.{API_GROUP} "{name}" is invalid: {joined}'
        return ValidationError(message, errors=list(self))
