"""
Modelo base para documentos del API de recursos.

Rol: Atributos snake_case en Python, nombres camelCase en el documento.
Todos los modelos del recurso Runner heredan de ResourceModel.
"""

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Cantidad de recursos tal como aparece en el documento ("10Gi", 2, "500m")
Quantity = Union[str, int, float]


class ResourceModel(BaseModel):
    """Base con aliases camelCase y población por nombre de atributo."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> Dict[str, Any]:
        """Serializa al formato del documento (camelCase, sin nulos)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResourceRequirements(ResourceModel):
    """Límites y solicitudes de recursos (pass-through)."""

    limits: Dict[str, Quantity] = Field(default_factory=dict)
    requests: Dict[str, Quantity] = Field(default_factory=dict)
