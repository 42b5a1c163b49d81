"""
Booleanos de tres estados para flags opcionales del recurso.

Rol: Distinguir "no definido" de "falso" en campos como ephemeral o dockerEnabled.
El valor por defecto se resuelve en el borde (defaults.py), no en la lógica de negocio.
"""

from enum import Enum
from typing import Optional


class TriState(Enum):
    """Valor booleano opcional: UNSET, TRUE o FALSE."""

    UNSET = "unset"
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_optional(cls, value: Optional[bool]) -> "TriState":
        if value is None:
            return cls.UNSET
        return cls.TRUE if value else cls.FALSE

    def is_set(self) -> bool:
        return self is not TriState.UNSET

    def resolve(self, default: bool) -> bool:
        """Retorna el valor definido, o default si no está definido."""
        if self is TriState.UNSET:
            return default
        return self is TriState.TRUE

    def to_optional(self) -> Optional[bool]:
        if self is TriState.UNSET:
            return None
        return self is TriState.TRUE
