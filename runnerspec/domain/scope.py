"""
Scope de registro del runner como tipo suma.

Rol: Representar el dueño del runner como exactamente una variante:
EnterpriseScope, OrganizationScope o RepositoryScope.
El documento serializado sigue usando tres strings independientes; este
módulo construye las variantes posibles a partir de ellos.
"""

from dataclasses import dataclass
from typing import List, Union

from ..shared.constants import ScopeType
from ..shared.validation_utils import parse_repository_parts


@dataclass(frozen=True)
class EnterpriseScope:
    """Runner registrado a nivel enterprise."""

    name: str
    type: ScopeType = ScopeType.ENTERPRISE


@dataclass(frozen=True)
class OrganizationScope:
    """Runner registrado a nivel organización."""

    name: str
    type: ScopeType = ScopeType.ORG


@dataclass(frozen=True)
class RepositoryScope:
    """Runner que solo ejecuta jobs de un repositorio OWNER/NAME."""

    name: str
    type: ScopeType = ScopeType.REPO

    @property
    def owner(self) -> str:
        return parse_repository_parts(self.name)[0]

    @property
    def repo(self) -> str:
        return parse_repository_parts(self.name)[1]


RunnerScope = Union[EnterpriseScope, OrganizationScope, RepositoryScope]


def scopes_from_fields(enterprise: str, organization: str, repository: str) -> List[RunnerScope]:
    """
    Construye todas las variantes de scope definidas.

    Un spec válido produce exactamente una; el validador solo cuenta cuántas.

    Args:
        enterprise: Nombre de enterprise ('' si no definido)
        organization: Nombre de organización ('' si no definido)
        repository: Repositorio OWNER/NAME ('' si no definido)

    Returns:
        Lista de variantes en orden organization, repository, enterprise
    """
    scopes: List[RunnerScope] = []
    if organization:
        scopes.append(OrganizationScope(organization))
    if repository:
        scopes.append(RepositoryScope(repository))
    if enterprise:
        scopes.append(EnterpriseScope(enterprise))
    return scopes
