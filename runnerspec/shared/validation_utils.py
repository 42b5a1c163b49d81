"""
Utilitarios de validación reutilizables.

Rol: Proveer funciones de validación de formato para los campos del recurso.
Validar nombres de enterprise, organización y repositorio.
Funciones puras sin dependencias externas.

Depende de: expresiones regulares, constantes.
"""

import re
from typing import Tuple

from .constants import (
    ENTERPRISE_NAME_PATTERN,
    ORGANIZATION_NAME_PATTERN,
    REPO_NAME_PATTERN,
    VOLUME_STORAGE_MEDIUM_MEMORY,
    ContainerMode,
)


def validate_enterprise(enterprise: str) -> str:
    """
    Valida nombre de enterprise. Vacío significa no definido.

    Raises:
        ValueError: Si el nombre contiene '/'
    """
    if enterprise and not re.match(ENTERPRISE_NAME_PATTERN, enterprise):
        raise ValueError("enterprise must not contain '/'")

    return enterprise


def validate_organization(organization: str) -> str:
    """
    Valida nombre de organización. Vacío significa no definido.

    Raises:
        ValueError: Si el nombre contiene '/'
    """
    if organization and not re.match(ORGANIZATION_NAME_PATTERN, organization):
        raise ValueError("organization must not contain '/'")

    return organization


def validate_repository(repo_name: str) -> str:
    """
    Valida formato de nombre de repositorio.

    Args:
        repo_name: Nombre del repositorio en formato OWNER/NAME (vacío permitido)

    Returns:
        Nombre validado

    Raises:
        ValueError: Si el formato es inválido
    """
    if repo_name and not re.match(REPO_NAME_PATTERN, repo_name):
        raise ValueError("repository must have the form OWNER/NAME")

    return repo_name


def validate_container_mode(container_mode: str) -> str:
    """
    Valida el modo de contenedor: vacío (Docker) o 'kubernetes'.

    Raises:
        ValueError: Si el valor no es un modo conocido
    """
    valid_modes = [m.value for m in ContainerMode]

    if container_mode not in valid_modes:
        raise ValueError(f"containerMode must be empty or '{ContainerMode.KUBERNETES.value}'")

    return container_mode


def validate_volume_storage_medium(medium):
    """Valida el medio de almacenamiento del volumen (solo 'Memory')."""
    if medium is not None and medium != VOLUME_STORAGE_MEDIUM_MEMORY:
        raise ValueError(f"volumeStorageMedium must be '{VOLUME_STORAGE_MEDIUM_MEMORY}'")

    return medium


def parse_repository_parts(repo_name: str) -> Tuple[str, str]:
    """
    Parsea nombre de repositorio en owner y repo.

    Args:
        repo_name: Nombre en formato OWNER/NAME

    Returns:
        Tupla (owner, repo)
    """
    if not repo_name:
        raise ValueError("repository must not be empty")

    validate_repository(repo_name)

    owner, repo = repo_name.split("/", 1)
    return owner, repo
