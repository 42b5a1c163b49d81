"""
Constantes globales de la aplicación.

Rol: Definir constantes usadas en toda la aplicación.
Grupo/versión del recurso Runner, modos de contenedor, modos de acceso.
Centraliza valores mágicos y mensajes de validación.

Depende de: enums para modos y scopes.
"""

from enum import Enum

# Identidad del recurso
API_GROUP = "actions.summerwind.dev"
API_VERSION_NAME = "v1alpha1"
API_VERSION = f"{API_GROUP}/{API_VERSION_NAME}"
RUNNER_KIND = "Runner"
RUNNER_LIST_KIND = "RunnerList"

# Valores por defecto del runner
DEFAULT_WORK_DIR = "/runner/_work"
DEFAULT_EPHEMERAL = True
DEFAULT_DOCKER_ENABLED = True
DEFAULT_DOCKERD_WITHIN_RUNNER_CONTAINER = False

# Volumen de trabajo derivado del template
WORK_VOLUME_NAME = "work"


# Tipos de scope
class ScopeType(Enum):
    """Tipos de scope para runners."""
    REPO = "repo"
    ORG = "org"
    ENTERPRISE = "enterprise"


class ContainerMode(str, Enum):
    """Modos de ejecución de contenedores de jobs."""
    DOCKER = ""
    KUBERNETES = "kubernetes"


class AccessMode(str, Enum):
    """Modos de acceso soportados para el volumen de trabajo."""
    READ_WRITE_ONCE = "ReadWriteOnce"
    READ_WRITE_MANY = "ReadWriteMany"


SUPPORTED_ACCESS_MODES = frozenset(mode.value for mode in AccessMode)

# Único medio de almacenamiento permitido para el volumen del runner
VOLUME_STORAGE_MEDIUM_MEMORY = "Memory"

# Expresiones regulares para validación
ENTERPRISE_NAME_PATTERN = r"^[^/]+$"
ORGANIZATION_NAME_PATTERN = r"^[^/]+$"
REPO_NAME_PATTERN = r"^[^/]+/[^/]+$"

# Campos del spec usados como rutas de error
FIELD_REPOSITORY = "repository"
FIELD_WORK_VOLUME_CLAIM_TEMPLATE = "workVolumeClaimTemplate"

# Mensajes de error estándar
ERROR_MESSAGES = {
    "scope_missing": "must specify exactly one of enterprise, organization, repository",
    "scope_exclusive": "enterprise, organization, repository are mutually exclusive",
    "work_volume_required": "workVolumeClaimTemplate is required when containerMode is kubernetes",
    "access_mode_missing": "at least one access mode must be specified",
    "access_mode_unsupported": "access mode {mode} is not supported",
}

# Razones por las que un runner no se considera registrado
REGISTRATION_REASONS = {
    "repository_mismatch": "registration belongs to a different repository",
    "missing_token": "registration token is empty",
    "expired_token": "registration token has expired",
}
