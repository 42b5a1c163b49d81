"""
runnerspec - Recurso Runner para runners self-hosted de GitHub Actions

Versión: 0.1.0
Propósito: Modelo declarativo del Runner, validación de consistencia y
derivaciones (volumen de trabajo, elegibilidad de registro).
"""

__version__ = "0.1.0"
__description__ = "Runner resource model, validation and derivations"

# Exportaciones principales del dominio
from .domain.entities import (
    Runner,
    RunnerConfig,
    RunnerList,
    RunnerPodSpec,
    RunnerSpec,
    RunnerStatus,
    RunnerStatusRegistration,
    WorkVolumeClaimTemplate,
)
from .domain.field_errors import ErrorList, FieldError, FieldPath
from .domain.registration import is_registerable
from .domain.validation import validate_runner, validate_runner_spec

# Exportaciones de infraestructura
from .infrastructure.scheme import Scheme, new_scheme

__all__ = [
    "__version__",
    "__description__",

    # Entidades de dominio
    "Runner",
    "RunnerConfig",
    "RunnerList",
    "RunnerPodSpec",
    "RunnerSpec",
    "RunnerStatus",
    "RunnerStatusRegistration",
    "WorkVolumeClaimTemplate",

    # Validación y derivaciones
    "ErrorList",
    "FieldError",
    "FieldPath",
    "validate_runner",
    "validate_runner_spec",
    "is_registerable",

    # Infraestructura
    "Scheme",
    "new_scheme",
]
