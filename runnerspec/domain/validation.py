"""
Validación de consistencia del spec de un Runner.

Rol: Producir la lista completa de errores de campo de un RunnerConfig o RunnerSpec.
Evalúa siempre todas las reglas (no se detiene en el primer error).
Función pura: no modifica el spec ni mantiene estado entre llamadas.

Depende de: entities, field_errors.
"""

import logging
from typing import Optional

from ..shared.constants import (
    ERROR_MESSAGES,
    FIELD_REPOSITORY,
    FIELD_WORK_VOLUME_CLAIM_TEMPLATE,
)
from ..shared.domain_exceptions import InvalidWorkVolumeClaimTemplate
from .entities import Runner, RunnerConfig
from .field_errors import ErrorList, FieldPath, invalid

logger = logging.getLogger(__name__)

SPEC_ROOT = FieldPath("spec")


def _scope_error(spec: RunnerConfig) -> Optional[str]:
    found = len(spec.scopes())
    if found == 0:
        return ERROR_MESSAGES["scope_missing"]
    if found > 1:
        return ERROR_MESSAGES["scope_exclusive"]
    return None


def _work_volume_claim_template_error(spec: RunnerConfig) -> Optional[str]:
    if not spec.uses_kubernetes_container_mode():
        return None

    if spec.work_volume_claim_template is None:
        return ERROR_MESSAGES["work_volume_required"]

    try:
        spec.work_volume_claim_template.ensure_valid()
    except InvalidWorkVolumeClaimTemplate as e:
        return str(e)

    return None


def validate_runner_spec(spec: RunnerConfig, root_path: Optional[FieldPath] = None) -> ErrorList:
    """
    Valida un RunnerConfig (o un RunnerSpec, que lo extiende).

    Reglas:
        1. Exactamente uno de enterprise, organization, repository. El error
           siempre se asocia a la ruta 'repository'.
        2. Con containerMode 'kubernetes', workVolumeClaimTemplate es
           obligatorio y debe ser válido.

    Args:
        spec: Spec a validar
        root_path: Ruta bajo la cual se ubican los campos (opcional)

    Returns:
        ErrorList, vacía si el spec es válido. El error de scope precede al
        del template.
    """
    errors = ErrorList()

    detail = _scope_error(spec)
    if detail:
        errors.append(invalid(FieldPath.of(root_path, FIELD_REPOSITORY), spec.repository, detail))

    detail = _work_volume_claim_template_error(spec)
    if detail:
        errors.append(
            invalid(
                FieldPath.of(root_path, FIELD_WORK_VOLUME_CLAIM_TEMPLATE),
                spec.work_volume_claim_template,
                detail,
            )
        )

    logger.debug(f"validate_runner_spec | errores={len(errors)}")
    return errors


def validate_runner(runner: Runner) -> ErrorList:
    """Valida el spec de un Runner con rutas bajo 'spec'."""
    return validate_runner_spec(runner.spec, SPEC_ROOT)
