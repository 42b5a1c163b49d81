"""
Caso de uso para derivar el volumen de trabajo del runner.

Rol: Producir el par (Volume, VolumeMount) 'work' que consume el
aprovisionador de pods cuando containerMode es 'kubernetes'.

Depende de: entidades del dominio, defaults resueltos.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.defaults import RunnerDefaults, resolve_runner_defaults
from ..domain.entities import RunnerSpec, WorkVolumeClaimTemplate
from ..domain.volumes import Volume, VolumeMount
from ..shared.logging_utils import log_operation_error, log_operation_start, log_operation_success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkVolume:
    volume: Volume
    volume_mount: VolumeMount


class DeriveWorkVolume:
    """Caso de uso para derivar el volumen de trabajo."""

    def __init__(self, defaults: Optional[RunnerDefaults] = None):
        self.defaults = defaults or RunnerDefaults()

    def from_template(self, template: WorkVolumeClaimTemplate, mount_path: str) -> WorkVolume:
        """
        Deriva volumen y montaje a partir de un template.

        Args:
            template: Template de volumen de trabajo
            mount_path: Ruta de montaje en el contenedor del runner

        Returns:
            WorkVolume con volumen y montaje

        Raises:
            InvalidWorkVolumeClaimTemplate: Si el template es inválido
        """
        operation = "derive_work_volume"
        log_operation_start(logger, operation, mount_path=mount_path)

        try:
            result = WorkVolume(
                volume=template.to_volume(),
                volume_mount=template.to_volume_mount(mount_path),
            )
        except Exception as e:
            log_operation_error(logger, operation, e, mount_path=mount_path)
            raise

        log_operation_success(logger, operation, volume=result.volume.name, mount_path=mount_path)
        return result

    def execute(self, spec: RunnerSpec) -> Optional[WorkVolume]:
        """
        Deriva el volumen de trabajo de un spec.

        Args:
            spec: Spec validado del runner

        Returns:
            WorkVolume montado en el workDir resuelto, o None si el spec no
            usa containerMode 'kubernetes' o no define template
        """
        if not spec.uses_kubernetes_container_mode() or spec.work_volume_claim_template is None:
            return None

        resolved = resolve_runner_defaults(spec, self.defaults)
        return self.from_template(spec.work_volume_claim_template, resolved.work_dir)
