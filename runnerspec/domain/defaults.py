"""
Resolución de valores por defecto del RunnerConfig.

Rol: Convertir los flags de tres estados en booleanos concretos en el borde,
antes de que los consuma el aprovisionador de pods.
"""

from dataclasses import dataclass

from ..shared.constants import (
    DEFAULT_DOCKER_ENABLED,
    DEFAULT_DOCKERD_WITHIN_RUNNER_CONTAINER,
    DEFAULT_EPHEMERAL,
    DEFAULT_WORK_DIR,
)
from .entities import RunnerConfig


@dataclass(frozen=True)
class RunnerDefaults:
    """Valores aplicados cuando el spec no define el campo."""

    work_dir: str = DEFAULT_WORK_DIR
    ephemeral: bool = DEFAULT_EPHEMERAL
    docker_enabled: bool = DEFAULT_DOCKER_ENABLED
    dockerd_within_runner_container: bool = DEFAULT_DOCKERD_WITHIN_RUNNER_CONTAINER


@dataclass(frozen=True)
class ResolvedRunnerConfig:
    ephemeral: bool
    docker_enabled: bool
    dockerd_within_runner_container: bool
    work_dir: str


def resolve_runner_defaults(config: RunnerConfig, defaults: RunnerDefaults = RunnerDefaults()) -> ResolvedRunnerConfig:
    """
    Resuelve los flags opcionales del config.

    Args:
        config: Config (o spec) del runner
        defaults: Valores por defecto a aplicar

    Returns:
        Config con todos los flags definidos
    """
    return ResolvedRunnerConfig(
        ephemeral=config.ephemeral_state.resolve(defaults.ephemeral),
        docker_enabled=config.docker_enabled_state.resolve(defaults.docker_enabled),
        dockerd_within_runner_container=config.dockerd_within_runner_container_state.resolve(
            defaults.dockerd_within_runner_container
        ),
        work_dir=config.work_dir or defaults.work_dir,
    )
