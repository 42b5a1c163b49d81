"""
Configuración del servicio de admisión de Runners.

Rol: Leer variables de entorno (API_*, LOG_LEVEL, CORS_ORIGINS, RUNNER_DEFAULT_*,
ENVIRONMENT, DEBUG) y exponerlas tipadas y validadas. Los defaults del runner
se resuelven aquí y se entregan al dominio como RunnerDefaults.

Depende de: pydantic y pydantic-settings.
"""

import logging
import os
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.defaults import RunnerDefaults
from ..shared.constants import (
    DEFAULT_DOCKER_ENABLED,
    DEFAULT_DOCKERD_WITHIN_RUNNER_CONTAINER,
    DEFAULT_EPHEMERAL,
    DEFAULT_WORK_DIR,
)
from ..shared.infrastructure_exceptions import ConfigurationError

logger = logging.getLogger(__name__)

VALID_ENVIRONMENTS = ["development", "staging", "production"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


class APIConfig(BaseModel):
    """Configuración de la API REST."""

    host: str = Field(default="0.0.0.0", description="Host de la API")
    port: int = Field(default=8000, description="Puerto de la API")
    log_level: str = Field(default="INFO", description="Nivel de logging")
    cors_origins: List[str] = Field(default=["*"], description="Orígenes CORS")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """El puerto debe ser un puerto TCP válido."""
        if not (1 <= v <= 65535):
            raise ValueError(f"Puerto fuera de rango (1-65535): {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normaliza el nivel a mayúsculas."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL desconocido: {v}")
        return v.upper()


class RunnerDefaultsConfig(BaseModel):
    """Valores por defecto aplicados a los flags no definidos del spec."""

    default_work_dir: str = Field(default=DEFAULT_WORK_DIR, description="Directorio de trabajo por defecto")
    default_ephemeral: bool = Field(default=DEFAULT_EPHEMERAL, description="Runner efímero por defecto")
    default_docker_enabled: bool = Field(default=DEFAULT_DOCKER_ENABLED, description="Sidecar Docker por defecto")
    default_dockerd_within_runner_container: bool = Field(
        default=DEFAULT_DOCKERD_WITHIN_RUNNER_CONTAINER,
        description="Docker dentro del contenedor del runner por defecto",
    )

    @field_validator("default_work_dir")
    @classmethod
    def validate_default_work_dir(cls, v):
        """El directorio de trabajo debe ser una ruta absoluta."""
        if not v.startswith("/"):
            raise ValueError("default_work_dir debe ser una ruta absoluta")
        return v

    def to_runner_defaults(self) -> RunnerDefaults:
        return RunnerDefaults(
            work_dir=self.default_work_dir,
            ephemeral=self.default_ephemeral,
            docker_enabled=self.default_docker_enabled,
            dockerd_within_runner_container=self.default_dockerd_within_runner_container,
        )


class Config(BaseSettings):
    """Configuración centralizada de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    api: APIConfig = Field(default_factory=APIConfig, description="Configuración de la API")
    runner: RunnerDefaultsConfig = Field(default_factory=RunnerDefaultsConfig, description="Defaults del runner")

    environment: str = Field(default="development", description="Entorno de ejecución")
    debug: bool = Field(default=False, description="Modo debug")

    @classmethod
    def from_env(cls) -> "Config":
        """Carga configuración desde variables de entorno."""
        try:
            return cls(
                api=APIConfig(
                    host=os.getenv("API_HOST", "0.0.0.0"),
                    port=int(os.getenv("API_PORT", 8000)),
                    log_level=os.getenv("LOG_LEVEL", "INFO"),
                    cors_origins=os.getenv("CORS_ORIGINS").split(",") if os.getenv("CORS_ORIGINS") else ["*"]
                ),
                runner=RunnerDefaultsConfig(
                    default_work_dir=os.getenv("RUNNER_DEFAULT_WORK_DIR", DEFAULT_WORK_DIR),
                    default_ephemeral=_env_bool("RUNNER_DEFAULT_EPHEMERAL", DEFAULT_EPHEMERAL),
                    default_docker_enabled=_env_bool("RUNNER_DEFAULT_DOCKER_ENABLED", DEFAULT_DOCKER_ENABLED),
                    default_dockerd_within_runner_container=_env_bool(
                        "RUNNER_DEFAULT_DOCKERD_WITHIN_RUNNER_CONTAINER",
                        DEFAULT_DOCKERD_WITHIN_RUNNER_CONTAINER,
                    ),
                ),
                environment=os.getenv("ENVIRONMENT", "development"),
                debug=_env_bool("DEBUG", False)
            )
        except Exception as e:
            logger.error(f"Error cargando configuración: {e}")
            raise ConfigurationError(f"Error en configuración: {e}") from e

    def is_valid(self) -> bool:
        """Valida reglas que cruzan secciones de la configuración."""
        if self.environment not in VALID_ENVIRONMENTS:
            logger.error(f"Validación de configuración fallida: environment debe ser uno de {VALID_ENVIRONMENTS}")
            return False

        return True


# Instancia global de configuración
_config: Optional[Config] = None


def get_config() -> Config:
    """Obtiene instancia de configuración (singleton)."""
    global _config

    if _config is None:
        config = Config.from_env()

        if not config.is_valid():
            raise ConfigurationError("Configuración inválida")

        _config = config

    return _config


def reload_config() -> Config:
    """Recarga la configuración desde variables de entorno."""
    global _config
    _config = None
    return get_config()
