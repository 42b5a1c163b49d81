"""
Entidades del recurso Runner.

Rol: Definir el modelo de especificación (intención del usuario) y el modelo
de estado (observado por el reconciliador) de un runner self-hosted.
Runner, RunnerSpec, RunnerConfig, RunnerPodSpec, RunnerStatus, WorkVolumeClaimTemplate.

Las entidades no realizan I/O; la serialización pasa por domain/scheme.py.
"""

import copy
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from ..shared.constants import (
    API_VERSION,
    ERROR_MESSAGES,
    RUNNER_KIND,
    RUNNER_LIST_KIND,
    SUPPORTED_ACCESS_MODES,
    WORK_VOLUME_NAME,
    ContainerMode,
)
from ..shared.domain_exceptions import InvalidWorkVolumeClaimTemplate, ScopeError
from ..shared.validation_utils import (
    validate_container_mode,
    validate_enterprise,
    validate_organization,
    validate_repository,
    validate_volume_storage_medium,
)
from .base import Quantity, ResourceModel, ResourceRequirements
from .scope import RunnerScope, scopes_from_fields
from .tristate import TriState
from .volumes import (
    EphemeralVolumeSource,
    PersistentVolumeClaimSpec,
    PersistentVolumeClaimTemplate,
    Volume,
    VolumeMount,
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class WorkVolumeClaimTemplate(ResourceModel):
    """Solicitud de volumen efímero para el directorio de trabajo."""

    storage_class_name: str = ""
    access_modes: Optional[List[str]] = None
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)

    def ensure_valid(self) -> None:
        """
        Valida modos de acceso del template.

        Raises:
            InvalidWorkVolumeClaimTemplate: Si no hay modos o alguno no está soportado
        """
        if not self.access_modes:
            raise InvalidWorkVolumeClaimTemplate(ERROR_MESSAGES["access_mode_missing"])

        for access_mode in self.access_modes:
            if access_mode not in SUPPORTED_ACCESS_MODES:
                raise InvalidWorkVolumeClaimTemplate(
                    ERROR_MESSAGES["access_mode_unsupported"].format(mode=access_mode)
                )

    def to_volume(self) -> Volume:
        """
        Deriva el volumen efímero 'work' respaldado por este template.

        El resultado es una copia independiente del template.

        Raises:
            InvalidWorkVolumeClaimTemplate: Si el template no fue validado correctamente
        """
        self.ensure_valid()

        return Volume(
            name=WORK_VOLUME_NAME,
            ephemeral=EphemeralVolumeSource(
                volume_claim_template=PersistentVolumeClaimTemplate(
                    spec=PersistentVolumeClaimSpec(
                        access_modes=list(self.access_modes),
                        storage_class_name=self.storage_class_name,
                        resources=self.resources.model_copy(deep=True),
                    )
                )
            ),
        )

    def to_volume_mount(self, mount_path: str) -> VolumeMount:
        """Deriva el montaje del volumen 'work' en mount_path."""
        self.ensure_valid()

        return VolumeMount(name=WORK_VOLUME_NAME, mount_path=mount_path)


class SecretReference(ResourceModel):
    name: str


class GitHubAPICredentialsFrom(ResourceModel):
    secret_ref: Optional[SecretReference] = None


class RunnerConfig(ResourceModel):
    """Scope de registro y comportamiento del runner."""

    enterprise: str = ""
    organization: str = ""
    repository: str = ""
    labels: List[str] = Field(default_factory=list)
    group: str = ""
    ephemeral: Optional[bool] = None
    image: str = ""
    work_dir: str = ""
    dockerd_within_runner_container: Optional[bool] = None
    docker_enabled: Optional[bool] = None
    docker_mtu: Optional[int] = Field(default=None, alias="dockerMTU")
    docker_registry_mirror: Optional[str] = None
    volume_size_limit: Optional[Quantity] = None
    volume_storage_medium: Optional[str] = None
    container_mode: str = ""
    work_volume_claim_template: Optional[WorkVolumeClaimTemplate] = None
    github_api_credentials_from: Optional[GitHubAPICredentialsFrom] = Field(
        default=None, alias="githubAPICredentialsFrom"
    )

    @field_validator("enterprise")
    @classmethod
    def validate_enterprise(cls, v):
        return validate_enterprise(v)

    @field_validator("organization")
    @classmethod
    def validate_organization(cls, v):
        return validate_organization(v)

    @field_validator("repository")
    @classmethod
    def validate_repository(cls, v):
        return validate_repository(v)

    @field_validator("container_mode")
    @classmethod
    def validate_container_mode(cls, v):
        return validate_container_mode(v)

    @field_validator("volume_storage_medium")
    @classmethod
    def validate_volume_storage_medium(cls, v):
        return validate_volume_storage_medium(v)

    @property
    def ephemeral_state(self) -> TriState:
        return TriState.from_optional(self.ephemeral)

    @property
    def docker_enabled_state(self) -> TriState:
        return TriState.from_optional(self.docker_enabled)

    @property
    def dockerd_within_runner_container_state(self) -> TriState:
        return TriState.from_optional(self.dockerd_within_runner_container)

    def uses_kubernetes_container_mode(self) -> bool:
        return self.container_mode == ContainerMode.KUBERNETES.value

    def scopes(self) -> List[RunnerScope]:
        """Variantes de scope definidas por los tres campos."""
        return scopes_from_fields(self.enterprise, self.organization, self.repository)

    @property
    def scope(self) -> RunnerScope:
        """
        Scope único del runner.

        Raises:
            ScopeError: Si no hay scope o hay más de uno
        """
        scopes = self.scopes()
        if not scopes:
            raise ScopeError(ERROR_MESSAGES["scope_missing"])
        if len(scopes) > 1:
            raise ScopeError(ERROR_MESSAGES["scope_exclusive"])
        return scopes[0]


class RunnerPodSpec(ResourceModel):
    """Forma deseada del pod del runner (pass-through, sin invariantes propias)."""

    dockerd_container_resources: ResourceRequirements = Field(default_factory=ResourceRequirements)
    docker_volume_mounts: List[Dict[str, Any]] = Field(default_factory=list)
    docker_env: List[Dict[str, Any]] = Field(default_factory=list)
    containers: List[Dict[str, Any]] = Field(default_factory=list)
    image_pull_policy: Optional[str] = None
    env: List[Dict[str, Any]] = Field(default_factory=list)
    env_from: List[Dict[str, Any]] = Field(default_factory=list)
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)
    volume_mounts: List[Dict[str, Any]] = Field(default_factory=list)
    volumes: List[Dict[str, Any]] = Field(default_factory=list)
    enable_service_links: Optional[bool] = None
    init_containers: List[Dict[str, Any]] = Field(default_factory=list)
    node_selector: Dict[str, str] = Field(default_factory=dict)
    service_account_name: str = ""
    automount_service_account_token: Optional[bool] = None
    sidecar_containers: List[Dict[str, Any]] = Field(default_factory=list)
    security_context: Optional[Dict[str, Any]] = None
    image_pull_secrets: List[Dict[str, Any]] = Field(default_factory=list)
    affinity: Optional[Dict[str, Any]] = None
    tolerations: List[Dict[str, Any]] = Field(default_factory=list)
    priority_class_name: str = ""
    termination_grace_period_seconds: Optional[int] = None
    ephemeral_containers: List[Dict[str, Any]] = Field(default_factory=list)
    host_aliases: List[Dict[str, Any]] = Field(default_factory=list)
    topology_spread_constraints: List[Dict[str, Any]] = Field(default_factory=list)
    runtime_class_name: Optional[str] = None
    dns_config: Optional[Dict[str, Any]] = None


class RunnerSpec(RunnerConfig, RunnerPodSpec):
    """Estado deseado del runner: RunnerConfig + RunnerPodSpec en un solo objeto."""


class RunnerStatusRegistration(ResourceModel):
    """Registro del runner contra el backend de coordinación de builds."""

    enterprise: str = ""
    organization: str = ""
    repository: str = ""
    labels: List[str] = Field(default_factory=list)
    token: str = Field(default="", repr=False)
    expires_at: Optional[datetime] = None

    @field_validator("expires_at")
    @classmethod
    def normalize_expires_at(cls, v):
        return _as_utc(v)


class RunnerStatus(ResourceModel):
    """Estado observado, escrito exclusivamente por el reconciliador."""

    ready: bool = False
    registration: RunnerStatusRegistration = Field(default_factory=RunnerStatusRegistration)
    phase: str = ""
    reason: str = ""
    message: str = ""
    last_registration_check_time: Optional[datetime] = None

    @field_validator("last_registration_check_time")
    @classmethod
    def normalize_last_registration_check_time(cls, v):
        return _as_utc(v)


class ObjectMeta(ResourceModel):
    name: str = ""
    namespace: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)
    uid: Optional[str] = None
    resource_version: Optional[str] = None
    generation: Optional[int] = None
    creation_timestamp: Optional[datetime] = None


class ListMeta(ResourceModel):
    resource_version: Optional[str] = None
    continue_: Optional[str] = Field(default=None, alias="continue")


class Runner(ResourceModel):
    """Recurso Runner: metadata + spec (deseado) + status (observado)."""

    api_version: str = API_VERSION
    kind: str = RUNNER_KIND
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: RunnerSpec = Field(default_factory=RunnerSpec)
    status: RunnerStatus = Field(default_factory=RunnerStatus)

    @property
    def key(self) -> str:
        """Identificador namespace/name para logs."""
        if self.metadata.namespace:
            return f"{self.metadata.namespace}/{self.metadata.name}"
        return self.metadata.name

    def field_errors(self):
        """Errores de validación del spec con rutas bajo 'spec'."""
        from .validation import validate_runner

        return validate_runner(self)

    def is_registerable(self, now: Optional[datetime] = None) -> bool:
        from .registration import is_registerable

        return is_registerable(self, now=now)

    def with_spec(self, spec: RunnerSpec) -> "Runner":
        """Copia del runner con un spec reemplazado; el original no cambia."""
        return self.model_copy(update={"spec": copy.deepcopy(spec)}, deep=True)


class RunnerList(ResourceModel):
    api_version: str = API_VERSION
    kind: str = RUNNER_LIST_KIND
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: List[Runner] = Field(default_factory=list)
