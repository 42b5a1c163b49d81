"""
Modelos Pydantic para respuestas de la API.

Rol: Definir modelos de datos para respuestas salientes.
AdmissionReview de respuesta, ValidationResponse, WorkVolumeResponse.
Asegura consistencia en formato de respuestas.
"""

from typing import List, Optional

from pydantic import Field

from ..domain.base import ResourceModel
from ..domain.field_errors import FieldError
from ..domain.volumes import Volume, VolumeMount
from .request_models import ADMISSION_API_VERSION, ADMISSION_KIND


class StatusCause(ResourceModel):
    type: str
    message: str
    field: str


class StatusDetails(ResourceModel):
    name: str = ""
    group: str = ""
    kind: str = ""
    causes: List[StatusCause] = Field(default_factory=list)


class AdmissionStatus(ResourceModel):
    code: int
    reason: str = ""
    message: str = ""
    details: Optional[StatusDetails] = None


class AdmissionResponse(ResourceModel):
    uid: str
    allowed: bool
    status: Optional[AdmissionStatus] = None


class AdmissionReviewResponse(ResourceModel):
    api_version: str = ADMISSION_API_VERSION
    kind: str = ADMISSION_KIND
    response: AdmissionResponse


class FieldErrorModel(ResourceModel):
    """Error de campo serializable."""

    field: str
    type: str
    detail: str
    message: str

    @classmethod
    def from_field_error(cls, error: FieldError) -> "FieldErrorModel":
        return cls(
            field=str(error.field),
            type=error.type.value,
            detail=error.detail,
            message=str(error),
        )


class ValidationResponse(ResourceModel):
    """Response para validación de un Runner."""

    valid: bool
    errors: List[FieldErrorModel] = Field(default_factory=list)
    message: str = ""


class WorkVolumeResponse(ResourceModel):
    volume: Volume
    volume_mount: VolumeMount


class RegistrationResponse(ResourceModel):
    registerable: bool
    reason: Optional[str] = None


class HealthResponse(ResourceModel):
    """Response para health check."""

    status: str
    message: str
    uptime_seconds: int
    version: str
    environment: str
