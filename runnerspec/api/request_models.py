"""
Modelos Pydantic para requests de la API.

Rol: Definir modelos de datos para validar requests entrantes.
AdmissionReview (admission.k8s.io/v1), WorkVolumeRequest.
Asegura validación automática y tipado de datos.
"""

from typing import Any, Dict, Optional

from pydantic import Field

from ..domain.base import ResourceModel
from ..domain.entities import WorkVolumeClaimTemplate

ADMISSION_API_VERSION = "admission.k8s.io/v1"
ADMISSION_KIND = "AdmissionReview"


class GroupVersionKind(ResourceModel):
    group: str = ""
    version: str = ""
    kind: str = ""


class AdmissionRequest(ResourceModel):
    """Request enviado por el API server al webhook de validación."""

    uid: str
    kind: GroupVersionKind = Field(default_factory=GroupVersionKind)
    operation: str
    name: str = ""
    namespace: str = ""
    object: Optional[Dict[str, Any]] = None
    old_object: Optional[Dict[str, Any]] = None
    dry_run: Optional[bool] = None


class AdmissionReviewRequest(ResourceModel):
    api_version: str = ADMISSION_API_VERSION
    kind: str = ADMISSION_KIND
    request: AdmissionRequest


class WorkVolumeRequest(ResourceModel):
    """Request para derivar el volumen de trabajo de un template."""

    work_volume_claim_template: WorkVolumeClaimTemplate
    mount_path: str = Field(..., min_length=1)
