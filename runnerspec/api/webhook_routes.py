"""
Webhook de validación para recursos Runner.

Rol: Recibir AdmissionReview del API server y responder allowed/denied.
CREATE y UPDATE ejecutan el validador; DELETE siempre se admite.
Convierte requests HTTP a llamadas al caso de uso AdmitRunner.

Depende de: AdmitRunner, schemas Pydantic, FastAPI.
"""

import logging

from fastapi import APIRouter, Depends, Request

from ..infrastructure.scheme import Scheme
from ..shared.constants import API_GROUP, RUNNER_KIND
from ..shared.domain_exceptions import UnknownKindError
from ..shared.infrastructure_exceptions import DecodeError
from ..shared.logging_utils import log_operation_error, log_operation_start, log_operation_success
from ..use_cases.admit_runner import AdmitRunner
from .request_models import AdmissionReviewRequest
from .response_models import (
    AdmissionResponse,
    AdmissionReviewResponse,
    AdmissionStatus,
    StatusCause,
    StatusDetails,
)

logger = logging.getLogger(__name__)

VALIDATE_RUNNER_PATH = "/validate-actions-summerwind-dev-v1alpha1-runner"

router = APIRouter(tags=["admission"])


async def get_scheme(request: Request) -> Scheme:
    """Obtiene el Scheme desde el estado de la aplicación."""
    return request.app.state.scheme


@router.post(VALIDATE_RUNNER_PATH, response_model=AdmissionReviewResponse, response_model_exclude_none=True)
async def validate_runner(review: AdmissionReviewRequest, scheme: Scheme = Depends(get_scheme)):
    """
    Valida un Runner en CREATE/UPDATE.

    Args:
        review: AdmissionReview enviado por el API server
        scheme: Registro de tipos

    Returns:
        AdmissionReview con la decisión
    """
    operation = "validate_runner_webhook"
    req = review.request
    log_operation_start(logger, operation, uid=req.uid, operation_type=req.operation, name=req.name)

    document = req.object
    if document is not None and req.namespace:
        metadata = document.get("metadata")
        if metadata is None:
            metadata = document["metadata"] = {}
        if isinstance(metadata, dict):
            metadata.setdefault("namespace", req.namespace)

    try:
        decision = AdmitRunner(scheme).execute(req.operation, document)
    except (DecodeError, UnknownKindError) as e:
        log_operation_error(logger, operation, e, uid=req.uid)
        return AdmissionReviewResponse(
            response=AdmissionResponse(
                uid=req.uid,
                allowed=False,
                status=AdmissionStatus(code=400, reason="BadRequest", message=str(e)),
            )
        )

    response = AdmissionResponse(uid=req.uid, allowed=decision.allowed)
    if not decision.allowed:
        response.status = AdmissionStatus(
            code=422,
            reason="Invalid",
            message=decision.message,
            details=StatusDetails(
                name=req.name,
                group=API_GROUP,
                kind=RUNNER_KIND,
                causes=[
                    StatusCause(type=error.type.value, message=error.error_body(), field=str(error.field))
                    for error in decision.errors
                ],
            ),
        )

    log_operation_success(logger, operation, uid=req.uid, allowed=decision.allowed)
    return AdmissionReviewResponse(response=response)
