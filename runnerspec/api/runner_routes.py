"""
Endpoints específicos para recursos Runner.

Rol: Exponer endpoints REST sobre las funciones puras del dominio.
POST /runners/validate, POST /runners/work-volume, POST /runners/registration.
Convierte requests HTTP a llamadas a casos de uso.

Depende de: casos de uso, schemas Pydantic, FastAPI.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request

from ..domain.registration import Clock
from ..infrastructure.scheme import Scheme
from ..shared.constants import RUNNER_KIND
from ..shared.infrastructure_exceptions import ErrorHandler
from ..shared.logging_utils import log_operation_error, log_operation_start, log_operation_success
from ..use_cases.admit_runner import AdmitRunner
from ..use_cases.check_registration import CheckRegistration
from ..use_cases.derive_work_volume import DeriveWorkVolume
from .request_models import WorkVolumeRequest
from .response_models import (
    FieldErrorModel,
    RegistrationResponse,
    ValidationResponse,
    WorkVolumeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/runners", tags=["runners"])


async def get_scheme(request: Request) -> Scheme:
    return request.app.state.scheme


async def get_clock(request: Request) -> Clock:
    return request.app.state.clock


async def get_derive_work_volume(request: Request) -> DeriveWorkVolume:
    return DeriveWorkVolume(request.app.state.config.runner.to_runner_defaults())


@router.post("/validate", response_model=ValidationResponse)
async def validate_runner(
    document: Dict[str, Any] = Body(...),
    scheme: Scheme = Depends(get_scheme),
):
    """
    Valida un documento Runner y retorna todos los errores de campo.

    Args:
        document: Documento Runner (apiVersion, kind, metadata, spec)
        scheme: Registro de tipos

    Returns:
        Resultado de la validación
    """
    operation = "validate_runner_api"
    log_operation_start(logger, operation)

    try:
        use_case = AdmitRunner(scheme)
        runner = use_case.decode_runner(document)
        errors = use_case.validate(runner)
        aggregate = errors.to_aggregate(RUNNER_KIND, runner.metadata.name)

        response = ValidationResponse(
            valid=not errors,
            errors=[FieldErrorModel.from_field_error(e) for e in errors],
            message=str(aggregate) if aggregate else "",
        )

        log_operation_success(logger, operation, runner=runner.key, errors=len(errors))
        return response

    except Exception as e:
        log_operation_error(logger, operation, e)
        raise ErrorHandler.handle_error(e, operation)


@router.post("/work-volume", response_model=WorkVolumeResponse, response_model_exclude_none=True)
async def derive_work_volume(
    request: WorkVolumeRequest,
    use_case: DeriveWorkVolume = Depends(get_derive_work_volume),
):
    """
    Deriva el volumen 'work' y su montaje a partir de un template.

    Returns:
        Volumen y montaje derivados (422 si el template es inválido)
    """
    operation = "derive_work_volume_api"

    try:
        result = use_case.from_template(request.work_volume_claim_template, request.mount_path)
        return WorkVolumeResponse(volume=result.volume, volume_mount=result.volume_mount)
    except Exception as e:
        raise ErrorHandler.handle_error(e, operation)


@router.post("/registration", response_model=RegistrationResponse)
async def check_registration(
    document: Dict[str, Any] = Body(...),
    scheme: Scheme = Depends(get_scheme),
    clock: Clock = Depends(get_clock),
):
    """
    Indica si el runner puede tratarse como ya registrado.

    Returns:
        Decisión y razón si no es registrable
    """
    operation = "check_registration_api"

    try:
        runner = AdmitRunner(scheme).decode_runner(document)
        result = CheckRegistration(clock).execute(runner)
        return RegistrationResponse(registerable=result.registerable, reason=result.reason)
    except Exception as e:
        log_operation_error(logger, operation, e)
        raise ErrorHandler.handle_error(e, operation)
