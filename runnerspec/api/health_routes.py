"""
Rutas de API para health checks.

Rol: Exponer endpoints de salud y estado del sistema.
GET /system/health, GET /system/kinds.
"""

import logging
import time

from fastapi import APIRouter, Request

from .. import __version__
from ..shared.logging_utils import log_operation_start
from .response_models import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system", tags=["system"])

# Tiempo de inicio del servidor
SERVER_START_TIME = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Verifica el estado de salud del servicio."""
    log_operation_start(logger, "health_check_api")

    return HealthResponse(
        status="healthy",
        message="Servicio funcionando correctamente",
        uptime_seconds=int(time.time() - SERVER_START_TIME),
        version=__version__,
        environment=request.app.state.config.environment,
    )


@router.get("/kinds")
async def registered_kinds(request: Request):
    """Lista los apiVersion/kind registrados en el esquema."""
    return {
        "kinds": [
            {"apiVersion": api_version, "kind": kind}
            for api_version, kind in request.app.state.scheme.known_kinds()
        ]
    }
