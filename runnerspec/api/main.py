"""
Aplicación FastAPI del servicio de admisión de Runners.

Rol: Construir la app (create_app) con su Config, su Scheme y su reloj, y
montar el webhook de validación en la raíz y la API REST bajo /api/v1.
main() la sirve con uvicorn.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..domain.registration import Clock, utc_now
from ..infrastructure.config import Config, get_config
from ..infrastructure.scheme import new_scheme
from ..shared.infrastructure_exceptions import ConfigurationError
from ..shared.logging_utils import get_logger, log_operation_error, setup_logging_config
from .health_routes import router as health_router
from .runner_routes import router as runner_router
from .webhook_routes import router as webhook_router

logger = get_logger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Registra el arranque y la detención del servicio."""
    logger.info(f"Iniciando servicio runnerspec | kinds={app.state.scheme.known_kinds()}")
    yield
    logger.info("Servicio detenido")


def create_app(config: Optional[Config] = None, clock: Clock = utc_now) -> FastAPI:
    """
    Crea y configura la aplicación FastAPI.

    Args:
        config: Configuración (opcional, se carga del entorno si falta)
        clock: Fuente del instante actual para la elegibilidad de registro

    Returns:
        Instancia de FastAPI configurada
    """
    try:
        config = config or get_config()
    except ConfigurationError:
        logger.error("Error creando aplicación: configuración inválida")
        raise

    setup_logging_config(config.api.log_level)

    app = FastAPI(
        title="Runner Spec Admission",
        description="Validación y derivaciones del recurso Runner",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )

    # Estado inmutable compartido por los requests
    app.state.config = config
    app.state.scheme = new_scheme()
    app.state.clock = clock

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    app.include_router(webhook_router)
    app.include_router(runner_router, prefix=API_PREFIX)
    app.include_router(health_router, prefix=API_PREFIX)

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        log_operation_error(logger, f"{request.method} {request.url.path}", exc)
        return JSONResponse(
            status_code=500,
            content={
                "allowed": False,
                "error": "InternalError",
                "message": "Error interno al procesar el recurso",
            }
        )

    return app


def main() -> None:
    """Inicia el servidor con uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        create_app(config),
        host=config.api.host,
        port=config.api.port,
        log_level=config.api.log_level.lower(),
    )


if __name__ == "__main__":
    main()
