"""
Helpers de logging para el servicio de Runners.

Rol: Configurar el logging raíz una sola vez y dar formato uniforme a los
mensajes de operación (INICIO / ÉXITO / ERROR) y de recursos Runner.
Los tokens de registro nunca se registran en claro (mask_sensitive_data).

Depende de: logging de la librería estándar.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Librerías cuyo nivel se eleva para no saturar la salida
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.ERROR,
    "httpx": logging.WARNING,
}


def setup_logging_config(level: str = "INFO") -> None:
    """
    Configura el logging raíz hacia stdout.

    Args:
        level: Nombre del nivel (DEBUG, INFO, ...). Valores desconocidos usan INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def format_domain_log(operation: str, entity_id: str, message: str) -> str:
    """Mensaje para un recurso concreto: 'operación | namespace/name | mensaje'."""
    return f"{operation} | {entity_id or '<sin nombre>'} | {message}"


def mask_sensitive_data(data: str, mask_char: str = "*", visible_chars: int = 4) -> str:
    """
    Oculta un secreto dejando visibles sus primeros caracteres.

    Un valor vacío o demasiado corto se reemplaza por ocho caracteres de
    máscara, para no revelar su longitud.
    """
    if not data or len(data) <= visible_chars:
        return mask_char * 8

    hidden = len(data) - visible_chars
    return f"{data[:visible_chars]}{mask_char * hidden}"


def _format_context(context) -> str:
    return " | ".join(f"{key}={value}" for key, value in context.items())


def log_operation_start(logger: logging.Logger, operation: str, **context) -> None:
    logger.info(f"INICIO | {operation} | {_format_context(context)}")


def log_operation_success(logger: logging.Logger, operation: str, **context) -> None:
    logger.info(f"ÉXITO | {operation} | {_format_context(context)}")


def log_operation_error(logger: logging.Logger, operation: str, error: Exception, **context) -> None:
    """
    Registra el fallo de una operación.

    El mensaje incluye el tipo de la excepción, su texto y el contexto
    recibido como pares clave=valor.
    """
    logger.error(f"ERROR | {operation} | {type(error).__name__}: {error} | {_format_context(context)}")
