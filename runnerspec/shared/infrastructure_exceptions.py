"""
Excepciones específicas de infraestructura técnica.

Rol: Definir excepciones para errores técnicos externos.
ConfigurationError, DecodeError.
Mapear errores conocidos a códigos HTTP para la API.

Depende de: excepciones base de Python, FastAPI.
"""

import logging

from fastapi import HTTPException

from .domain_exceptions import (
    InvalidWorkVolumeClaimTemplate,
    ScopeError,
    UnknownKindError,
    ValidationError,
)

logger = logging.getLogger(__name__)


# Excepciones base de infraestructura
class InfrastructureError(Exception):
    """Error base de infraestructura técnica."""
    pass


class ConfigurationError(InfrastructureError):
    """Error de configuración del sistema."""
    pass


class DecodeError(InfrastructureError):
    """Documento que no puede convertirse al modelo registrado."""
    pass


class ErrorHandler:
    """Manejador centralizado de errores técnicos."""

    @staticmethod
    def handle_error(error: Exception, operation: str) -> HTTPException:
        """
        Maneja errores de forma centralizada.

        Args:
            error: Excepción ocurrida
            operation: Operación donde ocurrió el error

        Returns:
            HTTPException con el código correspondiente
        """
        error_type = type(error).__name__
        error_message = str(error)

        # Mapear errores conocidos
        if isinstance(error, (DecodeError, UnknownKindError)):
            status_code = 400
            detail = f"Documento inválido en {operation}: {error_message}"
        elif isinstance(error, (ValidationError, InvalidWorkVolumeClaimTemplate, ScopeError)):
            status_code = 422
            detail = error_message
        elif isinstance(error, ConfigurationError):
            status_code = 500
            detail = f"Error de configuración en {operation}: {error_message}"
        else:
            status_code = 500
            detail = f"Error inesperado en {operation}: {error_message}"

        logger.error(f"{operation} - {error_type}: {error_message}")

        return HTTPException(status_code=status_code, detail=detail)

