"""
Caso de uso para admisión de recursos Runner.

Rol: Decidir si un Runner enviado (CREATE/UPDATE) puede admitirse.
Decodifica el documento, ejecuta el validador y arma la decisión.
Es el punto de entrada para el webhook de validación.

Depende de: Scheme, validación del dominio.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..domain.entities import Runner
from ..domain.field_errors import ErrorList, FieldError
from ..domain.validation import validate_runner
from ..infrastructure.scheme import Scheme
from ..shared.constants import RUNNER_KIND
from ..shared.domain_exceptions import UnknownKindError
from ..shared.logging_utils import log_operation_error, log_operation_start, log_operation_success

logger = logging.getLogger(__name__)

OPERATION_CREATE = "CREATE"
OPERATION_UPDATE = "UPDATE"
OPERATION_DELETE = "DELETE"


@dataclass
class AdmissionDecision:
    """Resultado de la admisión de un Runner."""

    allowed: bool
    message: str = ""
    errors: List[FieldError] = field(default_factory=list)


class AdmitRunner:
    """Caso de uso para validar Runners en el borde de admisión."""

    def __init__(self, scheme: Scheme):
        """
        Inicializa caso de uso.

        Args:
            scheme: Registro de tipos usado para decodificar documentos
        """
        self.scheme = scheme

    def decode_runner(self, document: Mapping[str, Any]) -> Runner:
        """
        Decodifica un documento que debe ser un Runner.

        Raises:
            UnknownKindError: Si el documento no es un Runner (kind no registrado u otro kind)
            DecodeError: Si el documento no cumple el esquema
        """
        obj = self.scheme.decode(document)
        if not isinstance(obj, Runner):
            raise UnknownKindError(f"expected kind {RUNNER_KIND}, got {type(obj).__name__}")
        return obj

    def validate(self, runner: Runner) -> ErrorList:
        """Ejecuta el validador sobre el spec del runner."""
        return validate_runner(runner)

    def execute(self, operation: str, document: Optional[Dict[str, Any]]) -> AdmissionDecision:
        """
        Ejecuta la admisión de un Runner.

        Args:
            operation: CREATE, UPDATE o DELETE
            document: Documento del Runner (None en DELETE)

        Returns:
            Decisión de admisión con todos los errores encontrados

        Raises:
            UnknownKindError, DecodeError: Si el documento no es decodificable
        """
        op = "admit_runner"
        log_operation_start(logger, op, operation_type=operation)

        if operation == OPERATION_DELETE:
            log_operation_success(logger, op, operation_type=operation, allowed=True)
            return AdmissionDecision(allowed=True)

        try:
            runner = self.decode_runner(document or {})
        except Exception as e:
            log_operation_error(logger, op, e, operation_type=operation)
            raise

        errors = self.validate(runner)
        aggregate = errors.to_aggregate(RUNNER_KIND, runner.metadata.name)

        if aggregate is not None:
            logger.warning(f"Runner rechazado | {runner.key} | {aggregate}")
            log_operation_success(logger, op, operation_type=operation, runner=runner.key, allowed=False)
            return AdmissionDecision(allowed=False, message=str(aggregate), errors=list(errors))

        log_operation_success(logger, op, operation_type=operation, runner=runner.key, allowed=True)
        return AdmissionDecision(allowed=True)
