"""
Caso de uso para verificar el registro existente de un Runner.

Rol: Responder si el reconciliador puede tratar al runner como ya registrado.
Registra la decisión sin exponer el token.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.entities import Runner
from ..domain.registration import Clock, registration_ineligibility_reason, utc_now
from ..shared.logging_utils import format_domain_log, mask_sensitive_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationCheck:
    registerable: bool
    reason: Optional[str] = None


class CheckRegistration:
    """Caso de uso para la elegibilidad de registro."""

    def __init__(self, clock: Clock = utc_now):
        self.clock = clock

    def execute(self, runner: Runner) -> RegistrationCheck:
        """
        Evalúa el registro del runner con un único instante de referencia.

        Args:
            runner: Runner con spec y status

        Returns:
            RegistrationCheck con la decisión y la razón si no es registrable
        """
        reason = registration_ineligibility_reason(runner, now=self.clock())

        token = mask_sensitive_data(runner.status.registration.token)
        logger.info(format_domain_log(
            "check_registration",
            runner.key,
            f"registerable={reason is None} | token={token} | reason={reason}",
        ))

        return RegistrationCheck(registerable=reason is None, reason=reason)
