"""
Elegibilidad de registro de un Runner existente.

Rol: Decidir si el registro observado en el status sigue siendo utilizable.
Solo lee el status; el instante actual se obtiene una única vez por llamada.

Depende de: entities, reloj inyectable.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from ..shared.constants import REGISTRATION_REASONS
from .entities import Runner

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def registration_ineligibility_reason(
    runner: Runner,
    now: Optional[datetime] = None,
    clock: Clock = utc_now,
) -> Optional[str]:
    """
    Primera razón por la que el runner no se considera registrado.

    Solo se compara el repositorio; enterprise y organization no se revisan.

    Args:
        runner: Runner a evaluar
        now: Instante de referencia (opcional, se toma de clock si falta)
        clock: Fuente del instante actual

    Returns:
        Mensaje de la razón, o None si el registro es utilizable
    """
    registration = runner.status.registration

    if registration.repository != runner.spec.repository:
        return REGISTRATION_REASONS["repository_mismatch"]

    if registration.token == "":
        return REGISTRATION_REASONS["missing_token"]

    if now is None:
        now = clock()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    # expiresAt no definido equivale al instante cero
    if registration.expires_at is None or registration.expires_at <= now:
        return REGISTRATION_REASONS["expired_token"]

    return None


def is_registerable(runner: Runner, now: Optional[datetime] = None, clock: Clock = utc_now) -> bool:
    """True si el runner puede tratarse como ya registrado."""
    return registration_ineligibility_reason(runner, now=now, clock=clock) is None
