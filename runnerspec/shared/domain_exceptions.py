"""
Excepciones específicas del dominio de negocio.

Rol: Definir excepciones para errores de lógica de negocio.
ValidationError, ScopeError, InvalidWorkVolumeClaimTemplate.
Excepciones que representan violaciones de reglas del recurso Runner.

Depende de: excepciones base de Python.
"""


# Excepciones base del dominio
class DomainError(Exception):
    """Error base del dominio de negocio."""
    pass


class ValidationError(DomainError):
    """Recurso inválido; agrega todos los errores de campo encontrados."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])


class ScopeError(DomainError):
    """El spec no define exactamente un scope (enterprise, organization, repository)."""
    pass


class InvalidWorkVolumeClaimTemplate(DomainError):
    """Template de volumen de trabajo inválido."""
    pass


class UnknownKindError(DomainError):
    """apiVersion/kind no registrado en el esquema."""
    pass
