"""
Registro explícito de tipos de recurso conocidos.

Rol: Mapear (apiVersion, kind) a su modelo y convertir documentos en objetos.
Cada Scheme se construye explícitamente (new_scheme) y se pasa a quien
serializa; importar el paquete no registra nada.

Depende de: pydantic para decodificar, entidades del dominio.
"""

import logging
from typing import Any, Dict, List, Mapping, Tuple, Type

from pydantic import ValidationError as PydanticValidationError

from ..domain.base import ResourceModel
from ..domain.entities import Runner, RunnerList
from ..shared.constants import API_VERSION, RUNNER_KIND, RUNNER_LIST_KIND
from ..shared.domain_exceptions import UnknownKindError
from ..shared.infrastructure_exceptions import DecodeError

logger = logging.getLogger(__name__)


class Scheme:
    """Registro de kinds para un apiVersion."""

    def __init__(self, api_version: str = API_VERSION):
        self.api_version = api_version
        self._kinds: Dict[str, Type[ResourceModel]] = {}

    def register(self, kind: str, model_cls: Type[ResourceModel]) -> None:
        """
        Registra un kind.

        Raises:
            ValueError: Si el kind ya estaba registrado con otro modelo
        """
        existing = self._kinds.get(kind)
        if existing is not None and existing is not model_cls:
            raise ValueError(f"kind {kind} ya registrado con {existing.__name__}")

        self._kinds[kind] = model_cls
        logger.debug(f"Kind registrado: {self.api_version}/{kind}")

    def known_kinds(self) -> List[Tuple[str, str]]:
        return [(self.api_version, kind) for kind in sorted(self._kinds)]

    def recognizes(self, api_version: str, kind: str) -> bool:
        return api_version == self.api_version and kind in self._kinds

    def decode(self, document: Mapping[str, Any]) -> ResourceModel:
        """
        Convierte un documento en el modelo registrado para su kind.

        Args:
            document: Documento con apiVersion y kind

        Returns:
            Instancia del modelo

        Raises:
            UnknownKindError: Si apiVersion/kind no está registrado
            DecodeError: Si el documento no cumple el esquema del modelo
        """
        api_version = document.get("apiVersion", "")
        kind = document.get("kind", "")

        if not self.recognizes(api_version, kind):
            raise UnknownKindError(f"no kind {kind!r} is registered for version {api_version!r}")

        try:
            return self._kinds[kind].model_validate(dict(document))
        except PydanticValidationError as e:
            raise DecodeError(f"{kind}: {e}") from e

    def encode(self, obj: ResourceModel) -> Dict[str, Any]:
        """Serializa un objeto registrado, fijando apiVersion y kind."""
        for kind, model_cls in self._kinds.items():
            if type(obj) is model_cls:
                document = obj.to_document()
                document["apiVersion"] = self.api_version
                document["kind"] = kind
                return document

        raise UnknownKindError(f"type {type(obj).__name__} is not registered")


def new_scheme() -> Scheme:
    """Crea un Scheme con Runner y RunnerList registrados."""
    scheme = Scheme(API_VERSION)
    scheme.register(RUNNER_KIND, Runner)
    scheme.register(RUNNER_LIST_KIND, RunnerList)
    return scheme
