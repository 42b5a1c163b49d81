"""
Descriptores de volumen consumidos por el aprovisionador de pods.

Rol: Modelar el subconjunto de Volume/VolumeMount de Kubernetes que produce
la derivación del volumen de trabajo (volumen efímero respaldado por un claim).
"""

from typing import List, Optional

from pydantic import Field

from .base import ResourceModel, ResourceRequirements


class PersistentVolumeClaimSpec(ResourceModel):
    access_modes: List[str] = Field(default_factory=list)
    storage_class_name: Optional[str] = None
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)


class PersistentVolumeClaimTemplate(ResourceModel):
    spec: PersistentVolumeClaimSpec


class EphemeralVolumeSource(ResourceModel):
    volume_claim_template: PersistentVolumeClaimTemplate


class Volume(ResourceModel):
    """Volumen de pod; solo la fuente efímera es relevante aquí."""

    name: str
    ephemeral: Optional[EphemeralVolumeSource] = None


class VolumeMount(ResourceModel):
    """Montaje de un volumen en un contenedor."""

    name: str
    mount_path: str
