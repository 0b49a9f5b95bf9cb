"""Data models for newapp."""

from .config import ContainerPort, EnvVar, ResourceConfig
from .export import ExportFormat
from .image import DockerConfig, DockerImageMetadata, Image, ImageImportResult, ImageReference
from .kubernetes import K8sResource, ResourceKind

__all__ = [
    "ContainerPort",
    "EnvVar",
    "ResourceConfig",
    "ExportFormat",
    "DockerConfig",
    "DockerImageMetadata",
    "Image",
    "ImageImportResult",
    "ImageReference",
    "K8sResource",
    "ResourceKind",
]
