"""Kubernetes resource models."""

from enum import Enum
from typing import Dict, Any, Optional
from pydantic import BaseModel

GENERATED_BY_ANNOTATION = "openshift.io/generated-by"
IMPORTED_FROM_ANNOTATION = "openshift.io/imported-from"
GENERATOR_NAME = "newapp"


class ResourceKind(str, Enum):
    """Kinds of resources produced by the generator."""

    IMAGE_STREAM = "ImageStream"
    DEPLOYMENT_CONFIG = "DeploymentConfig"
    SERVICE = "Service"


class K8sResource(BaseModel):
    """Kubernetes resource."""

    api_version: str = "v1"
    kind: str
    metadata: Dict[str, Any]
    spec: Dict[str, Any] = {}
    status: Optional[Dict[str, Any]] = None

    @property
    def name(self) -> str:
        """Get resource name."""
        return self.metadata.get("name", "")

    @property
    def labels(self) -> Dict[str, str]:
        """Get resource labels."""
        return self.metadata.get("labels") or {}

    @property
    def annotations(self) -> Dict[str, str]:
        """Get resource annotations."""
        return self.metadata.get("annotations") or {}

    @property
    def generated(self) -> bool:
        """Check if resource was produced by this tool."""
        return self.annotations.get(GENERATED_BY_ANNOTATION) == GENERATOR_NAME

    def to_dict(self) -> Dict[str, Any]:
        """Return the resource in its wire form."""
        data = {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": self.metadata,
            "spec": self.spec,
        }
        if self.status is not None:
            data["status"] = self.status
        return data
