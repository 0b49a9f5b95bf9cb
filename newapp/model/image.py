"""Image metadata models."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class DockerConfig(BaseModel):
    """Runtime configuration recorded in the image."""

    user: Optional[str] = Field(None, alias="User")
    volumes: Optional[Dict[str, Any]] = Field(None, alias="Volumes")
    env: Optional[List[str]] = Field(None, alias="Env")
    exposed_ports: Optional[Dict[str, Any]] = Field(None, alias="ExposedPorts")

    class Config:
        populate_by_name = True


class DockerImageMetadata(BaseModel):
    """Docker image metadata as reported by the image API."""

    config: Optional[DockerConfig] = Field(None, alias="Config")

    class Config:
        populate_by_name = True


class Image(BaseModel):
    """Image object returned by an image stream import."""

    docker_image_reference: Optional[str] = Field(None, alias="dockerImageReference")
    docker_image_metadata: Optional[DockerImageMetadata] = Field(
        None, alias="dockerImageMetadata"
    )

    class Config:
        populate_by_name = True

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Image":
        """Build an image from the raw API structure."""
        return cls.model_validate(data or {})

    @property
    def docker_config(self) -> Optional[DockerConfig]:
        """Get the image config, or None when any level is missing."""
        if self.docker_image_metadata is None:
            return None
        return self.docker_image_metadata.config


class ImageImportResult(BaseModel):
    """Outcome of importing image metadata from a registry."""

    name: Optional[str] = None
    image: Optional[Image] = None
    tag: Optional[str] = None
    # Called "result" to avoid "status.status"
    result: Optional[Dict[str, Any]] = None

    @property
    def status(self) -> str:
        """Get the import status, e.g. Success or Failure."""
        return (self.result or {}).get("status", "Unknown")

    @property
    def message(self) -> str:
        """Get the import status message."""
        return (self.result or {}).get("message", "")

    @property
    def succeeded(self) -> bool:
        """Check if the import found the image."""
        return self.status == "Success" and self.image is not None


@dataclass
class ImageReference:
    """
    Parsed image reference.

    Examples:
        - mysql -> docker.io/library/mysql:latest
        - centos/mysql-57-centos7:5.7 -> docker.io/centos/mysql-57-centos7:5.7
        - quay.io/org/app@sha256:abc -> quay.io/org/app@sha256:abc
    """

    registry: str
    repository: str
    tag: Optional[str] = None
    digest: Optional[str] = None

    DEFAULT_REGISTRY = "docker.io"
    DEFAULT_TAG = "latest"

    @classmethod
    def parse(cls, reference: str) -> "ImageReference":
        """Parse an image reference string."""
        reference = (reference or "").strip()
        if not reference:
            raise ValueError("Empty image reference")

        digest = None
        if "@" in reference:
            reference, digest = reference.rsplit("@", 1)

        tag = None
        last_colon = reference.rfind(":")
        if last_colon != -1:
            after_colon = reference[last_colon + 1 :]
            # A colon followed by a path is a registry port, not a tag
            if "/" not in after_colon:
                tag = after_colon
                reference = reference[:last_colon]

        parts = reference.split("/")
        first = parts[0]
        if len(parts) > 1 and ("." in first or ":" in first or first == "localhost"):
            registry = first
            repository = "/".join(parts[1:])
        elif len(parts) == 1:
            registry = cls.DEFAULT_REGISTRY
            repository = f"library/{first}"
        else:
            registry = cls.DEFAULT_REGISTRY
            repository = reference

        if not tag and not digest:
            tag = cls.DEFAULT_TAG

        return cls(registry=registry, repository=repository, tag=tag, digest=digest)

    @property
    def image_name(self) -> str:
        """Get the last path segment of the repository."""
        return self.repository.rsplit("/", 1)[-1]

    @property
    def untagged(self) -> str:
        """Get the reference without tag or digest, as given by the user."""
        if self.registry == self.DEFAULT_REGISTRY:
            repo = self.repository
            if repo.startswith("library/"):
                repo = repo[len("library/") :]
            return repo
        return f"{self.registry}/{self.repository}"
