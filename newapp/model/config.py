"""Resource generation input models."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator


class EnvVar(BaseModel):
    """A single container environment variable."""

    name: str
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _stringify_value(cls, value: Any) -> Any:
        return "" if value is None else str(value)


class ContainerPort(BaseModel):
    """A port exposed by a container."""

    container_port: int = Field(alias="containerPort")
    protocol: str = "TCP"

    class Config:
        populate_by_name = True

    def to_dict(self) -> Dict[str, Any]:
        """Return the port in its wire form."""
        return self.model_dump(by_alias=True)


class ResourceConfig(BaseModel):
    """Parameters for generating the resources of one application.

    ``env`` may be given either as a list of name/value pairs or as a
    mapping of name to value. ``volumes`` maps container mount paths to
    image metadata; only the paths are used.
    """

    name: str = ""
    image: str = ""
    tag: str = "latest"
    namespace: Optional[str] = None
    ports: List[ContainerPort] = []
    volumes: Dict[str, Any] = {}
    env: Union[List[EnvVar], Dict[str, str]] = []
    labels: Dict[str, str] = {}

    class Config:
        frozen = True

    @field_validator("env", "labels", mode="before")
    @classmethod
    def _stringify_mapping_values(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): "" if v is None else str(v) for k, v in value.items()}
        return value

    @field_validator("volumes", "labels", "ports", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any, info) -> Any:
        if value is None:
            return [] if info.field_name == "ports" else {}
        return value

    @classmethod
    def from_yaml(cls, path: Path) -> "ResourceConfig":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")

        return cls.model_validate(data)
