"""Assembly of a ResourceConfig from CLI options, a config file and image metadata."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from ..core import (
    get_environment,
    get_ports,
    get_volumes,
    make_env_array,
    parse_port,
    suggest_name,
)
from ..model.config import ContainerPort, EnvVar, ResourceConfig
from ..model.image import Image, ImageReference
from ..utils.logger import get_logger

logger = get_logger(__name__)


def parse_key_values(values: List[str], option: str) -> Dict[str, str]:
    """Parse KEY=VALUE arguments, keeping their order."""
    parsed = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got '{item}'", param_hint=option)
        parsed[key] = value
    return parsed


def parse_ports(values: List[str]) -> List[ContainerPort]:
    """Parse --port arguments."""
    ports = []
    for item in values:
        port = parse_port(item)
        if port is None:
            raise typer.BadParameter(f"Invalid port '{item}'", param_hint="--port")
        ports.append(port)
    return ports


def merge_env(base: List[EnvVar], overrides: List[EnvVar]) -> List[EnvVar]:
    """Override variables by name, appending new ones in order."""
    merged = list(base)
    for var in overrides:
        for index, existing in enumerate(merged):
            if existing.name == var.name:
                merged[index] = var
                break
        else:
            merged.append(var)
    return merged


def build_config(
    image: str,
    name: Optional[str] = None,
    tag: Optional[str] = None,
    from_namespace: Optional[str] = None,
    ports: Optional[List[str]] = None,
    volumes: Optional[List[str]] = None,
    env: Optional[List[str]] = None,
    labels: Optional[List[str]] = None,
    config_file: Optional[Path] = None,
    image_metadata: Optional[Image] = None,
) -> ResourceConfig:
    """Build the generation config.

    Command line values win over the config file, which wins over what the
    image metadata declares.
    """
    file_config = ResourceConfig.from_yaml(config_file) if config_file else ResourceConfig()
    from_file = file_config.model_fields_set
    reference = ImageReference.parse(image)

    namespace = from_namespace or file_config.namespace
    if namespace and reference.digest:
        raise typer.BadParameter(
            f"'{image}' is a digest; an existing image stream is referenced by tag",
            param_hint="--from-namespace",
        )

    # An existing image stream is referenced by name; the tag goes on the trigger
    data: Dict[str, Any] = {
        "image": reference.untagged if namespace else image,
        "name": name or (file_config.name if "name" in from_file else suggest_name(image)),
        "tag": tag or (file_config.tag if "tag" in from_file else reference.tag or "latest"),
        "namespace": namespace,
    }

    if ports:
        data["ports"] = parse_ports(ports)
    elif "ports" in from_file:
        data["ports"] = file_config.ports
    else:
        data["ports"] = get_ports(image_metadata)

    merged_volumes = dict(get_volumes(image_metadata) or {})
    merged_volumes.update(file_config.volumes)
    for path in volumes or []:
        merged_volumes[path] = {}
    data["volumes"] = merged_volumes

    merged_env = merge_env(get_environment(image_metadata), make_env_array(file_config.env))
    cli_env = parse_key_values(env or [], "--env")
    data["env"] = merge_env(merged_env, make_env_array(cli_env))

    merged_labels = dict(file_config.labels)
    merged_labels.update(parse_key_values(labels or [], "--label"))
    data["labels"] = merged_labels or {"app": data["name"]}

    config = ResourceConfig.model_validate(data)
    logger.debug(f"Resolved config for {config.image}: name={config.name} tag={config.tag}")
    return config
