"""Interpretation of image metadata returned by an image import."""

import re
from typing import Any, Dict, List, Optional

from ..model.config import ContainerPort, EnvVar
from ..model.image import Image, ImageReference
from ..utils.logger import get_logger

logger = get_logger(__name__)

ROOT_USERS = {"0", "root"}
MAX_NAME_LENGTH = 24

_INVALID_NAME_CHARS = re.compile(r"[^a-z0-9-]+")


def runs_as_root(image: Optional[Image]) -> bool:
    """Check if the image runs as root.

    An image with no user recorded runs as root.
    """
    config = image.docker_config if image is not None else None
    user = config.user if config is not None else None
    return not user or user in ROOT_USERS


def get_volumes(image: Optional[Image]) -> Optional[Dict[str, Any]]:
    """Get the volumes declared by the image, keyed by mount path."""
    config = image.docker_config if image is not None else None
    if config is None:
        return None
    return config.volumes


def parse_env_entry(entry: str) -> EnvVar:
    """Split a ``KEY=VALUE`` string on its first ``=``.

    Entries without ``=`` (or starting with it) become a name with an
    empty value.
    """
    index = entry.find("=")
    if index > 0:
        return EnvVar(name=entry[:index], value=entry[index + 1 :])
    return EnvVar(name=entry, value="")


def get_environment(image: Optional[Image]) -> List[EnvVar]:
    """Get the environment variables declared by the image, in order."""
    config = image.docker_config if image is not None else None
    if config is None or not config.env:
        return []
    return [parse_env_entry(entry) for entry in config.env]


def parse_port(spec: str) -> Optional[ContainerPort]:
    """Parse a port given as "<port>" or "<port>/<protocol>".

    Returns None when the port is not a number. The protocol defaults to TCP.
    """
    number, _, protocol = spec.partition("/")
    try:
        container_port = int(number)
    except ValueError:
        return None
    return ContainerPort(container_port=container_port, protocol=(protocol or "tcp").upper())


def get_ports(image: Optional[Image]) -> List[ContainerPort]:
    """Get the ports exposed by the image, sorted by port number."""
    config = image.docker_config if image is not None else None
    if config is None or not config.exposed_ports:
        return []

    ports = []
    for key in config.exposed_ports:
        port = parse_port(key)
        if port is None:
            logger.warning(f"Ignoring invalid exposed port: {key}")
            continue
        ports.append(port)

    return sorted(ports, key=lambda p: (p.container_port, p.protocol))


def suggest_name(reference: str) -> str:
    """Derive a default application name from an image reference."""
    image_name = ImageReference.parse(reference).image_name.lower()
    name = _INVALID_NAME_CHARS.sub("-", image_name).strip("-")
    return name[:MAX_NAME_LENGTH].rstrip("-")
