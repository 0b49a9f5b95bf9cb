"""Core business logic."""

from .environment import make_env_array
from .generator import get_resources, get_service_port, merge_labels
from .images import (
    get_environment,
    get_ports,
    get_volumes,
    parse_env_entry,
    parse_port,
    runs_as_root,
    suggest_name,
)

__all__ = [
    "make_env_array",
    "get_resources",
    "get_service_port",
    "merge_labels",
    "get_environment",
    "get_ports",
    "get_volumes",
    "parse_env_entry",
    "parse_port",
    "runs_as_root",
    "suggest_name",
]
