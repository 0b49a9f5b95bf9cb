"""YAML exporter."""

import yaml
from typing import List

from ..model.kubernetes import K8sResource
from .base import Exporter


class YamlExporter(Exporter):
    """Export resources as a multi-document YAML stream."""

    def render(self, resources: List[K8sResource]) -> str:
        """Render resources as YAML documents separated by ---."""
        return yaml.dump_all(
            [r.to_dict() for r in resources],
            default_flow_style=False,
            sort_keys=False,
        )
