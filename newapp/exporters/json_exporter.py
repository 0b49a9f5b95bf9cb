"""JSON exporter."""

import json
from typing import List

from ..model.kubernetes import K8sResource
from .base import Exporter


class JsonExporter(Exporter):
    """Export resources as a JSON List."""

    def render(self, resources: List[K8sResource]) -> str:
        """Render resources as a v1 List."""
        document = {
            "kind": "List",
            "apiVersion": "v1",
            "items": [r.to_dict() for r in resources],
        }
        return json.dumps(document, indent=2) + "\n"
