"""Base exporter class."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from ..model.kubernetes import K8sResource
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Exporter(ABC):
    """Base class for resource exporters."""

    @abstractmethod
    def render(self, resources: List[K8sResource]) -> str:
        """Render resources as text."""
        pass

    def export(self, resources: List[K8sResource], path: Path):
        """Write rendered resources to a file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            f.write(self.render(resources))

        logger.info(f"Exported {len(resources)} resource(s) to {path}")
