"""Resource exporters."""

from typing import Dict, Callable

from ..model.export import ExportFormat
from .base import Exporter
from .yaml_exporter import YamlExporter
from .json_exporter import JsonExporter

# Dictionary mapping export formats to exporter classes
EXPORTERS: Dict[ExportFormat, Callable[[], Exporter]] = {
    ExportFormat.YAML: YamlExporter,
    ExportFormat.JSON: JsonExporter,
}


def get_exporter(export_format: ExportFormat) -> Exporter:
    """Get the exporter for a format."""
    return EXPORTERS.get(export_format, YamlExporter)()


__all__ = ["Exporter", "YamlExporter", "JsonExporter", "EXPORTERS", "get_exporter"]
