"""Test resource exporters."""

import json

import yaml

from newapp.core.generator import get_resources
from newapp.exporters import JsonExporter, YamlExporter, get_exporter
from newapp.model.export import ExportFormat


class TestExporters:
    def test_get_exporter(self):
        """Test selecting exporters by format."""
        assert isinstance(get_exporter(ExportFormat.YAML), YamlExporter)
        assert isinstance(get_exporter(ExportFormat.JSON), JsonExporter)

    def test_yaml_render(self, basic_config):
        """Test rendering a multi-document YAML stream."""
        rendered = YamlExporter().render(get_resources(basic_config))
        documents = list(yaml.safe_load_all(rendered))

        assert [d["kind"] for d in documents] == ["ImageStream", "DeploymentConfig", "Service"]
        assert rendered.startswith("apiVersion: v1\nkind: ImageStream\n")
        assert documents[1]["status"] == {}
        assert "&id" not in rendered

    def test_json_render(self, basic_config):
        """Test rendering a JSON List."""
        document = json.loads(JsonExporter().render(get_resources(basic_config)))

        assert document["kind"] == "List"
        assert [item["metadata"]["name"] for item in document["items"]] == ["app"] * 3

    def test_export_to_file(self, tmp_path, basic_config):
        """Test writing rendered resources to a file."""
        path = tmp_path / "out" / "app.yaml"
        YamlExporter().export(get_resources(basic_config), path)

        assert path.exists()
        assert len(list(yaml.safe_load_all(path.read_text()))) == 3

    def test_export_matches_wire_form(self, basic_config):
        """Test that exported documents are exactly what gets created."""
        resources = get_resources(basic_config)
        document = json.loads(JsonExporter().render(resources))

        assert document["items"] == [r.to_dict() for r in resources]
        assert list(yaml.safe_load_all(YamlExporter().render(resources))) == document["items"]
