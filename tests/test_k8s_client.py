"""Test Kubernetes client functionality."""

import json

import pytest
from unittest.mock import patch, MagicMock
from newapp.k8s.client import K8sClient
from newapp.model.kubernetes import K8sResource


class TestK8sClient:
    @patch("subprocess.run")
    def test_kubectl_verification_success(self, mock_run):
        """Test successful kubectl verification."""
        mock_run.return_value = MagicMock(
            stdout='{"clientVersion": {"major": "1", "minor": "28"}}', stderr="", returncode=0
        )

        # Should not raise an exception
        client = K8sClient()
        assert client is not None

    @patch("subprocess.run")
    def test_kubectl_verification_failure(self, mock_run):
        """Test kubectl verification failure."""
        mock_run.side_effect = FileNotFoundError()

        with pytest.raises(RuntimeError, match="kubectl command not found"):
            K8sClient()

    @patch("subprocess.run")
    def test_build_command_with_context_and_namespace(self, mock_run):
        """Test building command with context and namespace."""
        mock_run.return_value = MagicMock(stdout="{}", stderr="", returncode=0)
        client = K8sClient(context="test-context", namespace="demo")
        cmd = client._build_command(["create", "-f", "-"])
        assert cmd == ["kubectl", "--context", "test-context", "create", "-f", "-", "-n", "demo"]

    @patch("subprocess.run")
    def test_execute_passes_stdin(self, mock_run):
        """Test that input is passed to kubectl."""
        mock_run.return_value = MagicMock(stdout="ok", stderr="", returncode=0)

        client = K8sClient()
        success, output = client.execute(["create", "-f", "-"], stdin="{}")

        assert success is True
        assert output == "ok"
        assert mock_run.call_args.kwargs["input"] == "{}"

    @patch("subprocess.run")
    def test_execute_failure(self, mock_run):
        """Test failed command execution."""
        from subprocess import CalledProcessError

        mock_run.side_effect = CalledProcessError(1, "kubectl", stderr="Error message")

        client = K8sClient()
        success, output = client.execute(["get", "pods"])

        assert success is False
        assert "Error message" in output


class TestFindImage:
    @patch("subprocess.run")
    def test_find_image(self, mock_run, sample_import_response):
        """Test importing image metadata."""
        mock_run.return_value = MagicMock(
            stdout=json.dumps(sample_import_response), stderr="", returncode=0
        )

        client = K8sClient(namespace="demo")
        result = client.find_image("mysql:8.0")

        assert result.name == "mysql:8.0"
        assert result.tag == "8.0"
        assert result.succeeded is True
        assert result.image.docker_config.user == "mysql"

        sent = json.loads(mock_run.call_args.kwargs["input"])
        assert sent["kind"] == "ImageStreamImport"
        assert sent["metadata"] == {"name": "newapp", "namespace": "demo"}
        assert sent["spec"]["import"] is False
        assert sent["spec"]["images"][0]["from"] == {"kind": "DockerImage", "name": "mysql:8.0"}

    @patch("subprocess.run")
    def test_find_image_not_found(self, mock_run):
        """Test an import that reports a failure status."""
        response = {
            "spec": {"images": [{"from": {"kind": "DockerImage", "name": "nope"}}]},
            "status": {"images": [{"status": {"status": "Failure", "message": "not found"}}]},
        }
        mock_run.return_value = MagicMock(stdout=json.dumps(response), stderr="", returncode=0)

        result = K8sClient().find_image("nope")

        assert result.succeeded is False
        assert result.image is None
        assert result.message == "not found"

    @patch("subprocess.run")
    def test_find_image_command_failure(self, mock_run):
        """Test that a failed kubectl call raises."""
        from subprocess import CalledProcessError

        mock_run.side_effect = [
            MagicMock(stdout="{}", stderr="", returncode=0),
            CalledProcessError(1, "kubectl", stderr="forbidden"),
        ]

        client = K8sClient()
        with pytest.raises(RuntimeError, match="forbidden"):
            client.find_image("mysql")

    @patch("subprocess.run")
    def test_find_image_bad_json(self, mock_run):
        """Test that an unparseable response raises."""
        mock_run.return_value = MagicMock(stdout="not json", stderr="", returncode=0)

        with pytest.raises(RuntimeError, match="Failed to parse"):
            K8sClient().find_image("mysql")


class TestCreateList:
    @patch("subprocess.run")
    def test_create_list(self, mock_run):
        """Test creating resources as a single List."""
        mock_run.return_value = MagicMock(stdout="{}", stderr="", returncode=0)
        resources = [
            K8sResource(kind="ImageStream", metadata={"name": "web"}),
            K8sResource(kind="DeploymentConfig", metadata={"name": "web"}, status={}),
        ]

        success, _ = K8sClient().create_list(resources)

        assert success is True
        sent = json.loads(mock_run.call_args.kwargs["input"])
        assert sent["kind"] == "List"
        assert [item["kind"] for item in sent["items"]] == ["ImageStream", "DeploymentConfig"]
        assert mock_run.call_args.args[0] == ["kubectl", "create", "-f", "-", "-o", "json"]
