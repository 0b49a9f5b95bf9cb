"""Test configuration and fixtures."""

import pytest
from typing import Dict, Any

from newapp.model.config import ContainerPort, ResourceConfig
from newapp.model.image import Image


@pytest.fixture
def sample_image_data() -> Dict[str, Any]:
    """Raw image object as returned by an image stream import."""
    return {
        "metadata": {"name": "sha256:4a1c"},
        "dockerImageReference": "docker.io/library/mysql@sha256:4a1c",
        "dockerImageMetadata": {
            "Config": {
                "User": "mysql",
                "ExposedPorts": {"3306/tcp": {}, "33060/tcp": {}},
                "Env": [
                    "PATH=/usr/local/sbin:/usr/local/bin:/usr/sbin:/usr/bin",
                    "MYSQL_MAJOR=8.0",
                    "MYSQL_ROOT_PASSWORD=",
                ],
                "Volumes": {"/var/lib/mysql": {}},
            }
        },
    }


@pytest.fixture
def sample_image(sample_image_data) -> Image:
    """Parsed image with user, ports, env and volumes."""
    return Image.from_dict(sample_image_data)


@pytest.fixture
def sample_import_response(sample_image_data) -> Dict[str, Any]:
    """ImageStreamImport response for a successful import."""
    return {
        "kind": "ImageStreamImport",
        "apiVersion": "image.openshift.io/v1",
        "metadata": {"name": "newapp", "namespace": "demo"},
        "spec": {
            "import": False,
            "images": [{"from": {"kind": "DockerImage", "name": "mysql:8.0"}}],
        },
        "status": {
            "images": [
                {
                    "tag": "8.0",
                    "image": sample_image_data,
                    "status": {"status": "Success", "metadata": {}},
                }
            ]
        },
    }


@pytest.fixture
def basic_config() -> ResourceConfig:
    """Config for an app that creates its own image stream."""
    return ResourceConfig(
        name="app",
        image="mysql",
        tag="latest",
        ports=[ContainerPort(container_port=3306, protocol="TCP")],
        volumes={"/data": {}, "/logs": {}},
        env={"A": "1", "B": "2"},
        labels={"app": "app", "team": "db"},
    )
