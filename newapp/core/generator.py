"""Generation of the resources for deploying an image.

Produces the same set of resources as ``oc new-app <image>``:

- An image stream (unless an existing image stream tag is reused)
- A deployment config
- A service (if the image exposes ports)

Volumes declared by the image are backed by emptyDir volumes.
"""

from typing import Any, Dict, List, Tuple

from ..model.config import ContainerPort, ResourceConfig
from ..model.kubernetes import (
    GENERATED_BY_ANNOTATION,
    GENERATOR_NAME,
    IMPORTED_FROM_ANNOTATION,
    K8sResource,
    ResourceKind,
)
from ..utils.logger import get_logger
from .environment import make_env_array

logger = get_logger(__name__)

DEPLOYMENT_CONFIG_LABEL = "deploymentconfig"


def _annotations() -> Dict[str, str]:
    return {GENERATED_BY_ANNOTATION: GENERATOR_NAME}


def merge_labels(labels: Dict[str, str], reserved: Dict[str, str]) -> Dict[str, str]:
    """Merge labels so that reserved keys always win over caller labels."""
    merged = dict(labels)
    merged.update(reserved)
    return merged


def get_service_port(port: ContainerPort) -> Dict[str, Any]:
    """Map a container port to a service port."""
    return {
        "name": f"{port.container_port}-{port.protocol}".lower(),
        "protocol": port.protocol,
        "port": port.container_port,
        "targetPort": port.container_port,
    }


def _build_volumes(config: ResourceConfig) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """Create an emptyDir volume and a mount for each volume path."""
    volumes = []
    volume_mounts = []
    for number, path in enumerate(config.volumes, start=1):
        volume_name = f"{config.name}-{number}"
        volumes.append({"name": volume_name, "emptyDir": {}})
        volume_mounts.append({"name": volume_name, "mountPath": path})
    return volumes, volume_mounts


def _image_stream(config: ResourceConfig) -> K8sResource:
    tag_annotations = {IMPORTED_FROM_ANNOTATION: config.image}
    tag_annotations.update(_annotations())

    return K8sResource(
        kind=ResourceKind.IMAGE_STREAM.value,
        metadata={
            "name": config.name,
            "labels": dict(config.labels),
            "annotations": _annotations(),
        },
        spec={
            "tags": [
                {
                    "name": config.tag,
                    "annotations": tag_annotations,
                    "from": {"kind": "DockerImage", "name": config.image},
                    "importPolicy": {},
                }
            ]
        },
    )


def _image_change_source(config: ResourceConfig) -> Dict[str, Any]:
    """Reference the image stream tag that triggers redeployment.

    Our own image stream is named after the app; an existing one in
    another namespace is named after the image.
    """
    if config.namespace:
        return {
            "kind": "ImageStreamTag",
            "name": f"{config.image}:{config.tag}",
            "namespace": config.namespace,
        }
    return {"kind": "ImageStreamTag", "name": f"{config.name}:{config.tag}"}


def _deployment_config(
    config: ResourceConfig, volumes: List[Dict[str, Any]], volume_mounts: List[Dict[str, Any]]
) -> K8sResource:
    container = {
        "name": config.name,
        "image": config.image,
        "ports": [port.to_dict() for port in config.ports],
        "env": [var.model_dump() for var in make_env_array(config.env)],
        "volumeMounts": volume_mounts,
    }

    return K8sResource(
        kind=ResourceKind.DEPLOYMENT_CONFIG.value,
        metadata={
            "name": config.name,
            "labels": dict(config.labels),
            "annotations": _annotations(),
        },
        spec={
            "strategy": {"resources": {}},
            "triggers": [
                {"type": "ConfigChange"},
                {
                    "type": "ImageChange",
                    "imageChangeParams": {
                        "automatic": True,
                        "containerNames": [config.name],
                        "from": _image_change_source(config),
                    },
                },
            ],
            "replicas": 1,
            "test": False,
            "selector": merge_labels(config.labels, {DEPLOYMENT_CONFIG_LABEL: config.name}),
            "template": {
                "metadata": {
                    "labels": merge_labels(config.labels, {DEPLOYMENT_CONFIG_LABEL: config.name}),
                    "annotations": _annotations(),
                },
                "spec": {
                    "volumes": volumes,
                    "containers": [container],
                    "resources": {},
                },
            },
        },
        status={},
    )


def _service(config: ResourceConfig) -> K8sResource:
    return K8sResource(
        kind=ResourceKind.SERVICE.value,
        metadata={
            "name": config.name,
            "labels": dict(config.labels),
            "annotations": _annotations(),
        },
        spec={
            "selector": {DEPLOYMENT_CONFIG_LABEL: config.name},
            "ports": [get_service_port(port) for port in config.ports],
        },
    )


def get_resources(config: ResourceConfig) -> List[K8sResource]:
    """Generate the resources for deploying ``config.image``.

    Returns an image stream (only when ``config.namespace`` is unset), a
    deployment config, and a service (only when ``config.ports`` is not
    empty), in that order. Nothing is validated; the caller's config is
    never modified.
    """
    resources = []
    volumes, volume_mounts = _build_volumes(config)

    if not config.namespace:
        resources.append(_image_stream(config))

    resources.append(_deployment_config(config, volumes, volume_mounts))

    if config.ports:
        resources.append(_service(config))

    for resource in resources:
        logger.debug(f"Generated {resource.kind}/{resource.name}")
    logger.info(f"Generated {len(resources)} resources for {config.image}")

    return resources
