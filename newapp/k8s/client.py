"""Kubernetes client wrapper."""

import subprocess
import json
from typing import Any, Dict, List, Tuple, Optional

from ..model.image import Image, ImageImportResult
from ..model.kubernetes import K8sResource
from ..utils.logger import get_logger

logger = get_logger(__name__)

IMAGE_IMPORT_NAME = "newapp"


class K8sClient:
    """Wrapper for kubectl commands."""

    def __init__(self, context: Optional[str] = None, namespace: Optional[str] = None):
        self.context = context
        self.namespace = namespace
        self._verify_kubectl()

    def _verify_kubectl(self):
        """Verify kubectl is available and configured."""
        try:
            subprocess.run(
                ["kubectl", "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise RuntimeError("kubectl command not found. Please install kubectl.")
        except subprocess.CalledProcessError:
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str]) -> List[str]:
        """Build kubectl command with context and namespace."""
        cmd = ["kubectl"]

        if self.context:
            cmd.extend(["--context", self.context])

        cmd.extend(args)

        if self.namespace and "-n" not in args:
            cmd.extend(["-n", self.namespace])

        return cmd

    def execute(self, args: List[str], stdin: Optional[str] = None) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output."""
        cmd = self._build_command(args)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, input=stdin, capture_output=True, text=True, check=True)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.error(f"Command failed: {e.stderr}")
            return False, e.stderr

    def create_json(self, body: Dict[str, Any]) -> Tuple[bool, str]:
        """Create objects from a JSON document passed on stdin."""
        return self.execute(["create", "-f", "-", "-o", "json"], stdin=json.dumps(body))

    def find_image(self, name: str) -> ImageImportResult:
        """Import metadata for an image without creating an image stream."""
        image_import = {
            "kind": "ImageStreamImport",
            "apiVersion": "image.openshift.io/v1",
            "metadata": {"name": IMAGE_IMPORT_NAME},
            "spec": {
                "import": False,
                "images": [{"from": {"kind": "DockerImage", "name": name}}],
            },
            "status": {},
        }
        if self.namespace:
            image_import["metadata"]["namespace"] = self.namespace

        success, output = self.create_json(image_import)
        if not success:
            raise RuntimeError(f"Could not import image {name}: {output.strip()}")

        try:
            response = json.loads(output)
        except json.JSONDecodeError:
            raise RuntimeError(f"Failed to parse image import response for {name}")

        requested = (response.get("spec", {}).get("images") or [{}])[0]
        imported = (response.get("status", {}).get("images") or [{}])[0]
        image = imported.get("image")

        return ImageImportResult(
            name=requested.get("from", {}).get("name"),
            image=Image.from_dict(image) if image else None,
            tag=imported.get("tag"),
            result=imported.get("status"),
        )

    def create_list(self, resources: List[K8sResource]) -> Tuple[bool, str]:
        """Create all resources in a single request."""
        body = {
            "kind": "List",
            "apiVersion": "v1",
            "items": [resource.to_dict() for resource in resources],
        }
        logger.info(f"Creating {len(resources)} resources")
        return self.create_json(body)
