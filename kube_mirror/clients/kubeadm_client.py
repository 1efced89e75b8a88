import json
import logging

from kube_mirror.clients.command_client import CommandClient
from kube_mirror.models import KubeadmImageList, TargetVersion

logger = logging.getLogger(__name__)


class KubeadmClient:
    def __init__(self, command: CommandClient, binary: str = "kubeadm"):
        self.command: CommandClient = command
        self.binary: str = binary

    def is_installed(self) -> bool:
        return self.command.look_path(self.binary) is not None

    def list_images(self, version: TargetVersion) -> KubeadmImageList:
        out = self.command.run(
            self.binary, "config", "images", "list", f"--kubernetes-version={version}", "-o=json"
        )
        try:
            data = json.loads(out)
            return KubeadmImageList(
                images=data.get("images"),
                kind=data.get("kind", ""),
                api_version=data.get("apiVersion", ""),
            )
        except Exception as e:
            raise ValueError(f"Invalid kubeadm images output: {e}") from e
