import logging
import re
from abc import ABC, abstractmethod
from typing import override

from kube_mirror.clients.kubeadm_client import KubeadmClient
from kube_mirror.clients.remote_text_client import RemoteTextClient
from kube_mirror.errors import ImageMirrorError, ResolutionError
from kube_mirror.models import Resolution, TargetVersion
from kube_mirror.models.component import (
    CLOUD_CONTROLLER_MANAGER,
    CONTROL_PLANE_COMPONENTS,
    COREDNS,
    ETCD,
    HYPERKUBE,
    PAUSE,
    component_set,
    has_cloud_controller_manager,
    has_hyperkube,
)
from kube_mirror.utils.logging import setup_logger

# coredns changed image location after v1.21.0-alpha.1
COREDNS_NEW_PATH_VERSION = "v1.21.0-alpha.1"
COREDNS_NEW_PATH = "coredns/coredns"
# older kubernetes branches lack a pause constant
DEFAULT_PAUSE_VERSION = "3.1"

CONSTANT_KEYS = {
    "CoreDNSVersion": COREDNS,
    "DefaultEtcdVersion": ETCD,
    "PauseVersion": PAUSE,
}
_CONSTANT_LINE = re.compile(r"\b(" + "|".join(CONSTANT_KEYS) + r')\s*=\s*"([^"]*)"')


class ResolutionStrategy(ABC):
    name: str = ""

    @abstractmethod
    def is_available(self) -> bool:
        pass

    @abstractmethod
    def resolve(self, version: TargetVersion) -> Resolution:
        pass


class KubeadmStrategy(ResolutionStrategy):
    name = "kubeadm"

    def __init__(self, kubeadm: KubeadmClient):
        self.kubeadm: KubeadmClient = kubeadm

    @override
    def is_available(self) -> bool:
        return self.kubeadm.is_installed()

    @override
    def resolve(self, version: TargetVersion) -> Resolution:
        image_list = self.kubeadm.list_images(version)
        tags: dict[str, str] = {}
        prefixes: dict[str, str] = {}
        # registry.k8s.io/coredns/coredns:v1.8.6
        for image in image_list.images:
            prefix, _, name_and_tag = image.rpartition("/")
            name, sep, tag = name_and_tag.partition(":")
            if not sep or not name or not tag:
                raise ResolutionError(f"kubeadm listed an image without tag: {image}")
            prefixes[name] = prefix
            tags[name] = tag

        # kubeadm never lists hyperkube or cloud-controller-manager
        k8s_version = str(version)
        if has_hyperkube(version):
            tags.setdefault(HYPERKUBE, k8s_version)
        if has_cloud_controller_manager(version):
            tags.setdefault(CLOUD_CONTROLLER_MANAGER, k8s_version)

        resolution = Resolution(version=version, tags=tags, prefixes=prefixes, strategy=self.name)
        missing = resolution.missing(component_set(version))
        if missing:
            raise ResolutionError(f"kubeadm did not list images for {', '.join(missing)}")
        return resolution


class ConstantsFileStrategy(ResolutionStrategy):
    name = "constants"

    def __init__(self, fetcher: RemoteTextClient, url_template: str):
        self.fetcher: RemoteTextClient = fetcher
        self.url_template: str = url_template

    @override
    def is_available(self) -> bool:
        return True

    @override
    def resolve(self, version: TargetVersion) -> Resolution:
        url = self.url_template.format(version=version)
        constants = self.fetcher.fetch(url)
        images = self.parse_constants(version, constants)

        if COREDNS_NEW_PATH in images:
            images[COREDNS] = images.pop(COREDNS_NEW_PATH)
        resolution = Resolution(version=version, tags=images, strategy=self.name)
        missing = resolution.missing(component_set(version))
        if missing:
            raise ResolutionError(f"no tag resolved for {', '.join(missing)}")
        return resolution

    @staticmethod
    def coredns_path(version: TargetVersion) -> str:
        if version.at_least(COREDNS_NEW_PATH_VERSION):
            return COREDNS_NEW_PATH
        return COREDNS

    def parse_constants(self, version: TargetVersion, constants: str) -> dict[str, str]:
        """Build the image tags of ``version`` from the text of kubeadm's constants.go.

        The coredns tag is stored under the image path it was published at,
        ``coredns`` or ``coredns/coredns``.
        """
        k8s_version = str(version)
        images = {c: k8s_version for c in CONTROL_PLANE_COMPONENTS}
        if has_hyperkube(version):
            images[HYPERKUBE] = k8s_version
        if has_cloud_controller_manager(version):
            images[CLOUD_CONTROLLER_MANAGER] = k8s_version

        coredns_path = self.coredns_path(version)
        targets = {**CONSTANT_KEYS, "CoreDNSVersion": coredns_path}
        images[coredns_path] = ""
        images[ETCD] = ""
        images[PAUSE] = ""

        for line in constants.splitlines():
            match = _CONSTANT_LINE.search(line)
            if match:
                images[targets[match.group(1)]] = match.group(2).strip()

        if not images[PAUSE]:
            images[PAUSE] = DEFAULT_PAUSE_VERSION
        if not images[coredns_path] or not images[ETCD]:
            raise ResolutionError(f"at least one image version could not be set: {images}")
        return images


def select_strategies(strategies: list[ResolutionStrategy]) -> list[ResolutionStrategy]:
    return [s for s in strategies if s.is_available()]


class ImageTagResolver:
    def __init__(self, strategies: list[ResolutionStrategy]):
        self.strategies: list[ResolutionStrategy] = strategies
        self.logger: logging.Logger = setup_logger("ImageTagResolver")

    def resolve(self, version: TargetVersion) -> Resolution:
        selected = select_strategies(self.strategies)
        skipped = [s.name for s in self.strategies if s not in selected]
        if skipped:
            self.logger.info(f"Skipping unavailable strategies: {', '.join(skipped)}")

        last_error: Exception | None = None
        for strategy in selected:
            self.logger.info(f"Resolving image tags of {version} via {strategy.name}")
            try:
                resolution = strategy.resolve(version)
            except (ImageMirrorError, ValueError) as e:
                self.logger.warning(f"Resolving image tags via {strategy.name} failed: {e}")
                last_error = e
                continue
            self.logger.info(f"Resolved image tags of {version}: {resolution.tags}")
            return resolution

        if last_error is None:
            raise ResolutionError(f"No strategy available to resolve image tags of {version}")
        raise ResolutionError(f"Failed to resolve image tags of {version}: {last_error}") from last_error
