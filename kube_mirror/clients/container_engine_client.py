import logging
import re

from kube_mirror.clients.command_client import CommandClient
from kube_mirror.errors import CommandError, EngineUnavailableError
from kube_mirror.models import ImageReference, ProbeResult, ProbeStatus

logger = logging.getLogger(__name__)

# pull errors that mean the registry answered and the image is not there
NOT_FOUND_PATTERNS = re.compile(
    r"manifest unknown|not found|does not exist|pull access denied|name unknown",
    re.IGNORECASE,
)


class ContainerEngineClient:
    def __init__(self, command: CommandClient, engine: str = "docker", check_image: str = "busybox"):
        self.command: CommandClient = command
        self.engine: str = engine
        self.check_image: str = check_image

    def ensure_available(self) -> None:
        # search also proves the engine can reach a registry
        try:
            self.command.run(self.engine, "search", self.check_image)
        except CommandError as e:
            logger.error(f"Host {self.engine} env has some issue, please check")
            raise EngineUnavailableError(f"{self.engine} is not usable: {e}") from e

    def pull(self, ref: ImageReference) -> str:
        return self.command.run(self.engine, "image", "pull", str(ref))

    def tag(self, source: ImageReference, target: ImageReference) -> str:
        return self.command.run(self.engine, "image", "tag", str(source), str(target))

    def push(self, ref: ImageReference) -> str:
        return self.command.run(self.engine, "image", "push", str(ref))

    def probe(self, ref: ImageReference) -> ProbeResult:
        # there is no tag lookup in the engine cli, a pull is the only check
        try:
            self.pull(ref)
            return ProbeResult(status=ProbeStatus.PRESENT)
        except CommandError as e:
            if NOT_FOUND_PATTERNS.search(e.output):
                return ProbeResult(status=ProbeStatus.ABSENT, detail=e.output.strip())
            return ProbeResult(status=ProbeStatus.FAILED, detail=e.output.strip())
