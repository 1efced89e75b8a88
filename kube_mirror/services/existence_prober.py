import logging

from kube_mirror.clients.container_engine_client import ContainerEngineClient
from kube_mirror.models import ImageReference, ProbeResult, ProbeStatus
from kube_mirror.utils.logging import setup_logger


class ExistenceProber:
    """Checks which mirror images already exist.

    The engine can only answer through a pull, so a ``probe-failed`` result
    (auth or network trouble) does not prove the image is absent. Callers
    decide what to do with it; the synchronizer treats it as missing.
    """

    def __init__(self, engine: ContainerEngineClient):
        self.engine: ContainerEngineClient = engine
        self.logger: logging.Logger = setup_logger("ExistenceProber")

    def probe(self, mirror_refs: dict[str, ImageReference]) -> dict[str, ProbeResult]:
        existence: dict[str, ProbeResult] = {}
        for name, ref in mirror_refs.items():
            result = self.engine.probe(ref)
            existence[name] = result
            if result.status == ProbeStatus.FAILED:
                self.logger.warning(f"Could not probe {ref}, treating it as missing: {result.detail}")
            else:
                self.logger.info(f"{ref} is {result.status.value} in mirror registry")
        return existence
