import logging
from typing import Callable

from kube_mirror.clients.container_engine_client import ContainerEngineClient
from kube_mirror.errors import CommandError
from kube_mirror.models import ComponentSyncResult, ImageReference, ProbeResult, StepResult
from kube_mirror.utils.logging import setup_logger


class MirrorSynchronizer:
    def __init__(self, engine: ContainerEngineClient, stop_on_first_failure: bool = False):
        self.engine: ContainerEngineClient = engine
        self.stop_on_first_failure: bool = stop_on_first_failure
        self.logger: logging.Logger = setup_logger("MirrorSynchronizer")

    def sync(
        self,
        existence: dict[str, ProbeResult],
        source_refs: dict[str, ImageReference],
        mirror_refs: dict[str, ImageReference],
    ) -> dict[str, ComponentSyncResult]:
        results: dict[str, ComponentSyncResult] = {}
        for name, probe in existence.items():
            if probe.exists:
                continue
            results[name] = self.sync_component(name, source_refs[name], mirror_refs[name])
        return results

    def sync_component(self, name: str, source: ImageReference, mirror: ImageReference) -> ComponentSyncResult:
        operations: list[tuple[str, Callable[[], str]]] = [
            ("pull", lambda: self.engine.pull(source)),
            ("tag", lambda: self.engine.tag(source, mirror)),
            ("push", lambda: self.engine.push(mirror)),
        ]
        steps: list[StepResult] = []
        failed = False
        for step, operation in operations:
            if failed and self.stop_on_first_failure:
                steps.append(StepResult(step=step, succeeded=False, skipped=True))
                continue
            try:
                output = operation()
                steps.append(StepResult(step=step, succeeded=True, output=output))
                self.logger.info(f"{name}: image {step} succeeded")
            except CommandError as e:
                # later steps still run, a local image may already exist
                failed = True
                steps.append(StepResult(step=step, succeeded=False, output=e.output))
                self.logger.warning(f"{name}: image {step} failed: {e}")
        return ComponentSyncResult(component=name, source=source, mirror=mirror, steps=steps)
