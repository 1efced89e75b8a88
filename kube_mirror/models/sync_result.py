from pydantic.dataclasses import dataclass

from .image_reference import ImageReference
from .probe_result import ProbeResult


@dataclass(frozen=True)
class StepResult:
    step: str  # pull, tag or push
    succeeded: bool
    output: str = ""
    skipped: bool = False


@dataclass(frozen=True)
class ComponentSyncResult:
    component: str
    source: ImageReference
    mirror: ImageReference
    steps: list[StepResult]

    @property
    def succeeded(self) -> bool:
        return all(s.succeeded for s in self.steps)

    @property
    def failed_steps(self) -> list[str]:
        return [s.step for s in self.steps if not s.succeeded and not s.skipped]
