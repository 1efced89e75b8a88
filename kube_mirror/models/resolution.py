from pydantic.dataclasses import dataclass

from .target_version import TargetVersion


@dataclass(frozen=True)
class Resolution:
    version: TargetVersion
    tags: dict[str, str]
    strategy: str
    # only the kubeadm strategy knows where each image was published
    prefixes: dict[str, str] | None = None

    def missing(self, components: tuple[str, ...]) -> list[str]:
        return [c for c in components if not self.tags.get(c)]
