from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class KubeadmImageList:
    images: list[str]
    kind: str = ""
    api_version: str = ""
