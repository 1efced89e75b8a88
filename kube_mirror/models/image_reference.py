from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class ImageReference:
    host: str
    name: str
    tag: str

    def __str__(self) -> str:
        return f"{self.host}/{self.name}:{self.tag}"
