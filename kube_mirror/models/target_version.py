import re

from packaging.version import Version as PackagingVersion
from pydantic.dataclasses import dataclass

from kube_mirror.errors import VersionFormatError

_SEGMENTS = re.compile(r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)(?:-((?:alpha|beta|rc)\d*))?")


@dataclass(frozen=True)
class TargetVersion:
    major: int
    minor: int
    patch: int
    pre_release: str | None = None

    @classmethod
    def parse(cls, raw: str) -> "TargetVersion":
        """Validate a free-form Kubernetes version such as ``1.25.1`` or ``v1.23.1``."""
        bare = raw[1:] if raw.startswith("v") else raw
        if len(bare.split(".")) != 3:
            raise VersionFormatError(f"kubernetes version {raw!r} format error, should be same as v1.23.0")
        match = _SEGMENTS.fullmatch(bare)
        if not match:
            raise VersionFormatError(f"kubernetes version {raw!r} has non canonical numeric segments, should be same as v1.23.0")
        major, minor, patch, pre_release = match.groups()
        return cls(major=int(major), minor=int(minor), patch=int(patch), pre_release=pre_release)

    def at_least(self, other: str) -> bool:
        return PackagingVersion(str(self)) >= PackagingVersion(other)

    def __str__(self) -> str:
        version = f"v{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            version += f"-{self.pre_release}"
        return version


def normalize_version(raw: str) -> str:
    return str(TargetVersion.parse(raw))
