from enum import Enum

from pydantic.dataclasses import dataclass


class ProbeStatus(Enum):
    PRESENT = "present"
    ABSENT = "absent"
    FAILED = "probe-failed"


@dataclass(frozen=True)
class ProbeResult:
    status: ProbeStatus
    detail: str = ""

    @property
    def exists(self) -> bool:
        return self.status == ProbeStatus.PRESENT
