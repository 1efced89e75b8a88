from .target_version import TargetVersion, normalize_version
from .resolution import Resolution
from .image_reference import ImageReference
from .probe_result import ProbeResult, ProbeStatus
from .sync_result import StepResult, ComponentSyncResult
from .sync_report import SyncReport
from .mirror_config import MirrorConfig
from .kubeadm_image_list import KubeadmImageList

__all__ = [
    "TargetVersion",
    "normalize_version",
    "Resolution",
    "ImageReference",
    "ProbeResult",
    "ProbeStatus",
    "StepResult",
    "ComponentSyncResult",
    "SyncReport",
    "MirrorConfig",
    "KubeadmImageList",
]
