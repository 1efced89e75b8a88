from pydantic.dataclasses import dataclass

DEFAULT_SOURCE_REGISTRY = "registry.cn-hangzhou.aliyuncs.com/google_containers"
DEFAULT_CONSTANTS_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/kubernetes/kubernetes/{version}/cmd/kubeadm/app/constants/constants.go"
)


@dataclass(frozen=True)
class MirrorConfig:
    mirror_registry: str
    source_registry: str = DEFAULT_SOURCE_REGISTRY
    container_engine: str = "docker"
    engine_check_image: str = "busybox"
    constants_url_template: str = DEFAULT_CONSTANTS_URL_TEMPLATE
    stop_on_first_failure: bool = False
    fail_on_component_error: bool = False
    command_timeout: float | None = None
    fetch_timeout: float = 30
    fetch_retries: int = 3
    fetch_retry_delay: float = 2
