from kube_mirror.models.target_version import TargetVersion

KUBE_APISERVER = "kube-apiserver"
KUBE_CONTROLLER_MANAGER = "kube-controller-manager"
KUBE_SCHEDULER = "kube-scheduler"
KUBE_PROXY = "kube-proxy"
ETCD = "etcd"
PAUSE = "pause"
COREDNS = "coredns"
HYPERKUBE = "hyperkube"
CLOUD_CONTROLLER_MANAGER = "cloud-controller-manager"

BASE_COMPONENTS: tuple[str, ...] = (
    KUBE_APISERVER,
    KUBE_CONTROLLER_MANAGER,
    KUBE_SCHEDULER,
    KUBE_PROXY,
    ETCD,
    PAUSE,
    COREDNS,
)

# components tagged with the kubernetes version itself
CONTROL_PLANE_COMPONENTS: tuple[str, ...] = (
    KUBE_APISERVER,
    KUBE_CONTROLLER_MANAGER,
    KUBE_SCHEDULER,
    KUBE_PROXY,
)


def has_hyperkube(version: TargetVersion) -> bool:
    # the hyperkube image was removed in v1.17
    return version.major == 1 and version.minor < 17


def has_cloud_controller_manager(version: TargetVersion) -> bool:
    # the cloud-controller-manager image was removed in v1.16
    return version.major == 1 and version.minor < 16


def component_set(version: TargetVersion) -> tuple[str, ...]:
    components = list(BASE_COMPONENTS)
    if has_hyperkube(version):
        components.append(HYPERKUBE)
    if has_cloud_controller_manager(version):
        components.append(CLOUD_CONTROLLER_MANAGER)
    return tuple(components)
