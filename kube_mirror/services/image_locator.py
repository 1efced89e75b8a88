from kube_mirror.models import ImageReference


def locate(
    tags: dict[str, str], mirror_host: str, source_host: str
) -> tuple[dict[str, ImageReference], dict[str, ImageReference]]:
    # coredns for instance:
    #   mirror: myaccount/coredns:v1.8.6
    #   source: registry.cn-hangzhou.aliyuncs.com/google_containers/coredns:v1.8.6
    mirror_refs = {name: ImageReference(host=mirror_host, name=name, tag=tag) for name, tag in tags.items()}
    source_refs = {name: ImageReference(host=source_host, name=name, tag=tag) for name, tag in tags.items()}
    return mirror_refs, source_refs
