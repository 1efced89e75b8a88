import os
from kube_mirror.models import MirrorConfig
from kube_mirror.repositories.yaml_file_repository import YamlFileRepository

ENV_OVERRIDES = {
    "MIRROR_REGISTRY": "mirror_registry",
    "SOURCE_REGISTRY": "source_registry",
    "CONTAINER_ENGINE": "container_engine",
}


class ConfigRepository(YamlFileRepository):
    def load(self) -> MirrorConfig:
        try:
            data = dict(self.read() or {}) if self.exists() else {}
            for env_key, field in ENV_OVERRIDES.items():
                value = os.environ.get(env_key)
                if value:
                    data[field] = value
            return MirrorConfig(**data)
        except Exception as e:
            raise ValueError(f"Invalid mirror config {self.file_path}: {e}") from e
