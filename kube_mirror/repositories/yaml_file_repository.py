import os
from typing import Any

from ruamel.yaml import YAML


class YamlFileRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = YAML(typ="rt")
        self.yaml.default_flow_style = False
        self.yaml.width = 4096
        self.yaml.indent(mapping=2, sequence=2, offset=0)

    def exists(self) -> bool:
        return os.path.isfile(self.file_path)

    def read(self) -> Any:
        with open(self.file_path, "r") as f:
            return self.yaml.load(f)

    def write(self, data: Any) -> None:
        with open(self.file_path, "w") as f:
            self.yaml.dump(data, f)
