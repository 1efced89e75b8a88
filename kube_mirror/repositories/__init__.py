from .config_repository import ConfigRepository
from .report_repository import ReportRepository
from .yaml_file_repository import YamlFileRepository

__all__ = [
    'ConfigRepository',
    'ReportRepository',
    'YamlFileRepository'
]
