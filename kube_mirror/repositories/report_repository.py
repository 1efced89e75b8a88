from kube_mirror.models import SyncReport
from kube_mirror.repositories.yaml_file_repository import YamlFileRepository


class ReportRepository(YamlFileRepository):
    def save(self, report: SyncReport) -> bool:
        try:
            self.write(report.to_dict())
            return True
        except Exception as e:
            raise Exception(f"Error writing report: {e}") from e
