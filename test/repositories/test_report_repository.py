import pytest

from kube_mirror.models import ComponentSyncResult, ImageReference, StepResult, SyncReport
from kube_mirror.repositories import ReportRepository


@pytest.fixture
def report():
    return SyncReport(
        version="v1.25.1",
        strategy="constants",
        tags={"etcd": "3.5.4-0", "pause": "3.8"},
        present=["pause"],
        results=[
            ComponentSyncResult(
                component="etcd",
                source=ImageReference(host="src.example", name="etcd", tag="3.5.4-0"),
                mirror=ImageReference(host="mirror.example", name="etcd", tag="3.5.4-0"),
                steps=[
                    StepResult(step="pull", succeeded=True),
                    StepResult(step="tag", succeeded=True),
                    StepResult(step="push", succeeded=False),
                ],
            )
        ],
    )


def test_save_report(tmp_path, report):
    report_file = tmp_path / "report.yaml"
    repo = ReportRepository(str(report_file))
    assert repo.save(report)

    data = repo.read()
    assert data["version"] == "v1.25.1"
    assert data["failed"] == ["etcd"]
    assert data["present"] == ["pause"]
    assert data["results"][0]["mirror"] == "mirror.example/etcd:3.5.4-0"


def test_save_report_error(tmp_path, report):
    with pytest.raises(Exception, match="Error writing report"):
        ReportRepository(str(tmp_path / "missing" / "report.yaml")).save(report)
