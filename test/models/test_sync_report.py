from kube_mirror.models import ComponentSyncResult, ImageReference, StepResult, SyncReport


def make_result(component, outcomes):
    return ComponentSyncResult(
        component=component,
        source=ImageReference(host="src.example", name=component, tag="1.0"),
        mirror=ImageReference(host="mirror.example", name=component, tag="1.0"),
        steps=[StepResult(step=step, succeeded=ok) for step, ok in outcomes],
    )


def test_image_reference_str():
    ref = ImageReference(host="registry.example/google_containers", name="pause", tag="3.8")
    assert str(ref) == "registry.example/google_containers/pause:3.8"


def test_report_synced_and_failed():
    report = SyncReport(
        version="v1.25.1",
        strategy="constants",
        tags={"etcd": "1.0", "pause": "1.0", "coredns": "1.0"},
        present=["coredns"],
        results=[
            make_result("etcd", [("pull", True), ("tag", True), ("push", True)]),
            make_result("pause", [("pull", False), ("tag", False), ("push", True)]),
        ],
    )
    assert report.synced == ["etcd"]
    assert report.failed == ["pause"]
    assert report.results[1].failed_steps == ["pull", "tag"]


def test_skipped_steps_are_not_failed_steps():
    result = ComponentSyncResult(
        component="etcd",
        source=ImageReference(host="src.example", name="etcd", tag="1.0"),
        mirror=ImageReference(host="mirror.example", name="etcd", tag="1.0"),
        steps=[
            StepResult(step="pull", succeeded=False),
            StepResult(step="tag", succeeded=False, skipped=True),
            StepResult(step="push", succeeded=False, skipped=True),
        ],
    )
    assert not result.succeeded
    assert result.failed_steps == ["pull"]


def test_report_to_dict():
    report = SyncReport(
        version="v1.25.1",
        strategy="kubeadm",
        tags={"pause": "1.0", "etcd": "1.0"},
        present=[],
        results=[make_result("etcd", [("pull", True), ("tag", True), ("push", False)])],
        probe_failures={"etcd": "unauthorized"},
    )
    data = report.to_dict()
    assert list(data["tags"]) == ["etcd", "pause"]
    assert data["failed"] == ["etcd"]
    assert data["probe_failures"] == {"etcd": "unauthorized"}
    assert data["results"][0]["mirror"] == "mirror.example/etcd:1.0"
    assert data["results"][0]["steps"][2] == {"step": "push", "succeeded": False, "skipped": False}
