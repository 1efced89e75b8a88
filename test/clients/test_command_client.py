import subprocess
import pytest
from kube_mirror.clients.command_client import CommandClient
from kube_mirror.errors import CommandError

@pytest.fixture
def client():
    return CommandClient()

class DummyResult:
    def __init__(self, returncode, stdout):
        self.returncode = returncode
        self.stdout = stdout

def test_run_success(monkeypatch, client):
    calls = []
    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return DummyResult(0, "Status: Downloaded newer image")
    monkeypatch.setattr(subprocess, "run", fake_run)
    assert client.run("docker", "image", "pull", "busybox") == "Status: Downloaded newer image"
    assert calls == [["docker", "image", "pull", "busybox"]]

def test_run_failure(monkeypatch, client):
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: DummyResult(1, "manifest unknown"))
    with pytest.raises(CommandError) as excinfo:
        client.run("docker", "image", "pull", "busybox")
    assert excinfo.value.returncode == 1
    assert excinfo.value.output == "manifest unknown"

def test_run_missing_binary(monkeypatch, client):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])
    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(CommandError, match="not installed"):
        client.run("kubeadm", "version")

def test_run_timeout(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])
    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(CommandError, match="timed out"):
        CommandClient(timeout=1).run("docker", "image", "push", "busybox")

def test_look_path(monkeypatch, client):
    monkeypatch.setattr("kube_mirror.clients.command_client.shutil.which", lambda name: None)
    assert client.look_path("kubeadm") is None
