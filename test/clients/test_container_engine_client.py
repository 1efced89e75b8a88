from unittest.mock import MagicMock
import pytest
from kube_mirror.clients.container_engine_client import ContainerEngineClient
from kube_mirror.errors import CommandError, EngineUnavailableError
from kube_mirror.models import ImageReference, ProbeStatus

SOURCE = ImageReference(host="src.example", name="coredns", tag="v1.8.6")
MIRROR = ImageReference(host="mirror.example", name="coredns", tag="v1.8.6")

@pytest.fixture
def command():
    return MagicMock()

@pytest.fixture
def client(command):
    return ContainerEngineClient(command, engine="podman")

def test_commands(client, command):
    client.pull(SOURCE)
    client.tag(SOURCE, MIRROR)
    client.push(MIRROR)
    assert [c.args for c in command.run.call_args_list] == [
        ("podman", "image", "pull", "src.example/coredns:v1.8.6"),
        ("podman", "image", "tag", "src.example/coredns:v1.8.6", "mirror.example/coredns:v1.8.6"),
        ("podman", "image", "push", "mirror.example/coredns:v1.8.6"),
    ]

def test_ensure_available(client, command):
    client.ensure_available()
    command.run.assert_called_once_with("podman", "search", "busybox")

def test_ensure_available_failure(client, command):
    command.run.side_effect = CommandError(["podman", "search", "busybox"], 125, "cannot connect")
    with pytest.raises(EngineUnavailableError):
        client.ensure_available()

def test_probe_present(client, command):
    assert client.probe(MIRROR).status == ProbeStatus.PRESENT

@pytest.mark.parametrize("output", [
    "Error response from daemon: manifest for mirror.example/coredns:v1.8.6 not found: manifest unknown",
    "Error response from daemon: pull access denied for mirror.example/coredns, repository does not exist",
])
def test_probe_absent(client, command, output):
    command.run.side_effect = CommandError(["podman"], 1, output)
    result = client.probe(MIRROR)
    assert result.status == ProbeStatus.ABSENT
    assert not result.exists

def test_probe_failed(client, command):
    command.run.side_effect = CommandError(["podman"], 1, "net/http: TLS handshake timeout")
    result = client.probe(MIRROR)
    assert result.status == ProbeStatus.FAILED
    assert "TLS handshake timeout" in result.detail
    assert not result.exists
