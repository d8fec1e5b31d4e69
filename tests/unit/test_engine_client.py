from __future__ import annotations

import time
from typing import Any, Dict, List

import pytest
from docker.errors import APIError, DockerException, NotFound

from flowdock.engine.client import AsyncEngine, EngineClient
from flowdock.engine.connection import connect
from flowdock.exceptions import EngineCallError, EngineUnavailable
from flowdock.utils.platform_utils import get_docker_endpoint

CONTAINER_ID = "0123456789abcdef" * 4
IMAGE_ID = "sha256:" + "fedcba9876543210" * 4


class _FakeAPI:
    """Mimics the subset of ``docker.APIClient`` the adapter uses."""

    def __init__(self, *, ping_error: Exception | None = None) -> None:
        self.ping_error = ping_error
        self.calls: List[tuple] = []
        self.closed = False
        self.failures: Dict[str, Exception] = {}

    def _hit(self, name: str, *args: Any) -> None:
        self.calls.append((name, *args))
        if name in self.failures:
            raise self.failures[name]

    def ping(self) -> bool:
        if self.ping_error is not None:
            raise self.ping_error
        return True

    def containers(self, all: bool = False) -> List[Dict[str, Any]]:
        self._hit("containers", all)
        return [
            {
                "Id": CONTAINER_ID,
                "Names": ["/web"],
                "State": "running",
                "Image": "nginx:latest",
            }
        ]

    def images(self, all: bool = False) -> List[Dict[str, Any]]:
        self._hit("images", all)
        return [{"Id": IMAGE_ID, "RepoTags": None, "Size": 2048}]

    def start(self, ref: str) -> None:
        self._hit("start", ref)

    def stop(self, ref: str) -> None:
        self._hit("stop", ref)

    def restart(self, ref: str) -> None:
        self._hit("restart", ref)

    def remove_container(self, ref: str) -> None:
        self._hit("remove_container", ref)

    def remove_image(self, ref: str) -> None:
        self._hit("remove_image", ref)

    def prune_containers(self) -> Dict[str, Any]:
        self._hit("prune_containers")
        return {"ContainersDeleted": None, "SpaceReclaimed": 0}

    def prune_images(self) -> Dict[str, Any]:
        self._hit("prune_images")
        return {"ImagesDeleted": None, "SpaceReclaimed": 10}

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def api() -> _FakeAPI:
    return _FakeAPI()


@pytest.fixture
def client(api: _FakeAPI):
    client = EngineClient(api, timeout=5)
    assert client.probe() is True
    yield client
    client.close()


def test_lists_map_api_payloads(client: EngineClient, api: _FakeAPI) -> None:
    containers = client.list_containers()
    images = client.list_images(all=False)

    assert containers[0].id == CONTAINER_ID
    assert containers[0].names == ("/web",)
    assert containers[0].is_running
    assert images[0].repo_tags == ()
    assert images[0].size == 2048
    assert ("containers", True) in api.calls
    assert ("images", False) in api.calls


def test_mutations_issue_one_call_each(client: EngineClient, api: _FakeAPI) -> None:
    client.start_container("web")
    client.stop_container("web")
    client.restart_container("web")
    client.remove_container("web")
    client.remove_image("nginx:latest")
    client.prune_containers()
    client.prune_images()

    assert [call[0] for call in api.calls] == [
        "start",
        "stop",
        "restart",
        "remove_container",
        "remove_image",
        "prune_containers",
        "prune_images",
    ]


def test_api_error_uses_server_explanation(client: EngineClient, api: _FakeAPI) -> None:
    api.failures["start"] = NotFound("404 Client Error", explanation="No such container: ghost")

    with pytest.raises(EngineCallError) as excinfo:
        client.start_container("ghost")

    assert excinfo.value.message == "No such container: ghost"


def test_api_error_without_explanation(client: EngineClient, api: _FakeAPI) -> None:
    api.failures["remove_image"] = APIError("409 Client Error: Conflict")

    with pytest.raises(EngineCallError, match="409 Client Error"):
        client.remove_image("busy")


def test_connection_errors_become_call_errors(client: EngineClient, api: _FakeAPI) -> None:
    api.failures["containers"] = ConnectionError("socket closed")

    with pytest.raises(EngineCallError, match="socket closed"):
        client.list_containers()


def test_slow_call_times_out(api: _FakeAPI) -> None:
    api.stop = lambda ref: time.sleep(0.3)  # type: ignore[method-assign]
    client = EngineClient(api, timeout=0.05)
    client.probe()

    with pytest.raises(EngineCallError, match="did not respond"):
        client.stop_container("web")
    client.close()


def test_failed_probe_disables_client() -> None:
    api = _FakeAPI(ping_error=DockerException("Error while fetching server API version"))
    client = EngineClient(api)

    assert client.probe() is False
    assert not client.is_available()
    assert "server API version" in (client.probe_error or "")
    with pytest.raises(EngineUnavailable):
        client.list_containers()
    assert api.calls == []
    client.close()


@pytest.mark.asyncio
async def test_async_engine_runs_in_executor(api: _FakeAPI) -> None:
    engine = AsyncEngine(api, timeout=5)

    images = await engine.list_images(all=True)

    assert images[0].id == IMAGE_ID
    assert ("images", True) in api.calls


def test_connect_probes_default_endpoint(api: _FakeAPI) -> None:
    seen: Dict[str, Any] = {}

    def factory(**kwargs: Any) -> _FakeAPI:
        seen.update(kwargs)
        return api

    connection = connect(api_timeout=7, api_factory=factory)

    assert connection.is_available()
    assert seen == {"base_url": get_docker_endpoint(), "timeout": 7}
    connection.close()
    assert api.closed


def test_connect_reports_unreachable_engine() -> None:
    api = _FakeAPI(ping_error=ConnectionError("No such file or directory"))

    connection = connect(api_factory=lambda **_kw: api)

    assert not connection.is_available()
    assert connection.client is None
    assert "No such file" in (connection.error or "")
    assert api.closed


def test_connect_reports_client_construction_failure() -> None:
    def factory(**_kw: Any) -> _FakeAPI:
        raise DockerException("Install pypiwin32 package to enable npipe:// support")

    connection = connect(api_factory=factory)

    assert not connection.is_available()
    assert "pypiwin32" in (connection.error or "")


def test_endpoint_per_platform() -> None:
    assert get_docker_endpoint("Windows") == "npipe:////./pipe/docker_engine"
    assert get_docker_endpoint("Linux") == "unix:///var/run/docker.sock"
    assert get_docker_endpoint("Darwin") == "unix:///var/run/docker.sock"
