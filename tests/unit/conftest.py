from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from flowdock.engine.connection import EngineConnection
from flowdock.exceptions import EngineCallError
from flowdock.shared.types import ContainerRecord, ImageRecord


def _container(name: str, state: str, image: str = "nginx:latest") -> ContainerRecord:
    digest = (name.encode().hex() * 64)[:64]
    return ContainerRecord(id=digest, names=(f"/{name}",), state=state, image=image)


def _image(tag: Optional[str], size: int = 1536) -> ImageRecord:
    digest = ((tag or "untagged").encode().hex() * 64)[:64]
    return ImageRecord(id=f"sha256:{digest}", repo_tags=(tag,) if tag else (), size=size)


class FakeEngine:
    """In-memory stand-in for :class:`flowdock.engine.client.EngineClient`."""

    def __init__(
        self,
        containers: Sequence[ContainerRecord] = (),
        images: Sequence[ImageRecord] = (),
    ) -> None:
        self.containers = list(containers)
        self.images = list(images)
        self.calls: List[Tuple[str, object]] = []
        self.errors: Dict[str, str] = {}

    def _record(self, name: str, arg: object = None) -> None:
        self.calls.append((name, arg))
        if name in self.errors:
            raise EngineCallError(self.errors[name])

    def mutations(self) -> List[Tuple[str, object]]:
        return [call for call in self.calls if not call[0].startswith("list_")]

    def is_available(self) -> bool:
        return True

    def list_containers(self, all: bool = True) -> List[ContainerRecord]:
        self._record("list_containers", all)
        return list(self.containers)

    def list_images(self, all: bool = True) -> List[ImageRecord]:
        self._record("list_images", all)
        return list(self.images)

    def start_container(self, ref: str) -> None:
        self._record("start_container", ref)

    def stop_container(self, ref: str) -> None:
        self._record("stop_container", ref)

    def restart_container(self, ref: str) -> None:
        self._record("restart_container", ref)

    def remove_container(self, ref: str) -> None:
        self._record("remove_container", ref)

    def remove_image(self, ref: str) -> None:
        self._record("remove_image", ref)

    def prune_containers(self) -> None:
        self._record("prune_containers")

    def prune_images(self) -> None:
        self._record("prune_images")

    def close(self) -> None:
        self.calls.append(("close", None))


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine(
        containers=[_container("web", "exited"), _container("db", "running")],
        images=[_image("myimage:latest"), _image(None, size=1048576)],
    )


@pytest.fixture
def connection(engine: FakeEngine) -> EngineConnection:
    return EngineConnection(endpoint="unix:///test.sock", client=engine)  # type: ignore[arg-type]


@pytest.fixture
def make_container():
    return _container


@pytest.fixture
def make_image():
    return _image
