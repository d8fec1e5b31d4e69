"""
Docker engine adapter.

``AsyncEngine`` runs the blocking docker-py low-level calls in an executor
with a per-call timeout. ``EngineClient`` is the synchronous facade the query
layer talks to: every method issues exactly one engine call, waits for it on
a private event loop, and either returns or raises ``EngineCallError``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Coroutine, List, Optional, TypeVar

from docker.errors import APIError, DockerException

from flowdock.exceptions import EngineCallError, EngineUnavailable
from flowdock.shared.types import ContainerRecord, ImageRecord

__all__ = ["AsyncEngine", "EngineClient"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _api_message(exc: APIError) -> str:
    explanation = getattr(exc, "explanation", None)
    if isinstance(explanation, bytes):
        explanation = explanation.decode("utf-8", errors="replace")
    return str(explanation) if explanation else str(exc)


class AsyncEngine:
    """Coroutine wrappers around a docker ``APIClient``."""

    def __init__(self, api: Any, timeout: float = 20) -> None:
        self.api = api
        self.timeout = timeout

    async def _call(self, description: str, fn: Callable[[], T]) -> T:
        loop = asyncio.get_running_loop()
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(None, fn), timeout=self.timeout
            )
        except asyncio.TimeoutError as exc:
            raise EngineCallError(
                f"Docker engine did not respond within {self.timeout}s"
            ) from exc
        except APIError as exc:
            logger.debug("%s failed: %s", description, exc)
            raise EngineCallError(_api_message(exc)) from exc
        except (DockerException, OSError) as exc:
            logger.debug("%s failed: %s", description, exc)
            raise EngineCallError(str(exc)) from exc

    async def ping(self) -> bool:
        return bool(await self._call("ping", self.api.ping))

    async def list_containers(self, all: bool = True) -> List[ContainerRecord]:
        raw = await self._call("list containers", lambda: self.api.containers(all=all))
        return [ContainerRecord.from_api(item) for item in raw or []]

    async def list_images(self, all: bool = True) -> List[ImageRecord]:
        raw = await self._call("list images", lambda: self.api.images(all=all))
        return [ImageRecord.from_api(item) for item in raw or []]

    async def start_container(self, ref: str) -> None:
        await self._call(f"start {ref}", lambda: self.api.start(ref))

    async def stop_container(self, ref: str) -> None:
        await self._call(f"stop {ref}", lambda: self.api.stop(ref))

    async def restart_container(self, ref: str) -> None:
        await self._call(f"restart {ref}", lambda: self.api.restart(ref))

    async def remove_container(self, ref: str) -> None:
        await self._call(f"remove {ref}", lambda: self.api.remove_container(ref))

    async def remove_image(self, ref: str) -> None:
        await self._call(f"remove image {ref}", lambda: self.api.remove_image(ref))

    async def prune_containers(self) -> dict:
        return await self._call("prune containers", self.api.prune_containers)

    async def prune_images(self) -> dict:
        return await self._call("prune images", self.api.prune_images)


class EngineClient:
    """Synchronous facade over :class:`AsyncEngine`.

    The client must not be driven from inside a running event loop; the
    host is expected to issue one query at a time.
    """

    def __init__(self, api: Any, *, timeout: float = 20) -> None:
        self.api = api
        self.engine = AsyncEngine(api, timeout=timeout)
        self.probe_error: Optional[str] = None
        self._available = False
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def _run(self, coro: Coroutine[Any, Any, T]) -> T:
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        return self._loop.run_until_complete(coro)

    def _ensure_available(self) -> None:
        if not self._available:
            raise EngineUnavailable(self.probe_error or "Docker engine is not available")

    def probe(self) -> bool:
        """Ping the engine once and record the outcome."""
        try:
            self._available = self._run(self.engine.ping())
        except EngineCallError as exc:
            self.probe_error = exc.message
            self._available = False
        return self._available

    def is_available(self) -> bool:
        return self._available

    def list_containers(self, all: bool = True) -> List[ContainerRecord]:
        self._ensure_available()
        return self._run(self.engine.list_containers(all=all))

    def list_images(self, all: bool = True) -> List[ImageRecord]:
        self._ensure_available()
        return self._run(self.engine.list_images(all=all))

    def start_container(self, ref: str) -> None:
        self._ensure_available()
        self._run(self.engine.start_container(ref))
        logger.info("Started container %s", ref)

    def stop_container(self, ref: str) -> None:
        self._ensure_available()
        self._run(self.engine.stop_container(ref))
        logger.info("Stopped container %s", ref)

    def restart_container(self, ref: str) -> None:
        self._ensure_available()
        self._run(self.engine.restart_container(ref))
        logger.info("Restarted container %s", ref)

    def remove_container(self, ref: str) -> None:
        self._ensure_available()
        self._run(self.engine.remove_container(ref))
        logger.info("Removed container %s", ref)

    def remove_image(self, ref: str) -> None:
        self._ensure_available()
        self._run(self.engine.remove_image(ref))
        logger.info("Removed image %s", ref)

    def prune_containers(self) -> None:
        self._ensure_available()
        report = self._run(self.engine.prune_containers()) or {}
        logger.info(
            "Pruned containers (reclaimed %s bytes)", report.get("SpaceReclaimed", 0)
        )

    def prune_images(self) -> None:
        self._ensure_available()
        report = self._run(self.engine.prune_images()) or {}
        logger.info(
            "Pruned images (reclaimed %s bytes)", report.get("SpaceReclaimed", 0)
        )

    def close(self) -> None:
        """Close the event loop and the Docker client connection."""
        if self._loop is not None and not self._loop.is_closed():
            self._loop.run_until_complete(self._loop.shutdown_default_executor())
            self._loop.close()
        try:
            self.api.close()
        except (DockerException, OSError, AttributeError):
            pass
