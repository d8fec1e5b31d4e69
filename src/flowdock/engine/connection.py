"""Engine connection established once at startup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import docker
from docker.errors import DockerException

from flowdock.engine.client import EngineClient
from flowdock.utils.platform_utils import get_docker_endpoint

__all__ = ["EngineConnection", "connect"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConnection:
    """Outcome of the startup probe.

    A failed probe is final for the process lifetime; nothing re-probes.
    """

    endpoint: str
    client: Optional[EngineClient] = None
    error: Optional[str] = None

    def is_available(self) -> bool:
        return self.client is not None and self.client.is_available()

    @classmethod
    def unavailable(
        cls, reason: str, endpoint: Optional[str] = None
    ) -> "EngineConnection":
        return cls(endpoint=endpoint or get_docker_endpoint(), error=reason)

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


def connect(
    api_timeout: float = 20,
    *,
    api_factory: Optional[Callable[..., Any]] = None,
) -> EngineConnection:
    """Connect to the local engine and ping it once."""
    endpoint = get_docker_endpoint()
    factory = api_factory or docker.APIClient
    try:
        api = factory(base_url=endpoint, timeout=int(api_timeout))
    except (DockerException, OSError) as exc:
        logger.warning("Failed to create Docker client for %s: %s", endpoint, exc)
        return EngineConnection.unavailable(str(exc), endpoint=endpoint)

    client = EngineClient(api, timeout=api_timeout)
    if not client.probe():
        logger.warning("Docker engine at %s is not reachable: %s", endpoint, client.probe_error)
        client.close()
        return EngineConnection.unavailable(
            client.probe_error or "ping failed", endpoint=endpoint
        )

    logger.debug("Connected to Docker engine at %s", endpoint)
    return EngineConnection(endpoint=endpoint, client=client)
