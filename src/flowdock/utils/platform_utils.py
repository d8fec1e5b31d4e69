"""Cross-platform helpers for Flowdock."""

from __future__ import annotations

import platform
from typing import Optional

__all__ = ["get_docker_endpoint", "is_windows"]

_WINDOWS_ENDPOINT = "npipe:////./pipe/docker_engine"
_UNIX_ENDPOINT = "unix:///var/run/docker.sock"


def is_windows(system: Optional[str] = None) -> bool:
    return (system or platform.system()) == "Windows"


def get_docker_endpoint(system: Optional[str] = None) -> str:
    """Return the local Docker engine URL for the platform.

    Windows talks to the named pipe; every other platform (WSL included)
    uses the UNIX socket.
    """
    if is_windows(system):
        return _WINDOWS_ENDPOINT
    return _UNIX_ENDPOINT
