"""Docker CLI fallback for prune operations the adapter does not expose."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Sequence

__all__ = ["prune_networks", "prune_volumes", "spawn_cli"]

logger = logging.getLogger(__name__)

Spawner = Callable[..., object]


def spawn_cli(
    binary: str,
    args: Sequence[str],
    *,
    spawner: Spawner = subprocess.Popen,
) -> bool:
    """Start ``binary args`` detached; ``True`` means the process started.

    The exit status is not awaited.
    """
    command = [binary, *args]
    try:
        spawner(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, ValueError, subprocess.SubprocessError) as exc:
        logger.warning("Failed to spawn %s: %s", " ".join(command), exc)
        return False
    logger.info("Spawned %s", " ".join(command))
    return True


def prune_volumes(binary: str = "docker", *, spawner: Spawner = subprocess.Popen) -> bool:
    return spawn_cli(binary, ("volume", "prune", "-f"), spawner=spawner)


def prune_networks(binary: str = "docker", *, spawner: Spawner = subprocess.Popen) -> bool:
    return spawn_cli(binary, ("network", "prune", "-f"), spawner=spawner)
