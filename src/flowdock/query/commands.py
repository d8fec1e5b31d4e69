"""Command tables: aliases, main menu, help text and container mutations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from flowdock.engine.client import EngineClient
from flowdock.shared.types import ContainerRecord

__all__ = [
    "ALIASES",
    "CONTAINER_MUTATIONS",
    "HELP_TABLE",
    "IMAGE_REMOVAL",
    "MAIN_MENU",
    "MenuEntry",
    "Mutation",
]


@dataclass(frozen=True)
class MenuEntry:
    command: str
    title: str
    subtitle: str


@dataclass(frozen=True)
class Mutation:
    """A mutating command: its candidate filter and the engine call it makes."""

    command: str
    noun: str
    candidate_title: str
    done_title: str
    participle: str
    call: Callable[[EngineClient, str], None]
    eligible: Callable[[ContainerRecord], bool] = lambda _container: True

    @property
    def verb(self) -> str:
        return self.candidate_title.split()[0].lower()


MAIN_MENU: Tuple[MenuEntry, ...] = (
    MenuEntry("containers", "List running containers", "Lists all running Docker containers"),
    MenuEntry("images", "List Docker images", "Lists all available Docker images"),
    MenuEntry("start", "Start a container", "Starts a stopped container by name or ID"),
    MenuEntry("stop", "Stop a container", "Stops a running container by name or ID"),
    MenuEntry("restart", "Restart a container", "Restarts a container by name or ID"),
    MenuEntry("remove", "Remove a container", "Removes a container by name or ID"),
    MenuEntry("rmi", "Remove an image", "Removes a Docker image by name or ID"),
    MenuEntry("prune", "Prune Docker resources", "Clean up unused Docker resources"),
    MenuEntry("logs", "View container logs", "Shows logs for a specific container"),
    MenuEntry("stats", "Container statistics", "Shows resource usage statistics for containers"),
)

# Insertion order is the order help results are listed in.
HELP_TABLE: Dict[str, str] = {
    "containers": "List all containers",
    "ps": "List all containers (alias)",
    "ls": "List all containers (alias)",
    "images": "List all images",
    "img": "List all images (alias)",
    "start": "Start a container",
    "stop": "Stop a container",
    "restart": "Restart a container",
    "remove": "Remove a container",
    "rm": "Remove a container (alias)",
    "rmi": "Remove an image",
    "prune": "Clean up unused Docker resources",
    "logs": "View container logs",
    "stats": "View container statistics",
}

ALIASES: Dict[str, str] = {
    "containers": "containers",
    "ps": "containers",
    "ls": "containers",
    "images": "images",
    "img": "images",
    "start": "start",
    "stop": "stop",
    "restart": "restart",
    "remove": "remove",
    "rm": "remove",
    "rmi": "rmi",
    "prune": "prune",
    "logs": "logs",
    "stats": "stats",
}


def _not_running(container: ContainerRecord) -> bool:
    return not container.is_running


def _running(container: ContainerRecord) -> bool:
    return container.is_running


CONTAINER_MUTATIONS: Dict[str, Mutation] = {
    "start": Mutation(
        command="start",
        noun="container",
        candidate_title="Start container",
        done_title="Started container",
        participle="started",
        call=lambda engine, ref: engine.start_container(ref),
        eligible=_not_running,
    ),
    "stop": Mutation(
        command="stop",
        noun="container",
        candidate_title="Stop container",
        done_title="Stopped container",
        participle="stopped",
        call=lambda engine, ref: engine.stop_container(ref),
        eligible=_running,
    ),
    "restart": Mutation(
        command="restart",
        noun="container",
        candidate_title="Restart container",
        done_title="Restarted container",
        participle="restarted",
        call=lambda engine, ref: engine.restart_container(ref),
    ),
    "remove": Mutation(
        command="remove",
        noun="container",
        candidate_title="Remove container",
        done_title="Removed container",
        participle="removed",
        call=lambda engine, ref: engine.remove_container(ref),
        eligible=_not_running,
    ),
}

IMAGE_REMOVAL = Mutation(
    command="rmi",
    noun="image",
    candidate_title="Remove image",
    done_title="Removed image",
    participle="removed",
    call=lambda engine, ref: engine.remove_image(ref),
)
