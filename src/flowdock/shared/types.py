"""Engine resource records surfaced to the query layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class ContainerState(Enum):
    """Lifecycle as far as filtering cares: running or not.

    The engine reports more states (``created``, ``exited``, ``paused``...);
    every one other than ``running`` folds into ``NOT_RUNNING``.
    """

    RUNNING = "running"
    NOT_RUNNING = "not_running"

    @classmethod
    def of(cls, reported: str) -> "ContainerState":
        return cls.RUNNING if reported.lower() == cls.RUNNING.value else cls.NOT_RUNNING


@dataclass(frozen=True)
class ContainerRecord:
    """A container as listed by the engine."""

    id: str
    names: Tuple[str, ...]
    state: str
    image: str

    @property
    def lifecycle(self) -> ContainerState:
        return ContainerState.of(self.state)

    @property
    def is_running(self) -> bool:
        return self.lifecycle is ContainerState.RUNNING

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ContainerRecord":
        return cls(
            id=str(data.get("Id") or ""),
            names=tuple(data.get("Names") or ()),
            state=str(data.get("State") or ""),
            image=str(data.get("Image") or ""),
        )


@dataclass(frozen=True)
class ImageRecord:
    """An image as listed by the engine."""

    id: str
    repo_tags: Tuple[str, ...]
    size: int

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ImageRecord":
        return cls(
            id=str(data.get("Id") or ""),
            repo_tags=tuple(data.get("RepoTags") or ()),
            size=int(data.get("Size") or 0),
        )


__all__ = ["ContainerRecord", "ContainerState", "ImageRecord"]
