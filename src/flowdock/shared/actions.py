"""Actions bound to suggestions.

An action is either a re-query (rewrite the launcher text and run the
pipeline again) or a terminal engine operation. Actions are plain values:
they hold no client handles, so they can be compared, serialized and
inspected in tests without running anything. ``flowdock.actions`` is the
single place that executes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Union


class EngineOp(Enum):
    """Terminal operations a suggestion can carry."""

    NOOP = "noop"
    PRUNE_CONTAINERS = "prune_containers"
    PRUNE_IMAGES = "prune_images"
    PRUNE_VOLUMES = "prune_volumes"
    PRUNE_NETWORKS = "prune_networks"


@dataclass(frozen=True)
class RequeryAction:
    """Replace the host query with ``query`` and re-run the pipeline."""

    query: str

    @property
    def is_terminal(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "requery", "query": self.query}


@dataclass(frozen=True)
class EngineAction:
    """Perform one engine operation when selected."""

    op: EngineOp
    target: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "engine", "op": self.op.value, "target": self.target}


Action = Union[RequeryAction, EngineAction]

NOOP_ACTION = EngineAction(EngineOp.NOOP)


class QueryHost(Protocol):
    """Launcher callbacks consumed by re-query actions."""

    def change_query(self, query: str) -> None: ...


__all__ = [
    "Action",
    "EngineAction",
    "EngineOp",
    "NOOP_ACTION",
    "QueryHost",
    "RequeryAction",
]
