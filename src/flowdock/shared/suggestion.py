"""Suggestion returned to the launcher for a query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .actions import Action
from .types import ContainerRecord, ImageRecord


@dataclass
class Suggestion:
    """One candidate entry shown by the host, bound to exactly one action."""

    title: str
    subtitle: str
    action: Action
    icon_path: str = ""
    score: int = 0
    # Host-side context only; never mutated here.
    resource: Optional[Union[ContainerRecord, ImageRecord]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "subtitle": self.subtitle,
            "icon_path": self.icon_path,
            "score": self.score,
            "action": self.action.to_dict(),
        }
        if self.resource is not None:
            data["resource_id"] = self.resource.id
        return data


__all__ = ["Suggestion"]
