"""Aggregated shared types and interfaces."""

from flowdock.shared.actions import (
    NOOP_ACTION,
    Action,
    EngineAction,
    EngineOp,
    QueryHost,
    RequeryAction,
)
from flowdock.shared.suggestion import Suggestion
from flowdock.shared.types import ContainerRecord, ContainerState, ImageRecord

__all__ = [
    "Action",
    "ContainerRecord",
    "ContainerState",
    "EngineAction",
    "EngineOp",
    "ImageRecord",
    "NOOP_ACTION",
    "QueryHost",
    "RequeryAction",
    "Suggestion",
]
