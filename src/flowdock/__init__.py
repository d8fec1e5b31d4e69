"""Flowdock public API surface.

Launcher hosts need only the dispatcher, the action executor and the
connection factory; everything else should be considered internal.
"""

from .actions import ActionExecutor
from .engine.connection import EngineConnection, connect
from .query.dispatcher import Dispatcher
from .shared import EngineAction, EngineOp, RequeryAction, Suggestion
from .version import __version__

__all__ = [
    "ActionExecutor",
    "Dispatcher",
    "EngineAction",
    "EngineConnection",
    "EngineOp",
    "RequeryAction",
    "Suggestion",
    "__version__",
    "connect",
]
