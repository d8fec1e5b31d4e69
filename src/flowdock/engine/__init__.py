"""Docker engine access for Flowdock."""

from flowdock.engine.client import AsyncEngine, EngineClient
from flowdock.engine.connection import EngineConnection, connect
from flowdock.exceptions import EngineCallError, EngineUnavailable

__all__ = [
    "AsyncEngine",
    "EngineCallError",
    "EngineClient",
    "EngineConnection",
    "EngineUnavailable",
    "connect",
]
