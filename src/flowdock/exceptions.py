"""Flowdock exception hierarchy."""

from __future__ import annotations

__all__ = [
    "EngineCallError",
    "EngineError",
    "EngineUnavailable",
    "FlowdockError",
]


class FlowdockError(Exception):
    """Base class for Flowdock exceptions."""


class EngineError(FlowdockError):
    """Raised when the Docker engine cannot serve a request."""


class EngineUnavailable(EngineError):
    """Raised when the engine probe failed at startup."""


class EngineCallError(EngineError):
    """Raised when a single engine call fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
