"""Single dispatch point for suggestion actions."""

from __future__ import annotations

import logging
import subprocess

from flowdock.engine import cli_fallback
from flowdock.engine.connection import EngineConnection
from flowdock.exceptions import EngineError
from flowdock.shared.actions import Action, EngineAction, EngineOp, QueryHost, RequeryAction

__all__ = ["ActionExecutor"]

logger = logging.getLogger(__name__)


class ActionExecutor:
    """Run the action bound to a selected suggestion.

    ``execute`` returns the launcher's "handled" flag: ``False`` for a
    re-query (keep the launcher open with the new text), otherwise whether
    the engine operation succeeded. Failures never propagate to the host.
    """

    def __init__(
        self,
        connection: EngineConnection,
        *,
        cli_binary: str = "docker",
        spawner: cli_fallback.Spawner = subprocess.Popen,
    ) -> None:
        self.connection = connection
        self.cli_binary = cli_binary
        self.spawner = spawner

    def execute(self, action: Action, host: QueryHost) -> bool:
        if isinstance(action, RequeryAction):
            host.change_query(action.query)
            return False
        if isinstance(action, EngineAction):
            return self._run_engine_op(action)
        raise TypeError(f"Unsupported action: {action!r}")

    def _run_engine_op(self, action: EngineAction) -> bool:
        op = action.op
        if op is EngineOp.NOOP:
            return True
        if op is EngineOp.PRUNE_VOLUMES:
            return cli_fallback.prune_volumes(self.cli_binary, spawner=self.spawner)
        if op is EngineOp.PRUNE_NETWORKS:
            return cli_fallback.prune_networks(self.cli_binary, spawner=self.spawner)

        client = self.connection.client
        if client is None:
            logger.warning("Cannot run %s: Docker engine unavailable", op.value)
            return False
        try:
            if op is EngineOp.PRUNE_CONTAINERS:
                client.prune_containers()
            elif op is EngineOp.PRUNE_IMAGES:
                client.prune_images()
            else:
                raise TypeError(f"Unsupported engine operation: {op!r}")
        except EngineError as exc:
            logger.warning("%s failed: %s", op.value, exc)
            return False
        return True
