"""Direct mutations, the prune menu and placeholder commands."""

from __future__ import annotations

import logging
from typing import List

from flowdock.engine.client import EngineClient
from flowdock.exceptions import EngineCallError
from flowdock.query.commands import Mutation
from flowdock.query.factory import SuggestionFactory
from flowdock.shared.actions import EngineAction, EngineOp
from flowdock.shared.suggestion import Suggestion

__all__ = ["logs_placeholder", "mutate", "prune_menu", "stats_placeholder"]

logger = logging.getLogger(__name__)


def mutate(
    engine: EngineClient,
    factory: SuggestionFactory,
    mutation: Mutation,
    target: str,
) -> List[Suggestion]:
    """Run ``mutation`` against ``target`` now and report the outcome."""
    try:
        mutation.call(engine, target)
    except EngineCallError as exc:
        logger.warning("%s %s failed: %s", mutation.command, target, exc.message)
        return [factory.error(exc.message, f"Failed to {mutation.verb} {mutation.noun} {target}")]

    return [
        factory.info(
            f"{mutation.done_title}: {target}",
            f"{mutation.noun.capitalize()} successfully {mutation.participle}",
        )
    ]


def prune_menu(factory: SuggestionFactory) -> List[Suggestion]:
    return [
        factory.terminal(
            "Prune containers",
            "Remove all stopped containers",
            EngineAction(EngineOp.PRUNE_CONTAINERS),
        ),
        factory.terminal(
            "Prune images", "Remove unused images", EngineAction(EngineOp.PRUNE_IMAGES)
        ),
        factory.terminal(
            "Prune volumes", "Remove unused volumes", EngineAction(EngineOp.PRUNE_VOLUMES)
        ),
        factory.terminal(
            "Prune networks", "Remove unused networks", EngineAction(EngineOp.PRUNE_NETWORKS)
        ),
    ]


def logs_placeholder(factory: SuggestionFactory, target: str) -> List[Suggestion]:
    return [
        factory.info(
            f"View logs for: {target}",
            "Click to open logs window (Not implemented in this version)",
        )
    ]


def stats_placeholder(factory: SuggestionFactory) -> List[Suggestion]:
    return [
        factory.info(
            "View container statistics",
            "Click to open stats window (Not implemented in this version)",
        )
    ]
