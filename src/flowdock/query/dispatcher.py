"""
Query dispatcher.

Routes a tokenized launcher query to its command handler. Every mutating
command follows the same rule: without an argument it lists eligible
targets as re-query suggestions, with an argument it performs the engine
call immediately and reports the outcome as a single terminal suggestion.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from flowdock.engine.client import EngineClient
from flowdock.engine.connection import EngineConnection
from flowdock.query import handlers, listing
from flowdock.query.commands import (
    ALIASES,
    CONTAINER_MUTATIONS,
    HELP_TABLE,
    IMAGE_REMOVAL,
    MAIN_MENU,
    Mutation,
)
from flowdock.query.factory import SuggestionFactory
from flowdock.query.tokenizer import ParsedQuery, tokenize
from flowdock.shared.suggestion import Suggestion

__all__ = ["Dispatcher", "UNAVAILABLE_SUBTITLE", "UNAVAILABLE_TITLE"]

logger = logging.getLogger(__name__)

UNAVAILABLE_TITLE = "Docker is not running"
UNAVAILABLE_SUBTITLE = "Please start Docker Desktop or the Docker service"

Handler = Callable[[EngineClient, ParsedQuery], List[Suggestion]]


class Dispatcher:
    """Translate launcher text into suggestions."""

    def __init__(
        self,
        connection: EngineConnection,
        *,
        icon_path: str = "",
        action_keyword: str = "docker",
    ) -> None:
        self.connection = connection
        self.factory = SuggestionFactory(icon_path=icon_path, action_keyword=action_keyword)
        self._handlers: Dict[str, Handler] = {
            "containers": lambda engine, _q: listing.list_containers(engine, self.factory),
            "images": lambda engine, _q: listing.list_images(engine, self.factory),
            "start": self._container_mutation(CONTAINER_MUTATIONS["start"]),
            "stop": self._container_mutation(CONTAINER_MUTATIONS["stop"]),
            "restart": self._container_mutation(CONTAINER_MUTATIONS["restart"]),
            "remove": self._container_mutation(CONTAINER_MUTATIONS["remove"]),
            "rmi": self._remove_image,
            "prune": lambda _engine, _q: handlers.prune_menu(self.factory),
            "logs": self._logs,
            "stats": lambda _engine, _q: handlers.stats_placeholder(self.factory),
        }

    def query(self, text: str) -> List[Suggestion]:
        """Return the ordered, never-empty suggestion list for ``text``."""
        if not self.connection.is_available():
            return [self.factory.terminal(UNAVAILABLE_TITLE, UNAVAILABLE_SUBTITLE, score=100)]

        parsed = tokenize(text)
        if parsed is None:
            return self.main_menu()

        command = ALIASES.get(parsed.keyword)
        if command is None:
            logger.debug("No command for %r; showing help", parsed.raw_keyword)
            return self.help(parsed.raw_keyword)

        logger.debug("Dispatching %s (argument=%r)", command, parsed.argument)
        engine = self.connection.client
        assert engine is not None
        return self._handlers[command](engine, parsed)

    def main_menu(self) -> List[Suggestion]:
        return [
            self.factory.requery(entry.title, entry.subtitle, entry.command, trailing_space=True)
            for entry in MAIN_MENU
        ]

    def help(self, typed: str) -> List[Suggestion]:
        """Commands whose keyword or description contains ``typed`` (case-sensitive)."""
        results = [
            self.factory.requery(keyword, description, keyword, trailing_space=True)
            for keyword, description in HELP_TABLE.items()
            if typed in keyword or typed in description
        ]
        if not results:
            hint = self.factory.action_keyword or "an empty query"
            results.append(
                self.factory.info(
                    f"Unknown command: {typed}", f"Type '{hint}' to see available commands"
                )
            )
        return results

    def _container_mutation(self, mutation: Mutation) -> Handler:
        def handle(engine: EngineClient, parsed: ParsedQuery) -> List[Suggestion]:
            if not parsed.has_argument:
                return listing.containers_for_action(
                    engine,
                    self.factory,
                    mutation.command,
                    mutation.candidate_title,
                    mutation.eligible,
                    mutation.participle,
                )
            return handlers.mutate(engine, self.factory, mutation, parsed.argument)

        return handle

    def _remove_image(self, engine: EngineClient, parsed: ParsedQuery) -> List[Suggestion]:
        if not parsed.has_argument:
            return listing.images_for_removal(engine, self.factory)
        return handlers.mutate(engine, self.factory, IMAGE_REMOVAL, parsed.argument)

    def _logs(self, engine: EngineClient, parsed: ParsedQuery) -> List[Suggestion]:
        if not parsed.has_argument:
            return listing.containers_for_action(
                engine, self.factory, "logs", "View logs for", lambda _c: True, "viewed"
            )
        return handlers.logs_placeholder(self.factory, parsed.argument)
