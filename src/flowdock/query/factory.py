"""Suggestion construction shared by the query handlers."""

from __future__ import annotations

from typing import Optional, Union

from flowdock.shared.actions import NOOP_ACTION, EngineAction, RequeryAction
from flowdock.shared.suggestion import Suggestion
from flowdock.shared.types import ContainerRecord, ImageRecord

__all__ = ["SuggestionFactory"]

Resource = Optional[Union[ContainerRecord, ImageRecord]]


class SuggestionFactory:
    """Build suggestions carrying the host icon and action keyword."""

    def __init__(self, *, icon_path: str = "", action_keyword: str = "docker") -> None:
        self.icon_path = icon_path
        self.action_keyword = action_keyword.strip()

    def query_text(self, *parts: str, trailing_space: bool = False) -> str:
        """Return launcher text for ``parts``, prefixed by the action keyword.

        A trailing space leaves the launcher waiting for an argument; without
        it the text re-submits as a complete command.
        """
        words = [self.action_keyword, *parts] if self.action_keyword else list(parts)
        text = " ".join(words)
        return f"{text} " if trailing_space else text

    def requery(
        self,
        title: str,
        subtitle: str,
        *parts: str,
        trailing_space: bool = False,
        resource: Resource = None,
    ) -> Suggestion:
        return Suggestion(
            title=title,
            subtitle=subtitle,
            action=RequeryAction(self.query_text(*parts, trailing_space=trailing_space)),
            icon_path=self.icon_path,
            resource=resource,
        )

    def terminal(
        self, title: str, subtitle: str, action: EngineAction = NOOP_ACTION, *, score: int = 0
    ) -> Suggestion:
        return Suggestion(
            title=title,
            subtitle=subtitle,
            action=action,
            icon_path=self.icon_path,
            score=score,
        )

    def info(self, title: str, subtitle: str) -> Suggestion:
        return self.terminal(title, subtitle)

    def error(self, message: str, subtitle: str) -> Suggestion:
        return self.terminal(f"Error: {message}", subtitle)
