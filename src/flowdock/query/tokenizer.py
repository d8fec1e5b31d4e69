"""Split raw launcher text into a command keyword and argument tail."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

__all__ = ["ParsedQuery", "tokenize"]


@dataclass(frozen=True)
class ParsedQuery:
    keyword: str
    raw_keyword: str
    args: Tuple[str, ...] = ()

    @property
    def argument(self) -> str:
        """Arguments rejoined by single spaces, so names may contain spaces."""
        return " ".join(self.args)

    @property
    def has_argument(self) -> bool:
        return bool(self.args)


def tokenize(text: Optional[str]) -> Optional[ParsedQuery]:
    """Return the parsed query, or ``None`` when the text holds no tokens."""
    terms = (text or "").split()
    if not terms:
        return None
    return ParsedQuery(keyword=terms[0].lower(), raw_keyword=terms[0], args=tuple(terms[1:]))
