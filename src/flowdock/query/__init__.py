"""Query parsing and command dispatch."""

from flowdock.query.dispatcher import Dispatcher
from flowdock.query.tokenizer import ParsedQuery, tokenize

__all__ = ["Dispatcher", "ParsedQuery", "tokenize"]
