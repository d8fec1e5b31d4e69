#!/usr/bin/env python3
"""Flowdock console host.

A minimal stand-in for a launcher: it feeds query text to the dispatcher,
renders the suggestions, and executes a selected suggestion's action
through :class:`~flowdock.actions.ActionExecutor`.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from flowdock.actions import ActionExecutor
from flowdock.config import build_cli_config, load_config
from flowdock.engine.connection import EngineConnection, connect
from flowdock.query.dispatcher import Dispatcher
from flowdock.shared.actions import Action, RequeryAction
from flowdock.shared.suggestion import Suggestion
from flowdock.utils.structured_logging import setup_structured_logging
from flowdock.version import __version__

__all__ = ["ConsoleHost", "create_parser", "main", "run"]


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowdock",
        description="Query and manage Docker containers with launcher-style commands.",
        epilog=(
            "Examples:\n"
            "  flowdock                   # main menu\n"
            "  flowdock start             # stopped containers to start\n"
            "  flowdock start web         # start 'web' now\n"
            "  flowdock prune --select 1  # prune stopped containers\n"
            "  flowdock -i                # interactive prompt (:N selects, :q quits)\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("query", nargs="*", help="query text, e.g. 'stop web'")
    parser.add_argument("--select", type=int, metavar="N", help="run the action of suggestion N (1-based)")
    parser.add_argument("--json", action="store_true", help="emit suggestions as NDJSON")
    parser.add_argument("-i", "--interactive", action="store_true", help="run an interactive prompt")
    parser.add_argument("--config", type=Path, help="path to flowdock.yaml")
    parser.add_argument("--action-keyword", dest="action_keyword", help="launcher keyword prefixed to re-queries")
    parser.add_argument("--timeout", type=int, help="Docker API timeout in seconds")
    parser.add_argument("--logs-dir", dest="logs_dir", type=Path, help="directory for flowdock.jsonl")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--quiet", action="store_true", help="no log output on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _describe_action(action: Action) -> str:
    if isinstance(action, RequeryAction):
        return f"→ {action.query.rstrip()}"
    return action.op.value


class ConsoleHost:
    """Launcher stand-in that owns the current query text."""

    def __init__(
        self,
        dispatcher: Dispatcher,
        executor: ActionExecutor,
        console: Console,
        *,
        json_output: bool = False,
    ) -> None:
        self.dispatcher = dispatcher
        self.executor = executor
        self.console = console
        self.json_output = json_output
        self.query_text = ""
        self.suggestions: List[Suggestion] = []

    def change_query(self, query: str) -> None:
        self.query_text = query

    def search_text(self) -> str:
        """Query text as the dispatcher sees it, without the action keyword."""
        keyword = self.dispatcher.factory.action_keyword
        terms = self.query_text.split(maxsplit=1)
        if keyword and terms and terms[0] == keyword:
            return terms[1] if len(terms) > 1 else ""
        return self.query_text

    def run_query(self) -> List[Suggestion]:
        self.suggestions = self.dispatcher.query(self.search_text())
        self.render(self.suggestions)
        return self.suggestions

    def render(self, suggestions: List[Suggestion]) -> None:
        if self.json_output:
            for suggestion in suggestions:
                self.console.out(json.dumps(suggestion.to_dict()), highlight=False)
            return

        table = Table(title=escape(self.query_text.strip()) or None, show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Title", style="bold")
        table.add_column("Subtitle")
        table.add_column("Action", style="cyan")
        for index, suggestion in enumerate(suggestions, start=1):
            table.add_row(
                str(index),
                escape(suggestion.title),
                escape(suggestion.subtitle),
                escape(_describe_action(suggestion.action)),
            )
        self.console.print(table)

    def select(self, suggestions: List[Suggestion], number: int) -> int:
        """Execute suggestion ``number`` (1-based) and return an exit code."""
        if not 1 <= number <= len(suggestions):
            self.console.print(f"[red]No suggestion {number}; choose 1-{len(suggestions)}.[/red]")
            return 2

        suggestion = suggestions[number - 1]
        handled = self.executor.execute(suggestion.action, self)
        if not suggestion.action.is_terminal:
            self.run_query()
            return 0
        if handled:
            self.console.print(f"[green]✓[/green] {escape(suggestion.title)}")
            return 0
        self.console.print(f"[red]✗[/red] {escape(suggestion.title)} failed")
        return 1

    def interact(self) -> int:
        self.run_query()
        while True:
            try:
                line = self.console.input("[bold]flowdock>[/bold] ").strip()
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                return 0
            if line in (":q", ":quit"):
                return 0
            if line.startswith(":") and line[1:].isdigit():
                self.select(self.suggestions, int(line[1:]))
                continue
            self.change_query(line)
            self.run_query()


def run(
    args: argparse.Namespace,
    *,
    console: Optional[Console] = None,
    connection: Optional[EngineConnection] = None,
) -> int:
    console = console or Console()
    try:
        config = load_config(cli_args=build_cli_config(args), config_path=args.config)
    except ValueError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        return 2

    log_config = config["logging"]
    setup_structured_logging(
        log_config["logs_dir"], log_config["level"], debug=args.debug, quiet=args.quiet
    )

    owns_connection = connection is None
    if connection is None:
        connection = connect(api_timeout=config["engine"]["api_timeout"])
    try:
        dispatcher = Dispatcher(
            connection,
            icon_path=config["icon_path"],
            action_keyword=config["action_keyword"],
        )
        executor = ActionExecutor(connection, cli_binary=config["engine"]["cli_binary"])
        host = ConsoleHost(dispatcher, executor, console, json_output=args.json)
        host.change_query(" ".join(args.query))

        if args.interactive:
            return host.interact()
        suggestions = host.run_query()
        if args.select is not None:
            return host.select(suggestions, args.select)
        return 0
    finally:
        if owns_connection:
            connection.close()


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint."""
    parser = create_parser()
    args = parser.parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
