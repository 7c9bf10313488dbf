#!/usr/bin/env python
"""Interactive CLI for searching Hacker News stories."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from story_search.app import SearchApp
from story_search.config import (
    StorySearchConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from story_search.data import StoriesState

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Type text to change the query (filters the list as you type).\n"
    "Start with // to type a query beginning with /.\n"
    "  /submit        fetch stories for the current query\n"
    "  /dismiss <id>  remove a story from the list\n"
    "  /show          print the list again\n"
    "  /quit          exit"
)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path
    log: bool = False
    log_dir: str = "logs"
    verbose: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def parse_command(line: str) -> tuple[str, str]:
    """Split an input line into (command, argument).

    Lines not starting with ``/`` are query input: ``("input", line)``. A
    leading ``//`` types a literal ``/``.
    """
    line = line.rstrip("\r\n")
    if line.startswith("//"):
        return ("input", line[1:])
    if not line.startswith("/"):
        return ("input", line)
    command, _, argument = line[1:].partition(" ")
    return (command.lower(), argument.strip())


def render(app: SearchApp) -> str:
    """Render the current state as text."""
    state = app.state
    lines = [f"Search: {app.query}"]
    if state.is_error:
        lines.append("Something went wrong ...")
    if state.is_loading:
        lines.append("Loading ...")
    else:
        for story in app.visible_stories:
            lines.append(f"  {story.title}")
            lines.append(
                f"    {story.url or '-'} | {story.author or '-'} | "
                f"{story.num_comments} comments | {story.points} points | id {story.story_id}"
            )
    return "\n".join(lines)


def handle(app: SearchApp, command: str, argument: str) -> bool:
    """Apply one command to ``app``. Returns False when the session should end."""
    if command == "input":
        app.on_query_input(argument)
        print(render(app))
    elif command == "submit":
        if not app.can_submit:
            print("Enter a query before submitting.")
        else:
            app.on_query_submit()
    elif command == "dismiss":
        if not argument:
            print("Usage: /dismiss <id>")
        else:
            app.on_remove(argument)
    elif command == "show":
        print(render(app))
    elif command in ("quit", "exit"):
        return False
    else:
        print(HELP_TEXT)
    return True


async def run(args: CLIArgs, config: StorySearchConfig) -> SearchApp:
    """Run an interactive session with the given configuration.

    Args:
        args: Validated CLI arguments.
        config: Loaded configuration.

    Returns:
        The app, with any fetches still in flight.
    """
    app, session_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Config: {args.config}")
    print(HELP_TEXT)

    def on_change(state: StoriesState) -> None:
        print(render(app))

    app.subscribe(on_change)
    if session_logger:
        session_logger.start_session(app.query)
    app.start()

    try:
        while True:
            line = await asyncio.to_thread(sys.stdin.readline)
            if not line:
                break
            if not handle(app, *parse_command(line)):
                break
    finally:
        if session_logger:
            path = session_logger.finish_session(app.query, app.state)
            if path:
                logger.info(f"\nSession log written to: {path}")
    return app


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search Hacker News stories interactively.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable JSON session logging of state events",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Show debug logging",
    )

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            config=config_path,
            log=ns.log,
            log_dir=ns.log_dir,
            verbose=ns.verbose,
        )
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.error(f"Invalid config {args.config}: {e}")
        sys.exit(1)

    try:
        asyncio.run(run(args, config))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
