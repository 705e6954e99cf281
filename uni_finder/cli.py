"""CLI entry point for uni_finder."""

import argparse
import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from uni_finder.config import build_directory_client, load_config
from uni_finder.errors import InvalidSelection
from uni_finder.render import render_snapshot, state_filter_label
from uni_finder.search.filters import Category
from uni_finder.search.session import SearchSession, SessionState
from uni_finder.utils.logging_setup import setup_logging


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="uni_finder",
        description="Search the public university directory by country",
    )
    parser.add_argument("--config", type=Path, help="Path to config YAML file")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- search command ---
    search_parser = subparsers.add_parser("search", help="Search universities in a country")
    search_parser.add_argument("country", help="Country name, e.g. 'India'")
    search_parser.add_argument(
        "--state",
        type=str,
        help="Only show this state/province (must name one of the result's states; case-insensitive)",
    )
    search_parser.add_argument(
        "--type",
        dest="category",
        choices=[c.value for c in Category],
        default=Category.ALL.value,
        help="Only show public or private universities (name heuristic)",
    )
    search_parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    search_parser.add_argument("--log-level", type=str, help="Log level (DEBUG, INFO, ...)")

    # --- menu command ---
    subparsers.add_parser("menu", help="Launch interactive menu")

    args = parser.parse_args(argv)

    if args.command is None or args.command == "menu":
        from uni_finder.interactive import interactive_menu
        return interactive_menu(config_path=args.config)

    if args.command == "search":
        return cmd_search(args)

    return 0


def cmd_search(args, console: Console | None = None) -> int:
    """Run one search, apply the requested filters and print the cards.

    Exit codes: 0 on results, 1 on blank input / not found / lookup
    failure, 2 when ``--state`` is not one of the result's states.
    """
    console = console or Console()
    config = load_config(
        config_path=getattr(args, "config", None),
        cli_overrides={
            "api.timeout": getattr(args, "timeout", None),
            "logging.level": getattr(args, "log_level", None),
        },
    )
    logging_config = config.get("logging", {})
    setup_logging(
        level=logging_config.get("level", "WARNING"),
        log_file=logging_config.get("file"),
    )

    client = build_directory_client(config)
    session = SearchSession(client)
    try:
        state = asyncio.run(session.search(args.country))
    finally:
        client.http_client.close()

    if state is not SessionState.SUCCESS:
        render_snapshot(session.snapshot(), console)
        return 1

    state_filter = _match_facet(getattr(args, "state", None), session.facets or ())
    category = getattr(args, "category", Category.ALL.value)
    try:
        session.change_filter(state_province=state_filter, category=category)
    except InvalidSelection as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        facets = session.facets or ()
        console.print(state_filter_label(facets))
        for facet in facets:
            console.print(f"  - {escape(facet)}")
        return 2

    render_snapshot(session.snapshot(), console)
    return 0


def _match_facet(state: str | None, facets: tuple[str, ...]) -> str | None:
    """Map *state* onto the facet it names, ignoring case and padding."""
    if not state:
        return state
    wanted = state.strip().casefold()
    for facet in facets:
        if facet.casefold() == wanted:
            return facet
    return state
