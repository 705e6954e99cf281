"""Interactive TUI menu for uni_finder using rich."""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from uni_finder.config import build_directory_client, load_config
from uni_finder.errors import InvalidSelection
from uni_finder.render import render_snapshot, state_filter_label
from uni_finder.search.filters import Category
from uni_finder.search.session import SearchSession, SessionState
from uni_finder.search.suggestions import POPULAR_COUNTRIES, suggest
from uni_finder.utils.logging_setup import setup_logging

console = Console()


MAIN_MENU_CHOICES = {
    "1": "Search by country",
    "2": "Filter by state/province",
    "3": "Filter by type",
    "4": "Clear filters",
    "5": "Exit",
}


def show_main_menu(session: SearchSession) -> str:
    """Display the main menu and return the user's choice."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", width=4)
    table.add_column("Action", style="white")
    for key, label in MAIN_MENU_CHOICES.items():
        table.add_row(key, label)

    subtitle = "Interactive Menu"
    if session.state is SessionState.SUCCESS:
        selection = session.selection
        subtitle = (
            f"{session.query}: "
            f"{selection.state_province or 'all states'}, {selection.category.value}"
        )

    console.print()
    console.print(
        Panel(table, title="[bold]University Finder[/bold]", subtitle=subtitle, border_style="blue")
    )
    return Prompt.ask(
        "Choose an option",
        choices=list(MAIN_MENU_CHOICES.keys()),
        default="1",
    )


def search_flow(session: SearchSession) -> None:
    """Ask for a country and run the search."""
    console.print("\n[bold]Search[/bold]", style="blue")
    console.print(f"  [dim]Try: {', '.join(POPULAR_COUNTRIES[:5])}[/dim]")

    country = Prompt.ask("Country", default="")
    matches = suggest(country)
    if matches and country.strip().lower() not in (m.lower() for m in matches):
        console.print(f"  [dim]Suggestions: {', '.join(matches)}[/dim]")

    asyncio.run(session.search(country))


def state_filter_flow(session: SearchSession) -> None:
    """Pick a state/province from the current facets."""
    console.print("\n[bold]Filter by State/Province[/bold]", style="blue")
    if session.state is not SessionState.SUCCESS:
        console.print("  [yellow]Search for a country first.[/yellow]")
        return

    facets = session.facets or ()
    console.print(f"  {state_filter_label(facets)}")
    if not facets:
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", width=4)
    table.add_column("State/Province", style="white")
    table.add_row("0", "All States/Provinces")
    for index, state in enumerate(facets, start=1):
        table.add_row(str(index), state)
    console.print(table)

    choice = Prompt.ask(
        "State/Province",
        choices=[str(i) for i in range(len(facets) + 1)],
        default="0",
    )
    state = None if choice == "0" else facets[int(choice) - 1]
    _change_filter(session, state_province=state)


def type_filter_flow(session: SearchSession) -> None:
    """Pick the public/private category."""
    console.print("\n[bold]Filter by Type[/bold]", style="blue")
    if session.state is not SessionState.SUCCESS:
        console.print("  [yellow]Search for a country first.[/yellow]")
        return

    category = Prompt.ask(
        "Type",
        choices=[c.value for c in Category],
        default=session.selection.category.value,
    )
    _change_filter(session, category=category)


def clear_filters_flow(session: SearchSession) -> None:
    """Reset both filters to their defaults."""
    if session.state is not SessionState.SUCCESS:
        console.print("  [yellow]Nothing to clear.[/yellow]")
        return
    _change_filter(session, state_province=None, category=Category.ALL)


def _change_filter(session: SearchSession, **changes) -> None:
    try:
        session.change_filter(**changes)
    except InvalidSelection as e:
        console.print(f"  [red]{escape(str(e))}[/red]")


DISPATCH = {
    "1": search_flow,
    "2": state_filter_flow,
    "3": type_filter_flow,
    "4": clear_filters_flow,
}


def interactive_menu(config_path: Path | None = None) -> int:
    """Run the interactive menu loop. Returns exit code."""
    config = load_config(config_path=config_path)
    logging_config = config.get("logging", {})
    setup_logging(
        level=logging_config.get("level", "WARNING"),
        log_file=logging_config.get("file"),
        console=False,
    )

    client = build_directory_client(config)
    session = SearchSession(client)
    session.subscribe(lambda snapshot: render_snapshot(snapshot, console))

    console.print("[bold blue]University Finder[/bold blue] - Interactive Mode\n", style="bold")

    try:
        while True:
            choice = show_main_menu(session)
            if choice == "5":
                console.print("\nGoodbye!", style="bold blue")
                return 0

            handler = DISPATCH.get(choice)
            if handler:
                handler(session)
            console.print()
    finally:
        client.http_client.close()
