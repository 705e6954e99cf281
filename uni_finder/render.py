"""Terminal rendering of search sessions using rich."""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from uni_finder.data.models import UniversityRecord
from uni_finder.search.classifier import Classification, classify
from uni_finder.search.session import SessionSnapshot, SessionState

BADGE_STYLES = {
    Classification.PUBLIC: "bold green",
    Classification.PRIVATE: "bold magenta",
    Classification.UNKNOWN: "dim",
}


def results_summary(shown: int, total: int) -> str:
    """Describe how many of the fetched universities are on screen."""
    if total == 0:
        return "Ready to search universities worldwide"
    if shown == total:
        return f"Found {total} universities"
    return f"Showing {shown} of {total} universities"


def state_filter_label(facets: tuple[str, ...]) -> str:
    """Heading for the state/province picker."""
    if not facets:
        return "No state data available"
    return f"All States/Provinces ({len(facets)} available)"


def render_card(record: UniversityRecord) -> Panel:
    """Build a card for one university.

    Optional rows (state/province, domain, website) are only shown when
    the record has a value for them.
    """
    kind = classify(record.name)
    lines = [
        Text.assemble(("Country: ", "bold"), record.display_country),
    ]
    if record.state_province:
        lines.append(Text.assemble(("State/Province: ", "bold"), record.state_province))
    if record.primary_domain:
        lines.append(Text.assemble(("Domain: ", "bold"), record.primary_domain))
    if record.website:
        lines.append(
            Text(record.website, style=Style(link=record.website, underline=True, color="cyan"))
        )

    return Panel(
        Group(*lines),
        title=Text(record.name, style="bold"),
        subtitle=Text(kind.value, style=BADGE_STYLES[kind]),
        border_style="blue",
        width=48,
    )


def render_snapshot(snapshot: SessionSnapshot, console: Console) -> None:
    """Print the message, result summary and cards for *snapshot*."""
    if snapshot.state is SessionState.LOADING:
        console.print(f"[yellow]Searching for {escape(snapshot.query)}...[/yellow]")
        return

    if snapshot.message:
        if snapshot.error_kind is None:
            console.print(f"[green]✓ {escape(snapshot.message)}[/green]")
        else:
            console.print(f"[red]⚠ {escape(snapshot.message)}[/red]")

    if snapshot.state is not SessionState.SUCCESS:
        return

    console.print(
        f"[bold]{results_summary(len(snapshot.records), snapshot.total)}[/bold]"
    )
    if not snapshot.records:
        console.print("[yellow]No universities match the current filters.[/yellow]")
        return
    console.print(Columns([render_card(r) for r in snapshot.records]))
