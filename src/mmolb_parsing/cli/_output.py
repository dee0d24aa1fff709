from collections import Counter

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from mmolb_parsing.domain.errors import IncompleteMatch, NoMatch, ParseFailure
from mmolb_parsing.domain.events import Event, UnparsedEvent
from mmolb_parsing.domain.result import Err, Ok, Result
from mmolb_parsing.serialization.codec import encode_event
from mmolb_parsing.serialization.diff import DifferenceKind, SnapshotDifference

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {escape(message)}")


def print_event(event: Event) -> None:
    console.print(encode_event(event), markup=False, soft_wrap=True)


def print_parse_summary(events: list[Event]) -> None:
    """Variant counts, then every play no rule recognised."""
    if not events:
        console.print("No plays found.")
        return
    counts = Counter(type(event).__name__ for event in events)
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Event")
    table.add_column("Count", justify="right")
    for name, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
        table.add_row(name, str(count))
    console.print(table)

    unparsed = [event for event in events if isinstance(event, UnparsedEvent)]
    parsed = len(events) - len(unparsed)
    console.print(f"Parsed {parsed} of {len(events)} plays")
    for event in unparsed:
        console.print(f"  [yellow]unparsed[/yellow] @{event.start}: ", end="")
        console.print(event.text, markup=False, soft_wrap=True)


def _describe_outcome(outcome: Result[Event, ParseFailure]) -> str:
    match outcome:
        case Ok(event):
            return f"matched {type(event).__name__}"
        case Err(IncompleteMatch(position=position, leftover=leftover)):
            return f"matched a prefix; {leftover!r} left at {position}"
        case Err(NoMatch(position=position, expected=expected)):
            return f"declined at {position}: expected {expected}"
        case Err(failure):
            return failure.message


def print_explanation(sentences: tuple[str, ...], outcomes: list[tuple[str, Result[Event, ParseFailure]]]) -> None:
    console.print("[bold]Sentences:[/bold]")
    for sentence in sentences:
        console.print(f"  {sentence}", markup=False, soft_wrap=True)
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Rule")
    table.add_column("Outcome")
    for name, outcome in outcomes:
        table.add_row(name, Text(_describe_outcome(outcome)))
    console.print(table)


def print_differences(differences: list[SnapshotDifference]) -> None:
    if not differences:
        console.print("[green]No differences.[/green]")
        return
    colors = {DifferenceKind.CHANGED: "yellow", DifferenceKind.ADDED: "green", DifferenceKind.REMOVED: "red"}
    for difference in differences:
        color = colors[difference.kind]
        where = escape(f"({difference.season}, {difference.source})")
        console.print(f"[{color}]{difference.kind}[/{color}] {where}: ", end="")
        console.print(difference.text, markup=False, soft_wrap=True)
        if difference.paths:
            console.print(f"  fields: {', '.join(difference.paths)}", markup=False, soft_wrap=True)
    console.print(f"{len(differences)} difference(s)")
