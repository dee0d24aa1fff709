from pathlib import Path
from typing import Annotated

import httpx
import typer

from mmolb_parsing.cli._logging import configure_logging
from mmolb_parsing.cli._output import (
    console,
    print_differences,
    print_error,
    print_event,
    print_explanation,
    print_parse_summary,
)
from mmolb_parsing.cli.factory import build_game_source
from mmolb_parsing.config import create_config, default_season
from mmolb_parsing.domain.raw_play import RawPlay
from mmolb_parsing.domain.result import Err, Ok
from mmolb_parsing.domain.season import PlaySource
from mmolb_parsing.ingest.mmolb_source import GameDocumentError
from mmolb_parsing.parsing.normalize import normalize, split_plays, split_sentences
from mmolb_parsing.parsing.resolver import explain as explain_rules
from mmolb_parsing.parsing.resolver import parse_play, parse_plays, select_rule_set
from mmolb_parsing.serialization.diff import diff_snapshots
from mmolb_parsing.serialization.snapshot import SnapshotRecord, build_snapshot, dump_snapshot, load_snapshot

app = typer.Typer(name="mmolb", help="MMOLB play-text parser")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """MMOLB play-text parser."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_TextArg = Annotated[str, typer.Argument(help="Play text, exactly as it appeared in the feed")]
_PathArg = Annotated[Path, typer.Argument(help="Text file with one play per line")]
_SeasonOpt = Annotated[str | None, typer.Option("--season", help="Season tag such as S1 (default from config)")]
_SourceOpt = Annotated[PlaySource, typer.Option("--source", help="Which feed the text came from")]


def _season(season: str | None) -> str:
    return season if season is not None else default_season(create_config())


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        print_error(f"{path} is not UTF-8 text: {e.reason} at byte {e.start}")
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(f"cannot read {path}: {e.strerror or e}")
        raise typer.Exit(code=1) from e


def _load_records(path: Path) -> list[SnapshotRecord]:
    match load_snapshot(_read_text(path)):
        case Ok(records):
            return records
        case Err(e):
            print_error(f"{path}: {e.message} (at {e.path})")
            raise typer.Exit(code=1)


@app.command()
def parse(text: _TextArg, season: _SeasonOpt = None, source: _SourceOpt = PlaySource.GAME) -> None:
    """Parse one play and print its JSON encoding."""
    print_event(parse_play(RawPlay(text=text, season=_season(season), source=source)))


@app.command("parse-file")
def parse_file(path: _PathArg, season: _SeasonOpt = None, source: _SourceOpt = PlaySource.GAME) -> None:
    """Parse every line of a file and summarise what was recognised."""
    plays = split_plays(_read_text(path), _season(season), source)
    print_parse_summary(parse_plays(plays))


@app.command()
def explain(text: _TextArg, season: _SeasonOpt = None, source: _SourceOpt = PlaySource.GAME) -> None:
    """Show how every rule for the season handled a play."""
    play = RawPlay(text=text, season=_season(season), source=source)
    match select_rule_set(play):
        case Ok(rule_set):
            normalized = normalize(text)
            print_explanation(split_sentences(normalized), explain_rules(normalized, rule_set))
            console.print("[bold]Result:[/bold] ", end="")
            print_event(parse_play(play))
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@app.command()
def fetch(
    game_id: Annotated[str, typer.Argument(help="MMOLB game id")],
    refresh: Annotated[bool, typer.Option("--refresh", help="Ignore any cached copy")] = False,
) -> None:
    """Fetch a game from the MMOLB API and summarise its parsed plays."""
    source = build_game_source(create_config())
    try:
        plays = source.fetch_game(game_id, refresh=refresh)
    except (httpx.HTTPError, GameDocumentError) as e:
        print_error(f"could not fetch game {game_id}: {e}")
        raise typer.Exit(code=1) from e
    print_parse_summary(parse_plays(plays))


@app.command()
def snapshot(
    path: _PathArg,
    output: Annotated[Path, typer.Option("--output", "-o", help="Where to write the snapshot")],
    season: _SeasonOpt = None,
    source: _SourceOpt = PlaySource.GAME,
) -> None:
    """Parse a file of plays and record the results as a snapshot."""
    records = build_snapshot(split_plays(_read_text(path), _season(season), source))
    output.write_text(dump_snapshot(records), encoding="utf-8")
    console.print(f"Wrote {len(records)} records to {output}")


@app.command()
def check(
    snapshot_path: Annotated[Path, typer.Argument(help="Snapshot file to verify")],
    against: Annotated[
        Path | None, typer.Option("--against", help="Compare with this snapshot instead of re-parsing")
    ] = None,
) -> None:
    """Re-parse a snapshot's plays and report every event that changed."""
    old = _load_records(snapshot_path)
    new = _load_records(against) if against is not None else build_snapshot(record.to_play() for record in old)
    differences = diff_snapshots(old, new)
    print_differences(differences)
    if differences:
        raise typer.Exit(code=1)
