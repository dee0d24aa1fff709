"""Event resolver: picks the rule that classifies a whole play.

``parse_play`` is total. Whatever the input, it returns an event: the
first rule in the season's rule set that consumes the entire normalised
text, or ``UnparsedEvent`` carrying the original text when none does, when
the text is blank, or when the season tag has no rule set.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mmolb_parsing.domain.errors import IncompleteMatch, NoMatch, ParseFailure, UnknownSeason
from mmolb_parsing.domain.events import UnparsedEvent
from mmolb_parsing.domain.raw_play import RawPlay
from mmolb_parsing.domain.result import Err, Ok
from mmolb_parsing.domain.season import PlaySource, Season
from mmolb_parsing.parsing.normalize import normalize
from mmolb_parsing.parsing.rule_sets import get_rule_set

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mmolb_parsing.domain.events import Event
    from mmolb_parsing.domain.result import Result
    from mmolb_parsing.parsing.rule_sets import Rule, RuleSet

logger = logging.getLogger(__name__)


def match_rule(rule: Rule, text: str) -> Result[Event, NoMatch | IncompleteMatch]:
    """Run one rule against the whole of ``text``.

    A rule that matches only a prefix is an ``IncompleteMatch``: it never
    classifies the play.
    """
    result = rule.parser(text, 0)
    if isinstance(result, Err):
        return result
    event, end = result.value
    if end != len(text):
        leftover = text[end:]
        return Err(
            IncompleteMatch(message=f"rule '{rule.name}' left {leftover!r} unconsumed", position=end, leftover=leftover)
        )
    return Ok(event)


def explain(text: str, rule_set: RuleSet) -> list[tuple[str, Result[Event, ParseFailure]]]:
    """Outcome of every rule in ``rule_set`` against ``text``, in declared order."""
    outcomes: list[tuple[str, Result[Event, ParseFailure]]] = []
    for rule in rule_set.rules:
        try:
            outcome: Result[Event, ParseFailure] = match_rule(rule, text)
        except Exception as e:
            outcome = Err(ParseFailure(message=f"rule '{rule.name}' raised {type(e).__name__}: {e}"))
        outcomes.append((rule.name, outcome))
    return outcomes


def resolve(text: str, rule_set: RuleSet) -> Result[Event, ParseFailure]:
    """First full match in declared order, or the failure that got furthest."""
    furthest: NoMatch | IncompleteMatch | None = None
    for rule in rule_set.rules:
        try:
            outcome = match_rule(rule, text)
        except Exception:
            logger.warning("Rule '%s' raised on %r; treating it as no match", rule.name, text, exc_info=True)
            continue
        match outcome:
            case Ok():
                return outcome
            case Err(error) if furthest is None or error.position > furthest.position:
                furthest = error
    if furthest is None:
        return Err(ParseFailure(message=f"no rule in the {rule_set.season} {rule_set.source} rule set ran"))
    return Err(furthest)


def select_rule_set(play: RawPlay) -> Result[RuleSet, UnknownSeason]:
    season = Season.from_tag(play.season)
    rule_set = get_rule_set(play.source, season) if season is not None else None
    if rule_set is None:
        return Err(
            UnknownSeason(message=f"no {play.source} rule set for season tag {play.season!r}", tag=str(play.season))
        )
    return Ok(rule_set)


def parse_play(play: RawPlay) -> Event:
    """Classify one play. Never raises for text input."""
    selected = select_rule_set(play)
    if isinstance(selected, Err):
        logger.debug("%s; leaving play unparsed", selected.error.message)
        return UnparsedEvent.from_raw(play)

    text = normalize(play.text)
    if not text:
        return UnparsedEvent.from_raw(play)

    match resolve(text, selected.value):
        case Ok(event):
            return event
        case Err(failure):
            logger.debug("Unrecognised %s play %r (%s)", play.source, play.text, failure.message)
            return UnparsedEvent.from_raw(play)


def parse_text(text: str, season: str | int, source: PlaySource = PlaySource.GAME) -> Event:
    return parse_play(RawPlay(text=text, season=str(season), source=source))


def parse_plays(plays: Iterable[RawPlay]) -> list[Event]:
    return [parse_play(play) for play in plays]
