"""Season-scoped, ordered rule sets.

Each (source, season) pair owns one ordered tuple of rules. Declared order
is the precedence: the resolver returns the first rule that consumes the
whole play, so rules are listed most specific first and rules a later
season introduces are appended after the ones it inherits.

The tables are built once at import and exposed read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from mmolb_parsing.domain.season import PlaySource, Season
from mmolb_parsing.parsing import feed, plays

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mmolb_parsing.domain.events import Event
    from mmolb_parsing.parsing.combinators import Parser


@dataclass(frozen=True)
class Rule:
    name: str
    parser: Parser[Event]


@dataclass(frozen=True)
class RuleSet:
    season: Season
    source: PlaySource
    rules: tuple[Rule, ...]

    def extended(self, *rules: Rule, season: Season | None = None) -> RuleSet:
        """A copy with ``rules`` appended after the existing ones."""
        taken = {rule.name for rule in self.rules}
        for rule in rules:
            if rule.name in taken:
                raise ValueError(f"Rule '{rule.name}' is already in the {self.source} rule set")
            taken.add(rule.name)
        return RuleSet(season=season or self.season, source=self.source, rules=self.rules + rules)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)


def _rules(module: object, *names: str) -> tuple[Rule, ...]:
    return tuple(Rule(name=name, parser=getattr(module, name)) for name in names)


_GAME_S1 = RuleSet(
    season=Season.S1,
    source=PlaySource.GAME,
    rules=_rules(
        plays,
        "game_start",
        "game_end",
        "inning_start",
        "inning_end",
        "now_batting",
        "ball",
        "strike",
        "foul",
        "walk",
        "hit_by_pitch",
        "strikeout",
        "home_run",
        "hit_advancing",
        "hit",
        "fielding_out",
        "double_play",
        "fielders_choice",
        "sacrifice_fly",
        "stolen_base",
        "caught_stealing",
        "wild_pitch",
        "run_scored",
        "substitution",
        "injury",
        "announcement",
        "falling_star",
    ),
)

_GAME_S2 = _GAME_S1.extended(*_rules(plays, "rain_delay", "fog"), season=Season.S2)

_GAME_S3 = _GAME_S2.extended(
    *_rules(plays, "pitched_strikeout", "pitched_hit", "pitched_fielding_out", "item_stolen", "lightning"),
    season=Season.S3,
)

_GAME_FEED = _rules(feed, "game_result", "delivery") + _rules(plays, "falling_star")

_AUGMENT_S1 = _rules(
    feed,
    "attribute_gain",
    "enchantment_legacy",
    "enchantment_success",
    "robo",
    "attribute_equal_base",
)

_AUGMENT_S2 = _rules(
    feed,
    "attribute_gain",
    "enchantment_success",
    "enchantment_double",
    "enchantment_compensatory",
    "robo",
    "take_the_mound",
    "take_the_plate",
    "attribute_equal_current_base",
    "swap_places",
)

_RULE_SETS: Mapping[tuple[PlaySource, Season], RuleSet] = MappingProxyType(
    {
        (PlaySource.GAME, Season.S1): _GAME_S1,
        (PlaySource.GAME, Season.S2): _GAME_S2,
        (PlaySource.GAME, Season.S3): _GAME_S3,
        **{
            (PlaySource.GAME_FEED, season): RuleSet(season=season, source=PlaySource.GAME_FEED, rules=_GAME_FEED)
            for season in Season
        },
        (PlaySource.AUGMENT_FEED, Season.S1): RuleSet(
            season=Season.S1, source=PlaySource.AUGMENT_FEED, rules=_AUGMENT_S1
        ),
        (PlaySource.AUGMENT_FEED, Season.S2): RuleSet(
            season=Season.S2, source=PlaySource.AUGMENT_FEED, rules=_AUGMENT_S2
        ),
        (PlaySource.AUGMENT_FEED, Season.S3): RuleSet(
            season=Season.S3, source=PlaySource.AUGMENT_FEED, rules=_AUGMENT_S2
        ),
    }
)


def get_rule_set(source: PlaySource, season: Season) -> RuleSet | None:
    return _RULE_SETS.get((source, season))


def list_rule_sets() -> list[RuleSet]:
    """Every registered rule set, ordered by source then season."""
    sources = list(PlaySource)
    return sorted(_RULE_SETS.values(), key=lambda rule_set: (sources.index(rule_set.source), rule_set.season.number))
