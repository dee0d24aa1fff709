"""Play-level grammar for in-game play messages.

Each parser here recognises one whole play shape and builds its event.
Parsers are not anchored at the end of input; the resolver rejects any
match that leaves text behind.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from mmolb_parsing.domain.events import (
    Announcement,
    Ball,
    CaughtStealing,
    DoublePlay,
    FieldersChoice,
    FieldingOut,
    Foul,
    GameEnd,
    GameStart,
    Hit,
    HitByPitch,
    InningEnd,
    InningStart,
    Injury,
    ItemStolen,
    NowBatting,
    RunScored,
    SacrificeFly,
    StolenBase,
    Strike,
    Strikeout,
    Substitution,
    Walk,
    WeatherEffect,
    WildPitch,
)
from mmolb_parsing.domain.vocabulary import (
    Base,
    FoulKind,
    HitType,
    InningSide,
    OutType,
    StrikeKind,
    WeatherKind,
)
from mmolb_parsing.parsing.clauses import (
    count,
    emoji_team_until,
    emojiless_item,
    entity_at_end,
    entity_until,
    pitch_prefix,
    runners,
)
from mmolb_parsing.parsing.combinators import (
    alt,
    delimited,
    map_value,
    opt,
    preceded,
    rest,
    seq,
    tag,
    terminated,
    value,
    verify,
)
from mmolb_parsing.parsing.primitives import integer, keyword, ordinal, space

if TYPE_CHECKING:
    from mmolb_parsing.domain.entities import EntityReference
    from mmolb_parsing.domain.events import Event
    from mmolb_parsing.parsing.combinators import Parser


def _ends_with(phrase: str) -> Parser[EntityReference]:
    """A player name followed by the fixed ``phrase`` that closes the sentence."""
    return terminated(entity_until(phrase), tag(phrase))


_in_park_hit = verify(keyword(HitType), lambda hit_type: not hit_type.leaves_the_park, "an in-park hit")
_out_of_park_hit = verify(keyword(HitType), lambda hit_type: hit_type.leaves_the_park, "a home run")
_base_on_the_bases = verify(keyword(Base), lambda base: base is not Base.HOME, "a base short of home")
_stealable_base = verify(keyword(Base), lambda base: base is not Base.FIRST, "a stealable base")

# --- game flow ---

game_start: Parser[Event] = value(GameStart(), tag("PLAY BALL."))

game_end: Parser[Event] = value(GameEnd(), tag("GAME OVER."))


def _inning(opening: str, event_type: type[InningStart] | type[InningEnd]) -> Parser[Event]:
    return map_value(
        seq(tag(f"{opening} of the "), keyword(InningSide), tag(" of the "), ordinal, tag(".")),
        lambda parts: event_type(side=parts[1], number=parts[3]),
    )


inning_start = _inning("Start", InningStart)

inning_end = _inning("End", InningEnd)

now_batting: Parser[Event] = map_value(preceded(tag("Now batting: "), entity_at_end()), NowBatting)

# --- pitches ---

ball: Parser[Event] = map_value(delimited(tag("Ball. "), count, tag(".")), Ball)

strike: Parser[Event] = map_value(
    seq(tag("Strike, "), keyword(StrikeKind), tag(". "), count, tag(".")),
    lambda parts: Strike(kind=parts[1], count=parts[3]),
)

foul: Parser[Event] = map_value(
    seq(tag("Foul "), keyword(FoulKind), tag(". "), count, tag(".")),
    lambda parts: Foul(kind=parts[1], count=parts[3]),
)

# --- plate appearance outcomes ---

walk: Parser[Event] = map_value(
    seq(_ends_with(" draws a walk."), runners),
    lambda parts: Walk(batter=parts[0], runners=parts[1]),
)

hit_by_pitch: Parser[Event] = map_value(
    seq(_ends_with(" was hit by the pitch and advances to first base."), runners),
    lambda parts: HitByPitch(batter=parts[0], runners=parts[1]),
)

strikeout: Parser[Event] = map_value(
    seq(entity_until(" strikes out "), tag(" strikes out "), keyword(StrikeKind), tag(".")),
    lambda parts: Strikeout(batter=parts[0], swinging=parts[2] is StrikeKind.SWINGING),
)

home_run: Parser[Event] = map_value(
    seq(
        entity_until(" hits a "),
        tag(" hits a"),
        opt(delimited(space, integer(), tag("-foot"))),
        space,
        _out_of_park_hit,
        tag("!"),
        runners,
    ),
    lambda parts: Hit(batter=parts[0], hit_type=parts[4], distance=parts[2], runners=parts[6]),
)

hit_advancing: Parser[Event] = map_value(
    seq(
        entity_until(" hits a "),
        tag(" hits a "),
        _in_park_hit,
        tag(", advancing to "),
        _base_on_the_bases,
        tag("."),
        runners,
    ),
    lambda parts: Hit(batter=parts[0], hit_type=parts[2], advance_to=parts[4], runners=parts[6]),
)

hit: Parser[Event] = map_value(
    seq(entity_until(" hits a "), tag(" hits a "), _in_park_hit, tag("."), runners),
    lambda parts: Hit(batter=parts[0], hit_type=parts[2], runners=parts[4]),
)


def _fielding_out_as(out_type: OutType) -> Parser[Event]:
    phrase = f" {out_type} out to "
    return map_value(
        seq(entity_until(phrase), tag(phrase), entity_until("."), tag("."), runners),
        lambda parts: FieldingOut(batter=parts[0], out_type=out_type, fielder=parts[2], runners=parts[4]),
    )


fielding_out: Parser[Event] = alt(*(_fielding_out_as(out_type) for out_type in OutType))

double_play: Parser[Event] = map_value(
    seq(_ends_with(" grounds into a double play."), runners),
    lambda parts: DoublePlay(batter=parts[0], runners=parts[1]),
)

fielders_choice: Parser[Event] = map_value(
    seq(
        _ends_with(" reaches on a fielder's choice."),
        space,
        entity_until(" out at "),
        tag(" out at "),
        keyword(Base),
        tag("."),
        runners,
    ),
    lambda parts: FieldersChoice(batter=parts[0], runner_out=parts[2], base=parts[4], runners=parts[6]),
)

sacrifice_fly: Parser[Event] = map_value(
    seq(
        entity_until(" hits a sacrifice fly to "),
        tag(" hits a sacrifice fly to "),
        entity_until("."),
        tag("."),
        runners,
    ),
    lambda parts: SacrificeFly(batter=parts[0], fielder=parts[2], runners=parts[4]),
)

# --- baserunning ---

stolen_base: Parser[Event] = map_value(
    seq(entity_until(" steals "), tag(" steals "), _stealable_base, tag("!")),
    lambda parts: StolenBase(runner=parts[0], base=parts[2]),
)

caught_stealing: Parser[Event] = map_value(
    seq(entity_until(" is caught stealing "), tag(" is caught stealing "), _stealable_base, tag(".")),
    lambda parts: CaughtStealing(runner=parts[0], base=parts[2]),
)

wild_pitch: Parser[Event] = map_value(preceded(tag("Wild pitch!"), runners), WildPitch)

run_scored: Parser[Event] = map_value(_ends_with(" scores!"), RunScored)

# --- roster and flavour ---

substitution: Parser[Event] = map_value(
    seq(
        emoji_team_until(" substitution: "),
        tag(" substitution: "),
        entity_until(" replaces "),
        tag(" replaces "),
        entity_at_end("."),
    ),
    lambda parts: Substitution(team=parts[0], incoming=parts[2], outgoing=parts[4]),
)

injury: Parser[Event] = map_value(_ends_with(" is injured and leaves the game."), Injury)

announcement: Parser[Event] = map_value(
    preceded(tag("ANNOUNCEMENT: "), verify(rest, lambda message: bool(message.strip()), "an announcement")),
    Announcement,
)


def _weather_on_player(weather: WeatherKind, phrase: str) -> Parser[Event]:
    return map_value(_ends_with(phrase), lambda player: WeatherEffect(weather=weather, player=player))


falling_star = _weather_on_player(WeatherKind.FALLING_STARS, " was hit by a Falling Star!")

rain_delay: Parser[Event] = value(WeatherEffect(weather=WeatherKind.RAIN), tag("Rain delay."))

fog = _weather_on_player(WeatherKind.FOG, " is lost in the fog.")

lightning = _weather_on_player(WeatherKind.LIGHTNING, " is struck by lightning!")

item_stolen: Parser[Event] = map_value(
    seq(
        entity_until(" steals "),
        tag(" steals "),
        entity_until("'s "),
        tag("'s "),
        emojiless_item,
        tag("!"),
    ),
    lambda parts: ItemStolen(thief=parts[0], victim=parts[2], item=parts[4]),
)


def pitched(play: Parser[Event]) -> Parser[Event]:
    """``play`` preceded by the pitch that produced it (``95.1 MPH Slider. ``)."""
    return map_value(
        seq(pitch_prefix, play),
        lambda parts: dataclasses.replace(parts[1], pitch=parts[0]),
    )


pitched_strikeout = pitched(strikeout)

pitched_hit = pitched(alt(home_run, hit_advancing, hit))

pitched_fielding_out = pitched(fielding_out)
