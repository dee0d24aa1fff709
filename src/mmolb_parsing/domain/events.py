"""The closed set of structured play events.

Every variant is a frozen dataclass whose ``unparse()`` renders the textual
template the grammar recognises for it, so ``parse(unparse(event))`` gives
``event`` back under the same rule set. ``UnparsedEvent`` is the catch-all
returned for text no rule recognises.

Variants are only ever added; consumers should keep a default branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mmolb_parsing.domain.entities import (
    AttributeBonus,
    AttributeChange,
    AttributeEqual,
    Count,
    EmojilessItem,
    EmojiTeam,
    EntityReference,
    Item,
    Pitch,
    RunnerAdvance,
    ordinal,
)
from mmolb_parsing.domain.season import PlaySource
from mmolb_parsing.domain.vocabulary import (
    Base,
    DeliveryKind,
    EnchantmentPhrasing,
    EqualityPhrasing,
    FoulKind,
    HitType,
    InningSide,
    OutType,
    StrikeKind,
    WeatherKind,
)

if TYPE_CHECKING:
    from mmolb_parsing.domain.raw_play import RawPlay


def _runners(runners: tuple[RunnerAdvance, ...]) -> str:
    return "".join(f" {runner}" for runner in runners)


def _pitched(pitch: Pitch | None) -> str:
    return f"{pitch}. " if pitch is not None else ""


# --- game flow ---


@dataclass(frozen=True)
class GameStart:
    def unparse(self) -> str:
        return "PLAY BALL."


@dataclass(frozen=True)
class GameEnd:
    def unparse(self) -> str:
        return "GAME OVER."


@dataclass(frozen=True)
class InningStart:
    side: InningSide
    number: int

    def unparse(self) -> str:
        return f"Start of the {self.side} of the {ordinal(self.number)}."


@dataclass(frozen=True)
class InningEnd:
    side: InningSide
    number: int

    def unparse(self) -> str:
        return f"End of the {self.side} of the {ordinal(self.number)}."


@dataclass(frozen=True)
class NowBatting:
    batter: EntityReference

    def unparse(self) -> str:
        return f"Now batting: {self.batter}"


# --- pitches ---


@dataclass(frozen=True)
class Ball:
    count: Count

    def unparse(self) -> str:
        return f"Ball. {self.count}."


@dataclass(frozen=True)
class Strike:
    kind: StrikeKind
    count: Count

    def unparse(self) -> str:
        return f"Strike, {self.kind}. {self.count}."


@dataclass(frozen=True)
class Foul:
    kind: FoulKind
    count: Count

    def unparse(self) -> str:
        return f"Foul {self.kind}. {self.count}."


# --- plate appearance outcomes ---


@dataclass(frozen=True)
class Walk:
    batter: EntityReference
    runners: tuple[RunnerAdvance, ...] = ()

    def unparse(self) -> str:
        return f"{self.batter} draws a walk.{_runners(self.runners)}"


@dataclass(frozen=True)
class HitByPitch:
    batter: EntityReference
    runners: tuple[RunnerAdvance, ...] = ()

    def unparse(self) -> str:
        return f"{self.batter} was hit by the pitch and advances to first base.{_runners(self.runners)}"


@dataclass(frozen=True)
class Strikeout:
    batter: EntityReference
    swinging: bool
    pitch: Pitch | None = None

    def unparse(self) -> str:
        manner = "swinging" if self.swinging else "looking"
        return f"{_pitched(self.pitch)}{self.batter} strikes out {manner}."


@dataclass(frozen=True)
class Hit:
    batter: EntityReference
    hit_type: HitType
    advance_to: Base | None = None
    distance: int | None = None
    pitch: Pitch | None = None
    runners: tuple[RunnerAdvance, ...] = ()

    def unparse(self) -> str:
        lead = f"{_pitched(self.pitch)}{self.batter} hits a"
        if self.hit_type.leaves_the_park:
            if self.advance_to is not None:
                raise ValueError(f"a {self.hit_type} cannot advance the batter to {self.advance_to}")
            distance = f" {self.distance}-foot" if self.distance is not None else ""
            return f"{lead}{distance} {self.hit_type}!{_runners(self.runners)}"
        if self.distance is not None:
            raise ValueError(f"a {self.hit_type} does not carry a distance")
        if self.advance_to is not None:
            return f"{lead} {self.hit_type}, advancing to {self.advance_to}.{_runners(self.runners)}"
        return f"{lead} {self.hit_type}.{_runners(self.runners)}"


@dataclass(frozen=True)
class FieldingOut:
    batter: EntityReference
    out_type: OutType
    fielder: EntityReference
    pitch: Pitch | None = None
    runners: tuple[RunnerAdvance, ...] = ()

    def unparse(self) -> str:
        return f"{_pitched(self.pitch)}{self.batter} {self.out_type} out to {self.fielder}.{_runners(self.runners)}"


@dataclass(frozen=True)
class DoublePlay:
    batter: EntityReference
    runners: tuple[RunnerAdvance, ...] = ()

    def unparse(self) -> str:
        return f"{self.batter} grounds into a double play.{_runners(self.runners)}"


@dataclass(frozen=True)
class FieldersChoice:
    batter: EntityReference
    runner_out: EntityReference
    base: Base
    runners: tuple[RunnerAdvance, ...] = ()

    def unparse(self) -> str:
        return (
            f"{self.batter} reaches on a fielder's choice. "
            f"{self.runner_out} out at {self.base}.{_runners(self.runners)}"
        )


@dataclass(frozen=True)
class SacrificeFly:
    batter: EntityReference
    fielder: EntityReference
    runners: tuple[RunnerAdvance, ...] = ()

    def unparse(self) -> str:
        return f"{self.batter} hits a sacrifice fly to {self.fielder}.{_runners(self.runners)}"


# --- baserunning ---


@dataclass(frozen=True)
class StolenBase:
    runner: EntityReference
    base: Base

    def unparse(self) -> str:
        return f"{self.runner} steals {self.base}!"


@dataclass(frozen=True)
class CaughtStealing:
    runner: EntityReference
    base: Base

    def unparse(self) -> str:
        return f"{self.runner} is caught stealing {self.base}."


@dataclass(frozen=True)
class WildPitch:
    runners: tuple[RunnerAdvance, ...] = ()

    def unparse(self) -> str:
        return f"Wild pitch!{_runners(self.runners)}"


@dataclass(frozen=True)
class RunScored:
    runner: EntityReference

    def unparse(self) -> str:
        return f"{self.runner} scores!"


# --- roster and flavour ---


@dataclass(frozen=True)
class Substitution:
    team: EmojiTeam
    incoming: EntityReference
    outgoing: EntityReference

    def unparse(self) -> str:
        return f"{self.team} substitution: {self.incoming} replaces {self.outgoing}."


@dataclass(frozen=True)
class Injury:
    player: EntityReference

    def unparse(self) -> str:
        return f"{self.player} is injured and leaves the game."


@dataclass(frozen=True)
class Announcement:
    message: str

    def unparse(self) -> str:
        return f"ANNOUNCEMENT: {self.message}"


_WEATHER_TEMPLATES: dict[WeatherKind, str] = {
    WeatherKind.FALLING_STARS: "{player} was hit by a Falling Star!",
    WeatherKind.RAIN: "Rain delay.",
    WeatherKind.FOG: "{player} is lost in the fog.",
    WeatherKind.LIGHTNING: "{player} is struck by lightning!",
}


@dataclass(frozen=True)
class WeatherEffect:
    weather: WeatherKind
    player: EntityReference | None = None

    def unparse(self) -> str:
        template = _WEATHER_TEMPLATES[self.weather]
        targeted = "{player}" in template
        if targeted != (self.player is not None):
            raise ValueError(f"{self.weather} weather {'needs' if targeted else 'takes no'} affected player")
        return template.format(player=self.player)


@dataclass(frozen=True)
class ItemStolen:
    thief: EntityReference
    victim: EntityReference
    item: EmojilessItem

    def unparse(self) -> str:
        return f"{self.thief} steals {self.victim}'s {self.item}!"


# --- feed entries ---


@dataclass(frozen=True)
class GameResult:
    away_team: EmojiTeam
    home_team: EmojiTeam
    away_score: int
    home_score: int

    def unparse(self) -> str:
        return f"{self.away_team} vs. {self.home_team} - FINAL {self.away_score}-{self.home_score}"


@dataclass(frozen=True)
class Delivery:
    kind: DeliveryKind
    player: EntityReference
    item: Item
    discarded: Item | None = None

    def unparse(self) -> str:
        discarded = f" They discarded their {self.discarded}." if self.discarded is not None else ""
        return f"{self.player} received a {self.item} {self.kind}.{discarded}"


@dataclass(frozen=True)
class AttributeChanges:
    changes: tuple[AttributeChange, ...]

    def unparse(self) -> str:
        return " ".join(str(change) for change in self.changes)


@dataclass(frozen=True)
class AttributeEquals:
    equals: tuple[AttributeEqual, ...]
    phrasing: EqualityPhrasing = EqualityPhrasing.CURRENT_BASE

    def unparse(self) -> str:
        return " ".join(
            f"{equal.player}'s {equal.changing_attribute} became equal to their {self.phrasing} {equal.value_attribute}."
            for equal in self.equals
        )


@dataclass(frozen=True)
class Enchantment:
    player: EntityReference
    item: EmojilessItem
    bonus: AttributeBonus
    second: AttributeBonus | None = None
    compensatory: bool = False
    phrasing: EnchantmentPhrasing = EnchantmentPhrasing.SUCCESS

    def unparse(self) -> str:
        if self.phrasing is EnchantmentPhrasing.LEGACY:
            if self.second is not None or self.compensatory:
                raise ValueError("legacy enchantments carry a single item bonus")
            return f"{self.player}'s {self.item} was enchanted with +{self.bonus.amount} to {self.bonus.attribute}."
        label = "Compensatory" if self.compensatory else "Item"
        lead = f"The {label} Enchantment was a success! {self.player}'s {self.item}"
        if self.second is None:
            return f"{lead} gained a {self.bonus} bonus."
        return f"{lead} was enchanted with {self.bonus} and {self.second}."


@dataclass(frozen=True)
class RoboModification:
    player: EntityReference

    def unparse(self) -> str:
        return f"{self.player} gained the ROBO Modification."


@dataclass(frozen=True)
class TakeTheMound:
    to_mound: EntityReference
    to_lineup: EntityReference

    def unparse(self) -> str:
        return f"{self.to_mound} was moved to the mound. {self.to_lineup} was sent to the lineup."


@dataclass(frozen=True)
class TakeThePlate:
    to_plate: EntityReference
    from_lineup: EntityReference

    def unparse(self) -> str:
        return f"{self.to_plate} was sent to the plate. {self.from_lineup} was pulled from the lineup."


@dataclass(frozen=True)
class SwapPlaces:
    player_one: EntityReference
    player_two: EntityReference

    def unparse(self) -> str:
        return f"{self.player_one} swapped places with {self.player_two}."


# --- fallback ---


@dataclass(frozen=True)
class UnparsedEvent:
    text: str
    season: str
    source: PlaySource = PlaySource.GAME
    start: int = 0
    end: int | None = None

    @classmethod
    def from_raw(cls, play: RawPlay) -> UnparsedEvent:
        return cls(text=play.text, season=play.season, source=play.source, start=play.start, end=play.end)

    def unparse(self) -> str:
        return self.text


type Event = (
    GameStart
    | GameEnd
    | InningStart
    | InningEnd
    | NowBatting
    | Ball
    | Strike
    | Foul
    | Walk
    | HitByPitch
    | Strikeout
    | Hit
    | FieldingOut
    | DoublePlay
    | FieldersChoice
    | SacrificeFly
    | StolenBase
    | CaughtStealing
    | WildPitch
    | RunScored
    | Substitution
    | Injury
    | Announcement
    | WeatherEffect
    | ItemStolen
    | GameResult
    | Delivery
    | AttributeChanges
    | AttributeEquals
    | Enchantment
    | RoboModification
    | TakeTheMound
    | TakeThePlate
    | SwapPlaces
    | UnparsedEvent
)

EVENT_TYPES: tuple[type, ...] = (
    GameStart,
    GameEnd,
    InningStart,
    InningEnd,
    NowBatting,
    Ball,
    Strike,
    Foul,
    Walk,
    HitByPitch,
    Strikeout,
    Hit,
    FieldingOut,
    DoublePlay,
    FieldersChoice,
    SacrificeFly,
    StolenBase,
    CaughtStealing,
    WildPitch,
    RunScored,
    Substitution,
    Injury,
    Announcement,
    WeatherEffect,
    ItemStolen,
    GameResult,
    Delivery,
    AttributeChanges,
    AttributeEquals,
    Enchantment,
    RoboModification,
    TakeTheMound,
    TakeThePlate,
    SwapPlaces,
    UnparsedEvent,
)
