from __future__ import annotations

from dataclasses import dataclass

from mmolb_parsing.domain.vocabulary import Attribute, Base, ItemPrefix, ItemSuffix, ItemType, PitchType


def ordinal(number: int) -> str:
    """Render ``number`` with its English ordinal suffix (1st, 12th, 23rd)."""
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


@dataclass(frozen=True)
class EntityReference:
    """A player or team as named in the text.

    Never resolved against a roster: two references with the same name may
    or may not be the same player.
    """

    name: str
    team: str | None = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class EmojiTeam:
    emoji: str
    name: str

    def __str__(self) -> str:
        return f"{self.emoji} {self.name}"


@dataclass(frozen=True)
class Count:
    balls: int
    strikes: int

    def __str__(self) -> str:
        return f"{self.balls}-{self.strikes}"


@dataclass(frozen=True)
class Pitch:
    speed: float
    pitch_type: PitchType

    def __post_init__(self) -> None:
        object.__setattr__(self, "speed", float(self.speed))

    def __str__(self) -> str:
        return f"{self.speed:.1f} MPH {self.pitch_type}"


@dataclass(frozen=True)
class RunnerAdvance:
    runner: EntityReference
    base: Base

    @property
    def scored(self) -> bool:
        return self.base is Base.HOME

    def __str__(self) -> str:
        if self.scored:
            return f"{self.runner} scores!"
        return f"{self.runner} advances to {self.base}."


@dataclass(frozen=True)
class EmojilessItem:
    item: ItemType
    prefix: ItemPrefix | None = None
    suffix: ItemSuffix | None = None

    def __str__(self) -> str:
        parts = [str(part) for part in (self.prefix, self.item, self.suffix) if part is not None]
        return " ".join(parts)


@dataclass(frozen=True)
class Item:
    emoji: str
    item: EmojilessItem

    def __str__(self) -> str:
        return f"{self.emoji} {self.item}"


@dataclass(frozen=True)
class AttributeBonus:
    amount: int
    attribute: Attribute

    def __str__(self) -> str:
        return f"+{self.amount} {self.attribute}"


@dataclass(frozen=True)
class AttributeChange:
    player: EntityReference
    amount: int
    attribute: Attribute

    def __str__(self) -> str:
        return f"{self.player} gained +{self.amount} {self.attribute}."


@dataclass(frozen=True)
class AttributeEqual:
    player: EntityReference
    changing_attribute: Attribute
    value_attribute: Attribute
