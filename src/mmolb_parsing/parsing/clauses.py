"""Clause grammar: recognisers for one semantic unit of a play.

Each clause either yields a complete clause value or declines; a clause
never hands back a partially filled value. Where two clause shapes can
start the same way they are listed most specific first.
"""

from __future__ import annotations

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
)
from mmolb_parsing.domain.vocabulary import (
    Attribute,
    Base,
    EqualityPhrasing,
    ItemPrefix,
    ItemSuffix,
    ItemType,
    PitchType,
)
from mmolb_parsing.parsing.combinators import (
    alt,
    delimited,
    many0,
    map_value,
    opt,
    preceded,
    separated_pair,
    seq,
    tag,
    terminated,
    verify,
)
from mmolb_parsing.parsing.primitives import (
    decimal_one_place,
    emoji,
    integer,
    keyword,
    name_at_end,
    name_until,
    signed_amount,
    space,
)

if TYPE_CHECKING:
    from mmolb_parsing.parsing.combinators import Parser


def entity_until(delimiter: str) -> Parser[EntityReference]:
    return map_value(name_until(delimiter), EntityReference)


def entity_at_end(terminator: str = "") -> Parser[EntityReference]:
    return map_value(name_at_end(terminator), EntityReference)


def emoji_team_until(delimiter: str) -> Parser[EmojiTeam]:
    return map_value(
        separated_pair(emoji, space, name_until(delimiter)),
        lambda parts: EmojiTeam(emoji=parts[0], name=parts[1]),
    )


count: Parser[Count] = map_value(
    separated_pair(integer(max_value=4), tag("-"), integer(max_value=3)),
    lambda pair: Count(balls=pair[0], strikes=pair[1]),
)

pitch_prefix: Parser[Pitch] = map_value(
    seq(decimal_one_place, tag(" MPH "), keyword(PitchType), tag(". ")),
    lambda parts: Pitch(speed=parts[0], pitch_type=parts[2]),
)

_advance: Parser[RunnerAdvance] = map_value(
    seq(
        entity_until(" advances to "),
        tag(" advances to "),
        verify(keyword(Base), lambda base: base is not Base.HOME, "a base short of home"),
        tag("."),
    ),
    lambda parts: RunnerAdvance(runner=parts[0], base=parts[2]),
)

_score: Parser[RunnerAdvance] = map_value(
    terminated(entity_until(" scores!"), tag(" scores!")),
    lambda runner: RunnerAdvance(runner=runner, base=Base.HOME),
)

runner_advance: Parser[RunnerAdvance] = alt(_advance, _score)

runners: Parser[tuple[RunnerAdvance, ...]] = many0(preceded(space, runner_advance))


emojiless_item: Parser[EmojilessItem] = map_value(
    seq(
        opt(terminated(keyword(ItemPrefix), space)),
        keyword(ItemType),
        opt(preceded(space, keyword(ItemSuffix))),
    ),
    lambda parts: EmojilessItem(prefix=parts[0], item=parts[1], suffix=parts[2]),
)

item: Parser[Item] = map_value(
    separated_pair(emoji, space, emojiless_item),
    lambda parts: Item(emoji=parts[0], item=parts[1]),
)

attribute = keyword(Attribute)

attribute_bonus: Parser[AttributeBonus] = map_value(
    separated_pair(signed_amount, space, attribute),
    lambda parts: AttributeBonus(amount=parts[0], attribute=parts[1]),
)

attribute_change: Parser[AttributeChange] = map_value(
    seq(entity_until(" gained +"), tag(" gained +"), integer(), space, attribute, tag(".")),
    lambda parts: AttributeChange(player=parts[0], amount=parts[2], attribute=parts[4]),
)


def attribute_equal(phrasing: EqualityPhrasing) -> Parser[AttributeEqual]:
    return map_value(
        seq(
            entity_until("'s "),
            tag("'s "),
            attribute,
            delimited(tag(f" became equal to their {phrasing} "), attribute, tag(".")),
        ),
        lambda parts: AttributeEqual(player=parts[0], changing_attribute=parts[2], value_attribute=parts[3]),
    )


def sentences[T](clause: Parser[T]) -> Parser[tuple[T, ...]]:
    """One or more ``clause`` sentences separated by single spaces."""
    return map_value(
        seq(clause, many0(preceded(space, clause))),
        lambda parts: (parts[0], *parts[1]),
    )
