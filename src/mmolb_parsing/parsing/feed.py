"""Grammar for team/game feed and player augment feed entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mmolb_parsing.domain.events import (
    AttributeChanges,
    AttributeEquals,
    Delivery,
    Enchantment,
    GameResult,
    RoboModification,
    SwapPlaces,
    TakeTheMound,
    TakeThePlate,
)
from mmolb_parsing.domain.entities import AttributeBonus
from mmolb_parsing.domain.vocabulary import DeliveryKind, EnchantmentPhrasing, EqualityPhrasing
from mmolb_parsing.parsing.clauses import (
    attribute,
    attribute_bonus,
    attribute_change,
    attribute_equal,
    emoji_team_until,
    emojiless_item,
    entity_at_end,
    entity_until,
    item,
    sentences,
)
from mmolb_parsing.parsing.combinators import (
    alt,
    delimited,
    map_value,
    opt,
    preceded,
    seq,
    tag,
    terminated,
)
from mmolb_parsing.parsing.primitives import integer, keyword, space

if TYPE_CHECKING:
    from mmolb_parsing.domain.events import Event
    from mmolb_parsing.parsing.combinators import Parser


# --- game feed ---

game_result: Parser[Event] = map_value(
    seq(
        emoji_team_until(" vs. "),
        tag(" vs. "),
        emoji_team_until(" - FINAL "),
        tag(" - FINAL "),
        integer(),
        tag("-"),
        integer(),
    ),
    lambda parts: GameResult(away_team=parts[0], home_team=parts[2], away_score=parts[4], home_score=parts[6]),
)

delivery: Parser[Event] = map_value(
    seq(
        entity_until(" received a "),
        tag(" received a "),
        item,
        space,
        keyword(DeliveryKind),
        tag("."),
        opt(delimited(tag(" They discarded their "), item, tag("."))),
    ),
    lambda parts: Delivery(kind=parts[4], player=parts[0], item=parts[2], discarded=parts[6]),
)

# --- augment feed ---

attribute_gain: Parser[Event] = map_value(sentences(attribute_change), AttributeChanges)


def _attribute_equals(phrasing: EqualityPhrasing) -> Parser[Event]:
    return map_value(
        sentences(attribute_equal(phrasing)),
        lambda equals: AttributeEquals(equals=equals, phrasing=phrasing),
    )


attribute_equal_base = _attribute_equals(EqualityPhrasing.BASE)

attribute_equal_current_base = _attribute_equals(EqualityPhrasing.CURRENT_BASE)

_owner = terminated(entity_until("'s "), tag("'s "))

enchantment_legacy: Parser[Event] = map_value(
    seq(_owner, emojiless_item, tag(" was enchanted with +"), integer(), tag(" to "), attribute, tag(".")),
    lambda parts: Enchantment(
        player=parts[0],
        item=parts[1],
        bonus=AttributeBonus(amount=parts[3], attribute=parts[5]),
        phrasing=EnchantmentPhrasing.LEGACY,
    ),
)

_single_bonus = map_value(
    delimited(tag(" gained a "), attribute_bonus, tag(" bonus.")),
    lambda bonus: (bonus, None),
)

_double_bonus = map_value(
    seq(tag(" was enchanted with "), attribute_bonus, tag(" and "), attribute_bonus, tag(".")),
    lambda parts: (parts[1], parts[3]),
)


def _enchantment_success(label: str, bonuses: Parser[tuple[AttributeBonus, AttributeBonus | None]]) -> Parser[Event]:
    return map_value(
        seq(tag(f"The {label} Enchantment was a success! "), _owner, emojiless_item, bonuses),
        lambda parts: Enchantment(
            player=parts[1],
            item=parts[2],
            bonus=parts[3][0],
            second=parts[3][1],
            compensatory=label == "Compensatory",
        ),
    )


enchantment_success = _enchantment_success("Item", _single_bonus)

enchantment_double = _enchantment_success("Item", _double_bonus)

enchantment_compensatory = _enchantment_success("Compensatory", alt(_double_bonus, _single_bonus))

robo: Parser[Event] = map_value(
    terminated(entity_until(" gained the ROBO Modification."), tag(" gained the ROBO Modification.")),
    RoboModification,
)

take_the_mound: Parser[Event] = map_value(
    seq(
        entity_until(" was moved to the mound. "),
        tag(" was moved to the mound. "),
        entity_until(" was sent to the lineup."),
        tag(" was sent to the lineup."),
    ),
    lambda parts: TakeTheMound(to_mound=parts[0], to_lineup=parts[2]),
)

take_the_plate: Parser[Event] = map_value(
    seq(
        entity_until(" was sent to the plate. "),
        tag(" was sent to the plate. "),
        entity_until(" was pulled from the lineup."),
        tag(" was pulled from the lineup."),
    ),
    lambda parts: TakeThePlate(to_plate=parts[0], from_lineup=parts[2]),
)

swap_places: Parser[Event] = map_value(
    seq(entity_until(" swapped places with "), preceded(tag(" swapped places with "), entity_at_end("."))),
    lambda parts: SwapPlaces(player_one=parts[0], player_two=parts[1]),
)
