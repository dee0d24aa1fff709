"""Closed keyword sets recognised by the grammar.

Each enum value is the exact, case-sensitive text that appears in the feed.
Serialization stores member *names*, so values may be reworded without
breaking old snapshots.
"""

from enum import StrEnum


class InningSide(StrEnum):
    TOP = "top"
    BOTTOM = "bottom"


class Base(StrEnum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    HOME = "home"


class StrikeKind(StrEnum):
    SWINGING = "swinging"
    LOOKING = "looking"


class FoulKind(StrEnum):
    BALL = "ball"
    TIP = "tip"


class HitType(StrEnum):
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    HOME_RUN = "home run"
    GRAND_SLAM = "grand slam"

    @property
    def leaves_the_park(self) -> bool:
        return self in (HitType.HOME_RUN, HitType.GRAND_SLAM)


class OutType(StrEnum):
    GROUNDOUT = "grounds"
    FLYOUT = "flies"
    LINEOUT = "lines"
    POPOUT = "pops"


class PitchType(StrEnum):
    FASTBALL = "Fastball"
    SINKER = "Sinker"
    SLIDER = "Slider"
    CHANGEUP = "Changeup"
    CURVEBALL = "Curveball"
    CUTTER = "Cutter"
    SWEEPER = "Sweeper"
    KNUCKLE_CURVE = "Knuckle Curve"
    SPLITTER = "Splitter"


class WeatherKind(StrEnum):
    FALLING_STARS = "Falling Stars"
    RAIN = "Rain"
    FOG = "Fog"
    LIGHTNING = "Lightning"


class DeliveryKind(StrEnum):
    DELIVERY = "Delivery"
    SHIPMENT = "Shipment"
    SPECIAL_DELIVERY = "Special Delivery"


class Attribute(StrEnum):
    ACCURACY = "Accuracy"
    AIMING = "Aiming"
    ARM = "Arm"
    AWARENESS = "Awareness"
    COMPOSURE = "Composure"
    CONTACT = "Contact"
    CONTROL = "Control"
    CUNNING = "Cunning"
    DEFIANCE = "Defiance"
    DETERMINATION = "Determination"
    DISCIPLINE = "Discipline"
    DODGE = "Dodge"
    DURABILITY = "Durability"
    GREED = "Greed"
    GUTS = "Guts"
    INSIGHT = "Insight"
    INTIMIDATION = "Intimidation"
    LIFT = "Lift"
    LUCK = "Luck"
    MUSCLE = "Muscle"
    PERFORMANCE = "Performance"
    PERSUASION = "Persuasion"
    PRESENCE = "Presence"
    PRIORITY = "Priority"
    REACTION = "Reaction"
    ROTATION = "Rotation"
    SELFLESSNESS = "Selflessness"
    SPEED = "Speed"
    STAMINA = "Stamina"
    STEALTH = "Stealth"
    STUFF = "Stuff"
    VELOCITY = "Velocity"
    VISION = "Vision"
    WISDOM = "Wisdom"


class ItemType(StrEnum):
    CAP = "Cap"
    GLOVES = "Gloves"
    JERSEY = "Jersey"
    SNEAKERS = "Sneakers"
    RING = "Ring"
    NECKLACE = "Necklace"


class ItemPrefix(StrEnum):
    BRIGHT = "Bright"
    CLEVER = "Clever"
    FIERCE = "Fierce"
    LUCKY = "Lucky"
    MIGHTY = "Mighty"
    SHARP = "Sharp"
    SLICK = "Slick"
    STURDY = "Sturdy"
    SWIFT = "Swift"


class ItemSuffix(StrEnum):
    ACROBATICS = "of Acrobatics"
    FOCUS = "of Focus"
    FORTUNE = "of Fortune"
    POWER = "of Power"
    SPEED = "of Speed"
    SEER = "of the Seer"
    WIND = "of the Wind"


class EnchantmentPhrasing(StrEnum):
    LEGACY = "legacy"
    SUCCESS = "success"


class EqualityPhrasing(StrEnum):
    BASE = "base"
    CURRENT_BASE = "current base"
