"""Sample feed text shared by parsing, serialization and CLI tests.

Every line in these corpora is recognised by the rule set it is listed
under; lines listed for a later season only are unrecognised earlier.
"""

import json
from typing import Any

GAME_S1_PLAYS: tuple[str, ...] = (
    "PLAY BALL.",
    "GAME OVER.",
    "Start of the top of the 1st.",
    "End of the bottom of the 9th.",
    "Now batting: Jane Doe",
    "Ball. 1-0.",
    "Strike, swinging. 1-1.",
    "Foul tip. 1-2.",
    "Jane Doe draws a walk. Bo Kim advances to second.",
    "Jane Doe was hit by the pitch and advances to first base.",
    "John Smith strikes out swinging.",
    "Jane Doe hits a 412-foot home run! Bo Kim scores!",
    "Jane Doe hits a grand slam!",
    "Jane Doe hits a double, advancing to second.",
    "Jane Doe hits a single. Bo Kim advances to third.",
    "Jane Doe flies out to Bo Kim.",
    "Jane Doe grounds out to J. R. Smith. Bo Kim advances to second.",
    "Jane Doe grounds into a double play.",
    "Jane Doe reaches on a fielder's choice. Bo Kim out at second.",
    "Jane Doe hits a sacrifice fly to Bo Kim. Ann Lee scores!",
    "Bo Kim steals second!",
    "Bo Kim is caught stealing third.",
    "Wild pitch! Bo Kim scores!",
    "Bo Kim scores!",
    "🐉 Dragons substitution: Ann Lee replaces Bo Kim.",
    "Bo Kim is injured and leaves the game.",
    "ANNOUNCEMENT: The umpires are on strike.",
    "Bo Kim was hit by a Falling Star!",
)

GAME_S2_ONLY_PLAYS: tuple[str, ...] = (
    "Rain delay.",
    "Bo Kim is lost in the fog.",
)

GAME_S3_ONLY_PLAYS: tuple[str, ...] = (
    "95.1 MPH Slider. John Smith strikes out looking.",
    "88.0 MPH Changeup. Jane Doe hits a triple.",
    "101.2 MPH Fastball. Jane Doe hits a 380-foot home run!",
    "90.5 MPH Sweeper. Jane Doe lines out to Bo Kim. Ann Lee scores!",
    "Bo Kim steals Jane Doe's Lucky Cap!",
    "Bo Kim is struck by lightning!",
)

GAME_FEED_PLAYS: tuple[str, ...] = (
    "🐉 Dragons vs. 🦀 Crabs - FINAL 3-2",
    "Jane Doe received a 🧢 Lucky Cap of Speed Delivery.",
    "Jane Doe received a 💍 Ring Special Delivery. They discarded their 💍 Sharp Ring.",
    "Bo Kim was hit by a Falling Star!",
)

AUGMENT_S1_PLAYS: tuple[str, ...] = (
    "Ann Lee gained +5 Speed. Bo Kim gained +2 Luck.",
    "Ann Lee's Swift Sneakers was enchanted with +3 to Stealth.",
    "The Item Enchantment was a success! Ann Lee's Cap gained a +4 Aiming bonus.",
    "Ann Lee gained the ROBO Modification.",
    "Ann Lee's Luck became equal to their base Speed.",
)

AUGMENT_S2_PLAYS: tuple[str, ...] = (
    "Ann Lee gained +1 Arm.",
    "The Item Enchantment was a success! Ann Lee's Cap gained a +4 Aiming bonus.",
    "The Item Enchantment was a success! Ann Lee's Mighty Gloves of Power was enchanted with +2 Muscle and +1 Lift.",
    "The Compensatory Enchantment was a success! Ann Lee's Ring gained a +3 Luck bonus.",
    "Ann Lee gained the ROBO Modification.",
    "Ann Lee was moved to the mound. Bo Kim was sent to the lineup.",
    "Ann Lee was sent to the plate. Bo Kim was pulled from the lineup.",
    "Ann Lee's Luck became equal to their current base Speed.",
    "Ann Lee swapped places with Bo Kim.",
)

ADVERSARIAL_TEXTS: tuple[str, ...] = (
    "",
    "   ",
    "\t\n\r",
    "\x00\x01\x02",
    "🐉" * 50,
    "." * 1000,
    "a" * 10000,
    "Ball. 9-9.",
    "Strike, swinging. 0-",
    "Now batting: ",
    "ANNOUNCEMENT:    ",
    "<strong></strong>",
    "Jane Doe hits a quadruple.",
    "Start of the top of the 1th.",
    " scores!",
    "J. J. J. J. J.",
    "\ud800 lone surrogate",
    "Jane Doe hits a 0412-foot home run!",
)


def game_document(messages: list[str], season: int | str = 1) -> dict[str, Any]:
    """A minimal game document as served by the MMOLB API."""
    return {
        "GameId": "abc123",
        "Season": season,
        "EventLog": [{"index": index, "message": message} for index, message in enumerate(messages)],
    }


def game_document_body(messages: list[str], season: int | str = 1) -> bytes:
    return json.dumps(game_document(messages, season)).encode()
