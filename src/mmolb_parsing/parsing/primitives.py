"""Primitive matchers: names, numbers, ordinals, keywords, emoji, punctuation.

Player names are open-ended, so they are never matched against a
vocabulary. A name runs up to a delimiter and must look like a name: it
may not span a sentence break or carry sentence punctuation.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import TYPE_CHECKING

from mmolb_parsing.domain.entities import ordinal as render_ordinal
from mmolb_parsing.domain.result import Ok
from mmolb_parsing.parsing.combinators import fail, tag

if TYPE_CHECKING:
    from mmolb_parsing.parsing.combinators import Parsed, Parser

_NAME_FORBIDDEN = re.compile(r"[!?:\n]|\s\s")
_ABBREVIATIONS = frozenset({"Jr.", "Sr.", "St.", "Dr."})
_DIGITS = re.compile(r"0|[1-9][0-9]{0,8}")
_DECIMAL = re.compile(r"(?:0|[1-9][0-9]{0,3})\.[0-9]")
_ORDINAL = re.compile(r"([1-9][0-9]{0,3})(st|nd|rd|th)")


def _is_initial(token: str) -> bool:
    return token in _ABBREVIATIONS or (len(token) == 2 and token[0].isupper() and token[1] == ".")


def is_plausible_name(candidate: str) -> bool:
    """True when ``candidate`` could be a single player or team name."""
    if not candidate or candidate != candidate.strip():
        return False
    if _NAME_FORBIDDEN.search(candidate):
        return False
    tokens = candidate.split(" ")
    # A token ending in "." mid-name is a sentence break unless it is an initial.
    return all(_is_initial(token) for token in tokens[:-1] if token.endswith("."))


def _closes_initial(text: str, pos: int, dot_at: int) -> bool:
    """True when the "." at ``dot_at`` ends an initial or title and a space follows."""
    if not text.startswith(" ", dot_at + 1):
        return False
    for width in (1, 2):
        start = dot_at - width
        if start < pos or (start > pos and text[start - 1] != " "):
            continue
        if _is_initial(text[start : dot_at + 1]):
            return True
    return False


def name_until(delimiter: str) -> Parser[str]:
    """A name running up to (not including) the next ``delimiter``.

    With a delimiter starting with ".", a period closing an initial is taken
    as part of the name. When nothing after it ends a plausible name, the
    last such period ends the name instead.
    """

    def parse(text: str, pos: int) -> Parsed[str]:
        search_from = pos
        skipped: int | None = None
        while True:
            found = text.find(delimiter, search_from)
            if found <= pos:
                break
            if delimiter.startswith(".") and _closes_initial(text, pos, found):
                skipped = found
                search_from = found + 1
                continue
            candidate = text[pos:found]
            if is_plausible_name(candidate):
                return Ok((candidate, found))
            break
        if skipped is not None and is_plausible_name(text[pos:skipped]):
            return Ok((text[pos:skipped], skipped))
        return fail(pos, f"a name followed by {delimiter!r}")

    return parse


def name_at_end(terminator: str = "") -> Parser[str]:
    """A name filling the rest of the input, which must end with ``terminator``."""

    def parse(text: str, pos: int) -> Parsed[str]:
        if not text.endswith(terminator):
            return fail(pos, f"a name ending the input with {terminator!r}")
        end = len(text) - len(terminator)
        candidate = text[pos:end]
        if end < pos or not is_plausible_name(candidate):
            return fail(pos, f"a name ending the input with {terminator!r}")
        return Ok((candidate, len(text)))

    return parse


def integer(max_value: int | None = None) -> Parser[int]:
    """Non-negative decimal integer without leading zeros."""

    def parse(text: str, pos: int) -> Parsed[int]:
        match = _DIGITS.match(text, pos)
        if match is None:
            return fail(pos, "an integer")
        number = int(match.group())
        if max_value is not None and number > max_value:
            return fail(pos, f"an integer no greater than {max_value}")
        end = match.end()
        if end < len(text) and text[end].isdigit():
            return fail(pos, "an integer without leading zeros")
        return Ok((number, end))

    return parse


def signed_amount(text: str, pos: int) -> Parsed[int]:
    """``+N`` as found in attribute bonuses."""
    if not text.startswith("+", pos):
        return fail(pos, "'+'")
    return integer()(text, pos + 1)


def decimal_one_place(text: str, pos: int) -> Parsed[float]:
    match = _DECIMAL.match(text, pos)
    if match is None or (match.end() < len(text) and text[match.end()].isdigit()):
        return fail(pos, "a number with one decimal place")
    return Ok((float(match.group()), match.end()))


def ordinal(text: str, pos: int) -> Parsed[int]:
    """``1st``, ``2nd``, ``11th`` ...; the suffix must agree with the number."""
    match = _ORDINAL.match(text, pos)
    if match is None:
        return fail(pos, "an ordinal")
    number = int(match.group(1))
    if render_ordinal(number) != match.group():
        return fail(pos, f"the ordinal {render_ordinal(number)}")
    return Ok((number, match.end()))


def keyword[E: StrEnum](enum_cls: type[E]) -> Parser[E]:
    """One member of a closed vocabulary, matched by its exact text.

    Longer values are tried first so ``Knuckle Curve`` is not read as a
    shorter keyword; a match must end at a word boundary.
    """
    members = sorted(enum_cls, key=lambda member: len(member.value), reverse=True)
    expected = f"one of {enum_cls.__name__}"

    def parse(text: str, pos: int) -> Parsed[E]:
        for member in members:
            end = pos + len(member.value)
            if text.startswith(member.value, pos) and (end == len(text) or not text[end].isalnum()):
                return Ok((member, end))
        return fail(pos, expected)

    return parse


def emoji(text: str, pos: int) -> Parsed[str]:
    """A run of non-space characters starting with a non-ASCII character."""
    if pos >= len(text) or text[pos].isascii():
        return fail(pos, "an emoji")
    end = text.find(" ", pos)
    if end == -1:
        end = len(text)
    return Ok((text[pos:end], end))


space = tag(" ")
period = tag(".")
bang = tag("!")
