"""Position-threading parser combinators.

A parser is a plain function ``(text, pos) -> Parsed[T]``. On success it
returns ``Ok((value, new_pos))``; when it declines it returns
``Err(NoMatch)``. Parsers never mutate anything, so backtracking is just
calling the next alternative with the same ``pos``.

Usage:
    greeting = seq(tag("Hello, "), rest)
    match greeting("Hello, world", 0):
        case Ok(((_, who), end)):
            ...
        case Err(no_match):
            ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mmolb_parsing.domain.errors import NoMatch
from mmolb_parsing.domain.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable


type Parsed[T] = Ok[tuple[T, int]] | Err[NoMatch]
type Parser[T] = Callable[[str, int], Parsed[T]]


def fail(pos: int, expected: str) -> Err[NoMatch]:
    return Err(NoMatch(message=f"expected {expected} at {pos}", position=pos, expected=expected))


def tag(literal: str) -> Parser[str]:
    """Match ``literal`` exactly."""

    def parse(text: str, pos: int) -> Parsed[str]:
        if text.startswith(literal, pos):
            return Ok((literal, pos + len(literal)))
        return fail(pos, repr(literal))

    return parse


def seq(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run ``parsers`` one after another; all must succeed."""

    def parse(text: str, pos: int) -> Parsed[tuple[Any, ...]]:
        values: list[Any] = []
        cursor = pos
        for parser in parsers:
            result = parser(text, cursor)
            if isinstance(result, Err):
                return result
            parsed, cursor = result.value
            values.append(parsed)
        return Ok((tuple(values), cursor))

    return parse


def alt[T](*parsers: Parser[T]) -> Parser[T]:
    """Ordered choice: the first alternative that succeeds wins.

    When every alternative declines, the failure that got furthest into
    the input is reported.
    """

    def parse(text: str, pos: int) -> Parsed[T]:
        furthest: Err[NoMatch] | None = None
        for parser in parsers:
            result = parser(text, pos)
            if isinstance(result, Ok):
                return result
            if furthest is None or result.error.position > furthest.error.position:
                furthest = result
        return furthest if furthest is not None else fail(pos, "an alternative")

    return parse


def opt[T](parser: Parser[T]) -> Parser[T | None]:
    def parse(text: str, pos: int) -> Parsed[T | None]:
        result = parser(text, pos)
        if isinstance(result, Ok):
            return result
        return Ok((None, pos))

    return parse


def many0[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Zero or more repetitions; stops on decline or on a zero-width match."""

    def parse(text: str, pos: int) -> Parsed[tuple[T, ...]]:
        values: list[T] = []
        cursor = pos
        while True:
            result = parser(text, cursor)
            if isinstance(result, Err):
                break
            parsed, end = result.value
            if end == cursor:
                break
            values.append(parsed)
            cursor = end
        return Ok((tuple(values), cursor))

    return parse


def many1[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    repeated = many0(parser)

    def parse(text: str, pos: int) -> Parsed[tuple[T, ...]]:
        result = repeated(text, pos)
        if isinstance(result, Ok) and not result.value[0]:
            first = parser(text, pos)
            if isinstance(first, Err):
                return first
            return fail(pos, "at least one repetition")
        return result

    return parse


def map_value[T, U](parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    def parse(text: str, pos: int) -> Parsed[U]:
        result = parser(text, pos)
        if isinstance(result, Err):
            return result
        parsed, end = result.value
        return Ok((fn(parsed), end))

    return parse


def value[T](constant: T, parser: Parser[Any]) -> Parser[T]:
    return map_value(parser, lambda _: constant)


def verify[T](parser: Parser[T], predicate: Callable[[T], bool], expected: str) -> Parser[T]:
    """Succeed only when ``predicate`` holds for the parsed value."""

    def parse(text: str, pos: int) -> Parsed[T]:
        result = parser(text, pos)
        if isinstance(result, Ok) and not predicate(result.value[0]):
            return fail(pos, expected)
        return result

    return parse


def preceded[T](prefix: Parser[Any], parser: Parser[T]) -> Parser[T]:
    return map_value(seq(prefix, parser), lambda values: values[1])


def terminated[T](parser: Parser[T], suffix: Parser[Any]) -> Parser[T]:
    return map_value(seq(parser, suffix), lambda values: values[0])


def delimited[T](prefix: Parser[Any], parser: Parser[T], suffix: Parser[Any]) -> Parser[T]:
    return map_value(seq(prefix, parser, suffix), lambda values: values[1])


def separated_pair[T, U](first: Parser[T], separator: Parser[Any], second: Parser[U]) -> Parser[tuple[T, U]]:
    return map_value(seq(first, separator, second), lambda values: (values[0], values[2]))


def eof(text: str, pos: int) -> Parsed[None]:
    if pos == len(text):
        return Ok((None, pos))
    return fail(pos, "end of input")


def rest(text: str, pos: int) -> Parsed[str]:
    """Consume everything that is left (possibly nothing)."""
    return Ok((text[pos:], len(text)))


def label[T](name: str, parser: Parser[T]) -> Parser[T]:
    """Report declines of ``parser`` as ``expected name`` at the start position."""

    def parse(text: str, pos: int) -> Parsed[T]:
        result = parser(text, pos)
        if isinstance(result, Err):
            return fail(pos, name)
        return result

    return parse


def run_parser[T](parser: Parser[T], text: str) -> Ok[tuple[T, str]] | Err[NoMatch]:
    """Run ``parser`` from the start of ``text``, returning the value and the leftover."""
    result = parser(text, 0)
    if isinstance(result, Err):
        return result
    parsed, end = result.value
    return Ok((parsed, text[end:]))
