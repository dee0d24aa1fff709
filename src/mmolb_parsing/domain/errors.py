from dataclasses import dataclass


@dataclass(frozen=True)
class ParseFailure:
    message: str


@dataclass(frozen=True)
class NoMatch(ParseFailure):
    position: int
    expected: str


@dataclass(frozen=True)
class IncompleteMatch(ParseFailure):
    position: int
    leftover: str


@dataclass(frozen=True)
class UnknownSeason(ParseFailure):
    tag: str


@dataclass(frozen=True)
class DecodeError:
    message: str
    path: str = "$"
