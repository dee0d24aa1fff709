"""Ok/Err values shared by the grammar engine and the interchange codec.

Parsers return ``Ok((value, position))`` or ``Err(NoMatch(...))``; the codec
returns ``Ok(event)`` or ``Err(DecodeError(...))``. Callers branch with
``match`` or ``isinstance``.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    error: E


type Result[T, E] = Ok[T] | Err[E]
