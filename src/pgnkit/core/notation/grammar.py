"""Backtracking parser combinators over a string and an integer cursor.

A :class:`Parser` is a function ``(text, pos) -> Success | Failure``. Failure
is an ordinary return value: it never consumes input, so an enclosing
:func:`choice` can retry the next alternative from the same position. Only
when every alternative has failed does the failure reach the caller, carrying
the furthest position reached and the labels of what was expected there.

Parsers hold no state between calls and may be shared freely.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Matched *value*; parsing continues at *pos*."""

    value: T
    pos: int


@dataclass(frozen=True, slots=True)
class Failure:
    """No match; *pos* is the furthest offset reached."""

    pos: int
    expected: tuple[str, ...]


ParseFn: TypeAlias = Callable[[str, int], "Success[Any] | Failure"]


def _merge(failures: Iterable[Failure]) -> Failure:
    """Keep the failures that got furthest and union their labels."""
    furthest = -1
    expected: list[str] = []
    for failure in failures:
        if failure.pos > furthest:
            furthest = failure.pos
            expected = list(failure.expected)
        elif failure.pos == furthest:
            expected.extend(e for e in failure.expected if e not in expected)
    return Failure(furthest, tuple(expected))


class Parser(Generic[T]):
    """Composable parser wrapping a ``(text, pos)`` function."""

    __slots__ = ("_fn",)

    def __init__(self, fn: ParseFn) -> None:
        self._fn = fn

    def __call__(self, text: str, pos: int = 0) -> Success[T] | Failure:
        return self._fn(text, pos)

    # ── Transformations ──────────────────────────────────────────────────

    def map(self, fn: Callable[[T], U]) -> Parser[U]:
        def run(text: str, pos: int) -> Success[U] | Failure:
            result = self._fn(text, pos)
            if isinstance(result, Failure):
                return result
            return Success(fn(result.value), result.pos)

        return Parser(run)

    def then(self, other: Parser[U]) -> Parser[U]:
        """Run both, keep the right-hand value."""
        return sequence(self, other).map(lambda pair: pair[1])

    def skip(self, other: Parser[Any]) -> Parser[T]:
        """Run both, keep the left-hand value."""
        return sequence(self, other).map(lambda pair: pair[0])

    def label(self, expected: str) -> Parser[T]:
        """Report *expected* when this parser fails without making progress."""

        def run(text: str, pos: int) -> Success[T] | Failure:
            result = self._fn(text, pos)
            if isinstance(result, Failure) and result.pos == pos:
                return Failure(pos, (expected,))
            return result

        return Parser(run)


# ── Primitives ───────────────────────────────────────────────────────────────


def end_of_input() -> Parser[None]:
    def run(text: str, pos: int) -> Success[None] | Failure:
        if pos == len(text):
            return Success(None, pos)
        return Failure(pos, ("end of input",))

    return Parser(run)


def literal(token: str, ignore_case: bool = False) -> Parser[str]:
    """Match *token* exactly; the value is *token* itself."""
    size = len(token)
    folded = token.lower()

    def run(text: str, pos: int) -> Success[str] | Failure:
        chunk = text[pos : pos + size]
        if chunk == token or (ignore_case and chunk.lower() == folded):
            return Success(token, pos + size)
        return Failure(pos, (repr(token),))

    return Parser(run)


def one_of(candidates: Sequence[str], ignore_case: bool = False) -> Parser[str]:
    """Match the first of *candidates*, in the order given.

    The value is the canonical candidate, never the matched slice, so that
    callers can look it up in a table keyed by the candidates.
    """
    options = tuple(candidates)
    expected = tuple(repr(c) for c in options)
    folded = tuple(c.lower() for c in options)

    def run(text: str, pos: int) -> Success[str] | Failure:
        for token, low in zip(options, folded):
            chunk = text[pos : pos + len(token)]
            if chunk == token or (ignore_case and chunk.lower() == low):
                return Success(token, pos + len(token))
        return Failure(pos, expected)

    return Parser(run)


# ── Combinators ──────────────────────────────────────────────────────────────


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run *parsers* one after another; the value is the tuple of values."""

    def run(text: str, pos: int) -> Success[tuple[Any, ...]] | Failure:
        values: list[Any] = []
        cursor = pos
        for parser in parsers:
            result = parser(text, cursor)
            if isinstance(result, Failure):
                return result
            values.append(result.value)
            cursor = result.pos
        return Success(tuple(values), cursor)

    return Parser(run)


def choice(*parsers: Parser[Any]) -> Parser[Any]:
    """Ordered alternation: the first alternative that matches wins."""

    def run(text: str, pos: int) -> Success[Any] | Failure:
        failures: list[Failure] = []
        for parser in parsers:
            result = parser(text, pos)
            if isinstance(result, Success):
                return result
            failures.append(result)
        return _merge(failures)

    return Parser(run)


def optional(parser: Parser[T]) -> Parser[T | None]:
    """Match *parser* or nothing; the value is ``None`` when absent."""

    def run(text: str, pos: int) -> Success[T | None] | Failure:
        result = parser(text, pos)
        if isinstance(result, Failure):
            return Success(None, pos)
        return result

    return Parser(run)


def where(parser: Parser[T], predicate: Callable[[T], bool], expected: str) -> Parser[T]:
    """Match *parser* only when *predicate* holds for its value."""

    def run(text: str, pos: int) -> Success[T] | Failure:
        result = parser(text, pos)
        if isinstance(result, Failure):
            return result
        if not predicate(result.value):
            return Failure(pos, (expected,))
        return result

    return Parser(run)
