"""Exceptions raised for malformed PGN movetext."""

from __future__ import annotations


class PgnError(ValueError):
    """Base class for PGN parse failures."""


class MoveParseError(PgnError):
    """A single move token did not match the move grammar.

    Args:
        text: The move token that was being parsed.
        position: Offset into *text* of the furthest failure.
        expected: Human-readable labels of what would have been accepted.
    """

    def __init__(self, text: str, position: int, expected: tuple[str, ...]) -> None:
        self.text = text
        self.position = position
        self.expected = expected
        labels = " or ".join(expected) if expected else "nothing"
        super().__init__(
            f"Invalid move {text!r} at position {position}: expected {labels}"
        )


class MovetextError(PgnError):
    """The movetext token stream is structurally malformed."""

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(f"{message} (at offset {position})")
