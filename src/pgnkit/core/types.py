"""Square value type and coordinate helpers."""

from __future__ import annotations

from dataclasses import dataclass

from pgnkit.core.enums import File

_FILE_LETTERS = "abcdefgh"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A board square, e.g. ``Square(File.D, 5)`` for d5."""

    file: File
    rank: int

    def __post_init__(self) -> None:
        if not 1 <= self.rank <= 8:
            raise ValueError(f"Rank out of range (1..8): {self.rank!r}")

    def __str__(self) -> str:
        return f"{self.file.letter}{self.rank}"


def file_from_letter(letter: str) -> File:
    """Map ``'a'``..``'h'`` (any case) to :class:`File`."""
    idx = _FILE_LETTERS.find(letter.lower()) if len(letter) == 1 else -1
    if idx < 0:
        raise ValueError(f"Invalid file letter: {letter!r}")
    return File(idx)


def square_name(square: Square) -> str:
    """Human-readable name, e.g. ``Square(File.E, 4)`` → ``'e4'``."""
    return str(square)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``Square(File.E, 4)``."""
    if len(name) != 2 or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(file_from_letter(name[0]), int(name[1]))
