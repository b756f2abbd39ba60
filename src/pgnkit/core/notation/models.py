"""Movetext entry models: the tree a movetext span is parsed into."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, TypeAlias

from pgnkit.core.enums import Color, GameResult
from pgnkit.core.move import Move


class MoveTextEntryType(IntEnum):
    """Discriminant shared by every movetext entry."""

    MOVE_PAIR = 0
    SINGLE_MOVE = 1
    GAME_END = 2
    COMMENT = 3
    NUMERIC_ANNOTATION_GLYPH = 4
    RECURSIVE_ANNOTATION_VARIATION = 5


@dataclass(frozen=True, slots=True)
class MovePairEntry:
    """White's and Black's moves of one full move, written together."""

    white: Move
    black: Move
    move_number: int | None = None

    type: ClassVar[MoveTextEntryType] = MoveTextEntryType.MOVE_PAIR


@dataclass(frozen=True, slots=True)
class SingleMoveEntry:
    """A move standing on its own: ``1... e5``, or a move cut off by a comment."""

    move: Move
    move_number: int | None = None
    color: Color | None = None

    type: ClassVar[MoveTextEntryType] = MoveTextEntryType.SINGLE_MOVE


@dataclass(frozen=True, slots=True)
class CommentEntry:
    comment: str

    type: ClassVar[MoveTextEntryType] = MoveTextEntryType.COMMENT


@dataclass(frozen=True, slots=True)
class GameEndEntry:
    result: GameResult

    type: ClassVar[MoveTextEntryType] = MoveTextEntryType.GAME_END


@dataclass(frozen=True, slots=True)
class NAGEntry:
    """Numeric annotation glyph, ``$n``."""

    code: int

    type: ClassVar[MoveTextEntryType] = MoveTextEntryType.NUMERIC_ANNOTATION_GLYPH


@dataclass(frozen=True, slots=True)
class RAVEntry:
    """Recursive annotation variation: a parenthesised alternative line."""

    move_text: tuple[MoveTextEntry, ...]

    type: ClassVar[MoveTextEntryType] = MoveTextEntryType.RECURSIVE_ANNOTATION_VARIATION


MoveTextEntry: TypeAlias = (
    MovePairEntry | SingleMoveEntry | CommentEntry | GameEndEntry | NAGEntry | RAVEntry
)
