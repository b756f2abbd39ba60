"""Core domain layer: PGN movetext parsing with zero external dependencies.

Quick start::

    from pgnkit.core import parse_move, parse_movetext

    move = parse_move("Qxd5+!!")
    for entry in parse_movetext("1. e4 e5 (1... c5) 2. Nf3 *"):
        print(entry)
"""

from pgnkit.core.enums import Color, File, GameResult, MoveAnnotation, MoveType, Piece
from pgnkit.core.errors import MoveParseError, MovetextError, PgnError
from pgnkit.core.move import Move
from pgnkit.core.notation import (
    CommentEntry,
    GameEndEntry,
    MovePairEntry,
    MoveTextEntry,
    MoveTextEntryType,
    NAGEntry,
    RAVEntry,
    SingleMoveEntry,
    format_move,
    format_movetext,
    parse_move,
    parse_movetext,
    try_parse_move,
)
from pgnkit.core.types import Square, file_from_letter, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "File",
    "GameResult",
    "MoveAnnotation",
    "MoveType",
    "Piece",
    # Types / helpers
    "Square",
    "file_from_letter",
    "parse_square",
    "square_name",
    # Domain objects
    "Move",
    "MoveTextEntry",
    "MoveTextEntryType",
    "MovePairEntry",
    "SingleMoveEntry",
    "CommentEntry",
    "GameEndEntry",
    "NAGEntry",
    "RAVEntry",
    # Errors
    "PgnError",
    "MoveParseError",
    "MovetextError",
    # Notation
    "parse_move",
    "try_parse_move",
    "parse_movetext",
    "format_move",
    "format_movetext",
]
