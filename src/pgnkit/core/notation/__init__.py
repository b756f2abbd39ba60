"""Notation package: move grammar, movetext assembly and rendering."""

from pgnkit.core.notation.annotations import (
    ANNOTATION_GLYPHS,
    INDICATOR_SYMBOLS,
    Indicator,
    classify_annotation,
    classify_indicator,
)
from pgnkit.core.notation.lexer import Token, TokenKind, tokenize_movetext
from pgnkit.core.notation.models import (
    CommentEntry,
    GameEndEntry,
    MovePairEntry,
    MoveTextEntry,
    MoveTextEntryType,
    NAGEntry,
    RAVEntry,
    SingleMoveEntry,
)
from pgnkit.core.notation.moves import parse_move, try_parse_move
from pgnkit.core.notation.movetext import assemble_movetext, parse_movetext
from pgnkit.core.notation.pgn import (
    format_move,
    format_movetext,
    game_result_from_pgn,
    pgn_result_token,
)

__all__ = [
    # Move grammar
    "parse_move",
    "try_parse_move",
    "ANNOTATION_GLYPHS",
    "INDICATOR_SYMBOLS",
    "Indicator",
    "classify_annotation",
    "classify_indicator",
    # Movetext
    "Token",
    "TokenKind",
    "tokenize_movetext",
    "assemble_movetext",
    "parse_movetext",
    "MoveTextEntry",
    "MoveTextEntryType",
    "MovePairEntry",
    "SingleMoveEntry",
    "CommentEntry",
    "GameEndEntry",
    "NAGEntry",
    "RAVEntry",
    # Rendering
    "format_move",
    "format_movetext",
    "pgn_result_token",
    "game_result_from_pgn",
]
