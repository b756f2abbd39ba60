"""PGN result tokens and text rendering of parsed movetext."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pgnkit.core.enums import Color, GameResult, MoveType, Piece
from pgnkit.core.move import Move
from pgnkit.core.notation.annotations import ANNOTATION_TEXT, indicator_text
from pgnkit.core.notation.models import (
    CommentEntry,
    GameEndEntry,
    MovePairEntry,
    MoveTextEntry,
    NAGEntry,
    RAVEntry,
    SingleMoveEntry,
)


def pgn_result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN result token."""
    if result == GameResult.WHITE_WINS:
        return "1-0"
    if result == GameResult.BLACK_WINS:
        return "0-1"
    if result == GameResult.DRAW:
        return "1/2-1/2"
    return "*"


def game_result_from_pgn(token: str) -> GameResult:
    """Convert PGN result token to :class:`GameResult`."""
    if token == "1-0":
        return GameResult.WHITE_WINS
    if token == "0-1":
        return GameResult.BLACK_WINS
    if token == "1/2-1/2":
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


def _origin_text(move: Move) -> str:
    if move.origin_square is not None:
        return str(move.origin_square)
    text = move.origin_file.letter if move.origin_file is not None else ""
    if move.origin_rank is not None:
        text += str(move.origin_rank)
    return text


def _body_text(move: Move) -> str:
    if move.type == MoveType.CASTLE_KING_SIDE:
        return "O-O"
    if move.type == MoveType.CASTLE_QUEEN_SIDE:
        return "O-O-O"

    # dxe
    if move.target_square is None:
        origin = move.origin_file.letter if move.origin_file is not None else ""
        target = move.target_file.letter if move.target_file is not None else ""
        return f"{origin}x{target}"

    target = str(move.target_square)
    if move.target_piece not in (None, Piece.PAWN):
        target = move.target_piece.letter + target

    has_origin = move.origin_file is not None or move.origin_rank is not None
    if not move.is_capture and not has_origin:
        if move.piece == move.target_piece:
            return target
        if move.target_piece == Piece.PAWN:
            # NPd5: without the P the knight would be read as the target
            target = "P" + target

    origin = _origin_text(move)
    if move.piece is not None and not (
        move.piece == Piece.PAWN and move.target_piece == Piece.PAWN
    ):
        origin = move.piece.letter + origin
    return f"{origin}x{target}" if move.is_capture else origin + target


def format_move(move: Move) -> str:
    """Render *move* as move text, e.g. ``Qxd5+!!`` or ``exd6e.p.``.

    Parsing the result with :func:`~pgnkit.core.notation.moves.parse_move`
    yields a move equal to *move*.
    """
    text = _body_text(move)
    if move.type == MoveType.CAPTURE_EN_PASSANT:
        text += "e.p."
    if move.promoted_piece is not None:
        text += "=" + move.promoted_piece.letter
    text += indicator_text(move.is_check, move.is_double_check, move.is_check_mate)
    if move.annotation is not None:
        text += ANNOTATION_TEXT.get(move.annotation, "")
    return text


def _number_prefix(number: int | None, color: Color) -> str:
    if number is None:
        return ""
    return f"{number}. " if color == Color.WHITE else f"{number}... "


def _entry_text(entry: MoveTextEntry) -> str:
    if isinstance(entry, MovePairEntry):
        prefix = _number_prefix(entry.move_number, Color.WHITE)
        return f"{prefix}{format_move(entry.white)} {format_move(entry.black)}"
    if isinstance(entry, SingleMoveEntry):
        prefix = _number_prefix(entry.move_number, entry.color or Color.WHITE)
        return prefix + format_move(entry.move)
    if isinstance(entry, CommentEntry):
        # PGN comments cannot contain a closing brace.
        return f"{{{entry.comment.replace('}', ']')}}}"
    if isinstance(entry, NAGEntry):
        return f"${entry.code}"
    if isinstance(entry, GameEndEntry):
        return pgn_result_token(entry.result)
    raise TypeError(f"Unsupported movetext entry: {entry!r}")


def format_movetext(entries: Iterable[MoveTextEntry]) -> str:
    """Build PGN movetext from parsed entries, variations included.

    Variations are rendered with an explicit stack, so nesting depth is not
    bounded by the interpreter's recursion limit.
    """
    stack: list[tuple[Iterator[MoveTextEntry], list[str]]] = [(iter(entries), [])]
    while True:
        pending, parts = stack[-1]
        entry = next(pending, None)
        if entry is None:
            stack.pop()
            text = " ".join(parts)
            if not stack:
                return text
            stack[-1][1].append(f"({text})")
        elif isinstance(entry, RAVEntry):
            stack.append((iter(entry.move_text), []))
        else:
            parts.append(_entry_text(entry))
