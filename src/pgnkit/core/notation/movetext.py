"""Assemble a movetext token stream into :data:`MoveTextEntry` values."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pgnkit.core.enums import Color
from pgnkit.core.errors import MoveParseError, MovetextError
from pgnkit.core.move import Move
from pgnkit.core.notation.lexer import Token, TokenKind, tokenize_movetext
from pgnkit.core.notation.models import (
    CommentEntry,
    GameEndEntry,
    MovePairEntry,
    MoveTextEntry,
    NAGEntry,
    RAVEntry,
    SingleMoveEntry,
)
from pgnkit.core.notation.moves import parse_move
from pgnkit.core.notation.pgn import game_result_from_pgn

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _Line:
    """Assembly state of the main line or of one open variation."""

    start: int
    color: Color = Color.WHITE
    number: int | None = None
    last_color: Color = Color.WHITE
    last_number: int | None = None
    pending: tuple[Move, int | None] | None = None
    entries: list[MoveTextEntry] = field(default_factory=list)

    def flush(self) -> None:
        """Emit a white move still waiting for its black reply."""
        if self.pending is not None:
            move, number = self.pending
            self.entries.append(SingleMoveEntry(move, number, Color.WHITE))
            self.pending = None

    def add_move(self, move: Move) -> None:
        number = self.number
        self.last_color, self.last_number = self.color, number
        if self.color == Color.WHITE:
            self.flush()
            self.pending = (move, number)
            self.color = Color.BLACK
            return

        if self.pending is not None and self.pending[1] == number:
            self.entries.append(MovePairEntry(self.pending[0], move, number))
            self.pending = None
        else:
            self.flush()
            self.entries.append(SingleMoveEntry(move, number, Color.BLACK))
        self.color = Color.WHITE
        self.number = None if number is None else number + 1

    def append(self, entry: MoveTextEntry) -> None:
        self.flush()
        self.entries.append(entry)


def _read_move(token: Token) -> Move:
    try:
        return parse_move(token.text)
    except MoveParseError as exc:
        labels = " or ".join(exc.expected)
        raise MovetextError(
            f"Invalid move {token.text!r}: expected {labels}", token.pos + exc.position
        ) from exc


def assemble_movetext(tokens: Iterable[Token]) -> list[MoveTextEntry]:
    """Build movetext entries from a token stream.

    A white move directly followed by Black's reply of the same move number
    becomes a :class:`MovePairEntry`; any other move becomes a
    :class:`SingleMoveEntry`. Each ``( ... )`` becomes a :class:`RAVEntry`
    whose contents are complete before it is created. A result token at the
    top level ends the span.

    Raises:
        MovetextError: Malformed move, unbalanced parentheses or tokens after
            the game result.
    """
    root = _Line(start=0)
    stack: list[_Line] = [root]
    max_depth = 0
    finished: Token | None = None

    for token in tokens:
        if finished is not None:
            raise MovetextError(
                f"Unexpected {token.text!r} after game result {finished.text!r}", token.pos
            )
        line = stack[-1]
        kind = token.kind

        if kind == TokenKind.MOVE_NUMBER:
            line.flush()
            digits = token.text.rstrip(".")
            line.number = int(digits)
            line.color = Color.BLACK if len(token.text) - len(digits) >= 3 else Color.WHITE
        elif kind == TokenKind.MOVE:
            line.add_move(_read_move(token))
        elif kind == TokenKind.COMMENT:
            line.append(CommentEntry(token.text))
        elif kind == TokenKind.NAG:
            line.append(NAGEntry(int(token.text[1:])))
        elif kind == TokenKind.RAV_START:
            line.flush()
            # a variation replaces the move just played
            stack.append(_Line(start=token.pos, color=line.last_color, number=line.last_number))
            max_depth = max(max_depth, len(stack) - 1)
        elif kind == TokenKind.RAV_END:
            if len(stack) == 1:
                raise MovetextError("Unmatched ')'", token.pos)
            stack.pop()
            line.flush()
            stack[-1].append(RAVEntry(tuple(line.entries)))
        elif kind == TokenKind.RESULT:
            line.append(GameEndEntry(game_result_from_pgn(token.text)))
            if len(stack) == 1:
                finished = token

    if len(stack) > 1:
        raise MovetextError("Unterminated variation", stack[-1].start)
    root.flush()

    _LOGGER.debug(
        "Assembled %d movetext entries (variation depth %d)", len(root.entries), max_depth
    )
    return root.entries


def parse_movetext(movetext: str) -> list[MoveTextEntry]:
    """Tokenize and assemble a movetext span, e.g. ``1. e4 e5 (1... c5) 2. Nf3 *``."""
    return assemble_movetext(tokenize_movetext(movetext))
