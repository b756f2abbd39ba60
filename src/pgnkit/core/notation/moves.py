"""Move grammar: turns one move token (``Qxd5+!!``, ``O-O-O``, ``e8=Q``) into a :class:`Move`.

Parsers are layered bottom-up:

* letters: piece, file and rank;
* fragments: the target square and the optional disambiguating origin;
* move forms: infix capture, suffix capture, simplified pawn capture,
  basic move and castling;
* wrapping: promotion, en passant, check indicators and annotations.

Alternatives are tried in order and the first match wins. Nothing here
checks whether a move is legal on a board.
"""

from __future__ import annotations

from typing import NamedTuple

from pgnkit.core.enums import File, MoveAnnotation, MoveType, Piece
from pgnkit.core.errors import MoveParseError
from pgnkit.core.move import Move
from pgnkit.core.notation.annotations import (
    ANNOTATION_GLYPHS,
    INDICATOR_SYMBOLS,
    Indicator,
    classify_annotation,
    classify_indicator,
)
from pgnkit.core.notation.grammar import (
    Failure,
    Parser,
    Success,
    choice,
    end_of_input,
    literal,
    one_of,
    optional,
    sequence,
    where,
)
from pgnkit.core.types import Square, file_from_letter

# S (German "Springer") is still found in older PGNs for the knight.
PIECE_SYMBOLS: tuple[str, ...] = ("P", "N", "S", "B", "R", "Q", "K")
_PIECES: dict[str, Piece] = {
    "P": Piece.PAWN,
    "N": Piece.KNIGHT,
    "S": Piece.KNIGHT,
    "B": Piece.BISHOP,
    "R": Piece.ROOK,
    "Q": Piece.QUEEN,
    "K": Piece.KING,
}
# Lower-case piece letters, except b: in "bxc5" it is the b-file.
_LOWER_PIECE_SYMBOLS: tuple[str, ...] = tuple(s.lower() for s in PIECE_SYMBOLS if s != "B")
FILE_SYMBOLS: tuple[str, ...] = tuple("abcdefgh")
RANK_SYMBOLS: tuple[str, ...] = tuple("12345678")
CAPTURE_SIGNS: tuple[str, ...] = ("x", ":")

CASTLE_KING_SIDE_VARIANTS: tuple[str, ...] = ("O-O", "O - O", "0-0", "0 - 0")
CASTLE_QUEEN_SIDE_VARIANTS: tuple[str, ...] = ("O-O-O", "O - O - O", "0-0-0", "0 - 0 - 0")

MOVE_LABEL = "Move (e.g. Qc4 or e2e4 or 0-0-0)"


class Fragment(NamedTuple):
    """Piece / file / rank read from one side of a move."""

    piece: Piece | None
    file: File | None
    rank: int | None

    @property
    def square(self) -> Square | None:
        if self.file is None or self.rank is None:
            return None
        return Square(self.file, self.rank)


def _build_move(origin: Fragment | None, target: Fragment, move_type: MoveType) -> Move:
    if origin is None:
        return Move(
            type=move_type,
            piece=target.piece,
            target_piece=target.piece,
            target_square=target.square,
            target_file=target.file,
        )
    return Move(
        type=move_type,
        piece=origin.piece if origin.piece is not None else target.piece,
        origin_square=origin.square,
        origin_file=origin.file,
        origin_rank=origin.rank,
        target_piece=target.piece,
        target_square=target.square,
        target_file=target.file,
    )


# ── Letters ──────────────────────────────────────────────────────────────────

piece: Parser[Piece] = (
    choice(one_of(PIECE_SYMBOLS), one_of(_LOWER_PIECE_SYMBOLS).map(str.upper))
    .map(_PIECES.__getitem__)
    .label("Piece (N, B, R, Q, K or P)")
)
file_letter: Parser[File] = (
    one_of(FILE_SYMBOLS, ignore_case=True).map(file_from_letter).label("File letter (A..H)")
)
rank: Parser[int] = one_of(RANK_SYMBOLS).map(int).label("Rank (1..8)")
capture_sign: Parser[str] = one_of(CAPTURE_SIGNS).label("Capture sign (x or :)")

# ── Fragments ────────────────────────────────────────────────────────────────

# Qd5, or d5 for a pawn
target_fragment: Parser[Fragment] = choice(
    sequence(piece, file_letter, rank),
    sequence(file_letter, rank).map(lambda fr: (Piece.PAWN, *fr)),
).map(lambda parts: Fragment(*parts))

# any of piece, file, rank, in that order
origin_fragment: Parser[Fragment] = sequence(
    optional(piece), optional(file_letter), optional(rank)
).map(lambda parts: Fragment(*parts))

# ── Move forms ───────────────────────────────────────────────────────────────

basic_move: Parser[Move] = choice(
    sequence(origin_fragment, target_fragment).map(
        lambda ot: _build_move(ot[0], ot[1], MoveType.SIMPLE)
    ),
    target_fragment.map(lambda t: _build_move(None, t, MoveType.SIMPLE)),
)

# QxBc5
infix_capture_move: Parser[Move] = sequence(origin_fragment, capture_sign, target_fragment).map(
    lambda parts: _build_move(parts[0], parts[2], MoveType.CAPTURE)
)

# Qf4d4x, Qf4:
suffix_capture_move: Parser[Move] = basic_move.skip(capture_sign).map(
    lambda m: m.with_type(MoveType.CAPTURE)
)

# dxe; a pawn never captures along its own file
simplified_pawn_capture: Parser[Move] = where(
    sequence(file_letter, capture_sign, file_letter),
    lambda parts: parts[0] != parts[2],
    "Capture onto another file",
).map(
    lambda parts: Move(
        type=MoveType.CAPTURE,
        piece=Piece.PAWN,
        target_piece=Piece.PAWN,
        origin_file=parts[0],
        target_file=parts[2],
    )
)

basic_capturing_move: Parser[Move] = choice(
    infix_capture_move, suffix_capture_move, simplified_pawn_capture
)

# e.p. is accepted after any capture, not only pawn captures
en_passant: Parser[str] = literal("e.p.", ignore_case=True)

capturing_move: Parser[Move] = sequence(basic_capturing_move, optional(en_passant)).map(
    lambda parts: parts[0] if parts[1] is None else parts[0].with_type(MoveType.CAPTURE_EN_PASSANT)
)

castle_king_side: Parser[Move] = one_of(CASTLE_KING_SIDE_VARIANTS).map(
    lambda _: Move(type=MoveType.CASTLE_KING_SIDE)
)
castle_queen_side: Parser[Move] = one_of(CASTLE_QUEEN_SIDE_VARIANTS).map(
    lambda _: Move(type=MoveType.CASTLE_QUEEN_SIDE)
)
castle: Parser[Move] = choice(castle_queen_side, castle_king_side)

# ── Wrapping ─────────────────────────────────────────────────────────────────

promotion_suffix: Parser[Piece] = choice(
    literal("=").then(piece),
    literal("(").then(piece).skip(literal(")")),
)

# Neither the moving piece nor the target rank is checked: Qxd5(R) parses.
pawn_promotion: Parser[Move] = choice(
    sequence(basic_capturing_move, promotion_suffix),
    sequence(basic_move, promotion_suffix),
).map(lambda parts: parts[0].with_promotion(parts[1]))

# One parser per glyph, in table order. A suffix such as "++/=" is "+"
# followed by "+/=", so a longer glyph that leaves an unreadable tail must
# give way to a shorter one.
indicators: tuple[Parser[Indicator], ...] = tuple(
    literal(symbol).map(classify_indicator).label("Check indicator (e.g. + or #)")
    for symbol in INDICATOR_SYMBOLS
)
annotations: tuple[Parser[MoveAnnotation], ...] = tuple(
    literal(glyph).map(classify_annotation).label("Move annotation (e.g. ! or ??)")
    for glyph in ANNOTATION_GLYPHS
)

_eoi = end_of_input()

# (indicator, annotation); the first combination reaching the end wins
additional_info: Parser[tuple[Indicator | None, MoveAnnotation | None]] = choice(
    *(
        sequence(ind, note, _eoi).map(lambda v: (v[0], v[1]))
        for ind in indicators
        for note in annotations
    ),
    *(sequence(note, _eoi).map(lambda v: (None, v[0])) for note in annotations),
    *(sequence(ind, _eoi).map(lambda v: (v[0], None)) for ind in indicators),
    *(
        sequence(note, ind, _eoi).map(lambda v: (v[1], v[0]))
        for note in annotations
        for ind in indicators
    ),
    _eoi.map(lambda _: (None, None)),
)


def _attach(parts: tuple[Move, tuple[Indicator | None, MoveAnnotation | None]]) -> Move:
    move, (ind, note) = parts
    if note is not None:
        move = move.with_annotation(note)
    if ind is not None:
        move = move.with_indicator(*ind)
    return move


move_token: Parser[Move] = choice(
    *(
        sequence(form, additional_info).map(_attach)
        for form in (pawn_promotion, capturing_move, basic_move, castle)
    )
).label(MOVE_LABEL)


def try_parse_move(text: str) -> Success[Move] | Failure:
    """Parse a whole move token without raising."""
    return move_token(text, 0)


def parse_move(text: str) -> Move:
    """Parse a single move token such as ``Nbd7``, ``exd6e.p.`` or ``O-O+``.

    Raises:
        MoveParseError: *text* is not a move; carries the offset and the
            labels of what was expected there.
    """
    result = move_token(text, 0)
    if isinstance(result, Failure):
        raise MoveParseError(text, result.pos, result.expected)
    return result.value
