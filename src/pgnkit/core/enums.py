"""Core enumerations for the PGN domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Piece(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Canonical English letter, e.g. ``N`` for the knight."""
        return "PNBRQK"[self.value - 1]


class File(IntEnum):
    """Board file a–h."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @property
    def letter(self) -> str:
        return chr(ord("a") + self.value)

    def __str__(self) -> str:
        return self.letter


class MoveType(IntEnum):
    """Move classification as written in the notation."""

    SIMPLE = 0
    CAPTURE = 1
    CAPTURE_EN_PASSANT = 2
    CASTLE_KING_SIDE = 3
    CASTLE_QUEEN_SIDE = 4

    @property
    def is_capture(self) -> bool:
        return self in (MoveType.CAPTURE, MoveType.CAPTURE_EN_PASSANT)

    @property
    def is_castle(self) -> bool:
        return self in (MoveType.CASTLE_KING_SIDE, MoveType.CASTLE_QUEEN_SIDE)


class MoveAnnotation(StrEnum):
    """Semantic meaning of a textual move annotation glyph."""

    MIND_BLOWING = "MindBlowing"
    BRILLIANT = "Brilliant"
    GOOD = "Good"
    INTERESTING = "Interesting"
    DUBIOUS = "Dubious"
    MISTAKE = "Mistake"
    BLUNDER = "Blunder"
    ABYSMAL = "Abysmal"
    FASCINATING_BUT_UNSOUND = "FascinatingButUnsound"
    UNCLEAR = "Unclear"
    WITH_COMPENSATION = "WithCompensation"
    EVEN_POSITION = "EvenPosition"
    SLIGHT_ADVANTAGE_WHITE = "SlightAdvantageWhite"
    SLIGHT_ADVANTAGE_BLACK = "SlightAdvantageBlack"
    ADVANTAGE_WHITE = "AdvantageWhite"
    ADVANTAGE_BLACK = "AdvantageBlack"
    DECISIVE_ADVANTAGE_WHITE = "DecisiveAdvantageWhite"
    DECISIVE_ADVANTAGE_BLACK = "DecisiveAdvantageBlack"
    SPACE = "Space"
    INITIATIVE = "Initiative"
    DEVELOPMENT = "Development"
    COUNTERPLAY = "Counterplay"
    COUNTERING = "Countering"
    IDEA = "Idea"
    THEORETICAL_NOVELTY = "TheoreticalNovelty"
    UNKNOWN_ANNOTATION = "UnknownAnnotation"


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
