"""Move value object (notation-level representation)."""

from __future__ import annotations

from dataclasses import dataclass, replace

from pgnkit.core.enums import File, MoveAnnotation, MoveType, Piece
from pgnkit.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object describing a move as it was written.

    Only what the notation states is recorded: ``None`` means "not stated",
    never "false". Castling moves carry no square or piece data.
    """

    type: MoveType
    piece: Piece | None = None
    origin_square: Square | None = None
    origin_file: File | None = None
    origin_rank: int | None = None
    target_square: Square | None = None
    target_file: File | None = None
    target_piece: Piece | None = None
    promoted_piece: Piece | None = None
    is_check: bool | None = None
    is_double_check: bool | None = None
    is_check_mate: bool | None = None
    annotation: MoveAnnotation | None = None

    # ── Wrapping ─────────────────────────────────────────────────────────

    def with_type(self, move_type: MoveType) -> Move:
        return replace(self, type=move_type)

    def with_promotion(self, piece: Piece) -> Move:
        return replace(self, promoted_piece=piece)

    def with_indicator(
        self,
        is_check: bool | None,
        is_double_check: bool | None,
        is_check_mate: bool | None,
    ) -> Move:
        return replace(
            self,
            is_check=is_check,
            is_double_check=is_double_check,
            is_check_mate=is_check_mate,
        )

    def with_annotation(self, annotation: MoveAnnotation | None) -> Move:
        return replace(self, annotation=annotation)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return self.type.is_capture

    @property
    def is_castle(self) -> bool:
        return self.type.is_castle
