"""Tests for movetext entry assembly."""

import logging

import pytest

from pgnkit.core.enums import Color, GameResult, MoveType
from pgnkit.core.errors import MoveParseError, MovetextError
from pgnkit.core.notation.lexer import Token, TokenKind
from pgnkit.core.notation.models import (
    CommentEntry,
    GameEndEntry,
    MovePairEntry,
    MoveTextEntryType,
    NAGEntry,
    RAVEntry,
    SingleMoveEntry,
)
from pgnkit.core.notation.moves import parse_move
from pgnkit.core.notation.movetext import assemble_movetext, parse_movetext


class TestPairing:
    def test_move_pairs(self) -> None:
        entries = parse_movetext("1. e4 e5 2. Nf3 Nc6")
        assert entries == [
            MovePairEntry(parse_move("e4"), parse_move("e5"), 1),
            MovePairEntry(parse_move("Nf3"), parse_move("Nc6"), 2),
        ]

    def test_trailing_white_move_is_single(self) -> None:
        entries = parse_movetext("1. e4 e5 2. Nf3")
        assert entries[-1] == SingleMoveEntry(parse_move("Nf3"), 2, Color.WHITE)

    def test_black_continuation(self) -> None:
        entries = parse_movetext("1... e5 2. Nf3 Nc6")
        assert entries == [
            SingleMoveEntry(parse_move("e5"), 1, Color.BLACK),
            MovePairEntry(parse_move("Nf3"), parse_move("Nc6"), 2),
        ]

    def test_comment_splits_pair(self) -> None:
        entries = parse_movetext("1. e4 {best by test} e5")
        assert entries == [
            SingleMoveEntry(parse_move("e4"), 1, Color.WHITE),
            CommentEntry("best by test"),
            SingleMoveEntry(parse_move("e5"), 1, Color.BLACK),
        ]

    def test_unnumbered_moves_still_pair(self) -> None:
        entries = parse_movetext("e4 e5 Nf3")
        assert entries == [
            MovePairEntry(parse_move("e4"), parse_move("e5"), None),
            SingleMoveEntry(parse_move("Nf3"), None, Color.WHITE),
        ]

    def test_numbers_advance_without_markers(self) -> None:
        entries = parse_movetext("1. e4 e5 Nf3 Nc6")
        assert [e.move_number for e in entries] == [1, 2]


class TestEntries:
    def test_nag(self) -> None:
        entries = parse_movetext("1. e4 $1 e5")
        assert entries[1] == NAGEntry(1)
        assert entries[1].type == MoveTextEntryType.NUMERIC_ANNOTATION_GLYPH

    def test_game_end(self) -> None:
        entries = parse_movetext("1. e4 e5 1/2-1/2")
        assert entries[-1] == GameEndEntry(GameResult.DRAW)
        assert entries[-1].type == MoveTextEntryType.GAME_END

    def test_comment_kept_verbatim(self) -> None:
        entries = parse_movetext("{  spaced   out  }")
        assert entries == [CommentEntry("  spaced   out  ")]

    def test_discriminants(self) -> None:
        assert MovePairEntry.type == MoveTextEntryType.MOVE_PAIR
        assert SingleMoveEntry.type == MoveTextEntryType.SINGLE_MOVE
        assert CommentEntry.type == MoveTextEntryType.COMMENT
        assert RAVEntry.type == MoveTextEntryType.RECURSIVE_ANNOTATION_VARIATION

    def test_annotated_moves(self) -> None:
        entries = parse_movetext("23. Qxd5+!! Kxd5 24. O-O-O# 1-0")
        pair = entries[0]
        assert isinstance(pair, MovePairEntry)
        assert pair.white.type == MoveType.CAPTURE
        assert pair.white.is_check is True
        assert entries[1] == SingleMoveEntry(parse_move("O-O-O#"), 24, Color.WHITE)
        assert entries[2] == GameEndEntry(GameResult.WHITE_WINS)

    def test_detached_en_passant(self) -> None:
        entries = parse_movetext("1. e4 d5 2. e5 f5 3. exf6 e.p. Nxf6")
        pair = entries[2]
        assert isinstance(pair, MovePairEntry)
        assert pair.white.type == MoveType.CAPTURE_EN_PASSANT
        assert pair.white.target_square == parse_move("f6").target_square
        assert pair.black == parse_move("Nxf6")

    def test_entries_are_immutable(self) -> None:
        entry = parse_movetext("{x}")[0]
        with pytest.raises(AttributeError):
            entry.comment = "y"  # type: ignore[misc]


class TestVariations:
    def test_simple_variation(self) -> None:
        entries = parse_movetext("1. e4 e5 (1... c5) 2. Nf3")
        assert entries == [
            MovePairEntry(parse_move("e4"), parse_move("e5"), 1),
            RAVEntry((SingleMoveEntry(parse_move("c5"), 1, Color.BLACK),)),
            SingleMoveEntry(parse_move("Nf3"), 2, Color.WHITE),
        ]

    def test_unnumbered_variation_replaces_last_move(self) -> None:
        entries = parse_movetext("1. e4 e5 (c5 2. Nf3) 2. Nf3")
        rav = entries[1]
        assert isinstance(rav, RAVEntry)
        assert rav.move_text[0] == SingleMoveEntry(parse_move("c5"), 1, Color.BLACK)
        assert rav.move_text[1] == SingleMoveEntry(parse_move("Nf3"), 2, Color.WHITE)

    def test_nested_variations(self) -> None:
        entries = parse_movetext("1. e4 (1. d4 (1. Nf3)) e5")
        assert entries[0] == SingleMoveEntry(parse_move("e4"), 1, Color.WHITE)
        outer = entries[1]
        assert isinstance(outer, RAVEntry)
        assert outer.move_text[0] == SingleMoveEntry(parse_move("d4"), 1, Color.WHITE)
        inner = outer.move_text[1]
        assert isinstance(inner, RAVEntry)
        assert inner.move_text == (SingleMoveEntry(parse_move("Nf3"), 1, Color.WHITE),)
        assert entries[2] == SingleMoveEntry(parse_move("e5"), 1, Color.BLACK)

    def test_three_levels_with_comments(self) -> None:
        entries = parse_movetext(
            "1. e4 (1. d4 {queen} (1. c4 {english} (1. Nf3 $5 g6)) d5) e5 *"
        )
        level1 = entries[1]
        assert isinstance(level1, RAVEntry)
        level2 = level1.move_text[2]
        assert isinstance(level2, RAVEntry)
        assert level2.move_text[1] == CommentEntry("english")
        level3 = level2.move_text[2]
        assert isinstance(level3, RAVEntry)
        assert level3.move_text == (
            SingleMoveEntry(parse_move("Nf3"), 1, Color.WHITE),
            NAGEntry(5),
            SingleMoveEntry(parse_move("g6"), 1, Color.BLACK),
        )
        assert level1.move_text[3] == SingleMoveEntry(parse_move("d5"), 1, Color.BLACK)
        assert entries[-1] == GameEndEntry(GameResult.IN_PROGRESS)

    def test_deep_nesting_does_not_recurse(self) -> None:
        depth = 5000
        entries = parse_movetext("1. e4 " + "(1. d4 " * depth + ")" * depth)
        node = entries[1]
        for _ in range(depth - 1):
            assert isinstance(node, RAVEntry)
            node = node.move_text[1]
        assert isinstance(node, RAVEntry)
        assert node.move_text == (SingleMoveEntry(parse_move("d4"), 1, Color.WHITE),)

    def test_fixture_game(self, annotated_game: str) -> None:
        entries = parse_movetext(annotated_game)
        kinds = [e.type for e in entries]
        assert kinds.count(MoveTextEntryType.RECURSIVE_ANNOTATION_VARIATION) == 1
        assert entries[-1] == GameEndEntry(GameResult.DRAW)
        assert entries[0] == SingleMoveEntry(parse_move("e4"), 1, Color.WHITE)
        assert entries[1] == CommentEntry("King's pawn")


class TestErrors:
    def test_bad_move_fails_whole_movetext(self) -> None:
        with pytest.raises(MovetextError, match="Invalid move 'Qz5'") as excinfo:
            parse_movetext("1. e4 e5 2. Qz5")
        assert excinfo.value.position == 13
        assert isinstance(excinfo.value.__cause__, MoveParseError)

    def test_unmatched_close(self) -> None:
        with pytest.raises(MovetextError, match="Unmatched"):
            parse_movetext("1. e4 )")

    def test_unterminated_variation(self) -> None:
        with pytest.raises(MovetextError, match="Unterminated variation") as excinfo:
            parse_movetext("1. e4 (1. d4 (1. c4)")
        assert excinfo.value.position == 6

    def test_tokens_after_result(self) -> None:
        with pytest.raises(MovetextError, match="after game result"):
            parse_movetext("1. e4 1-0 e5")

    def test_result_inside_variation_is_allowed(self) -> None:
        entries = parse_movetext("1. f3 e5 2. g4 (2. e4 *) Qh4# 0-1")
        rav = entries[2]
        assert isinstance(rav, RAVEntry)
        assert rav.move_text[-1] == GameEndEntry(GameResult.IN_PROGRESS)
        assert entries[-1] == GameEndEntry(GameResult.BLACK_WINS)


class TestAssembleTokens:
    def test_pre_tokenized_input(self) -> None:
        tokens = [
            Token(TokenKind.MOVE_NUMBER, "1.", 0),
            Token(TokenKind.MOVE, "d4", 3),
            Token(TokenKind.MOVE, "Nf6", 6),
            Token(TokenKind.RESULT, "*", 10),
        ]
        assert assemble_movetext(tokens) == [
            MovePairEntry(parse_move("d4"), parse_move("Nf6"), 1),
            GameEndEntry(GameResult.IN_PROGRESS),
        ]

    def test_accepts_any_iterable(self) -> None:
        tokens = iter([Token(TokenKind.MOVE, "e4", 0)])
        assert assemble_movetext(tokens) == [SingleMoveEntry(parse_move("e4"), None, Color.WHITE)]

    def test_debug_log(self, movetext_debug_log: pytest.LogCaptureFixture) -> None:
        parse_movetext("1. e4 (1. d4 (1. c4)) e5")
        records = [r for r in movetext_debug_log.records if r.levelno == logging.DEBUG]
        assert any("variation depth 2" in r.getMessage() for r in records)

    def test_determinism(self, annotated_game: str) -> None:
        assert parse_movetext(annotated_game) == parse_movetext(annotated_game)
