"""Move annotation glyphs and check indicators.

Both tables are ordered longest glyph first where one glyph is a prefix of
another (``!!!`` before ``!!`` before ``!``), because the grammar tries them
in this order and takes the first match.
"""

from __future__ import annotations

from typing import NamedTuple

from pgnkit.core.enums import MoveAnnotation

_ANNOTATIONS: dict[str, MoveAnnotation] = {
    "????": MoveAnnotation.ABYSMAL,
    "???": MoveAnnotation.ABYSMAL,
    "!!!!": MoveAnnotation.MIND_BLOWING,
    "!!!": MoveAnnotation.MIND_BLOWING,
    "?!?": MoveAnnotation.FASCINATING_BUT_UNSOUND,
    "!?!": MoveAnnotation.FASCINATING_BUT_UNSOUND,
    "??": MoveAnnotation.BLUNDER,
    "?!": MoveAnnotation.DUBIOUS,
    "!!": MoveAnnotation.BRILLIANT,
    "!?": MoveAnnotation.INTERESTING,
    "?": MoveAnnotation.MISTAKE,
    "!": MoveAnnotation.GOOD,
    "=/∞": MoveAnnotation.WITH_COMPENSATION,
    "=/+": MoveAnnotation.SLIGHT_ADVANTAGE_BLACK,
    "=": MoveAnnotation.EVEN_POSITION,
    "+/=": MoveAnnotation.SLIGHT_ADVANTAGE_WHITE,
    "+/-": MoveAnnotation.ADVANTAGE_WHITE,
    "+-": MoveAnnotation.DECISIVE_ADVANTAGE_WHITE,
    "-/+": MoveAnnotation.ADVANTAGE_BLACK,
    "-+": MoveAnnotation.DECISIVE_ADVANTAGE_BLACK,
    "∞": MoveAnnotation.UNCLEAR,
    "○": MoveAnnotation.SPACE,
    "↑↑": MoveAnnotation.DEVELOPMENT,
    "↑": MoveAnnotation.INITIATIVE,
    "⇄": MoveAnnotation.COUNTERPLAY,
    "∇": MoveAnnotation.COUNTERING,
    "Δ": MoveAnnotation.IDEA,
    "TN": MoveAnnotation.THEORETICAL_NOVELTY,
    "N": MoveAnnotation.THEORETICAL_NOVELTY,
}

ANNOTATION_GLYPHS: tuple[str, ...] = tuple(_ANNOTATIONS)

# Canonical glyph per meaning, used when rendering.
ANNOTATION_TEXT: dict[MoveAnnotation, str] = {}
for _glyph, _meaning in reversed(_ANNOTATIONS.items()):
    ANNOTATION_TEXT[_meaning] = _glyph
ANNOTATION_TEXT[MoveAnnotation.ABYSMAL] = "???"
ANNOTATION_TEXT[MoveAnnotation.MIND_BLOWING] = "!!!"
ANNOTATION_TEXT[MoveAnnotation.FASCINATING_BUT_UNSOUND] = "!?!"
del _glyph, _meaning


class Indicator(NamedTuple):
    """Check state stated by an indicator suffix (``None`` = not stated)."""

    is_check: bool | None = None
    is_double_check: bool | None = None
    is_check_mate: bool | None = None


_CHECK = Indicator(is_check=True)
_DOUBLE_CHECK = Indicator(is_check=True, is_double_check=True)
_CHECK_MATE = Indicator(is_check_mate=True)

_INDICATORS: dict[str, Indicator] = {
    "++": _DOUBLE_CHECK,
    "††": _DOUBLE_CHECK,
    "dbl ch": _DOUBLE_CHECK,
    "+": _CHECK,
    "†": _CHECK,
    "ch": _CHECK,
    "#": _CHECK_MATE,
    "‡": _CHECK_MATE,
}

INDICATOR_SYMBOLS: tuple[str, ...] = tuple(_INDICATORS)


def classify_annotation(glyph: str) -> MoveAnnotation:
    """Map an annotation glyph to its meaning.

    Glyphs outside the table map to ``UNKNOWN_ANNOTATION``.
    """
    return _ANNOTATIONS.get(glyph, MoveAnnotation.UNKNOWN_ANNOTATION)


def classify_indicator(symbol: str) -> Indicator:
    """Map a check/mate indicator to the check state it states."""
    try:
        return _INDICATORS[symbol]
    except KeyError:
        raise ValueError(f"Invalid check indicator: {symbol!r}") from None


def indicator_text(
    is_check: bool | None, is_double_check: bool | None, is_check_mate: bool | None
) -> str:
    """Canonical indicator suffix for a check state."""
    if is_check_mate:
        return "#"
    if is_double_check:
        return "++"
    if is_check:
        return "+"
    return ""
