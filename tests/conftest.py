"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture
def movetext_debug_log(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture debug records emitted while assembling movetext."""
    with caplog.at_level(logging.DEBUG, logger="pgnkit.core.notation.movetext"):
        yield caplog


@pytest.fixture
def annotated_game() -> str:
    """A short annotated game with comments, NAGs and nested variations."""
    return (
        "1. e4 {King's pawn} e5 2. Nf3 $1 Nc6 "
        "(2... d6 {Philidor} (2... Nf6 3. Nxe5)) "
        "3. Bb5 a6 4. Ba4 Nf6 5. O-O Be7 1/2-1/2"
    )
