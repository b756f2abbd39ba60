"""Movetext tokenizer.

Splits a movetext span into move numbers, move tokens, comments, NAGs,
variation delimiters and result tokens. Move tokens are not interpreted
here; that is the job of :mod:`pgnkit.core.notation.moves`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import StrEnum

from pgnkit.core.errors import MovetextError

RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})
_MOVE_NUMBER_RE = re.compile(r"^(\d+)(?:\.+|$)")
_SEPARATORS = "{}();"
_PAREN_PROMOTION_RE = re.compile(r"\([PNSBRQKpnsrqk]\)")
# Castling written with spaces would otherwise be split into several tokens.
_SPACED_CASTLES = ("O - O - O", "0 - 0 - 0", "O - O", "0 - 0")
_EN_PASSANT_RE = re.compile(r"e\.p\.", re.IGNORECASE)


class TokenKind(StrEnum):
    MOVE_NUMBER = "move-number"
    MOVE = "move"
    COMMENT = "comment"
    NAG = "nag"
    RAV_START = "rav-start"
    RAV_END = "rav-end"
    RESULT = "result"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical unit of movetext; *pos* is its offset in the input."""

    kind: TokenKind
    text: str
    pos: int


def _scan_word(movetext: str, idx: int) -> int:
    end = idx
    while end < len(movetext) and not movetext[end].isspace():
        if movetext[end] in _SEPARATORS:
            # e8(Q) is a promotion, not a variation
            if end > idx and _PAREN_PROMOTION_RE.match(movetext, end):
                end += 3
                continue
            break
        end += 1
    return end


def _word_tokens(word: str, pos: int, tokens: list[Token]) -> None:
    if word in RESULT_TOKENS:
        tokens.append(Token(TokenKind.RESULT, word, pos))
        return

    number = _MOVE_NUMBER_RE.match(word)
    if number is not None:
        tokens.append(Token(TokenKind.MOVE_NUMBER, number.group(0), pos))
        rest = word[number.end() :]
        if rest:
            tokens.append(Token(TokenKind.MOVE, rest, pos + number.end()))
        return

    # "exd6 e.p.": the suffix belongs to the capture before it
    if _EN_PASSANT_RE.match(word) and tokens and tokens[-1].kind == TokenKind.MOVE:
        prev = tokens[-1]
        tokens[-1] = replace(prev, text=prev.text + word)
        return

    if word.startswith("$"):
        if not word[1:].isdigit():
            raise MovetextError(f"Invalid numeric annotation glyph {word!r}", pos)
        tokens.append(Token(TokenKind.NAG, word, pos))
        return

    # "1 ... e5" or "1 ...e5": the dots continue the preceding move number
    if word.startswith("."):
        dots = len(word) - len(word.lstrip("."))
        if tokens and tokens[-1].kind == TokenKind.MOVE_NUMBER:
            prev = tokens[-1]
            tokens[-1] = replace(prev, text=prev.text + word[:dots])
        word = word[dots:]
        pos += dots
        if not word:
            return

    tokens.append(Token(TokenKind.MOVE, word, pos))


def tokenize_movetext(movetext: str) -> list[Token]:
    """Split *movetext* into :class:`Token` values.

    Brace comments are kept verbatim; ``;`` comments run to the end of the
    line; lines starting with ``%`` are escape lines and are dropped.

    Raises:
        MovetextError: Unterminated brace comment or malformed NAG.
    """
    tokens: list[Token] = []
    idx = 0
    total = len(movetext)

    while idx < total:
        ch = movetext[idx]

        if ch.isspace():
            idx += 1
            continue

        if ch == "%" and (idx == 0 or movetext[idx - 1] == "\n"):
            end = movetext.find("\n", idx + 1)
            idx = total if end < 0 else end
            continue

        if ch == "{":
            end = movetext.find("}", idx + 1)
            if end < 0:
                raise MovetextError("Unterminated comment", idx)
            tokens.append(Token(TokenKind.COMMENT, movetext[idx + 1 : end], idx))
            idx = end + 1
            continue

        if ch == ";":
            end = movetext.find("\n", idx + 1)
            if end < 0:
                end = total
            tokens.append(Token(TokenKind.COMMENT, movetext[idx + 1 : end], idx))
            idx = end
            continue

        if ch == "(":
            tokens.append(Token(TokenKind.RAV_START, ch, idx))
            idx += 1
            continue

        if ch == ")":
            tokens.append(Token(TokenKind.RAV_END, ch, idx))
            idx += 1
            continue

        spaced = next((c for c in _SPACED_CASTLES if movetext.startswith(c, idx)), None)
        if spaced is not None:
            end = _scan_word(movetext, idx + len(spaced))
            tokens.append(Token(TokenKind.MOVE, movetext[idx:end], idx))
            idx = end
            continue

        end = _scan_word(movetext, idx)
        if end == idx:
            # stray "}" outside a comment
            raise MovetextError(f"Unexpected {ch!r}", idx)
        _word_tokens(movetext[idx:end], idx, tokens)
        idx = end

    return tokens
