"""
Tokenize asciimath markup.

Scanning order at each position:
  1. whitespace is skipped
  2. "quoted text" becomes one TEXT token
  3. digit runs (with at most one interior decimal point) become NUMBER tokens
  4. emoji shortcodes (`:hand:`) become KEYWORD tokens
  5. the longest reserved string wins (keywords, symbols, brackets, ^ and _)
  6. remaining ASCII letters become single-character IDENTIFIER tokens
  7. anything else becomes a single-character OPERATOR token

Lexing never fails; the parser decides what is an error.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional

from . import tokens


class TokenKind(enum.Enum):
    IDENTIFIER = "identifier"
    NUMBER = "number"
    OPERATOR = "operator"
    OPEN = "open"
    CLOSE = "close"
    POWER = "power"
    SUBSCRIPT = "subscript"
    KEYWORD = "keyword"
    TEXT = "text"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    pos: int = 0


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of *text* lazily, left to right."""
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if ch == '"':
            # an empty pair yields an empty TEXT token, which renders as nothing
            end = text.find('"', i + 1)
            if end != -1:
                yield Token(TokenKind.TEXT, text[i + 1 : end], i)
                i = end + 1
                continue
            yield Token(TokenKind.OPERATOR, ch, i)
            i += 1
            continue

        if ch.isascii() and ch.isdigit():
            end = _number_end(text, i)
            yield Token(TokenKind.NUMBER, text[i:end], i)
            i = end
            continue

        shortcode = tokens.shortcode_at(text, i) if ch == ":" else None
        if shortcode is not None:
            yield Token(TokenKind.KEYWORD, shortcode, i)
            i += len(shortcode)
            continue

        reserved = _longest_reserved(text, i)
        if reserved is not None:
            raw_end = _raw_text_end(text, i, reserved)
            if raw_end is not None:
                body_start = i + len(reserved) + 1
                yield Token(TokenKind.TEXT, text[body_start : raw_end - 1], i)
                i = raw_end
                continue
            yield Token(_classify(reserved), reserved, i)
            i += len(reserved)
            continue

        if ch.isascii() and ch.isalpha():
            yield Token(TokenKind.IDENTIFIER, ch, i)
        else:
            yield Token(TokenKind.OPERATOR, ch, i)
        i += 1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _number_end(text: str, pos: int) -> int:
    """Return the end offset of the number starting at *pos*."""
    i = pos
    seen_point = False
    while i < len(text):
        ch = text[i]
        if ch.isascii() and ch.isdigit():
            i += 1
        elif (
            ch == "."
            and not seen_point
            and i + 1 < len(text)
            and text[i + 1].isascii()
            and text[i + 1].isdigit()
        ):
            seen_point = True
            i += 1
        else:
            break
    return i


def _longest_reserved(text: str, pos: int) -> Optional[str]:
    """Return the longest reserved string that *text* has at *pos*, if any."""
    limit = min(tokens.MAX_RESERVED_LEN, len(text) - pos)
    for length in range(limit, 0, -1):
        candidate = text[pos : pos + length]
        if candidate in tokens.RESERVED:
            return candidate
    return None


def _raw_text_end(text: str, pos: int, keyword: str) -> Optional[int]:
    """For ``text(...)`` / ``mbox(...)``, return the offset past the ``)``."""
    if keyword not in tokens.RAW_TEXT_KEYWORDS:
        return None
    open_pos = pos + len(keyword)
    if open_pos >= len(text) or text[open_pos] != "(":
        return None
    close_pos = text.find(")", open_pos + 1)
    if close_pos == -1:
        return None
    return close_pos + 1


def _classify(reserved: str) -> TokenKind:
    if reserved == tokens.POWER:
        return TokenKind.POWER
    if reserved == tokens.SUBSCRIPT:
        return TokenKind.SUBSCRIPT
    if reserved in tokens.OPEN_BRACKETS:
        return TokenKind.OPEN
    if reserved in tokens.CLOSE_BRACKETS:
        return TokenKind.CLOSE
    return TokenKind.KEYWORD
