"""
Recursive-descent parser for asciimath.

Precedence, tightest first:
  simple    := atom | group | keyword application
  scripted  := simple (("^" | "_") simple)*      left to right
  term      := scripted ("/" scripted)*          left to right
  row       := term*

``/`` binds the terms immediately around it; bracket a longer run to put it
in a fraction.  The first error aborts the parse.
"""
from __future__ import annotations

from typing import Iterable, Optional

from . import tokens
from .lexer import Token, TokenKind
from .tree import (
    EMOJI,
    IDENTIFIER,
    NUMBER,
    OPERATOR,
    SYMBOL,
    TEXT,
    Atom,
    Fraction,
    Function,
    Group,
    Node,
    Power,
    Row,
    Subscript,
)


class ParseError(ValueError):
    """Raised when asciimath input cannot be parsed."""

    def __init__(self, message: str, pos: Optional[int] = None) -> None:
        self.pos = pos
        if pos is not None:
            message = f"{message} (at offset {pos})"
        super().__init__(message)


class UnmatchedBracket(ParseError):
    """A close bracket without its open bracket, or an unclosed group."""


class MissingOperand(ParseError):
    """An operator or keyword ran out of input before its operand."""


class UnexpectedToken(ParseError):
    """A token where the grammar allows none."""


def parse(token_stream: Iterable[Token]) -> Row:
    """Parse a token stream into a Row.

    Raises:
        UnmatchedBracket, MissingOperand, UnexpectedToken: on malformed input.
    """
    return _Parser(token_stream).parse()


class _Parser:
    def __init__(self, token_stream: Iterable[Token]) -> None:
        self._tokens = iter(token_stream)
        self._peeked: Optional[Token] = None
        self._last_pos = 0
        self._advance()

    # -- token cursor -------------------------------------------------------

    def _advance(self) -> Optional[Token]:
        current = self._peeked
        if current is not None:
            self._last_pos = current.pos + len(current.text)
        self._peeked = next(self._tokens, None)
        return current

    def _peek(self) -> Optional[Token]:
        return self._peeked

    def _is_fraction_bar(self, tok: Optional[Token]) -> bool:
        return (
            tok is not None
            and tok.kind is TokenKind.OPERATOR
            and tok.text == tokens.FRACTION
        )

    def _has_operand(self) -> bool:
        tok = self._peek()
        return (
            tok is not None
            and tok.kind is not TokenKind.CLOSE
            and not self._is_fraction_bar(tok)
        )

    # -- grammar ------------------------------------------------------------

    def parse(self) -> Row:
        row = self._row(None)
        tok = self._peek()
        if tok is not None:
            # _row only stops early on a close bracket
            raise UnmatchedBracket(f"unmatched closing bracket {tok.text!r}", tok.pos)
        return row

    def _row(self, opener: Optional[Token]) -> Row:
        """Parse terms until a close bracket (left in place) or end of input."""
        items: list[Node] = []
        while True:
            tok = self._peek()
            if tok is None:
                if opener is not None:
                    raise UnmatchedBracket(
                        f"bracket {opener.text!r} is never closed", opener.pos
                    )
                break
            if tok.kind is TokenKind.CLOSE:
                break
            if self._is_fraction_bar(tok):
                if not items:
                    raise UnexpectedToken("'/' has no numerator", tok.pos)
                self._advance()
                items[-1] = Fraction(items[-1], self._scripted(tok))
                continue
            items.append(self._scripted(None))
        return Row(tuple(items))

    def _scripted(self, operator: Optional[Token]) -> Node:
        """Parse a simple term followed by any ``^`` / ``_`` scripts."""
        node = self._simple(operator)
        return self._scripts(node)

    def _scripts(self, node: Node) -> Node:
        while True:
            tok = self._peek()
            if tok is None or tok.kind not in (TokenKind.POWER, TokenKind.SUBSCRIPT):
                return node
            self._advance()
            operand = self._simple(tok)
            if tok.kind is TokenKind.POWER:
                node = Power(node, operand)
            else:
                node = Subscript(node, operand)

    def _simple(self, operator: Optional[Token]) -> Node:
        """Parse one atom, group or keyword application.

        *operator* is the token that requires this operand, if any; it only
        shapes error messages.
        """
        tok = self._peek()
        needed_by = f" after {operator.text!r}" if operator is not None else ""
        if tok is None:
            pos = operator.pos if operator is not None else self._last_pos
            raise MissingOperand(f"expected an operand{needed_by}", pos)
        if tok.kind is TokenKind.CLOSE:
            raise MissingOperand(
                f"expected an operand{needed_by}, found {tok.text!r}", tok.pos
            )
        if tok.kind in (TokenKind.POWER, TokenKind.SUBSCRIPT) or self._is_fraction_bar(tok):
            raise UnexpectedToken(f"unexpected {tok.text!r}{needed_by}", tok.pos)

        self._advance()
        if tok.kind is TokenKind.OPEN:
            return self._group(tok)
        if tok.kind is TokenKind.KEYWORD:
            return self._keyword(tok)
        if tok.kind is TokenKind.NUMBER:
            return Atom(tok.text, NUMBER)
        if tok.kind is TokenKind.IDENTIFIER:
            return Atom(tok.text, IDENTIFIER)
        if tok.kind is TokenKind.TEXT:
            return Atom(tok.text, TEXT)
        return Atom(tok.text, OPERATOR)

    def _group(self, opener: Token) -> Group:
        child = self._row(opener)
        closer = self._advance()
        # _row returns only at a close bracket when an opener is pending
        assert closer is not None
        if not tokens.brackets_pair(opener.text, closer.text):
            raise UnmatchedBracket(
                f"{closer.text!r} does not close {opener.text!r}", closer.pos
            )
        if not child.items:
            raise MissingOperand(f"empty group {opener.text}{closer.text}", opener.pos)
        return Group(child, opener.text, closer.text)

    def _keyword(self, tok: Token) -> Node:
        name = tok.text
        if name in tokens.SYMBOLS:
            return Atom(name, SYMBOL)
        if name in tokens.IDENTIFIERS:
            return Atom(name, IDENTIFIER)
        if name.startswith(":") and tokens.emoji_char(name) is not None:
            return Atom(name, EMOJI)
        if name in tokens.UNARY:
            return Function(name, self._simple(tok))
        if name in tokens.BINARY:
            first = self._simple(tok)
            second = self._simple(tok)
            if name == "frac":
                return Fraction(first, second)
            return Function(name, second, first)
        if name in tokens.FUNCTIONS:
            head = self._scripts(Atom(name, IDENTIFIER))
            if not self._has_operand():
                # a bare name such as the f in f/g
                return head
            argument = self._simple(tok)
            return Function(name, argument, None if isinstance(head, Atom) else head)
        raise UnexpectedToken(f"unknown keyword {name!r}", tok.pos)
