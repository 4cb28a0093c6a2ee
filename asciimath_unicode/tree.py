"""Expression tree produced by the parser and consumed by the renderer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

# Atom kinds
IDENTIFIER = "identifier"
NUMBER = "number"
SYMBOL = "symbol"
TEXT = "text"
OPERATOR = "operator"
EMOJI = "emoji"


@dataclass(frozen=True)
class Atom:
    """A leaf: an identifier, number, symbol keyword, emoji shortcode, quoted text or raw operator."""

    text: str
    kind: str = IDENTIFIER


@dataclass(frozen=True)
class Group:
    """A bracketed sub-expression; *open*/*close* are the brackets as written."""

    child: "Node"
    open: str = "("
    close: str = ")"


@dataclass(frozen=True)
class Power:
    base: "Node"
    exponent: "Node"


@dataclass(frozen=True)
class Subscript:
    base: "Node"
    sub: "Node"


@dataclass(frozen=True)
class Fraction:
    numerator: "Node"
    denominator: "Node"


@dataclass(frozen=True)
class Row:
    """Adjacent terms in reading order (implicit multiplication)."""

    items: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Function:
    """A keyword applied to its argument.

    *first* holds the leading argument of two-argument keywords
    (``root 3 x``, ``overset a x``) and the scripted name of a standard
    function (``sin^2 x``).
    """

    name: str
    argument: "Node"
    first: Optional["Node"] = None


Node = Union[Atom, Group, Power, Subscript, Fraction, Row, Function]


def collapse(node: Node) -> Node:
    """Return the only item of a single-item Row, repeatedly; else *node*."""
    while isinstance(node, Row) and len(node.items) == 1:
        node = node.items[0]
    return node


def lone_atom(node: Node) -> Optional[Atom]:
    """Return the Atom *node* reduces to once Rows of one item are collapsed."""
    node = collapse(node)
    return node if isinstance(node, Atom) else None
