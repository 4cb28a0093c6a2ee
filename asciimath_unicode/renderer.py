"""
Render an asciimath expression tree as a single line of Unicode.

Rendering is a post-order walk: operands are rendered first so that scripts
and fractions can check whether the *whole* operand has a superscript or
subscript form.  The check is all-or-nothing per operand; if any character
lacks a form the operand falls back to ASCII notation (``x^(sin ρ)``,
``(a+b)/c``).  Rendering never fails.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TextIO

from . import tokens
from .lexer import tokenize
from .parser import parse
from .tree import (
    EMOJI,
    IDENTIFIER,
    NUMBER,
    SYMBOL,
    Atom,
    Fraction,
    Function,
    Group,
    Node,
    Power,
    Row,
    Subscript,
    lone_atom,
)


@dataclass(frozen=True)
class InlineRenderer:
    """Rendering options; every render call reads them, none mutates them."""

    strip_brackets: bool = True  # drop redundant brackets around operands
    vulgar_fracs: bool = True  # prefer precomposed glyphs such as ½ and ⅟
    script_fracs: bool = True  # render a/b as superscript ⁄ subscript
    symbols: bool = True  # substitute symbol keywords (alpha → α)
    skin_tone: str = "default"  # emoji skin tone, one of tokens.SKIN_TONES

    def __post_init__(self) -> None:
        if self.skin_tone not in tokens.SKIN_TONES:
            raise ValueError(
                f"Unknown skin tone {self.skin_tone!r}; "
                f"choose one of: {', '.join(tokens.SKIN_TONES)}"
            )

    def render(self, text: str) -> "RenderedUnicode":
        """Parse *text* and return a lazy handle on its rendering.

        Raises:
            ParseError: if *text* is not valid asciimath.
        """
        return self.render_tree(parse(tokenize(text)))

    def render_tree(self, tree: Node) -> "RenderedUnicode":
        """Return a lazy handle on the rendering of an already parsed tree."""
        return RenderedUnicode(tree, self)

    def render_node(self, node: Node) -> str:
        """Render a single node to text."""
        if isinstance(node, Atom):
            return self._atom(node)
        if isinstance(node, Row):
            return "".join(self.render_node(item) for item in node.items)
        if isinstance(node, Group):
            return (
                tokens.OPEN_BRACKETS[node.open]
                + self.render_node(node.child)
                + tokens.CLOSE_BRACKETS[node.close]
            )
        if isinstance(node, Power):
            return self._script(node.base, node.exponent, tokens.superscript_char, "^")
        if isinstance(node, Subscript):
            return self._script(node.base, node.sub, tokens.subscript_char, "_")
        if isinstance(node, Fraction):
            return self._fraction(node)
        if isinstance(node, Function):
            return self._function(node)
        raise TypeError(f"not an expression node: {node!r}")

    # -- leaves and brackets --------------------------------------------------

    def _atom(self, atom: Atom) -> str:
        if atom.kind == SYMBOL and self.symbols:
            return tokens.SYMBOLS[atom.text]
        if atom.kind == EMOJI and self.symbols:
            return tokens.emoji_char(atom.text, self.skin_tone) or atom.text
        return atom.text

    def _strip(self, node: Node) -> Node:
        """Drop the brackets of a group operand."""
        if self.strip_brackets and isinstance(node, Group):
            return node.child
        return node

    def _strip_lone(self, node: Node) -> Node:
        """Drop the brackets of a group operand holding a single atom."""
        if (
            self.strip_brackets
            and isinstance(node, Group)
            and lone_atom(node.child) is not None
        ):
            return node.child
        return node

    # -- scripts --------------------------------------------------------------

    def _script(
        self,
        base: Node,
        operand: Node,
        lookup: Callable[[str], Optional[str]],
        marker: str,
    ) -> str:
        operand = self._strip_lone(operand)
        base_text = self.render_node(base)
        text = self.render_node(operand)
        mapped = _map_chars(text, lookup)
        if mapped is not None:
            return base_text + mapped
        if not isinstance(operand, Group) and len(text) > 1:
            text = f"({text})"
        return base_text + marker + text

    # -- fractions ------------------------------------------------------------

    def _fraction(self, frac: Fraction) -> str:
        numerator = self._strip(frac.numerator)
        denominator = self._strip(frac.denominator)

        if self.vulgar_fracs:
            glyph = _vulgar_glyph(numerator, denominator)
            if glyph is not None:
                return glyph

        if self.vulgar_fracs and self.script_fracs and _is_one(numerator):
            den = _map_chars(self.render_node(denominator), tokens.subscript_char)
            if den is not None:
                return tokens.FRACTION_NUMERATOR_ONE + den

        if self.script_fracs:
            num = _map_chars(self.render_node(numerator), tokens.superscript_char)
            den = _map_chars(self.render_node(denominator), tokens.subscript_char)
            if num is not None and den is not None:
                return num + tokens.FRACTION_SLASH + den

        return (
            self._fraction_side(frac.numerator)
            + tokens.FRACTION
            + self._fraction_side(frac.denominator)
        )

    def _fraction_side(self, node: Node) -> str:
        text = self.render_node(node)
        if isinstance(node, Group):
            return text
        if isinstance(node, Fraction) or any(ch.isspace() for ch in text):
            return f"({text})"
        return text

    # -- keyword applications -------------------------------------------------

    def _function(self, func: Function) -> str:
        name = func.name
        if name == "sqrt":
            return "√" + self.render_node(self._strip_lone(func.argument))
        if name == "root":
            return self._root(func)
        if name in tokens.FONTS:
            text = self.render_node(self._strip(func.argument))
            return "".join(tokens.font_char(name, ch) for ch in text)
        if name in tokens.WRAPPERS:
            left, right = tokens.WRAPPERS[name]
            return left + self.render_node(self._strip(func.argument)) + right
        if name in tokens.MODIFIERS:
            mark = tokens.MODIFIERS[name]
            text = self.render_node(self._strip(func.argument))
            return "".join(ch + mark for ch in text)
        if name in tokens.ACCENTS:
            text = self.render_node(self._strip(func.argument))
            if len(text) == 1:
                return text + tokens.ACCENTS[name]
            return self._generic(func)
        if name in ("stackrel", "overset"):
            return self._overset(func)
        if name == "color":
            # no colour in plain text
            return self.render_node(self._strip(func.argument))
        if name in tokens.FUNCTIONS:
            head = self.render_node(func.first) if func.first is not None else name
            separator = "" if isinstance(func.argument, Group) else " "
            return head + separator + self.render_node(func.argument)
        return self._generic(func)

    def _root(self, func: Function) -> str:
        assert func.first is not None
        index = self._strip(func.first)
        body = self.render_node(self._strip_lone(func.argument))
        atom = lone_atom(index)
        if atom is not None and atom.kind == NUMBER and atom.text in tokens.ROOTS:
            return tokens.ROOTS[atom.text] + body
        raised = _map_chars(self.render_node(index), tokens.superscript_char)
        if raised is not None:
            return raised + "√" + body
        return self._generic(func)

    def _overset(self, func: Function) -> str:
        assert func.first is not None
        over = self.render_node(self._strip(func.first))
        base = self.render_node(self._strip(func.argument))
        if base == "=" and over in tokens.EQUALS_RELATIONS:
            return tokens.EQUALS_RELATIONS[over]
        if over in tokens.OVERSET_MARKS and len(base) == 1:
            return base + tokens.OVERSET_MARKS[over]
        return self._generic(func)

    def _generic(self, func: Function) -> str:
        parts = [func.name]
        if func.first is not None:
            parts.append(self.render_node(func.first))
        parts.append(self.render_node(func.argument))
        return " ".join(parts)


class RenderedUnicode:
    """The rendering of one expression tree.

    Iterating yields characters lazily, one top-level term at a time, and can
    be stopped early or restarted.  ``str()`` gives the whole text and
    :meth:`write_to` streams it into a text sink.
    """

    def __init__(self, tree: Node, renderer: InlineRenderer) -> None:
        self.tree = tree
        self.renderer = renderer

    def chunks(self) -> Iterator[str]:
        """Yield the rendering of each top-level term in order."""
        items = self.tree.items if isinstance(self.tree, Row) else (self.tree,)
        for item in items:
            yield self.renderer.render_node(item)

    def __iter__(self) -> Iterator[str]:
        for chunk in self.chunks():
            yield from chunk

    def __str__(self) -> str:
        return "".join(self.chunks())

    def __repr__(self) -> str:
        return f"RenderedUnicode({str(self)!r})"

    def write_to(self, sink: TextIO) -> None:
        """Write the rendering into *sink* term by term."""
        for chunk in self.chunks():
            sink.write(chunk)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _map_chars(text: str, lookup: Callable[[str], Optional[str]]) -> Optional[str]:
    """Map every character of *text*, or return None if any has no mapping."""
    mapped: list[str] = []
    for ch in text:
        out = lookup(ch)
        if out is None:
            return None
        mapped.append(out)
    return "".join(mapped)


def _vulgar_glyph(numerator: Node, denominator: Node) -> Optional[str]:
    num = lone_atom(numerator)
    den = lone_atom(denominator)
    if num is None or den is None:
        return None
    if num.kind not in (NUMBER, IDENTIFIER) or den.kind not in (NUMBER, IDENTIFIER):
        return None
    return tokens.VULGAR_FRACTIONS.get((num.text, den.text))


def _is_one(node: Node) -> bool:
    atom = lone_atom(node)
    return atom is not None and atom.kind == NUMBER and atom.text == "1"
