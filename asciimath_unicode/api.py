"""Programmatic API: asciimath text in, Unicode text out."""
from __future__ import annotations

import warnings
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO, Union

from .config import load_config, load_config_from_dict
from .lexer import tokenize
from .parser import ParseError, parse
from .renderer import InlineRenderer
from .tree import Row

RendererLike = Union[InlineRenderer, Mapping[str, Any], str, Path, None]


def parse_unicode(text: str) -> Row:
    """Parse asciimath *text* into an expression tree.

    Raises:
        ParseError: if *text* is not valid asciimath.
    """
    return parse(tokenize(text))


def convert_unicode(text: str, renderer: RendererLike = None) -> str:
    """Convert asciimath *text* to Unicode, best effort.

    Input that fails to parse is returned unchanged and a ``RuntimeWarning``
    names the problem; this function never raises ``ParseError``.

    Args:
        text: asciimath markup, e.g. ``"sum_(i=1)^n i^3"``.
        renderer: Rendering options as one of:
            - ``None`` (defaults)
            - ``InlineRenderer`` instance
            - dict-like mapping of ``InlineRenderer`` fields
            - path to a YAML config file
    """
    resolved = _resolve_renderer(renderer)
    try:
        return str(resolved.render(text))
    except ParseError as exc:
        warnings.warn(
            f"asciimath parse failed; leaving input unchanged: {exc}",
            RuntimeWarning,
            stacklevel=2,
        )
        return text


def convert_unicode_strict(text: str, renderer: RendererLike = None) -> str:
    """Convert asciimath *text* to Unicode, propagating parse errors.

    Raises:
        ParseError: if *text* is not valid asciimath.
    """
    return str(_resolve_renderer(renderer).render(text))


def write_unicode(text: str, sink: TextIO, renderer: RendererLike = None) -> None:
    """Convert *text* and write the result into *sink* term by term.

    Same contract as :func:`convert_unicode`: unparseable input is written
    unchanged with a ``RuntimeWarning``.
    """
    resolved = _resolve_renderer(renderer)
    try:
        rendered = resolved.render(text)
    except ParseError as exc:
        warnings.warn(
            f"asciimath parse failed; leaving input unchanged: {exc}",
            RuntimeWarning,
            stacklevel=2,
        )
        sink.write(text)
        return
    rendered.write_to(sink)


def _resolve_renderer(renderer: RendererLike) -> InlineRenderer:
    if renderer is None:
        return InlineRenderer()
    if isinstance(renderer, InlineRenderer):
        return renderer
    if isinstance(renderer, Mapping):
        return load_config_from_dict(renderer)
    if isinstance(renderer, (str, Path)):
        return load_config(Path(renderer))
    raise TypeError(
        "renderer must be None, InlineRenderer, dict-like mapping, or a config file path."
    )
