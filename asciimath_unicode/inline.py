"""
Convert inline asciimath (`...`) inside running text to Unicode.

Each single-backtick span is parsed and rendered on its own.  Double
backticks are left alone, as are spans that fail to parse; a failing span
keeps its backticks and raises a ``RuntimeWarning`` naming the problem.
"""
from __future__ import annotations

import re
import warnings

from .parser import ParseError
from .renderer import InlineRenderer

# ---------------------------------------------------------------------------
# Top-level pattern: `...` but NOT ``...``
# ---------------------------------------------------------------------------
_INLINE_RE = re.compile(r"(?<!`)`(?!`)(.+?)(?<!`)`(?!`)", re.DOTALL)


def convert_inline_math(
    text: str,
    renderer: InlineRenderer | None = None,
    *,
    strict: bool = False,
) -> str:
    """Replace every `...` span in *text* with its Unicode rendering.

    With *strict*, the first span that fails to parse raises ``ParseError``
    instead of being left in place.
    """
    resolved = renderer if renderer is not None else InlineRenderer()

    def _replace(m: re.Match) -> str:
        try:
            return str(resolved.render(m.group(1)))
        except ParseError as exc:
            if strict:
                raise
            warnings.warn(
                f"asciimath span {m.group(0)!r} left unchanged: {exc}",
                RuntimeWarning,
                stacklevel=3,
            )
            return m.group(0)

    return _INLINE_RE.sub(_replace, text)
