from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .api import convert_unicode, convert_unicode_strict, parse_unicode, write_unicode
from .config import apply_preset, list_presets, load_config, load_config_from_dict
from .inline import convert_inline_math
from .parser import MissingOperand, ParseError, UnexpectedToken, UnmatchedBracket
from .renderer import InlineRenderer, RenderedUnicode

try:
    __version__ = version("asciimath-unicode")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "InlineRenderer",
    "MissingOperand",
    "ParseError",
    "RenderedUnicode",
    "UnexpectedToken",
    "UnmatchedBracket",
    "apply_preset",
    "convert_inline_math",
    "convert_unicode",
    "convert_unicode_strict",
    "list_presets",
    "load_config",
    "load_config_from_dict",
    "parse_unicode",
    "write_unicode",
]
