import argparse
import dataclasses
import sys
from pathlib import Path
from typing import Optional

from .api import convert_unicode, convert_unicode_strict
from .config import apply_preset, list_presets, load_config
from .inline import convert_inline_math
from .parser import ParseError
from .renderer import InlineRenderer
from .tokens import SKIN_TONES


def _read_input(expression: Optional[str]) -> str:
    """Return the expression argument, or all of standard input when absent."""
    if expression is not None:
        return expression
    return sys.stdin.read().rstrip("\n")


def _build_renderer(args: argparse.Namespace) -> InlineRenderer:
    """Apply config file, then preset, then individual switches."""
    renderer = load_config(args.config)
    if args.preset is not None:
        renderer = apply_preset(renderer, args.preset)

    overrides = {}
    if args.no_strip_brackets:
        overrides["strip_brackets"] = False
    if args.no_vulgar_fracs:
        overrides["vulgar_fracs"] = False
    if args.no_script_fracs:
        overrides["script_fracs"] = False
    if args.no_symbols:
        overrides["symbols"] = False
    if args.skin_tone is not None:
        overrides["skin_tone"] = args.skin_tone
    return dataclasses.replace(renderer, **overrides)


def main() -> None:
    """CLI entry point: read asciimath, convert it, and write Unicode text."""
    presets = list_presets()
    parser = argparse.ArgumentParser(
        prog="asciimath-unicode",
        description="Convert asciimath markup to single-line Unicode text",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        default=None,
        help="asciimath to convert (default: read standard input)",
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Path to config.yaml (optional)"
    )
    parser.add_argument(
        "-p",
        "--preset",
        type=str,
        choices=presets,
        default=None,
        help=f"Rendering preset (choices: {', '.join(presets)})",
    )
    parser.add_argument(
        "--no-strip-brackets",
        action="store_true",
        help="Keep brackets around script and fraction operands",
    )
    parser.add_argument(
        "--no-vulgar-fracs",
        action="store_true",
        help="Never use precomposed fraction glyphs such as ½",
    )
    parser.add_argument(
        "--no-script-fracs",
        action="store_true",
        help="Never render fractions as superscript ⁄ subscript",
    )
    parser.add_argument(
        "--no-symbols",
        action="store_true",
        help="Keep symbol keywords (alpha, sum, ...) as written",
    )
    parser.add_argument(
        "--skin-tone",
        type=str,
        choices=list(SKIN_TONES),
        default=None,
        help=f"Skin tone for emoji shortcodes (choices: {', '.join(SKIN_TONES)})",
    )
    parser.add_argument(
        "--inline",
        action="store_true",
        help="Treat the input as text and convert only `backtick` spans",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail with exit status 1 instead of passing unparseable input through",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: standard output)",
    )

    args = parser.parse_args()

    if args.config is not None and not args.config.exists():
        print(f"Error: '{args.config}' not found.", file=sys.stderr)
        sys.exit(1)

    try:
        renderer = _build_renderer(args)
    except (TypeError, ValueError) as exc:
        print(f"Error: invalid config: {exc}", file=sys.stderr)
        sys.exit(1)

    text = _read_input(args.expression)
    try:
        if args.inline:
            result = convert_inline_math(text, renderer, strict=args.strict)
        elif args.strict:
            result = convert_unicode_strict(text, renderer)
        else:
            result = convert_unicode(text, renderer)
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.output is None:
        print(result)
        return

    args.output.write_text(result + "\n", encoding="utf-8")
    print(f"Written → {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
