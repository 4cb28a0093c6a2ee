"""
Static lookup tables for asciimath → Unicode conversion.

Everything here is read-only data plus a few pure lookup helpers:
  * reserved token strings and the class each one belongs to
  * symbol substitutions (Greek letters, operators, relations, arrows)
  * bracket glyphs
  * superscript / subscript character maps
  * vulgar fraction glyphs and combining marks
  * mathematical alphanumeric font maps
  * emoji shortcodes and skin tones
"""
from __future__ import annotations

import re
from typing import Optional

import emoji

# ---------------------------------------------------------------------------
# Keyword classes
# ---------------------------------------------------------------------------

POWER = "^"
SUBSCRIPT = "_"
FRACTION = "/"

# Standard functions: rendered as their name followed by the argument
FUNCTIONS: frozenset[str] = frozenset({
    "sin", "cos", "tan", "sinh", "cosh", "tanh", "cot", "sec", "csc",
    "arcsin", "arccos", "arctan", "coth", "sech", "csch", "exp", "log", "ln",
    "det", "gcd", "lcm", "Sin", "Cos", "Tan", "Arcsin", "Arccos", "Arctan",
    "Sinh", "Cosh", "Tanh", "Cot", "Sec", "Csc", "Log", "Ln", "f", "g",
})

UNARY: frozenset[str] = frozenset({
    "sqrt", "abs", "Abs", "norm", "floor", "ceil", "hat", "bar", "overline",
    "vec", "dot", "ddot", "overarc", "overparen", "ul", "underline", "ubrace",
    "underbrace", "obrace", "overbrace", "text", "mbox", "cancel", "tilde",
    # fonts
    "bb", "mathbf", "sf", "mathsf", "bbb", "mathbb", "cc", "mathcal", "tt",
    "mathtt", "fr", "mathfrak", "it", "mathit",
})

BINARY: frozenset[str] = frozenset({
    "frac", "root", "stackrel", "overset", "underset", "color",
})

# Named identifiers that are kept verbatim
IDENTIFIERS: frozenset[str] = frozenset({
    "dx", "dy", "dz", "dt", "lim", "Lim", "dim", "mod", "lub", "glb", "min",
    "max", ":=",
})

SYMBOLS: dict[str, str] = {
    # greek
    "alpha": "α", "Alpha": "Α", "beta": "β", "Beta": "Β", "chi": "χ",
    "Chi": "Χ", "delta": "δ", "Delta": "Δ", "epsi": "ε", "epsilon": "ε",
    "Epsi": "Ε", "Epsilon": "Ε", "varepsilon": "ϵ", "eta": "η", "Eta": "Η",
    "gamma": "γ", "Gamma": "Γ", "iota": "ι", "Iota": "Ι", "kappa": "κ",
    "Kappa": "Κ", "varkappa": "ϰ", "lambda": "λ", "lamda": "λ",
    "Lambda": "Λ", "Lamda": "Λ", "mu": "μ", "Mu": "Μ", "nu": "ν", "Nu": "Ν",
    "omega": "ω", "Omega": "Ω", "phi": "φ", "varphi": "ϕ", "Phi": "Φ",
    "pi": "π", "Pi": "Π", "varpi": "ϖ", "psi": "ψ", "Psi": "Ψ", "rho": "ρ",
    "Rho": "Ρ", "varrho": "ϱ", "sigma": "σ", "Sigma": "Σ", "tau": "τ",
    "Tau": "Τ", "theta": "θ", "vartheta": "ϑ", "Theta": "Θ",
    "Vartheta": "ϴ", "upsilon": "υ", "Upsilon": "Υ", "xi": "ξ", "Xi": "Ξ",
    "zeta": "ζ", "Zeta": "Ζ",
    # operations
    "*": "⋅", "cdot": "⋅", "**": "∗", "ast": "∗", "***": "⋆", "star": "⋆",
    "//": "/", "\\\\": "\\", "backslash": "\\", "setminus": "\\",
    "xx": "×", "times": "×", "|><": "⋉", "ltimes": "⋉", "><|": "⋊",
    "rtimes": "⋊", "|><|": "⋈", "bowtie": "⋈", "-:": "÷", "div": "÷",
    "divide": "÷", "@": "∘", "circ": "∘", "o+": "⊕", "oplus": "⊕",
    "ox": "⊗", "otimes": "⊗", "o.": "⊙", "odot": "⊙", "sum": "∑",
    "prod": "∏", "^^": "∧", "wedge": "∧", "land": "∧", "^^^": "⋀",
    "bigwedge": "⋀", "vv": "∨", "vee": "∨", "lor": "∨", "vvv": "⋁",
    "bigvee": "⋁", "nn": "∩", "cap": "∩", "nnn": "⋂", "bigcap": "⋂",
    "uu": "∪", "cup": "∪", "uuu": "⋃", "bigcup": "⋃",
    # relations
    "=": "=", "!=": "≠", "ne": "≠", "<": "<", "lt": "<", "<=": "≤",
    "le": "≤", "lt=": "≤", "leq": "≤", ">": ">", "gt": ">", "mlt": "≪",
    "ll": "≪", ">=": "≥", "ge": "≥", "gt=": "≥", "geq": "≥", "mgt": "≫",
    "gg": "≫", "-<": "≺", "prec": "≺", "-lt": "≺", ">-": "≻", "succ": "≻",
    "-<=": "⪯", "preceq": "⪯", ">-=": "⪰", "succeq": "⪰", "in": "∈",
    "!in": "∉", "notin": "∉", "sub": "⊂", "subset": "⊂", "sup": "⊃",
    "supset": "⊃", "sube": "⊆", "subseteq": "⊆", "supe": "⊇",
    "supseteq": "⊇", "-=": "≡", "equiv": "≡", "~=": "≅", "cong": "≅",
    "~~": "≈", "approx": "≈", "aprox": "≈", "~": "~", "sim": "~",
    "prop": "∝", "propto": "∝",
    # logical
    "not": "¬", "neg": "¬", "=>": "⇒", "implies": "⇒", "<=>": "⇔",
    "iff": "⇔", "AA": "∀", "forall": "∀", "EE": "∃", "exists": "∃",
    "!EE": "∄", "notexists": "∄", "_|_": "⊥", "bot": "⊥", "TT": "⊤",
    "top": "⊤", "|--": "⊢", "vdash": "⊢", "|==": "⊨", "models": "⊨",
    "and": " and ", "or": " or ", "if": " if ",
    # misc
    ":|:": "|", "|": "|", "int": "∫", "oint": "∮", "del": "∂",
    "partial": "∂", "grad": "∇", "nabla": "∇", "+-": "±", "pm": "±",
    "-+": "∓", "mp": "∓", "O/": "∅", "emptyset": "∅", "oo": "∞",
    "infty": "∞", "aleph": "ℵ", "...": "…", "ldots": "…", ":.": "∴",
    "therefore": "∴", ":'": "∵", "because": "∵", "/_": "∠", "angle": "∠",
    "/_\\": "△", "triangle": "△", "'": "'", "prime": "'", "\\ ": " ",
    "quad": " ", "qquad": " ", "frown": "⌢", "cdots": "⋯", "vdots": "⋮",
    "ddots": "⋱", "diamond": "⋄", "square": "□", "CC": "ℂ", "NN": "ℕ",
    "QQ": "ℚ", "RR": "ℝ", "ZZ": "ℤ", "ell": "ℓ",
    # arrows
    "uarr": "↑", "uparrow": "↑", "darr": "↓", "downarrow": "↓",
    "rarr": "→", "rightarrow": "→", "->": "→", "to": "→", ">->": "↣",
    "rightarrowtail": "↣", "->>": "↠", "twoheadrightarrow": "↠",
    ">->>": "⤖", "twoheadrightarrowtail": "⤖", "|->": "↦", "mapsto": "↦",
    "larr": "←", "leftarrow": "←", "<-": "←", "harr": "↔",
    "leftrightarrow": "↔", "<->": "↔", "rArr": "⇒", "Rightarrow": "⇒",
    "==>": "⇒", "lArr": "⇐", "Leftarrow": "⇐", "<==": "⇐", "hArr": "⇔",
    "Leftrightarrow": "⇔", "<==>": "⇔",
}

# ---------------------------------------------------------------------------
# Brackets
# ---------------------------------------------------------------------------

OPEN_BRACKETS: dict[str, str] = {
    "(": "(", "left(": "(", "[": "[", "left[": "[", "{": "{", "{:": "",
    "(:": "⟨", "<<": "⟨", "langle": "⟨", "|__": "⌊", "lfloor": "⌊",
    "|~": "⌈", "lceiling": "⌈", "|:": "|",
}

CLOSE_BRACKETS: dict[str, str] = {
    ")": ")", "right)": ")", "]": "]", "right]": "]", "}": "}", ":}": "",
    ":)": "⟩", ">>": "⟩", "rangle": "⟩", "__|": "⌋", "rfloor": "⌋",
    "~|": "⌉", "rceiling": "⌉", ":|": "|",
}

# Bracket family used for pairing; round and square brackets pair with each
# other so that half-open intervals like [0,1) parse.
_BRACKET_FAMILY: dict[str, str] = {
    "(": "interval", "left(": "interval", "[": "interval",
    "left[": "interval", ")": "interval", "right)": "interval",
    "]": "interval", "right]": "interval",
    "{": "brace", "}": "brace",
    "{:": "invisible", ":}": "invisible",
    "(:": "angle", "<<": "angle", "langle": "angle",
    ":)": "angle", ">>": "angle", "rangle": "angle",
    "|__": "floor", "lfloor": "floor", "__|": "floor", "rfloor": "floor",
    "|~": "ceiling", "lceiling": "ceiling", "~|": "ceiling",
    "rceiling": "ceiling",
    "|:": "bar", ":|": "bar",
}


def brackets_pair(open_: str, close: str) -> bool:
    """Return True if *close* may terminate a group opened with *open_*."""
    left = _BRACKET_FAMILY[open_]
    right = _BRACKET_FAMILY[close]
    return left == right or "invisible" in (left, right)


# ---------------------------------------------------------------------------
# Reserved strings (longest match wins in the lexer)
# ---------------------------------------------------------------------------

RESERVED: frozenset[str] = frozenset(
    {POWER, SUBSCRIPT}
    | FUNCTIONS
    | UNARY
    | BINARY
    | IDENTIFIERS
    | set(SYMBOLS)
    | set(OPEN_BRACKETS)
    | set(CLOSE_BRACKETS)
)
MAX_RESERVED_LEN = max(len(name) for name in RESERVED)

# Keywords whose parenthesised body is taken verbatim
RAW_TEXT_KEYWORDS: frozenset[str] = frozenset({"text", "mbox"})

# ---------------------------------------------------------------------------
# Unicode superscript / subscript maps
# ---------------------------------------------------------------------------

SUPERSCRIPT: dict[str, str] = {
    "0": "⁰", "1": "¹", "2": "²", "3": "³", "4": "⁴",
    "5": "⁵", "6": "⁶", "7": "⁷", "8": "⁸", "9": "⁹",
    "+": "⁺", "-": "⁻", "=": "⁼", "(": "⁽", ")": "⁾",
    "a": "ᵃ", "b": "ᵇ", "c": "ᶜ", "d": "ᵈ", "e": "ᵉ",
    "f": "ᶠ", "g": "ᵍ", "h": "ʰ", "i": "ⁱ", "j": "ʲ",
    "k": "ᵏ", "l": "ˡ", "m": "ᵐ", "n": "ⁿ", "o": "ᵒ",
    "p": "ᵖ", "r": "ʳ", "s": "ˢ", "t": "ᵗ", "u": "ᵘ",
    "v": "ᵛ", "w": "ʷ", "x": "ˣ", "y": "ʸ", "z": "ᶻ",
    "A": "ᴬ", "B": "ᴮ", "D": "ᴰ", "E": "ᴱ", "G": "ᴳ",
    "H": "ᴴ", "I": "ᴵ", "J": "ᴶ", "K": "ᴷ", "L": "ᴸ",
    "M": "ᴹ", "N": "ᴺ", "O": "ᴼ", "P": "ᴾ", "R": "ᴿ",
    "T": "ᵀ", "U": "ᵁ", "V": "ⱽ", "W": "ᵂ",
    "α": "ᵅ", "β": "ᵝ", "γ": "ᵞ", "δ": "ᵟ", "ε": "ᵋ",
    "θ": "ᶿ", "ι": "ᶥ", "ϕ": "ᶲ", "φ": "ᵠ", "χ": "ᵡ",
}

SUBSCRIPT_CHARS: dict[str, str] = {
    "0": "₀", "1": "₁", "2": "₂", "3": "₃", "4": "₄",
    "5": "₅", "6": "₆", "7": "₇", "8": "₈", "9": "₉",
    "+": "₊", "-": "₋", "=": "₌", "(": "₍", ")": "₎",
    "a": "ₐ", "e": "ₑ", "h": "ₕ", "i": "ᵢ", "k": "ₖ",
    "l": "ₗ", "m": "ₘ", "n": "ₙ", "o": "ₒ", "p": "ₚ",
    "r": "ᵣ", "s": "ₛ", "t": "ₜ", "u": "ᵤ", "v": "ᵥ",
    "x": "ₓ",
    "β": "ᵦ", "γ": "ᵧ", "ρ": "ᵨ", "φ": "ᵩ", "χ": "ᵪ",
}


def superscript_char(ch: str) -> Optional[str]:
    """Return the superscript form of *ch*, or None if Unicode has none."""
    if ch.isspace():
        return ch
    return SUPERSCRIPT.get(ch)


def subscript_char(ch: str) -> Optional[str]:
    """Return the subscript form of *ch*, or None if Unicode has none."""
    if ch.isspace():
        return ch
    return SUBSCRIPT_CHARS.get(ch)


# ---------------------------------------------------------------------------
# Fractions
# ---------------------------------------------------------------------------

VULGAR_FRACTIONS: dict[tuple[str, str], str] = {
    ("0", "3"): "↉", ("1", "10"): "⅒", ("1", "9"): "⅑", ("1", "8"): "⅛",
    ("1", "7"): "⅐", ("1", "6"): "⅙", ("1", "5"): "⅕", ("1", "4"): "¼",
    ("1", "3"): "⅓", ("1", "2"): "½", ("2", "5"): "⅖", ("2", "3"): "⅔",
    ("3", "8"): "⅜", ("3", "5"): "⅗", ("3", "4"): "¾", ("4", "5"): "⅘",
    ("5", "8"): "⅝", ("5", "6"): "⅚", ("7", "8"): "⅞",
    # fraction-like letterlike symbols
    ("a", "c"): "℀", ("a", "s"): "℁", ("A", "S"): "⅍", ("c", "o"): "℅",
    ("c", "u"): "℆",
}

FRACTION_NUMERATOR_ONE = "⅟"
FRACTION_SLASH = "⁄"

# ---------------------------------------------------------------------------
# Roots and combining marks
# ---------------------------------------------------------------------------

ROOTS: dict[str, str] = {"2": "√", "3": "∛", "4": "∜"}

# Applied after a single-character argument only
ACCENTS: dict[str, str] = {
    "hat": "\u0302",
    "tilde": "\u0303",
    "bar": "\u0304",
    "dot": "\u0307",
    "ddot": "\u0308",
    "overarc": "\u0311",
    "overparen": "\u0311",
}

# Applied after every character of the argument
MODIFIERS: dict[str, str] = {
    "overline": "\u0305",
    "underline": "\u0332",
    "ul": "\u0332",
    "cancel": "\u0336",
}

WRAPPERS: dict[str, tuple[str, str]] = {
    "abs": ("|", "|"),
    "Abs": ("|", "|"),
    "ceil": ("⌈", "⌉"),
    "floor": ("⌊", "⌋"),
    "norm": ("||", "||"),
    "text": ("", ""),
    "mbox": ("", ""),
}

# Combining latin small letters for ``overset a x`` and ``stackrel a x``
OVERSET_MARKS: dict[str, str] = {
    "a": "\u0363", "e": "\u0364", "i": "\u0365", "o": "\u0366",
    "u": "\u0367", "c": "\u0368", "d": "\u0369", "h": "\u036a",
    "m": "\u036b", "r": "\u036c", "t": "\u036d", "v": "\u036e",
    "x": "\u036f",
}

# ``stackrel X =`` relations, keyed by the rendered X
EQUALS_RELATIONS: dict[str, str] = {
    "∘": "≗", "⋆": "≛", "△": "≜", "def": "≝", "m": "≞", "?": "≟",
}

# ---------------------------------------------------------------------------
# Mathematical alphanumeric fonts
# ---------------------------------------------------------------------------

# Each font is (letterlike exceptions, [(first, last, target_first), ...])
_Font = tuple[dict[str, str], list[tuple[str, str, int]]]

_BOLD: _Font = (
    {"∂": "𝛛", "ϵ": "𝛜", "ϑ": "𝛝", "ϰ": "𝛞", "ϕ": "𝛟", "ϱ": "𝛠", "ϖ": "𝛡",
     "∇": "𝛁", "ϴ": "\U0001d6b9"},
    [("A", "Z", 0x1D400), ("a", "z", 0x1D41A), ("0", "9", 0x1D7CE),
     ("Α", "Ω", 0x1D6A8), ("α", "ω", 0x1D6DA)],
)

_ITALIC: _Font = (
    {"h": "ℎ", "∂": "𝜕", "ϵ": "𝜖", "ϑ": "𝜗", "ϰ": "𝜘", "ϕ": "𝜙", "ϱ": "𝜚",
     "ϖ": "𝜛", "∇": "𝛻", "ϴ": "\U0001d6f3"},
    [("A", "Z", 0x1D434), ("a", "z", 0x1D44E), ("Α", "Ω", 0x1D6E2),
     ("α", "ω", 0x1D6FC)],
)

_CALLIGRAPHIC: _Font = (
    {"B": "ℬ", "E": "ℰ", "F": "ℱ", "H": "ℋ", "I": "ℐ", "L": "ℒ", "M": "ℳ",
     "R": "ℛ", "e": "ℯ", "g": "ℊ", "o": "ℴ"},
    [("A", "Z", 0x1D49C), ("a", "z", 0x1D4B6)],
)

_FRAKTUR: _Font = (
    {"C": "ℭ", "H": "ℌ", "I": "ℑ", "R": "ℜ", "Z": "ℨ"},
    [("A", "Z", 0x1D504), ("a", "z", 0x1D51E)],
)

_DOUBLE_STRUCK: _Font = (
    {"C": "ℂ", "H": "ℍ", "N": "ℕ", "P": "ℙ", "Q": "ℚ", "R": "ℝ", "Z": "ℤ",
     "π": "ℼ", "γ": "ℽ", "Π": "ℾ", "Γ": "ℿ", "∑": "⅀"},
    [("A", "Z", 0x1D538), ("a", "z", 0x1D552), ("0", "9", 0x1D7D8)],
)

_SANS: _Font = (
    {},
    [("A", "Z", 0x1D5A0), ("a", "z", 0x1D5BA), ("0", "9", 0x1D7E2)],
)

_MONOSPACE: _Font = (
    {},
    [("A", "Z", 0x1D670), ("a", "z", 0x1D68A), ("0", "9", 0x1D7F6)],
)

FONTS: dict[str, _Font] = {
    "bb": _BOLD, "mathbf": _BOLD,
    "bbb": _DOUBLE_STRUCK, "mathbb": _DOUBLE_STRUCK,
    "cc": _CALLIGRAPHIC, "mathcal": _CALLIGRAPHIC,
    "tt": _MONOSPACE, "mathtt": _MONOSPACE,
    "fr": _FRAKTUR, "mathfrak": _FRAKTUR,
    "sf": _SANS, "mathsf": _SANS,
    "it": _ITALIC, "mathit": _ITALIC,
}


def font_char(font: str, ch: str) -> str:
    """Map *ch* into the named font; characters the font lacks pass through."""
    exceptions, ranges = FONTS[font]
    if ch in exceptions:
        return exceptions[ch]
    for first, last, target in ranges:
        if first <= ch <= last:
            return chr(ord(ch) - ord(first) + target)
    return ch


# ---------------------------------------------------------------------------
# Emoji
# ---------------------------------------------------------------------------

_SHORTCODE_RE = re.compile(r":[A-Za-z0-9_+\-]+:")

# Fitzpatrick modifiers appended to emoji that take a skin tone
SKIN_TONES: dict[str, str] = {
    "default": "",
    "light": "\U0001f3fb",
    "medium-light": "\U0001f3fc",
    "medium": "\U0001f3fd",
    "medium-dark": "\U0001f3fe",
    "dark": "\U0001f3ff",
}


def shortcode_at(text: str, pos: int) -> Optional[str]:
    """Return the emoji shortcode (``:hand:``) starting at *pos*, if any."""
    m = _SHORTCODE_RE.match(text, pos)
    if m is None or emoji_char(m.group(0)) is None:
        return None
    return m.group(0)


def emoji_char(shortcode: str, skin_tone: str = "default") -> Optional[str]:
    """Return the emoji for *shortcode* in *skin_tone*, or None if unknown.

    Emoji that have no toned variant are returned untoned.
    """
    glyph = emoji.emojize(shortcode, language="alias")
    if glyph == shortcode or not emoji.is_emoji(glyph):
        return None
    modifier = SKIN_TONES[skin_tone]
    if modifier:
        toned = glyph.replace("\ufe0f", "") + modifier
        if toned in emoji.EMOJI_DATA:
            return toned
    return glyph
