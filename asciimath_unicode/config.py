from __future__ import annotations

import yaml
from collections.abc import Mapping
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Optional

from .renderer import InlineRenderer

_FIELDS = frozenset(f.name for f in fields(InlineRenderer))


def load_config(path: Optional[Path]) -> InlineRenderer:
    """Load renderer options from a YAML file, returning defaults if *path* is None or missing.

    The file holds ``InlineRenderer`` fields at the top level and, optionally,
    a ``preset`` name applied before those fields::

        preset: scripts
        strip_brackets: false
    """
    if path is None or not path.exists():
        return InlineRenderer()

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, Mapping):
        raise ValueError(f"config file {path} must contain a mapping")
    return load_config_from_dict(data)


def load_config_from_dict(data: Mapping[str, Any]) -> InlineRenderer:
    """Build renderer options from a mapping; unknown keys are ignored."""
    renderer = InlineRenderer()
    preset = data.get("preset")
    if preset is not None:
        renderer = apply_preset(renderer, str(preset))

    overrides = {k: v for k, v in data.items() if k in _FIELDS}
    for name, value in overrides.items():
        expected = str if name == "skin_tone" else bool
        if not isinstance(value, expected):
            raise TypeError(
                f"config field {name!r} must be a {expected.__name__}, got {value!r}"
            )
    # an unknown skin tone raises ValueError from InlineRenderer itself
    return replace(renderer, **overrides)


# Named option sets.  Only the fields listed here are changed; everything
# else is inherited from the config they are applied to.
_PRESETS: dict[str, dict[str, bool]] = {
    "default": {},
    # no precomposed fraction glyphs, still superscript ⁄ subscript
    "scripts": {"vulgar_fracs": False},
    # fractions always written inline as a/b
    "linear": {"vulgar_fracs": False, "script_fracs": False},
}


def list_presets() -> list[str]:
    """Return the available preset names."""
    return sorted(_PRESETS)


def apply_preset(renderer: InlineRenderer, preset: str) -> InlineRenderer:
    """Return a copy of *renderer* with the named preset's overrides applied."""
    overrides = _PRESETS.get(preset)
    if overrides is None:
        raise ValueError(
            f"Unknown preset {preset!r}; choose one of: {', '.join(list_presets())}"
        )
    return replace(renderer, **overrides)
