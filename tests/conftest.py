"""
Shared pytest fixtures and configuration for asciimath_unicode tests.

This module provides:
- Renderer fixtures (default and each preset)
- Config file fixtures written to a temporary directory
- Global pytest configuration
"""
from __future__ import annotations

import pytest
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from asciimath_unicode.renderer import InlineRenderer


# ==============================================================================
# Global pytest configuration
# ==============================================================================

def pytest_configure(config):
    """Global pytest configuration - runs once at test session start."""
    import warnings
    warnings.filterwarnings('ignore', category=DeprecationWarning)
    warnings.filterwarnings('ignore', category=PendingDeprecationWarning)


# ==============================================================================
# Renderer fixtures
# ==============================================================================

@pytest.fixture
def default_renderer() -> "InlineRenderer":
    """Return a renderer with default options."""
    from asciimath_unicode.renderer import InlineRenderer
    return InlineRenderer()


@pytest.fixture
def linear_renderer() -> "InlineRenderer":
    """Return a renderer that writes every fraction as a/b."""
    from asciimath_unicode.renderer import InlineRenderer
    return InlineRenderer(vulgar_fracs=False, script_fracs=False)


@pytest.fixture
def literal_renderer() -> "InlineRenderer":
    """Return a renderer that keeps brackets and symbol keywords as written."""
    from asciimath_unicode.renderer import InlineRenderer
    return InlineRenderer(strip_brackets=False, symbols=False)


# ==============================================================================
# Config file fixtures
# ==============================================================================

@pytest.fixture
def write_config(tmp_path):
    """Return a helper that writes YAML text to a config file and returns its path."""
    def _write(text: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def scripts_config(write_config) -> Path:
    """Config file selecting the 'scripts' preset."""
    return write_config("preset: scripts\n")
