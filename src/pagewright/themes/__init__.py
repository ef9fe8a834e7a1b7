"""
Pagewright theme system.

Color presets and the pure resolver that turns a preset, a mode and a radius
into root-level design tokens.
"""

from .presets import (
    BLUE_THEME,
    DEFAULT_THEME,
    GREEN_THEME,
    ORANGE_THEME,
    ROSE_THEME,
    TOKEN_NAMES,
    ZINC_THEME,
    get_theme_preset,
    list_theme_presets,
)
from .resolver import resolve_design_theme, resolve_theme

__all__ = [
    "BLUE_THEME",
    "DEFAULT_THEME",
    "GREEN_THEME",
    "ORANGE_THEME",
    "ROSE_THEME",
    "TOKEN_NAMES",
    "ZINC_THEME",
    "get_theme_preset",
    "list_theme_presets",
    "resolve_design_theme",
    "resolve_theme",
]
