"""
Theme resolver for Pagewright.

Resolves a theme name, a mode and a corner radius into the concrete token
declarations of a page root. Pure: nothing here touches a rendered view.
"""

from __future__ import annotations

import logging

from pagewright.specs.layout import GlobalDesignConfig, ThemeMode
from pagewright.specs.theme import ResolvedTheme

from .presets import _THEME_PRESETS, DEFAULT_THEME, get_theme_preset

logger = logging.getLogger(__name__)


def resolve_theme(
    theme_name: str = DEFAULT_THEME,
    mode: ThemeMode | str = ThemeMode.DARK,
    radius: float = 0.5,
) -> ResolvedTheme:
    """
    Resolve the tokens for a theme and mode.

    Args:
        theme_name: Preset name; unknown names fall back to the default preset
        mode: "light" or "dark"
        radius: Corner radius in rem

    Returns:
        ResolvedTheme with the mode's color tokens and the radius
    """
    preset = get_theme_preset(theme_name)
    if preset is None:
        logger.debug("Unknown theme %r, falling back to %r", theme_name, DEFAULT_THEME)
        preset = _THEME_PRESETS[DEFAULT_THEME]

    mode = ThemeMode(mode)
    return ResolvedTheme(
        name=preset.name,
        mode=mode,
        tokens=preset.tokens_for(mode),
        radius=radius,
    )


def resolve_design_theme(design: GlobalDesignConfig) -> ResolvedTheme:
    """Resolve the theme selected by a GlobalDesignConfig."""
    return resolve_theme(design.theme, design.mode, design.radius)
