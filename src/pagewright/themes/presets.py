"""
Color theme presets for Pagewright.

Each preset defines the full set of semantic color tokens (HSL triples,
consumed as ``hsl(var(--token))``) for light and dark mode.
"""

from __future__ import annotations

from pagewright.specs.theme import ThemePreset

# =============================================================================
# Shared neutrals
# =============================================================================

# Neutral surfaces shared by the rose, green and orange presets
_NEUTRAL_LIGHT = {
    "background": "0 0% 100%",
    "foreground": "240 10% 3.9%",
    "card": "0 0% 100%",
    "card-foreground": "240 10% 3.9%",
    "popover": "0 0% 100%",
    "popover-foreground": "240 10% 3.9%",
    "secondary": "240 4.8% 95.9%",
    "secondary-foreground": "240 5.9% 10%",
    "muted": "240 4.8% 95.9%",
    "muted-foreground": "240 3.8% 46.1%",
    "accent": "240 4.8% 95.9%",
    "accent-foreground": "240 5.9% 10%",
    "destructive": "0 84.2% 60.2%",
    "destructive-foreground": "0 0% 98%",
    "border": "240 5.9% 90%",
    "input": "240 5.9% 90%",
}

_NEUTRAL_DARK = {
    "background": "240 10% 3.9%",
    "foreground": "0 0% 98%",
    "card": "240 10% 3.9%",
    "card-foreground": "0 0% 98%",
    "popover": "240 10% 3.9%",
    "popover-foreground": "0 0% 98%",
    "secondary": "240 3.7% 15.9%",
    "secondary-foreground": "0 0% 98%",
    "muted": "240 3.7% 15.9%",
    "muted-foreground": "240 5% 64.9%",
    "accent": "240 3.7% 15.9%",
    "accent-foreground": "0 0% 98%",
    "destructive": "0 62.8% 30.6%",
    "destructive-foreground": "0 0% 98%",
    "border": "240 3.7% 15.9%",
    "input": "240 3.7% 15.9%",
}

# Token order of every preset
TOKEN_NAMES = (
    "background",
    "foreground",
    "card",
    "card-foreground",
    "popover",
    "popover-foreground",
    "primary",
    "primary-foreground",
    "secondary",
    "secondary-foreground",
    "muted",
    "muted-foreground",
    "accent",
    "accent-foreground",
    "destructive",
    "destructive-foreground",
    "border",
    "input",
    "ring",
)


def _ordered(base: dict[str, str], **accents: str) -> dict[str, str]:
    merged = {**base, **{name.replace("_", "-"): value for name, value in accents.items()}}
    return {name: merged[name] for name in TOKEN_NAMES}


# =============================================================================
# Presets
# =============================================================================

ZINC_THEME = ThemePreset(
    name="zinc",
    label="Zinc",
    swatch="bg-zinc-900",
    light=_ordered(
        _NEUTRAL_LIGHT,
        primary="240 5.9% 10%",
        primary_foreground="0 0% 98%",
        ring="240 10% 3.9%",
    ),
    dark=_ordered(
        _NEUTRAL_DARK,
        primary="0 0% 98%",
        primary_foreground="240 5.9% 10%",
        ring="240 4.9% 83.9%",
    ),
)

BLUE_THEME = ThemePreset(
    name="blue",
    label="Blue",
    swatch="bg-blue-600",
    light={
        "background": "0 0% 100%",
        "foreground": "222.2 84% 4.9%",
        "card": "0 0% 100%",
        "card-foreground": "222.2 84% 4.9%",
        "popover": "0 0% 100%",
        "popover-foreground": "222.2 84% 4.9%",
        "primary": "221.2 83.2% 53.3%",
        "primary-foreground": "210 40% 98%",
        "secondary": "210 40% 96.1%",
        "secondary-foreground": "222.2 47.4% 11.2%",
        "muted": "210 40% 96.1%",
        "muted-foreground": "215.4 16.3% 46.9%",
        "accent": "210 40% 96.1%",
        "accent-foreground": "222.2 47.4% 11.2%",
        "destructive": "0 84.2% 60.2%",
        "destructive-foreground": "210 40% 98%",
        "border": "214.3 31.8% 91.4%",
        "input": "214.3 31.8% 91.4%",
        "ring": "221.2 83.2% 53.3%",
    },
    dark={
        "background": "222.2 84% 4.9%",
        "foreground": "210 40% 98%",
        "card": "222.2 84% 4.9%",
        "card-foreground": "210 40% 98%",
        "popover": "222.2 84% 4.9%",
        "popover-foreground": "210 40% 98%",
        "primary": "217.2 91.2% 59.8%",
        "primary-foreground": "222.2 47.4% 11.2%",
        "secondary": "217.2 32.6% 17.5%",
        "secondary-foreground": "210 40% 98%",
        "muted": "217.2 32.6% 17.5%",
        "muted-foreground": "215 20.2% 65.1%",
        "accent": "217.2 32.6% 17.5%",
        "accent-foreground": "210 40% 98%",
        "destructive": "0 62.8% 30.6%",
        "destructive-foreground": "210 40% 98%",
        "border": "217.2 32.6% 17.5%",
        "input": "217.2 32.6% 17.5%",
        "ring": "212.7 26.8% 83.9%",
    },
)

ROSE_THEME = ThemePreset(
    name="rose",
    label="Rose",
    swatch="bg-rose-600",
    light=_ordered(
        _NEUTRAL_LIGHT,
        primary="346.8 77.2% 49.8%",
        primary_foreground="355.7 100% 97.3%",
        ring="346.8 77.2% 49.8%",
    ),
    dark=_ordered(
        _NEUTRAL_DARK,
        primary="346.8 77.2% 49.8%",
        primary_foreground="355.7 100% 97.3%",
        ring="346.8 77.2% 49.8%",
    ),
)

GREEN_THEME = ThemePreset(
    name="green",
    label="Green",
    swatch="bg-green-600",
    light=_ordered(
        _NEUTRAL_LIGHT,
        primary="142.1 76.2% 36.3%",
        primary_foreground="355.7 100% 97.3%",
        ring="142.1 76.2% 36.3%",
    ),
    dark=_ordered(
        _NEUTRAL_DARK,
        primary="142.1 70.6% 45.3%",
        primary_foreground="144.9 80.4% 10%",
        ring="142.4 71.8% 29.2%",
    ),
)

ORANGE_THEME = ThemePreset(
    name="orange",
    label="Orange",
    swatch="bg-orange-500",
    light=_ordered(
        _NEUTRAL_LIGHT,
        primary="24.6 95% 53.1%",
        primary_foreground="60 9.1% 97.8%",
        ring="24.6 95% 53.1%",
    ),
    dark=_ordered(
        _NEUTRAL_DARK,
        primary="20.5 90.2% 48.2%",
        primary_foreground="60 9.1% 97.8%",
        ring="20.5 90.2% 48.2%",
    ),
)

# =============================================================================
# Theme Registry
# =============================================================================

DEFAULT_THEME = "zinc"

_THEME_PRESETS: dict[str, ThemePreset] = {
    "zinc": ZINC_THEME,
    "blue": BLUE_THEME,
    "rose": ROSE_THEME,
    "green": GREEN_THEME,
    "orange": ORANGE_THEME,
}


def get_theme_preset(name: str) -> ThemePreset | None:
    """
    Get a theme preset by name.

    Args:
        name: Theme preset name ("zinc", "blue", ...)

    Returns:
        ThemePreset if found, None otherwise
    """
    return _THEME_PRESETS.get(name)


def list_theme_presets() -> list[str]:
    """
    List available theme preset names.

    Returns:
        List of preset names
    """
    return list(_THEME_PRESETS.keys())
