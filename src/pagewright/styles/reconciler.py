"""
Style directive reconciliation.

A component's style override is a flat set of whitespace-separated utility
directives (``py-4``, ``md:rounded-lg``, ``bg-muted/50``). Directives fall
into mutually exclusive categories; setting a value for a category first
removes every directive of that category and then appends the new ones, so
stale directives never accumulate.

Every category pattern tolerates any number of leading ``word:`` responsive
or state prefixes. Tokens that match no category are opaque and pass through
untouched, in their original order.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from enum import StrEnum

logger = logging.getLogger(__name__)


class StyleCategory(StrEnum):
    """Mutually exclusive groups of style directives."""

    PADDING_Y = "paddingY"
    PADDING_X = "paddingX"
    MARGIN_Y = "marginY"
    GAP = "gap"
    ALIGN = "align"
    BG = "bg"
    BORDER_WIDTH = "borderWidth"
    BORDER_COLOR = "borderColor"
    BORDER_STYLE = "borderStyle"
    BORDER_RADIUS = "borderRadius"


# Zero or more responsive/state prefixes, e.g. "md:" or "dark:hover:"
_PREFIX = r"^(?:\w+:)*"

BG_PALETTE_ROOTS = (
    "background",
    "muted",
    "secondary",
    "primary",
    "accent",
    "card",
    "white",
    "black",
    "slate",
    "gray",
    "zinc",
    "neutral",
    "stone",
    "red",
    "orange",
    "amber",
    "yellow",
    "lime",
    "green",
    "emerald",
    "teal",
    "cyan",
    "sky",
    "blue",
    "indigo",
    "violet",
    "purple",
    "fuchsia",
    "pink",
    "rose",
)

_CATEGORY_PATTERNS: dict[StyleCategory, re.Pattern[str]] = {
    StyleCategory.PADDING_Y: re.compile(_PREFIX + r"(?:py-|pt-|pb-)"),
    StyleCategory.PADDING_X: re.compile(_PREFIX + r"(?:px-|pl-|pr-)"),
    StyleCategory.MARGIN_Y: re.compile(_PREFIX + r"(?:my-|mt-|mb-)"),
    StyleCategory.GAP: re.compile(_PREFIX + r"gap-"),
    StyleCategory.ALIGN: re.compile(_PREFIX + r"text-(?:left|center|right)"),
    StyleCategory.BG: re.compile(_PREFIX + r"bg-(?:" + "|".join(BG_PALETTE_ROOTS) + r")(?:/.*)?$"),
    StyleCategory.BORDER_WIDTH: re.compile(_PREFIX + r"border(?:-(?:0|2|4|8))?$"),
    StyleCategory.BORDER_COLOR: re.compile(
        _PREFIX + r"border-(?!0|2|4|8|solid|dashed|dotted|double|none|x-|y-|t-|b-|l-|r-).+$"
    ),
    StyleCategory.BORDER_STYLE: re.compile(
        _PREFIX + r"border-(?:solid|dashed|dotted|double|none)$"
    ),
    StyleCategory.BORDER_RADIUS: re.compile(_PREFIX + r"rounded(?:-.+)?$"),
}

# A gradient replaces any background directive, flat colors included
_ANY_BG = re.compile(_PREFIX + r"bg-")


class DirectiveSet:
    """
    Ordered set of style directive tokens.

    Parsing splits on any run of whitespace and drops empty tokens; a token
    appearing twice is kept once, at its first position.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: dict[str, None] = {}
        self.extend(tokens)

    @classmethod
    def parse(cls, text: str | None) -> DirectiveSet:
        return cls((text or "").split())

    def extend(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            if token:
                self._tokens.setdefault(token, None)

    def without(self, predicate: Callable[[str], bool]) -> DirectiveSet:
        """Copy of this set minus the tokens matching ``predicate``."""
        return DirectiveSet(token for token in self._tokens if not predicate(token))

    def contains_all(self, tokens: Iterable[str]) -> bool:
        return all(token in self._tokens for token in tokens)

    def first_with_prefix(self, prefixes: str | Iterable[str]) -> str | None:
        prefixes = (prefixes,) if isinstance(prefixes, str) else tuple(prefixes)
        if not prefixes:
            return None
        for token in self._tokens:
            if token.startswith(prefixes):
                return token
        return None

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectiveSet):
            return NotImplemented
        return list(self._tokens) == list(other._tokens)

    def __str__(self) -> str:
        return " ".join(self._tokens)

    def __repr__(self) -> str:
        return f"DirectiveSet({str(self)!r})"


def _coerce_category(category: StyleCategory | str) -> StyleCategory | None:
    try:
        return StyleCategory(category)
    except ValueError:
        return None


def category_matcher(category: StyleCategory | str, new_value: str = "") -> Callable[[str], bool]:
    """
    Build the predicate selecting the directives a category owns.

    For ``bg``, a new value mentioning "gradient" widens the match to every
    ``bg-`` directive. The widening is one-directional: a flat color does not
    widen the match when it replaces a gradient.

    Unknown categories match nothing.
    """
    resolved = _coerce_category(category)
    if resolved is None:
        logger.debug("Unknown style category %r, nothing will be removed", category)
        return lambda token: False

    pattern = _CATEGORY_PATTERNS[resolved]
    if resolved is StyleCategory.BG and "gradient" in new_value:
        return lambda token: bool(pattern.match(token) or _ANY_BG.match(token))
    return lambda token: bool(pattern.match(token))


def apply_style(current_override: str, category: StyleCategory | str, new_value: str) -> str:
    """
    Set one category of a style override.

    Removes every directive of ``category`` from ``current_override``, then
    appends the directives of ``new_value``. An empty ``new_value`` clears
    the category.

    Example:
        >>> apply_style("border-2 border-dashed border-zinc-500", "borderWidth", "border-8")
        'border-dashed border-zinc-500 border-8'
    """
    matcher = category_matcher(category, new_value)
    kept = DirectiveSet.parse(current_override).without(matcher)
    kept.extend(new_value.split())
    return str(kept)


def is_style_active(override: str, candidate: str) -> bool:
    """
    Check whether every directive of ``candidate`` is present in ``override``.

    Multi-token candidates (``"py-12 md:py-24"``) require the whole
    combination. An empty candidate is never active.
    """
    wanted = candidate.split()
    if not wanted:
        return False
    return DirectiveSet.parse(override).contains_all(wanted)


def display_value(override: str, prefixes: str | Iterable[str]) -> str | None:
    """First directive of ``override`` starting with any of ``prefixes``."""
    return DirectiveSet.parse(override).first_with_prefix(prefixes)


def classify(token: str) -> StyleCategory | None:
    """
    Category a directive is set through, or None for opaque directives.

    Any ``bg-`` directive (gradients included) is reported as ``bg``.
    """
    for category, pattern in _CATEGORY_PATTERNS.items():
        if pattern.match(token):
            return category
    if _ANY_BG.match(token):
        return StyleCategory.BG
    return None
