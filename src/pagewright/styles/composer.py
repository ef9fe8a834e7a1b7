"""
Class composition for sections and page wrappers.

A section's final class list is built from three layers, each later layer
winning over the earlier ones on a per-category basis:

1. section defaults (type base classes + variant classes)
2. global design defaults (padding, shadow)
3. the node's own style override

The live preview and the exporter both call ``resolve_node_classes`` so the
two can never disagree.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from pagewright.catalog.variants import SECTION_TYPES, default_variant, section_classes
from pagewright.specs.component import ComponentNode
from pagewright.specs.layout import GlobalDesignConfig, LayoutConfig, ThemeMode
from pagewright.styles.reconciler import DirectiveSet, StyleCategory, category_matcher, classify

ROOT_BASE_CLASSES = "relative flex flex-col min-h-screen text-foreground"
CONTENT_BASE_CLASSES = "flex flex-col w-full mx-auto"

# Side widths such as border-b or border-x-2; the borderColor pattern also matches them
_SIDE_BORDER_WIDTH = re.compile(r"^(?:\w+:)*border-[xytblr](?:-\d+)?$")


def merge_directives(lower: str, upper: str) -> str:
    """
    Layer ``upper`` over ``lower``.

    Every category present in ``upper`` evicts that category from
    ``lower``; opaque directives of both layers are kept. Side border widths
    (``border-b``, ``border-x-2``) are opaque here, so recolouring a section
    keeps its dividers. ``upper`` tokens keep their relative order and come
    last.
    """
    upper_set = DirectiveSet.parse(upper)
    by_category: dict[StyleCategory, list[str]] = {}
    for token in upper_set:
        category = None if _SIDE_BORDER_WIDTH.match(token) else classify(token)
        if category is not None:
            by_category.setdefault(category, []).append(token)

    merged = DirectiveSet.parse(lower)
    for category, tokens in by_category.items():
        merged = merged.without(_evicting(category_matcher(category, " ".join(tokens))))
    merged.extend(upper_set)
    return str(merged)


def _evicting(matcher: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda token: matcher(token) and not _SIDE_BORDER_WIDTH.match(token)


def global_section_defaults(node: ComponentNode, design: GlobalDesignConfig) -> str:
    """Directives a section inherits from the global design config."""
    layer: list[str] = []
    if SECTION_TYPES[node.type].inherits_padding:
        layer.extend([design.padding_y, design.padding_x])
    layer.append(design.shadow)
    return " ".join(layer)


def resolve_node_classes(node: ComponentNode, design: GlobalDesignConfig) -> str:
    """Final class string of a section's root element."""
    variant = node.variant if node.variant is not None else default_variant(node.type)
    classes = section_classes(node.type, variant)
    classes = merge_directives(classes, global_section_defaults(node, design))
    return merge_directives(classes, node.style_override)


def root_wrapper_classes(layout: LayoutConfig, design: GlobalDesignConfig) -> str:
    """Classes of the page shell: background, padding, centering, font."""
    tokens = DirectiveSet.parse(ROOT_BASE_CLASSES)
    tokens.extend(layout.background.split())
    tokens.extend(layout.padding.split())
    if layout.is_centered_vertical:
        tokens.extend(["justify-center"])
    tokens.extend(design.font.split())
    if design.mode is ThemeMode.DARK:
        tokens.extend(["dark"])
    return str(tokens)


def content_wrapper_classes(layout: LayoutConfig, design: GlobalDesignConfig) -> str:
    """Classes of the content column: max width, section gap, optional border."""
    tokens = DirectiveSet.parse(CONTENT_BASE_CLASSES)
    tokens.extend(layout.max_width.split())
    tokens.extend(design.gap.split())
    if layout.show_border:
        for value in (layout.border_width, layout.border_style, layout.border_color):
            tokens.extend(value.split())
    return str(tokens)
