"""
Static HTML code generator.

Serializes a page model into a single self-contained HTML document. The
output depends only on its inputs: node ids, item ids and selection state
never reach it, and identical inputs produce identical bytes.
"""

from __future__ import annotations

from collections.abc import Sequence

from pagewright.runtime.template_renderer import get_jinja_env, render_node
from pagewright.specs.component import ComponentNode
from pagewright.specs.layout import GlobalDesignConfig, LayoutConfig
from pagewright.styles.composer import content_wrapper_classes, root_wrapper_classes
from pagewright.styles.reconciler import DirectiveSet
from pagewright.themes.presets import TOKEN_NAMES
from pagewright.themes.resolver import resolve_design_theme

# Scoping class for the exported theme tokens
ROOT_SELECTOR_CLASS = "pagewright-root"

DEFAULT_TITLE = "Landing Page"


def generate(
    components: Sequence[ComponentNode],
    layout: LayoutConfig,
    design: GlobalDesignConfig,
    title: str = DEFAULT_TITLE,
) -> str:
    """
    Generate the HTML document for a page.

    Args:
        components: Sections in page order
        layout: Root layout settings
        design: Global design settings
        title: Document title

    Returns:
        Complete HTML5 document

    Raises:
        RenderTargetError: If a node's type or variant cannot be rendered
    """
    theme = resolve_design_theme(design)
    root_classes = DirectiveSet([ROOT_SELECTOR_CLASS])
    root_classes.extend(DirectiveSet.parse(root_wrapper_classes(layout, design)))

    template = get_jinja_env().get_template("export/document.html")
    html = template.render(
        title=title,
        color_tokens=TOKEN_NAMES,
        theme_css=theme.as_css(f".{ROOT_SELECTOR_CLASS}", indent=4),
        root_classes=str(root_classes),
        content_classes=content_wrapper_classes(layout, design),
        sections=[render_node(node, design) for node in components],
    )
    return html.rstrip() + "\n"
