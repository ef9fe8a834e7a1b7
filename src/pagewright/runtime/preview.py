"""
Live preview rendering.

The preview renders every section through the same catalog as the exporter,
so what the canvas shows is what the export produces. It differs only in
the page chrome: theme tokens go into an inline ``style`` attribute and each
section is wrapped with its node id for selection.
"""

from __future__ import annotations

import logging

from markupsafe import Markup

from pagewright.runtime.page_model import PageModel
from pagewright.runtime.template_renderer import get_jinja_env, render_node
from pagewright.styles.composer import content_wrapper_classes, root_wrapper_classes
from pagewright.themes.resolver import resolve_design_theme

logger = logging.getLogger(__name__)


def render_preview(model: PageModel) -> Markup:
    """
    Render the editing canvas for a page model.

    Raises:
        RenderTargetError: If a node's type or variant cannot be rendered
    """
    theme = resolve_design_theme(model.design)
    sections = [
        {
            "id": node.id,
            "selected": node.id == model.selected_id,
            "html": render_node(node, model.design),
        }
        for node in model.components
    ]
    logger.debug("Rendering preview with %d sections", len(sections))

    template = get_jinja_env().get_template("preview/canvas.html")
    html = template.render(
        root_classes=root_wrapper_classes(model.layout, model.design),
        content_classes=content_wrapper_classes(model.layout, model.design),
        theme_style=theme.as_style_attribute(),
        sections=sections,
    )
    return Markup(html.strip())
