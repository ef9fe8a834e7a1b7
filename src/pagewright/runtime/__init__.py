"""
Pagewright runtime.

The page model and its mutations, template expansion, and the section
catalog renderer shared by the live preview and the exporter.
"""

from .expander import build_node, expand_template
from .items import add_item, array_move, remove_item, reorder_items, update_item
from .page_model import PageModel
from .preview import render_preview
from .template_renderer import (
    create_jinja_env,
    get_jinja_env,
    render_node,
    render_section,
    section_props,
)

__all__ = [
    "PageModel",
    "add_item",
    "array_move",
    "build_node",
    "create_jinja_env",
    "expand_template",
    "get_jinja_env",
    "remove_item",
    "render_node",
    "render_preview",
    "render_section",
    "reorder_items",
    "section_props",
    "update_item",
]
