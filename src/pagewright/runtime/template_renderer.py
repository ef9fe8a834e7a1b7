"""
Jinja2 section catalog.

Every component type has one template under ``templates/sections/``; the
template receives the resolved props, the variant key and the final class
string and branches on the variant. Lookups that cannot be satisfied raise
RenderTargetError instead of producing blank markup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)
from markupsafe import Markup

from pagewright.catalog.variants import SECTION_TYPES, default_variant, is_registered_variant
from pagewright.core.errors import RenderTargetError
from pagewright.specs.component import ComponentNode, ComponentType
from pagewright.specs.layout import GlobalDesignConfig
from pagewright.styles.composer import resolve_node_classes

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def _initials_filter(value: Any) -> str:
    """First letters of the first two words, for avatar placeholders."""
    if value is None:
        return ""
    words = str(value).split()
    return "".join(word[0] for word in words[:2]).upper()


def create_jinja_env() -> Environment:
    """Create and configure the Jinja2 environment."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=False,
    )
    env.filters["initials"] = _initials_filter
    return env


# Module-level singleton
_env: Environment | None = None


def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment (lazy singleton)."""
    global _env
    if _env is None:
        _env = create_jinja_env()
    return _env


def render_section(
    component_type: ComponentType | str,
    variant: str | None,
    props: dict[str, Any],
    classes: str,
) -> Markup:
    """
    Render one section from the catalog.

    Args:
        component_type: Section kind
        variant: Registered variant key (None only for types without variants)
        props: Resolved props, as plain data
        classes: Final class string of the section root element

    Raises:
        RenderTargetError: Unknown type, unregistered variant or missing template
    """
    try:
        resolved_type = ComponentType(component_type)
    except ValueError:
        raise RenderTargetError(str(component_type), variant, "unknown component type") from None
    if resolved_type not in SECTION_TYPES:
        raise RenderTargetError(resolved_type.value, variant, "type is not in the catalog")
    if not is_registered_variant(resolved_type, variant):
        raise RenderTargetError(resolved_type.value, variant, "variant is not registered")

    env = get_jinja_env()
    try:
        template = env.get_template(f"sections/{resolved_type.value}.html")
    except TemplateNotFound:
        raise RenderTargetError(resolved_type.value, variant, "no section template") from None

    html = template.render(variant=variant, props=props, classes=classes)
    return Markup(html.strip())


def section_props(node: ComponentNode) -> dict[str, Any]:
    """Props of a node as plain data, without record ids."""
    data = node.props.model_dump()
    field = node.props.item_field
    if field is not None:
        data[field] = [
            {key: value for key, value in record.items() if key != "id"} for record in data[field]
        ]
    return data


def render_node(node: ComponentNode, design: GlobalDesignConfig) -> Markup:
    """
    Render a node exactly as it appears in both preview and export.

    A node without a variant renders with its type's default variant.
    """
    variant = node.variant if node.variant is not None else default_variant(node.type)
    classes = resolve_node_classes(node, design)
    return render_section(node.type, variant, section_props(node), classes)
