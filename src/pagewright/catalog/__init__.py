"""
Static section catalog: variant registry, default props and page templates.
"""

from pagewright.catalog.defaults import DEFAULT_PROPS, default_props_data, default_props_for
from pagewright.catalog.templates import TEMPLATES, get_template, list_templates
from pagewright.catalog.variants import (
    COMPONENT_VARIANTS,
    SECTION_TYPES,
    SectionTypeSpec,
    default_variant,
    get_variant,
    is_registered_variant,
    section_classes,
    variants_for,
)

__all__ = [
    "COMPONENT_VARIANTS",
    "SECTION_TYPES",
    "SectionTypeSpec",
    "default_variant",
    "get_variant",
    "is_registered_variant",
    "section_classes",
    "variants_for",
    "DEFAULT_PROPS",
    "default_props_data",
    "default_props_for",
    "TEMPLATES",
    "get_template",
    "list_templates",
]
