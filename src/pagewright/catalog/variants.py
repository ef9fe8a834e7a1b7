"""
Variant registry for section components.

Maps each ComponentType to its sidebar label, its base utility classes and
the ordered list of design variants it supports. The first registered
variant is the default for new nodes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pagewright.specs.component import ComponentType, VariantSpec


class SectionTypeSpec(BaseModel):
    """
    Static description of a section type.

    Attributes:
        type: Section kind
        label: Sidebar label
        classes: Base utility classes of the section root element
        inherits_padding: Whether the global section padding applies
    """

    type: ComponentType
    label: str
    classes: str = "w-full"
    inherits_padding: bool = True

    model_config = ConfigDict(frozen=True)


# Sidebar order
SECTION_TYPES: dict[ComponentType, SectionTypeSpec] = {
    spec.type: spec
    for spec in [
        SectionTypeSpec(
            type=ComponentType.NAV,
            label="Navigation",
            classes="w-full border-b border-border py-4 px-4 md:px-6",
            inherits_padding=False,
        ),
        SectionTypeSpec(type=ComponentType.HERO, label="Hero Section"),
        SectionTypeSpec(type=ComponentType.FEATURE_GRID, label="Features"),
        SectionTypeSpec(type=ComponentType.CONTENT, label="Content / Article"),
        SectionTypeSpec(type=ComponentType.VIDEO, label="Video Embed"),
        SectionTypeSpec(type=ComponentType.STEPS, label="How it Works"),
        SectionTypeSpec(type=ComponentType.TIMELINE, label="Timeline"),
        SectionTypeSpec(type=ComponentType.GALLERY, label="Gallery"),
        SectionTypeSpec(type=ComponentType.BLOG, label="Blog Grid"),
        SectionTypeSpec(type=ComponentType.LOGO_CLOUD, label="Logo Cloud"),
        SectionTypeSpec(type=ComponentType.STATS, label="Stats"),
        SectionTypeSpec(type=ComponentType.TEAM, label="Team"),
        SectionTypeSpec(type=ComponentType.TESTIMONIAL, label="Testimonials"),
        SectionTypeSpec(type=ComponentType.PRICING, label="Pricing"),
        SectionTypeSpec(type=ComponentType.FAQ, label="FAQ"),
        SectionTypeSpec(
            type=ComponentType.BANNER,
            label="Promo Banner",
            classes="w-full py-2 px-4 text-sm",
            inherits_padding=False,
        ),
        SectionTypeSpec(type=ComponentType.CTA, label="Call to Action"),
        SectionTypeSpec(type=ComponentType.NEWSLETTER, label="Newsletter"),
        SectionTypeSpec(type=ComponentType.CONTACT, label="Contact Form"),
        SectionTypeSpec(
            type=ComponentType.FOOTER,
            label="Footer",
            classes="w-full border-t border-border py-6 px-4 md:px-6",
            inherits_padding=False,
        ),
    ]
}


COMPONENT_VARIANTS: dict[ComponentType, list[VariantSpec]] = {
    ComponentType.HERO: [
        VariantSpec(id="centered", label="Centered (Default)", classes="text-center"),
        VariantSpec(id="split", label="Split Left/Right"),
        VariantSpec(id="glow", label="Glow Effect", classes="relative overflow-hidden text-center"),
    ],
    ComponentType.FEATURE_GRID: [
        VariantSpec(id="grid", label="Simple Grid"),
        VariantSpec(id="cards", label="Cards with Border"),
        VariantSpec(id="list", label="List View"),
    ],
    ComponentType.STATS: [
        VariantSpec(id="simple", label="Simple Text", classes="text-center"),
        VariantSpec(id="cards", label="Boxed Cards"),
        VariantSpec(id="split", label="Split Background", classes="bg-muted/50"),
    ],
    ComponentType.TESTIMONIAL: [
        VariantSpec(id="grid", label="Grid Cards", classes="bg-muted/50"),
        VariantSpec(id="minimal", label="Minimal (No Bg)"),
        VariantSpec(id="centered", label="Large Centered", classes="text-center"),
    ],
    ComponentType.CTA: [
        VariantSpec(id="centered", label="Centered Box", classes="text-center"),
        VariantSpec(id="split", label="Split Text/Button"),
        VariantSpec(id="minimal", label="Minimal Link", classes="text-center"),
    ],
    ComponentType.CONTACT: [
        VariantSpec(id="centered", label="Centered Form", classes="text-center"),
        VariantSpec(id="split", label="Split Info/Form"),
    ],
    ComponentType.TEAM: [
        VariantSpec(id="grid", label="Grid Cards", classes="text-center"),
        VariantSpec(id="list", label="Horizontal List"),
    ],
    ComponentType.VIDEO: [
        VariantSpec(id="browser", label="Browser Frame", classes="text-center"),
        VariantSpec(id="plain", label="Rounded Plain", classes="text-center"),
        VariantSpec(id="full", label="Full Width"),
    ],
    ComponentType.CONTENT: [
        VariantSpec(id="centered", label="Centered Prose"),
        VariantSpec(id="split-img", label="Text + Image"),
    ],
    ComponentType.BANNER: [
        VariantSpec(
            id="top",
            label="Slim Strip",
            classes="bg-primary text-primary-foreground text-center",
        ),
        VariantSpec(id="box", label="Info Box"),
    ],
}


def variants_for(component_type: ComponentType | str) -> list[VariantSpec]:
    """Ordered variants registered for a type (empty when it has none)."""
    try:
        return list(COMPONENT_VARIANTS.get(ComponentType(component_type), []))
    except ValueError:
        return []


def default_variant(component_type: ComponentType | str) -> str | None:
    """First registered variant id, or None if the type has no variants."""
    variants = variants_for(component_type)
    return variants[0].id if variants else None


def get_variant(component_type: ComponentType | str, variant_id: str) -> VariantSpec | None:
    """Look up a variant by id."""
    for variant in variants_for(component_type):
        if variant.id == variant_id:
            return variant
    return None


def is_registered_variant(component_type: ComponentType | str, variant_id: str | None) -> bool:
    """
    Check a variant against the registry.

    ``None`` is valid only for types without variants.
    """
    if variant_id is None:
        return not variants_for(component_type)
    return get_variant(component_type, variant_id) is not None


def section_classes(component_type: ComponentType, variant_id: str | None) -> str:
    """Default classes of a section: type base classes then variant classes."""
    parts = [SECTION_TYPES[component_type].classes]
    if variant_id is not None:
        variant = get_variant(component_type, variant_id)
        if variant is not None and variant.classes:
            parts.append(variant.classes)
    return " ".join(parts)
