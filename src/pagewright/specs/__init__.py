"""
Pagewright specification types.

Pydantic models for the page model: section components and their item
records, page layout and design configuration, and page templates.
"""

from pagewright.specs.component import (
    PROPS_MODELS,
    BannerProps,
    BlogPost,
    BlogProps,
    ComponentNode,
    ComponentType,
    ContactProps,
    ContentProps,
    CtaProps,
    FaqItem,
    FaqProps,
    FeatureGridProps,
    FeatureItem,
    FooterProps,
    GalleryItem,
    GalleryProps,
    HeroProps,
    ItemRecord,
    LogoCloudProps,
    LogoItem,
    NavLink,
    NavProps,
    NewsletterProps,
    PricingProps,
    PricingTier,
    SectionProps,
    StatItem,
    StatsProps,
    StepItem,
    StepsProps,
    TeamMember,
    TeamProps,
    Testimonial,
    TestimonialProps,
    TimelineItem,
    TimelineProps,
    VariantSpec,
    VideoProps,
    new_id,
)
from pagewright.specs.layout import GlobalDesignConfig, LayoutConfig, ThemeMode
from pagewright.specs.template import TemplateItem, TemplateSpec
from pagewright.specs.theme import ResolvedTheme, ThemePreset

__all__ = [
    # Components
    "ComponentNode",
    "ComponentType",
    "VariantSpec",
    "SectionProps",
    "PROPS_MODELS",
    "new_id",
    # Props
    "NavProps",
    "HeroProps",
    "FeatureGridProps",
    "ContentProps",
    "VideoProps",
    "StepsProps",
    "TimelineProps",
    "GalleryProps",
    "BlogProps",
    "LogoCloudProps",
    "StatsProps",
    "TeamProps",
    "TestimonialProps",
    "PricingProps",
    "FaqProps",
    "BannerProps",
    "CtaProps",
    "NewsletterProps",
    "ContactProps",
    "FooterProps",
    # Items
    "ItemRecord",
    "NavLink",
    "FeatureItem",
    "StepItem",
    "TimelineItem",
    "GalleryItem",
    "BlogPost",
    "Testimonial",
    "PricingTier",
    "FaqItem",
    "LogoItem",
    "TeamMember",
    "StatItem",
    # Layout
    "LayoutConfig",
    "GlobalDesignConfig",
    "ThemeMode",
    # Templates
    "TemplateItem",
    "TemplateSpec",
    # Themes
    "ThemePreset",
    "ResolvedTheme",
]
