"""
Default props for every section type.

Values are stored as plain data without record ids; ``default_props_for``
validates a deep copy into the type's props record so each call hands out
fresh item records with freshly minted ids.
"""

from __future__ import annotations

import copy
from typing import Any

from pagewright.specs.component import PROPS_MODELS, ComponentType, SectionProps

DEFAULT_PROPS: dict[ComponentType, dict[str, Any]] = {
    ComponentType.NAV: {
        "title": "Brand",
        "links": [
            {"text": "Features", "href": "#"},
            {"text": "Pricing", "href": "#"},
            {"text": "About", "href": "#"},
        ],
    },
    ComponentType.HERO: {
        "title": "Build faster with components.",
        "subtitle": "Beautifully designed components that you can copy and paste into your apps.",
        "primary_btn": "Get Started",
        "secondary_btn": "GitHub",
    },
    ComponentType.FEATURE_GRID: {
        "title": "Features",
        "description": "Everything you need to build your SaaS.",
        "items": [
            {"title": "Feature 1", "description": "Optimized for performance and built for scale."},
            {
                "title": "Feature 2",
                "description": "Handles your needs perfectly with modern architecture.",
            },
            {"title": "Feature 3", "description": "Secure by default and easy to configure."},
        ],
    },
    ComponentType.STEPS: {
        "title": "How it works",
        "description": "Simple steps to get started.",
        "items": [
            {"title": "Sign Up", "description": "Create your free account in seconds."},
            {"title": "Customize", "description": "Choose your settings and preferences."},
            {"title": "Launch", "description": "Publish your site to the world."},
        ],
    },
    ComponentType.TIMELINE: {
        "title": "Our Journey",
        "description": "See how far we have come.",
        "items": [
            {
                "year": "2024",
                "title": "Global Expansion",
                "description": "Opened offices in 3 new continents.",
            },
            {
                "year": "2023",
                "title": "Series B Funding",
                "description": "Raised $50M to scale operations.",
            },
            {
                "year": "2022",
                "title": "Product Launch",
                "description": "First version released to the public.",
            },
        ],
    },
    ComponentType.GALLERY: {
        "title": "Our Work",
        "description": "A glimpse into our recent projects.",
        "items": [{"alt": f"Project {n}"} for n in range(1, 7)],
    },
    ComponentType.BLOG: {
        "title": "From the blog",
        "description": "Latest news and updates from our team.",
        "items": [
            {
                "title": "The Future of Web Dev",
                "date": "Mar 16, 2024",
                "description": "Exploring new technologies and trends.",
            },
            {
                "title": "Mastering React",
                "date": "Mar 14, 2024",
                "description": "Tips and tricks for better components.",
            },
            {
                "title": "Design Systems 101",
                "date": "Mar 12, 2024",
                "description": "How to build consistent UIs.",
            },
        ],
    },
    ComponentType.CTA: {
        "title": "Ready to get started?",
        "button_text": "Start Building",
    },
    ComponentType.FOOTER: {
        "text": "© 2024 Acme Inc. All rights reserved.",
    },
    ComponentType.TESTIMONIAL: {
        "title": "Loved by thousands",
        "items": [
            {
                "quote": "This library has saved me countless hours.",
                "author": "Sofia Davis",
                "role": "CTO at TechCorp",
            },
            {"quote": "The code quality is top-notch.", "author": "Alex Chen", "role": "Lead Dev"},
            {
                "quote": "I can't imagine building without it.",
                "author": "James Wilson",
                "role": "Product Manager",
            },
        ],
    },
    ComponentType.PRICING: {
        "title": "Simple Pricing",
        "description": "Choose the plan that's right for you",
        "items": [
            {
                "name": "Starter",
                "price": "0",
                "popular": False,
                "features": ["Project Management", "Basic Analytics", "Email Support"],
            },
            {
                "name": "Pro",
                "price": "29",
                "popular": True,
                "features": ["Unlimited Projects", "Advanced Analytics", "24/7 Support"],
            },
            {
                "name": "Enterprise",
                "price": "99",
                "popular": False,
                "features": ["Custom Solutions", "Dedicated Manager", "SLA"],
            },
        ],
    },
    ComponentType.FAQ: {
        "title": "Frequently Asked Questions",
        "items": [
            {
                "question": "Is it compatible with Next.js?",
                "answer": "Yes, it is built specifically for the Next.js ecosystem.",
            },
            {
                "question": "Can I use it for commercial projects?",
                "answer": "Absolutely! It's fully open source.",
            },
            {
                "question": "Do you offer support?",
                "answer": "Community support is available via Discord.",
            },
        ],
    },
    ComponentType.LOGO_CLOUD: {
        "title": "Trusted by industry leaders",
        "items": [{"name": f"Company {n}"} for n in range(1, 6)],
    },
    ComponentType.CONTACT: {
        "title": "Get in touch",
        "description": "We'd love to hear from you.",
    },
    ComponentType.TEAM: {
        "title": "Meet our team",
        "description": "The best team in the world.",
        "items": [
            {"name": "Alice Johnson", "role": "CEO"},
            {"name": "Bob Smith", "role": "CTO"},
            {"name": "Carol Williams", "role": "Designer"},
        ],
    },
    ComponentType.STATS: {
        "items": [
            {"label": "Downloads", "value": "10K+"},
            {"label": "Users", "value": "50K+"},
            {"label": "Countries", "value": "20+"},
        ],
    },
    ComponentType.NEWSLETTER: {
        "title": "Subscribe to our newsletter",
        "description": "Get the latest news and updates.",
        "button_text": "Subscribe",
    },
    ComponentType.VIDEO: {
        "title": "Watch Demo",
        "description": "See how it works in action.",
    },
    ComponentType.CONTENT: {
        "title": "About the Project",
        "content": (
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor "
            "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
            "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat."
        ),
    },
    ComponentType.BANNER: {
        "text": "Big news! We are launching our new version soon.",
        "link_text": "Learn more",
    },
}


def default_props_data(component_type: ComponentType | str) -> dict[str, Any]:
    """Deep copy of the raw default props for a type."""
    return copy.deepcopy(DEFAULT_PROPS[ComponentType(component_type)])


def default_props_for(component_type: ComponentType | str) -> SectionProps:
    """
    Build the default props record for a type.

    Raises:
        ValueError: If the type is not a known ComponentType
    """
    component_type = ComponentType(component_type)
    return PROPS_MODELS[component_type].model_validate(default_props_data(component_type))
