"""
Built-in page templates.

Each template seeds a complete page in one operation. Template props are
partial: a field given here replaces the default field of the same name.
"""

from __future__ import annotations

from pagewright.specs.component import ComponentType
from pagewright.specs.template import TemplateItem, TemplateSpec

SAAS_TEMPLATE = TemplateSpec(
    id="template-saas",
    label="SaaS Landing",
    description="Complete landing page for SaaS products.",
    items=[
        TemplateItem(type=ComponentType.NAV),
        TemplateItem(type=ComponentType.HERO, variant="glow"),
        TemplateItem(type=ComponentType.LOGO_CLOUD),
        TemplateItem(type=ComponentType.FEATURE_GRID, variant="cards"),
        TemplateItem(type=ComponentType.STATS, variant="simple"),
        TemplateItem(type=ComponentType.TESTIMONIAL, variant="grid"),
        TemplateItem(type=ComponentType.PRICING),
        TemplateItem(type=ComponentType.CTA, variant="centered"),
        TemplateItem(type=ComponentType.FOOTER),
    ],
)

AGENCY_TEMPLATE = TemplateSpec(
    id="template-agency",
    label="Agency Portfolio",
    description="Showcase your team and work.",
    items=[
        TemplateItem(type=ComponentType.NAV),
        TemplateItem(
            type=ComponentType.HERO,
            variant="split",
            props={
                "title": "We build digital experiences.",
                "subtitle": "Award winning agency helping brands grow.",
                "primary_btn": "Our Work",
                "secondary_btn": "Contact Us",
            },
        ),
        TemplateItem(type=ComponentType.GALLERY),
        TemplateItem(type=ComponentType.TEAM, variant="grid"),
        TemplateItem(type=ComponentType.STEPS, props={"title": "Our Process"}),
        TemplateItem(type=ComponentType.VIDEO, variant="plain", props={"title": "See how we work"}),
        TemplateItem(type=ComponentType.BLOG, props={"title": "Latest Insights"}),
        TemplateItem(type=ComponentType.CONTACT, variant="split"),
        TemplateItem(type=ComponentType.FOOTER),
    ],
)

APP_TEMPLATE = TemplateSpec(
    id="template-app",
    label="Mobile App Launch",
    description="Clean layout for mobile app promotion.",
    items=[
        TemplateItem(type=ComponentType.NAV),
        TemplateItem(
            type=ComponentType.HERO,
            variant="split",
            props={
                "title": "Manage your life on the go.",
                "subtitle": "The ultimate productivity app for professionals.",
                "primary_btn": "Download App",
                "secondary_btn": "Learn More",
            },
        ),
        TemplateItem(type=ComponentType.STATS, variant="cards"),
        TemplateItem(type=ComponentType.FEATURE_GRID, variant="list"),
        TemplateItem(type=ComponentType.TESTIMONIAL, variant="centered"),
        TemplateItem(
            type=ComponentType.CTA,
            variant="minimal",
            props={"title": "Available on iOS and Android", "button_text": "Get it now"},
        ),
        TemplateItem(type=ComponentType.FOOTER),
    ],
)

COURSE_TEMPLATE = TemplateSpec(
    id="template-course",
    label="Online Course",
    description="Sell your knowledge effectively.",
    items=[
        TemplateItem(
            type=ComponentType.BANNER,
            variant="top",
            props={"text": "Early bird discount ends in 24 hours!"},
        ),
        TemplateItem(type=ComponentType.NAV),
        TemplateItem(type=ComponentType.VIDEO, variant="browser", props={"title": "Course Preview"}),
        TemplateItem(
            type=ComponentType.CONTENT,
            variant="centered",
            props={
                "title": "What you will learn",
                "content": (
                    "This comprehensive course covers everything from basics to advanced "
                    "techniques. Join thousands of students."
                ),
            },
        ),
        TemplateItem(type=ComponentType.STEPS, props={"title": "Curriculum"}),
        TemplateItem(type=ComponentType.PRICING, props={"title": "Enroll Now"}),
        TemplateItem(type=ComponentType.FAQ),
        TemplateItem(type=ComponentType.FOOTER),
    ],
)

TEMPLATES: dict[str, TemplateSpec] = {
    template.id: template
    for template in [SAAS_TEMPLATE, AGENCY_TEMPLATE, APP_TEMPLATE, COURSE_TEMPLATE]
}


def get_template(template_id: str) -> TemplateSpec | None:
    """Look up a template by id."""
    return TEMPLATES.get(template_id)


def list_templates() -> list[TemplateSpec]:
    """All templates in catalog order."""
    return list(TEMPLATES.values())
