"""
Template expansion.

Turns catalog entries into concrete ComponentNode instances with fresh
identities. Partial props merge by field replacement: a field given by the
template replaces the default field wholesale, unspecified fields keep their
defaults. Item lists are never merged record by record.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from pagewright.catalog.defaults import default_props_data
from pagewright.catalog.templates import get_template
from pagewright.catalog.variants import default_variant
from pagewright.specs.component import PROPS_MODELS, ComponentNode, ComponentType

logger = logging.getLogger(__name__)


def _strip_record_ids(value: Any) -> Any:
    # Records supplied as data always get freshly minted ids
    if isinstance(value, list):
        return [
            {k: v for k, v in entry.items() if k != "id"} if isinstance(entry, dict) else entry
            for entry in value
        ]
    return value


def build_node(
    component_type: ComponentType | str,
    variant: str | None = None,
    props: dict[str, Any] | None = None,
) -> ComponentNode:
    """
    Create a node with default props, optionally overriding whole fields.

    Args:
        component_type: Section kind
        variant: Variant key; the first registered variant when omitted
        props: Partial props replacing default fields of the same name

    Raises:
        ValueError: If the type is unknown
        pydantic.ValidationError: If ``props`` names fields the type lacks, or
            ``variant`` is not registered for the type
    """
    component_type = ComponentType(component_type)
    data = default_props_data(component_type)
    for field, value in copy.deepcopy(props or {}).items():
        data[field] = _strip_record_ids(value)

    return ComponentNode(
        type=component_type,
        variant=variant or default_variant(component_type),
        props=PROPS_MODELS[component_type].model_validate(data),
    )


def expand_template(template_id: str) -> list[ComponentNode]:
    """
    Instantiate a named template.

    Returns:
        New nodes in template order; empty if the template id is unknown
    """
    template = get_template(template_id)
    if template is None:
        logger.debug("Unknown template %r", template_id)
        return []
    return [build_node(item.type, item.variant, item.props) for item in template.items]
