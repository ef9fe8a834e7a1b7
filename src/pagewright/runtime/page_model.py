"""
In-memory page model.

PageModel owns the ordered list of section nodes, the root layout and the
global design configuration. Every mutation goes through a method here;
unknown node or item ids make a mutation a silent no-op, since editor
operations routinely race with removals. Listeners are notified once after
each mutation that changed something.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from pagewright.catalog.variants import is_registered_variant
from pagewright.runtime import items as item_ops
from pagewright.runtime.expander import build_node, expand_template
from pagewright.specs.component import ComponentNode, ComponentType, ItemRecord
from pagewright.specs.layout import GlobalDesignConfig, LayoutConfig
from pagewright.styles.reconciler import StyleCategory, apply_style, display_value, is_style_active

logger = logging.getLogger(__name__)

Listener = Callable[["PageModel"], None]


class PageModel:
    """
    The page being built.

    Example:
        >>> page = PageModel()
        >>> hero_id = page.add_component("hero")
        >>> page.set_style(hero_id, "paddingY", "py-8")
        >>> page.get(hero_id).style_override
        'py-8'
    """

    def __init__(
        self,
        components: Iterable[ComponentNode] = (),
        layout: LayoutConfig | None = None,
        design: GlobalDesignConfig | None = None,
    ) -> None:
        self.components: list[ComponentNode] = list(components)
        self.layout = layout or LayoutConfig()
        self.design = design or GlobalDesignConfig()
        self.default_design = self.design.model_copy()
        self.selected_id: str | None = None
        self._listeners: list[Listener] = []

    # -------------------------------------------------------------------------
    # Observation
    # -------------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, node_id: str) -> ComponentNode | None:
        for node in self.components:
            if node.id == node_id:
                return node
        return None

    def index_of(self, node_id: str) -> int | None:
        for index, node in enumerate(self.components):
            if node.id == node_id:
                return index
        return None

    @property
    def selected(self) -> ComponentNode | None:
        return self.get(self.selected_id) if self.selected_id else None

    def __len__(self) -> int:
        return len(self.components)

    # -------------------------------------------------------------------------
    # Component list
    # -------------------------------------------------------------------------

    def add_component(self, component_type: ComponentType | str) -> str:
        """Append a section with default props and select it."""
        node = build_node(component_type)
        self.components.append(node)
        self.selected_id = node.id
        self._changed()
        return node.id

    def instantiate_template(self, template_id: str) -> list[str]:
        """
        Append every section of a template and select the first one.

        Returns:
            Ids of the new nodes; empty for an unknown template
        """
        nodes = expand_template(template_id)
        if not nodes:
            return []
        self.components.extend(nodes)
        self.selected_id = nodes[0].id
        self._changed()
        return [node.id for node in nodes]

    def remove_component(self, node_id: str) -> None:
        if self.get(node_id) is None:
            logger.debug("remove_component ignored: unknown node %s", node_id)
            return
        self.components = [node for node in self.components if node.id != node_id]
        if self.selected_id == node_id:
            self.selected_id = None
        self._changed()

    def clear(self) -> None:
        """Remove every section."""
        if not self.components:
            return
        self.components = []
        self.selected_id = None
        self._changed()

    def select(self, node_id: str | None) -> None:
        if node_id is not None and self.get(node_id) is None:
            return
        if node_id != self.selected_id:
            self.selected_id = node_id
            self._changed()

    def reorder_components(self, old_index: int, new_index: int) -> None:
        """Move the section at ``old_index`` to ``new_index``."""
        count = len(self.components)
        if not (0 <= old_index < count and 0 <= new_index < count) or old_index == new_index:
            return
        self.components = item_ops.array_move(self.components, old_index, new_index)
        self._changed()

    def move_component(self, active_id: str, over_id: str) -> None:
        """Move a section onto the position currently held by another."""
        old_index = self.index_of(active_id)
        new_index = self.index_of(over_id)
        if old_index is None or new_index is None:
            return
        self.reorder_components(old_index, new_index)

    # -------------------------------------------------------------------------
    # Node fields
    # -------------------------------------------------------------------------

    def update_field(self, node_id: str, field: str, value: Any) -> None:
        """
        Replace one top-level props field.

        Raises:
            pydantic.ValidationError: If the value does not fit the field
        """
        node = self.get(node_id)
        if node is None:
            return
        if field not in type(node.props).model_fields:
            logger.debug("update_field ignored: %s has no field %r", node.type, field)
            return
        setattr(node.props, field, value)
        self._changed()

    def update_variant(self, node_id: str, variant: str) -> None:
        node = self.get(node_id)
        if node is None:
            return
        if not is_registered_variant(node.type, variant):
            logger.debug("update_variant ignored: %r is not a %s variant", variant, node.type)
            return
        node.variant = variant
        self._changed()

    def set_classes(self, node_id: str, value: str) -> None:
        """Replace the whole style override (free-form editing)."""
        node = self.get(node_id)
        if node is None:
            return
        node.style_override = value
        self._changed()

    # -------------------------------------------------------------------------
    # Style categories
    # -------------------------------------------------------------------------

    def set_style(self, node_id: str, category: StyleCategory | str, value: str) -> None:
        node = self.get(node_id)
        if node is None:
            return
        node.style_override = apply_style(node.style_override, category, value)
        self._changed()

    def is_style_active(self, node_id: str, value: str) -> bool:
        node = self.get(node_id)
        return node is not None and is_style_active(node.style_override, value)

    def get_display_value(self, node_id: str, prefixes: str | Iterable[str]) -> str | None:
        node = self.get(node_id)
        if node is None:
            return None
        return display_value(node.style_override, prefixes)

    # -------------------------------------------------------------------------
    # Nested items
    # -------------------------------------------------------------------------

    def add_item(self, node_id: str) -> ItemRecord | None:
        node = self.get(node_id)
        if node is None:
            return None
        record = item_ops.add_item(node)
        if record is not None:
            self._changed()
        return record

    def remove_item(self, node_id: str, item_id: str) -> None:
        node = self.get(node_id)
        if node is not None and item_ops.remove_item(node, item_id):
            self._changed()

    def update_item(self, node_id: str, item_id: str, field: str, value: Any) -> None:
        node = self.get(node_id)
        if node is not None and item_ops.update_item(node, item_id, field, value):
            self._changed()

    def reorder_items(self, node_id: str, old_index: int, new_index: int) -> None:
        node = self.get(node_id)
        if node is not None and item_ops.reorder_items(node, old_index, new_index):
            self._changed()

    # -------------------------------------------------------------------------
    # Page configuration
    # -------------------------------------------------------------------------

    def update_layout(self, **changes: Any) -> None:
        """
        Change root layout settings.

        Raises:
            pydantic.ValidationError: On unknown settings or invalid values
        """
        if not changes:
            return
        self.layout = LayoutConfig.model_validate({**self.layout.model_dump(), **changes})
        self._changed()

    def update_design(self, **changes: Any) -> None:
        """
        Change global design settings.

        Raises:
            pydantic.ValidationError: On unknown settings or invalid values
        """
        if not changes:
            return
        self.design = GlobalDesignConfig.model_validate({**self.design.model_dump(), **changes})
        self._changed()

    def reset_design(self) -> None:
        """Restore the design configuration the model was created with."""
        self.design = self.default_design.model_copy()
        self._changed()
