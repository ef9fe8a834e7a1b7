"""
Nested item operations.

Sections such as features, FAQ or nav own an ordered list of item records.
These functions edit that list in place on a single ComponentNode and report
whether anything changed; a missing list, record or field is a silent no-op.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pagewright.specs.component import ComponentNode, ItemRecord, new_id

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Text-bearing fields reset when a record is cloned
ITEM_PLACEHOLDERS: dict[str, str] = {
    "title": "New Item",
    "description": "New Description",
    "question": "New Question?",
    "answer": "New Answer",
    "name": "New Name",
    "text": "New Link",
    "year": "2025",
    "alt": "Project",
}


def array_move(items: list[T], old_index: int, new_index: int) -> list[T]:
    """Move one element to a new position, keeping everything else in order."""
    moved = list(items)
    moved.insert(new_index, moved.pop(old_index))
    return moved


def _find_item(node: ComponentNode, item_id: str) -> ItemRecord | None:
    for record in node.items or []:
        if record.id == item_id:
            return record
    return None


def add_item(node: ComponentNode) -> ItemRecord | None:
    """
    Append a clone of the first record with placeholder text.

    The clone gets a fresh id; recognised text fields are reset to
    ``ITEM_PLACEHOLDERS``, every other field keeps the cloned value.

    Returns:
        The new record, or None when the section has no (or an empty) list
    """
    items = node.items
    if not items:
        logger.debug("add_item ignored: %s %s has no item to clone", node.type, node.id)
        return None

    prototype = items[0]
    data: dict[str, Any] = prototype.model_dump()
    data["id"] = new_id()
    for field in data:
        if field in ITEM_PLACEHOLDERS:
            data[field] = ITEM_PLACEHOLDERS[field]

    record = type(prototype).model_validate(data)
    items.append(record)
    return record


def remove_item(node: ComponentNode, item_id: str) -> bool:
    """Remove a record by id."""
    items = node.items
    if items is None or _find_item(node, item_id) is None:
        return False
    items[:] = [record for record in items if record.id != item_id]
    return True


def update_item(node: ComponentNode, item_id: str, field: str, value: Any) -> bool:
    """
    Replace one field of one record.

    The record schema is closed: ``id`` and fields the record does not define
    are left alone.

    Raises:
        pydantic.ValidationError: If ``value`` does not fit the field
    """
    record = _find_item(node, item_id)
    if record is None:
        return False
    if field == "id" or field not in type(record).model_fields:
        logger.debug("update_item ignored: %s has no field %r", type(record).__name__, field)
        return False
    setattr(record, field, value)
    return True


def reorder_items(node: ComponentNode, old_index: int, new_index: int) -> bool:
    """Move the record at ``old_index`` to ``new_index``."""
    items = node.items
    if not items:
        return False
    if not (0 <= old_index < len(items) and 0 <= new_index < len(items)):
        logger.debug(
            "reorder_items ignored: %d -> %d outside 0..%d", old_index, new_index, len(items) - 1
        )
        return False
    if old_index == new_index:
        return False
    items[:] = array_move(items, old_index, new_index)
    return True
