"""
Style directive handling: category reconciliation and class composition.
"""

from pagewright.styles.composer import (
    content_wrapper_classes,
    merge_directives,
    resolve_node_classes,
    root_wrapper_classes,
)
from pagewright.styles.reconciler import (
    DirectiveSet,
    StyleCategory,
    apply_style,
    category_matcher,
    classify,
    display_value,
    is_style_active,
)

__all__ = [
    "DirectiveSet",
    "StyleCategory",
    "apply_style",
    "category_matcher",
    "classify",
    "display_value",
    "is_style_active",
    "merge_directives",
    "resolve_node_classes",
    "root_wrapper_classes",
    "content_wrapper_classes",
]
