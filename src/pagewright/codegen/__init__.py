"""
Pagewright code generation.

Serializes a page model into a standalone HTML document.
"""

from .export import DEFAULT_EXPORT_FILENAME, export_source, write_export
from .generator import DEFAULT_TITLE, ROOT_SELECTOR_CLASS, generate

__all__ = [
    "DEFAULT_EXPORT_FILENAME",
    "DEFAULT_TITLE",
    "ROOT_SELECTOR_CLASS",
    "export_source",
    "generate",
    "write_export",
]
