"""
Error types for Pagewright page building and export.
"""

from __future__ import annotations


class PagewrightError(Exception):
    """Base exception for all Pagewright errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CodegenError(PagewrightError):
    """
    Raised when the page cannot be turned into exported source.

    Examples:
    - Section template fails to render
    - Export target directory cannot be written
    """

    pass


class RenderTargetError(CodegenError):
    """
    Raised when a component cannot be resolved to a section template.

    Examples:
    - Unknown component type
    - Variant not registered for the component type
    - Missing section template in the catalog
    """

    def __init__(self, component_type: str, variant: str | None, reason: str):
        self.component_type = component_type
        self.variant = variant
        label = f"{component_type}/{variant}" if variant else component_type
        super().__init__(f"Cannot render '{label}': {reason}")


class ManifestError(PagewrightError):
    """
    Raised when pagewright.toml cannot be loaded.

    Examples:
    - Invalid TOML syntax
    - Unknown keys in [layout] or [design]
    - Values outside the allowed range
    """

    pass
