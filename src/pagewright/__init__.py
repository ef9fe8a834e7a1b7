"""
Pagewright - landing page builder.

Compose a page from a catalog of section components, style each section with
Tailwind utility directives, pick a theme, preview it live and export it as a
standalone HTML document.
"""

from __future__ import annotations

from ._version import __version__
from .catalog import get_template, list_templates
from .codegen import export_source, generate, write_export
from .core.errors import CodegenError, ManifestError, PagewrightError, RenderTargetError
from .core.manifest import ProjectManifest, load_manifest
from .runtime import PageModel, build_node, expand_template, render_preview
from .specs import ComponentNode, ComponentType, GlobalDesignConfig, LayoutConfig, ThemeMode
from .styles import StyleCategory, apply_style, is_style_active
from .themes import list_theme_presets, resolve_theme

__all__ = [
    "__version__",
    # Model
    "PageModel",
    "ComponentNode",
    "ComponentType",
    "LayoutConfig",
    "GlobalDesignConfig",
    "ThemeMode",
    # Catalog
    "build_node",
    "expand_template",
    "get_template",
    "list_templates",
    # Styles
    "StyleCategory",
    "apply_style",
    "is_style_active",
    # Themes
    "list_theme_presets",
    "resolve_theme",
    # Output
    "render_preview",
    "generate",
    "export_source",
    "write_export",
    # Configuration
    "ProjectManifest",
    "load_manifest",
    # Errors
    "PagewrightError",
    "CodegenError",
    "RenderTargetError",
    "ManifestError",
]
