"""Core infrastructure: errors and project manifest."""

from .errors import CodegenError, ManifestError, PagewrightError, RenderTargetError
from .manifest import (
    MANIFEST_FILENAME,
    ExportConfig,
    ProjectConfig,
    ProjectManifest,
    load_manifest,
    parse_manifest,
)

__all__ = [
    "PagewrightError",
    "CodegenError",
    "RenderTargetError",
    "ManifestError",
    "MANIFEST_FILENAME",
    "ExportConfig",
    "ProjectConfig",
    "ProjectManifest",
    "load_manifest",
    "parse_manifest",
]
