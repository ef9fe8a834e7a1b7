"""
Project manifest (pagewright.toml).

The manifest is optional. It sets the project name, the starting layout and
design configuration for new pages, and the export filename.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pagewright.specs.layout import GlobalDesignConfig, LayoutConfig

from .errors import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "pagewright.toml"


class ProjectConfig(BaseModel):
    """[project] table."""

    name: str = "landing-page"
    title: str = "Landing Page"

    model_config = ConfigDict(extra="forbid", frozen=True)


class ExportConfig(BaseModel):
    """[export] table."""

    filename: str = "LandingPage.html"

    model_config = ConfigDict(extra="forbid", frozen=True)


class ProjectManifest(BaseModel):
    """
    Project manifest loaded from pagewright.toml.

    Example:
        [project]
        name = "acme-landing"

        [design]
        theme = "blue"
        mode = "light"
    """

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    design: GlobalDesignConfig = Field(default_factory=GlobalDesignConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    model_config = ConfigDict(extra="forbid")


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


def parse_manifest(data: dict[str, Any], source: str = MANIFEST_FILENAME) -> ProjectManifest:
    """Validate already-decoded manifest data."""
    try:
        return ProjectManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid {source}: {_format_validation_error(e)}") from e


def load_manifest(project_dir: Path) -> ProjectManifest:
    """
    Load ``pagewright.toml`` from a project directory.

    Returns:
        The parsed manifest, or the defaults when the file does not exist

    Raises:
        ManifestError: If the file cannot be read, is not valid TOML, or
            contains unknown keys or invalid values
    """
    path = Path(project_dir) / MANIFEST_FILENAME
    if not path.exists():
        logger.debug("No %s in %s, using defaults", MANIFEST_FILENAME, project_dir)
        return ProjectManifest()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    return parse_manifest(data, source=str(path))
