"""
Export boundary.

``export_source`` turns the current page model into the exported document;
``write_export`` is the download step that puts it on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pagewright.core.errors import CodegenError
from pagewright.runtime.page_model import PageModel

from .generator import DEFAULT_TITLE, generate

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "LandingPage.html"


def export_source(model: PageModel, title: str = DEFAULT_TITLE) -> str:
    """Generate the export for the model's current state."""
    return generate(model.components, model.layout, model.design, title=title)


def write_export(
    model: PageModel,
    directory: Path,
    filename: str = DEFAULT_EXPORT_FILENAME,
    title: str = DEFAULT_TITLE,
) -> Path:
    """
    Write the export into ``directory``.

    Returns:
        Path of the written file

    Raises:
        RenderTargetError: If a node cannot be rendered
        CodegenError: If the file cannot be written
    """
    source = export_source(model, title=title)
    output_path = Path(directory) / filename
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(source, encoding="utf-8")
    except OSError as e:
        raise CodegenError(f"Cannot write {output_path}: {e}") from e

    logger.info("Exported %d sections to %s", len(model.components), output_path)
    return output_path
