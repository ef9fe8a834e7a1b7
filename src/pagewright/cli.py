"""
Pagewright CLI.

Commands:
- templates: list page templates
- themes: list theme presets
- components: list component types and their variants
- export: instantiate a template and write the HTML export
"""

import json
import logging
import os
import platform
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from pagewright._version import __version__
from pagewright.catalog import SECTION_TYPES, list_templates, variants_for
from pagewright.codegen import write_export
from pagewright.core.errors import PagewrightError
from pagewright.core.manifest import load_manifest
from pagewright.runtime.page_model import PageModel
from pagewright.specs.layout import ThemeMode
from pagewright.themes import DEFAULT_THEME, get_theme_preset, list_theme_presets

console = Console()

LOG_LEVEL_ENV = "PAGEWRIGHT_LOG_LEVEL"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"Pagewright {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="Pagewright – landing page builder and HTML exporter",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Pagewright CLI main callback for global options."""
    _configure_logging(verbose)


# =============================================================================
# Catalog Commands
# =============================================================================


@app.command()
def templates(
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List the available page templates."""
    entries = list_templates()

    if output_json:
        data = [
            {
                "id": t.id,
                "label": t.label,
                "description": t.description,
                "sections": [str(item.type) for item in t.items],
            }
            for t in entries
        ]
        typer.echo(json.dumps(data, indent=2))
        return

    table = Table(title="Templates")
    table.add_column("ID", style="cyan")
    table.add_column("Label")
    table.add_column("Description")
    table.add_column("Sections", justify="right")

    for template in entries:
        table.add_row(
            template.id, template.label, template.description, str(len(template.items))
        )

    console.print(table)


@app.command()
def themes() -> None:
    """List the theme presets."""
    table = Table(title="Themes")
    table.add_column("Name", style="cyan")
    table.add_column("Label")
    table.add_column("Primary (dark)")

    for name in list_theme_presets():
        preset = get_theme_preset(name)
        if preset is None:
            continue
        shown = f"{name} [dim](default)[/dim]" if name == DEFAULT_THEME else name
        table.add_row(shown, preset.label, preset.dark.get("primary", ""))

    console.print(table)


@app.command()
def components() -> None:
    """List the component types and their variants."""
    table = Table(title="Components")
    table.add_column("Type", style="cyan")
    table.add_column("Label")
    table.add_column("Variants")

    for section in SECTION_TYPES.values():
        variants = variants_for(section.type)
        table.add_row(
            section.type.value,
            section.label,
            ", ".join(v.id for v in variants) if variants else "[dim]none[/dim]",
        )

    console.print(table)


# =============================================================================
# Export
# =============================================================================


@app.command()
def export(
    template_id: Annotated[str, typer.Argument(help="Template to instantiate, e.g. template-saas")],
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Output directory (default: current)")
    ] = Path("."),
    filename: Annotated[
        str | None, typer.Option("--filename", "-f", help="Output file name")
    ] = None,
    theme: Annotated[str | None, typer.Option("--theme", "-t", help="Theme preset")] = None,
    mode: Annotated[ThemeMode | None, typer.Option("--mode", "-m", help="Color mode")] = None,
    project: Annotated[
        Path, typer.Option("--project", "-p", help="Project directory with pagewright.toml")
    ] = Path("."),
) -> None:
    """Instantiate a template and write its HTML export."""
    if theme is not None and theme not in list_theme_presets():
        typer.echo(f"Error: Unknown theme '{theme}'", err=True)
        typer.echo(f"Available themes: {', '.join(list_theme_presets())}", err=True)
        raise typer.Exit(code=1)

    try:
        manifest = load_manifest(project)
        model = PageModel(layout=manifest.layout, design=manifest.design)

        overrides: dict[str, object] = {}
        if theme is not None:
            overrides["theme"] = theme
        if mode is not None:
            overrides["mode"] = mode
        model.update_design(**overrides)

        if not model.instantiate_template(template_id):
            typer.echo(f"Error: Unknown template '{template_id}'", err=True)
            known = ", ".join(t.id for t in list_templates())
            typer.echo(f"Available templates: {known}", err=True)
            raise typer.Exit(code=1)

        path = write_export(
            model,
            output,
            filename=filename or manifest.export.filename,
            title=manifest.project.title,
        )
    except (PagewrightError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✓ Exported {len(model)} sections to {path}")


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    app(args=argv)


if __name__ == "__main__":
    main()
