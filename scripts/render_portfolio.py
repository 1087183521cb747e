#!/usr/bin/env python3
"""
Render and Edit Portfolios

Renders custom-theme portfolios from YAML to a standalone HTML page, edits
their theme, and saves them to the portfolio store.

Examples:
    # Create a new custom portfolio YAML
    python scripts/render_portfolio.py new my_portfolio.yaml --name "Jane Doe"

    # List layout variants, palettes and fonts
    python scripts/render_portfolio.py layouts
    python scripts/render_portfolio.py palettes
    python scripts/render_portfolio.py fonts

    # Change a section layout and apply a palette
    python scripts/render_portfolio.py set-layout my_portfolio.yaml experience split
    python scripts/render_portfolio.py apply-palette my_portfolio.yaml ocean

    # Render to HTML
    python scripts/render_portfolio.py render my_portfolio.yaml -o outs/jane.html

    # Save to the store and list an owner's portfolios
    python scripts/render_portfolio.py save my_portfolio.yaml --owner u123
    python scripts/render_portfolio.py list --owner u123
"""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.editing import EditingSession
from folio.contexts.editing.logger import setup_editing_logger
from folio.contexts.portfolio import (
    ConfigurationError,
    FolioError,
    StoreError,
    TemplateId,
    new_portfolio,
)
from folio.contexts.rendering import DEFAULT_SECTION_ORDER, HtmlRenderer, render_document
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.contexts.storage import Owner, PortfolioStore, load_portfolio_yaml, save_portfolio_yaml
from folio.contexts.theming import LAYOUT_CATALOG, DEFAULT_VARIANTS
from folio.contexts.theming.defaults import font_choices, load_theme_presets
from folio.utils.timestamp import format_timestamp

load_dotenv()
LOGS_PATH = Path(os.getenv("FOLIO_LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Render and edit custom-theme portfolios",
    add_completion=False,
)


def _fail(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _load(path: Path):
    try:
        return load_portfolio_yaml(path)
    except (FileNotFoundError, ConfigurationError) as e:
        _fail(str(e))


@app.command("render")
def render_command(
    yaml_path: Annotated[Path, typer.Argument(help="Portfolio YAML file")],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output HTML path (defaults to <yaml stem>.html)"),
    ] = None,
    sections: Annotated[
        Optional[List[str]],
        typer.Option("--section", "-s", help="Section kinds in page order (repeatable)"),
    ] = None,
    log_dir: Annotated[
        Path,
        typer.Option("--log-dir", help="Directory for the render log"),
    ] = None,
):
    """
    Render a custom-theme portfolio to HTML.

    Examples:\n
        $ render_portfolio.py render my_portfolio.yaml

        $ render_portfolio.py render my_portfolio.yaml -s hero -s about -s contact
    """
    portfolio = _load(yaml_path)

    if log_dir is None:
        log_dir = LOGS_PATH / f"render_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    setup_rendering_logger(log_dir, template_id=portfolio.template_id)

    try:
        document = render_document(portfolio, section_order=sections or DEFAULT_SECTION_ORDER)
    except (FolioError, ValueError) as e:
        _fail(f"Error: {e}")

    html = HtmlRenderer().render_page(document, title=portfolio.name)

    if output is None:
        output = yaml_path.with_suffix(".html")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")

    typer.secho(f"Rendered {len(document.sections)} sections: {output}", fg=typer.colors.GREEN)


@app.command("layouts")
def layouts_command():
    """List layout variants per section kind (default marked with *)."""
    for kind, variants in LAYOUT_CATALOG.items():
        typer.secho(kind.value, bold=True)
        for variant in variants:
            marker = "*" if variant == DEFAULT_VARIANTS[kind] else " "
            typer.echo(f" {marker} {variant.value}")


@app.command("palettes")
def palettes_command():
    """List preset color palettes."""
    for key, palette in load_theme_presets()["palettes"].items():
        typer.echo(f"{key:<10} {palette['name']:<10} {palette['primary']}  {palette['accent']}")


@app.command("fonts")
def fonts_command():
    """List preset fonts."""
    for font in font_choices():
        typer.echo(font)


@app.command("new")
def new_command(
    yaml_path: Annotated[Path, typer.Argument(help="Where to write the new portfolio YAML")],
    name: Annotated[str, typer.Option("--name", "-n", help="Portfolio display name")] = "New Portfolio",
    email: Annotated[str, typer.Option("--email", help="Owner email")] = "",
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Template id"),
    ] = TemplateId.CUSTOM.value,
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing file")] = False,
):
    """Create a new portfolio with the default theme."""
    if yaml_path.exists() and not force:
        _fail(f"{yaml_path} already exists (use --force to overwrite)")

    try:
        portfolio = new_portfolio(name=name, template_id=template, email=email)
    except ConfigurationError as e:
        _fail(str(e))

    save_portfolio_yaml(portfolio, yaml_path)
    typer.secho(f"Created {yaml_path}", fg=typer.colors.GREEN)


@app.command("set-layout")
def set_layout_command(
    yaml_path: Annotated[Path, typer.Argument(help="Portfolio YAML file")],
    kind: Annotated[str, typer.Argument(help="Section kind (e.g., 'experience')")],
    variant: Annotated[str, typer.Argument(help="Layout variant (e.g., 'split')")],
):
    """
    Set a section's layout variant. Unknown variants fall back to the default.

    Examples:\n
        $ render_portfolio.py set-layout my_portfolio.yaml projects minimal
    """
    session = EditingSession(_load(yaml_path))
    try:
        theme = session.set_layout(kind, variant)
    except ValueError as e:
        _fail(str(e))

    save_portfolio_yaml(session.portfolio, yaml_path)
    typer.echo(f"{kind}: {theme.section(kind).layout}")


@app.command("apply-palette")
def apply_palette_command(
    yaml_path: Annotated[Path, typer.Argument(help="Portfolio YAML file")],
    palette: Annotated[str, typer.Argument(help="Palette name (e.g., 'ocean')")],
):
    """Apply a preset palette's primary and accent colors."""
    session = EditingSession(_load(yaml_path))
    try:
        theme = session.apply_named_palette(palette)
    except ValueError as e:
        _fail(str(e))

    save_portfolio_yaml(session.portfolio, yaml_path)
    typer.echo(f"primary={theme.primary_color} accent={theme.accent_color}")


@app.command("save")
def save_command(
    yaml_path: Annotated[Path, typer.Argument(help="Portfolio YAML file")],
    owner_id: Annotated[str, typer.Option("--owner", help="Owner id")],
    db_path: Annotated[Path, typer.Option("--db", help="Store path (default: FOLIO_DB_PATH)")] = None,
):
    """Save a portfolio YAML to the store (create or update)."""
    session = EditingSession(_load(yaml_path))
    setup_editing_logger(
        LOGS_PATH / f"save_{datetime.now().strftime('%Y%m%d_%H%M%S')}", session.portfolio.name
    )
    try:
        store = PortfolioStore(db_path)
    except StoreError as e:
        _fail(str(e))

    with store:
        result = session.save(store, Owner.from_identity(owner_id))

    if not result.success:
        _fail(f"Save failed: {result.error}")
    typer.secho(f"{result.action}: {result.portfolio.id}", fg=typer.colors.GREEN)


@app.command("list")
def list_command(
    owner_id: Annotated[str, typer.Option("--owner", help="Owner id")],
    db_path: Annotated[Path, typer.Option("--db", help="Store path (default: FOLIO_DB_PATH)")] = None,
):
    """List an owner's portfolios, most recently updated first."""
    with PortfolioStore(db_path) as store:
        portfolios = store.list(owner_id)

    if not portfolios:
        typer.echo("No portfolios")
        return
    for portfolio in portfolios:
        edited = format_timestamp(portfolio.last_modified, relative=True)
        typer.echo(f"{portfolio.id}  {portfolio.template_id:<8} {portfolio.name}  ({edited})")


if __name__ == "__main__":
    app()
