"""
HTML Output

Turns a RenderedDocument into an HTML page using Jinja2 templates, one per
section kind plus the page shell. Templates branch on arrangement flags from
the resolver's decision tables, never on layout ids.
"""

import os
from pathlib import Path
from typing import Dict, Iterable

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from folio.contexts.rendering.exceptions import TemplateRenderError
from folio.contexts.rendering.logger import _log_error, _log_info
from folio.contexts.rendering.renderer import RenderedDocument
from folio.contexts.rendering.resolver import SectionInstruction

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("RENDER_TEMPLATES_PATH", str(Path(__file__).parent / "templates"))
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML output.

    Section templates are stored in templates/sections/{kind}.html.jinja and
    the page shell in templates/page.html.jinja.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for templates. Defaults to
                           RENDER_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(enabled_extensions=("html", "jinja"), default=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template path relative to the templates directory,
                  without the .html.jinja suffix (e.g., 'sections/hero')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        template_path = f"{name}.html.jinja"
        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_path / template_path}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        return self.templates_path / f"{name}.html.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache


class HtmlRenderer:
    """Renders RenderedDocument values to HTML."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()

    def _render(self, name: str, **context) -> str:
        template = self.template_registry.get_template(name)
        try:
            return template.render(**context)
        except TemplateError as e:
            _log_error(f"Template '{name}' failed: {e}")
            raise TemplateRenderError(
                f"Failed to render '{name}'",
                template_name=name,
                template_path=self.template_registry.get_template_path(name),
                original_error=e,
            ) from e

    def render_section(self, instruction: SectionInstruction, nav_anchors: Iterable[str] = ()) -> str:
        """
        Render one section to an HTML <section> element.

        Args:
            instruction: Section instruction from the resolver
            nav_anchors: Anchors of rendered sections; in-page links to other
                         sections are only emitted for these

        Returns:
            HTML string
        """
        return self._render(
            f"sections/{instruction.kind.value}",
            section=instruction,
            arrangement=instruction.arrangement,
            content=instruction.content,
            style=instruction.style,
            nav_anchors=tuple(nav_anchors),
        )

    def render_page(self, document: RenderedDocument, title: str = None) -> str:
        """
        Render a complete HTML page.

        Args:
            document: Output of render_document()
            title: Page title (default: header brand)

        Returns:
            HTML document string
        """
        sections_html = [
            self.render_section(instruction, document.nav_anchors)
            for instruction in document.sections
        ]
        _log_info(f"Rendering page for {document.portfolio_id} ({len(sections_html)} sections)")
        return self._render(
            "page",
            document=document,
            header=document.header,
            root=document.root_style,
            navigation=document.navigation,
            sections_html=sections_html,
            title=title or document.header.brand,
        )
