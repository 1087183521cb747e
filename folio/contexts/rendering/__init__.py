"""
Rendering Context

Responsibilities:
- Resolves each section into a render instruction (visibility, variant, arrangement, content)
- Renders a custom-template portfolio in section order with its navigation index
- Outputs HTML pages from rendered documents
- Keeps a live preview in step with the portfolio being edited

Owns: Section decision tables, rendered document structure, HTML templates
Never: Mutates portfolios or themes, persists anything
"""

from folio.contexts.rendering.html import HtmlRenderer, TemplateRegistry
from folio.contexts.rendering.preview import PreviewSynchronizer, SectionMemo
from folio.contexts.rendering.renderer import (
    DEFAULT_SECTION_ORDER,
    NavEntry,
    PageHeader,
    RenderedDocument,
    render_document,
)
from folio.contexts.rendering.resolver import (
    DECISION_TABLES,
    SectionInstruction,
    resolve_section,
    section_data,
)

__all__ = [
    # Section resolution
    "DECISION_TABLES",
    "SectionInstruction",
    "resolve_section",
    "section_data",
    # Document rendering
    "DEFAULT_SECTION_ORDER",
    "NavEntry",
    "PageHeader",
    "RenderedDocument",
    "render_document",
    # HTML output
    "HtmlRenderer",
    "TemplateRegistry",
    # Live preview
    "PreviewSynchronizer",
    "SectionMemo",
]
