"""
Folio - structured portfolio documents with a configurable custom theme.

Turns a user's profile, experience, projects and education into a rendered
multi-section portfolio page.

Architecture:
- Portfolio Context: Document model, ids, serialization
- Theming Context: Layout variant catalog, theme configuration, style cascade
- Rendering Context: Section resolution, document rendering, HTML output, live preview
- Editing Context: Theme editor, editing session, text enhancement
- Storage Context: Persistent document store
"""

__version__ = "0.1.0"
