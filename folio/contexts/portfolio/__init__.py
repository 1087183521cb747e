"""
Portfolio Context

Responsibilities:
- Portfolio document model (profile, entry collections, template selection, theme)
- Stable entry id generation
- Lossless dict serialization
- Construction-time validation (custom template requires a theme)

Owns: Document data and its invariants
Never: Renders, persists, or decides layouts
"""

from folio.contexts.portfolio.exceptions import (
    ConfigurationError,
    FolioError,
    StoreError,
    UnsupportedTemplateError,
)
from folio.contexts.portfolio.model import (
    ENTRY_TYPES,
    Certification,
    Education,
    Entry,
    Experience,
    IdGenerator,
    Language,
    Portfolio,
    Profile,
    Project,
    TemplateId,
    new_id,
    new_portfolio,
)

__all__ = [
    # Exceptions
    "ConfigurationError",
    "FolioError",
    "StoreError",
    "UnsupportedTemplateError",
    # Model
    "ENTRY_TYPES",
    "Certification",
    "Education",
    "Entry",
    "Experience",
    "IdGenerator",
    "Language",
    "Portfolio",
    "Profile",
    "Project",
    "TemplateId",
    "new_id",
    "new_portfolio",
]
