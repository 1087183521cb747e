"""
Theming Context

Responsibilities:
- Layout variant catalog (which variants each section kind supports)
- Custom theme configuration model and its defaults
- Font and palette presets
- Style cascade from global tokens to per-section style contexts

Owns: Theme configuration, variant validity, style resolution
Never: Renders sections or mutates portfolios
"""

from folio.contexts.theming.cascade import StyleContext, resolve_root_style, resolve_style
from folio.contexts.theming.catalog import (
    DEFAULT_VARIANTS,
    LAYOUT_CATALOG,
    HeaderStyle,
    SectionKind,
    coerce_header_style,
    coerce_variant,
    default_variant,
    is_valid_variant,
    variants_for,
)
from folio.contexts.theming.theme import SectionConfig, ThemeConfig

__all__ = [
    # Catalog
    "DEFAULT_VARIANTS",
    "LAYOUT_CATALOG",
    "HeaderStyle",
    "SectionKind",
    "coerce_header_style",
    "coerce_variant",
    "default_variant",
    "is_valid_variant",
    "variants_for",
    # Theme model
    "SectionConfig",
    "ThemeConfig",
    # Cascade
    "StyleContext",
    "resolve_root_style",
    "resolve_style",
]
