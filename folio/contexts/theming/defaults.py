"""
Default values for the custom theme.

Provides the shared defaults used by:
- theme.py (filling configs missing from older stored payloads)
- portfolio model (attaching a theme to new portfolios)
- editor (named palettes, font choices)

Font choices and palettes live in presets.yaml so they can be changed
without touching code.
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

from folio.contexts.theming.catalog import DEFAULT_HEADER_STYLE, DEFAULT_VARIANTS, SectionKind

load_dotenv()
THEME_PRESETS_PATH = Path(
    os.getenv("THEME_PRESETS_PATH", str(Path(__file__).parent / "presets.yaml"))
)

DEFAULT_FONTS = {
    "heading_font": "Inter",
    "body_font": "Inter",
}

DEFAULT_COLORS = {
    "primary_color": "#4F46E5",
    "accent_color": "#10B981",
}

# Fallbacks for a section with no configuration at all
DEFAULT_BACKGROUND_COLOR = "#ffffff"
DEFAULT_TEXT_COLOR = "#111827"

# Per-section colors (background, text)
DEFAULT_SECTION_COLORS = {
    SectionKind.HERO: ("#ffffff", "#111827"),
    SectionKind.ABOUT: ("#f9fafb", "#374151"),
    SectionKind.EXPERIENCE: ("#ffffff", "#111827"),
    SectionKind.PROJECTS: ("#f9fafb", "#111827"),
    SectionKind.EDUCATION: ("#ffffff", "#111827"),
    SectionKind.CONTACT: ("#111827", "#ffffff"),
}


def get_default_section_config(kind: SectionKind) -> Dict[str, Any]:
    """Default section config for one kind: visible, default colors and variant."""
    background, text = DEFAULT_SECTION_COLORS[kind]
    return {
        "visible": True,
        "background_color": background,
        "text_color": text,
        "layout": DEFAULT_VARIANTS[kind].value,
    }


def get_default_theme() -> Dict[str, Any]:
    """
    Get complete default theme structure with every field populated.

    Returns:
        Dict in ThemeConfig.to_dict() shape
    """
    return {
        **DEFAULT_FONTS,
        **DEFAULT_COLORS,
        "header_style": DEFAULT_HEADER_STYLE.value,
        "sections": {kind.value: get_default_section_config(kind) for kind in SectionKind},
    }


def load_theme_presets(config_path: Path = None) -> Dict[str, Any]:
    """
    Load presets.yaml (fonts and palettes).

    Args:
        config_path: Optional path to presets file (defaults to THEME_PRESETS_PATH)

    Returns:
        Dict with "fonts" (list of names) and "palettes" (key -> {name, primary, accent})
    """
    if config_path is None:
        config_path = THEME_PRESETS_PATH

    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


def font_choices(config_path: Path = None) -> List[str]:
    """Fonts offered by the editor."""
    return list(load_theme_presets(config_path).get("fonts", []))


def get_palette(palette_name: str, config_path: Path = None) -> Dict[str, str]:
    """
    Look up a named palette.

    Args:
        palette_name: Palette key, case-insensitive (e.g., "ocean")
        config_path: Optional path to presets file

    Returns:
        Dict with "name", "primary" and "accent"

    Raises:
        ValueError: If palette not found
    """
    palettes = load_theme_presets(config_path).get("palettes", {})
    key = palette_name.lower()
    if key not in palettes:
        raise ValueError(
            f"Palette '{palette_name}' not found. Available palettes: {list(palettes.keys())}"
        )
    return palettes[key]
