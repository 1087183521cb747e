"""
Editing Context

Responsibilities:
- Mutate the custom theme (visibility, layout, colors, fonts, header style, palettes)
- Hold an editing session's working copy and keep its preview in sync
- Apply asynchronous text enhancement results by stable identity
- Save the working copy through the storage context

Owns:
- Clamp policy for out-of-catalog layout and header style choices
- Enhancement prompts

Never:
- Renders sections itself (rendering context does)
- Writes to the database directly (storage context does)
"""

from folio.contexts.editing.editor import (
    apply_named_palette,
    apply_palette,
    set_colors,
    set_global_tokens,
    set_header_style,
    set_layout,
    set_visibility,
)
from folio.contexts.editing.enhancement import EnhancementTarget, TextEnhancer, enhance_field
from folio.contexts.editing.session import EditingSession, SaveResult

__all__ = [
    "set_visibility",
    "set_layout",
    "set_colors",
    "set_global_tokens",
    "set_header_style",
    "apply_palette",
    "apply_named_palette",
    "EnhancementTarget",
    "TextEnhancer",
    "enhance_field",
    "EditingSession",
    "SaveResult",
]
