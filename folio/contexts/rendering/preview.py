"""
Live Preview Synchronizer

Keeps a rendered view in step with the portfolio being edited. Every refresh
re-renders the whole document through render_document(); per-section
resolution is memoized so an edit to one section does not rebuild the others.

The memo holds only the entries used by the most recent render, so its size
follows the document, not the edit history.
"""

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from folio.contexts.portfolio.exceptions import FolioError
from folio.contexts.portfolio.model import Portfolio
from folio.contexts.rendering.logger import _log_debug, _log_warning
from folio.contexts.rendering.renderer import (
    DEFAULT_SECTION_ORDER,
    RenderedDocument,
    render_document,
)
from folio.contexts.rendering.resolver import SectionInstruction, resolve_section
from folio.contexts.theming.cascade import StyleContext
from folio.contexts.theming.catalog import SectionKind
from folio.contexts.theming.theme import SectionConfig

PreviewListener = Callable[[RenderedDocument], None]


def _fingerprint(data: Any) -> str:
    """Stable, hashable fingerprint of a section's data slice."""
    if is_dataclass(data):
        payload = asdict(data)
    else:
        payload = [asdict(item) for item in data]
    return json.dumps(payload, sort_keys=True, default=str)


class SectionMemo:
    """
    Memoizing wrapper around resolve_section().

    Keyed on (section kind, section config, data fingerprint, style context).
    Call begin_pass() before each render; entries not used during the pass
    are dropped at the next begin_pass().
    """

    def __init__(self):
        self._entries: Dict[Tuple, Optional[SectionInstruction]] = {}
        self._used: Dict[Tuple, Optional[SectionInstruction]] = {}
        self.hits = 0
        self.misses = 0

    def begin_pass(self) -> None:
        if self._used:
            self._entries = self._used
        self._used = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __call__(
        self,
        kind: SectionKind,
        config: SectionConfig,
        data: Any,
        style: StyleContext,
    ) -> Optional[SectionInstruction]:
        key = (kind, config, _fingerprint(data), style)
        if key in self._entries:
            self.hits += 1
            instruction = self._entries[key]
        else:
            self.misses += 1
            instruction = resolve_section(kind, config, data, style)
        self._entries[key] = instruction
        self._used[key] = instruction
        return instruction


class PreviewSynchronizer:
    """
    Re-renders a portfolio on every change and notifies listeners.

    Refreshing never persists anything. A configuration error (e.g., a fixed
    template selected) is kept on ``error`` and the last good render stays in
    ``current`` so the preview pane can show both.

    Example:
        preview = PreviewSynchronizer()
        preview.subscribe(lambda doc: print(len(doc.sections)))
        preview.refresh(portfolio)
    """

    def __init__(self, section_order: Sequence[Union[str, SectionKind]] = DEFAULT_SECTION_ORDER):
        self.section_order = tuple(section_order)
        self.current: Optional[RenderedDocument] = None
        self.error: Optional[FolioError] = None
        self.render_count = 0
        self._memo = SectionMemo()
        self._listeners: List[PreviewListener] = []

    def subscribe(self, listener: PreviewListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: PreviewListener) -> None:
        self._listeners.remove(listener)

    @property
    def memo(self) -> SectionMemo:
        return self._memo

    def refresh(self, portfolio: Portfolio) -> Optional[RenderedDocument]:
        """
        Re-render the portfolio and replace the displayed output.

        Args:
            portfolio: Current working copy

        Returns:
            The new RenderedDocument, or None if the portfolio cannot be
            rendered with a custom theme (see ``error``)
        """
        self._memo.begin_pass()
        try:
            document = render_document(
                portfolio, section_order=self.section_order, resolve=self._memo
            )
        except FolioError as e:
            self.error = e
            _log_warning(f"Preview not updated: {e}")
            return None

        self.error = None
        self.current = document
        self.render_count += 1
        _log_debug(
            f"Preview refreshed (render {self.render_count}, "
            f"memo hits {self._memo.hits}, misses {self._memo.misses})"
        )
        for listener in list(self._listeners):
            listener(document)
        return document
