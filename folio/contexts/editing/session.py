"""
Editing Session

Holds the working copy of one portfolio while it is edited. Every mutation
updates the working copy and then refreshes the attached preview, so the
preview always reflects the latest change. Nothing is persisted until save().

Example:
    session = EditingSession(portfolio, preview=PreviewSynchronizer())
    session.update_profile(full_name="Jane Doe", title="Engineer")
    session.set_layout("experience", "split")
    result = session.save(store, owner)
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable, Optional

from folio.contexts.editing import editor
from folio.contexts.editing.enhancement import EnhancementTarget
from folio.contexts.editing.logger import _log_debug, _log_info, log_save_result
from folio.contexts.portfolio.exceptions import ConfigurationError, StoreError
from folio.contexts.portfolio.model import (
    ENTRY_TYPES,
    Entry,
    IdGenerator,
    Portfolio,
    Profile,
    TemplateId,
    new_id,
)
from folio.contexts.rendering.preview import PreviewSynchronizer
from folio.contexts.theming.theme import ThemeConfig
from folio.utils.timestamp import now_ms

# Collections that show new entries first
PREPEND_COLLECTIONS = ("experience",)


@dataclass
class SaveResult:
    """
    Outcome of EditingSession.save().

    Attributes:
        success: Whether the store accepted the document
        action: "create" or "update"
        portfolio: Document as saved (or as it would have been saved)
        error: Store error message on failure
    """

    success: bool
    action: str
    portfolio: Portfolio
    error: Optional[str] = None


class EditingSession:
    """
    Working copy of a portfolio plus its live preview.

    The session never modifies the Portfolio it was created from.

    Attributes:
        portfolio: Working copy being edited
        preview: Preview refreshed after every mutation (optional)
    """

    def __init__(
        self,
        portfolio: Portfolio,
        preview: Optional[PreviewSynchronizer] = None,
        ids: Optional[IdGenerator] = None,
    ):
        self.portfolio = portfolio.copy()
        self.preview = preview
        self._next_id = ids.next_id if ids is not None else new_id
        self._refresh()

    def _refresh(self) -> None:
        if self.preview is not None:
            self.preview.refresh(self.portfolio)

    # Profile

    def update_profile(self, **changes: Any) -> Profile:
        """
        Set profile fields (e.g., full_name="Jane", summary="...").

        Raises:
            ValueError: If a field name is not a Profile field
        """
        known = {f.name for f in fields(Profile)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ValueError(f"Unknown profile fields: {unknown}")
        for name, value in changes.items():
            setattr(self.portfolio.profile, name, value)
        self._refresh()
        return self.portfolio.profile

    def set_avatar(self, image_data: str) -> None:
        """Set the profile picture (data URL or image link)."""
        self.portfolio.profile.profile_picture = image_data
        self._refresh()

    def remove_avatar(self) -> None:
        self.portfolio.profile.profile_picture = None
        self._refresh()

    def add_skill(self, skill: str) -> bool:
        """
        Add a skill. Blank and duplicate skills are ignored.

        Returns:
            True if the skill was added
        """
        skill = (skill or "").strip()
        if not skill or skill in self.portfolio.profile.skills:
            return False
        self.portfolio.profile.skills.append(skill)
        self._refresh()
        return True

    def remove_skill(self, skill: str) -> bool:
        if skill not in self.portfolio.profile.skills:
            return False
        self.portfolio.profile.skills.remove(skill)
        self._refresh()
        return True

    # Entries

    def add_entry(self, collection: str, **values: Any) -> Entry:
        """
        Create an entry with a fresh id in a collection.

        Experience entries are inserted first; other collections append.

        Args:
            collection: One of "experience", "projects", "education",
                        "certifications", "languages"
            **values: Initial field values

        Returns:
            The new entry

        Raises:
            ValueError: If collection or a field name is unknown
        """
        entries = self.portfolio.entries(collection)
        entry_type = ENTRY_TYPES[collection]
        self._check_fields(entry_type, values)

        entry = entry_type(id=self._next_id(), **values)
        if collection in PREPEND_COLLECTIONS:
            entries.insert(0, entry)
        else:
            entries.append(entry)
        _log_debug(f"Added {collection} entry {entry.id}")
        self._refresh()
        return entry

    def update_entry(self, collection: str, entry_id: str, **changes: Any) -> bool:
        """
        Set fields on an existing entry. The entry's id cannot be changed.

        Returns:
            True if the entry exists and was updated, False if it is gone

        Raises:
            ValueError: If collection or a field name is unknown
        """
        self._check_fields(ENTRY_TYPES.get(collection), changes, collection)
        entry = self.portfolio.find_entry(collection, entry_id)
        if entry is None:
            return False
        for name, value in changes.items():
            setattr(entry, name, value)
        self._refresh()
        return True

    def remove_entry(self, collection: str, entry_id: str) -> bool:
        """Remove an entry; remaining entries keep their ids and order."""
        entries = self.portfolio.entries(collection)
        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                del entries[index]
                _log_debug(f"Removed {collection} entry {entry_id}")
                self._refresh()
                return True
        return False

    @staticmethod
    def _check_fields(entry_type, values: dict, collection: str = None) -> None:
        if entry_type is None:
            raise ValueError(
                f"Unknown collection '{collection}'. Valid collections: {list(ENTRY_TYPES)}"
            )
        known = {f.name for f in fields(entry_type)} - {"id"}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown {entry_type.__name__} fields: {unknown}")

    # Document

    def rename(self, name: str) -> None:
        name = (name or "").strip()
        if not name:
            raise ValueError("Portfolio name cannot be blank")
        self.portfolio.name = name
        self._refresh()

    def set_template(self, template_id: str) -> None:
        """
        Switch template.

        Switching to "custom" attaches the default theme if the portfolio has
        none; switching away keeps the theme for later.

        Raises:
            ConfigurationError: If template_id is unknown
        """
        try:
            template = TemplateId(template_id)
        except ValueError:
            valid = [t.value for t in TemplateId]
            raise ConfigurationError(
                f"Unknown template '{template_id}'. Valid templates: {valid}"
            ) from None

        if template == TemplateId.CUSTOM and self.portfolio.custom_theme is None:
            self.portfolio.custom_theme = ThemeConfig.default()
        self.portfolio.template_id = template.value
        _log_info(f"Template set to {template.value}")
        self._refresh()

    # Theme

    @property
    def theme(self) -> ThemeConfig:
        """Current theme, or the default theme if none is attached yet."""
        return self.portfolio.custom_theme or ThemeConfig.default()

    def _edit_theme(self, edit: Callable[..., ThemeConfig], *args, **kwargs) -> ThemeConfig:
        # edit() raises before anything is assigned, so a refused edit leaves the theme as it was
        theme = edit(self.theme, *args, **kwargs)
        self.portfolio.custom_theme = theme
        self._refresh()
        return theme

    def set_visibility(self, kind, visible: bool) -> ThemeConfig:
        return self._edit_theme(editor.set_visibility, kind, visible)

    def set_layout(self, kind, variant: str) -> ThemeConfig:
        return self._edit_theme(editor.set_layout, kind, variant)

    def set_colors(self, kind, background: Optional[str] = None, text: Optional[str] = None) -> ThemeConfig:
        return self._edit_theme(editor.set_colors, kind, background=background, text=text)

    def set_global_tokens(self, **tokens: Optional[str]) -> ThemeConfig:
        return self._edit_theme(editor.set_global_tokens, **tokens)

    def set_header_style(self, style: str) -> ThemeConfig:
        return self._edit_theme(editor.set_header_style, style)

    def apply_palette(self, primary: str, accent: str) -> ThemeConfig:
        return self._edit_theme(editor.apply_palette, primary, accent)

    def apply_named_palette(self, palette_name: str, config_path: Path = None) -> ThemeConfig:
        return self._edit_theme(editor.apply_named_palette, palette_name, config_path)

    # Enhancement

    def read_target(self, target: EnhancementTarget) -> Optional[str]:
        """Current text of an enhancement target, or None if the entry is gone."""
        if target.entry_id is None:
            return getattr(self.portfolio.profile, target.field)
        entry = self.portfolio.find_entry("experience", target.entry_id)
        if entry is None:
            return None
        return getattr(entry, target.field)

    def apply_enhancement(self, target: EnhancementTarget, text: str) -> bool:
        """
        Write an enhancement result back by identity.

        Returns:
            True if applied, False if the target entry was deleted meanwhile
        """
        if target.entry_id is None:
            setattr(self.portfolio.profile, target.field, text)
        else:
            entry = self.portfolio.find_entry("experience", target.entry_id)
            if entry is None:
                _log_debug(f"Dropped enhancement for removed entry {target.entry_id}")
                return False
            setattr(entry, target.field, text)
        self._refresh()
        return True

    # Persistence

    def save(self, store, owner) -> SaveResult:
        """
        Persist the working copy.

        Creates the document on first save and updates it afterwards. On a
        store failure the working copy is left exactly as it was.

        Args:
            store: PortfolioStore
            owner: Owner the document belongs to

        Returns:
            SaveResult
        """
        to_save = self.portfolio.copy()
        to_save.last_modified = now_ms()

        action = "create"
        try:
            if store.exists(to_save.id):
                action = "update"
                store.update(owner.owner_id, to_save)
            else:
                store.create(owner.owner_id, to_save)
        except StoreError as e:
            result = SaveResult(success=False, action=action, portfolio=to_save, error=str(e))
            log_save_result(self.portfolio.name, result)
            return result

        self.portfolio.last_modified = to_save.last_modified
        result = SaveResult(success=True, action=action, portfolio=to_save)
        log_save_result(self.portfolio.name, result)
        return result
