"""
Portfolio Document Model

Defines the data a portfolio is built from: the profile, the ordered entry
collections (experience, projects, education, certifications, languages), the
template selection and the optional custom theme.

The model is plain data. The editing context mutates it field by field; the
rendering context only reads it.

Entry ids are assigned when an entry is created and are never reused or
reassigned, so asynchronous results (e.g., an enhanced description) can be
applied by id after the list has changed.
"""

import copy
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from folio.contexts.portfolio.exceptions import ConfigurationError
from folio.contexts.theming.theme import ThemeConfig
from folio.utils.timestamp import now_ms


class TemplateId(str, Enum):
    MODERN = "modern"
    CLASSIC = "classic"
    CREATIVE = "creative"
    ATS = "ats"
    MINIMAL = "minimal"
    TECH = "tech"
    BOLD = "bold"
    CLEAN = "clean"
    CUSTOM = "custom"


class IdGenerator:
    """
    Issues entry ids as millisecond timestamps.

    Ids from one generator are strictly increasing even when several are
    requested within the same millisecond.
    """

    def __init__(self):
        self._last = 0

    def next_id(self) -> str:
        stamp = max(now_ms(), self._last + 1)
        self._last = stamp
        return str(stamp)


_ids = IdGenerator()


def new_id() -> str:
    """Next id from the process-wide generator."""
    return _ids.next_id()


E = TypeVar("E", bound="Entry")


@dataclass
class Entry:
    """Base for records in an entry collection. ``id`` is stable for the record's life."""

    id: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls: Type[E], data: Dict[str, Any]) -> E:
        # Ignore keys this version doesn't know about
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        if "id" in values:
            values["id"] = str(values["id"])
        return cls(**values)


@dataclass
class Experience(Entry):
    company: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


@dataclass
class Project(Entry):
    title: str = ""
    description: str = ""
    link: Optional[str] = None
    technologies: List[str] = field(default_factory=list)


@dataclass
class Education(Entry):
    institution: str = ""
    degree: str = ""
    year: str = ""


@dataclass
class Certification(Entry):
    name: str = ""
    issuer: str = ""
    date: str = ""
    link: Optional[str] = None


@dataclass
class Language(Entry):
    language: str = ""
    proficiency: str = ""


# Collection attribute name -> record type
ENTRY_TYPES: Dict[str, Type[Entry]] = {
    "experience": Experience,
    "projects": Project,
    "education": Education,
    "certifications": Certification,
    "languages": Language,
}


@dataclass
class Profile:
    full_name: str = ""
    title: str = ""
    email: str = ""
    phone: Optional[str] = None
    location: Optional[str] = None
    summary: str = ""
    linkedin: Optional[str] = None
    github: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    profile_picture: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in (data or {}).items() if key in known})


@dataclass
class Portfolio:
    """
    A complete portfolio document.

    A portfolio using the custom template must carry a ThemeConfig; construction
    raises ConfigurationError otherwise. Other templates ignore the theme but may
    still carry one so that switching to custom keeps earlier choices.

    Attributes:
        id: Document id
        name: Display name on the dashboard
        last_modified: Epoch milliseconds of the last save
        template_id: One of TemplateId values
        profile: Identity, contact details, summary and skills
        experience: Ordered experience entries (display order)
        projects: Ordered project entries
        education: Ordered education entries
        certifications: Ordered certification entries
        languages: Ordered language entries
        custom_theme: Theme configuration, required for the custom template
    """

    id: str
    name: str
    template_id: str = TemplateId.MODERN.value
    profile: Profile = field(default_factory=Profile)
    experience: List[Experience] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)
    custom_theme: Optional[ThemeConfig] = None
    last_modified: int = field(default_factory=now_ms)

    def __post_init__(self):
        try:
            self.template_id = TemplateId(self.template_id).value
        except ValueError:
            valid = [t.value for t in TemplateId]
            raise ConfigurationError(
                f"Unknown template '{self.template_id}'. Valid templates: {valid}"
            ) from None
        self.validate()

    @property
    def is_custom(self) -> bool:
        return self.template_id == TemplateId.CUSTOM.value

    def validate(self) -> None:
        """
        Check construction-time invariants.

        Raises:
            ConfigurationError: If the custom template has no theme configuration
        """
        if self.is_custom and self.custom_theme is None:
            raise ConfigurationError(
                f"Portfolio '{self.id}' uses the custom template but has no theme configuration"
            )

    def entries(self, collection: str) -> List[Entry]:
        """
        Get an entry collection by name.

        Raises:
            ValueError: If collection is not one of ENTRY_TYPES
        """
        if collection not in ENTRY_TYPES:
            raise ValueError(
                f"Unknown collection '{collection}'. Valid collections: {list(ENTRY_TYPES)}"
            )
        return getattr(self, collection)

    def find_entry(self, collection: str, entry_id: str) -> Optional[Entry]:
        """Find an entry by id, or None if it no longer exists."""
        for entry in self.entries(collection):
            if entry.id == entry_id:
                return entry
        return None

    def copy(self) -> "Portfolio":
        """Deep copy, used as an editing session's working copy."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "last_modified": self.last_modified,
            "template_id": self.template_id,
            "profile": self.profile.to_dict(),
            **{
                collection: [entry.to_dict() for entry in getattr(self, collection)]
                for collection in ENTRY_TYPES
            },
            "custom_theme": self.custom_theme.to_dict() if self.custom_theme else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Portfolio":
        """
        Build a portfolio from its stored dict form.

        Raises:
            ConfigurationError: If the stored document uses the custom template
                without a theme, or names an unknown template
        """
        theme_data = data.get("custom_theme")
        stamp = data.get("last_modified")
        collections = {
            collection: [entry_type.from_dict(item) for item in data.get(collection) or []]
            for collection, entry_type in ENTRY_TYPES.items()
        }
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            last_modified=int(stamp) if stamp is not None else now_ms(),
            template_id=data.get("template_id", TemplateId.MODERN.value),
            profile=Profile.from_dict(data.get("profile") or {}),
            custom_theme=ThemeConfig.from_dict(theme_data) if theme_data is not None else None,
            **collections,
        )


def new_portfolio(
    name: str = "New Portfolio",
    template_id: str = TemplateId.MODERN.value,
    email: str = "",
    ids: IdGenerator = None,
) -> Portfolio:
    """
    Create a portfolio from a template with the full default theme.

    Every collection starts with one empty entry so the editor shows a blank
    form for each.

    Args:
        name: Display name
        template_id: Template selection (default: "modern")
        email: Owner email to prefill the profile with
        ids: Id generator (default: process-wide generator)

    Returns:
        New Portfolio, not yet persisted
    """
    next_id = ids.next_id if ids is not None else new_id
    return Portfolio(
        id=next_id(),
        name=name,
        template_id=template_id,
        profile=Profile(full_name="Your Name", title="Your Job Title", email=email),
        experience=[Experience(id=next_id())],
        projects=[Project(id=next_id())],
        education=[Education(id=next_id())],
        certifications=[Certification(id=next_id())],
        languages=[Language(id=next_id())],
        custom_theme=ThemeConfig.default(),
    )
