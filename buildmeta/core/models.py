"""Core data models for buildmeta."""

from __future__ import annotations

from dataclasses import dataclass, field

SEMANTIC_VERSION_INDICATOR = "-d"
VERSION_PLACEHOLDER = "*"

VERSION = "Version"
SEMANTIC_VERSION = "SemanticVersion"


def extract_quoted(data: str) -> str:
    """Return the text between the first and last double quote of a line.

    Interior quotes are kept as-is, so a line holding several quoted
    segments yields everything from the first opening quote to the last
    closing one.
    """
    start = data.find('"') + 1
    end = data.rfind('"')
    if end < start:
        return ""
    return data[start:end]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class AttributeMarkers:
    """Literal marker tokens identifying attribute lines for one language."""

    title: str
    description: str
    company: str
    version: str
    semantic_version: str

    def __post_init__(self) -> None:
        markers = self.values()
        if len(set(markers)) != len(markers):
            raise ValueError(f"Attribute markers must be unique: {markers}")

    def values(self) -> list[str]:
        return [
            self.title,
            self.description,
            self.company,
            self.version,
            self.semantic_version,
        ]


@dataclass
class MetadataRecord:
    """Project metadata obtained from an info file or build artifact."""

    title: str | None = None
    description: str | None = None
    company: str | None = None
    version: str | None = None
    extras: dict[str, str] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        """Whether all four required fields hold a non-blank value."""
        return not any(
            _is_blank(value)
            for value in (self.title, self.description, self.company, self.version)
        )

    def as_dict(self) -> dict[str, str | None]:
        return {
            "Title": self.title,
            "Description": self.description,
            "Company": self.company,
            "Version": self.version,
        }


@dataclass(frozen=True)
class ExtractionState:
    """Accumulator threaded through a line scan of an info file.

    Attributes:
        title: Last title value seen
        description: Last description value seen
        company: Last company value seen
        version: Resolved version value
        first_version_attribute: Kind of the first version line seen,
            either ``"Version"`` or ``"SemanticVersion"``
    """

    title: str | None = None
    description: str | None = None
    company: str | None = None
    version: str | None = None
    first_version_attribute: str | None = None

    def to_record(self) -> MetadataRecord:
        return MetadataRecord(
            title=self.title,
            description=self.description,
            company=self.company,
            version=self.version,
        )


@dataclass
class ExtractionOutcome:
    """Result of an extraction attempt."""

    record: MetadataRecord
    success: bool
    source: str = ""


@dataclass
class VersionLine:
    """One logical line of a version-info file holding a version attribute.

    Attributes:
        text: Logical line text (two physical lines joined for some languages)
        split_at: Offset of the join boundary, None for single physical lines
        is_excluded: Line is a secondary version never exported as Version
        is_semantic: Line carries a semantic version marker
    """

    text: str
    split_at: int | None = None
    is_excluded: bool = False
    is_semantic: bool = False


@dataclass
class VersionResult:
    """Outcome of rewriting a version-info file."""

    contents: str
    version: str | None = None
    is_semantic_version: bool = False
    next_release_version: str | None = None
    next_new_development_version: str | None = None
    lines_changed: int = 0
