"""Per-language attribute markers, version rules and the language dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from buildmeta.core.errors import UnsupportedLanguageError
from buildmeta.core.line_filter import LineFilter
from buildmeta.core.models import AttributeMarkers

TEXT_EXTRACTOR = "text"
ARTIFACT_EXTRACTOR = "artifact"

COBOL_ATTRIBUTE_GATE = "CUSTOM-ATTRIBUTE"


@dataclass(frozen=True)
class VersionProfile:
    """Rules the version rewriter applies to one language's version-info file.

    Attributes:
        version_markers: Markers of every version-bearing line
        semantic_markers: Markers of lines declaring a semantic version
        excluded_markers: Markers of secondary versions never exported
        line_filter: Eligibility rule applied before marker matching
        join_next_line: Declarations span two physical lines
    """

    version_markers: tuple[str, ...]
    semantic_markers: tuple[str, ...]
    excluded_markers: tuple[str, ...] = ()
    line_filter: LineFilter = LineFilter()
    join_next_line: bool = False

    def accepts(self, line: str) -> bool:
        return self.line_filter.accepts(line) and any(
            marker in line for marker in self.version_markers
        )


@dataclass(frozen=True)
class LanguageProfile:
    """Everything needed to read and version one language's info file."""

    language: str
    extractor: str
    info_path: str
    version_info_path: str
    markers: AttributeMarkers
    info_filter: LineFilter
    version: VersionProfile
    join_next_line: bool = False
    description: str = ""


ASSEMBLY_MARKERS = AttributeMarkers(
    title="AssemblyTitle",
    description="AssemblyDescription",
    company="AssemblyCompany",
    version="AssemblyVersion",
    semantic_version="AssemblyInformationalVersion",
)

COBOL_MARKERS = AttributeMarkers(
    title="CA-ASSEMBLYTITLE",
    description="CA-ASSEMBLYDESCRIPTION",
    company="CA-ASSEMBLYCOMPANY",
    version="CA-ASSEMBLYVERSION",
    semantic_version="CA-ASSEMBLYINFORMATIONALVERSION",
)

DB_MARKERS = AttributeMarkers(
    title="DbTitle",
    description="DbDescription",
    company="DbCompany",
    version="DbVersion",
    semantic_version="DbInformationalVersion",
)

ETL_MARKERS = AttributeMarkers(
    title="EtlTitle",
    description="EtlDescription",
    company="EtlCompany",
    version="EtlVersion",
    semantic_version="EtlInformationalVersion",
)

SCRIPT_COMMENTS = ("//", "--")


def _assembly_version(comment: str) -> VersionProfile:
    return VersionProfile(
        version_markers=(
            "AssemblyVersion",
            "AssemblyFileVersion",
            "AssemblyInformationalVersion",
        ),
        semantic_markers=("AssemblyInformationalVersion",),
        excluded_markers=("AssemblyFileVersion",),
        line_filter=LineFilter(exclude=(comment,)),
    )


def _script_version(markers: AttributeMarkers) -> VersionProfile:
    return VersionProfile(
        version_markers=(markers.version, markers.semantic_version),
        semantic_markers=(markers.semantic_version,),
        line_filter=LineFilter(exclude=SCRIPT_COMMENTS),
    )


LANGUAGE_PROFILES: dict[str, LanguageProfile] = {
    "CS": LanguageProfile(
        language="CS",
        extractor=ARTIFACT_EXTRACTOR,
        info_path="Properties/AssemblyInfo.cs",
        version_info_path="Properties/AssemblyInfo.cs",
        markers=ASSEMBLY_MARKERS,
        info_filter=LineFilter(exclude=("//",)),
        version=_assembly_version("//"),
        description="C# assembly",
    ),
    "VB": LanguageProfile(
        language="VB",
        extractor=ARTIFACT_EXTRACTOR,
        info_path="My Project/AssemblyInfo.vb",
        version_info_path="My Project/AssemblyInfo.vb",
        markers=ASSEMBLY_MARKERS,
        info_filter=LineFilter(exclude=("'",)),
        version=_assembly_version("'"),
        description="VB assembly",
    ),
    "COBOL": LanguageProfile(
        language="COBOL",
        extractor=TEXT_EXTRACTOR,
        info_path="Properties/AssemblyInfo.cob",
        version_info_path="Properties/AssemblyInfo.cob",
        markers=COBOL_MARKERS,
        info_filter=LineFilter(
            include=tuple(COBOL_MARKERS.values()),
            required=(COBOL_ATTRIBUTE_GATE,),
        ),
        version=VersionProfile(
            version_markers=(
                "CA-ASSEMBLYVERSION",
                "CA-ASSEMBLYFILEVERSION",
                "CA-ASSEMBLYINFORMATIONALVERSION",
            ),
            semantic_markers=("CA-ASSEMBLYINFORMATIONALVERSION",),
            excluded_markers=("CA-ASSEMBLYFILEVERSION",),
            line_filter=LineFilter(exclude=("*>",)),
            join_next_line=True,
        ),
        join_next_line=True,
        description="COBOL assembly",
    ),
    "TSQL": LanguageProfile(
        language="TSQL",
        extractor=TEXT_EXTRACTOR,
        info_path="Properties/DbInfo.db",
        version_info_path="Properties/DbInfo.db",
        markers=DB_MARKERS,
        info_filter=LineFilter(exclude=SCRIPT_COMMENTS),
        version=_script_version(DB_MARKERS),
        description="database",
    ),
    "ETL": LanguageProfile(
        language="ETL",
        extractor=TEXT_EXTRACTOR,
        info_path="EtlInfo.etl",
        version_info_path="EtlInfo.etl",
        markers=ETL_MARKERS,
        info_filter=LineFilter(exclude=SCRIPT_COMMENTS),
        version=_script_version(ETL_MARKERS),
        description="ETL",
    ),
}


def list_languages() -> list[str]:
    """List the supported language identifiers."""
    return list(LANGUAGE_PROFILES.keys())


def get_language_profile(language: str | None) -> LanguageProfile:
    """Get the profile for a language identifier.

    Args:
        language: Language identifier such as ``"CS"`` or ``"tsql"``

    Returns:
        Matching LanguageProfile

    Raises:
        UnsupportedLanguageError: If the identifier is empty or unknown
    """
    key = (language or "").strip().upper()
    if key not in LANGUAGE_PROFILES:
        raise UnsupportedLanguageError(language, list_languages())
    return LANGUAGE_PROFILES[key]


def resolve_info_path(
    project_dir: str | Path,
    profile: LanguageProfile,
    override: str | Path | None = None,
    *,
    for_versioning: bool = False,
) -> Path:
    """Resolve the info file location for a project.

    An explicit override wins over the language default; relative paths are
    taken from the project directory.
    """
    if override:
        relative = Path(override)
    elif for_versioning:
        relative = Path(profile.version_info_path)
    else:
        relative = Path(profile.info_path)
    return Path(project_dir) / relative
