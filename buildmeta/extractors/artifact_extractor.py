"""Extract project metadata from a built distribution artifact."""

import logging
import zipfile
from importlib.metadata import PackageMetadata, PathDistribution
from pathlib import Path

from buildmeta.core.errors import RequiredAttributeError
from buildmeta.core.interfaces import InfoExtractor, IoService
from buildmeta.core.io_utils import LocalIoService
from buildmeta.core.models import ExtractionOutcome, MetadataRecord

LOGGER = logging.getLogger("buildmeta.extractors.artifact_extractor")

# attribute name -> (metadata keys tried in order, required)
ARTIFACT_ATTRIBUTES: dict[str, tuple[tuple[str, ...], bool]] = {
    "Title": (("Name",), True),
    "Description": (("Summary",), True),
    "Configuration": (("Platform",), False),
    "Company": (("Author", "Author-email"), True),
    "Product": (("Name",), False),
    "Copyright": (("License",), False),
    "Trademark": (("Keywords",), False),
    "Culture": ((), False),
    "Version": (("Version",), True),
}

OPTIONAL_ATTRIBUTES = ("Configuration", "Product", "Copyright", "Trademark", "Culture")

METADATA_FILES = ("METADATA", "PKG-INFO")


def open_distribution(path: Path) -> PathDistribution | None:
    """Open a wheel file or an unpacked ``.dist-info``/``.egg-info`` directory."""
    if path.is_dir():
        if not any((path / name).is_file() for name in METADATA_FILES):
            return None
        return PathDistribution(path)

    if zipfile.is_zipfile(path):
        root = zipfile.Path(path)
        for entry in root.iterdir():
            if entry.is_dir() and entry.name.endswith(".dist-info"):
                return PathDistribution(entry)

    return None


def get_attribute(metadata: PackageMetadata, attribute: str) -> str:
    """Read one attribute from distribution metadata.

    Optional attributes default to an empty string.

    Raises:
        RequiredAttributeError: If a required attribute is missing or blank
    """
    keys, required = ARTIFACT_ATTRIBUTES[attribute]
    for key in keys:
        value = metadata.get(key)
        if value and value.strip():
            return value.strip()

    if required:
        raise RequiredAttributeError(attribute)
    return ""


class ArtifactInfoExtractor(InfoExtractor):
    """Read project metadata from the artifact produced by a build.

    The artifact is a wheel or an unpacked distribution metadata directory.
    Title, Description, Company and Version are required; the remaining
    attributes are optional and land in ``MetadataRecord.extras``.
    """

    def __init__(self, io_service: IoService | None = None):
        self.io_service = io_service or LocalIoService()

    @property
    def name(self) -> str:
        return "artifact"

    def extract(self, source_path: str | Path) -> ExtractionOutcome:
        path = Path(source_path)

        if not (self.io_service.file_exists(path) or self.io_service.is_directory(path)):
            LOGGER.warning(f"Build artifact not found: {path}")
            return ExtractionOutcome(record=MetadataRecord(), success=False, source=str(path))

        distribution = open_distribution(path)
        if distribution is None:
            LOGGER.warning(f"Not a distribution artifact: {path}")
            return ExtractionOutcome(record=MetadataRecord(), success=False, source=str(path))

        metadata = distribution.metadata
        record = MetadataRecord(
            title=get_attribute(metadata, "Title"),
            description=get_attribute(metadata, "Description"),
            company=get_attribute(metadata, "Company"),
            version=get_attribute(metadata, "Version"),
            extras={name: get_attribute(metadata, name) for name in OPTIONAL_ATTRIBUTES},
        )
        return ExtractionOutcome(record=record, success=record.is_complete, source=str(path))
