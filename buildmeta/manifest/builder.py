"""Assemble NuGet-style package manifests from project metadata."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path

from buildmeta.core.interfaces import IoService
from buildmeta.core.io_utils import LocalIoService
from buildmeta.core.models import MetadataRecord

LOGGER = logging.getLogger("buildmeta.manifest.builder")

MANIFEST_EXTENSION = "nuspec"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'


@dataclass(frozen=True)
class ManifestFile:
    """A file entry of the manifest."""

    src: str
    target: str


@dataclass(frozen=True)
class ManifestDependency:
    """A package dependency of the manifest."""

    id: str
    version: str


DEFAULT_FILES = (
    ManifestFile("**/*.dll", "lib"),
    ManifestFile("**/*.exe", "lib"),
    ManifestFile("**/*.sql", "lib"),
    ManifestFile("**/*.dtsx", "lib"),
    ManifestFile("**/*.config", "content"),
    ManifestFile("**/*.xml", "content"),
    ManifestFile("**/*.dtsConfig", "content"),
    ManifestFile("**/*.zip", "content"),
    ManifestFile("**/*.cmd", "content"),
    ManifestFile("**/*.bat", "content"),
)


def package_id(title: str, configuration: str | None = None) -> str:
    """Build the package identifier from a title and optional configuration."""
    identifier = f"{title}.{configuration}" if configuration and configuration.strip() else title
    return identifier.replace(" ", "")


class ManifestBuilder:
    """Build a package manifest for one project."""

    def __init__(
        self,
        record: MetadataRecord,
        configuration: str | None = None,
        io_service: IoService | None = None,
    ):
        self.record = record
        self.configuration = configuration
        self.io_service = io_service or LocalIoService()
        self.files: list[ManifestFile] = []
        self.dependencies: list[ManifestDependency] = []

    @property
    def package_id(self) -> str:
        return package_id(self.record.title or "", self.configuration)

    def add_default_files(self) -> ManifestBuilder:
        self.files.extend(DEFAULT_FILES)
        return self

    def add_file(self, src: str, file_type: str) -> ManifestBuilder:
        """Add a custom file; directories are placed below the file type."""
        target = str(Path(file_type) / src) if self.io_service.is_directory(src) else file_type
        self.files.append(ManifestFile(src, target))
        return self

    def add_dependency(self, dependency_id: str, version: str) -> ManifestBuilder:
        self.dependencies.append(ManifestDependency(dependency_id, version))
        return self

    def build(self) -> ET.Element:
        """Build the manifest document root."""
        package = ET.Element("package")
        metadata = ET.SubElement(package, "metadata")
        ET.SubElement(metadata, "id").text = self.package_id
        ET.SubElement(metadata, "version").text = self.record.version or ""
        ET.SubElement(metadata, "description").text = self.record.description or ""
        ET.SubElement(metadata, "authors").text = self.record.company or ""

        if self.dependencies:
            dependencies = ET.SubElement(metadata, "dependencies")
            for dependency in self.dependencies:
                ET.SubElement(
                    dependencies,
                    "dependency",
                    {"id": dependency.id, "version": dependency.version},
                )

        files = ET.SubElement(package, "files")
        for manifest_file in self.files:
            ET.SubElement(files, "file", {"src": manifest_file.src, "target": manifest_file.target})

        return package

    def to_string(self) -> str:
        root = self.build()
        ET.indent(root)
        return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"

    def write(self, package_dir: str | Path) -> Path | None:
        """Write ``<id>.nuspec`` into the package directory.

        Returns:
            Path of the written manifest, or None if it could not be written
        """
        path = Path(package_dir) / f"{self.package_id}.{MANIFEST_EXTENSION}"
        if not self.io_service.write_file(path, self.to_string()):
            LOGGER.warning(f"Unable to write manifest: {path}")
            return None
        return path
