"""Tests for the package manifest builder."""

import xml.etree.ElementTree as ET

import pytest

from buildmeta.core.models import MetadataRecord
from buildmeta.manifest.builder import DEFAULT_FILES, ManifestBuilder, package_id


@pytest.fixture
def record():
    return MetadataRecord(
        title="Sales Database",
        description="Sales reporting schema",
        company="Contoso",
        version="1.1.0",
    )


def test_package_id():
    assert package_id("Sales Database") == "SalesDatabase"
    assert package_id("Sales Database", "Release") == "SalesDatabase.Release"
    assert package_id("My Lib", " ") == "MyLib"
    assert package_id("My Lib", "Debug Build") == "MyLib.DebugBuild"


class TestManifestBuilder:
    """Tests for ManifestBuilder."""

    def test_metadata(self, record):
        root = ManifestBuilder(record, "Release").build()

        assert root.tag == "package"
        assert root.findtext("metadata/id") == "SalesDatabase.Release"
        assert root.findtext("metadata/version") == "1.1.0"
        assert root.findtext("metadata/description") == "Sales reporting schema"
        assert root.findtext("metadata/authors") == "Contoso"
        assert root.find("metadata/dependencies") is None

    def test_default_files(self, record):
        root = ManifestBuilder(record).add_default_files().build()

        files = [(f.get("src"), f.get("target")) for f in root.findall("files/file")]
        assert len(files) == len(DEFAULT_FILES) == 10
        assert ("**/*.dll", "lib") in files
        assert ("**/*.sql", "lib") in files
        assert ("**/*.dtsConfig", "content") in files
        assert ("**/*.bat", "content") in files

    def test_custom_files(self, record, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "scripts").mkdir()

        builder = ManifestBuilder(record)
        builder.add_file("scripts", "content").add_file("tools/setup.exe", "tools")
        root = builder.build()

        files = [(f.get("src"), f.get("target")) for f in root.findall("files/file")]
        assert files == [("scripts", "content/scripts"), ("tools/setup.exe", "tools")]

    def test_dependencies(self, record):
        root = ManifestBuilder(record).add_dependency("Contoso.Common", "2.0.0").build()

        dependency = root.find("metadata/dependencies/dependency")
        assert dependency.get("id") == "Contoso.Common"
        assert dependency.get("version") == "2.0.0"

    def test_to_string(self, record):
        text = ManifestBuilder(record).add_default_files().to_string()

        assert text.startswith('<?xml version="1.0" encoding="utf-8"?>\n<package>')
        assert ET.fromstring(text.split("\n", 1)[1]).findtext("metadata/id") == "SalesDatabase"

    def test_write(self, record, tmp_path):
        path = ManifestBuilder(record, "Release").add_default_files().write(tmp_path)

        assert path == tmp_path / "SalesDatabase.Release.nuspec"
        root = ET.parse(path).getroot()
        assert root.findtext("metadata/version") == "1.1.0"

    def test_write_failure(self, record, tmp_path):
        assert ManifestBuilder(record).write(tmp_path / "missing") is None
