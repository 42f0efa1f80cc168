"""Tests for the build artifact extractor."""

import zipfile

import pytest

from buildmeta.core.errors import RequiredAttributeError
from buildmeta.extractors.artifact_extractor import ArtifactInfoExtractor, open_distribution

METADATA = """\
Metadata-Version: 2.1
Name: mylib
Version: 1.2.3
Summary: My library
Author: Contoso
License: MIT
Keywords: build,tools
"""


def make_dist_info(tmp_path, metadata=METADATA):
    dist_info = tmp_path / "mylib-1.2.3.dist-info"
    dist_info.mkdir()
    (dist_info / "METADATA").write_text(metadata, encoding="utf-8")
    return dist_info


def make_wheel(tmp_path, metadata=METADATA):
    wheel = tmp_path / "mylib-1.2.3-py3-none-any.whl"
    with zipfile.ZipFile(wheel, "w") as archive:
        archive.writestr("mylib/__init__.py", "")
        archive.writestr("mylib-1.2.3.dist-info/METADATA", metadata)
    return wheel


class TestArtifactInfoExtractor:
    """Tests for reading distribution metadata."""

    def test_dist_info_directory(self, tmp_path):
        outcome = ArtifactInfoExtractor().extract(make_dist_info(tmp_path))

        assert outcome.success
        assert outcome.record.title == "mylib"
        assert outcome.record.description == "My library"
        assert outcome.record.company == "Contoso"
        assert outcome.record.version == "1.2.3"

    def test_optional_attributes(self, tmp_path):
        outcome = ArtifactInfoExtractor().extract(make_dist_info(tmp_path))

        assert outcome.record.extras == {
            "Configuration": "",
            "Product": "mylib",
            "Copyright": "MIT",
            "Trademark": "build,tools",
            "Culture": "",
        }

    def test_wheel(self, tmp_path):
        outcome = ArtifactInfoExtractor().extract(make_wheel(tmp_path))

        assert outcome.success
        assert outcome.record.title == "mylib"
        assert outcome.record.version == "1.2.3"

    def test_author_email_fallback(self, tmp_path):
        metadata = METADATA.replace(
            "Author: Contoso\n", "Author-email: Jane Doe <jane@example.com>\n"
        )

        outcome = ArtifactInfoExtractor().extract(make_dist_info(tmp_path, metadata))

        assert outcome.record.company == "Jane Doe <jane@example.com>"

    def test_missing_required_attribute_raises(self, tmp_path):
        metadata = METADATA.replace("Summary: My library\n", "")

        with pytest.raises(RequiredAttributeError, match="Description attribute is required"):
            ArtifactInfoExtractor().extract(make_dist_info(tmp_path, metadata))

    def test_missing_artifact_fails(self, tmp_path):
        outcome = ArtifactInfoExtractor().extract(tmp_path / "missing.whl")

        assert not outcome.success
        assert outcome.record.title is None

    def test_not_a_distribution_fails(self, tmp_path):
        other = tmp_path / "notes.txt"
        other.write_text("not a wheel", encoding="utf-8")

        assert not ArtifactInfoExtractor().extract(other).success
        assert not ArtifactInfoExtractor().extract(tmp_path).success


def test_open_distribution_rejects_plain_zip(tmp_path):
    archive_path = tmp_path / "bundle.zip"
    with zipfile.ZipFile(archive_path, "w") as archive:
        archive.writestr("readme.txt", "hello")

    assert open_distribution(archive_path) is None
