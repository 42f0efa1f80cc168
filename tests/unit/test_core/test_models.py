"""Tests for core data models."""

import pytest

from buildmeta.core.models import (
    AttributeMarkers,
    ExtractionState,
    MetadataRecord,
    VersionLine,
    extract_quoted,
)


class TestExtractQuoted:
    """Tests for quoted value extraction."""

    def test_value_between_quotes(self):
        assert extract_quoted('[assembly: AssemblyTitle("My App")]') == "My App"

    def test_interior_quotes_are_kept(self):
        """Everything between the first and last quote is the value."""
        line = 'DbTitle = "Sales" + "Reporting"'
        assert extract_quoted(line) == 'Sales" + "Reporting'

    def test_no_quotes_gives_empty_value(self):
        assert extract_quoted("DbTitle = Sales") == ""

    def test_single_quote_gives_empty_value(self):
        assert extract_quoted('DbTitle = "Sales') == ""

    def test_empty_quotes(self):
        assert extract_quoted('AssemblyCompany("")') == ""


class TestAttributeMarkers:
    """Tests for AttributeMarkers."""

    def test_values_in_attribute_order(self):
        markers = AttributeMarkers("T", "D", "C", "V", "SV")
        assert markers.values() == ["T", "D", "C", "V", "SV"]

    def test_duplicate_markers_rejected(self):
        with pytest.raises(ValueError, match="unique"):
            AttributeMarkers("T", "D", "C", "V", "V")


class TestMetadataRecord:
    """Tests for MetadataRecord."""

    def test_complete_record(self):
        record = MetadataRecord("MyLib", "My library", "Contoso", "1.0.0")
        assert record.is_complete

    def test_blank_field_is_incomplete(self):
        record = MetadataRecord("MyLib", "  ", "Contoso", "1.0.0")
        assert not record.is_complete

    def test_missing_field_is_incomplete(self):
        assert not MetadataRecord(title="MyLib").is_complete

    def test_as_dict(self):
        record = MetadataRecord("MyLib", "My library", "Contoso", "1.0.0", {"Culture": ""})
        assert record.as_dict() == {
            "Title": "MyLib",
            "Description": "My library",
            "Company": "Contoso",
            "Version": "1.0.0",
        }


def test_extraction_state_to_record():
    state = ExtractionState(
        title="MyLib",
        description="My library",
        company="Contoso",
        version="1.0.0-d",
        first_version_attribute="SemanticVersion",
    )

    record = state.to_record()

    assert record == MetadataRecord("MyLib", "My library", "Contoso", "1.0.0-d")


def test_version_line_defaults():
    line = VersionLine(text='[assembly: AssemblyVersion("1.0.*")]')

    assert line.split_at is None
    assert not line.is_excluded
    assert not line.is_semantic
