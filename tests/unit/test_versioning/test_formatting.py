"""Tests for version string formatting."""

from datetime import datetime

import pytest

from buildmeta.versioning.formatting import (
    format_semantic_release_version,
    format_semantic_version,
    format_version,
    next_versions,
    replace_value,
    replace_version,
)

NOW = datetime(2024, 3, 5, 14, 7)


def assembly_version(value):
    return f'[assembly: AssemblyVersion("{value}")]'


def informational_version(value):
    return f'[assembly: AssemblyInformationalVersion("{value}")]'


class TestFormatVersion:
    """Tests for placeholder substitution in plain versions."""

    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("1.0.0.*", "1.0.0.1"),
            ("1.0.*", "1.0.1.0"),
            ("1.*", "1.1.0.0"),
            ("*", "1.0.0.0"),
        ],
    )
    def test_component_counts(self, template, expected):
        assert format_version(assembly_version(template), "1") == assembly_version(expected)

    def test_more_than_three_dots_gets_full_padding(self):
        assert format_version(assembly_version("1.0.0.0.*"), "1") == (
            assembly_version("1.0.0.0.1.0.0.0")
        )

    @pytest.mark.parametrize("template", ["1.0.0.1", "1.0.1.0", "1.1.0.0", "1.0.0.0"])
    def test_fixed_template_unchanged(self, template):
        line = assembly_version(template)
        assert format_version(line, "1") == line

    def test_no_version_part_leaves_line(self):
        line = assembly_version("1.0.*")
        assert format_version(line, None) == line

    def test_only_quoted_value_changes(self):
        line = 'DbVersion = "1.*" * keep'
        assert format_version(line, "7") == 'DbVersion = "1.7.0.0" * keep'


class TestFormatSemanticVersion:
    """Tests for development semantic versions."""

    def test_timestamp_after_indicator(self):
        line = format_semantic_version(informational_version("1.0.*-d"), NOW)
        assert line == informational_version("1.0.0-d202403051407")

    def test_timestamp_has_twelve_digits(self):
        value = format_semantic_version('X("1.0.1-d")', datetime(2025, 12, 31, 9, 5))
        assert value == 'X("1.0.1-d202512310905")'

    def test_without_indicator(self):
        assert format_semantic_version(informational_version("1.0.*"), NOW) == (
            informational_version("1.0.0")
        )


class TestFormatSemanticReleaseVersion:
    """Tests for release semantic versions."""

    def test_indicator_removed(self):
        line = format_semantic_release_version(informational_version("1.0.1-d"))
        assert line == informational_version("1.0.1")

    def test_release_override(self):
        line = format_semantic_release_version(informational_version("1.0.1-d"), "1.1.0")
        assert line == informational_version("1.1.0")

    def test_blank_override_ignored(self):
        line = format_semantic_release_version(informational_version("1.0.*-d"), " ")
        assert line == informational_version("1.0.0")


class TestReplaceVersion:
    """Tests for switching to a new development version."""

    def test_semantic_line_gets_indicator(self):
        line = replace_version(informational_version("1.0.1"), "1.1.0", True)
        assert line == informational_version("1.1.0-d")

    def test_semantic_line_keeps_existing_indicator(self):
        line = replace_version(informational_version("1.0.1"), "1.1.0-d", True)
        assert line == informational_version("1.1.0-d")

    def test_plain_line_gets_numeric_version(self):
        line = replace_version(assembly_version("1.0.0.0"), "1.1.0-d", False)
        assert line == assembly_version("1.1.0.0")


def test_replace_value_without_quotes():
    assert replace_value("DbVersion = 1.0", str.upper) == "DbVersion = 1.0"


class TestNextVersions:
    """Tests for next version computation."""

    def test_plain_version(self):
        assert next_versions("1.0.0") == ("1.0.0", "1.1.0-d")

    def test_development_version(self):
        assert next_versions("1.0.1-d202403051407") == ("1.0.1", "1.1.0-d")

    def test_release(self):
        assert next_versions("1.0.1", is_release=True) == ("1.1.0", "1.1.0-d")

    def test_four_components_not_incremented(self):
        assert next_versions("1.0.0.0") == ("1.0.0.0", "1.0.0.0-d")

    def test_non_numeric_minor_counts_as_zero(self):
        assert next_versions("1.x.5") == ("1.x.5", "1.1.0-d")
