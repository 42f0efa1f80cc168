"""CLI command modules, one per build task."""

from . import info_cmd, nuspec_cmd, sonar_cmd, version_cmd

__all__ = [
    "info_cmd",
    "nuspec_cmd",
    "sonar_cmd",
    "version_cmd",
]
