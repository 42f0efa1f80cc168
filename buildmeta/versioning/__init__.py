"""Version rewriting for version-info files and Sonar configurations."""

from buildmeta.versioning.rewriter import VersionOptions, VersionRewriter, rewrite_lines
from buildmeta.versioning.sonar import apply_sonar_version

__all__ = [
    "VersionOptions",
    "VersionRewriter",
    "apply_sonar_version",
    "rewrite_lines",
]
