"""Package manifest generation."""

from buildmeta.manifest.builder import DEFAULT_FILES, ManifestBuilder, package_id

__all__ = ["DEFAULT_FILES", "ManifestBuilder", "package_id"]
