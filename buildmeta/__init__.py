"""Build metadata tasks (buildmeta).

Build-time tasks that read project metadata from per-language info files,
generate package manifests from it and rewrite version strings for releases.
"""

__version__ = "0.1.0"

# Public API exports
from buildmeta.core.models import MetadataRecord, VersionResult
from buildmeta.extractors.base import get_extractor
from buildmeta.versioning.rewriter import VersionRewriter

__all__ = [
    "MetadataRecord",
    "VersionResult",
    "VersionRewriter",
    "get_extractor",
]
