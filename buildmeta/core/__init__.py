"""Core data models, language profiles and I/O interfaces."""

from buildmeta.core.errors import (
    BuildMetaError,
    RequiredAttributeError,
    UnsupportedLanguageError,
)
from buildmeta.core.interfaces import IoService
from buildmeta.core.models import AttributeMarkers, MetadataRecord, VersionResult

__all__ = [
    "AttributeMarkers",
    "BuildMetaError",
    "IoService",
    "MetadataRecord",
    "RequiredAttributeError",
    "UnsupportedLanguageError",
    "VersionResult",
]
