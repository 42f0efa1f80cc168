"""Project metadata extractors.

Text extractors parse per-language info files line by line; the artifact
extractor reads the metadata of a built distribution.
"""

from buildmeta.core.languages import ARTIFACT_EXTRACTOR, TEXT_EXTRACTOR
from buildmeta.extractors.artifact_extractor import ArtifactInfoExtractor
from buildmeta.extractors.base import (
    get_extractor,
    get_language_extractor,
    list_extractors,
    register_extractor,
)
from buildmeta.extractors.text_extractor import TextInfoExtractor

register_extractor(TEXT_EXTRACTOR, TextInfoExtractor)
register_extractor(ARTIFACT_EXTRACTOR, ArtifactInfoExtractor)

__all__ = [
    "ArtifactInfoExtractor",
    "TextInfoExtractor",
    "get_extractor",
    "get_language_extractor",
    "list_extractors",
    "register_extractor",
]
