"""Extract project metadata from line-oriented info files."""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from pathlib import Path

from buildmeta.core.interfaces import InfoExtractor, IoService
from buildmeta.core.io_utils import LocalIoService
from buildmeta.core.languages import LanguageProfile
from buildmeta.core.line_filter import LineFilter
from buildmeta.core.models import (
    SEMANTIC_VERSION,
    VERSION,
    AttributeMarkers,
    ExtractionOutcome,
    ExtractionState,
    MetadataRecord,
    extract_quoted,
)
from buildmeta.core.text_lines import read_lines

LOGGER = logging.getLogger("buildmeta.extractors.text_extractor")


def logical_lines(
    lines: Iterable[str],
    line_filter: LineFilter,
    join_next_line: bool = False,
) -> Iterator[str]:
    """Yield the lines eligible for attribute parsing.

    When ``join_next_line`` is set, each eligible line is combined with the
    physical line following it, which is consumed.
    """
    physical = iter(lines)
    for line in physical:
        if not line_filter.accepts(line):
            continue
        if join_next_line:
            line += next(physical, "")
        yield line


def _apply_version(state: ExtractionState, attribute: str, line: str) -> ExtractionState:
    first = state.first_version_attribute or attribute
    # A semantic version declared first is never replaced by later version lines
    if state.version and state.version.strip() and first == SEMANTIC_VERSION:
        return replace(state, first_version_attribute=first)
    return replace(state, version=extract_quoted(line), first_version_attribute=first)


def apply_line(state: ExtractionState, line: str, markers: AttributeMarkers) -> ExtractionState:
    """Fold one logical line into the extraction state."""
    if markers.title in line:
        return replace(state, title=extract_quoted(line))
    if markers.description in line:
        return replace(state, description=extract_quoted(line))
    if markers.company in line:
        return replace(state, company=extract_quoted(line))
    if markers.version in line:
        return _apply_version(state, VERSION, line)
    if markers.semantic_version in line:
        return _apply_version(state, SEMANTIC_VERSION, line)
    return state


def scan_lines(lines: Iterable[str], profile: LanguageProfile) -> ExtractionState:
    """Scan info file lines into an extraction state."""
    eligible = logical_lines(lines, profile.info_filter, profile.join_next_line)
    return functools.reduce(
        lambda state, line: apply_line(state, line, profile.markers),
        eligible,
        ExtractionState(),
    )


class TextInfoExtractor(InfoExtractor):
    """Read title, description, company and version from an info file."""

    def __init__(self, profile: LanguageProfile, io_service: IoService | None = None):
        self.profile = profile
        self.io_service = io_service or LocalIoService()

    @property
    def name(self) -> str:
        return f"text:{self.profile.language}"

    def extract(self, source_path: str | Path) -> ExtractionOutcome:
        path = str(source_path)

        if not self.io_service.file_exists(path):
            LOGGER.warning(f"Info file not found: {path}")
            return ExtractionOutcome(record=MetadataRecord(), success=False, source=path)

        stream = self.io_service.read_file_as_stream(path)
        if stream is None:
            LOGGER.warning(f"Unable to read info file: {path}")
            return ExtractionOutcome(record=MetadataRecord(), success=False, source=path)

        try:
            # undecodable bytes become U+FFFD
            lines, _ = read_lines(stream, errors="replace")
        except OSError as e:
            LOGGER.warning(f"Unable to read info file {path}: {e}")
            return ExtractionOutcome(record=MetadataRecord(), success=False, source=path)

        record = scan_lines(lines, self.profile).to_record()
        LOGGER.debug(f"Scanned {len(lines)} lines of {path}")
        return ExtractionOutcome(record=record, success=record.is_complete, source=path)
