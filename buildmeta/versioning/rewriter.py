"""Rewrite version attributes in a version-info file."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from buildmeta.core.interfaces import IoService
from buildmeta.core.io_utils import LocalIoService
from buildmeta.core.languages import VersionProfile
from buildmeta.core.line_filter import contains_any
from buildmeta.core.models import VersionLine, VersionResult, extract_quoted
from buildmeta.core.text_lines import DEFAULT_NEWLINE, join_lines, read_lines
from buildmeta.versioning.formatting import (
    format_semantic_release_version,
    format_semantic_version,
    format_version,
    next_versions,
    replace_version,
)

LOGGER = logging.getLogger("buildmeta.versioning.rewriter")


@dataclass
class VersionOptions:
    """How version lines are rewritten.

    Attributes:
        version_part: Value substituted for the ``*`` placeholder
        is_release: Produce a release version (drops the pre-release indicator)
        release_version: Explicit release version replacing the current one
        is_new_development_version: Switch the file to a new development version
        new_development_version: The new development version
    """

    version_part: str | None = None
    is_release: bool = False
    release_version: str | None = None
    is_new_development_version: bool = False
    new_development_version: str | None = None


def _common_prefix_length(a: str, b: str) -> int:
    return len(os.path.commonprefix([a, b]))


def split_line(line: VersionLine, new_text: str) -> list[str]:
    """Split a rewritten logical line back into its physical lines.

    When the edit lies after the join boundary the first physical line is
    kept as-is; otherwise the second physical line keeps its original length.
    """
    if line.split_at is None:
        return [new_text]

    if _common_prefix_length(line.text, new_text) >= line.split_at:
        cut = line.split_at
    else:
        cut = max(0, len(new_text) - (len(line.text) - line.split_at))
    return [new_text[:cut], new_text[cut:]]


def format_line(
    line: VersionLine,
    is_semantic: bool,
    options: VersionOptions,
    now: datetime,
) -> str:
    """Compute the new text of one version line.

    Excluded lines are secondary numeric versions and always take the plain
    version format.
    """
    text = line.text

    if line.is_excluded or not is_semantic:
        text = format_version(text, options.version_part)
    elif options.is_release:
        text = format_semantic_release_version(text, options.release_version)
    else:
        text = format_semantic_version(text, now)

    if options.is_new_development_version and options.new_development_version:
        text = replace_version(text, options.new_development_version, line.is_semantic)

    return text


def rewrite_lines(
    lines: Iterable[str],
    profile: VersionProfile,
    options: VersionOptions,
    now: datetime,
    newline: str = DEFAULT_NEWLINE,
) -> VersionResult:
    """Rewrite every version line of a file.

    Args:
        lines: Physical lines of the file
        profile: Version rules for the file's language
        options: Rewrite options
        now: Time used for development version timestamps
        newline: Line terminator for the output

    Returns:
        VersionResult holding the new contents and resolved versions
    """
    output: list[str] = []
    is_semantic = False
    version = None
    changed = 0

    physical = iter(lines)
    for data in physical:
        if not profile.accepts(data):
            output.append(data)
            continue

        text, split_at = data, None
        if profile.join_next_line:
            following = next(physical, None)
            if following is not None:
                text, split_at = data + following, len(data)

        line = VersionLine(
            text=text,
            split_at=split_at,
            is_excluded=contains_any(text, profile.excluded_markers),
            is_semantic=contains_any(text, profile.semantic_markers),
        )
        # once semantic, the rest of the file is formatted as semantic
        is_semantic = is_semantic or line.is_semantic

        new_text = format_line(line, is_semantic, options, now)
        if new_text != text:
            changed += 1
            LOGGER.debug(f"Rewrote '{text}' as '{new_text}'")

        if not line.is_excluded:
            version = extract_quoted(new_text)

        output.extend(split_line(line, new_text))

    result = VersionResult(
        contents=join_lines(output, newline),
        version=version,
        is_semantic_version=is_semantic,
        lines_changed=changed,
    )
    if version:
        result.next_release_version, result.next_new_development_version = next_versions(
            version, options.is_release
        )
    return result


class VersionRewriter:
    """Apply versions to a version-info file read through an I/O service."""

    def __init__(
        self,
        profile: VersionProfile,
        io_service: IoService | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the rewriter.

        Args:
            profile: Version rules for the file's language
            io_service: I/O service used to read the file
            clock: Source of the current time for development timestamps
        """
        self.profile = profile
        self.io_service = io_service or LocalIoService()
        self.clock = clock

    def rewrite(
        self, path: str | Path, options: VersionOptions | None = None
    ) -> VersionResult | None:
        """Read a version-info file and compute its rewritten contents.

        The file itself is not modified; callers persist ``contents``.

        Returns:
            VersionResult, or None if the file is missing, unreadable or has
            no version line
        """
        options = options or VersionOptions()
        path = str(path)

        if not path or not self.io_service.file_exists(path):
            LOGGER.warning(f"Version info file not found: {path}")
            return None

        stream = self.io_service.read_file_as_stream(path)
        if stream is None:
            LOGGER.warning(f"Unable to read version info file: {path}")
            return None

        try:
            lines, newline = read_lines(stream)
        except (OSError, UnicodeDecodeError) as e:
            LOGGER.warning(f"Unable to read version info file {path}: {e}")
            return None

        result = rewrite_lines(lines, self.profile, options, self.clock(), newline)
        if result.version is None:
            LOGGER.warning(f"No version attribute found in {path}")
            return None

        LOGGER.debug(f"Rewrote {result.lines_changed} version lines in {path}")
        return result
