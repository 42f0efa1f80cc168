"""Version string formatting rules applied to version-bearing lines.

Every function takes a full line and returns the line with only its quoted
value changed; text outside the first and last double quote is preserved.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable
from datetime import datetime

from buildmeta.core.models import (
    SEMANTIC_VERSION_INDICATOR,
    VERSION_PLACEHOLDER,
    extract_quoted,
)

TIMESTAMP_FORMAT = "%Y%m%d%H%M"

# dots in the template -> text substituted for the placeholder
_PADDING = {
    3: "{part}",
    2: "{part}.0",
    1: "{part}.0.0",
}
_DEFAULT_PADDING = "{part}.0.0.0"


def replace_value(data: str, transform: Callable[[str], str]) -> str:
    """Apply ``transform`` to the quoted value of a line."""
    start = data.find('"') + 1
    end = data.rfind('"')
    if end < start:
        return data
    return data[:start] + transform(data[start:end]) + data[end:]


def format_version(data: str, version_part: str | None) -> str:
    """Substitute the version part into a plain version template.

    The placeholder is padded with ``.0`` components up to a four-part
    version, e.g. with part ``"1"`` the template ``1.*`` becomes ``1.1.0.0``.
    Templates without dots or with more than three get the full ``.0.0.0``
    padding.
    Fixed templates (no placeholder) are returned unchanged.
    """
    if version_part is None:
        return data

    dots = extract_quoted(data).count(".")
    replacement = _PADDING.get(dots, _DEFAULT_PADDING).format(part=version_part)
    return replace_value(data, lambda value: value.replace(VERSION_PLACEHOLDER, replacement))


def format_semantic_version(data: str, now: datetime) -> str:
    """Format a development semantic version.

    The placeholder becomes ``0`` and a ``YYYYMMDDHHMM`` timestamp is
    inserted right after the pre-release indicator.
    """
    stamp = now.strftime(TIMESTAMP_FORMAT)

    def stamp_value(value: str) -> str:
        value = value.replace(VERSION_PLACEHOLDER, "0")
        index = value.find(SEMANTIC_VERSION_INDICATOR)
        if index < 0:
            return value
        index += len(SEMANTIC_VERSION_INDICATOR)
        return value[:index] + stamp + value[index:]

    return replace_value(data, stamp_value)


def format_semantic_release_version(data: str, release_version: str | None = None) -> str:
    """Format a release semantic version.

    The pre-release indicator is dropped. With an explicit release version the
    whole value is replaced by it.
    """

    def release_value(value: str) -> str:
        value = value.replace(VERSION_PLACEHOLDER, "0")
        if SEMANTIC_VERSION_INDICATOR not in value:
            return value
        if release_version and release_version.strip():
            value = release_version.strip()
        return value.replace(SEMANTIC_VERSION_INDICATOR, "")

    return replace_value(data, release_value)


def replace_version(data: str, new_version: str, is_semantic_line: bool) -> str:
    """Replace the value of a line with a new development version.

    Semantic lines always end up carrying the pre-release indicator; other
    version lines get the numeric part followed by a ``.0`` component.
    """
    if is_semantic_line:
        if SEMANTIC_VERSION_INDICATOR not in new_version:
            new_version = f"{new_version}{SEMANTIC_VERSION_INDICATOR}"
        return replace_value(data, lambda _: new_version)

    numeric = new_version.replace(SEMANTIC_VERSION_INDICATOR, "")
    return replace_value(data, lambda _: f"{numeric}.0")


def _to_int(value: str) -> int:
    with contextlib.suppress(ValueError):
        return int(value)
    return 0


def next_versions(version: str, is_release: bool = False) -> tuple[str, str]:
    """Compute the next release and next development versions.

    Args:
        version: Resolved version, possibly carrying a pre-release suffix
        is_release: Whether the current run produces a release

    Returns:
        Tuple of (next release version, next new development version)
    """
    base = version
    if SEMANTIC_VERSION_INDICATOR in base:
        base = base[: base.index("-")]

    parts = base.split(".")
    if len(parts) == 3:
        parts[1] = str(_to_int(parts[1]) + 1)
        parts[2] = "0"
    incremented = ".".join(parts)

    next_release = incremented if is_release else base
    return next_release, f"{incremented}{SEMANTIC_VERSION_INDICATOR}"
