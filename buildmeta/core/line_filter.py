"""Line predicates used to select attribute lines in info files."""

from collections.abc import Iterable
from dataclasses import dataclass


def contains_any(line: str, markers: Iterable[str]) -> bool:
    """Return True if the line contains at least one marker (case-sensitive)."""
    return any(marker in line for marker in markers)


def contains_none(line: str, markers: Iterable[str]) -> bool:
    """Return True if the line contains none of the markers."""
    return not contains_any(line, markers)


@dataclass(frozen=True)
class LineFilter:
    """Combined inclusion and exclusion rule for a single line.

    A line is accepted when it contains none of ``exclude``, at least one of
    ``include`` (if any are given) and at least one of ``required`` (if any
    are given).
    """

    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    required: tuple[str, ...] = ()

    def accepts(self, line: str) -> bool:
        if self.exclude and contains_any(line, self.exclude):
            return False
        if self.required and not contains_any(line, self.required):
            return False
        return not self.include or contains_any(line, self.include)
