"""Reading info files as lines while remembering their newline convention."""

import io
from typing import BinaryIO

DEFAULT_NEWLINE = "\n"


def read_lines(
    stream: BinaryIO, encoding: str = "utf-8-sig", errors: str = "strict"
) -> tuple[list[str], str]:
    """Read a binary stream into lines and close it.

    Args:
        stream: Open binary stream, closed before returning
        encoding: Text encoding (a leading BOM is dropped by default)
        errors: Decoding error handler, e.g. ``"replace"`` for a best-effort read

    Returns:
        Tuple of (lines without terminators, newline sequence used by the file)
    """
    with io.TextIOWrapper(stream, encoding=encoding, errors=errors, newline=None) as reader:
        text = reader.read()
        seen = reader.newlines

    if isinstance(seen, str):
        newline = seen
    elif seen:
        newline = seen[0]
    else:
        newline = DEFAULT_NEWLINE

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines, newline


def join_lines(lines: list[str], newline: str = DEFAULT_NEWLINE) -> str:
    """Join lines, terminating every line including the last."""
    return "".join(f"{line}{newline}" for line in lines)
