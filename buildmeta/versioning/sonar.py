"""Apply a version to a Sonar project configuration."""

from buildmeta.core.text_lines import DEFAULT_NEWLINE, join_lines

SONAR_PROJECT_CONFIG = "sonar-project.properties"
SONAR_VERSION_KEY = "sonar.projectVersion"


def format_sonar_line(data: str, version: str) -> str:
    """Replace everything after the first ``=`` with the version."""
    index = data.find("=")
    if index < 0:
        return data
    return f"{data[: index + 1]}{version}"


def apply_sonar_version(lines: list[str], version: str, newline: str = DEFAULT_NEWLINE) -> str:
    """Set ``sonar.projectVersion`` in the lines of a properties file."""
    output = [
        format_sonar_line(line, version) if SONAR_VERSION_KEY in line else line for line in lines
    ]
    return join_lines(output, newline)
