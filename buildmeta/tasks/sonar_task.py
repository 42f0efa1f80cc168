"""Task applying a version to a Sonar project configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from buildmeta.core.interfaces import IoService
from buildmeta.core.io_utils import LocalIoService
from buildmeta.core.text_lines import read_lines
from buildmeta.versioning.sonar import SONAR_PROJECT_CONFIG, apply_sonar_version

LOGGER = logging.getLogger("buildmeta.tasks.sonar_task")


class SonarVersioningTask:
    """Set ``sonar.projectVersion`` in ``sonar-project.properties``.

    The file is looked up in the solution directory first, then in the
    project directory.
    """

    def __init__(
        self,
        solution_dir: str | Path | None = None,
        project_dir: str | Path | None = None,
        version: str | None = None,
        io_service: IoService | None = None,
    ):
        self.solution_dir = solution_dir
        self.project_dir = project_dir
        self.version = version
        self.io_service = io_service or LocalIoService()
        self.output_file_path: Path | None = None

    def _locate(self) -> Path:
        path = Path(self.solution_dir) / SONAR_PROJECT_CONFIG
        if not self.io_service.file_exists(path):
            path = Path(self.project_dir) / SONAR_PROJECT_CONFIG
        return path

    def _apply(self, path: Path) -> str | None:
        if not self.io_service.file_exists(path):
            return None

        stream = self.io_service.read_file_as_stream(path)
        if stream is None:
            return None

        try:
            lines, newline = read_lines(stream)
        except (OSError, UnicodeDecodeError) as e:
            LOGGER.warning(f"Unable to read {path}: {e}")
            return None
        return apply_sonar_version(lines, self.version, newline)

    def execute(self) -> bool:
        """Run the task.

        Returns:
            True if the version was written
        """
        LOGGER.info(f"Executing {type(self).__name__} task...")

        if self.solution_dir is None or self.project_dir is None or self.version is None:
            LOGGER.error("Solution directory, project directory and version are required")
            LOGGER.info("FAILED to apply version to Sonar project configuration")
            return False

        self.output_file_path = self._locate()
        LOGGER.info(
            f"Attempting to apply version '{self.version}' to '{self.output_file_path}'"
        )

        contents = self._apply(self.output_file_path)
        if contents is None:
            LOGGER.error("Unable to locate Sonar project configuration file")
        elif self.io_service.write_file(self.output_file_path, contents):
            LOGGER.info(
                f"SUCCESSFULLY applied version {self.version} to Sonar project configuration!"
            )
            return True

        LOGGER.info("FAILED to apply version to Sonar project configuration")
        return False
