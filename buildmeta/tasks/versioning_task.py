"""Task applying versions to a project's version-info file."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from buildmeta.core.errors import UnsupportedLanguageError
from buildmeta.core.interfaces import IoService
from buildmeta.core.io_utils import LocalIoService
from buildmeta.core.languages import get_language_profile, resolve_info_path
from buildmeta.versioning.rewriter import VersionOptions, VersionRewriter

LOGGER = logging.getLogger("buildmeta.tasks.versioning_task")


class VersioningTask:
    """Version a project by rewriting its version-info file.

    Outputs after ``execute``: ``version``, ``is_semantic_version``,
    ``next_release_version``, ``next_new_development_version``,
    ``version_info_path`` and ``output_file_path``.
    """

    def __init__(
        self,
        project_dir: str | Path | None = None,
        language: str | None = None,
        version_part: str | None = None,
        version_info_path: str | Path | None = None,
        is_release: bool = False,
        release_version: str | None = None,
        is_new_development_version: bool = False,
        new_development_version: str | None = None,
        dry_run: bool = False,
        io_service: IoService | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.project_dir = project_dir
        self.language = language
        self.version_part = version_part
        self.version_info_path = version_info_path
        self.is_release = is_release
        self.release_version = release_version
        self.is_new_development_version = is_new_development_version
        self.new_development_version = new_development_version
        self.dry_run = dry_run
        self.io_service = io_service or LocalIoService()
        self.clock = clock

        self.version: str | None = None
        self.is_semantic_version = False
        self.next_release_version: str | None = None
        self.next_new_development_version: str | None = None
        self.output_file_path: Path | None = None
        self.contents: str | None = None

    def execute(self) -> bool:
        """Run the task.

        Returns:
            True if the version was applied
        """
        LOGGER.info(f"Executing {type(self).__name__} task...")

        if self.project_dir is None:
            LOGGER.error("A project directory is required")
            LOGGER.info("FAILED to apply version")
            return False

        try:
            profile = get_language_profile(self.language)
        except UnsupportedLanguageError as e:
            LOGGER.error(str(e))
            LOGGER.info("FAILED to apply version")
            return False

        if self.is_new_development_version and not self.new_development_version:
            LOGGER.error("A new development version is required")
            LOGGER.info("FAILED to apply version")
            return False

        if not self.version_info_path:
            self.version_info_path = profile.version_info_path
        self.output_file_path = resolve_info_path(
            self.project_dir, profile, self.version_info_path, for_versioning=True
        )

        LOGGER.info(f"Attempting to version '{self.output_file_path}'")

        rewriter = VersionRewriter(profile.version, self.io_service, self.clock)
        result = rewriter.rewrite(
            self.output_file_path,
            VersionOptions(
                version_part=self.version_part,
                is_release=self.is_release,
                release_version=self.release_version,
                is_new_development_version=self.is_new_development_version,
                new_development_version=self.new_development_version,
            ),
        )

        if result is None:
            LOGGER.error("Unable to read a version from the version info file")
            LOGGER.info("FAILED to apply version")
            return False

        self.contents = result.contents
        self.version = result.version
        self.is_semantic_version = result.is_semantic_version
        self.next_release_version = result.next_release_version
        self.next_new_development_version = result.next_new_development_version

        LOGGER.debug(f"Next release version: {self.next_release_version}")
        LOGGER.debug(f"Next new development version: {self.next_new_development_version}")

        if self.dry_run:
            LOGGER.info(f"Resolved version {self.version} (dry run, nothing written)")
            return True

        if not self.io_service.write_file(self.output_file_path, result.contents):
            LOGGER.info("FAILED to apply version")
            return False

        LOGGER.info(f"SUCCESSFULLY applied version {self.version}!")
        return True
