"""Task generating a package manifest for a project."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from buildmeta.core.errors import UnsupportedLanguageError
from buildmeta.core.interfaces import IoService
from buildmeta.core.io_utils import LocalIoService
from buildmeta.core.languages import ARTIFACT_EXTRACTOR, get_language_profile
from buildmeta.manifest.builder import ManifestBuilder
from buildmeta.tasks.info_task import InfoTask

LOGGER = logging.getLogger("buildmeta.tasks.nuspec_task")


class NuspecTask:
    """Generate ``<id>.nuspec`` in the package directory.

    Metadata comes from the language's info file, or from the build artifact
    at ``output_path`` for artifact languages.
    """

    def __init__(
        self,
        package_dir: str | Path | None = None,
        project_dir: str | Path | None = None,
        output_path: str | Path | None = None,
        language: str | None = None,
        configuration: str | None = None,
        override_default_files: bool = False,
        custom_files: Iterable[tuple[str, str]] = (),
        dependencies: Iterable[tuple[str, str]] = (),
        io_service: IoService | None = None,
    ):
        self.package_dir = package_dir
        self.project_dir = project_dir
        self.output_path = output_path
        self.language = language
        self.configuration = configuration
        self.override_default_files = override_default_files
        self.custom_files = list(custom_files)
        self.dependencies = list(dependencies)
        self.io_service = io_service or LocalIoService()
        self.nuspec_file: Path | None = None

    def _has_required_inputs(self) -> bool:
        return (
            self.package_dir is not None
            and self.project_dir is not None
            and bool(self.output_path and str(self.output_path).strip())
            and bool(self.language and self.language.strip())
        )

    def execute(self) -> bool:
        """Run the task.

        Returns:
            True if the manifest was written
        """
        LOGGER.info(f"Executing {type(self).__name__} task...")

        if not self._has_required_inputs():
            LOGGER.error(
                "Package directory, project directory, output path and language are required"
            )
            LOGGER.info("FAILED to generate Nuspec file")
            return False

        LOGGER.info(f"Package directory: {self.package_dir}")
        LOGGER.info(f"Project directory: {self.project_dir}")
        LOGGER.info(f"Output path: {self.output_path}")
        LOGGER.info(f"Language: {self.language}")
        LOGGER.info(f"Configuration: {self.configuration}")

        try:
            profile = get_language_profile(self.language)
        except UnsupportedLanguageError as e:
            LOGGER.error(str(e))
            LOGGER.info("FAILED to generate Nuspec file")
            return False

        info = InfoTask(
            language=profile.language,
            project_dir=self.project_dir,
            artifact_path=self.output_path if profile.extractor == ARTIFACT_EXTRACTOR else None,
            io_service=self.io_service,
        )
        if not info.execute():
            LOGGER.info("FAILED to generate Nuspec file")
            return False

        builder = ManifestBuilder(info.record, self.configuration, self.io_service)
        if not self.override_default_files:
            builder.add_default_files()
        for src, file_type in self.custom_files:
            builder.add_file(src, file_type)
        for dependency_id, version in self.dependencies:
            builder.add_dependency(dependency_id, version)

        self.nuspec_file = builder.write(self.package_dir)
        if self.nuspec_file is None:
            LOGGER.info("FAILED to generate Nuspec file")
            return False

        LOGGER.info(f"Nuspec file: {self.nuspec_file}")
        LOGGER.info("SUCCESSFULLY generated Nuspec file!")
        return True
