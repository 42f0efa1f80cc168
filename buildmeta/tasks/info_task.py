"""Task reading project information for a language."""

from __future__ import annotations

import logging
from pathlib import Path

from buildmeta.core.errors import UnsupportedLanguageError
from buildmeta.core.interfaces import IoService
from buildmeta.core.languages import (
    ARTIFACT_EXTRACTOR,
    LanguageProfile,
    get_language_profile,
    resolve_info_path,
)
from buildmeta.core.models import MetadataRecord
from buildmeta.extractors import get_language_extractor

LOGGER = logging.getLogger("buildmeta.tasks.info_task")


class InfoTask:
    """Obtain title, description, company and version for a project.

    Text languages read the info file below ``project_dir`` (or ``info_path``
    when given); artifact languages read ``artifact_path``.
    """

    def __init__(
        self,
        language: str | None = None,
        project_dir: str | Path | None = None,
        info_path: str | Path | None = None,
        artifact_path: str | Path | None = None,
        source: str | None = None,
        io_service: IoService | None = None,
    ):
        self.language = language
        self.project_dir = project_dir
        self.info_path = info_path
        self.artifact_path = artifact_path
        self.source = source
        self.io_service = io_service
        self.record = MetadataRecord()

    @property
    def title(self) -> str | None:
        return self.record.title

    @property
    def description(self) -> str | None:
        return self.record.description

    @property
    def company(self) -> str | None:
        return self.record.company

    @property
    def version(self) -> str | None:
        return self.record.version

    def _source_path(self, extractor_name: str, profile: LanguageProfile) -> Path | None:
        if extractor_name == ARTIFACT_EXTRACTOR:
            return Path(self.artifact_path) if self.artifact_path else None
        if self.project_dir is None:
            return None
        return resolve_info_path(self.project_dir, profile, self.info_path)

    def execute(self) -> bool:
        """Run the task.

        Returns:
            True if all four attributes were obtained

        Raises:
            RequiredAttributeError: If a build artifact lacks a required attribute
        """
        LOGGER.info(f"Executing {type(self).__name__} task...")

        try:
            profile = get_language_profile(self.language)
        except UnsupportedLanguageError as e:
            LOGGER.error(str(e))
            LOGGER.info("FAILED to obtain project information")
            return False

        extractor = get_language_extractor(profile, self.io_service, self.source)
        extractor_name = self.source or profile.extractor
        source_path = self._source_path(extractor_name, profile)
        if source_path is None:
            LOGGER.info(f"FAILED to obtain {profile.description} information")
            return False

        self.info_path = source_path
        LOGGER.info(
            f"Attempting to obtain {profile.description} information for '{source_path}'"
        )

        outcome = extractor.extract(source_path)
        self.record = outcome.record

        LOGGER.info(f"Title: {self.record.title}")
        LOGGER.info(f"Description: {self.record.description}")
        LOGGER.info(f"Company: {self.record.company}")
        LOGGER.info(f"Version: {self.record.version}")
        for name, value in self.record.extras.items():
            LOGGER.debug(f"{name}: {value}")

        if outcome.success:
            LOGGER.info(f"SUCCESSFULLY obtained {profile.description} information!")
            return True

        LOGGER.info(f"FAILED to obtain {profile.description} information")
        return False
