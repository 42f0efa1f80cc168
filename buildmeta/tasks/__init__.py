"""Build tasks: the entry points a build pipeline invokes.

Each task takes its inputs as constructor arguments, exposes its outputs as
attributes and reports success through ``execute() -> bool``.
"""

from buildmeta.tasks.info_task import InfoTask
from buildmeta.tasks.nuspec_task import NuspecTask
from buildmeta.tasks.sonar_task import SonarVersioningTask
from buildmeta.tasks.versioning_task import VersioningTask

__all__ = [
    "InfoTask",
    "NuspecTask",
    "SonarVersioningTask",
    "VersioningTask",
]
