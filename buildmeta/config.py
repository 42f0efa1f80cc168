"""Configuration loading for build tasks."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

_ENV_TO_FIELD = {
    "BUILDMETA_PROJECT_DIR": "project_dir",
    "BUILDMETA_SOLUTION_DIR": "solution_dir",
    "BUILDMETA_PACKAGE_DIR": "package_dir",
    "BUILDMETA_LANGUAGE": "language",
    "BUILDMETA_VERSION_PART": "version_part",
    "BUILDMETA_CONFIGURATION": "configuration",
}

_ALLOWED_KEYS = set(_ENV_TO_FIELD.values())

_PATH_FIELDS = {"project_dir", "solution_dir", "package_dir"}


def _as_path(value: str | Path) -> Path:
    return Path(value).expanduser()


@dataclass
class BuildConfig:
    """Resolved defaults for build task inputs."""

    project_dir: Path
    solution_dir: Path | None
    package_dir: Path | None
    language: str | None
    version_part: str | None
    configuration: str | None

    @classmethod
    def load(cls, config_path: Path | None = None) -> BuildConfig:
        """Load config with precedence: defaults < YAML < environment."""
        values: dict[str, str | Path | None] = {
            "project_dir": Path.cwd(),
            "solution_dir": None,
            "package_dir": None,
            "language": None,
            "version_part": None,
            "configuration": None,
        }

        values.update(cls._load_yaml_values(config_path))

        for env_key, field_name in _ENV_TO_FIELD.items():
            env_value = os.environ.get(env_key)
            if env_value is None or env_value == "":
                continue
            values[field_name] = env_value

        for path_field in _PATH_FIELDS:
            if values[path_field] is not None:
                values[path_field] = _as_path(values[path_field])  # type: ignore[arg-type]

        def _text(name: str) -> str | None:
            value = values[name]
            return str(value) if value not in (None, "") else None

        return cls(
            project_dir=values["project_dir"],  # type: ignore[arg-type]
            solution_dir=values["solution_dir"],  # type: ignore[arg-type]
            package_dir=values["package_dir"],  # type: ignore[arg-type]
            language=_text("language"),
            version_part=_text("version_part"),
            configuration=_text("configuration"),
        )

    @classmethod
    def _load_yaml_values(cls, config_path: Path | None) -> dict[str, str | Path | None]:
        candidates = (
            [config_path.expanduser()]
            if config_path is not None
            else [Path.cwd() / "buildmeta.yaml", _as_path("~/.config/buildmeta/config.yaml")]
        )

        for candidate in candidates:
            if not candidate.exists():
                continue

            with candidate.open("r", encoding="utf-8") as config_file:
                loaded = yaml.safe_load(config_file) or {}
            if not isinstance(loaded, dict):
                return {}

            return {key: value for key, value in loaded.items() if key in _ALLOWED_KEYS}

        return {}
