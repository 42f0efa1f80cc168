"""Root-level pytest configuration and shared fixtures."""

import pytest

BUILDMETA_ENV_VARS = (
    "BUILDMETA_PROJECT_DIR",
    "BUILDMETA_SOLUTION_DIR",
    "BUILDMETA_PACKAGE_DIR",
    "BUILDMETA_LANGUAGE",
    "BUILDMETA_VERSION_PART",
    "BUILDMETA_CONFIGURATION",
)

DB_INFO = """\
DbTitle = "Sales Database"
DbDescription = "Sales reporting schema"
DbCompany = "Contoso"
DbVersion = "1.0.*"
DbInformationalVersion = "1.0.0-d"
"""

METADATA = """\
Metadata-Version: 2.1
Name: mylib
Version: 1.2.3
Summary: My library
Author: Contoso
"""


@pytest.fixture
def isolated_config(monkeypatch, tmp_path):
    """Keep user, working directory and environment configuration out of a test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in BUILDMETA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def db_project(tmp_path):
    """A database project with a default info file."""
    project_dir = tmp_path / "db"
    (project_dir / "Properties").mkdir(parents=True)
    (project_dir / "Properties" / "DbInfo.db").write_text(DB_INFO, encoding="utf-8")
    return project_dir


@pytest.fixture
def dist_info(tmp_path):
    """An unpacked distribution metadata directory."""
    path = tmp_path / "mylib-1.2.3.dist-info"
    path.mkdir()
    (path / "METADATA").write_text(METADATA, encoding="utf-8")
    return path
