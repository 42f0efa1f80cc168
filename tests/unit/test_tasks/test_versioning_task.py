"""Tests for VersioningTask."""

from datetime import datetime

from buildmeta.tasks.versioning_task import VersioningTask

NOW = datetime(2024, 1, 2, 3, 4)


def make_task(project_dir, **kwargs):
    kwargs.setdefault("language", "TSQL")
    return VersioningTask(project_dir=project_dir, clock=lambda: NOW, **kwargs)


def test_development_build(db_project):
    task = make_task(db_project, version_part="7")

    assert task.execute()
    assert task.version == "1.0.0-d202401020304"
    assert task.is_semantic_version
    assert task.next_release_version == "1.0.0"
    assert task.next_new_development_version == "1.1.0-d"
    assert task.output_file_path == db_project / "Properties" / "DbInfo.db"

    written = task.output_file_path.read_text(encoding="utf-8")
    assert 'DbVersion = "1.0.7.0"' in written
    assert 'DbInformationalVersion = "1.0.0-d202401020304"' in written


def test_release(db_project):
    task = make_task(db_project, is_release=True, release_version="1.1.0")

    assert task.execute()
    assert task.version == "1.1.0"
    assert task.next_release_version == "1.2.0"
    assert 'DbInformationalVersion = "1.1.0"' in task.output_file_path.read_text(
        encoding="utf-8"
    )


def test_new_development_version(db_project):
    task = make_task(
        db_project, is_new_development_version=True, new_development_version="1.1.0"
    )

    assert task.execute()
    assert task.version == "1.1.0-d"
    written = task.output_file_path.read_text(encoding="utf-8")
    assert 'DbVersion = "1.1.0.0"' in written
    assert 'DbInformationalVersion = "1.1.0-d"' in written


def test_dry_run_leaves_file(db_project):
    info_file = db_project / "Properties" / "DbInfo.db"
    before = info_file.read_text(encoding="utf-8")

    task = make_task(db_project, version_part="7", dry_run=True)

    assert task.execute()
    assert task.contents != before
    assert info_file.read_text(encoding="utf-8") == before


def test_version_info_path_override(tmp_path):
    (tmp_path / "Version.txt").write_text('EtlVersion = "1.*"\n', encoding="utf-8")

    task = make_task(tmp_path, language="ETL", version_part="1", version_info_path="Version.txt")

    assert task.execute()
    assert task.version == "1.1.0.0"
    assert task.output_file_path == tmp_path / "Version.txt"


def test_missing_version_info_file(tmp_path):
    task = make_task(tmp_path, version_info_path="DoesNotExist")

    assert not task.execute()
    assert task.version is None


def test_new_development_flag_requires_version(db_project):
    assert not make_task(db_project, is_new_development_version=True).execute()


def test_configuration_errors(db_project):
    assert not make_task(None).execute()
    assert not make_task(db_project, language="FORTRAN").execute()


def test_cobol_declaration_split_across_lines(tmp_path):
    properties = tmp_path / "Properties"
    properties.mkdir()
    info_file = properties / "AssemblyInfo.cob"
    info_file.write_text('CA-ASSEMBLYVERSION "1.0.\n*"\n', encoding="utf-8")

    task = make_task(tmp_path, language="COBOL", version_part="1")

    assert task.execute()
    assert task.version == "1.0.1.0"
    assert info_file.read_text(encoding="utf-8") == 'CA-ASSEMBLYVERSION "1.0.\n1.0"\n'
