"""Nuspec command - Generate a package manifest for a project."""
# ruff: noqa: T201

import argparse
from pathlib import Path

from buildmeta.config import BuildConfig
from buildmeta.core.errors import BuildMetaError
from buildmeta.core.languages import list_languages
from buildmeta.tasks.nuspec_task import NuspecTask


def _pair(value: str) -> tuple[str, str]:
    """Parse a ``LEFT:RIGHT`` argument, splitting on the last colon."""
    left, sep, right = value.rpartition(":")
    if not sep or not left or not right:
        raise argparse.ArgumentTypeError(f"Expected LEFT:RIGHT, got '{value}'")
    return left, right


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add command-specific arguments."""
    parser.add_argument(
        "--language", "-l",
        help=f"Project language ({', '.join(list_languages())})",
    )

    parser.add_argument("--project-dir", type=Path, help="Project directory")

    parser.add_argument("--package-dir", type=Path, help="Directory receiving the manifest")

    parser.add_argument(
        "--output-path",
        type=Path,
        help="Build output; the artifact read for CS and VB projects",
    )

    parser.add_argument("--configuration", help="Build configuration appended to the package id")

    parser.add_argument(
        "--file",
        dest="files",
        action="append",
        type=_pair,
        default=[],
        metavar="SRC:TYPE",
        help="Custom file and its type (lib, content, ...); repeatable",
    )

    parser.add_argument(
        "--override-default-files",
        action="store_true",
        help="Only include the custom files",
    )

    parser.add_argument(
        "--dependency",
        dest="dependencies",
        action="append",
        type=_pair,
        default=[],
        metavar="ID:VERSION",
        help="Package dependency; repeatable",
    )


def execute(args: argparse.Namespace) -> int:
    """Execute the nuspec command."""
    config = BuildConfig.load(args.config)

    task = NuspecTask(
        package_dir=args.package_dir or config.package_dir,
        project_dir=args.project_dir or config.project_dir,
        output_path=args.output_path,
        language=args.language or config.language,
        configuration=args.configuration or config.configuration,
        override_default_files=args.override_default_files,
        custom_files=args.files,
        dependencies=args.dependencies,
    )

    try:
        generated = task.execute()
    except BuildMetaError as e:
        print(f"✗ Nuspec command failed: {e}")
        return 1

    if not generated:
        print("✗ Failed to generate Nuspec file")
        return 1

    print(f"📦 Nuspec file: {task.nuspec_file}")
    return 0
